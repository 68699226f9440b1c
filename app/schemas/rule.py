from pydantic import BaseModel, ConfigDict


class Rule(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    repository: str
    name: str | None = None
    language: str | None = None
    status: str | None = None
    remediation_function: str | None = None
    remediation_gap_mult: str | None = None
    remediation_base_effort: str | None = None
    debt_overloaded: bool = False

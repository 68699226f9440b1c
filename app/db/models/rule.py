from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint

from app.db.base import Base


class Rule(Base):
    __tablename__ = "rules"
    __table_args__ = (
        UniqueConstraint("plugin_name", "plugin_rule_key", name="uq_rules_repo_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    plugin_name = Column(String(255), nullable=False)
    plugin_rule_key = Column(String(200), nullable=False)
    name = Column(String(200), nullable=True)
    language = Column(String(20), nullable=True)
    status = Column(String(40), nullable=True)

    # Remediation as declared by the rule repository
    def_remediation_function = Column(String(20), nullable=True)
    def_remediation_gap_mult = Column(String(20), nullable=True)
    def_remediation_base_effort = Column(String(20), nullable=True)

    # Remediation overloaded by the debt model
    remediation_function = Column(String(20), nullable=True)
    remediation_gap_mult = Column(String(20), nullable=True)
    remediation_base_effort = Column(String(20), nullable=True)

    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)

    @property
    def key(self) -> str:
        return f"{self.plugin_name}:{self.plugin_rule_key}"

    @property
    def is_debt_overloaded(self) -> bool:
        return (
            self.remediation_function is not None
            or self.remediation_gap_mult is not None
            or self.remediation_base_effort is not None
        )

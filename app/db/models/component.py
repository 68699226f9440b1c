from sqlalchemy import Column, Integer, String

from app.db.base import Base

# Scopes
SCOPE_PROJECT = "PRJ"
SCOPE_DIRECTORY = "DIR"

# Qualifiers
QUALIFIER_PROJECT = "TRK"
QUALIFIER_MODULE = "BRC"


class Component(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(String(50), unique=True, nullable=False, index=True)
    kee = Column(String(400), unique=True, nullable=False, index=True)
    name = Column(String(2000), nullable=True)
    scope = Column(String(3), nullable=False)
    qualifier = Column(String(10), nullable=False)
    project_uuid = Column(String(50), nullable=False, index=True)
    module_uuid = Column(String(50), nullable=True)
    organization_uuid = Column(String(40), nullable=False)

    @property
    def is_root_project(self) -> bool:
        return self.module_uuid is None and self.scope == SCOPE_PROJECT

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)

from app.db.base import Base


class QualityProfile(Base):
    __tablename__ = "rules_profiles"

    id = Column(Integer, primary_key=True, index=True)
    kee = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    language = Column(String(20), nullable=False, index=True)
    organization_uuid = Column(String(40), nullable=False, index=True)
    parent_kee = Column(String(255), nullable=True)
    is_default = Column(Boolean, nullable=False, default=False)
    rules_updated_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)


class ProjectQualityProfile(Base):
    """Explicit association of a project with a quality profile."""

    __tablename__ = "project_qprofiles"
    __table_args__ = (
        UniqueConstraint("project_uuid", "profile_key", name="uq_project_qprofiles"),
    )

    id = Column(Integer, primary_key=True, index=True)
    project_uuid = Column(String(50), nullable=False, index=True)
    profile_key = Column(
        String(255), ForeignKey("rules_profiles.kee"), nullable=False
    )

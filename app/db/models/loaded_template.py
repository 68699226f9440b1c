from sqlalchemy import Column, Integer, String

from app.db.base import Base

ONE_SHOT_TASK_TYPE = "ONE_SHOT_TASK"


class LoadedTemplate(Base):
    """Marker recording that a template or one-shot task has already been applied."""

    __tablename__ = "loaded_templates"

    id = Column(Integer, primary_key=True, index=True)
    kee = Column(String(200), nullable=False)
    template_type = Column(String(64), nullable=False)

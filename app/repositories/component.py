from sqlalchemy.orm import Session

from app.db.models.component import Component as ComponentModel


def get_component_by_key(db: Session, key: str) -> ComponentModel | None:
    """Get a component (project, module, ...) by its key."""
    return db.query(ComponentModel).filter(ComponentModel.kee == key).first()


def get_component_by_uuid(db: Session, uuid: str) -> ComponentModel | None:
    """Get a component by its uuid."""
    return db.query(ComponentModel).filter(ComponentModel.uuid == uuid).first()

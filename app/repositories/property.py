from sqlalchemy.orm import Session

from app.db.models.property import Property as PropertyModel


def get_global_property(db: Session, key: str) -> PropertyModel | None:
    """Get a global (not attached to any component) property by key."""
    return (
        db.query(PropertyModel)
        .filter(PropertyModel.prop_key == key, PropertyModel.resource_id.is_(None))
        .first()
    )

from sqlalchemy.orm import Session

from app.db.models.organization import Organization as OrganizationModel


def get_organization_by_key(db: Session, key: str) -> OrganizationModel | None:
    """Get an organization by its key."""
    return db.query(OrganizationModel).filter(OrganizationModel.kee == key).first()

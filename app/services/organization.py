from sqlalchemy.orm import Session

import app.repositories.organization as organization_repo
from app.core.config import settings
from app.db.models.organization import Organization as OrganizationModel
from app.errors import NotFoundError


def get_organization_by_key(
    db: Session, organization_key: str | None
) -> OrganizationModel:
    """
    Resolve the organization a request applies to.

    - No key: the default organization
    - Unknown key (including a missing default organization): NotFoundError
    """
    key = organization_key if organization_key is not None else settings.default_organization_key
    organization = organization_repo.get_organization_by_key(db, key)
    if organization is None:
        raise NotFoundError(f"No organization with key '{key}'")
    return organization

from sqlalchemy.orm import Session

import app.repositories.component as component_repo
from app.db.models.component import Component as ComponentModel
from app.errors import NotFoundError


def get_by_key(db: Session, key: str) -> ComponentModel:
    component = component_repo.get_component_by_key(db, key)
    if component is None:
        raise NotFoundError(f"Component key '{key}' not found")
    return component


def get_project(db: Session, key: str) -> ComponentModel:
    """
    Get the root project of the component with the given key.

    A module (or any non-root component) resolves to the project it belongs to.

    Raises:
        NotFoundError: If the component or its project doesn't exist
    """
    component = get_by_key(db, key)
    if component.is_root_project:
        return component
    project = component_repo.get_component_by_uuid(db, component.project_uuid)
    if project is None:
        raise NotFoundError(f"Component id '{component.project_uuid}' not found")
    return project

from typing import Iterable

from sqlalchemy.orm import Session

from app.db.models.component import Component as ComponentModel
from app.db.models.organization import Organization as OrganizationModel
from app.db.models.quality_profile import (
    ProjectQualityProfile as ProjectQualityProfileModel,
    QualityProfile as QualityProfileModel,
)


def _organization_profiles(db: Session, organization: OrganizationModel):
    return db.query(QualityProfileModel).filter(
        QualityProfileModel.organization_uuid == organization.uuid
    )


def get_all_profiles(
    db: Session, organization: OrganizationModel
) -> list[QualityProfileModel]:
    """Get every quality profile of an organization, whatever its language."""
    return (
        _organization_profiles(db, organization)
        .order_by(QualityProfileModel.language, QualityProfileModel.name)
        .all()
    )


def get_profiles_by_language(
    db: Session, organization: OrganizationModel, language: str
) -> list[QualityProfileModel]:
    """Get the quality profiles of an organization for one language."""
    return (
        _organization_profiles(db, organization)
        .filter(QualityProfileModel.language == language)
        .order_by(QualityProfileModel.name)
        .all()
    )


def get_by_name_and_languages(
    db: Session,
    organization: OrganizationModel,
    name: str,
    languages: Iterable[str],
) -> list[QualityProfileModel]:
    """Get the profiles named ``name`` for any of the given languages."""
    return (
        _organization_profiles(db, organization)
        .filter(
            QualityProfileModel.name == name,
            QualityProfileModel.language.in_(list(languages)),
        )
        .order_by(QualityProfileModel.language)
        .all()
    )


def get_by_project_and_languages(
    db: Session,
    organization: OrganizationModel,
    project_key: str,
    languages: Iterable[str],
) -> list[QualityProfileModel]:
    """
    Get the profiles explicitly associated with a project for the given languages.

    The association is made on the project uuid; the project is looked up by key.
    """
    return (
        _organization_profiles(db, organization)
        .join(
            ProjectQualityProfileModel,
            ProjectQualityProfileModel.profile_key == QualityProfileModel.kee,
        )
        .join(
            ComponentModel,
            ComponentModel.uuid == ProjectQualityProfileModel.project_uuid,
        )
        .filter(
            ComponentModel.kee == project_key,
            QualityProfileModel.language.in_(list(languages)),
        )
        .order_by(QualityProfileModel.language, QualityProfileModel.name)
        .all()
    )


def get_defaults(
    db: Session, organization: OrganizationModel, languages: Iterable[str]
) -> list[QualityProfileModel]:
    """Get the default profile of each of the given languages, where one is set."""
    return (
        _organization_profiles(db, organization)
        .filter(
            QualityProfileModel.is_default.is_(True),
            QualityProfileModel.language.in_(list(languages)),
        )
        .order_by(QualityProfileModel.language, QualityProfileModel.name)
        .all()
    )

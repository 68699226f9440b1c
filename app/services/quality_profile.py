"""Quality profile search: which profile applies to which language."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

import app.repositories.quality_profile as profile_repo
from app.db.models.organization import Organization as OrganizationModel
from app.db.models.quality_profile import QualityProfile as QualityProfileModel
from app.domain.languages import Languages
from app.domain.profile_resolution import (
    BY_DEFAULT,
    BY_NAME,
    BY_PROJECT,
    ProfileResolution,
)
from app.errors import DomainValidationError, UnresolvedProfileError
from app.schemas.quality_profile import SearchRequest
from app.services.component import get_project
from app.services.organization import get_organization_by_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QProfile:
    """A quality profile as seen by API consumers."""

    key: str
    name: str
    language: str
    language_name: str | None
    organization: str
    is_default: bool
    parent_key: str | None
    rules_updated_at: datetime | None

    @property
    def is_inherited(self) -> bool:
        return self.parent_key is not None

    @classmethod
    def from_model(
        cls,
        profile: QualityProfileModel,
        organization: OrganizationModel,
        languages: Languages,
    ) -> QProfile:
        language = languages.get(profile.language)
        return cls(
            key=profile.kee,
            name=profile.name,
            language=profile.language,
            language_name=language.name if language else None,
            organization=organization.kee,
            is_default=bool(profile.is_default),
            parent_key=profile.parent_kee,
            rules_updated_at=profile.rules_updated_at,
        )


def validate_search_request(request: SearchRequest, languages: Languages) -> None:
    """
    Reject filter combinations the search cannot honour.

    Raises:
        DomainValidationError: If language is combined with a project or a profile name,
            if defaults is combined with a project, or if the language is not installed
    """
    if request.language is not None and (
        request.project_key is not None or request.profile_name is not None
    ):
        raise DomainValidationError(
            "The language parameter cannot be provided at the same time than the "
            "project key or profile name"
        )
    if request.defaults and request.project_key is not None:
        raise DomainValidationError(
            "The default parameter cannot be provided at the same time than the project key"
        )
    if request.language is not None and request.language not in languages:
        raise DomainValidationError(f"Language '{request.language}' is not installed")


def find_profiles(
    db: Session, request: SearchRequest, languages: Languages
) -> list[QProfile]:
    """
    Find the quality profiles matching a search request, sorted by language then name.

    - defaults: one profile per installed language (by name if given, else default)
    - project_key: one profile per installed language (by name, then project, then default)
    - otherwise: every profile of the organization, optionally for a single language

    Raises:
        DomainValidationError: If the request filters are incompatible
        NotFoundError: If the organization or the project doesn't exist
        UnresolvedProfileError: If some installed language has no profile at all
    """
    validate_search_request(request, languages)
    organization = get_organization_by_key(db, request.organization_key)

    if request.defaults:
        profiles = _find_default_profiles(db, request, organization, languages)
    elif request.project_key is not None:
        profiles = _find_project_profiles(db, request, organization, languages)
    else:
        profiles = _find_all_profiles(db, request, organization, languages)

    result = [QProfile.from_model(p, organization, languages) for p in profiles]
    return sorted(result, key=lambda p: (p.language, p.name))


def resolve_profiles(
    db: Session,
    organization: OrganizationModel,
    languages: Languages,
    profile_name: str | None = None,
    project_key: str | None = None,
) -> ProfileResolution:
    """
    Pick one profile per installed language by falling back through the strategies.

    Each strategy only looks at the languages the previous ones left unresolved:
    profile name, then project association, then language default. Languages
    still unresolved afterwards are left in ``resolution.unresolved``.
    """
    resolution = ProfileResolution(language_keys=languages.keys())

    if resolution.unresolved and profile_name is not None:
        resolution.accept(
            BY_NAME,
            profile_repo.get_by_name_and_languages(
                db, organization, profile_name, resolution.unresolved
            ),
        )

    if resolution.unresolved and project_key is not None:
        project = get_project(db, project_key)
        resolution.accept(
            BY_PROJECT,
            profile_repo.get_by_project_and_languages(
                db, organization, project.kee, resolution.unresolved
            ),
        )

    if resolution.unresolved:
        resolution.accept(
            BY_DEFAULT,
            profile_repo.get_defaults(db, organization, resolution.unresolved),
        )

    logger.debug(
        "Resolved quality profiles %s, unresolved languages %s",
        resolution.resolved_by,
        sorted(resolution.unresolved),
    )
    return resolution


def _find_default_profiles(
    db: Session,
    request: SearchRequest,
    organization: OrganizationModel,
    languages: Languages,
) -> list[QualityProfileModel]:
    resolution = resolve_profiles(
        db, organization, languages, profile_name=request.profile_name
    )
    if resolution.unresolved:
        raise UnresolvedProfileError(resolution.unresolved)
    return list(resolution.profiles.values())


def _find_project_profiles(
    db: Session,
    request: SearchRequest,
    organization: OrganizationModel,
    languages: Languages,
) -> list[QualityProfileModel]:
    resolution = resolve_profiles(
        db,
        organization,
        languages,
        profile_name=request.profile_name,
        project_key=request.project_key,
    )
    if resolution.unresolved:
        raise UnresolvedProfileError(resolution.unresolved, project_key=request.project_key)
    return list(resolution.profiles.values())


def _find_all_profiles(
    db: Session,
    request: SearchRequest,
    organization: OrganizationModel,
    languages: Languages,
) -> list[QualityProfileModel]:
    if request.language is None:
        return [
            profile
            for profile in profile_repo.get_all_profiles(db, organization)
            if profile.language in languages
        ]
    return profile_repo.get_profiles_by_language(db, organization, request.language)

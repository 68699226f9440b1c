from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_languages
from app.domain.languages import Languages
from app.schemas.quality_profile import QualityProfile, SearchRequest, SearchResponse
from app.services.quality_profile import find_profiles

router = APIRouter(prefix="/qualityprofiles", tags=["qualityprofiles"])


@router.get("/search", response_model=SearchResponse)
def search_quality_profiles(
    defaults: bool = Query(False, description="Return the profile applying to each language"),
    project_key: str | None = Query(None, description="Project or module key"),
    profile_name: str | None = Query(None, description="Profile name to look up first"),
    language: str | None = Query(None, description="Restrict to one language"),
    organization: str | None = Query(None, description="Organization key"),
    db: Session = Depends(get_db),
    languages: Languages = Depends(get_languages),
):
    """
    Search quality profiles.

    - defaults=true: one profile per installed language, picked by name then default
    - project_key: one profile per installed language, picked by name, then project
      association, then default (a module resolves to its project)
    - otherwise: all profiles, optionally of a single language

    Responds 500 (UNRESOLVED_PROFILE) when an installed language has no profile at all.
    """
    request = SearchRequest(
        defaults=defaults,
        project_key=project_key,
        profile_name=profile_name,
        language=language,
        organization_key=organization,
    )
    profiles = find_profiles(db, request, languages)
    return SearchResponse(profiles=[QualityProfile.model_validate(p) for p in profiles])

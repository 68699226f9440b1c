from fastapi import APIRouter, Depends

from app.api.deps import get_languages
from app.domain.languages import Languages
from app.schemas.quality_profile import Language

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=list[Language])
def get_languages_list(languages: Languages = Depends(get_languages)):
    return [Language.model_validate(language) for language in languages.all()]

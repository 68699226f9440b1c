from functools import lru_cache

from app.core.config import settings
from app.db.base import SessionLocal
from app.domain.languages import Languages
from app.services.rule_index import RuleIndexer, rule_indexer


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache
def get_languages() -> Languages:
    """Installed languages, parsed once from settings."""
    return Languages.from_setting(settings.languages)


def get_rule_indexer() -> RuleIndexer:
    return rule_indexer

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_rule_indexer
from app.errors import NotFoundError
from app.schemas.rule import Rule
from app.services.rule_index import RuleIndexer

router = APIRouter(prefix="/rules", tags=["rules"])


@router.get("/search", response_model=list[Rule])
def search_rules(
    q: str | None = Query(None, description="Substring of the rule key or name"),
    language: str | None = Query(None),
    indexer: RuleIndexer = Depends(get_rule_indexer),
):
    """
    Search the rule index. Results reflect the last reindex, not live database rows.
    """
    return [Rule.model_validate(document) for document in indexer.search(q, language)]


@router.get("/{rule_key}", response_model=Rule)
def get_rule(rule_key: str, indexer: RuleIndexer = Depends(get_rule_indexer)):
    document = indexer.get(rule_key)
    if document is None:
        raise NotFoundError(f"Rule '{rule_key}' not found")
    return Rule.model_validate(document)

"""In-process index of rule documents, rebuilt from the database on demand."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

import app.repositories.rule as rule_repo
from app.db.models.rule import Rule as RuleModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuleDocument:
    key: str
    repository: str
    name: str | None
    language: str | None
    status: str | None
    remediation_function: str | None
    remediation_gap_mult: str | None
    remediation_base_effort: str | None
    debt_overloaded: bool

    @classmethod
    def from_model(cls, rule: RuleModel) -> RuleDocument:
        # Each overloaded field takes precedence over its repository default
        return cls(
            key=rule.key,
            repository=rule.plugin_name,
            name=rule.name,
            language=rule.language,
            status=rule.status,
            remediation_function=(
                rule.remediation_function or rule.def_remediation_function
            ),
            remediation_gap_mult=(
                rule.remediation_gap_mult or rule.def_remediation_gap_mult
            ),
            remediation_base_effort=(
                rule.remediation_base_effort or rule.def_remediation_base_effort
            ),
            debt_overloaded=rule.is_debt_overloaded,
        )


class RuleIndexer:
    """Holds the searchable rule documents.

    ``index`` replaces the whole document map in one assignment, so readers see
    either the previous or the new generation, never a partial one.
    """

    def __init__(self):
        self._documents: dict[str, RuleDocument] = {}

    def index(self, db: Session) -> int:
        documents = {
            document.key: document
            for document in map(RuleDocument.from_model, rule_repo.get_all_rules(db))
        }
        self._documents = documents
        logger.info("Indexed %d rules", len(documents))
        return len(documents)

    def get(self, key: str) -> RuleDocument | None:
        return self._documents.get(key)

    def search(
        self, query: str | None = None, language: str | None = None
    ) -> list[RuleDocument]:
        """Filter by case-insensitive substring of key or name, and by language."""
        needle = query.lower() if query else None
        hits = []
        for document in self._documents.values():
            if language is not None and document.language != language:
                continue
            if needle is not None and needle not in document.key.lower() and needle not in (
                document.name or ""
            ).lower():
                continue
            hits.append(document)
        return sorted(hits, key=lambda document: document.key)

    def __len__(self) -> int:
        return len(self._documents)


rule_indexer = RuleIndexer()

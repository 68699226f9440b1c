"""
One-shot startup task clearing the technical debt overloaded on rules.

When the SQALE plugin is not installed, overloaded remediation left by older
migrations has no owner anymore and must fall back to the rule defaults.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.orm import Session

import app.repositories.loaded_template as loaded_template_repo
import app.repositories.property as property_repo
import app.repositories.rule as rule_repo
from app.db.models.loaded_template import ONE_SHOT_TASK_TYPE
from app.services.rule_index import RuleIndexer

logger = logging.getLogger(__name__)

TEMPLATE_KEY = "ClearRulesOverloadedDebt"
SQALE_LICENSE_PROPERTY = "sonar.sqale.licenseHash.secured"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def has_already_been_executed(db: Session) -> bool:
    return (
        loaded_template_repo.count_by_type_and_key(db, ONE_SHOT_TASK_TYPE, TEMPLATE_KEY)
        > 0
    )


def is_sqale_plugin_installed(db: Session) -> bool:
    return property_repo.get_global_property(db, SQALE_LICENSE_PROPERTY) is not None


def clear_debt(db: Session, now: Callable[[], datetime] = _utcnow) -> int:
    """Reset the overloaded remediation of every rule that has one. Returns the number of rules changed."""
    cleared = 0
    for rule in rule_repo.get_all_rules(db):
        if not rule.is_debt_overloaded:
            continue
        rule.remediation_function = None
        rule.remediation_gap_mult = None
        rule.remediation_base_effort = None
        rule.updated_at = now()
        rule_repo.update_rule(db, rule)
        cleared += 1

    if cleared > 0:
        logger.warning(
            "The SQALE model has been cleaned to remove any redundant data left over from previous migrations."
        )
        logger.warning(
            "=> As a result, the technical debt of existing issues in your projects may change slightly "
            "when those projects are reanalyzed."
        )
    return cleared


def clear_rules_overloaded_debt(
    db: Session,
    indexer: RuleIndexer,
    now: Callable[[], datetime] = _utcnow,
) -> int:
    """
    Run the debt-clearing task unless it already ran.

    - Skipped entirely (no reindex) once the task marker exists
    - Rules are only modified when the SQALE plugin is absent
    - The marker is written and rules reindexed in both cases

    Returns the number of rules whose debt was cleared.
    """
    if has_already_been_executed(db):
        logger.debug("%s already executed, skipping", TEMPLATE_KEY)
        return 0

    cleared = 0
    if not is_sqale_plugin_installed(db):
        cleared = clear_debt(db, now=now)

    loaded_template_repo.insert_loaded_template(db, TEMPLATE_KEY, ONE_SHOT_TASK_TYPE)
    db.commit()
    indexer.index(db)
    return cleared

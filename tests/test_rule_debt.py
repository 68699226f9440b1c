import logging
from datetime import datetime

import pytest
from sqlalchemy.orm import Session

from app.db.models.loaded_template import (
    LoadedTemplate as LoadedTemplateModel,
    ONE_SHOT_TASK_TYPE,
)
from app.db.models.property import Property as PropertyModel
from app.db.models.rule import Rule as RuleModel
from app.services.rule_debt import (
    SQALE_LICENSE_PROPERTY,
    TEMPLATE_KEY,
    clear_rules_overloaded_debt,
)
from app.services.rule_index import RuleIndexer
from app.services.startup import run_startup_tasks

NOW = datetime(2026, 10, 16, 12, 0, 0)
PAST = datetime(2020, 1, 1, 0, 0, 0)


# ============================================================================
# FIXTURES
# ============================================================================


class CountingIndexer(RuleIndexer):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def index(self, db):
        self.calls += 1
        return super().index(db)


@pytest.fixture(scope="function")
def indexer() -> CountingIndexer:
    return CountingIndexer()


@pytest.fixture(scope="function")
def rules(db: Session) -> dict[str, RuleModel]:
    """Rules with and without overloaded debt."""
    rules = {
        "function": RuleModel(
            plugin_name="squid",
            plugin_rule_key="S100",
            name="Method names should comply with a naming convention",
            language="java",
            def_remediation_function="CONSTANT_ISSUE",
            def_remediation_base_effort="5min",
            remediation_function="LINEAR",
            updated_at=PAST,
        ),
        "gap": RuleModel(
            plugin_name="squid",
            plugin_rule_key="S101",
            name="Class names should comply with a naming convention",
            language="java",
            remediation_gap_mult="2min",
            updated_at=PAST,
        ),
        "base_effort": RuleModel(
            plugin_name="javascript",
            plugin_rule_key="S1481",
            name="Unused local variables should be removed",
            language="js",
            remediation_base_effort="10min",
            updated_at=PAST,
        ),
        "clean": RuleModel(
            plugin_name="python",
            plugin_rule_key="S1542",
            name="Function names should comply with a naming convention",
            language="py",
            def_remediation_function="CONSTANT_ISSUE",
            def_remediation_base_effort="10min",
            updated_at=PAST,
        ),
    }
    db.add_all(rules.values())
    db.commit()
    return rules


@pytest.fixture(scope="function")
def sqale_installed(db: Session) -> None:
    db.add(PropertyModel(prop_key=SQALE_LICENSE_PROPERTY, text_value="hash"))
    db.commit()


def _marker_count(db: Session) -> int:
    return (
        db.query(LoadedTemplateModel)
        .filter(
            LoadedTemplateModel.kee == TEMPLATE_KEY,
            LoadedTemplateModel.template_type == ONE_SHOT_TASK_TYPE,
        )
        .count()
    )


# ============================================================================
# CLEAR DEBT TESTS
# ============================================================================


def test_clear_debt_resets_overloaded_fields(db: Session, rules, indexer):
    cleared = clear_rules_overloaded_debt(db, indexer, now=lambda: NOW)

    assert cleared == 3
    for name in ("function", "gap", "base_effort"):
        rule = db.get(RuleModel, rules[name].id)
        assert rule.remediation_function is None
        assert rule.remediation_gap_mult is None
        assert rule.remediation_base_effort is None
        assert rule.updated_at == NOW


def test_clear_debt_keeps_default_remediation(db: Session, rules, indexer):
    clear_rules_overloaded_debt(db, indexer, now=lambda: NOW)

    rule = db.get(RuleModel, rules["function"].id)
    assert rule.def_remediation_function == "CONSTANT_ISSUE"
    assert rule.def_remediation_base_effort == "5min"


def test_clear_debt_leaves_clean_rules_untouched(db: Session, rules, indexer):
    clear_rules_overloaded_debt(db, indexer, now=lambda: NOW)

    rule = db.get(RuleModel, rules["clean"].id)
    assert rule.updated_at == PAST


def test_clear_debt_marks_task_executed_and_reindexes(db: Session, rules, indexer):
    clear_rules_overloaded_debt(db, indexer, now=lambda: NOW)

    assert _marker_count(db) == 1
    assert indexer.calls == 1
    document = indexer.get("squid:S100")
    assert document.debt_overloaded is False
    assert document.remediation_function == "CONSTANT_ISSUE"


def test_clear_debt_logs_warnings(db: Session, rules, indexer, caplog):
    with caplog.at_level(logging.WARNING, logger="app.services.rule_debt"):
        clear_rules_overloaded_debt(db, indexer, now=lambda: NOW)

    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "SQALE model has been cleaned" in warnings[0]
    assert "may change slightly" in warnings[1]


def test_clear_debt_without_overloaded_rules_logs_nothing(db: Session, indexer, caplog):
    with caplog.at_level(logging.WARNING, logger="app.services.rule_debt"):
        cleared = clear_rules_overloaded_debt(db, indexer, now=lambda: NOW)

    assert cleared == 0
    assert not [r for r in caplog.records if r.levelno == logging.WARNING]
    assert _marker_count(db) == 1
    assert indexer.calls == 1


def test_clear_debt_runs_only_once(db: Session, rules, indexer):
    """Test that a second run is a no-op: no change, no new marker, no reindex."""
    clear_rules_overloaded_debt(db, indexer, now=lambda: NOW)

    # Debt overloaded again after the first run must survive the second one
    rule = db.get(RuleModel, rules["clean"].id)
    rule.remediation_function = "LINEAR"
    db.commit()

    cleared = clear_rules_overloaded_debt(db, indexer, now=lambda: NOW)

    assert cleared == 0
    assert db.get(RuleModel, rules["clean"].id).remediation_function == "LINEAR"
    assert _marker_count(db) == 1
    assert indexer.calls == 1


def test_clear_debt_skipped_when_sqale_installed(
    db: Session, rules, sqale_installed, indexer
):
    """Test that rules are kept but the task is still marked and rules reindexed."""
    cleared = clear_rules_overloaded_debt(db, indexer, now=lambda: NOW)

    assert cleared == 0
    rule = db.get(RuleModel, rules["function"].id)
    assert rule.remediation_function == "LINEAR"
    assert rule.updated_at == PAST
    assert _marker_count(db) == 1
    assert indexer.calls == 1


def test_clear_debt_ignores_project_level_sqale_property(db: Session, rules, indexer):
    """Test that only a global license property counts as the plugin being installed."""
    db.add(PropertyModel(prop_key=SQALE_LICENSE_PROPERTY, text_value="hash", resource_id=42))
    db.commit()

    cleared = clear_rules_overloaded_debt(db, indexer, now=lambda: NOW)

    assert cleared == 3


# ============================================================================
# STARTUP
# ============================================================================


def test_run_startup_tasks(db: Session, rules, indexer):
    run_startup_tasks(session_factory=db.info["session_factory"], indexer=indexer)

    db.expire_all()
    assert db.get(RuleModel, rules["function"].id).remediation_function is None
    assert _marker_count(db) == 1
    assert len(indexer) == 4


def test_run_startup_tasks_populates_index_after_first_run(db: Session, rules):
    """Test that a fresh process still gets an index when the task already ran."""
    run_startup_tasks(session_factory=db.info["session_factory"], indexer=CountingIndexer())

    fresh = CountingIndexer()
    run_startup_tasks(session_factory=db.info["session_factory"], indexer=fresh)

    assert fresh.calls == 1
    assert len(fresh) == 4

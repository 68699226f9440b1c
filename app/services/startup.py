import logging

from sqlalchemy.orm import Session, sessionmaker

from app.db.base import SessionLocal
from app.services.rule_debt import clear_rules_overloaded_debt
from app.services.rule_index import RuleIndexer, rule_indexer

logger = logging.getLogger(__name__)


def run_startup_tasks(
    session_factory: sessionmaker = SessionLocal,
    indexer: RuleIndexer = rule_indexer,
) -> None:
    """Run the one-shot tasks, then make sure the rule index is populated."""
    db: Session = session_factory()
    try:
        cleared = clear_rules_overloaded_debt(db, indexer)
        if cleared:
            logger.info("Cleared overloaded debt on %d rules", cleared)
        # The task only reindexes on its first run
        if len(indexer) == 0:
            indexer.index(db)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

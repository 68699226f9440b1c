from sqlalchemy.orm import Session

from app.db.models.rule import Rule as RuleModel


def get_all_rules(db: Session) -> list[RuleModel]:
    """Get all rules."""
    return db.query(RuleModel).order_by(RuleModel.id).all()


def update_rule(db: Session, rule: RuleModel) -> RuleModel:
    """Stage changes made to a rule. The caller owns the transaction."""
    db.add(rule)
    db.flush()
    return rule

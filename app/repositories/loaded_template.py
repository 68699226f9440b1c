from sqlalchemy.orm import Session

from app.db.models.loaded_template import LoadedTemplate as LoadedTemplateModel


def count_by_type_and_key(db: Session, template_type: str, key: str) -> int:
    return (
        db.query(LoadedTemplateModel)
        .filter(
            LoadedTemplateModel.template_type == template_type,
            LoadedTemplateModel.kee == key,
        )
        .count()
    )


def insert_loaded_template(
    db: Session, key: str, template_type: str
) -> LoadedTemplateModel:
    """Stage a new marker. The caller owns the transaction."""
    template = LoadedTemplateModel(kee=key, template_type=template_type)
    db.add(template)
    db.flush()
    return template

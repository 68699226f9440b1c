from app.db.models.organization import Organization
from app.db.models.component import Component
from app.db.models.quality_profile import QualityProfile, ProjectQualityProfile
from app.db.models.rule import Rule
from app.db.models.property import Property
from app.db.models.loaded_template import LoadedTemplate

__all__ = [
    "Organization",
    "Component",
    "QualityProfile",
    "ProjectQualityProfile",
    "Rule",
    "Property",
    "LoadedTemplate",
]

from .loader import build_entities, load_definitions
from .models import EntityDefinitions, PostTypeDefinition, TaxonomyDefinition

__all__ = [
    "EntityDefinitions",
    "PostTypeDefinition",
    "TaxonomyDefinition",
    "build_entities",
    "load_definitions",
]

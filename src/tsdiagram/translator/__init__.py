"""Translation layer: frontend declarations to the diagram model.

Components, leaf-first:
- type_refs: type identities and display strings
- members: property and method extraction
- naming: declaration and type display names
- heritage: extends / implements edges
- context: per-run interface merge registry and diagnostics
- declarations: entity builders
- associations: member association inference
"""

from tsdiagram.translator.associations import AssociationInferrer, infer_associations
from tsdiagram.translator.context import TranslationContext
from tsdiagram.translator.declarations import DeclarationBuilder
from tsdiagram.translator.heritage import (
    class_heritage_clauses,
    interface_heritage_clauses,
)
from tsdiagram.translator.members import extract_method, extract_property
from tsdiagram.translator.naming import declaration_name, type_name
from tsdiagram.translator.type_refs import resolve_type_ids, type_display

__all__ = [
    "AssociationInferrer",
    "DeclarationBuilder",
    "TranslationContext",
    "class_heritage_clauses",
    "declaration_name",
    "extract_method",
    "extract_property",
    "infer_associations",
    "interface_heritage_clauses",
    "resolve_type_ids",
    "type_display",
    "type_name",
]

"""tsdiagram data models.

This module exports the diagram model handed to renderers:
- ClassEntity, InterfaceEntity, EnumEntity, TypeAliasEntity: diagram nodes
- PropertyDetail, MethodDetail, ArgumentIds: entity members
- HeritageClause: extends / implements edges
- Association: inferred member associations
- FileDeclaration: per source unit bundle
- Diagnostic, TranslationResult: run outcome
"""

from tsdiagram.models.diagnostics import (
    EMPTY_RESULT_MESSAGE,
    Diagnostic,
    DiagnosticKind,
    TranslationResult,
)
from tsdiagram.models.diagram import (
    ArgumentIds,
    Association,
    AssociationSource,
    ClassEntity,
    Entity,
    EnumEntity,
    FileDeclaration,
    HeritageClause,
    HeritageClauseType,
    InterfaceEntity,
    MemberEntity,
    MethodDetail,
    PropertyDetail,
    TypeAliasEntity,
)

__all__ = [
    # Entities
    "Entity",
    "MemberEntity",
    "ClassEntity",
    "InterfaceEntity",
    "EnumEntity",
    "TypeAliasEntity",
    # Members
    "PropertyDetail",
    "MethodDetail",
    "ArgumentIds",
    # Edges
    "HeritageClause",
    "HeritageClauseType",
    "Association",
    "AssociationSource",
    # Bundles
    "FileDeclaration",
    "Diagnostic",
    "DiagnosticKind",
    "TranslationResult",
    "EMPTY_RESULT_MESSAGE",
]

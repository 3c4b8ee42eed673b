"""Heritage resolution: extends and implements edges of a declaration."""

import logging

from tsdiagram.frontend.model import ClassDecl, InterfaceDecl, SymbolRef, TypeRef
from tsdiagram.models.diagram import HeritageClause, HeritageClauseType
from tsdiagram.translator.naming import declaration_name, type_name
from tsdiagram.translator.type_refs import resolve_type_ids, type_display

logger = logging.getLogger(__name__)


def _identity(symbol: SymbolRef | None) -> str:
    if symbol is None or not symbol.fully_qualified_name:
        return ""
    return symbol.fully_qualified_name


def _first_id(type_ref: TypeRef | None) -> str:
    ids = resolve_type_ids(type_ref)
    return ids[0] if ids else ""


def class_heritage_clauses(declaration: ClassDecl) -> list[HeritageClause]:
    """Compute the heritage clauses of a class.

    At most one kind of Extends edge is produced: to the base class when
    there is one, otherwise one per applied mixin. One Implements edge is
    produced per implemented interface, pointing at the generic target of
    an instantiation (`Foo<T>` rather than `Foo<Bar>`).

    Args:
        declaration: Class declaration

    Returns:
        Heritage clauses, empty when the class name cannot be computed
    """
    class_name = declaration_name(declaration)
    if not class_name:
        return []

    class_type_id = _identity(declaration.symbol)
    clauses: list[HeritageClause] = []

    base_class = declaration.base_class
    if base_class is not None:
        base_class_name = declaration_name(base_class)
        if base_class_name:
            clauses.append(
                HeritageClause(
                    clause=base_class_name,
                    clause_type_id=_identity(base_class.symbol),
                    class_name=class_name,
                    class_type_id=class_type_id,
                    type=HeritageClauseType.EXTENDS,
                )
            )
    elif declaration.base_types:
        for mixin in declaration.base_types:
            clauses.append(
                HeritageClause(
                    clause=type_display(mixin) or "",
                    clause_type_id=_identity(mixin.symbol),
                    class_name=class_name,
                    class_type_id=class_type_id,
                    type=HeritageClauseType.EXTENDS,
                )
            )

    for implemented in declaration.implements:
        interface_name = type_name(implemented.target or implemented)
        if not interface_name:
            logger.debug(f"Skipping unnamed interface {implemented.text} of {class_name}")
            continue
        clauses.append(
            HeritageClause(
                clause=interface_name,
                clause_type_id=_first_id(implemented),
                class_name=class_name,
                class_type_id=class_type_id,
                type=HeritageClauseType.IMPLEMENTS,
            )
        )

    return clauses


def interface_heritage_clauses(declaration: InterfaceDecl) -> list[HeritageClause]:
    """Compute the heritage clauses of an interface.

    Interface extension is modeled as Implements, one edge per direct base
    declaration whose name can be computed.
    """
    interface_name = declaration_name(declaration)
    if not interface_name:
        return []

    class_type_id = _identity(declaration.symbol)
    clauses: list[HeritageClause] = []

    for base in declaration.base_declarations:
        base_name = declaration_name(base)
        if not base_name:
            continue
        clauses.append(
            HeritageClause(
                clause=base_name,
                clause_type_id=_first_id(base.declared_type),
                class_name=interface_name,
                class_type_id=class_type_id,
                type=HeritageClauseType.IMPLEMENTS,
            )
        )

    return clauses

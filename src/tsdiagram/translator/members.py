"""Member extraction: property and method declarations to diagram members."""

from tsdiagram.frontend.model import MethodDecl, ParameterDecl, PropertyDecl
from tsdiagram.models.diagram import ArgumentIds, MethodDetail, PropertyDetail
from tsdiagram.translator.type_refs import resolve_type_ids, type_display


def extract_property(declaration: PropertyDecl | ParameterDecl) -> PropertyDetail | None:
    """Convert a property (or promoted constructor parameter).

    Returns None when the declaration has no symbol. Modifiers are passed
    through untouched.
    """
    symbol = declaration.symbol
    if symbol is None:
        return None

    return PropertyDetail(
        name=symbol.name,
        modifier_flags=int(declaration.modifier_flags),
        type=type_display(declaration.type),
        type_ids=resolve_type_ids(declaration.type),
    )


def extract_method(declaration: MethodDecl) -> MethodDetail | None:
    """Convert a method declaration or signature.

    Returns None when the declaration has no symbol.
    """
    symbol = declaration.symbol
    if symbol is None:
        return None

    return_type = declaration.return_type
    return_type_ids = None
    if return_type is not None and return_type.symbol is not None:
        return_type_ids = resolve_type_ids(return_type)

    return MethodDetail(
        name=symbol.name,
        modifier_flags=int(declaration.modifier_flags),
        return_type=type_display(return_type),
        return_type_ids=return_type_ids,
        arguments=extract_arguments(declaration),
        argument_ids=extract_argument_ids(declaration),
    )


def extract_arguments(declaration: MethodDecl) -> list[str]:
    """Parameter type display strings in order, blanks dropped."""
    arguments = (type_display(p.type) for p in declaration.parameters)
    return [a for a in arguments if a]


def extract_argument_ids(declaration: MethodDecl) -> list[ArgumentIds] | None:
    """Identities of parameters whose type carries a symbol.

    Returns None unless at least one parameter resolves to an identity.
    """
    argument_ids = [
        ArgumentIds(
            name=parameter.name,
            ids=resolve_type_ids(parameter.type),
            type=type_display(parameter.type),
        )
        for parameter in declaration.parameters
        if parameter.type is not None and parameter.type.symbol is not None
    ]

    if not any(a.ids for a in argument_ids):
        return None
    return argument_ids

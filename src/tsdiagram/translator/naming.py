"""Display names of declarations and types.

Names carry a rendered generic parameter list (`Name<T,U>`). A name that
cannot be computed is None, never an exception.
"""

import logging

from tsdiagram.frontend.model import (
    ANONYMOUS_SYMBOL_NAME,
    Declaration,
    TypeRef,
)

logger = logging.getLogger(__name__)


def declaration_name(declaration: Declaration) -> str | None:
    """Name of a class, interface or type alias declaration."""
    if declaration.symbol is None:
        logger.debug("Declaration without symbol has no name")
        return None

    # mapped-type shapes report no type parameter list
    type_parameters = getattr(declaration, "type_parameters", None)
    if type_parameters is None:
        logger.debug(f"Cannot list type parameters of {declaration.symbol.name}")
        return None

    return _with_generics(declaration.symbol.name, type_parameters)


def type_name(type_ref: TypeRef) -> str | None:
    """Name of a type, using the alias name for anonymous object types.

    Generic arguments are rendered by their symbol names; an argument
    without a symbol makes the name unresolvable.
    """
    if type_ref.symbol is None:
        logger.debug(f"Type {type_ref.text} has no symbol")
        return None

    name = type_ref.symbol.name
    if name == ANONYMOUS_SYMBOL_NAME:
        if type_ref.alias_symbol is None:
            logger.debug(f"Anonymous type {type_ref.text} has no alias")
            return None
        name = type_ref.alias_symbol.name

    generics: list[str] = []
    for argument in type_ref.type_arguments:
        if argument.symbol is None:
            logger.debug(f"Type argument {argument.text} of {name} has no symbol")
            return None
        generics.append(argument.symbol.name)

    return _with_generics(name, generics)


def _with_generics(name: str, generics: list[str]) -> str:
    if generics:
        return name + "<" + ",".join(generics) + ">"
    return name

"""Declaration frontends: source files to the declaration model."""

from tsdiagram.frontend.base import (
    DeclarationFrontend,
    FrontendExecutionError,
    FrontendNotAvailableError,
    FrontendStats,
)
from tsdiagram.frontend.binder import Binder
from tsdiagram.frontend.model import (
    ClassDecl,
    ConstructorDecl,
    Declaration,
    EnumDecl,
    InterfaceDecl,
    MethodDecl,
    ModifierFlags,
    ObjectLiteral,
    ParameterDecl,
    PropertyDecl,
    SourceUnit,
    SymbolRef,
    TypeAliasDecl,
    TypeKind,
    TypeRef,
)
from tsdiagram.frontend.tree_sitter import TreeSitterFrontend

__all__ = [
    "Binder",
    "ClassDecl",
    "ConstructorDecl",
    "Declaration",
    "DeclarationFrontend",
    "EnumDecl",
    "FrontendExecutionError",
    "FrontendNotAvailableError",
    "FrontendStats",
    "InterfaceDecl",
    "MethodDecl",
    "ModifierFlags",
    "ObjectLiteral",
    "ParameterDecl",
    "PropertyDecl",
    "SourceUnit",
    "SymbolRef",
    "TreeSitterFrontend",
    "TypeAliasDecl",
    "TypeKind",
    "TypeRef",
]

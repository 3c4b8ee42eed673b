"""Declaration building: class, interface, enum and type alias entities.

The builder translates one declaration at a time, recording non-fatal
problems on the run's TranslationContext. A whole source unit is turned
into a FileDeclaration by build_file().
"""

import logging

from tsdiagram.frontend.model import (
    ClassDecl,
    EnumDecl,
    InterfaceDecl,
    MethodDecl,
    ParameterDecl,
    PropertyDecl,
    SourceUnit,
    SymbolRef,
    TypeAliasDecl,
)
from tsdiagram.models.diagnostics import DiagnosticKind
from tsdiagram.models.diagram import (
    ClassEntity,
    EnumEntity,
    FileDeclaration,
    InterfaceEntity,
    MethodDetail,
    PropertyDetail,
    TypeAliasEntity,
)
from tsdiagram.translator.context import TranslationContext
from tsdiagram.translator.heritage import (
    class_heritage_clauses,
    interface_heritage_clauses,
)
from tsdiagram.translator.members import extract_method, extract_property
from tsdiagram.translator.naming import declaration_name

logger = logging.getLogger(__name__)

# Display name of declarations whose name cannot be computed
UNNAMED = "undefined"


class DeclarationBuilder:
    """Builds diagram entities from frontend declarations.

    All builders are best-effort: a missing identity or name is reported as
    a diagnostic and translation continues.
    """

    def __init__(self, context: TranslationContext) -> None:
        """Initialize the builder.

        Args:
            context: State of the current translation run
        """
        self.context = context

    # =========================================================================
    # Source units
    # =========================================================================

    def build_file(self, unit: SourceUnit) -> FileDeclaration:
        """Translate every top-level declaration of a source unit.

        Interfaces are registered in the run's merge registry as they are
        built. Type aliases that are not object shapes are dropped.
        """
        self.context.file_name = unit.file_name
        logger.info(unit.file_name)

        classes = [self.build_class(c) for c in unit.classes]
        interfaces = [
            self.context.register_interface(self.build_interface(i))
            for i in unit.interfaces
        ]
        types = [
            alias
            for alias in (self.build_type_alias(t) for t in unit.type_aliases)
            if alias is not None
        ]
        enums = [self.build_enum(e) for e in unit.enums]

        heritage_clauses = [c.heritage_clauses for c in classes if c.heritage_clauses]
        heritage_clauses += [i.heritage_clauses for i in interfaces if i.heritage_clauses]

        return FileDeclaration(
            file_name=unit.file_name,
            classes=classes,
            interfaces=interfaces,
            enums=enums,
            types=types,
            heritage_clauses=heritage_clauses,
        )

    # =========================================================================
    # Declarations
    # =========================================================================

    def build_class(self, declaration: ClassDecl) -> ClassEntity:
        """Build a class entity.

        Parameters of the first constructor that carry an accessibility or
        readonly modifier become properties, after the declared ones.
        """
        name = self._name(declaration, "class")
        identity = self._identity(declaration.symbol, "class", name)

        properties = self._properties(declaration.properties)
        if declaration.constructors:
            promoted = [
                p for p in declaration.constructors[0].parameters if p.is_parameter_property
            ]
            properties.extend(self._properties(promoted))

        return ClassEntity(
            name=name,
            id=identity,
            properties=properties,
            methods=self._methods(declaration.methods),
            heritage_clauses=class_heritage_clauses(declaration),
        )

    def build_interface(self, declaration: InterfaceDecl) -> InterfaceEntity:
        """Build an interface entity (not yet merged)."""
        name = self._name(declaration, "interface")
        identity = self._identity(declaration.symbol, "interface", name)

        return InterfaceEntity(
            name=name,
            id=identity,
            properties=self._properties(declaration.properties),
            methods=self._methods(declaration.methods),
            heritage_clauses=interface_heritage_clauses(declaration),
        )

    def build_type_alias(self, declaration: TypeAliasDecl) -> TypeAliasEntity | None:
        """Build a type alias entity.

        Only aliases written as an object literal are converted; any other
        alias shape yields None.
        """
        literal = declaration.type_literal
        if literal is None:
            name = declaration_name(declaration) or _symbol_name(declaration) or UNNAMED
            self.context.report(
                DiagnosticKind.UNCONVERTIBLE_ALIAS,
                f"Skipping type {name}: {declaration.value_kind or 'value'} is not an object shape",
                entity_name=name,
            )
            return None

        name = self._name(declaration, "type")
        identity = self._identity(declaration.symbol, "type", name)

        return TypeAliasEntity(
            name=name,
            id=identity,
            properties=self._properties(literal.properties),
            methods=self._methods(literal.methods),
        )

    def build_enum(self, declaration: EnumDecl) -> EnumEntity:
        """Build an enum entity; items are member names in order."""
        if declaration.symbol is not None:
            name = declaration.symbol.name
        else:
            name = UNNAMED
            self.context.report(
                DiagnosticKind.UNRESOLVABLE_NAME, "Enum has no resolvable name"
            )
        identity = self._identity(declaration.symbol, "enum", name)

        return EnumEntity(name=name, id=identity, enum_items=list(declaration.members))

    # =========================================================================
    # Helpers
    # =========================================================================

    def _name(self, declaration: ClassDecl | InterfaceDecl | TypeAliasDecl, kind: str) -> str:
        name = declaration_name(declaration)
        if name:
            return name

        self.context.report(
            DiagnosticKind.UNRESOLVABLE_NAME,
            f"Cannot determine name of {kind} declaration",
            entity_name=_symbol_name(declaration),
        )
        return UNNAMED

    def _identity(self, symbol: SymbolRef | None, kind: str, name: str) -> str:
        identity = symbol.fully_qualified_name if symbol is not None else None
        if identity:
            return identity

        self.context.report(
            DiagnosticKind.MISSING_IDENTITY,
            f"missing {kind} id: {name}",
            entity_name=name,
        )
        return ""

    @staticmethod
    def _properties(
        declarations: list[PropertyDecl] | list[ParameterDecl],
    ) -> list[PropertyDetail]:
        properties = (extract_property(d) for d in declarations)
        return [p for p in properties if p is not None]

    @staticmethod
    def _methods(declarations: list[MethodDecl]) -> list[MethodDetail]:
        methods = (extract_method(d) for d in declarations)
        return [m for m in methods if m is not None]


def _symbol_name(declaration: ClassDecl | InterfaceDecl | TypeAliasDecl) -> str | None:
    """Bare symbol name, without the generic parameter list."""
    return declaration.symbol.name if declaration.symbol is not None else None

"""Declaration model filled in by a type-checking frontend.

This is the narrow query surface the translator reads: declarations with
their symbols, members, heritage and resolved types. A frontend builds these
objects once per run; the translator never parses source itself.

Declarations reference each other (a class points at its base class
declaration, an interface at its base declarations), so the dataclasses use
identity equality and keep those references out of repr().
"""

from dataclasses import dataclass, field
from enum import Enum, IntFlag


class TypeKind(Enum):
    """Shape classification of a type."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    UNION = "union"
    INTERSECTION = "intersection"
    ARRAY = "array"
    ANONYMOUS = "anonymous"
    TYPE_PARAMETER = "type_parameter"
    OTHER = "other"


class ModifierFlags(IntFlag):
    """Combined declaration modifiers, numerically compatible with TypeScript."""

    NONE = 0
    EXPORT = 1
    AMBIENT = 2
    PUBLIC = 4
    PRIVATE = 8
    PROTECTED = 16
    STATIC = 32
    READONLY = 64
    ACCESSOR = 128
    ABSTRACT = 256
    ASYNC = 512
    DEFAULT = 1024
    CONST = 2048
    OVERRIDE = 16384

    # Modifiers that promote a constructor parameter to a property
    PARAMETER_PROPERTY = PUBLIC | PRIVATE | PROTECTED | READONLY | OVERRIDE


# Symbol name the checker gives anonymous object types
ANONYMOUS_SYMBOL_NAME = "__type"


@dataclass(eq=False)
class SymbolRef:
    """A resolvable symbol.

    Attributes:
        name: Symbol name as written in source
        fully_qualified_name: Globally stable path, None when unavailable
    """

    name: str
    fully_qualified_name: str | None = None


@dataclass(eq=False)
class TypeRef:
    """A resolved type.

    Attributes:
        text: Source text of the type as the checker prints it
        kind: Shape classification
        symbol: Symbol of the type, if any
        alias_symbol: Symbol of the alias the type was reached through
        constituents: Member types of a union or intersection
        type_arguments: Type arguments (the element type for arrays)
        target: Generic target of an instantiation (`Foo<T>` for `Foo<Bar>`)
    """

    text: str
    kind: TypeKind = TypeKind.OTHER
    symbol: SymbolRef | None = None
    alias_symbol: SymbolRef | None = None
    constituents: list["TypeRef"] = field(default_factory=list)
    type_arguments: list["TypeRef"] = field(default_factory=list)
    target: "TypeRef | None" = None

    @property
    def element_type(self) -> "TypeRef | None":
        """Element type of an array type."""
        if self.kind is TypeKind.ARRAY and self.type_arguments:
            return self.type_arguments[0]
        return None


@dataclass(eq=False)
class PropertyDecl:
    """Property declaration or property signature."""

    symbol: SymbolRef | None
    type: TypeRef | None = None
    modifier_flags: int = ModifierFlags.NONE


@dataclass(eq=False)
class ParameterDecl:
    """Method or constructor parameter.

    `symbol` is None for destructured parameters.
    """

    name: str
    symbol: SymbolRef | None = None
    type: TypeRef | None = None
    modifier_flags: int = ModifierFlags.NONE

    @property
    def is_parameter_property(self) -> bool:
        """True when an accessibility or readonly modifier promotes it."""
        return bool(self.modifier_flags & ModifierFlags.PARAMETER_PROPERTY)


@dataclass(eq=False)
class MethodDecl:
    """Method declaration or method signature."""

    symbol: SymbolRef | None
    return_type: TypeRef | None = None
    parameters: list[ParameterDecl] = field(default_factory=list)
    modifier_flags: int = ModifierFlags.NONE


@dataclass(eq=False)
class ConstructorDecl:
    """Constructor implementation or overload."""

    parameters: list[ParameterDecl] = field(default_factory=list)


@dataclass(eq=False)
class ClassDecl:
    """Class declaration.

    Attributes:
        symbol: Class symbol
        type_parameters: Type parameter names; None when the shape cannot
            report them
        properties: Declared properties
        methods: Declared methods (accessors excluded)
        constructors: Constructors in declaration order
        base_class: Declaration of the single base class, if it is a class
        implements: Types listed in the implements clause
        base_types: Applied base types (mixins) of the extends clause
    """

    symbol: SymbolRef | None
    type_parameters: list[str] | None = field(default_factory=list)
    properties: list[PropertyDecl] = field(default_factory=list)
    methods: list[MethodDecl] = field(default_factory=list)
    constructors: list[ConstructorDecl] = field(default_factory=list)
    base_class: "ClassDecl | None" = field(default=None, repr=False)
    implements: list[TypeRef] = field(default_factory=list, repr=False)
    base_types: list[TypeRef] = field(default_factory=list, repr=False)

    @property
    def declared_type(self) -> TypeRef:
        """Instance type of the class."""
        return TypeRef(
            text=self.symbol.name if self.symbol else "",
            kind=TypeKind.CLASS,
            symbol=self.symbol,
        )


@dataclass(eq=False)
class InterfaceDecl:
    """Interface declaration (one of possibly several with the same name)."""

    symbol: SymbolRef | None
    type_parameters: list[str] | None = field(default_factory=list)
    properties: list[PropertyDecl] = field(default_factory=list)
    methods: list[MethodDecl] = field(default_factory=list)
    base_declarations: list["Declaration"] = field(default_factory=list, repr=False)

    @property
    def declared_type(self) -> TypeRef:
        """Type declared by the interface."""
        return TypeRef(
            text=self.symbol.name if self.symbol else "",
            kind=TypeKind.INTERFACE,
            symbol=self.symbol,
        )


@dataclass(eq=False)
class ObjectLiteral:
    """Members of an object literal type (`{ a: string; f(): void }`)."""

    properties: list[PropertyDecl] = field(default_factory=list)
    methods: list[MethodDecl] = field(default_factory=list)


@dataclass(eq=False)
class TypeAliasDecl:
    """Type alias declaration.

    Attributes:
        symbol: Alias symbol
        type_parameters: Type parameter names
        type: Resolved type of the alias value
        type_literal: Members when the value is written as an object literal
        value_kind: Syntax kind of the value, for diagnostics
    """

    symbol: SymbolRef | None
    type_parameters: list[str] | None = field(default_factory=list)
    type: TypeRef | None = field(default=None, repr=False)
    type_literal: ObjectLiteral | None = None
    value_kind: str = ""

    @property
    def declared_type(self) -> TypeRef | None:
        """Resolved type of the alias."""
        return self.type


@dataclass(eq=False)
class EnumDecl:
    """Enum declaration."""

    symbol: SymbolRef | None
    members: list[str] = field(default_factory=list)

    @property
    def declared_type(self) -> TypeRef:
        """Enum type."""
        return TypeRef(
            text=self.symbol.name if self.symbol else "",
            kind=TypeKind.ENUM,
            symbol=self.symbol,
        )


Declaration = ClassDecl | InterfaceDecl | TypeAliasDecl | EnumDecl


@dataclass(eq=False)
class SourceUnit:
    """Top-level declarations of one source file, in declaration order."""

    file_name: str
    classes: list[ClassDecl] = field(default_factory=list)
    interfaces: list[InterfaceDecl] = field(default_factory=list)
    enums: list[EnumDecl] = field(default_factory=list)
    type_aliases: list[TypeAliasDecl] = field(default_factory=list)

    @property
    def declaration_count(self) -> int:
        """Return total number of top-level declarations."""
        return (
            len(self.classes)
            + len(self.interfaces)
            + len(self.enums)
            + len(self.type_aliases)
        )

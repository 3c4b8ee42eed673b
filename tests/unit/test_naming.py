"""Unit tests for declaration and type display names."""

from tsdiagram.frontend.model import (
    ANONYMOUS_SYMBOL_NAME,
    ClassDecl,
    EnumDecl,
    InterfaceDecl,
    SymbolRef,
    TypeAliasDecl,
    TypeKind,
    TypeRef,
)
from tsdiagram.translator.naming import declaration_name, type_name


class TestDeclarationName:
    """Tests for declaration_name()."""

    def test_plain_name(self) -> None:
        """Test declaration without type parameters."""
        assert declaration_name(ClassDecl(SymbolRef("Car"))) == "Car"

    def test_generic_name(self) -> None:
        """Test type parameters are rendered without spaces."""
        declaration = InterfaceDecl(SymbolRef("Map"), type_parameters=["K", "V"])

        assert declaration_name(declaration) == "Map<K,V>"

    def test_type_alias_name(self) -> None:
        """Test type alias names render like classes."""
        declaration = TypeAliasDecl(SymbolRef("Box"), type_parameters=["T"])

        assert declaration_name(declaration) == "Box<T>"

    def test_missing_symbol(self) -> None:
        """Test declaration without symbol has no name."""
        assert declaration_name(ClassDecl(None)) is None

    def test_unreportable_type_parameters(self) -> None:
        """Test shapes that cannot list type parameters have no name."""
        assert declaration_name(TypeAliasDecl(SymbolRef("Mapped"), type_parameters=None)) is None

    def test_enum_has_no_type_parameters(self) -> None:
        """Test enum declarations are not named here."""
        assert declaration_name(EnumDecl(SymbolRef("Color"))) is None


class TestTypeName:
    """Tests for type_name()."""

    def test_symbol_name(self) -> None:
        """Test type named after its symbol."""
        type_ref = TypeRef("Printable", TypeKind.INTERFACE, symbol=SymbolRef("Printable"))

        assert type_name(type_ref) == "Printable"

    def test_generic_arguments(self) -> None:
        """Test type arguments are rendered by symbol name."""
        type_ref = TypeRef(
            "Repository<T>",
            TypeKind.INTERFACE,
            symbol=SymbolRef("Repository"),
            type_arguments=[TypeRef("T", TypeKind.TYPE_PARAMETER, symbol=SymbolRef("T"))],
        )

        assert type_name(type_ref) == "Repository<T>"

    def test_argument_without_symbol(self) -> None:
        """Test an argument without symbol makes the name unresolvable."""
        type_ref = TypeRef(
            "Repository<string>",
            TypeKind.INTERFACE,
            symbol=SymbolRef("Repository"),
            type_arguments=[TypeRef("string")],
        )

        assert type_name(type_ref) is None

    def test_anonymous_uses_alias(self) -> None:
        """Test anonymous types are named after their alias."""
        type_ref = TypeRef(
            "Point",
            TypeKind.ANONYMOUS,
            symbol=SymbolRef(ANONYMOUS_SYMBOL_NAME),
            alias_symbol=SymbolRef("Point"),
        )

        assert type_name(type_ref) == "Point"

    def test_anonymous_without_alias(self) -> None:
        """Test inline object types have no name."""
        type_ref = TypeRef("{}", TypeKind.ANONYMOUS, symbol=SymbolRef(ANONYMOUS_SYMBOL_NAME))

        assert type_name(type_ref) is None

    def test_missing_symbol(self) -> None:
        """Test types without symbol have no name."""
        assert type_name(TypeRef("string")) is None

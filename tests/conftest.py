"""Shared pytest fixtures for tsdiagram tests.

Fixtures are organized by category:
- Path fixtures: the sample TypeScript project
- Declaration fixtures: hand-built frontend declarations for translator tests
- Frontend fixtures: a tree-sitter frontend for integration tests
"""

from pathlib import Path

import pytest

from tsdiagram.frontend.model import (
    ClassDecl,
    ConstructorDecl,
    InterfaceDecl,
    MethodDecl,
    ModifierFlags,
    ParameterDecl,
    PropertyDecl,
    SourceUnit,
    SymbolRef,
    TypeKind,
    TypeRef,
)
from tsdiagram.frontend.tree_sitter import TreeSitterFrontend

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def ts_project_dir(fixtures_dir: Path) -> Path:
    """Return the path to the sample TypeScript project."""
    return fixtures_dir / "ts_project"


# =============================================================================
# Declaration Fixtures
# =============================================================================


@pytest.fixture
def string_type() -> TypeRef:
    """A primitive type without symbol."""
    return TypeRef("string")


@pytest.fixture
def engine_symbol() -> SymbolRef:
    """Symbol of the Engine class."""
    return SymbolRef("Engine", '"src/engine".Engine')


@pytest.fixture
def engine_type(engine_symbol: SymbolRef) -> TypeRef:
    """Instance type of the Engine class."""
    return TypeRef("Engine", TypeKind.CLASS, symbol=engine_symbol)


@pytest.fixture
def engine_class(engine_symbol: SymbolRef) -> ClassDecl:
    """Engine class with a single numeric property."""
    return ClassDecl(
        symbol=engine_symbol,
        properties=[
            PropertyDecl(SymbolRef("horsepower"), TypeRef("number")),
        ],
    )


@pytest.fixture
def car_class(engine_type: TypeRef) -> ClassDecl:
    """Car class holding an Engine property."""
    return ClassDecl(
        symbol=SymbolRef("Car", '"src/car".Car'),
        properties=[PropertyDecl(SymbolRef("engine"), engine_type)],
        methods=[
            MethodDecl(
                SymbolRef("drive"),
                return_type=TypeRef("void"),
                parameters=[ParameterDecl("distance", SymbolRef("distance"), TypeRef("number"))],
            )
        ],
    )


@pytest.fixture
def dog_class(string_type: TypeRef) -> ClassDecl:
    """Dog class whose only property is promoted from its constructor."""
    return ClassDecl(
        symbol=SymbolRef("Dog", "Dog"),
        constructors=[
            ConstructorDecl(
                parameters=[
                    ParameterDecl(
                        "name",
                        SymbolRef("name"),
                        string_type,
                        ModifierFlags.PUBLIC,
                    )
                ]
            )
        ],
    )


@pytest.fixture
def shape_units() -> list[SourceUnit]:
    """Two files each declaring a part of the Shape interface."""
    area = InterfaceDecl(
        symbol=SymbolRef("Shape", "Shape"),
        methods=[MethodDecl(SymbolRef("area"), return_type=TypeRef("number"))],
    )
    perimeter = InterfaceDecl(
        symbol=SymbolRef("Shape", "Shape"),
        methods=[MethodDecl(SymbolRef("perimeter"), return_type=TypeRef("number"))],
    )
    return [
        SourceUnit("shape-area.ts", interfaces=[area]),
        SourceUnit("shape-perimeter.ts", interfaces=[perimeter]),
    ]


# =============================================================================
# Frontend Fixtures
# =============================================================================


@pytest.fixture
def frontend() -> TreeSitterFrontend:
    """Create a tree-sitter frontend instance."""
    return TreeSitterFrontend()

"""Best-effort symbol binding over tree-sitter TypeScript syntax trees.

The binder indexes the top-level declarations, imports and exports of every
parsed file, then builds the declaration model for one file at a time,
resolving type references across files. It is lossy by nature: there is no
type inference beyond simple initializers, and namespaces are not entered.

Fully-qualified names follow the TypeScript checker: `"<path>".Name` for
declarations of module files (files with an import or export), `Name` for
declarations of global script files and for unresolved ambient names.
"""

import posixpath
import re
from dataclasses import dataclass, field, replace
from typing import Any

from tsdiagram.frontend.model import (
    ANONYMOUS_SYMBOL_NAME,
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
from tsdiagram.utils.logging import get_logger

_logger = get_logger(__name__)

CLASS_NODES = {"class_declaration", "abstract_class_declaration", "class"}
INTERFACE_NODES = {"interface_declaration"}
ENUM_NODES = {"enum_declaration"}
ALIAS_NODES = {"type_alias_declaration"}
DECLARATION_NODES = CLASS_NODES | INTERFACE_NODES | ENUM_NODES | ALIAS_NODES
BINDABLE_NODES = DECLARATION_NODES | {"function_declaration"}

# Nodes that start a new function body (their returns are not ours)
FUNCTION_NODES = {
    "function_declaration",
    "function_expression",
    "function",
    "arrow_function",
    "generator_function",
    "generator_function_declaration",
    "method_definition",
    "class",
    "class_declaration",
}

MODIFIER_TOKENS: dict[str, ModifierFlags] = {
    "public": ModifierFlags.PUBLIC,
    "private": ModifierFlags.PRIVATE,
    "protected": ModifierFlags.PROTECTED,
    "static": ModifierFlags.STATIC,
    "readonly": ModifierFlags.READONLY,
    "abstract": ModifierFlags.ABSTRACT,
    "async": ModifierFlags.ASYNC,
    "declare": ModifierFlags.AMBIENT,
    "override_modifier": ModifierFlags.OVERRIDE,
}

ARRAY_NAMES = {"Array", "ReadonlyArray"}
ARRAY_SYMBOL = SymbolRef("Array", "Array")
PROMISE_SYMBOL = SymbolRef("Promise", "Promise")

SOURCE_EXTENSION = re.compile(r"\.(d\.ts|tsx?|mts|cts)$")


@dataclass
class ImportBinding:
    """A name bound by an import statement.

    Attributes:
        module: Module specifier as written
        imported: Exported name, "default", or None for a namespace import
    """

    module: str
    imported: str | None


@dataclass
class BoundFile:
    """Index of one parsed source file."""

    file_name: str
    source: bytes
    root: Any
    is_module: bool = False
    top_level: list[Any] = field(default_factory=list)
    declarations: dict[str, list[Any]] = field(default_factory=dict)
    imports: dict[str, ImportBinding] = field(default_factory=dict)
    exports: dict[str, str] = field(default_factory=dict)
    reexports: list[tuple[str, str, str]] = field(default_factory=list)
    star_exports: list[str] = field(default_factory=list)

    def text(self, node: Any) -> str:
        """Source text of a node."""
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def fully_qualified_name(self, name: str) -> str:
        """Checker-style fully-qualified name of a top-level declaration."""
        if not self.is_module:
            return name
        return f'"{SOURCE_EXTENSION.sub("", self.file_name)}".{name}'


@dataclass
class Target:
    """A resolved top-level declaration (all same-named nodes of one file)."""

    file: BoundFile
    name: str
    nodes: list[Any]

    @property
    def node(self) -> Any:
        return self.nodes[0]

    @property
    def symbol(self) -> SymbolRef:
        return SymbolRef(self.name, self.file.fully_qualified_name(self.name))


@dataclass
class Scope:
    """Type resolution scope: a file plus in-scope type parameters.

    A type parameter bound to a TypeRef is substituted by it (alias
    instantiation); an unbound one resolves to a type parameter type.
    """

    file: BoundFile
    type_parameters: dict[str, TypeRef | None] = field(default_factory=dict)

    def with_type_parameters(self, names: list[str]) -> "Scope":
        bound = dict(self.type_parameters)
        for name in names:
            bound[name] = None
        return Scope(self.file, bound)


def _named(node: Any) -> list[Any]:
    """Named children of a node, comments excluded."""
    if node is None:
        return []
    return [child for child in node.named_children if child.type != "comment"]


def _first_named(node: Any) -> Any:
    children = _named(node)
    return children[0] if children else None


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] in "'\"`" and text[-1] == text[0]:
        return text[1:-1]
    return text


class Binder:
    """Resolves symbols and types across a set of parsed TypeScript files.

    Add every file with add_file() first, then call build_unit() per file.
    Declarations are built once and shared, so a class referenced as a base
    class from another file is the same ClassDecl object in both units.
    """

    def __init__(self) -> None:
        self._files: dict[str, BoundFile] = {}
        self._declarations: dict[tuple[str, int], Declaration] = {}
        self._expanding: set[tuple[str, int]] = set()
        self._globals: dict[str, Target] | None = None

    @property
    def file_names(self) -> list[str]:
        """Names of all added files, in insertion order."""
        return list(self._files)

    # =========================================================================
    # Indexing
    # =========================================================================

    def add_file(self, file_name: str, source: bytes, root: Any) -> BoundFile:
        """Index the top-level statements of a parsed file.

        Args:
            file_name: Path of the file, used for module resolution
            source: Raw source bytes the tree was parsed from
            root: Root node of the syntax tree

        Returns:
            The indexed file
        """
        bound = BoundFile(file_name=posixpath.normpath(file_name), source=source, root=root)

        for statement in _named(root):
            if statement.type == "import_statement":
                bound.is_module = True
                self._index_import(bound, statement)
            elif statement.type == "export_statement":
                bound.is_module = True
                self._index_export(bound, statement)
            elif statement.type == "ambient_declaration":
                self._index_declaration(bound, _first_named(statement))
            else:
                self._index_declaration(bound, statement)

        if root.has_error:
            _logger.debug(f"Syntax errors in {bound.file_name}, continuing best-effort")

        self._files[bound.file_name] = bound
        self._globals = None
        return bound

    def _index_declaration(self, bound: BoundFile, node: Any) -> str | None:
        if node is None or node.type not in BINDABLE_NODES:
            return None

        if node.type in DECLARATION_NODES:
            bound.top_level.append(node)

        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None

        name = bound.text(name_node)
        bound.declarations.setdefault(name, []).append(node)
        return name

    def _index_import(self, bound: BoundFile, statement: Any) -> None:
        source_node = statement.child_by_field_name("source")
        if source_node is None:
            return
        module = _unquote(bound.text(source_node))

        for clause in _named(statement):
            if clause.type != "import_clause":
                continue
            for child in _named(clause):
                if child.type == "identifier":
                    bound.imports[bound.text(child)] = ImportBinding(module, "default")
                elif child.type == "namespace_import":
                    alias = _first_named(child)
                    if alias is not None:
                        bound.imports[bound.text(alias)] = ImportBinding(module, None)
                elif child.type == "named_imports":
                    for specifier in _named(child):
                        if specifier.type != "import_specifier":
                            continue
                        name = bound.text(specifier.child_by_field_name("name"))
                        alias = specifier.child_by_field_name("alias")
                        local = bound.text(alias) if alias is not None else name
                        bound.imports[local] = ImportBinding(module, name)

    def _index_export(self, bound: BoundFile, statement: Any) -> None:
        is_default = any(child.type == "default" for child in statement.children)

        declaration = statement.child_by_field_name("declaration")
        if declaration is not None and declaration.type == "ambient_declaration":
            declaration = _first_named(declaration)
        if declaration is None and is_default:
            value = statement.child_by_field_name("value")
            if value is not None and value.type == "class":
                declaration = value
            elif value is not None and value.type == "identifier":
                bound.exports["default"] = bound.text(value)
                return

        if declaration is not None:
            name = self._index_declaration(bound, declaration)
            if name is not None:
                bound.exports["default" if is_default else name] = name
            return

        source_node = statement.child_by_field_name("source")
        module = _unquote(bound.text(source_node)) if source_node is not None else None

        clause = next((c for c in _named(statement) if c.type == "export_clause"), None)
        if clause is None:
            if module is not None and not any(
                c.type == "namespace_export" for c in _named(statement)
            ):
                bound.star_exports.append(module)
            return

        for specifier in _named(clause):
            if specifier.type != "export_specifier":
                continue
            name = bound.text(specifier.child_by_field_name("name"))
            alias = specifier.child_by_field_name("alias")
            exported = bound.text(alias) if alias is not None else name
            if module is not None:
                bound.reexports.append((module, name, exported))
            else:
                bound.exports[exported] = name

    # =========================================================================
    # Name resolution
    # =========================================================================

    def _global_declarations(self) -> dict[str, Target]:
        if self._globals is None:
            self._globals = {}
            for bound in self._files.values():
                if bound.is_module:
                    continue
                for name, nodes in bound.declarations.items():
                    self._globals.setdefault(name, Target(bound, name, nodes))
        return self._globals

    def resolve_module(self, bound: BoundFile, module: str) -> BoundFile | None:
        """Find the added file a relative module specifier points to."""
        if not module.startswith("."):
            return None

        base = posixpath.normpath(posixpath.join(posixpath.dirname(bound.file_name), module))
        stem = re.sub(r"\.(m|c)?js$", "", base)
        candidates = [
            base,
            f"{stem}.ts",
            f"{stem}.tsx",
            f"{stem}.d.ts",
            f"{stem}/index.ts",
            f"{stem}/index.d.ts",
        ]
        for candidate in candidates:
            if candidate in self._files:
                return self._files[candidate]
        return None

    def lookup(self, bound: BoundFile, name: str) -> Target | None:
        """Resolve a name used in a file to its top-level declaration.

        Order: declarations of the file, its imports, then declarations of
        global script files. Returns None for ambient names.
        """
        nodes = bound.declarations.get(name)
        if nodes:
            return Target(bound, name, nodes)

        binding = bound.imports.get(name)
        if binding is not None:
            if binding.imported is None:
                return None
            module = self.resolve_module(bound, binding.module)
            if module is None:
                return None
            return self.resolve_export(module, binding.imported)

        return self._global_declarations().get(name)

    def resolve_export(
        self,
        bound: BoundFile,
        name: str,
        seen: set[tuple[str, str]] | None = None,
    ) -> Target | None:
        """Resolve a name exported by a module, following re-exports."""
        seen = seen if seen is not None else set()
        if (bound.file_name, name) in seen:
            return None
        seen.add((bound.file_name, name))

        local = bound.exports.get(name)
        if local is not None:
            if local in bound.declarations:
                return Target(bound, local, bound.declarations[local])
            if local in bound.imports:
                return self.lookup(bound, local)

        for module, imported, exported in bound.reexports:
            if exported != name:
                continue
            target_file = self.resolve_module(bound, module)
            if target_file is not None:
                return self.resolve_export(target_file, imported, seen)

        for module in bound.star_exports:
            target_file = self.resolve_module(bound, module)
            if target_file is None:
                continue
            target = self.resolve_export(target_file, name, seen)
            if target is not None:
                return target

        if name in bound.declarations:
            return Target(bound, name, bound.declarations[name])
        return None

    def _ambient_symbol(self, bound: BoundFile, name: str) -> SymbolRef:
        binding = bound.imports.get(name)
        if binding is not None and binding.imported not in (None, "default"):
            name = binding.imported
        return SymbolRef(name, name)

    # =========================================================================
    # Types
    # =========================================================================

    def resolve_type(self, node: Any, scope: Scope) -> TypeRef:
        """Resolve a type node (or type annotation) to a TypeRef."""
        text = scope.file.text(node)
        kind = node.type

        if kind in (
            "type_annotation",
            "opting_type_annotation",
            "omitting_type_annotation",
            "parenthesized_type",
            "readonly_type",
        ):
            inner = _first_named(node)
            return self.resolve_type(inner, scope) if inner is not None else TypeRef(text)

        if kind == "type_identifier":
            return self._resolve_reference(scope, text, text, [])

        if kind == "generic_type":
            return self._resolve_generic(node, text, scope)

        if kind == "nested_type_identifier":
            return self._resolve_nested(node, text, scope, [])

        if kind == "array_type":
            element = self.resolve_type(_first_named(node), scope)
            return TypeRef(text, TypeKind.ARRAY, symbol=ARRAY_SYMBOL, type_arguments=[element])

        if kind in ("union_type", "intersection_type"):
            type_kind = TypeKind.UNION if kind == "union_type" else TypeKind.INTERSECTION
            constituents: list[TypeRef] = []
            for child in _named(node):
                resolved = self.resolve_type(child, scope)
                if resolved.kind is type_kind and resolved.alias_symbol is None:
                    constituents.extend(resolved.constituents)
                else:
                    constituents.append(resolved)
            return TypeRef(text, type_kind, constituents=constituents)

        if kind in ("object_type", "function_type", "constructor_type"):
            return TypeRef(text, TypeKind.ANONYMOUS, symbol=SymbolRef(ANONYMOUS_SYMBOL_NAME))

        # predefined, literal, tuple, conditional and other types
        return TypeRef(text)

    def _resolve_generic(self, node: Any, text: str, scope: Scope) -> TypeRef:
        name_node = node.child_by_field_name("name")
        arguments = [
            self.resolve_type(argument, scope)
            for argument in _named(node.child_by_field_name("type_arguments"))
        ]
        if name_node is None:
            return TypeRef(text)

        if name_node.type == "nested_type_identifier":
            return self._resolve_nested(name_node, text, scope, arguments)

        name = scope.file.text(name_node)
        if (
            name in ARRAY_NAMES
            and len(arguments) == 1
            and name not in scope.type_parameters
            and self.lookup(scope.file, name) is None
        ):
            return TypeRef(text, TypeKind.ARRAY, symbol=ARRAY_SYMBOL, type_arguments=arguments)

        return self._resolve_reference(scope, name, text, arguments)

    def _resolve_nested(
        self, node: Any, text: str, scope: Scope, arguments: list[TypeRef]
    ) -> TypeRef:
        module_node = node.child_by_field_name("module")
        name_node = node.child_by_field_name("name")
        name = scope.file.text(name_node) if name_node is not None else text

        if module_node is not None and module_node.type == "identifier":
            binding = scope.file.imports.get(scope.file.text(module_node))
            if binding is not None and binding.imported is None:
                module = self.resolve_module(scope.file, binding.module)
                target = self.resolve_export(module, name) if module is not None else None
                if target is not None:
                    return self._type_of(target, text, arguments)

        qualified = scope.file.text(node)
        return TypeRef(text, symbol=SymbolRef(name, qualified), type_arguments=arguments)

    def _resolve_reference(
        self, scope: Scope, name: str, text: str, arguments: list[TypeRef]
    ) -> TypeRef:
        if name in scope.type_parameters:
            bound = scope.type_parameters[name]
            if bound is not None:
                return bound
            return TypeRef(text, TypeKind.TYPE_PARAMETER, symbol=SymbolRef(name, name))

        target = self.lookup(scope.file, name)
        if target is None:
            return TypeRef(
                text,
                symbol=self._ambient_symbol(scope.file, name),
                type_arguments=arguments,
            )
        return self._type_of(target, text, arguments)

    def _type_of(self, target: Target, text: str, arguments: list[TypeRef]) -> TypeRef:
        node_type = target.node.type
        if node_type in ALIAS_NODES:
            return self._expand_alias(target, text, arguments)

        if node_type in CLASS_NODES:
            kind = TypeKind.CLASS
        elif node_type in INTERFACE_NODES:
            kind = TypeKind.INTERFACE
        elif node_type in ENUM_NODES:
            kind = TypeKind.ENUM
        else:
            kind = TypeKind.OTHER

        type_ref = TypeRef(text, kind, symbol=target.symbol, type_arguments=arguments)

        parameters = self._type_parameter_names(target.file, target.node) or []
        if arguments and parameters and kind in (TypeKind.CLASS, TypeKind.INTERFACE):
            type_ref.target = TypeRef(
                f"{target.name}<{','.join(parameters)}>",
                kind,
                symbol=target.symbol,
                type_arguments=[
                    TypeRef(p, TypeKind.TYPE_PARAMETER, symbol=SymbolRef(p, p))
                    for p in parameters
                ],
            )
        return type_ref

    def _expand_alias(self, target: Target, text: str, arguments: list[TypeRef]) -> TypeRef:
        node = target.node
        key = (target.file.file_name, node.start_byte)
        value = node.child_by_field_name("value")
        if value is None or key in self._expanding:
            return TypeRef(text)

        alias = target.symbol
        if value.type == "object_type":
            if self._is_mapped_type(value):
                return TypeRef(text)
            return TypeRef(
                text,
                TypeKind.ANONYMOUS,
                symbol=SymbolRef(ANONYMOUS_SYMBOL_NAME),
                alias_symbol=alias,
            )

        parameters = self._type_parameter_names(target.file, node) or []
        bindings = {
            p: arguments[i] if i < len(arguments) else None for i, p in enumerate(parameters)
        }

        self._expanding.add(key)
        try:
            resolved = self.resolve_type(value, Scope(target.file, bindings))
        finally:
            self._expanding.discard(key)

        if resolved.kind in (TypeKind.UNION, TypeKind.INTERSECTION):
            return replace(resolved, text=text, alias_symbol=alias)
        return replace(resolved, text=text)

    @staticmethod
    def _is_mapped_type(node: Any) -> bool:
        for child in _named(node):
            if child.type == "index_signature" and any(
                c.type == "mapped_type_clause" for c in _named(child)
            ):
                return True
        return False

    def _type_parameter_names(self, bound: BoundFile, node: Any) -> list[str]:
        names = []
        for parameter in _named(node.child_by_field_name("type_parameters")):
            name_node = parameter.child_by_field_name("name")
            if parameter.type == "type_parameter" and name_node is not None:
                names.append(bound.text(name_node))
        return names

    # =========================================================================
    # Declarations
    # =========================================================================

    def build_unit(self, file_name: str) -> SourceUnit:
        """Build the declaration model of one added file."""
        bound = self._files[posixpath.normpath(file_name)]
        unit = SourceUnit(file_name=bound.file_name)

        for node in bound.top_level:
            declaration = self.declaration(bound, node)
            if isinstance(declaration, ClassDecl):
                unit.classes.append(declaration)
            elif isinstance(declaration, InterfaceDecl):
                unit.interfaces.append(declaration)
            elif isinstance(declaration, EnumDecl):
                unit.enums.append(declaration)
            elif isinstance(declaration, TypeAliasDecl):
                unit.type_aliases.append(declaration)

        return unit

    def declaration(self, bound: BoundFile, node: Any) -> Declaration:
        """Build (once) the declaration object of a declaration node."""
        key = (bound.file_name, node.start_byte)
        if key in self._declarations:
            return self._declarations[key]

        if node.type in CLASS_NODES:
            return self._build_class(bound, node, key)
        if node.type in INTERFACE_NODES:
            return self._build_interface(bound, node, key)
        if node.type in ENUM_NODES:
            return self._build_enum(bound, node, key)
        return self._build_type_alias(bound, node, key)

    def _symbol(self, bound: BoundFile, node: Any) -> SymbolRef | None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        name = bound.text(name_node)
        return SymbolRef(name, bound.fully_qualified_name(name))

    def _build_class(self, bound: BoundFile, node: Any, key: tuple[str, int]) -> ClassDecl:
        type_parameters = self._type_parameter_names(bound, node)
        declaration = ClassDecl(symbol=self._symbol(bound, node), type_parameters=type_parameters)
        self._declarations[key] = declaration

        scope = Scope(bound).with_type_parameters(type_parameters)
        owner = declaration.symbol.fully_qualified_name if declaration.symbol else None

        implementations: list[ConstructorDecl] = []
        overloads: list[ConstructorDecl] = []
        signatures: list[MethodDecl] = []
        implemented: set[str] = set()

        for member in _named(node.child_by_field_name("body")):
            if member.type == "public_field_definition":
                declaration.properties.append(self._property(member, scope, owner))
            elif member.type == "method_definition":
                name = self._member_name(bound, member)
                if name == "constructor":
                    implementations.append(ConstructorDecl(self._parameters(member, scope)))
                elif not self._is_accessor(member):
                    method = self._method(member, scope, owner)
                    declaration.methods.append(method)
                    implemented.add(name)
            elif member.type in ("method_signature", "abstract_method_signature"):
                if self._member_name(bound, member) == "constructor":
                    overloads.append(ConstructorDecl(self._parameters(member, scope)))
                elif not self._is_accessor(member):
                    signatures.append(self._method(member, scope, owner))

        # overload signatures only count when there is no implementation
        declaration.methods.extend(
            s for s in signatures if s.symbol is None or s.symbol.name not in implemented
        )
        declaration.constructors = implementations or overloads

        heritage = next((c for c in _named(node) if c.type == "class_heritage"), None)
        for clause in _named(heritage):
            if clause.type == "extends_clause":
                self._bind_extends(declaration, clause, scope)
            elif clause.type == "implements_clause":
                declaration.implements = [self.resolve_type(t, scope) for t in _named(clause)]

        return declaration

    def _bind_extends(self, declaration: ClassDecl, clause: Any, scope: Scope) -> None:
        value = clause.child_by_field_name("value") or _first_named(clause)
        if value is None:
            return
        text = scope.file.text(value)

        if value.type == "identifier":
            target = self.lookup(scope.file, text)
            if target is not None and target.node.type in CLASS_NODES:
                declaration.base_class = self.declaration(target.file, target.node)
                return
            arguments = [
                self.resolve_type(argument, scope)
                for argument in _named(clause.child_by_field_name("type_arguments"))
            ]
            declaration.base_types = [self._resolve_reference(scope, text, text, arguments)]
        elif value.type == "call_expression":
            declaration.base_types = self._mixin_types(value, scope)
        else:
            name = text.rsplit(".", 1)[-1]
            declaration.base_types = [TypeRef(text, symbol=SymbolRef(name, text))]

    def _mixin_types(self, call: Any, scope: Scope) -> list[TypeRef]:
        """Applied mixins of `A(B(Base))`, outermost first, then the base."""
        types: list[TypeRef] = []
        node = call
        while node is not None and node.type == "call_expression":
            function = node.child_by_field_name("function")
            if function is not None:
                types.append(self._callee_type(function, scope))
            node = _first_named(node.child_by_field_name("arguments"))

        if node is not None:
            text = scope.file.text(node)
            if node.type == "identifier":
                types.append(self._resolve_reference(scope, text, text, []))
            else:
                types.append(TypeRef(text))
        return types

    def _callee_type(self, function: Any, scope: Scope) -> TypeRef:
        text = scope.file.text(function)
        if function.type == "identifier":
            target = self.lookup(scope.file, text)
            symbol = target.symbol if target is not None else self._ambient_symbol(scope.file, text)
            return TypeRef(text, symbol=symbol)
        return TypeRef(text, symbol=SymbolRef(text.rsplit(".", 1)[-1], text))

    def _build_interface(
        self, bound: BoundFile, node: Any, key: tuple[str, int]
    ) -> InterfaceDecl:
        type_parameters = self._type_parameter_names(bound, node)
        declaration = InterfaceDecl(
            symbol=self._symbol(bound, node), type_parameters=type_parameters
        )
        self._declarations[key] = declaration

        scope = Scope(bound).with_type_parameters(type_parameters)
        owner = declaration.symbol.fully_qualified_name if declaration.symbol else None
        literal = self._object_members(node.child_by_field_name("body"), scope, owner)
        declaration.properties = literal.properties
        declaration.methods = literal.methods

        extends = next((c for c in _named(node) if c.type == "extends_type_clause"), None)
        for base in _named(extends):
            target = self._heritage_target(base, scope)
            if target is None:
                continue
            declaration.base_declarations.extend(
                self.declaration(target.file, n) for n in target.nodes if n.type in DECLARATION_NODES
            )

        return declaration

    def _heritage_target(self, node: Any, scope: Scope) -> Target | None:
        if node.type == "generic_type":
            node = node.child_by_field_name("name")
        if node is None:
            return None

        if node.type == "nested_type_identifier":
            module_node = node.child_by_field_name("module")
            name_node = node.child_by_field_name("name")
            if module_node is None or name_node is None:
                return None
            binding = scope.file.imports.get(scope.file.text(module_node))
            if binding is None or binding.imported is not None:
                return None
            module = self.resolve_module(scope.file, binding.module)
            if module is None:
                return None
            return self.resolve_export(module, scope.file.text(name_node))

        return self.lookup(scope.file, scope.file.text(node))

    def _build_enum(self, bound: BoundFile, node: Any, key: tuple[str, int]) -> EnumDecl:
        declaration = EnumDecl(symbol=self._symbol(bound, node))
        self._declarations[key] = declaration

        for member in _named(node.child_by_field_name("body")):
            if member.type == "enum_assignment":
                member = member.child_by_field_name("name")
            if member is None:
                continue
            if member.type in ("property_identifier", "string", "number", "identifier"):
                declaration.members.append(_unquote(bound.text(member)))

        return declaration

    def _build_type_alias(
        self, bound: BoundFile, node: Any, key: tuple[str, int]
    ) -> TypeAliasDecl:
        type_parameters = self._type_parameter_names(bound, node)
        declaration = TypeAliasDecl(
            symbol=self._symbol(bound, node), type_parameters=type_parameters
        )
        self._declarations[key] = declaration

        value = node.child_by_field_name("value")
        if value is None:
            return declaration

        declaration.value_kind = value.type
        if declaration.symbol is not None:
            target = Target(bound, declaration.symbol.name, [node])
            declaration.type = self._expand_alias(target, declaration.symbol.name, [])

        if value.type == "object_type" and not self._is_mapped_type(value):
            scope = Scope(bound).with_type_parameters(type_parameters)
            owner = declaration.symbol.fully_qualified_name if declaration.symbol else None
            declaration.type_literal = self._object_members(value, scope, owner)
        elif value.type == "object_type":
            declaration.value_kind = "mapped_type"

        return declaration

    # =========================================================================
    # Members
    # =========================================================================

    def _object_members(self, body: Any, scope: Scope, owner: str | None) -> ObjectLiteral:
        literal = ObjectLiteral()
        for member in _named(body):
            if member.type == "property_signature":
                literal.properties.append(self._property(member, scope, owner))
            elif member.type == "method_signature":
                literal.methods.append(self._method(member, scope, owner))
        return literal

    def _member_name(self, bound: BoundFile, node: Any) -> str | None:
        name_node = node.child_by_field_name("name")
        if name_node is None or name_node.type == "computed_property_name":
            return None
        return _unquote(bound.text(name_node))

    def _member_symbol(self, bound: BoundFile, node: Any, owner: str | None) -> SymbolRef | None:
        name = self._member_name(bound, node)
        if name is None:
            return None
        return SymbolRef(name, f"{owner}.{name}" if owner else None)

    @staticmethod
    def _is_accessor(node: Any) -> bool:
        name_node = node.child_by_field_name("name")
        for child in node.children:
            if name_node is not None and child.start_byte >= name_node.start_byte:
                break
            if child.type in ("get", "set"):
                return True
        return False

    @staticmethod
    def _modifier_flags(bound: BoundFile, node: Any, stop: Any) -> ModifierFlags:
        flags = ModifierFlags.NONE
        for child in node.children:
            if stop is not None and child.start_byte >= stop.start_byte:
                break
            if child.type == "accessibility_modifier":
                flags |= MODIFIER_TOKENS[bound.text(child)]
            elif child.type in MODIFIER_TOKENS:
                flags |= MODIFIER_TOKENS[child.type]
        return flags

    def _property(self, node: Any, scope: Scope, owner: str | None) -> PropertyDecl:
        bound = scope.file
        name_node = node.child_by_field_name("name")
        type_node = node.child_by_field_name("type")

        if type_node is not None:
            type_ref = self.resolve_type(type_node, scope)
        else:
            type_ref = self._infer_initializer(node.child_by_field_name("value"), scope)

        return PropertyDecl(
            symbol=self._member_symbol(bound, node, owner),
            type=type_ref,
            modifier_flags=self._modifier_flags(bound, node, name_node),
        )

    def _method(self, node: Any, scope: Scope, owner: str | None) -> MethodDecl:
        bound = scope.file
        flags = self._modifier_flags(bound, node, node.child_by_field_name("name"))
        scope = scope.with_type_parameters(self._type_parameter_names(bound, node))

        return_node = node.child_by_field_name("return_type")
        if return_node is not None:
            return_type = self.resolve_type(return_node, scope)
        else:
            return_type = self._infer_return(node, flags)

        return MethodDecl(
            symbol=self._member_symbol(bound, node, owner),
            return_type=return_type,
            parameters=self._parameters(node, scope),
            modifier_flags=flags,
        )

    def _parameters(self, node: Any, scope: Scope) -> list[ParameterDecl]:
        bound = scope.file
        parameters = []
        for parameter in _named(node.child_by_field_name("parameters")):
            if parameter.type not in ("required_parameter", "optional_parameter"):
                continue
            pattern = parameter.child_by_field_name("pattern")
            if pattern is None or pattern.type == "this":
                continue

            identifier = pattern
            if pattern.type == "rest_pattern":
                identifier = _first_named(pattern)
            name = bound.text(identifier if identifier is not None else pattern)
            is_identifier = identifier is not None and identifier.type == "identifier"

            type_node = parameter.child_by_field_name("type")
            if type_node is not None:
                type_ref = self.resolve_type(type_node, scope)
            else:
                type_ref = self._infer_initializer(parameter.child_by_field_name("value"), scope)

            parameters.append(
                ParameterDecl(
                    name=name,
                    symbol=SymbolRef(name) if is_identifier else None,
                    type=type_ref,
                    modifier_flags=self._modifier_flags(bound, parameter, pattern),
                )
            )
        return parameters

    def _infer_initializer(self, value: Any, scope: Scope) -> TypeRef:
        """Type of a simple initializer; anything else is `any`."""
        if value is None:
            return TypeRef("any")

        if value.type == "new_expression":
            constructor = value.child_by_field_name("constructor")
            if constructor is not None and constructor.type == "identifier":
                name = scope.file.text(constructor)
                arguments = [
                    self.resolve_type(argument, scope)
                    for argument in _named(value.child_by_field_name("type_arguments"))
                ]
                return self._resolve_reference(scope, name, name, arguments)
        elif value.type == "number":
            return TypeRef("number")
        elif value.type in ("string", "template_string"):
            return TypeRef("string")
        elif value.type in ("true", "false"):
            return TypeRef("boolean")

        return TypeRef("any")

    def _infer_return(self, node: Any, flags: ModifierFlags) -> TypeRef:
        body = node.child_by_field_name("body")
        if body is None:
            return TypeRef("any")

        inner = TypeRef("any") if self._returns_value(body) else TypeRef("void")
        if flags & ModifierFlags.ASYNC:
            return TypeRef(f"Promise<{inner.text}>", symbol=PROMISE_SYMBOL, type_arguments=[inner])
        return inner

    def _returns_value(self, node: Any) -> bool:
        for child in _named(node):
            if child.type in FUNCTION_NODES:
                continue
            if child.type == "return_statement" and _named(child):
                return True
            if self._returns_value(child):
                return True
        return False

"""Diagram model produced by the translator.

The renderer consumes these read-only. Entities are a tagged union
(ClassEntity | InterfaceEntity | EnumEntity | TypeAliasEntity) sharing
`name` and `id`; each carries a `kind` tag and its kind-specific payload.
Serialization via to_dict() uses the camelCase keys renderers expect.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal


class HeritageClauseType(Enum):
    """Direction-less label of an inheritance edge."""

    EXTENDS = "extends"
    IMPLEMENTS = "implements"


class AssociationSource(Enum):
    """Which member kind produced an association edge."""

    PROPERTY = "property"
    RETURN = "return"
    ARGUMENT = "argument"


@dataclass
class PropertyDetail:
    """A property (field, signature or promoted constructor parameter).

    Attributes:
        name: Property name
        modifier_flags: Opaque modifier bitset, passed through to the renderer
        type: Display string of the declared type
        type_ids: Identities referenced by the type (empty for primitives)
    """

    name: str
    modifier_flags: int = 0
    type: str | None = None
    type_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "modifierFlags": self.modifier_flags,
            "type": self.type,
            "typeIds": list(self.type_ids),
        }


@dataclass
class ArgumentIds:
    """Resolved identities of one method parameter."""

    name: str
    ids: list[str] = field(default_factory=list)
    type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"name": self.name, "ids": list(self.ids), "type": self.type}


@dataclass
class MethodDetail:
    """A method or method signature.

    Attributes:
        name: Method name
        modifier_flags: Opaque modifier bitset
        return_type: Display string of the return type
        return_type_ids: Identities of the return type, None when it has no symbol
        arguments: Parameter type display strings in declaration order
        argument_ids: Per-parameter identities, None unless one resolves
    """

    name: str
    modifier_flags: int = 0
    return_type: str | None = None
    return_type_ids: list[str] | None = None
    arguments: list[str] = field(default_factory=list)
    argument_ids: list[ArgumentIds] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {
            "name": self.name,
            "modifierFlags": self.modifier_flags,
            "returnType": self.return_type,
            "arguments": list(self.arguments),
        }
        if self.return_type_ids is not None:
            result["returnTypeIds"] = list(self.return_type_ids)
        if self.argument_ids is not None:
            result["argumentIds"] = [a.to_dict() for a in self.argument_ids]
        return result


@dataclass
class HeritageClause:
    """Directed inheritance edge from `class_name` to `clause`.

    Attributes:
        clause: Display name of the target (base class, mixin or interface)
        clause_type_id: Identity of the target, empty when unresolved
        class_name: Display name of the source declaration
        class_type_id: Identity of the source declaration
        type: Extends or Implements
    """

    clause: str
    clause_type_id: str
    class_name: str
    class_type_id: str
    type: HeritageClauseType

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "clause": self.clause,
            "clauseTypeId": self.clause_type_id,
            "className": self.class_name,
            "classTypeId": self.class_type_id,
            "type": self.type.value,
        }


def _members_dict(
    properties: list[PropertyDetail], methods: list[MethodDetail]
) -> dict[str, Any]:
    return {
        "properties": [p.to_dict() for p in properties],
        "methods": [m.to_dict() for m in methods],
    }


@dataclass
class ClassEntity:
    """A class node."""

    name: str
    id: str = ""
    properties: list[PropertyDetail] = field(default_factory=list)
    methods: list[MethodDetail] = field(default_factory=list)
    heritage_clauses: list[HeritageClause] = field(default_factory=list)
    kind: Literal["class"] = "class"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind,
            "name": self.name,
            "id": self.id,
            **_members_dict(self.properties, self.methods),
            "heritageClauses": [h.to_dict() for h in self.heritage_clauses],
        }


@dataclass
class InterfaceEntity:
    """An interface node.

    Repeated declarations of one interface name share the `properties` and
    `methods` lists after merging, so every copy observes the merged members.
    """

    name: str
    id: str = ""
    properties: list[PropertyDetail] = field(default_factory=list)
    methods: list[MethodDetail] = field(default_factory=list)
    heritage_clauses: list[HeritageClause] = field(default_factory=list)
    kind: Literal["interface"] = "interface"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind,
            "name": self.name,
            "id": self.id,
            **_members_dict(self.properties, self.methods),
            "heritageClauses": [h.to_dict() for h in self.heritage_clauses],
        }


@dataclass
class EnumEntity:
    """An enum node; members are names only, values are not kept."""

    name: str
    id: str = ""
    enum_items: list[str] = field(default_factory=list)
    kind: Literal["enum"] = "enum"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind,
            "name": self.name,
            "id": self.id,
            "enumItems": list(self.enum_items),
        }


@dataclass
class TypeAliasEntity:
    """A type alias whose value is an object literal shape."""

    name: str
    id: str = ""
    properties: list[PropertyDetail] = field(default_factory=list)
    methods: list[MethodDetail] = field(default_factory=list)
    kind: Literal["type"] = "type"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind,
            "name": self.name,
            "id": self.id,
            **_members_dict(self.properties, self.methods),
        }


Entity = ClassEntity | InterfaceEntity | EnumEntity | TypeAliasEntity
MemberEntity = ClassEntity | InterfaceEntity | TypeAliasEntity


@dataclass
class Association:
    """Inferred "has-a" edge between two entities.

    Attributes:
        from_id: Identity of the owning entity
        from_name: Display name of the owning entity
        to_id: Identity of the referenced entity
        to_name: Display name of the referenced entity
        label: Member or parameter name that holds the reference
        source: Member kind the reference came from
        multiplicity: "0..*" for array-typed members, otherwise "1"
    """

    from_id: str
    from_name: str
    to_id: str
    to_name: str
    label: str
    source: AssociationSource = AssociationSource.PROPERTY
    multiplicity: str = "1"

    @property
    def key(self) -> tuple[str, str, str, str]:
        """Identity of the edge within one run."""
        return (self.from_id, self.to_id, self.label, self.source.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "fromId": self.from_id,
            "fromName": self.from_name,
            "toId": self.to_id,
            "toName": self.to_name,
            "label": self.label,
            "source": self.source.value,
            "multiplicity": self.multiplicity,
        }


@dataclass
class FileDeclaration:
    """Everything translated from one source unit.

    Attributes:
        file_name: Path of the source unit
        classes: Class entities in declaration order
        interfaces: Interface entities (merged members shared across files)
        enums: Enum entities
        types: Object-shaped type alias entities
        heritage_clauses: One inner list per declaration that had clauses
        member_associations: Associations owned by entities of this file
    """

    file_name: str
    classes: list[ClassEntity] = field(default_factory=list)
    interfaces: list[InterfaceEntity] = field(default_factory=list)
    enums: list[EnumEntity] = field(default_factory=list)
    types: list[TypeAliasEntity] = field(default_factory=list)
    heritage_clauses: list[list[HeritageClause]] = field(default_factory=list)
    member_associations: list[Association] = field(default_factory=list)

    @property
    def entities(self) -> list[Entity]:
        """All entities of this file: classes, interfaces, enums, types."""
        return [*self.classes, *self.interfaces, *self.enums, *self.types]

    @property
    def member_entities(self) -> list[MemberEntity]:
        """Entities that carry properties and methods."""
        return [*self.classes, *self.interfaces, *self.types]

    @property
    def entity_count(self) -> int:
        """Return total number of entities."""
        return len(self.classes) + len(self.interfaces) + len(self.enums) + len(self.types)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "fileName": self.file_name,
            "classes": [c.to_dict() for c in self.classes],
            "interfaces": [i.to_dict() for i in self.interfaces],
            "enums": [e.to_dict() for e in self.enums],
            "types": [t.to_dict() for t in self.types],
            "heritageClauses": [
                [h.to_dict() for h in group] for group in self.heritage_clauses
            ],
            "memberAssociations": [a.to_dict() for a in self.member_associations],
        }

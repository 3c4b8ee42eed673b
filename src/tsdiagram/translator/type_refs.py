"""Type reference resolution.

Maps a resolved type to the identities ("type ids") of the declared types it
refers to, and renders the display string used for member types.
"""

import re

from tsdiagram.frontend.model import TypeKind, TypeRef

# Module qualifiers the checker prints for types from other files
IMPORT_QUALIFIER = re.compile(r"import\([\d\D]*?\)\.")


def resolve_type_ids(type_ref: TypeRef | None) -> list[str]:
    """Return the identities a type refers to.

    Unions and intersections yield the identities of every constituent in
    order (duplicates kept); arrays yield those of their element type; type
    parameters never yield any. Unresolvable shapes yield an empty list.

    Args:
        type_ref: Resolved type, may be None

    Returns:
        Fully-qualified names of the referenced declarations
    """
    if type_ref is None:
        return []

    ids: list[str | None] = []
    kind = type_ref.kind

    if kind in (TypeKind.CLASS, TypeKind.INTERFACE, TypeKind.ENUM):
        ids.append(_fully_qualified_name(type_ref))
    elif kind in (TypeKind.UNION, TypeKind.INTERSECTION):
        for constituent in type_ref.constituents:
            ids.extend(resolve_type_ids(constituent))
    elif kind is TypeKind.ARRAY:
        return resolve_type_ids(type_ref.element_type)
    elif kind is TypeKind.ANONYMOUS:
        alias = type_ref.alias_symbol
        ids.append(alias.fully_qualified_name if alias else None)
    elif kind is TypeKind.TYPE_PARAMETER:
        return []
    else:
        ids.append(_fully_qualified_name(type_ref))

    return [type_id for type_id in ids if type_id]


def _fully_qualified_name(type_ref: TypeRef) -> str | None:
    if type_ref.symbol is None:
        return None
    return type_ref.symbol.fully_qualified_name


def type_display(type_ref: TypeRef | None) -> str | None:
    """Render the display string of a type.

    Arrays render as `<element>[]` (bare `[]` when the element has no
    display text); everything else is the type text with `import("...").`
    qualifiers removed.
    """
    if type_ref is None:
        return None

    if type_ref.kind is TypeKind.ARRAY:
        element = type_ref.element_type
        name = type_display(element) if element is not None else None
        if name:
            return name + "[]"
        return "[]"

    return IMPORT_QUALIFIER.sub("", type_ref.text)

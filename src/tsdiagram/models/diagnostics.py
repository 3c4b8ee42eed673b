"""Translation diagnostics and run result.

Nothing in the translation layer aborts a run. Problems are recorded as
Diagnostic entries and returned next to the translated declarations in a
TranslationResult.
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from tsdiagram.models.diagram import Association, ClassEntity, Entity, FileDeclaration

EMPTY_RESULT_MESSAGE = "Could not process any class / interface / enum / type"


class DiagnosticKind(Enum):
    """Kind of non-fatal problem met during translation."""

    MISSING_IDENTITY = "missing_identity"
    UNRESOLVABLE_NAME = "unresolvable_name"
    UNCONVERTIBLE_ALIAS = "unconvertible_alias"
    EMPTY_RESULT = "empty_result"


# Log level each kind is reported at
DIAGNOSTIC_LEVELS: dict[DiagnosticKind, int] = {
    DiagnosticKind.MISSING_IDENTITY: logging.WARNING,
    DiagnosticKind.UNRESOLVABLE_NAME: logging.DEBUG,
    DiagnosticKind.UNCONVERTIBLE_ALIAS: logging.DEBUG,
    DiagnosticKind.EMPTY_RESULT: logging.ERROR,
}


@dataclass
class Diagnostic:
    """Non-fatal problem encountered while translating a declaration.

    Attributes:
        kind: Taxonomy entry
        message: Human-readable description
        entity_name: Display name of the declaration, when known
        file_name: Source unit being translated
    """

    kind: DiagnosticKind
    message: str
    entity_name: str | None = None
    file_name: str | None = None

    @property
    def level(self) -> int:
        """Logging level this diagnostic is reported at."""
        return DIAGNOSTIC_LEVELS[self.kind]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "entity_name": self.entity_name,
            "file_name": self.file_name,
        }


@dataclass
class TranslationResult:
    """Outcome of one translation run.

    Attributes:
        declarations: One FileDeclaration per source unit, in input order
        diagnostics: Problems recorded during the run
        failure_message: Set when the run produced no entity at all
        placeholder: Entity to render instead of an empty diagram
        member_associations: Whether association inference ran
        translated_at: When the run finished
    """

    declarations: list[FileDeclaration] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    failure_message: str | None = None
    placeholder: ClassEntity | None = None
    member_associations: bool = False
    translated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Ensure timestamp is timezone-aware UTC."""
        if self.translated_at.tzinfo is None:
            self.translated_at = self.translated_at.replace(tzinfo=UTC)

    @property
    def entities(self) -> list[Entity]:
        """All entities across every source unit."""
        return [e for d in self.declarations for e in d.entities]

    @property
    def entity_count(self) -> int:
        """Return total number of entities."""
        return sum(d.entity_count for d in self.declarations)

    @property
    def associations(self) -> list[Association]:
        """All association edges across every source unit."""
        return [a for d in self.declarations for a in d.member_associations]

    @property
    def failed(self) -> bool:
        """True when the run produced nothing renderable."""
        return self.failure_message is not None

    def get_diagnostics(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Get diagnostics of one kind."""
        return [d for d in self.diagnostics if d.kind == kind]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {
            "declarations": [d.to_dict() for d in self.declarations],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "entity_count": self.entity_count,
            "member_associations": self.member_associations,
            "translated_at": self.translated_at.isoformat(),
        }
        if self.failure_message is not None:
            result["failure_message"] = self.failure_message
        if self.placeholder is not None:
            result["placeholder"] = self.placeholder.to_dict()
        return result

"""Per-run translation state.

A TranslationContext lives for exactly one translation run. It owns the
interface merge registry and the diagnostics collected along the way, and
is discarded when the run completes.
"""

from tsdiagram.models.diagnostics import Diagnostic, DiagnosticKind
from tsdiagram.models.diagram import InterfaceEntity
from tsdiagram.utils.logging import get_logger

_logger = get_logger(__name__)


class TranslationContext:
    """State shared by every declaration of one translation run.

    Attributes:
        member_associations: Whether association inference runs after translation
        diagnostics: Problems recorded so far, in order
        file_name: Source unit currently being translated
    """

    def __init__(self, member_associations: bool = False) -> None:
        self.member_associations = member_associations
        self.diagnostics: list[Diagnostic] = []
        self.file_name: str | None = None
        self._interfaces: dict[str, InterfaceEntity] = {}

    # =========================================================================
    # Interface merge registry
    # =========================================================================

    def register_interface(self, interface: InterfaceEntity) -> InterfaceEntity:
        """Register an interface, merging it with earlier same-named ones.

        On a repeated name the new members are appended to the lists of the
        first-seen entity, and the new entity is rebound to those lists, so
        every copy observes the merged member set.

        Args:
            interface: Freshly built interface entity

        Returns:
            The same entity, with merged member lists on a repeat
        """
        previous = self._interfaces.get(interface.name)
        if previous is not None and previous is not interface:
            previous.methods.extend(interface.methods)
            previous.properties.extend(interface.properties)

            interface.methods = previous.methods
            interface.properties = previous.properties
            _logger.debug(f"Merged declaration of interface {interface.name}")

        self._interfaces[interface.name] = interface
        return interface

    def get_interface(self, name: str) -> InterfaceEntity | None:
        """Get the latest registered interface of a name."""
        return self._interfaces.get(name)

    @property
    def interface_names(self) -> list[str]:
        """Names of all registered interfaces, in first-seen order."""
        return list(self._interfaces)

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def report(
        self,
        kind: DiagnosticKind,
        message: str,
        entity_name: str | None = None,
    ) -> Diagnostic:
        """Record a diagnostic and log it at the level of its kind.

        Args:
            kind: Taxonomy entry
            message: Description
            entity_name: Display name of the declaration, when known

        Returns:
            The recorded diagnostic
        """
        diagnostic = Diagnostic(
            kind=kind,
            message=message,
            entity_name=entity_name,
            file_name=self.file_name,
        )
        self.diagnostics.append(diagnostic)
        _logger.structured(
            diagnostic.level,
            message,
            kind=kind.value,
            entity=entity_name,
            file=self.file_name,
        )
        return diagnostic

    def get_diagnostics(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Get diagnostics of one kind."""
        return [d for d in self.diagnostics if d.kind == kind]

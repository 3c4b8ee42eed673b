"""Abstract base class for declaration frontends.

A frontend turns source files into SourceUnit objects. Each frontend:
1. Loads its parser or type checker
2. Reads the sources below an input path
3. Resolves symbols and types
4. Produces the declaration model consumed by the translator
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tsdiagram.frontend.model import SourceUnit


@dataclass
class FrontendStats:
    """Counters of the last frontend run.

    Attributes:
        files_parsed: Number of files successfully parsed
        files_failed: Number of files that could not be read or parsed
        declarations: Number of top-level declarations produced
    """

    files_parsed: int = 0
    files_failed: int = 0
    declarations: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "files_parsed": self.files_parsed,
            "files_failed": self.files_failed,
            "declarations": self.declarations,
        }


class DeclarationFrontend(ABC):
    """Abstract interface for pluggable declaration frontends.

    Attributes:
        name: Frontend identifier (e.g., "tree-sitter")
        stats: Counters of the last execute() call
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.stats = FrontendStats()
        self._version: str | None = None

    @property
    def version(self) -> str | None:
        """Get the frontend version (cached after first check)."""
        if self._version is None:
            self._version = self.get_version()
        return self._version

    @abstractmethod
    def check_available(self) -> bool:
        """Verify the frontend's parser can be loaded.

        Returns:
            True if the frontend is usable, False otherwise
        """

    @abstractmethod
    def get_version(self) -> str | None:
        """Return the parser version string, if known."""

    @abstractmethod
    def execute(self, input_path: Path) -> list[SourceUnit]:
        """Read the sources below input_path and build their declarations.

        Args:
            input_path: Source root directory or a single file

        Returns:
            One SourceUnit per source file, in a stable order

        Raises:
            FrontendNotAvailableError: If the parser cannot be loaded
            FrontendExecutionError: If input_path cannot be processed at all
        """

    def get_metadata(self) -> dict[str, Any]:
        """Get frontend metadata for logging and debugging."""
        return {
            "name": self.name,
            "version": self.version,
            "available": self.check_available(),
            "stats": self.stats.to_dict(),
        }


class FrontendNotAvailableError(Exception):
    """Raised when a frontend's parser is not installed or cannot load."""

    def __init__(self, frontend_name: str, message: str | None = None) -> None:
        self.frontend_name = frontend_name
        self.message = message or f"Frontend not available: {frontend_name}"
        super().__init__(self.message)


class FrontendExecutionError(Exception):
    """Raised when a frontend cannot process its input at all."""

    def __init__(
        self,
        frontend_name: str,
        message: str,
        path: str | None = None,
    ) -> None:
        self.frontend_name = frontend_name
        self.path = path
        full_message = f"Frontend execution failed: {frontend_name} - {message}"
        if path is not None:
            full_message += f" ({path})"
        super().__init__(full_message)

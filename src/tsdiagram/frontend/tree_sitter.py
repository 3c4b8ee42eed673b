"""TypeScript declaration frontend via tree-sitter.

Parses TypeScript sources with tree-sitter-language-pack and binds symbols
with the best-effort Binder. All files of one execute() call are bound
together, so imports between them resolve.

NOTE: tree-sitter is a required dependency. No fallback parsing is
implemented - if the parser cannot be loaded, the frontend is unavailable.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

from tsdiagram.config import DEFAULT_EXCLUDES
from tsdiagram.frontend.base import (
    DeclarationFrontend,
    FrontendExecutionError,
    FrontendNotAvailableError,
    FrontendStats,
)
from tsdiagram.frontend.binder import Binder
from tsdiagram.frontend.model import SourceUnit
from tsdiagram.utils.logging import get_logger

_logger = get_logger(__name__)


class TreeSitterFrontend(DeclarationFrontend):
    """Declaration frontend for TypeScript using tree-sitter.

    Attributes:
        include: Glob selecting source files below the input directory
        exclude_patterns: Glob patterns of paths to skip
    """

    def __init__(
        self,
        include: str = "**/*.ts",
        exclude_patterns: list[str] | None = None,
    ) -> None:
        """Initialize the frontend.

        Args:
            include: Glob selecting source files below the input directory
            exclude_patterns: Glob patterns to exclude (default: common ignores)
        """
        super().__init__("tree-sitter")
        self.include = include
        self.exclude_patterns = (
            list(DEFAULT_EXCLUDES) if exclude_patterns is None else exclude_patterns
        )
        self._parser: Any = None
        self._init_error: str | None = None

    def _ensure_initialized(self) -> None:
        """Load the TypeScript parser.

        Raises:
            FrontendNotAvailableError: If tree-sitter cannot be initialized
        """
        if self._parser is not None:
            return

        if self._init_error:
            raise FrontendNotAvailableError(self.name, self._init_error)

        try:
            from tree_sitter_language_pack import get_parser

            self._parser = get_parser("typescript")
            _logger.debug("Initialized tree-sitter parser for typescript")
        except ImportError as e:
            self._init_error = f"tree-sitter-language-pack not installed: {e}"
            raise FrontendNotAvailableError(self.name, self._init_error) from e
        except Exception as e:
            self._init_error = f"Failed to initialize typescript parser: {e}"
            raise FrontendNotAvailableError(self.name, self._init_error) from e

    def check_available(self) -> bool:
        """Check if the TypeScript parser can be loaded.

        Returns:
            True if tree-sitter is functional, False otherwise
        """
        try:
            self._ensure_initialized()
            return True
        except FrontendNotAvailableError:
            return False

    def get_version(self) -> str | None:
        """Get the installed tree-sitter-language-pack version."""
        try:
            return version("tree-sitter-language-pack")
        except PackageNotFoundError:
            return None

    # =========================================================================
    # Discovery
    # =========================================================================

    def discover_files(self, directory: Path) -> list[Path]:
        """Find the source files below a directory.

        Args:
            directory: Root directory to scan

        Returns:
            Matching files, sorted for a stable order
        """
        # "**/node_modules/**" -> any directory named node_modules
        excluded_dirs: set[str] = set()
        path_patterns: list[str] = []
        for pattern in self.exclude_patterns:
            name = pattern.removeprefix("**/").removesuffix("/**")
            if pattern.startswith("**/") and pattern.endswith("/**") and not set(name) & set("*?[/"):
                excluded_dirs.add(name)
            else:
                path_patterns.append(pattern)

        files = []
        for file_path in directory.glob(self.include):
            if not file_path.is_file():
                continue
            relative = file_path.relative_to(directory)
            if any(part in excluded_dirs for part in relative.parts[:-1]):
                continue
            if any(_path_matches(relative, pattern) for pattern in path_patterns):
                continue
            files.append(file_path)

        return sorted(files)

    # =========================================================================
    # Parsing
    # =========================================================================

    def execute(self, input_path: Path) -> list[SourceUnit]:
        """Parse every source file below input_path.

        Args:
            input_path: Source root directory or a single file

        Returns:
            One SourceUnit per parsed file

        Raises:
            FrontendNotAvailableError: If tree-sitter is not available
            FrontendExecutionError: If input_path does not exist
        """
        self._ensure_initialized()

        if not input_path.exists():
            raise FrontendExecutionError(self.name, "input path not found", str(input_path))

        if input_path.is_file():
            files = [input_path]
        else:
            files = self.discover_files(input_path)

        _logger.info(f"Parsing {len(files)} source files under {input_path}")
        return self.parse_files(files)

    def parse_files(self, paths: list[Path]) -> list[SourceUnit]:
        """Parse and bind a set of files.

        Unreadable files are logged, counted as failed and skipped.
        """
        sources: dict[str, str] = {}
        failed = 0
        for path in paths:
            try:
                sources[path.as_posix()] = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                failed += 1
                _logger.warning(f"Skipping unreadable file {path}: {e}")

        units = self.parse_sources(sources)
        self.stats.files_failed += failed
        return units

    def parse_sources(self, sources: dict[str, str]) -> list[SourceUnit]:
        """Parse and bind in-memory sources.

        Args:
            sources: Source text by file name

        Returns:
            One SourceUnit per source, in the given order
        """
        self._ensure_initialized()
        self.stats = FrontendStats()

        binder = Binder()
        for file_name, text in sources.items():
            source = text.encode("utf-8")
            tree = self._parser.parse(source)
            binder.add_file(file_name, source, tree.root_node)
            self.stats.files_parsed += 1

        units = [binder.build_unit(name) for name in binder.file_names]
        self.stats.declarations = sum(unit.declaration_count for unit in units)

        _logger.info(
            f"Parsed {self.stats.files_parsed} files "
            f"({self.stats.declarations} declarations)"
        )
        return units

    def parse_source(self, text: str, file_name: str = "source.ts") -> SourceUnit:
        """Parse a single in-memory source."""
        return self.parse_sources({file_name: text})[0]


def _path_matches(relative: Path, pattern: str) -> bool:
    """Match a relative file path against an exclude glob.

    A leading "**/" also matches at the root. A trailing "/**" matches
    every file below a matching directory.
    """
    candidates = {pattern, pattern.removeprefix("**/")}
    if pattern.endswith("/**"):
        prefixes = {c.removesuffix("/**") for c in candidates} - {"", "**"}
        directories = [p for p in relative.parents if p.parts]
        return any(d.match(prefix) for prefix in prefixes for d in directories)
    candidates.discard("")
    return any(relative.match(candidate) for candidate in candidates)

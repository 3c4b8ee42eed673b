"""Translation pipeline orchestrator.

Runs one translation: source units from a frontend are turned into
FileDeclarations one file at a time, then (optionally) member associations
are inferred once over the complete set.
"""

import logging
from pathlib import Path

from tsdiagram.config import TsDiagramConfig
from tsdiagram.frontend.base import DeclarationFrontend
from tsdiagram.frontend.model import SourceUnit
from tsdiagram.frontend.tree_sitter import TreeSitterFrontend
from tsdiagram.models.diagnostics import (
    EMPTY_RESULT_MESSAGE,
    DiagnosticKind,
    TranslationResult,
)
from tsdiagram.models.diagram import ClassEntity
from tsdiagram.translator.associations import infer_associations
from tsdiagram.translator.context import TranslationContext
from tsdiagram.translator.declarations import DeclarationBuilder

logger = logging.getLogger(__name__)


class TranslationPipeline:
    """Orchestrates a translation run.

    The pipeline sequence:
    1. Source units from the frontend (or given directly)
    2. Declaration building per file, with interface merging
    3. Association inference (when enabled)
    4. Empty-result check

    Each run gets a fresh TranslationContext, so no state leaks between runs.
    """

    def __init__(
        self,
        config: TsDiagramConfig | None = None,
        frontend: DeclarationFrontend | None = None,
        configure_logging: bool = False,
    ) -> None:
        """Initialize the translation pipeline.

        Logging is left alone unless configure_logging is set, in which case
        the logging section of the config is applied to the tsdiagram logger.

        Args:
            config: tsdiagram configuration (uses defaults if None)
            frontend: Declaration frontend (tree-sitter from config if None)
            configure_logging: Apply config.logging before running
        """
        self.config = config or TsDiagramConfig()
        if configure_logging:
            self.config.logging.configure()
        self.frontend = frontend or TreeSitterFrontend(
            include=self.config.sources.include,
            exclude_patterns=self.config.sources.exclude,
        )

    @property
    def member_associations(self) -> bool:
        """Whether association inference runs."""
        return self.config.translation.member_associations

    def run(self, root: Path | None = None) -> TranslationResult:
        """Parse the sources below root and translate them.

        Args:
            root: Source root (defaults to sources.root of the config)

        Returns:
            TranslationResult of the run

        Raises:
            FrontendNotAvailableError: If the frontend cannot be loaded
            FrontendExecutionError: If the root cannot be processed
        """
        root = root or self.config.sources.root_path
        logger.info("Parsing source files under %s", root)

        units = self.frontend.execute(root)
        return self.translate(units)

    def translate(self, units: list[SourceUnit]) -> TranslationResult:
        """Translate source units into FileDeclarations.

        Args:
            units: Source units, in processing order

        Returns:
            TranslationResult with declarations and diagnostics
        """
        context = TranslationContext(member_associations=self.member_associations)
        builder = DeclarationBuilder(context)

        declarations = [builder.build_file(unit) for unit in units]

        if context.member_associations:
            infer_associations(declarations)

        result = TranslationResult(
            declarations=declarations,
            diagnostics=context.diagnostics,
            member_associations=context.member_associations,
        )

        if result.entity_count == 0:
            context.report(DiagnosticKind.EMPTY_RESULT, EMPTY_RESULT_MESSAGE)
            result.failure_message = EMPTY_RESULT_MESSAGE
            result.placeholder = ClassEntity(name=EMPTY_RESULT_MESSAGE)

        logger.info(
            "Translation complete: %d entities in %d files (%d diagnostics)",
            result.entity_count,
            len(declarations),
            len(result.diagnostics),
        )

        return result


def translate(units: list[SourceUnit], member_associations: bool = False) -> TranslationResult:
    """Convenience function to translate source units.

    Args:
        units: Source units, in processing order
        member_associations: Infer associations after translation

    Returns:
        TranslationResult of the run
    """
    config = TsDiagramConfig()
    config.translation.member_associations = member_associations
    return TranslationPipeline(config).translate(units)

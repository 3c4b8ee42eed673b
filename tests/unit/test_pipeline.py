"""Unit tests for the translation pipeline."""

import logging
from pathlib import Path

import pytest

from tsdiagram.config import LoggingConfig, TsDiagramConfig
from tsdiagram.frontend.base import DeclarationFrontend
from tsdiagram.frontend.model import (
    ClassDecl,
    SourceUnit,
    SymbolRef,
    TypeAliasDecl,
)
from tsdiagram.frontend.tree_sitter import TreeSitterFrontend
from tsdiagram.models.diagnostics import EMPTY_RESULT_MESSAGE, DiagnosticKind
from tsdiagram.pipeline import TranslationPipeline, translate
from tsdiagram.utils.logging import JSONFormatter


class StaticFrontend(DeclarationFrontend):
    """Frontend returning prepared source units."""

    def __init__(self, units: list[SourceUnit]) -> None:
        super().__init__("static")
        self.units = units
        self.requested: list[Path] = []

    def check_available(self) -> bool:
        return True

    def get_version(self) -> str | None:
        return "1.0"

    def execute(self, input_path: Path) -> list[SourceUnit]:
        self.requested.append(input_path)
        return self.units


@pytest.fixture
def car_units(car_class: ClassDecl, engine_class: ClassDecl) -> list[SourceUnit]:
    """Engine and Car in separate files."""
    return [
        SourceUnit("src/engine.ts", classes=[engine_class]),
        SourceUnit("src/car.ts", classes=[car_class]),
    ]


def _config(member_associations: bool) -> TsDiagramConfig:
    config = TsDiagramConfig()
    config.translation.member_associations = member_associations
    return config


class TestTranslationPipeline:
    """Tests for TranslationPipeline."""

    def test_default_frontend(self) -> None:
        """Test the tree-sitter frontend is used by default."""
        config = TsDiagramConfig()
        config.sources.include = "src/**/*.ts"

        pipeline = TranslationPipeline(config)

        assert isinstance(pipeline.frontend, TreeSitterFrontend)
        assert pipeline.frontend.include == "src/**/*.ts"

    def test_associations_enabled(self, car_units: list[SourceUnit]) -> None:
        """Test Car -> Engine edge with inference enabled."""
        result = TranslationPipeline(_config(True)).translate(car_units)

        assert result.member_associations is True
        assert [(a.from_name, a.to_name) for a in result.associations] == [("Car", "Engine")]
        assert result.declarations[1].member_associations == result.associations

    def test_associations_disabled(self, car_units: list[SourceUnit]) -> None:
        """Test no edges for the identical input with inference disabled."""
        result = TranslationPipeline(_config(False)).translate(car_units)

        assert result.associations == []
        assert result.entity_count == 2

    def test_shape_merge(self, shape_units: list[SourceUnit]) -> None:
        """Test merged interface has both methods."""
        result = translate(shape_units)

        shape = result.declarations[0].interfaces[0]
        assert [m.name for m in shape.methods] == ["area", "perimeter"]

    def test_runs_are_isolated(self, shape_units: list[SourceUnit]) -> None:
        """Test merge state does not leak between runs."""
        pipeline = TranslationPipeline()

        pipeline.translate(shape_units[:1])
        result = pipeline.translate(shape_units[1:])

        assert [m.name for m in result.declarations[0].interfaces[0].methods] == ["perimeter"]

    def test_empty_result(self) -> None:
        """Test zero entities yields a failure message and placeholder."""
        units = [
            SourceUnit("a.ts"),
            SourceUnit("b.ts", type_aliases=[TypeAliasDecl(SymbolRef("Id", "Id"), value_kind="union_type")]),
        ]

        result = translate(units)

        assert result.failed
        assert result.failure_message == EMPTY_RESULT_MESSAGE
        assert result.placeholder is not None
        assert result.placeholder.name == EMPTY_RESULT_MESSAGE
        assert result.placeholder.id == ""
        assert len(result.get_diagnostics(DiagnosticKind.EMPTY_RESULT)) == 1
        assert len(result.get_diagnostics(DiagnosticKind.UNCONVERTIBLE_ALIAS)) == 1

    def test_no_units(self) -> None:
        """Test an empty input set is reported, not raised."""
        result = translate([])

        assert result.failed
        assert result.declarations == []

    def test_run_uses_frontend(self, car_units: list[SourceUnit], tmp_path: Path) -> None:
        """Test run() passes the root to the frontend."""
        frontend = StaticFrontend(car_units)
        pipeline = TranslationPipeline(_config(True), frontend=frontend)

        result = pipeline.run(tmp_path)

        assert frontend.requested == [tmp_path]
        assert result.entity_count == 2
        assert len(result.associations) == 1

    def test_run_defaults_to_config_root(self, car_units: list[SourceUnit]) -> None:
        """Test run() without root uses sources.root."""
        config = TsDiagramConfig()
        config.sources.root = "web"
        frontend = StaticFrontend(car_units)

        TranslationPipeline(config, frontend=frontend).run()

        assert frontend.requested == [Path("web")]

    def test_idempotent(self, car_units: list[SourceUnit]) -> None:
        """Test two runs over the same input are structurally equal."""
        pipeline = TranslationPipeline(_config(True))

        first = pipeline.translate(car_units)
        second = pipeline.translate(car_units)

        assert [d.to_dict() for d in first.declarations] == [
            d.to_dict() for d in second.declarations
        ]


class TestPipelineLogging:
    """Tests for applying the logging section of the config."""

    def test_configure_logging(self, car_units: list[SourceUnit]) -> None:
        """Test the logging section is applied when requested."""
        config = TsDiagramConfig()
        config.logging = LoggingConfig(mode="json", level="warning")
        logger = logging.getLogger("tsdiagram")
        try:
            TranslationPipeline(config, frontend=StaticFrontend(car_units), configure_logging=True)

            assert logger.level == logging.WARNING
            assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        finally:
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)

    def test_logging_left_alone_by_default(self, car_units: list[SourceUnit]) -> None:
        """Test constructing a pipeline does not install handlers."""
        logger = logging.getLogger("tsdiagram")
        before = list(logger.handlers)

        TranslationPipeline(frontend=StaticFrontend(car_units))

        assert logger.handlers == before

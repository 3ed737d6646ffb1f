"""Integration tests for the cabinet-pricing CLI.

These tests drive the Typer app end-to-end through CliRunner with JSON
files written to a temporary directory.
"""

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from cabinet_pricing.cli.main import app

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


def write_json(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def store_file(tmp_path: Path, store_document: dict[str, Any]) -> Path:
    return write_json(tmp_path / "store.json", store_document)


@pytest.fixture
def cabinet_file(tmp_path: Path, base_cabinet_record: dict[str, Any]) -> Path:
    return write_json(tmp_path / "cabinet.json", base_cabinet_record)


@pytest.fixture
def project_file(tmp_path: Path) -> Path:
    return write_json(
        tmp_path / "kitchen.json",
        {
            "schema_version": "1.0",
            "project": {"id": "proj_file", "name": "Kitchen", "client": "Ana"},
            "cabinets": [{"id": "c1", "name": "Sink base", "materialCost": 1000}],
        },
    )


class TestQuoteCabinetCommand:
    """Tests for the quote-cabinet command."""

    def test_text_quote(self, runner: CliRunner, cabinet_file: Path, store_file: Path) -> None:
        result = runner.invoke(app, ["quote-cabinet", str(cabinet_file), "--store", str(store_file)])

        assert result.exit_code == 0, result.output
        assert "CABINET QUOTE: Base 900" in result.output
        assert "246.24 RON" in result.output

    def test_json_quote(self, runner: CliRunner, cabinet_file: Path, store_file: Path) -> None:
        result = runner.invoke(
            app,
            ["quote-cabinet", str(cabinet_file), "--store", str(store_file), "--format", "json"],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["totalCost"] == pytest.approx(276.24)
        assert data["includeTva"] is True

    def test_selected_material_and_no_tva(
        self, runner: CliRunner, cabinet_file: Path, store_file: Path
    ) -> None:
        result = runner.invoke(
            app,
            [
                "quote-cabinet",
                str(cabinet_file),
                "--store",
                str(store_file),
                "--material",
                "mdf_18",
                "--no-tva",
                "-f",
                "json",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["materialCost"] == pytest.approx(492.48)
        assert data["breakdown"]["tvaCost"] == 0

    def test_catalog_file_and_hinge_price(
        self, runner: CliRunner, tmp_path: Path, cabinet_file: Path
    ) -> None:
        catalog = write_json(tmp_path / "catalog.json", {"materials": [{"id": "x", "price": 100}]})
        result = runner.invoke(
            app,
            [
                "quote-cabinet",
                str(cabinet_file),
                "--catalog",
                str(catalog),
                "--hinge-price",
                "20",
                "-f",
                "json",
            ],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["hinges"]["cost"] == pytest.approx(40)
        assert data["materialCost"] == pytest.approx(246.24)

    def test_output_file(
        self, runner: CliRunner, tmp_path: Path, cabinet_file: Path, store_file: Path
    ) -> None:
        out = tmp_path / "out" / "quote.txt"
        result = runner.invoke(
            app, ["quote-cabinet", str(cabinet_file), "--store", str(store_file), "-o", str(out)]
        )

        assert result.exit_code == 0, result.output
        assert "Quote written to" in result.output
        assert "CABINET QUOTE" in out.read_text(encoding="utf-8")

    def test_missing_cabinet_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["quote-cabinet", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "not found" in result.output.lower()

    def test_unknown_format(self, runner: CliRunner, cabinet_file: Path) -> None:
        result = runner.invoke(app, ["quote-cabinet", str(cabinet_file), "--format", "pdf"])
        assert result.exit_code == 1
        assert "Unknown format" in result.output


class TestQuoteProjectCommand:
    """Tests for the quote-project command."""

    def test_from_project_file(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["quote-project", "--config", str(project_file)])

        assert result.exit_code == 0, result.output
        assert "PROJECT QUOTE: Kitchen" in result.output
        assert "1,547.00 RON" in result.output

    def test_from_store(self, runner: CliRunner, store_file: Path) -> None:
        result = runner.invoke(
            app,
            ["quote-project", "--project-id", "proj_kitchen", "--store", str(store_file), "-f", "json"],
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["project"]["total"] == pytest.approx(1547)
        assert len(data["cabinets"]) == 2

    def test_unknown_project(self, runner: CliRunner, store_file: Path) -> None:
        result = runner.invoke(
            app, ["quote-project", "--project-id", "missing", "--store", str(store_file)]
        )
        assert result.exit_code == 1
        assert "Project not found: missing" in result.output

    def test_requires_one_source(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["quote-project"])
        assert result.exit_code == 1
        assert "exactly one" in result.output

    def test_project_id_requires_store(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["quote-project", "--project-id", "proj_kitchen"])
        assert result.exit_code == 1
        assert "--store is required" in result.output

    def test_invalid_project_file(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = write_json(tmp_path / "bad.json", {"schema_version": "9.0"})
        result = runner.invoke(app, ["quote-project", "--config", str(bad)])
        assert result.exit_code == 1
        assert "Unsupported schema version" in result.output


class TestNormalizeCommand:
    """Tests for the normalize command."""

    def test_normalizes_record(self, runner: CliRunner, tmp_path: Path) -> None:
        path = write_json(tmp_path / "c.json", {"id": "c1", "dimensions": {"width": 450}, "notes": "x"})
        result = runner.invoke(app, ["normalize", str(path)])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["width"] == data["dimensions"]["width"] == 450
        assert data["materials"] == []
        assert data["notes"] == "x"

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text("{", encoding="utf-8")
        result = runner.invoke(app, ["normalize", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output


class TestSettingsCommand:
    """Tests for the settings command."""

    def test_show(self, runner: CliRunner, store_file: Path) -> None:
        result = runner.invoke(app, ["settings", "--store", str(store_file)])

        assert result.exit_code == 0, result.output
        assert "VAT (tva):        19%" in result.output
        assert "1,547.00 RON" in result.output

    def test_update(self, runner: CliRunner, store_file: Path) -> None:
        result = runner.invoke(
            app, ["settings", "--store", str(store_file), "--tva", "9", "--currency", "EUR"]
        )

        assert result.exit_code == 0, result.output
        assert "Settings saved" in result.output
        stored = json.loads(store_file.read_text(encoding="utf-8"))["settings"]
        assert stored["tva"] == 9
        assert stored["currency"] == "EUR"
        assert stored["manopera"] == 15

    def test_rejects_invalid_value(self, runner: CliRunner, store_file: Path) -> None:
        result = runner.invoke(app, ["settings", "--store", str(store_file), "--tva", "150"])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output

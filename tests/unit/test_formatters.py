"""Unit tests for text and JSON quote output."""

import json

import pytest

from cabinet_pricing.application import QuoteCabinetCommand, QuoteProjectCommand
from cabinet_pricing.domain.value_objects import MaterialItem, PricingSettings
from cabinet_pricing.infrastructure.formatters import (
    CabinetQuoteFormatter,
    JsonQuoteExporter,
    ProjectQuoteFormatter,
    format_currency,
)


@pytest.fixture
def project_record() -> dict:
    return {
        "id": "proj_1",
        "name": "Kitchen",
        "client": "Ana",
        "date": "2024-05-01",
        "cabinets": [{"id": "c1", "name": "Sink base", "materialCost": 1000}],
    }


class TestFormatCurrency:
    """Tests for format_currency."""

    def test_default_currency(self) -> None:
        assert format_currency(1547) == "1,547.00 RON"

    def test_other_currency(self) -> None:
        assert format_currency(276.24, "EUR") == "276.24 EUR"

    def test_zero(self) -> None:
        assert format_currency(0) == "0.00 RON"


class TestCabinetQuoteFormatter:
    """Tests for the cabinet text report."""

    def test_report_contents(self, base_cabinet_record: dict, pal: MaterialItem) -> None:
        quote = QuoteCabinetCommand().execute(base_cabinet_record, [pal])
        output = CabinetQuoteFormatter().format(quote)

        assert "CABINET QUOTE: Base 900" in output
        assert "900 x 720 x 560 mm" in output
        assert "246.24 RON" in output
        assert "2 pcs, 30.00 RON" in output
        assert "VAT (19%)" in output
        assert "TOTAL" in output

    def test_without_tva(self, base_cabinet_record: dict, pal: MaterialItem) -> None:
        quote = QuoteCabinetCommand().execute(base_cabinet_record, [pal], include_tva=False)
        output = CabinetQuoteFormatter().format(quote)
        subtotal = format_currency(quote.breakdown.subtotal)

        assert "VAT" not in output
        assert quote.breakdown.total == pytest.approx(quote.breakdown.subtotal)
        rows = {line.split("  ")[1]: line for line in output.splitlines() if line.startswith("  ")}
        assert rows["Subtotal"].endswith(subtotal)
        assert rows["TOTAL"].endswith(subtotal)

    def test_warnings_listed(self, base_cabinet_record: dict, pal: MaterialItem) -> None:
        base_cabinet_record["materials"] = [{"id": "oak", "name": "Oak"}]
        quote = QuoteCabinetCommand().execute(base_cabinet_record, [pal])
        output = CabinetQuoteFormatter().format(quote)
        assert "Warnings:" in output
        assert "Unknown material 'oak (Oak)' priced at 0" in output


class TestProjectQuoteFormatter:
    """Tests for the project text report."""

    def test_report_contents(self, project_record: dict) -> None:
        settings = PricingSettings(pdf_footer="Valid 30 days")
        quote = QuoteProjectCommand().execute(project_record, settings)
        output = ProjectQuoteFormatter().format(quote)

        assert "PROJECT QUOTE: Kitchen" in output
        assert "Client: Ana" in output
        assert "Sink base" in output
        assert "1,547.00 RON" in output
        assert output.rstrip().endswith("Valid 30 days")

    def test_without_tva(self, project_record: dict) -> None:
        quote = QuoteProjectCommand().execute(project_record, include_tva=False)
        output = ProjectQuoteFormatter().format(quote)

        assert "VAT" not in output
        assert "Subtotal " in output
        assert quote.breakdown.total == pytest.approx(1300)
        assert [line for line in output.splitlines() if line.strip().startswith("TOTAL")] == [
            f"  {'TOTAL':<28}{format_currency(1300):>40}"
        ]

    def test_empty_project(self) -> None:
        quote = QuoteProjectCommand().execute({"id": "p"})
        assert "No cabinets in project." in ProjectQuoteFormatter().format(quote)

    def test_long_names_truncated(self, project_record: dict) -> None:
        project_record["cabinets"][0]["name"] = "A very long cabinet name that will not fit"
        output = ProjectQuoteFormatter().format(QuoteProjectCommand().execute(project_record))
        assert "A very long cabinet name ..." in output


class TestJsonQuoteExporter:
    """Tests for JSON export."""

    def test_cabinet_quote(self, base_cabinet_record: dict, pal: MaterialItem) -> None:
        quote = QuoteCabinetCommand().execute(base_cabinet_record, [pal])
        data = json.loads(JsonQuoteExporter().export(quote))

        assert data["cabinet"]["id"] == "cab_base_900"
        assert data["totalCost"] == pytest.approx(276.24)
        assert data["hinges"] == {"quantity": 2, "cost": 30.0}
        assert data["breakdown"]["subtotal"] == pytest.approx(276.24 * 1.3)
        assert data["currency"] == "RON"
        assert data["warnings"] == []

    def test_project_quote(self, project_record: dict) -> None:
        data = json.loads(JsonQuoteExporter().export(QuoteProjectCommand().execute(project_record)))
        assert data["project"]["total"] == pytest.approx(1547)
        assert data["cabinets"][0]["materialCost"] == 1000

"""Output formatters and exporters for quotes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cabinet_pricing.application.dtos import CabinetQuote, ProjectQuote
    from cabinet_pricing.domain import PriceBreakdown, PricingSettings


def format_currency(amount: float, currency: str = "RON") -> str:
    """Format an amount with two decimals and a currency label.

    Examples:
        >>> format_currency(1547)
        '1,547.00 RON'
    """
    return f"{amount:,.2f} {currency}"


def _percent(value: float) -> str:
    return f"{value:g}%"


def _breakdown_lines(
    breakdown: "PriceBreakdown",
    settings: "PricingSettings",
    include_tva: bool,
    width: int,
) -> list[str]:
    currency = settings.currency

    def row(label: str, amount: float) -> str:
        value = format_currency(amount, currency)
        return f"  {label:<28}{value:>{width - 30}}"

    lines = [
        row("Materials", breakdown.material_cost),
        row("Accessories", breakdown.accessory_cost),
        row(f"Labor ({_percent(settings.manopera)})", breakdown.manopera_cost),
        row(f"Transport ({_percent(settings.transport)})", breakdown.transport_cost),
        row(f"Markup ({_percent(settings.adaos)})", breakdown.adaos_cost),
        "-" * width,
        row("Subtotal (excl. VAT)" if include_tva else "Subtotal", breakdown.subtotal),
    ]
    if include_tva:
        lines.append(row(f"VAT ({_percent(settings.tva)})", breakdown.tva_cost))
    lines.append("=" * width)
    lines.append(row("TOTAL", breakdown.total))
    return lines


class CabinetQuoteFormatter:
    """Formats a single-cabinet quote as a text report."""

    WIDTH = 60

    def format(self, quote: "CabinetQuote") -> str:
        cabinet = quote.cabinet
        cost = quote.cost
        currency = quote.settings.currency
        lines = [
            f"CABINET QUOTE: {cabinet.name}",
            "=" * self.WIDTH,
            f"  Id:          {cabinet.id}",
            f"  Dimensions:  {cabinet.width:g} x {cabinet.height:g} x {cabinet.depth:g} mm (W x H x D)",
            "",
            f"  Material cost:   {format_currency(cost.material_cost, currency)}",
            f"  Accessory cost:  {format_currency(cost.accessory_cost, currency)}",
            f"  Hinges:          {cost.hinges.quantity} pcs, {format_currency(cost.hinges.cost, currency)}",
            f"  Cabinet cost:    {format_currency(cost.total, currency)}",
            "",
        ]
        lines.extend(_breakdown_lines(quote.breakdown, quote.settings, quote.include_tva, self.WIDTH))

        if quote.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in quote.warnings)

        return "\n".join(lines)


class ProjectQuoteFormatter:
    """Formats a project quote as a text report with one row per cabinet."""

    WIDTH = 70

    def format(self, quote: "ProjectQuote") -> str:
        project = quote.project
        currency = quote.settings.currency
        lines = [
            f"PROJECT QUOTE: {project.name or project.id}",
            "=" * self.WIDTH,
        ]
        if project.client:
            lines.append(f"  Client: {project.client}")
        if project.date:
            lines.append(f"  Date:   {project.date}")
        lines.append("")

        if quote.lines:
            lines.append(f"  {'Cabinet':<30}{'Materials':>18}{'Accessories':>18}")
            lines.append("-" * self.WIDTH)
            for line in quote.lines:
                name = line.name if len(line.name) <= 28 else line.name[:25] + "..."
                lines.append(
                    f"  {name:<30}"
                    f"{format_currency(line.material_cost, currency):>18}"
                    f"{format_currency(line.accessory_cost, currency):>18}"
                )
        else:
            lines.append("  No cabinets in project.")
        lines.append("")

        lines.extend(
            _breakdown_lines(quote.breakdown, quote.settings, quote.include_tva, self.WIDTH)
        )

        if quote.settings.pdf_footer:
            lines.append("")
            lines.append(quote.settings.pdf_footer)

        return "\n".join(lines)


class JsonQuoteExporter:
    """Exports cabinet and project quotes as JSON."""

    def export(self, quote: "CabinetQuote | ProjectQuote") -> str:
        return json.dumps(quote.to_dict(), indent=2, ensure_ascii=False)

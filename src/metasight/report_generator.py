"""Render analysis results as text, JSON or HTML."""

import json
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from metasight.config import AnalysisThresholds, default_thresholds
from metasight.models import AnalysisResult
from metasight.previews import (
    heading_indent,
    metric_cards,
    open_graph_card,
    serp_preview,
    tag_statuses,
    twitter_card,
)

STATUS_ICONS = {"good": "✅", "warning": "⚠️ ", "bad": "❌"}


class ReportGenerator:
    """Generates human-readable reports for a single page analysis."""

    TEMPLATE_NAME = "report.html.j2"

    def __init__(
        self,
        template_dir: Optional[str] = None,
        thresholds: Optional[AnalysisThresholds] = None,
    ):
        """Initialize report generator.

        Args:
            template_dir: Directory containing Jinja2 templates (defaults to
                the templates shipped with the package)
            thresholds: Bounds for the metric cards
        """
        template_path = Path(template_dir) if template_dir else None
        if template_path is None or not template_path.exists():
            template_path = Path(__file__).parent / "templates"

        self.thresholds = thresholds or default_thresholds
        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(["html", "j2"]),
        )
        self.env.filters['format_number'] = self._format_number
        self.env.filters['heading_indent'] = heading_indent

    def _format_number(self, value):
        """Format number with thousand separators."""
        try:
            return "{:,}".format(int(value))
        except (ValueError, TypeError):
            return value

    def _context(self, result: AnalysisResult) -> dict:
        report = result.report
        return {
            "result": result,
            "report": report,
            "serp": serp_preview(report, result.url),
            "og_card": open_graph_card(report, result.url),
            "twitter_card": twitter_card(report, result.url),
            "metrics": metric_cards(report, self.thresholds),
            "tag_statuses": tag_statuses(report),
        }

    def render_text(self, result: AnalysisResult) -> str:
        """Render a console report.

        Args:
            result: Analysis result (successful or failed)

        Returns:
            Report text
        """
        if not result.success or result.report is None:
            return f"\n❌ Failed to analyze {result.url}: {result.error}\n"

        ctx = self._context(result)
        report = result.report
        lines = [
            "",
            "=" * 60,
            f"SEO Analysis for: {result.url}",
            "=" * 60,
            "",
        ]

        for card in ctx["metrics"]:
            icon = STATUS_ICONS.get(card.status, "")
            lines.append(f"{icon} {card.title}: {card.value} ({card.subtext})")

        serp = ctx["serp"]
        lines += [
            "",
            "🔎 Google Search Preview",
            f"  {serp.url}",
            f"  {serp.title}",
            f"  {serp.description}",
        ]

        for label, card in (
            ("Facebook/LinkedIn", ctx["og_card"]),
            ("Twitter Card", ctx["twitter_card"]),
        ):
            lines += [
                "",
                f"🔗 {label}",
                f"  Image: {card.image or card.missing_image_text}",
                f"  {card.domain}",
                f"  {card.title}",
                f"  {card.description}",
            ]

        lines += ["", "Raw Tag Extraction Status:"]
        for status in ctx["tag_statuses"]:
            lines.append(f"  • {status.label}: {status.status_text}")

        if report.keywords:
            lines += ["", f"Keywords: {report.keywords}"]

        lines += ["", f"Headings ({len(report.headings)}):"]
        if not report.headings:
            lines.append("  No headings found on this page.")
        for heading in report.headings:
            indent = "  " * (heading_indent(heading.level) + 1)
            lines.append(f"{indent}[{heading.level}] {heading.text}")

        lines += [
            "",
            f"Links: {len(report.links)} total, "
            f"{len(report.internal_links)} internal, "
            f"{len(report.external_links)} external",
        ]
        for link in report.links:
            badges = "External" if link.is_external else "Internal"
            if link.nofollow:
                badges += ", nofollow"
            lines.append(f"  • {link.text} -> {link.href} [{badges}]")

        lines += [
            "",
            f"Images: {len(report.images)} total, "
            f"{len(report.images_missing_alt)} missing alt",
        ]
        for image in report.images:
            alt = f'alt="{image.alt}"' if image.alt else "⚠️  Missing alt text"
            lines.append(f"  • {image.src} ({alt})")

        lines += ["", "=" * 60, ""]
        return "\n".join(lines)

    def render_json(self, result: AnalysisResult) -> str:
        """Render the result as JSON."""
        return json.dumps(result.to_dict(), indent=2, default=str)

    def render_html(self, result: AnalysisResult) -> str:
        """Render the result as a standalone HTML page."""
        template = self.env.get_template(self.TEMPLATE_NAME)
        if not result.success or result.report is None:
            return template.render(result=result, report=None)
        return template.render(**self._context(result))

    def render(self, result: AnalysisResult, output_format: str = "text") -> str:
        """Render the result in ``text``, ``json`` or ``html`` format."""
        renderers = {
            "text": self.render_text,
            "json": self.render_json,
            "html": self.render_html,
        }
        if output_format not in renderers:
            raise ValueError(f"Unknown output format: {output_format}")
        return renderers[output_format](result)

    @staticmethod
    def write(content: str, output_path: Path) -> None:
        """Write rendered output to a file."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding='utf-8')

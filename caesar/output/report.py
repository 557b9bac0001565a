"""
Caesar Report Generator
========================

Generates HTML and JSON reports from CaesarLab results. The HTML report
uses inline CSS so a single file can be handed out in class; the JSON
report is the same data in machine-readable form.
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from shared.models import ScanResult

import caesar

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>CaesarLab Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-green: #3fb950;
            --accent-yellow: #d29922;
            --accent-red: #f85149;
            --accent-purple: #bc8cff;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 1100px; margin: 0 auto; }}
        .header {{
            text-align: center;
            padding: 2rem;
            border: 1px solid var(--accent-cyan);
            border-radius: 8px;
            margin-bottom: 2rem;
            background: var(--bg-secondary);
        }}
        .header h1 {{ color: var(--accent-cyan); font-size: 2rem; }}
        .header .subtitle {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .section h2 {{
            color: var(--accent-purple);
            font-size: 1.4rem;
            margin-bottom: 1rem;
            border-bottom: 1px solid var(--border);
        }}
        table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
        th, td {{ padding: 0.6rem 1rem; text-align: left; border: 1px solid var(--border); }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); }}
        .badge {{ display: inline-block; padding: 0.2rem 0.7rem; border-radius: 4px; font-weight: 700; }}
        .badge-info {{ background: rgba(88, 166, 255, 0.2); color: var(--accent-cyan); }}
        .badge-low {{ background: rgba(63, 185, 80, 0.2); color: var(--accent-green); }}
        .badge-medium {{ background: rgba(210, 153, 34, 0.2); color: var(--accent-yellow); }}
        .badge-high {{ background: rgba(248, 81, 73, 0.2); color: var(--accent-red); }}
        pre {{
            background: var(--bg-tertiary);
            padding: 1rem;
            border-radius: 6px;
            overflow-x: auto;
            white-space: pre-wrap;
        }}
        .footer {{ text-align: center; color: var(--text-secondary); font-size: 0.8rem; }}
    </style>
</head>
<body>
<div class="container">
    <div class="header">
        <h1>CaesarLab Report</h1>
        <div class="subtitle">{title} &middot; {target} &middot; {generated_at}</div>
    </div>
    <div class="section">
        <h2>Summary</h2>
        <p>{summary}</p>
    </div>
    <div class="section">
        <h2>Findings ({finding_count})</h2>
        {findings_html}
    </div>
    <div class="section">
        <h2>Result Data</h2>
        <pre>{metadata_json}</pre>
    </div>
    <div class="footer">CaesarLab {version} &middot; educational use only, no confidentiality is provided</div>
</div>
</body>
</html>
"""


class CaesarReportGenerator:
    """Writes :class:`~shared.models.ScanResult` objects to disk.

    Usage::

        reporter = CaesarReportGenerator()
        reporter.generate_json(result, Path("crack.json"))
        reporter.generate_html(result, Path("crack.html"))
    """

    def generate_html(self, result: ScanResult, output_path: Path) -> Path:
        """Generate a self-contained HTML report.

        Args:
            result: ScanResult to render.
            output_path: Path to write the HTML file.

        Returns:
            Path to the generated HTML file.
        """
        page = _HTML_TEMPLATE.format(
            title=self._escape_html(result.operation or result.tool_name),
            target=self._escape_html(result.target),
            generated_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
            summary=self._escape_html(result.summary),
            finding_count=result.finding_count,
            findings_html=self._build_findings_html(result),
            metadata_json=self._escape_html(
                json.dumps(result.metadata, indent=2, ensure_ascii=False, default=str)
            ),
            version=caesar.__version__,
        )
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(page, encoding="utf-8")
        return output_path

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Generate a JSON report.

        Args:
            result: ScanResult containing findings and output data.
            output_path: Path to write the JSON file.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build_report(result), indent=2, ensure_ascii=False, default=str),
            encoding="utf-8",
        )
        return output_path

    def build_report(self, result: ScanResult) -> dict[str, Any]:
        """Assemble the JSON report structure without writing it."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "operation": result.operation,
                "target": result.target,
                "version": caesar.__version__,
            },
            "summary": {
                "total_findings": result.finding_count,
                "high_findings": result.high_count,
                "severity_counts": result.severity_counts,
                "highest_severity": (
                    result.highest_severity.value if result.highest_severity else None
                ),
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [
                {
                    "title": f.title,
                    "description": f.description,
                    "severity": f.severity.value,
                    "evidence": f.evidence,
                    "recommendation": f.recommendation,
                    "references": f.references,
                }
                for f in result.findings
            ],
            "metadata": result.metadata,
        }

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    def _build_findings_html(self, result: ScanResult) -> str:
        if not result.findings:
            return "<p>No findings.</p>"

        rows = []
        for finding in result.findings:
            severity = finding.severity.value.lower()
            rows.append(
                "<tr>"
                f'<td><span class="badge badge-{severity}">{finding.severity.value}</span></td>'
                f"<td>{self._escape_html(finding.title)}</td>"
                f"<td>{self._escape_html(finding.description)}</td>"
                "</tr>"
            )
        return (
            "<table><thead><tr><th>Severity</th><th>Title</th>"
            "<th>Description</th></tr></thead><tbody>"
            + "".join(rows)
            + "</tbody></table>"
        )

    @staticmethod
    def _escape_html(text: str) -> str:
        return html.escape(str(text), quote=True)

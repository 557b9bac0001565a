"""
JSON and HTML report generation.
Run with:  python -m pytest tests/ -v
"""

import json

from caesar.output.report import CaesarReportGenerator


def test_build_report_structure(engine):
    result = engine.encrypt("Hello", shift=3)
    report = CaesarReportGenerator().build_report(result)
    assert set(report) == {"report_metadata", "summary", "findings", "metadata"}
    assert report["report_metadata"]["tool"] == "caesar"
    assert report["report_metadata"]["version"] == "1.0.0"
    assert report["summary"]["total_findings"] == len(result.findings)
    assert report["summary"]["severity_counts"]["INFO"] >= 1
    assert report["summary"]["highest_severity"] == "INFO"
    assert report["findings"][0]["severity"] in {"HIGH", "MEDIUM", "LOW", "INFO"}
    assert report["metadata"]["text"] == "Khoor"


def test_generate_json_creates_parent_dirs(engine, tmp_path):
    path = tmp_path / "a" / "b" / "out.json"
    CaesarReportGenerator().generate_json(engine.analyze("abc 123"), path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["metadata"]["numbers"] == 3


def test_html_escapes_user_text(engine, tmp_path):
    path = tmp_path / "crack.html"
    CaesarReportGenerator().generate_html(engine.crack("<b>"), path)
    page = path.read_text(encoding="utf-8")
    assert "&lt;b&gt;" in page
    assert "<b>" not in page.split("<body>", 1)[1]


def test_html_without_findings(engine, tmp_path):
    path = tmp_path / "map.html"
    CaesarReportGenerator().generate_html(engine.mapping(1), path)
    assert "No findings." in path.read_text(encoding="utf-8")

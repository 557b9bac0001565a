"""
Caesar Console Output
======================

Rich-based formatters for CaesarLab results: the transformed text, the
alphabet wheel, character statistics, the brute-force candidate table,
passphrase strength and validation reports.

Each ``display_*`` method takes the ``metadata`` dict of a
:class:`~shared.models.ScanResult` produced by
:class:`~caesar.core.engine.CaesarEngine`.
"""

from __future__ import annotations

from typing import Any, Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import CaesarLabConsole
from shared.models import ScanResult

_STRENGTH_COLOURS: dict[str, str] = {
    "none": "dim white",
    "weak": "bold red",
    "medium": "bold yellow",
    "good": "bold green",
    "excellent": "bold bright_green",
}

_STRENGTH_LEVELS = ["none", "weak", "medium", "good", "excellent"]


class CaesarConsoleOutput:
    """Console output formatters for CaesarLab results.

    Usage::

        console = CaesarLabConsole()
        output = CaesarConsoleOutput(console)
        output.display_result(engine.crack("Khoor"))
    """

    def __init__(self, console: Optional[CaesarLabConsole] = None) -> None:
        self.console = console or CaesarLabConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Dispatch
    # ------------------------------------------------------------------ #

    def display_result(self, result: ScanResult) -> None:
        """Render *result* according to the operation that produced it,
        followed by its findings table.
        """
        handler = {
            "encrypt": self.display_transform,
            "decrypt": self.display_transform,
            "derive": self.display_derivation,
            "mapping": self.display_mapping,
            "analyze": self.display_statistics,
            "crack": self.display_brute_force,
            "validate": self.display_validation,
        }.get(result.operation)

        if handler is not None and result.metadata:
            handler(result.metadata)
        self.console.findings_table(result.findings)
        if result.summary:
            self.console.info(result.summary)

    # ------------------------------------------------------------------ #
    #  Transform
    # ------------------------------------------------------------------ #

    def display_transform(self, data: dict[str, Any]) -> None:
        self.console.section("Caesar Shift")
        header = Text()
        header.append("Shift: ", style="bold")
        header.append(f"{data['shift']}", style="bold bright_cyan")
        header.append(f"  ({data['shift_source']})", style="dim")
        self._rich.print(header)
        self._rich.print(
            Panel(Text(data["text"]), title="Output", border_style="bright_cyan")
        )
        self.display_mapping(data)

    # ------------------------------------------------------------------ #
    #  Mapping
    # ------------------------------------------------------------------ #

    def display_mapping(self, data: dict[str, Any]) -> None:
        """Show the plain and cipher alphabets one above the other."""
        mapping: dict[str, str] = data.get("mapping") or {}
        if not mapping:
            self.console.warning("No alphabet mapping for this shift.")
            return

        upper = [k for k in mapping if k.isupper()]
        tbl = Table(
            title=f"Alphabet Mapping (shift {data['shift']})",
            border_style="bright_cyan",
            show_header=False,
            show_lines=True,
            padding=(0, 0),
        )
        tbl.add_column("Row", style="bold", no_wrap=True)
        for _ in upper:
            tbl.add_column(justify="center", width=1)
        tbl.add_row("Plain", *upper)
        tbl.add_row("Cipher", *(mapping[k] for k in upper), style="bright_green")
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Derivation
    # ------------------------------------------------------------------ #

    def display_derivation(self, data: dict[str, Any]) -> None:
        """Show the derived shift with a passphrase strength meter."""
        self.console.section("Passphrase")
        strength = data["strength"]
        colour = _STRENGTH_COLOURS.get(strength, "white")
        level = _STRENGTH_LEVELS.index(strength) if strength in _STRENGTH_LEVELS else 0

        meter = Text()
        meter.append("Strength: ", style="bold")
        meter.append("[", style="dim")
        for i in range(1, len(_STRENGTH_LEVELS)):
            meter.append("████", style=colour if i <= level else "dim")
        meter.append("]  ", style="dim")
        meter.append(strength.upper(), style=colour)
        meter.append("\nDerived shift: ", style="bold")
        meter.append(str(data["shift"]), style="bold bright_cyan")
        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))
        self.display_mapping(data)

    # ------------------------------------------------------------------ #
    #  Statistics
    # ------------------------------------------------------------------ #

    def display_statistics(self, data: dict[str, Any]) -> None:
        self.console.section("Text Statistics")
        self.console.table(
            "Character Classes",
            ["Property", "Count"],
            [
                ("Total characters", data["total_chars"]),
                ("Letters", data["letters"]),
                ("Spaces", data["spaces"]),
                ("Punctuation", data["punctuation"]),
                ("Numbers", data["numbers"]),
                ("Words", data["words"]),
            ],
            styles=["bold", ""],
        )

    # ------------------------------------------------------------------ #
    #  Brute force
    # ------------------------------------------------------------------ #

    def display_brute_force(self, data: dict[str, Any]) -> None:
        """Table of every candidate; the best guess is highlighted when ranked."""
        self.console.section("Brute Force")
        candidates = data.get("candidates", [])
        if not candidates:
            self.console.warning("Nothing to brute-force.")
            return

        ranked = data.get("ranked", False)
        best = data.get("best_shift")

        tbl = Table(
            title="All Possible Shifts",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
        )
        tbl.add_column("Shift", justify="right", style="bold")
        if ranked:
            tbl.add_column("Chi-squared", justify="right")
        tbl.add_column("Preview")

        for cand in candidates:
            style = "bold bright_green" if ranked and cand["shift"] == best else ""
            cells = [str(cand["shift"])]
            if ranked:
                score = cand["chi_squared"]
                cells.append("-" if score is None else f"{score:.2f}")
            cells.append(Text(cand["preview"]))
            tbl.add_row(*cells, style=style)

        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Validation
    # ------------------------------------------------------------------ #

    def display_validation(self, data: dict[str, Any]) -> None:
        self.console.section("Validation")
        rows = []
        for name in ("message", "passphrase", "shift"):
            report = data[name]
            rows.append((
                name.title(),
                "valid" if report["is_valid"] else "INVALID",
                len(report["errors"]),
                len(report["warnings"]),
            ))
        self.console.table(
            "Validation Gate",
            ["Input", "Status", "Errors", "Warnings"],
            rows,
            styles=["bold", "", "red", "yellow"],
        )
        strength = data["passphrase"]["strength"]
        self._rich.print(
            Text.assemble(
                ("Passphrase strength: ", "bold"),
                (strength, _STRENGTH_COLOURS.get(strength, "")),
                ("   Can encrypt: ", "bold"),
                "yes" if data["can_encrypt"] else "no",
                ("   Has key: ", "bold"),
                "yes" if data["has_key"] else "no",
            )
        )

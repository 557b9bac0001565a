"""
CaesarLab Console Interface
============================

Rich-powered console abstraction providing a unified presentation layer
for CaesarLab commands.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, severity-coloured messages and tables, all
with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_CAESARLAB_THEME = Theme(
    {
        "caesarlab.banner": "bold bright_cyan",
        "caesarlab.section": "bold bright_magenta",
        "caesarlab.success": "bold green",
        "caesarlab.warning": "bold yellow",
        "caesarlab.info": "bold bright_blue",
        "caesarlab.dim": "dim white",
        "caesarlab.highlight": "bold bright_white",
        "caesarlab.high": "bold red",
        "caesarlab.medium": "bold yellow",
        "caesarlab.low": "bold bright_cyan",
        "caesarlab.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""
[bright_cyan]
   ___   _   ___ ___   _   ___ _      _   ___
  / __| /_\ | __/ __| /_\ | _ \ |    /_\ | _ )
 | (__ / _ \| _|\__ \/ _ \|   / |__ / _ \| _ \
  \___/_/ \_\___|___/_/ \_\_|_\____/_/ \_\___/
[/bright_cyan]"""

_TAGLINE = "Substitution Cipher Teaching Lab"


class CaesarLabConsole:
    """Unified console interface for CaesarLab commands.

    Usage::

        con = CaesarLabConsole()
        con.banner()
        con.section("Brute Force")
        con.success("Done")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_CAESARLAB_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the CaesarLab banner with version and timestamp."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[caesarlab.highlight]{_TAGLINE}[/caesarlab.highlight]\n"
            f"[caesarlab.dim]Version: {version}  |  {now}[/caesarlab.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="caesarlab.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[caesarlab.success][✔] SUCCESS:[/caesarlab.success] {escape(message)}"
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[caesarlab.warning][⚠] WARNING:[/caesarlab.warning] {escape(message)}"
        )

    def info(self, message: str) -> None:
        """Print an informational message."""
        self._console.print(
            f"[caesarlab.info][ℹ] INFO:[/caesarlab.info] {escape(message)}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(Text(str(cell)) for cell in row))

        self._console.print(tbl)

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render a findings table with automatic severity colouring.

        Expects objects with ``severity``, ``title``, and ``description``
        attributes (e.g. :class:`shared.models.Finding`).
        """
        if not findings:
            return

        severity_style_map: dict[str, str] = {
            "HIGH": "caesarlab.high",
            "MEDIUM": "caesarlab.medium",
            "LOW": "caesarlab.low",
            "INFO": "caesarlab.informational",
        }

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            tbl.add_row(
                str(idx),
                Text(sev_name, style=severity_style_map.get(sev_name, "")),
                Text(str(getattr(finding, "title", ""))),
                Text(str(getattr(finding, "description", ""))),
            )

        self._console.print(tbl)

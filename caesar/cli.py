"""
Caesar CLI
===========

Click-based command-line interface for CaesarLab. Provides subcommands
to encrypt and decrypt messages, derive a shift from a passphrase, show
the alphabet mapping, analyse text and brute-force a ciphertext.

Usage::

    python -m caesar encrypt "Attack at dawn" --key legion
    python -m caesar decrypt "Dwwdfn dw gdzq" --shift 3
    python -m caesar derive "legion"
    python -m caesar mapping --shift 13
    python -m caesar analyze "Hello, World! 123"
    python -m caesar brute-force "Khoor, Zruog!" --rank
    python -m caesar validate --message "Hi" --key ab --shift 13

Any TEXT argument may be ``-`` to read from standard input. The passphrase
may also be supplied through the ``CAESARLAB_KEY`` environment variable
so it does not end up in shell history.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

import caesar
from shared.config import CaesarLabConfig
from shared.console import CaesarLabConsole
from shared.models import ScanResult

from caesar.core.engine import CaesarEngine
from caesar.output.console import CaesarConsoleOutput
from caesar.output.report import CaesarReportGenerator

_KEY_ENVVAR = "CAESARLAB_KEY"


def _read_text(value: str) -> str:
    """Resolve ``-`` to standard input, stripping one trailing newline."""
    if value != "-":
        return value
    data = click.get_text_stream("stdin").read()
    return data[:-1] if data.endswith("\n") else data


key_option = click.option(
    "--key", "-k",
    envvar=_KEY_ENVVAR,
    default=None,
    help=f"Passphrase to derive the shift from (or set {_KEY_ENVVAR}).",
)
shift_option = click.option(
    "--shift", "-s",
    type=int,
    default=None,
    help="Manual shift 0-25; overrides the passphrase.",
)


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to CaesarLab configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.version_option(caesar.__version__, prog_name="caesarlab")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """CaesarLab -- learn why the Caesar cipher is broken.

    Encrypt and decrypt with a shift derived from a passphrase, then
    recover the plaintext without the key.
    """
    ctx.ensure_object(dict)

    try:
        lab_config = CaesarLabConfig.load(config)
    except (OSError, ValueError) as exc:
        raise click.UsageError(f"Cannot load configuration: {exc}") from exc

    console = CaesarLabConsole(quiet=quiet)
    ctx.obj["config"] = lab_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["console"] = console
    ctx.obj["engine"] = CaesarEngine(lab_config)
    ctx.obj["display"] = CaesarConsoleOutput(console)
    ctx.obj["reporter"] = CaesarReportGenerator()

    if not quiet and output == "console":
        console.banner(version=caesar.__version__)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Emit *result* in the selected format and set the exit status.

    A run with a HIGH-severity finding exits with status 1.
    """
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: CaesarReportGenerator = ctx.obj["reporter"]
    console: CaesarLabConsole = ctx.obj["console"]

    if output_format == "console":
        display: CaesarConsoleOutput = ctx.obj["display"]
        display.display_result(result)
    elif output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(json.dumps(
                reporter.build_report(result),
                indent=2,
                ensure_ascii=False,
                default=str,
            ))
    elif output_format == "html":
        if output_file:
            target = Path(output_file)
        else:
            lab_config: CaesarLabConfig = ctx.obj["config"]
            target = (
                Path(lab_config.global_settings.output_dir)
                / f"caesar_report_{result.operation}.html"
            )
        path = reporter.generate_html(result, target)
        console.success(f"HTML report saved to: {path}")

    if result.high_count:
        ctx.exit(1)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("text")
@key_option
@shift_option
@click.pass_context
def encrypt(ctx: click.Context, text: str, key: Optional[str], shift: Optional[int]) -> None:
    """Encrypt TEXT with a manual shift or a passphrase-derived one."""
    engine: CaesarEngine = ctx.obj["engine"]
    _handle_output(ctx, engine.encrypt(_read_text(text), passphrase=key, shift=shift))


@cli.command()
@click.argument("text")
@key_option
@shift_option
@click.pass_context
def decrypt(ctx: click.Context, text: str, key: Optional[str], shift: Optional[int]) -> None:
    """Decrypt TEXT given the passphrase or shift used to encrypt it."""
    engine: CaesarEngine = ctx.obj["engine"]
    _handle_output(ctx, engine.decrypt(_read_text(text), passphrase=key, shift=shift))


@cli.command()
@click.argument("key", envvar=_KEY_ENVVAR)
@click.pass_context
def derive(ctx: click.Context, key: str) -> None:
    """Show the shift a passphrase produces and rate the passphrase."""
    engine: CaesarEngine = ctx.obj["engine"]
    _handle_output(ctx, engine.derive(key))


@cli.command()
@key_option
@shift_option
@click.pass_context
def mapping(ctx: click.Context, key: Optional[str], shift: Optional[int]) -> None:
    """Show the full alphabet mapping for a shift or passphrase."""
    engine: CaesarEngine = ctx.obj["engine"]
    if shift is None and key is None:
        raise click.UsageError("Provide --shift or --key.")
    if shift is None:
        _handle_output(ctx, engine.derive(key))
    else:
        _handle_output(ctx, engine.mapping(shift))


@cli.command()
@click.argument("text")
@click.pass_context
def analyze(ctx: click.Context, text: str) -> None:
    """Count letters, spaces, digits, punctuation and words in TEXT."""
    engine: CaesarEngine = ctx.obj["engine"]
    _handle_output(ctx, engine.analyze(_read_text(text)))


@cli.command("brute-force")
@click.argument("text")
@click.option(
    "--rank/--no-rank",
    default=None,
    help="Sort candidates by closeness to English letter frequencies.",
)
@click.pass_context
def brute_force(ctx: click.Context, text: str, rank: Optional[bool]) -> None:
    """Decrypt TEXT with all 26 shifts.

    Demonstrates that the keyspace is small enough to search by hand.
    """
    engine: CaesarEngine = ctx.obj["engine"]
    _handle_output(ctx, engine.crack(_read_text(text), rank=rank))


@cli.command()
@click.option("--message", "-m", default=None, help="Message to check.")
@key_option
@click.option(
    "--shift", "-s",
    type=float,
    default=None,
    help="Manual shift to check (fractions are reported, not rounded).",
)
@click.option(
    "--max-length",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum message length (default from config).",
)
@click.pass_context
def validate(
    ctx: click.Context,
    message: Optional[str],
    key: Optional[str],
    shift: Optional[float],
    max_length: Optional[int],
) -> None:
    """Run the validation gate over a message, passphrase and shift."""
    engine: CaesarEngine = ctx.obj["engine"]
    if shift is not None and shift.is_integer():
        shift = int(shift)
    if message is not None:
        message = _read_text(message)
    _handle_output(ctx, engine.validate(message, key, shift, max_length))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the CaesarLab CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()

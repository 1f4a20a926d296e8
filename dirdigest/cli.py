"""CLI entry point for dirdigest."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax

from dirdigest.compare import ComparisonReport, compare_hash_sets
from dirdigest.config import DirDigestConfig, load_config
from dirdigest.config.loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE
from dirdigest.errors import DirDigestError
from dirdigest.hashing import HashAlgorithm, hash_tree, validate_root
from dirdigest.report import build_scan_report, render_comparison, render_hash_set

app = typer.Typer(
    name="dirdigest",
    help="Hash every file under a directory and compare two directory trees.",
)

config_app = typer.Typer(help="Manage dirdigest configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: DirDigestConfig | None = None


def _get_config() -> DirDigestConfig:
    if _config is None:
        return load_config()
    return _config


def _fail(message: str) -> NoReturn:
    rprint(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def _configure_logging(level: str) -> None:
    """Route the package's log records to stderr through rich."""
    pkg_logger = logging.getLogger("dirdigest")
    for handler in list(pkg_logger.handlers):
        if isinstance(handler, RichHandler):
            pkg_logger.removeHandler(handler)
    pkg_logger.addHandler(
        RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    )
    pkg_logger.setLevel(getattr(logging, level.upper()))


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-C", help=f"Path to {CONFIG_FILENAME}")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        _fail(str(e))


def _emit_text(primary_lines: list[str], report: ComparisonReport | None) -> None:
    for line in primary_lines:
        typer.echo(line)
    if report is not None:
        for line in render_comparison(report):
            typer.echo(line)


@app.command()
def scan(
    directory: Annotated[str, typer.Argument(help="Directory to hash")],
    algorithm: Annotated[
        str | None,
        typer.Option(
            "--algorithm", "-a", help="SHA1 | SHA256 | SHA384 | SHA512 | MD5 (default from config)"
        ),
    ] = None,
    compare: Annotated[
        str | None, typer.Option("--compare", "-c", help="Second directory to compare against")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every file visited and hashed")
    ] = False,
    workers: Annotated[
        int | None, typer.Option("--workers", "-w", min=1, help="Hashing threads")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Emit a JSON report")] = False,
    fail_on_diff: Annotated[
        bool, typer.Option("--fail-on-diff", help="Exit 1 if the comparison finds differences")
    ] = False,
) -> None:
    """Hash DIRECTORY, optionally comparing it with a second directory."""
    cfg = _get_config()
    _configure_logging("debug" if verbose else cfg.log_level)

    # Everything fatal is checked before the first file is read.
    try:
        algo = HashAlgorithm.parse(algorithm) if algorithm else cfg.hashing.algorithm
        validate_root(directory)
        if compare is not None:
            validate_root(compare)
    except DirDigestError as e:
        _fail(str(e))

    options = {
        "chunk_size": cfg.hashing.chunk_size,
        "workers": workers or cfg.hashing.workers,
        "ignore_patterns": cfg.hashing.ignore_patterns,
    }
    try:
        primary = hash_tree(directory, algo, **options)
        other = hash_tree(compare, algo, **options) if compare is not None else None
    except DirDigestError as e:
        _fail(str(e))

    report = None
    if other is not None:
        report = compare_hash_sets(primary, other, left_label=directory, right_label=compare)

    if json_output:
        typer.echo(build_scan_report(primary, report).model_dump_json(indent=2))
    else:
        _emit_text(render_hash_set(primary, directory), report)

    if fail_on_diff and report is not None and report.has_differences:
        raise typer.Exit(code=1)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(mode="json"), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default dirdigest.yaml in current directory."""
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        rprint(f"[yellow]{CONFIG_FILENAME} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()

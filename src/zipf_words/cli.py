from __future__ import annotations

import logging
import sys
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Any, Dict

import typer
import yaml

from .collector import PatternError
from .config import ZipfConfig, load_config
from .pipeline import NoFilesFoundError, run
from .rendering import RenderError, format_occurrences

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    help="Count word frequencies in a directory of text files and chart the top words.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
def analyze(
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, readable=True
    ),
    top_count: int | None = typer.Option(
        None, "--top-count", "-t", min=1, help="Top x number of words. [default: 20]"
    ),
    files_path: str | None = typer.Option(
        None,
        "--files-path",
        "-p",
        help="Path to the text files. [default: ./txtfiles]",
    ),
    file_pattern: str | None = typer.Option(
        None,
        "--file-pattern",
        "-f",
        help="Pattern to look up files. [default: *.txt]",
    ),
    no_graph: bool | None = typer.Option(
        None,
        "--no-graph/--graph",
        help="Don't create the graph image.",
    ),
    graph_path: str | None = typer.Option(
        None,
        "--graph-path",
        "-g",
        help="Path to use when creating the graph image. [default: ./zipf.png]",
    ),
    cli_out: bool | None = typer.Option(
        None,
        "--cli-out/--no-cli-out",
        "-s",
        help="Show results in terminal.",
    ),
    table_path: str | None = typer.Option(
        None, "--table-path", help="Also write the full ranked list as TSV."
    ),
    log_level: str = typer.Option(
        "INFO", "--log-level", help="Logging level for diagnostics on stderr."
    ),
) -> None:
    """Rank the words of every matching file and chart the most frequent ones."""
    _configure_logging(log_level)
    try:
        cfg = load_config(config)
        cfg = _apply_overrides(
            cfg,
            {
                "top_count": top_count,
                "files_path": files_path,
                "file_pattern": file_pattern,
                "no_graph": no_graph,
                "graph_path": graph_path,
                "cli_out": cli_out,
                "table_path": table_path,
            },
        )
    except (OSError, ValueError, yaml.YAMLError) as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1) from exc

    try:
        report = run(cfg)
    except PatternError as exc:
        LOGGER.error("Failed globbing files. Error: %s", exc)
        raise typer.Exit(code=1) from exc
    except NoFilesFoundError as exc:
        LOGGER.error("Failed to read books: %s", exc)
        raise typer.Exit(code=1) from exc
    except RenderError as exc:
        LOGGER.error("Failed to create graph. Error: %s", exc)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        LOGGER.error("Failed to write output file. Error: %s", exc)
        raise typer.Exit(code=1) from exc

    if cfg.cli_out:
        for line in format_occurrences(report.selection):
            typer.echo(line)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ZipfConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(level_name: str) -> None:
    """Send log records to stderr at the requested level."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def _apply_overrides(config: ZipfConfig, overrides: Dict[str, Any]) -> ZipfConfig:
    """Return a copy of the config with every explicitly passed CLI value applied."""
    provided = {key: value for key, value in overrides.items() if value is not None}
    if not provided:
        return config
    return dc_replace(config, **provided)


if __name__ == "__main__":
    main()

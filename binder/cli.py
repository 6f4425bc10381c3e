"""Command-line interface for Binder.

Responsibilities:
- Expose the global `--input` option and the `markdown` assembly command.
- Convert CLI arguments into `AssemblyConfig` and run the assembler.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_assembly_summary, echo_word_count, exit_with_command_error
from .config import AssemblyConfig
from .errors import PipelineStageError
from .io.storage import ManuscriptStore
from .pipeline import ManuscriptAssembler
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="binder",
    no_args_is_help=True,
    help="Assemble a book.",
)


@dataclass(frozen=True, slots=True)
class CommandContext:
    """Global options shared by all subcommands."""

    input_file: Path
    verbose: bool = False


@app.callback()
def main_callback(
    ctx: typer.Context,
    input_file: Annotated[
        Path,
        typer.Option(
            "--input",
            "-i",
            help="Path to book YAML file.",
            envvar="BINDER_INPUT",
        ),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log per-chapter events to stderr."),
    ] = False,
) -> None:
    """Assemble a book."""

    ctx.obj = CommandContext(input_file=input_file, verbose=verbose)


def _resolve_config(
    input_file: Path,
    outdir: Path,
    wordcount: bool,
    scene_headings: bool,
) -> AssemblyConfig:
    """Build a validated config and map failures to stage errors before output is cleared."""

    if not input_file.is_file():
        raise PipelineStageError(
            stage="input",
            detail=f"Book file not found: `{input_file}`.",
            hint="Provide an existing book YAML via `--input <path>`.",
        )
    config = AssemblyConfig(
        input_file=input_file,
        output_dir=outdir,
        word_count=wordcount,
        scene_headings=scene_headings,
    )
    try:
        config.validate()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Choose an output directory outside the book file location.",
        ) from exc
    return config


@app.command("markdown")
def markdown_command(
    ctx: typer.Context,
    outdir: Annotated[
        Path,
        typer.Option(
            "--outdir",
            "-o",
            help="Output directory (cleared before assembly).",
            envvar="BINDER_OUTDIR",
        ),
    ],
    wordcount: Annotated[
        bool,
        typer.Option("--wordcount", "-w", help="Print word count for each scene."),
    ] = False,
    scene_headings: Annotated[
        bool,
        typer.Option("--scene-headings", "-s", help="Prefix each scene with a `##` heading."),
    ] = False,
) -> None:
    """Assemble book in markdown format."""

    options: CommandContext = ctx.obj
    try:
        config = _resolve_config(options.input_file, outdir, wordcount, scene_headings)
        assembler = ManuscriptAssembler(
            run_logger=RunLogger(level="DEBUG" if options.verbose else "INFO"),
            word_count_callback=echo_word_count,
        )
        assembler.assemble(config)
    except Exception as exc:
        exit_with_command_error("markdown", exc)

    store = ManuscriptStore(config.output_dir)
    echo_assembly_summary(store.chapter_files(), store.metadata_path())


app.command("md", hidden=True)(markdown_command)
app.command("m", hidden=True)(markdown_command)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()

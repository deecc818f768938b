"""Main CLI application entry point."""

import logging
from pathlib import Path

import typer
from rich.console import Console

from suitegen import __version__
from suitegen.core.generator import TestGenerator
from suitegen.core.models import GenerationOptions, Runner, TargetKind
from suitegen.schemas.jest import build_jest_schema
from suitegen.services.loader import load_json, load_snippets, load_suite
from suitegen.utils.config import ConfigLoader
from suitegen.utils.exceptions import (
    ConfigurationError,
    ModelError,
    ProjectLoadError,
    TestGeneratorError,
)

console = Console(stderr=True)

app = typer.Typer(
    name="suitegen",
    help="Compile authored browser test suites into Jest test source.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"suitegen v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """suitegen - compile authored browser test suites into test source."""
    pass


@app.command()
def generate(
    suite_path: Path = typer.Argument(..., help="Suite document (JSON)"),
    snippets_path: Path | None = typer.Option(
        None,
        "--snippets",
        "-s",
        help="Snippet library document (JSON)",
    ),
    env_path: Path | None = typer.Option(
        None,
        "--env",
        "-e",
        help="Environment variables document (JSON), exposed as ENV",
    ),
    runner: str | None = typer.Option(
        None,
        "--runner",
        "-r",
        help="Target runner: 'embedded' adds command markers, 'export' does not",
    ),
    trace: bool = typer.Option(
        False,
        "--trace",
        help="Capture page/target state after every command",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Pause before each command until the runtime releases it",
    ),
    incognito: bool = typer.Option(
        False,
        "--incognito",
        help="Run the browser in an incognito context",
    ),
    ignore_https_errors: bool = typer.Option(
        False,
        "--ignore-https-errors",
        help="Ignore HTTPS errors during navigation",
    ),
    update_snapshot: bool = typer.Option(
        False,
        "--update-snapshot",
        help="Ask the runtime to update stored snapshots",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write generated source to this file instead of stdout",
    ),
    project_dir: Path | None = typer.Option(
        None,
        "--project-dir",
        help="Project directory (defaults to the suite's directory)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Show detailed progress information",
    ),
) -> None:
    """Generate test source for a suite."""
    try:
        config = ConfigLoader.load()
        selected_runner = Runner(runner.lower()) if runner else config.runner
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(code=2)
    except ValueError:
        valid = ", ".join(r.value for r in Runner)
        console.print(f"[red]Error:[/red] Unknown runner '{runner}' ({valid})")
        raise typer.Exit(code=2)

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        suite = load_suite(suite_path)
        snippets = load_snippets(snippets_path)
        env = load_json(env_path) if env_path else {}
    except (ProjectLoadError, ModelError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=2)

    generator = TestGenerator(
        suite,
        build_jest_schema(),
        snippets=snippets,
        runner=selected_runner,
        project_directory=str(project_dir or suite_path.parent),
        output_directory=str(config.output_dir),
        env=env,
        options=GenerationOptions(
            trace=trace,
            interactive_mode=interactive,
            update_snapshot=update_snapshot,
            incognito=incognito,
            ignore_https_errors=ignore_https_errors,
        ),
        interactive_illegal_methods=config.interactive_illegal_methods,
    )

    try:
        result = generator.generate()
    except TestGeneratorError as e:
        console.print(f"[red]Generation failed:[/red] {e}")
        if e.command_id:
            console.print(
                f"  command {e.command_id} in group {e.group_id}, test {e.test_id}"
            )
        raise typer.Exit(code=1)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.source, encoding="utf-8")
        console.print(f"[green]Wrote[/green] {output}")
    else:
        typer.echo(result.source, nl=False)

    if interactive:
        console.print(
            f"Interactive stops: {', '.join(result.interactive_ids) or 'none'}"
        )


@app.command()
def schema() -> None:
    """List the methods supported by the built-in schema."""
    jest = build_jest_schema()
    for kind in TargetKind:
        typer.echo(f"{kind.value}: {', '.join(jest.methods(kind))}")


if __name__ == "__main__":
    app()

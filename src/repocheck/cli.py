# cli.py
from __future__ import annotations

import sys
from pathlib import Path

import click

from repocheck.checks import pipeline_steps
from repocheck.git import find_repo_root
from repocheck.runner import run_pipeline
from repocheck.settings import from_env
from repocheck.ui.console import Console, get_console, set_console


@click.command()
@click.option(
    "--repo-root",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Repository root (defaults to the enclosing git work tree)",
)
@click.option(
    "--print-plan/--run",
    default=False,
    help="Print the steps that would run, then exit",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
def cli(repo_root, print_plan, debug):
    """Run the repository checks in order, stopping at the first failure."""
    console = Console(debug=debug)
    set_console(console)

    steps = pipeline_steps(from_env())

    if print_plan:
        console.print_plan(steps)
        sys.exit(0)

    root = repo_root if repo_root is not None else find_repo_root()
    console.print_debug(f"Running {len(steps)} step(s) from {root}")

    try:
        status = run_pipeline(steps, repo_root=root)
    except KeyboardInterrupt:
        get_console().print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    cli()

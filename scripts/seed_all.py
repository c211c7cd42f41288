"""Seed the project graph, then validate it."""

from __future__ import annotations

import subprocess
import sys

import click
from rich.console import Console

console = Console()


def _run_module(module: str, args: list[str]) -> int:
    result = subprocess.run(
        [sys.executable, "-m", module, *args],
        capture_output=False,
    )
    return result.returncode


@click.command()
@click.option("--hosts", type=str, default=None, help="ArangoDB URL(s), comma-separated")
@click.option("--database", type=str, default=None, help="Target database name")
@click.option("--skip-validate", is_flag=True, help="Skip seed validation")
def main(hosts: str | None, database: str | None, skip_validate: bool) -> None:
    """Seed the project graph, then validate it."""
    console.print("[bold blue]Starting project graph seed...[/bold blue]")
    console.print()

    args: list[str] = []
    if hosts:
        args += ["--hosts", hosts]
    if database:
        args += ["--database", database]

    console.print("[bold cyan]Step 1/2: Seeding ArangoDB...[/bold cyan]")
    if _run_module("scripts.seed_arango", args) != 0:
        console.print("[bold red]ArangoDB seeding failed![/bold red]")
        sys.exit(1)
    console.print()

    if not skip_validate:
        console.print("[bold cyan]Step 2/2: Validating seed...[/bold cyan]")
        if _run_module("scripts.validate_seed", args) != 0:
            console.print("[bold red]Seed validation failed![/bold red]")
            sys.exit(1)
        console.print()

    console.print("[bold green]✓ Project graph seed complete![/bold green]")


if __name__ == "__main__":
    main()

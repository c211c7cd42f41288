"""Validate the seeded project graph.

This script validates:
1. Every sample collection exists with the expected document count
2. Every reference field resolves to a document in its target collection
   (orphan detection)

Anti-Pattern Audit:
- Single client instance, closed in ``finally``
- Read-only: never writes to the database
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.table import Table

from scripts.seed_arango import SeedingConfig, get_arango_client, load_config, parse_auth
from src.project_graph import COLLECTION_NAMES, EXPECTED_COUNTS, REFERENCES, find_dangling_references

if TYPE_CHECKING:
    from arango import ArangoClient
    from arango.database import StandardDatabase

console = Console()


@dataclass
class ValidationResult:
    """Result of a validation check."""

    name: str
    expected: int | None
    actual: int
    passed: bool
    message: str = ""


@dataclass
class ValidationReport:
    """Complete validation report."""

    collections: list[ValidationResult] = field(default_factory=list)
    references: list[ValidationResult] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        """Check if all validations passed."""
        return all(r.passed for r in self.collections + self.references)

    @property
    def failures(self) -> list[ValidationResult]:
        """Get all failed validations."""
        return [r for r in self.collections + self.references if not r.passed]


def count_documents(db: StandardDatabase) -> dict[str, int]:
    """Count documents per sample collection (missing collection counts as 0)."""
    counts = {}
    for name in COLLECTION_NAMES:
        if db.has_collection(name):
            counts[name] = db.collection(name).count()
        else:
            counts[name] = 0
    return counts


def load_documents(db: StandardDatabase) -> dict[str, list[dict[str, Any]]]:
    """Read every document of the sample collections that exist."""
    return {
        name: list(db.collection(name).all())
        for name in COLLECTION_NAMES
        if db.has_collection(name)
    }


def validate_counts(db: StandardDatabase) -> list[ValidationResult]:
    """Compare each collection's document count with the sample dataset."""
    results = []
    counts = count_documents(db)

    for name in COLLECTION_NAMES:
        expected = EXPECTED_COUNTS[name]
        actual = counts[name]
        if not db.has_collection(name):
            message = "Collection missing"
        elif actual != expected:
            message = f"Expected {expected} documents"
        else:
            message = ""
        results.append(ValidationResult(
            name=name,
            expected=expected,
            actual=actual,
            passed=not message,
            message=message,
        ))

    return results


def validate_references(db: StandardDatabase) -> list[ValidationResult]:
    """Check that every reference field points at an existing document."""
    dangling = find_dangling_references(load_documents(db))
    results = []

    for ref in REFERENCES:
        offenders = dangling.get(ref, [])
        results.append(ValidationResult(
            name=ref.label,
            expected=0,
            actual=len(offenders),
            passed=not offenders,
            message="" if not offenders else "Orphans: " + ", ".join(offenders),
        ))

    return results


def run_full_validation(
    config: SeedingConfig,
    client: ArangoClient | None = None,
) -> ValidationReport:
    """Run full validation and return report."""
    report = ValidationReport()
    owns_client = client is None
    if client is None:
        client = get_arango_client(config.hosts)

    try:
        sys_db = client.db("_system", username=config.username, password=config.password)
        if not sys_db.has_database(config.database):
            report.collections.append(ValidationResult(
                name=f"Database: {config.database}",
                expected=1,
                actual=0,
                passed=False,
                message="Database missing",
            ))
            return report

        db = client.db(config.database, username=config.username, password=config.password)
        report.collections = validate_counts(db)
        report.references = validate_references(db)
    finally:
        if owns_client:
            client.close()

    return report


def _status_text(result: ValidationResult, fail_color: str) -> str:
    status = "✓" if result.passed else "✗"
    color = "green" if result.passed else fail_color
    text = f"[{color}]{status}[/{color}]"
    if result.message:
        text += f" {result.message}"
    return text


@click.command()
@click.option("--hosts", type=str, default=None, help="ArangoDB URL(s), comma-separated")
@click.option("--database", type=str, default=None, help="Database to validate")
@click.option("--auth", type=str, default=None, help="user/password for the _system database")
def main(hosts: str | None, database: str | None, auth: str | None) -> None:
    """Validate seeded project graph integrity."""
    username, password = parse_auth(auth) if auth is not None else (None, None)
    config = load_config(hosts=hosts, database=database, username=username, password=password)

    console.print(f"\n[bold blue]Validating {config.database}...[/bold blue]\n")

    report = run_full_validation(config)

    table = Table(title="Collections")
    table.add_column("Collection", style="cyan")
    table.add_column("Expected", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Status", justify="center")

    for result in report.collections:
        table.add_row(
            result.name,
            str(result.expected),
            str(result.actual),
            _status_text(result, "red"),
        )

    console.print(table)
    console.print()

    if report.references:
        table = Table(title="References")
        table.add_column("Reference", style="cyan")
        table.add_column("Orphans", justify="right")
        table.add_column("Status", justify="center")

        for result in report.references:
            table.add_row(result.name, str(result.actual), _status_text(result, "yellow"))

        console.print(table)
        console.print()

    if report.all_passed:
        console.print("[bold green]✓ All validations passed![/bold green]\n")
    else:
        console.print("[bold yellow]⚠ Some validations failed:[/bold yellow]")
        for failure in report.failures:
            console.print(f"  - {failure.name}: {failure.message or 'Failed'}")
        console.print()
        sys.exit(1)


if __name__ == "__main__":
    main()

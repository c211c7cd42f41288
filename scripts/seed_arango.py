"""Seed ArangoDB with the sample project graph.

This script bootstraps the ``project_graph`` database:
1. Creates the database (with one bootstrap user) if it does not exist
2. Ensures the seven document collections exist and truncates them
3. Inserts the literal sample records in reference order
   (teams, members, projects, project_health, tasks, task_assignments,
   milestones)

Every run replaces the previous contents, so running it twice leaves the
database in the same state as running it once. Any failure aborts the run.

Anti-Pattern Audit:
- Single client instance per run, closed in ``finally``
- Explicit database handle passed to every step (no ambient ``db``)
- Create-then-tolerate-duplicate instead of check-then-create
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.progress import Progress

from src.project_graph import SEED_PLAN
from src.project_graph.dataset import Record

if TYPE_CHECKING:
    from arango import ArangoClient
    from arango.collection import StandardCollection
    from arango.database import StandardDatabase

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_HOSTS = "http://localhost:8529"
DEFAULT_AUTH = "root/"
DEFAULT_DATABASE = "project_graph"
DEFAULT_BOOTSTRAP_USER = "root"
DEFAULT_BOOTSTRAP_PASSWORD = "arango2rdb"
SYSTEM_DATABASE = "_system"

# ERROR_ARANGO_DUPLICATE_NAME
DUPLICATE_NAME_ERROR = 1207


@dataclass
class SeedingConfig:
    """Configuration for ArangoDB seeding.

    ``username``/``password`` authenticate against ``_system``; the
    bootstrap pair is the user created together with a new database.
    """

    hosts: str = DEFAULT_HOSTS
    username: str = "root"
    password: str = ""
    database: str = DEFAULT_DATABASE
    bootstrap_user: str = DEFAULT_BOOTSTRAP_USER
    bootstrap_password: str = DEFAULT_BOOTSTRAP_PASSWORD
    verbose: bool = False


@dataclass
class SeedingStats:
    """Statistics from seeding operations."""

    database_created: bool = False
    documents_seeded: dict[str, int] = field(default_factory=dict)

    @property
    def total_documents(self) -> int:
        return sum(self.documents_seeded.values())


def parse_auth(auth_str: str) -> tuple[str, str]:
    """Split a ``user/password`` string; a bare value is the root password."""
    if "/" in auth_str:
        user, password = auth_str.split("/", 1)
        return user, password
    return "root", auth_str


def load_config(**overrides: Any) -> SeedingConfig:
    """Build a SeedingConfig from the environment (and ``.env``).

    Keyword overrides whose value is None are ignored, so click options
    left unset fall back to the environment.
    """
    load_dotenv()

    username, password = parse_auth(os.getenv("ARANGO_AUTH", DEFAULT_AUTH))
    config = SeedingConfig(
        hosts=os.getenv("ARANGO_HOSTS", DEFAULT_HOSTS),
        username=username,
        password=password,
        database=os.getenv("ARANGO_DATABASE", DEFAULT_DATABASE),
        bootstrap_user=os.getenv("ARANGO_BOOTSTRAP_USER", DEFAULT_BOOTSTRAP_USER),
        bootstrap_password=os.getenv("ARANGO_BOOTSTRAP_PASSWORD", DEFAULT_BOOTSTRAP_PASSWORD),
    )
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)
    return config


def get_arango_client(hosts: str) -> ArangoClient:
    """Create an ArangoDB client for the given host URL(s).

    Comma-separated URLs are passed through as a host list.
    """
    from arango import ArangoClient

    host_list = [h.strip() for h in hosts.split(",") if h.strip()]
    return ArangoClient(hosts=host_list if len(host_list) > 1 else host_list[0])


def ensure_database(
    sys_db: StandardDatabase,
    name: str,
    credential: tuple[str, str],
) -> bool:
    """Create database ``name`` with one bootstrap user unless it exists.

    Returns True if the database was created, False if it already existed.
    A duplicate-name rejection from the server counts as "already exists",
    so two initializers racing on the same server both succeed.
    """
    from arango.exceptions import DatabaseCreateError

    if sys_db.has_database(name):
        logger.debug(f"Database already exists: {name}")
        return False

    username, password = credential
    console.print(f"creating new database: {name}")
    try:
        sys_db.create_database(
            name,
            users=[{"username": username, "password": password, "active": True}],
        )
    except DatabaseCreateError as e:
        if e.error_code != DUPLICATE_NAME_ERROR:
            raise
        logger.debug(f"Database created concurrently: {name}")
        return False

    console.print("done")
    return True


def ensure_collection(db: StandardDatabase, name: str) -> StandardCollection:
    """Return document collection ``name``, creating it if absent, then truncate it."""
    from arango.exceptions import CollectionCreateError

    if db.has_collection(name):
        collection = db.collection(name)
    else:
        try:
            collection = db.create_collection(name)
            logger.debug(f"Created collection: {name}")
        except CollectionCreateError as e:
            if e.error_code != DUPLICATE_NAME_ERROR:
                raise
            collection = db.collection(name)

    collection.truncate()
    return collection


def insert_record(collection: StandardCollection, record: dict[str, Any]) -> None:
    """Insert one document keyed by its ``_key``; a duplicate key raises."""
    collection.insert(record)
    logger.debug(f"Inserted {collection.name}/{record['_key']}")


def seed_collection(
    db: StandardDatabase,
    name: str,
    records: Sequence[Record],
) -> int:
    """Reset collection ``name`` and insert ``records``. Returns the insert count."""
    collection = ensure_collection(db, name)
    count = 0
    for record in records:
        insert_record(collection, record.to_document())
        count += 1
    return count


def seed_all(
    config: SeedingConfig,
    client: ArangoClient | None = None,
    on_collection_seeded: Callable[[str, int], None] | None = None,
) -> SeedingStats:
    """Execute the full seeding procedure.

    Args:
        config: Connection and target database settings.
        client: Client to use. When omitted one is created from
            ``config.hosts`` and closed afterwards.
        on_collection_seeded: Called with (collection name, count) after
            each collection is populated.
    """
    stats = SeedingStats()
    owns_client = client is None
    if client is None:
        client = get_arango_client(config.hosts)

    try:
        sys_db = client.db(SYSTEM_DATABASE, username=config.username, password=config.password)
        stats.database_created = ensure_database(
            sys_db,
            config.database,
            (config.bootstrap_user, config.bootstrap_password),
        )

        db = client.db(config.database, username=config.username, password=config.password)
        for name, records in SEED_PLAN:
            count = seed_collection(db, name, records)
            stats.documents_seeded[name] = count
            if on_collection_seeded is not None:
                on_collection_seeded(name, count)
    finally:
        if owns_client:
            client.close()

    return stats


@click.command()
@click.option("--hosts", type=str, default=None, help="ArangoDB URL(s), comma-separated")
@click.option("--database", type=str, default=None, help="Target database name")
@click.option("--auth", type=str, default=None, help="user/password for the _system database")
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
def main(
    hosts: str | None,
    database: str | None,
    auth: str | None,
    verbose: bool,
) -> None:
    """Seed ArangoDB with the sample project graph."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    username, password = parse_auth(auth) if auth is not None else (None, None)
    config = load_config(
        hosts=hosts,
        database=database,
        username=username,
        password=password,
        verbose=verbose,
    )

    console.print(f"\n[bold blue]Seeding ArangoDB database {config.database}...[/bold blue]\n")

    try:
        with Progress(console=console) as progress:
            task = progress.add_task("[green]Seeding...", total=len(SEED_PLAN))

            def report(name: str, count: int) -> None:
                console.print(f"  ✓ Seeded {count} documents into {name}")
                progress.update(task, advance=1)

            stats = seed_all(config, on_collection_seeded=report)

    except Exception as e:
        console.print(f"\n[bold red]Error: {e}[/bold red]")
        raise

    logger.info(f"Seeded {stats.total_documents} documents into {config.database}")
    console.print("\n[bold green]Sample project graph data loaded.[/bold green]")


if __name__ == "__main__":
    main()

# userseed/main.py

import sys
import logging
import click
from sqlalchemy.exc import SQLAlchemyError
from userseed.core.runner import SeedError, discover_seeds, run_seeds
from userseed.database import DATABASE_URL, create_db_engine, create_session_factory


logger = logging.getLogger(__name__)


@click.group()
def cli():
    """Database seed runner."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr
    )


@cli.command("list")
def list_seeds():
    for name in discover_seeds():
        click.echo(name)


@cli.command("run")
@click.option("--specific", multiple=True, help="Run only the named seed (repeatable).")
@click.option("--database-url", default=None, help="SQLAlchemy database URL. Defaults to $DATABASE_URL.")
def run(specific, database_url):
    engine = None
    try:
        engine = create_db_engine(database_url or DATABASE_URL)
        ran = run_seeds(create_session_factory(engine), specific=list(specific))
    except (SeedError, SQLAlchemyError, ImportError) as e:
        # ImportError: the URL names a driver that is not installed
        logger.error("Seeding failed: %s", e)
        raise click.ClickException(str(e))
    finally:
        if engine is not None:
            engine.dispose()

    click.echo(f"Ran {len(ran)} seed file(s)")
    for name in ran:
        click.echo(click.style(name, fg="green"))


if __name__ == "__main__":
    cli()

# userseed/core/runner.py

import logging
import pkgutil
import importlib
from types import ModuleType
from userseed import seeds
from userseed.database import db_session


logger = logging.getLogger(__name__)


class SeedError(Exception):
    pass


class SeedNotFound(SeedError):
    pass


class InvalidSeed(SeedError):
    pass


def discover_seeds(package: ModuleType = seeds) -> list[str]:
    """
    Lists seed module names in the package, sorted so that numeric
    prefixes decide the run order.
    """
    return sorted(
        info.name for info in pkgutil.iter_modules(package.__path__)
        if not info.ispkg
    )


def load_seed(name: str, package: ModuleType = seeds) -> ModuleType:
    if name not in discover_seeds(package):
        raise SeedNotFound(f"Seed not found: {name}")

    module = importlib.import_module(f"{package.__name__}.{name}")
    if not callable(getattr(module, "run", None)):
        raise InvalidSeed(f"Seed {name} has no run(db) function")
    return module


def run_seeds(session_factory, specific: list[str] | None = None, package: ModuleType = seeds) -> list[str]:
    """
    Runs each seed in its own session. A failing seed is rolled back and
    its exception re-raised; seeds after it are not run.
    """
    names = list(specific) if specific else discover_seeds(package)
    modules = [load_seed(name, package) for name in names]

    ran = []
    for name, module in zip(names, modules):
        logger.info("Running seed %s", name)
        try:
            with db_session(session_factory) as db:
                module.run(db)
        except Exception:
            logger.error("Seed %s failed", name)
            raise
        ran.append(name)

    logger.info("Ran %d seed file(s)", len(ran))
    return ran

"""Load sample club data from a JSON seed file.

The seed file is a JSON object keyed by collection. Every document carries a
`key` that other documents use to refer to it, written as
"@<collection>.<key>" wherever an id is expected:

    {
      "managers": [{"key": "klopp", "name": "Jürgen Klopp", ...}],
      "seasons": [{"key": "2023-2024", "manager_id": "@managers.klopp", ...}]
    }

Documents go through the same services as API writes, so seed data is
validated and consistency-checked exactly like client data. Collections are
loaded in dependency order; match lineups and goals are applied after the
fixture is created, the same way a client would record them.
"""

import json
import logging
from pathlib import Path
from typing import Any

from sqlalchemy.orm import Session

from ..config.settings import settings
from ..core.exceptions import LFCError
from ..services import (
    competition_service,
    contract_service,
    manager_service,
    match_service,
    player_service,
    player_stats_service,
    season_service,
    stadium_service,
    trophy_service,
)
from .init_db import reset_database

logger = logging.getLogger(__name__)

# Collection name -> service, in the order documents can be created
SEED_ORDER = (
    ("competitions", competition_service),
    ("stadiums", stadium_service),
    ("managers", manager_service),
    ("trophies", trophy_service),
    ("seasons", season_service),
    ("player_stats", player_stats_service),
    ("contracts", contract_service),
    ("players", player_service),
    ("matches", match_service),
)

# Match fields recorded after the fixture exists
MATCH_DETAILS = ("lineup", "goals")


class SeedError(LFCError):
    """The seed file is malformed or refers to a key that was never defined."""


def load_seed_file(path: Path | None = None) -> dict:
    path = Path(path or settings.seed_file)
    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except json.JSONDecodeError as e:
        raise SeedError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SeedError(f"{path} must contain a JSON object keyed by collection")
    unknown = set(data) - {name for name, _ in SEED_ORDER}
    if unknown:
        raise SeedError(f"Unknown collections in {path}: {', '.join(sorted(unknown))}")
    return data


def resolve_references(value: Any, ids: dict[str, int]) -> Any:
    """Replace "@collection.key" strings with the ids assigned during seeding."""
    if isinstance(value, dict):
        return {key: resolve_references(item, ids) for key, item in value.items()}
    if isinstance(value, list):
        return [resolve_references(item, ids) for item in value]
    if isinstance(value, str) and value.startswith("@"):
        reference = value[1:]
        if reference not in ids:
            raise SeedError(f"Unknown seed reference {value!r}")
        return ids[reference]
    return value


def seed_database(db: Session, path: Path | None = None, reset: bool = False) -> dict[str, int]:
    """Create every document in the seed file.

    Args:
        db: Session the services write through
        path: Seed file, defaults to settings.seed_file
        reset: Drop and recreate all tables first

    Returns:
        Number of documents created per collection
    """
    data = load_seed_file(path)
    if reset:
        bind = db.get_bind()
        db.close()  # Forget rows loaded before the tables are dropped
        reset_database(bind)

    ids: dict[str, int] = {}
    counts: dict[str, int] = {}
    for collection, service in SEED_ORDER:
        documents = data.get(collection, [])
        for position, document in enumerate(documents):
            document = dict(document)
            key = document.pop("key", str(position))
            details = {}
            if collection == "matches":
                details = {field: document.pop(field) for field in MATCH_DETAILS if field in document}

            row = service.create(db, resolve_references(document, ids))
            if details:
                row = service.update(db, row.id, resolve_references(details, ids))
            ids[f"{collection}.{key}"] = row.id

        counts[collection] = len(documents)
        logger.info("Seeded %d %s", len(documents), collection)

    return counts

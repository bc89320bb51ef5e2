"""Match service: CRUD plus the lineup, goal and substitution sub-resources.

Every write, whether it touches the whole match or a single goal, ends in
the same place: the complete match document is validated against
MatchDocument and then checked by match_rules.validate_match.
"""

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.orm import Session

from ..api.schemas import Goal, MatchCreate, MatchDocument, Substitution
from ..core.exceptions import BusinessLogicError, ResourceNotFoundError
from ..database.models import Competition, Match, Player, Season, Stadium
from . import match_rules
from .base import CrudService, validate_document

logger = logging.getLogger(__name__)


class MatchService(CrudService):
    model = Match
    create_schema = MatchCreate
    document_schema = MatchDocument
    resource = "Match"
    references = {"season_id": Season, "competition_id": Competition, "stadium_id": Stadium}
    sort_fields = {
        "date": "date",
        "opponent": "opponent_name",
        "opponent_name": "opponent_name",
        "home": "home",
    }

    # ========== HOOKS ==========

    def prepare_replacement(self, row: Match, doc: dict) -> dict:
        """PUT replaces the fixture details but keeps lineup and goals."""
        stored = row.to_document()
        return {**doc, "lineup": stored["lineup"], "goals": stored["goals"]}

    def check_consistency(self, db: Session, row, doc: dict, changed: set[str]) -> dict:
        season = db.get(Season, doc["season_id"])
        lineup = doc.get("lineup") or {}
        player_ids = match_rules.lineup_player_ids(lineup)
        statuses = {}
        if player_ids:
            rows = db.query(Player.id, Player.status).filter(Player.id.in_(player_ids))
            statuses = {player_id: status for player_id, status in rows}
        return match_rules.validate_match(
            doc,
            season.years,
            statuses,
            score_supplied="score" in changed,
            goals_supplied="goals" in changed,
        )

    # ========== LINEUP ==========

    def get_lineup(self, db: Session, match_id: int) -> dict:
        return self.get(db, match_id).to_document()["lineup"]

    def replace_starting(self, db: Session, match_id: int, player_ids: list[int]) -> Match:
        if len(player_ids) != match_rules.STARTING_LINEUP_SIZE:
            raise BusinessLogicError(
                f"Starting lineup must contain exactly {match_rules.STARTING_LINEUP_SIZE} players"
            )

        def change(doc):
            doc["lineup"]["starting"] = list(player_ids)

        return self._rewrite(db, match_id, change, "starting lineup")

    def replace_substitutes(self, db: Session, match_id: int, player_ids: list[int]) -> Match:
        def change(doc):
            doc["lineup"]["substitutes"] = list(player_ids)

        return self._rewrite(db, match_id, change, "substitutes")

    # ========== SUBSTITUTIONS ==========

    def list_substitutions(self, db: Session, match_id: int) -> list[dict]:
        return self.get_lineup(db, match_id)["substitutions"]

    def get_substitution(self, db: Session, match_id: int, index: int) -> dict:
        return _item_at(self.list_substitutions(db, match_id), index, "Substitution")

    def add_substitution(self, db: Session, match_id: int, data: Any) -> tuple[Match, int]:
        substitution = validate_document(Substitution, data).model_dump()

        def change(doc):
            doc["lineup"]["substitutions"].append(substitution)

        row = self._rewrite(db, match_id, change, "substitution added")
        return row, len(row.lineup["substitutions"]) - 1

    def replace_substitution(self, db: Session, match_id: int, index: int, data: Any) -> Match:
        substitution = validate_document(Substitution, data).model_dump()

        def change(doc):
            substitutions = doc["lineup"]["substitutions"]
            _item_at(substitutions, index, "Substitution")
            substitutions[index] = substitution

        return self._rewrite(db, match_id, change, f"substitution {index} replaced")

    def remove_substitution(self, db: Session, match_id: int, index: int) -> Match:
        def change(doc):
            substitutions = doc["lineup"]["substitutions"]
            _item_at(substitutions, index, "Substitution")
            del substitutions[index]

        return self._rewrite(db, match_id, change, f"substitution {index} removed")

    # ========== GOALS ==========

    def list_goals(self, db: Session, match_id: int) -> list[dict]:
        return self.get(db, match_id).to_document()["goals"]

    def get_goal(self, db: Session, match_id: int, index: int) -> dict:
        return _item_at(self.list_goals(db, match_id), index, "Goal")

    def add_goal(self, db: Session, match_id: int, data: Any) -> tuple[Match, int]:
        goal = validate_document(Goal, data).model_dump()

        def change(doc):
            doc["goals"].append(goal)
            _count_goals(doc)

        row = self._rewrite(db, match_id, change, "goal added")
        return row, len(row.goals) - 1

    def replace_goal(self, db: Session, match_id: int, index: int, data: Any) -> Match:
        goal = validate_document(Goal, data).model_dump()

        def change(doc):
            _item_at(doc["goals"], index, "Goal")
            doc["goals"][index] = goal

        return self._rewrite(db, match_id, change, f"goal {index} replaced")

    def remove_goal(self, db: Session, match_id: int, index: int) -> Match:
        def change(doc):
            _item_at(doc["goals"], index, "Goal")
            del doc["goals"][index]
            _count_goals(doc)

        return self._rewrite(db, match_id, change, f"goal {index} removed")

    # ========== INTERNALS ==========

    def _rewrite(self, db: Session, match_id: int, change: Callable[[dict], None], action: str) -> Match:
        """Apply `change` to the stored document, then validate and save it whole."""
        row = self.get(db, match_id)
        doc = row.to_document()
        change(doc)
        document = validate_document(MatchDocument, doc)
        row = self._save(db, row, document.model_dump(), set())
        logger.info("Updated %s %s: %s", self.resource, match_id, action)
        return row


def _item_at(items: list, index: int, resource: str):
    if not 0 <= index < len(items):
        raise ResourceNotFoundError(resource, index)
    return items[index]


def _count_goals(doc: dict) -> None:
    """Set the club's score to the number of goals, including back to zero."""
    doc["score"][match_rules.club_side(doc["home"])] = len(doc["goals"])

"""Services for the resources with no rules beyond their schema and references."""

from ..api.schemas import (
    CompetitionCreate,
    ManagerCreate,
    PlayerCreate,
    PlayerStatsCreate,
    SeasonCreate,
    StadiumCreate,
    TrophyCreate,
)
from ..core.exceptions import ConflictError, ResourceNotFoundError
from ..database.models import (
    Competition,
    Contract,
    Manager,
    Match,
    Player,
    PlayerStats,
    Season,
    Stadium,
    Trophy,
)
from . import match_rules
from .base import CrudService


class CompetitionService(CrudService):
    model = Competition
    create_schema = CompetitionCreate
    resource = "Competition"
    unique_fields = {"name": "Competition name is already taken"}
    sort_fields = {"name": "name", "type": "type", "year_of_creation": "year_of_creation"}


class StadiumService(CrudService):
    model = Stadium
    create_schema = StadiumCreate
    resource = "Stadium"
    unique_fields = {"name": "Stadium name is already taken"}
    sort_fields = {"name": "name", "capacity": "capacity", "location": "location"}


class ManagerService(CrudService):
    model = Manager
    create_schema = ManagerCreate
    resource = "Manager"
    sort_fields = {
        "name": "name",
        "nationality": "nationality",
        "date_of_birth": "date_of_birth",
        "status": "status",
    }


class SeasonService(CrudService):
    model = Season
    create_schema = SeasonCreate
    resource = "Season"
    references = {"manager_id": Manager}
    many_references = {"trophy_ids": ("trophies", Trophy)}
    unique_fields = {"years": "Season years are already taken"}
    sort_fields = {"years": "years", "status": "status"}


class TrophyService(CrudService):
    model = Trophy
    create_schema = TrophyCreate
    resource = "Trophy"
    references = {"competition_id": Competition}
    sort_fields = {"won_date": "won_date"}


class PlayerStatsService(CrudService):
    model = PlayerStats
    create_schema = PlayerStatsCreate
    resource = "Player stats"
    sort_fields = {
        "appearances": "appearances",
        "minutes_played": "minutes_played",
        "goals": "goals_total",
        "assists": "assists",
        "tackles": "tackles",
        "interceptions": "interceptions",
        "clearances": "clearances",
        "clean_sheets": "clean_sheets",
        "saves": "saves",
    }


class PlayerService(CrudService):
    model = Player
    create_schema = PlayerCreate
    resource = "Player"
    references = {"current_contract_id": Contract, "stats_id": PlayerStats}
    many_references = {"contract_history_ids": ("contract_history", Contract)}
    unique_fields = {"jersey_number": "Jersey number is already taken"}
    sort_fields = {
        "name": "last_name",
        "last_name": "last_name",
        "first_name": "first_name",
        "position": "position",
        "nationality": "nationality",
        "date_of_birth": "date_of_birth",
        "height": "height",
        "weight": "weight",
        "status": "status",
        "jersey_number": "jersey_number",
        "market_value": "market_value_amount",
    }

    def stats_for(self, db, player_id: int) -> PlayerStats:
        """The statistics document linked to a player."""
        player = self.get(db, player_id)
        if player.stats is None:
            raise ResourceNotFoundError("Player stats", player_id)
        return player.stats

    def contract_for(self, db, player_id: int) -> Contract:
        """The player's current contract."""
        player = self.get(db, player_id)
        if player.current_contract is None:
            raise ResourceNotFoundError("Contract", player_id)
        return player.current_contract

    def delete(self, db, document_id: int) -> None:
        """Lineups and goals hold player ids without a foreign key, so check them here."""
        self.get(db, document_id)
        for match in db.query(Match).order_by(Match.id):
            if document_id in match_rules.referenced_player_ids(match.to_document()):
                raise ConflictError(f"Player {document_id} is still referenced by match {match.id}")
        super().delete(db, document_id)


"""Contract service: CRUD plus index-addressed bonuses."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from ..api.schemas import Bonus, ContractCreate
from ..core.exceptions import ResourceNotFoundError
from ..database.models import Contract, Season
from .base import CrudService, validate_document

logger = logging.getLogger(__name__)


class ContractService(CrudService):
    model = Contract
    create_schema = ContractCreate
    resource = "Contract"
    many_references = {"season_ids": ("seasons", Season)}
    sort_fields = {"start": "start", "end": "end", "salary_base": "salary_base", "salary": "salary_base"}

    def list_bonuses(self, db: Session, contract_id: int) -> list[dict]:
        return self.get(db, contract_id).to_document()["bonuses"]

    def get_bonus(self, db: Session, contract_id: int, index: int) -> dict:
        bonuses = self.list_bonuses(db, contract_id)
        if not 0 <= index < len(bonuses):
            raise ResourceNotFoundError("Bonus", index)
        return bonuses[index]

    def add_bonus(self, db: Session, contract_id: int, data: Any) -> tuple[Contract, int]:
        bonus = validate_document(Bonus, data).model_dump()
        bonuses = self.list_bonuses(db, contract_id)
        bonuses.append(bonus)
        row = self._write_bonuses(db, contract_id, bonuses)
        return row, len(bonuses) - 1

    def replace_bonus(self, db: Session, contract_id: int, index: int, data: Any) -> Contract:
        bonus = validate_document(Bonus, data).model_dump()
        self.get_bonus(db, contract_id, index)
        bonuses = self.list_bonuses(db, contract_id)
        bonuses[index] = bonus
        return self._write_bonuses(db, contract_id, bonuses)

    def remove_bonus(self, db: Session, contract_id: int, index: int) -> Contract:
        self.get_bonus(db, contract_id, index)
        bonuses = self.list_bonuses(db, contract_id)
        del bonuses[index]
        return self._write_bonuses(db, contract_id, bonuses)

    def _write_bonuses(self, db: Session, contract_id: int, bonuses: list[dict]) -> Contract:
        # Bonuses are replaced wholesale; the rest of the contract is revalidated with them
        return self.update(db, contract_id, {"bonuses": bonuses})

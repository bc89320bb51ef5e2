"""
Contract endpoints: /contracts plus index-addressed bonuses.

Bonuses are an embedded list, so they are addressed by position:
- GET    /contracts/{id}/bonuses          - all bonuses
- POST   /contracts/{id}/bonuses          - append one
- GET    /contracts/{id}/bonuses/{index}  - one bonus
- PUT    /contracts/{id}/bonuses/{index}  - replace it
- DELETE /contracts/{id}/bonuses/{index}  - remove it (later bonuses shift down)
"""

from fastapi import Depends, Path, Response
from sqlalchemy.orm import Session

from ...database.connection import get_db
from ...services import contract_service
from ..responses import http_date, no_content
from ..schemas import Bonus, ContractCreate, ContractResponse, ContractUpdate, DataEnvelope
from .crud import ResourceView, build_crud_router

view = ResourceView("contracts", "Contract", ContractResponse)

router = build_crud_router(contract_service, view, ContractCreate, ContractUpdate)


def bonus_links(contract_id: int, index: int | None = None) -> dict:
    base = f"{view.item_url(contract_id)}/bonuses"
    return {
        "self": base if index is None else f"{base}/{index}",
        "bonuses": base,
        "contract": view.item_url(contract_id),
    }


@router.get("/{contract_id}/bonuses", response_model=DataEnvelope[list[Bonus]])
async def list_bonuses(contract_id: int = Path(ge=1), db: Session = Depends(get_db)):
    return {"data": contract_service.list_bonuses(db, contract_id), "links": bonus_links(contract_id)}


@router.get("/{contract_id}/bonuses/{index}", response_model=DataEnvelope[Bonus])
async def get_bonus(contract_id: int = Path(ge=1), index: int = Path(ge=0), db: Session = Depends(get_db)):
    bonus = contract_service.get_bonus(db, contract_id, index)
    return {"data": bonus, "links": bonus_links(contract_id, index)}


@router.post("/{contract_id}/bonuses", status_code=201, response_model=DataEnvelope[Bonus])
async def add_bonus(
    payload: Bonus,
    response: Response,
    contract_id: int = Path(ge=1),
    db: Session = Depends(get_db),
):
    row, index = contract_service.add_bonus(db, contract_id, payload)
    response.headers["Location"] = f"{view.item_url(contract_id)}/bonuses/{index}"
    response.headers["Last-Modified"] = http_date(row.updated_at)
    return {"data": row.bonuses[index], "links": bonus_links(contract_id, index)}


@router.put("/{contract_id}/bonuses/{index}", response_model=DataEnvelope[Bonus])
async def replace_bonus(
    payload: Bonus,
    response: Response,
    contract_id: int = Path(ge=1),
    index: int = Path(ge=0),
    db: Session = Depends(get_db),
):
    row = contract_service.replace_bonus(db, contract_id, index, payload)
    response.headers["Last-Modified"] = http_date(row.updated_at)
    return {"data": row.bonuses[index], "links": bonus_links(contract_id, index)}


@router.delete("/{contract_id}/bonuses/{index}", status_code=204)
async def remove_bonus(contract_id: int = Path(ge=1), index: int = Path(ge=0), db: Session = Depends(get_db)):
    contract_service.remove_bonus(db, contract_id, index)
    return no_content({"X-Deleted-At": http_date(None)})

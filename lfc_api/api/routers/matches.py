"""
Match endpoints: /matches plus lineup, goals and substitutions.

A match is created without a lineup or goals; both are filled in afterwards
through the sub-resources below. Every write re-checks the whole match
(season dates, squad size, active players, who scored, who came on), and
recording or removing a goal updates the club's side of the score.

Sub-resources:
- /matches/{id}/lineup                               GET
- /matches/{id}/lineup/starting                      GET, PUT (exactly 11 player ids)
- /matches/{id}/lineup/substitutes                   GET, PUT
- /matches/{id}/lineup/substitutions[/{index}]       GET, POST, PUT, DELETE
- /matches/{id}/goals[/{index}]                      GET, POST, PUT, DELETE
"""

from fastapi import Body, Depends, Path, Response
from sqlalchemy.orm import Session

from ...database.connection import get_db
from ...services import match_service
from ..responses import http_date, item_url, no_content
from ..schemas import (
    DataEnvelope,
    Goal,
    Lineup,
    MatchCreate,
    MatchResponse,
    MatchUpdate,
    Substitution,
)
from .crud import ResourceView, build_crud_router

view = ResourceView(
    "matches",
    "Match",
    MatchResponse,
    related={
        "season": ("seasons", "season_id"),
        "competition": ("competitions", "competition_id"),
        "stadium": ("stadiums", "stadium_id"),
    },
)

router = build_crud_router(match_service, view, MatchCreate, MatchUpdate)


def sub_links(match_id: int, path: str, index: int | None = None) -> dict:
    base = f"{view.item_url(match_id)}/{path}"
    return {
        "self": base if index is None else f"{base}/{index}",
        "collection": base,
        "match": view.item_url(match_id),
    }


# ========== LINEUP ==========


@router.get("/{match_id}/lineup", response_model=DataEnvelope[Lineup])
async def get_lineup(match_id: int = Path(ge=1), db: Session = Depends(get_db)):
    lineup = match_service.get_lineup(db, match_id)
    links = sub_links(match_id, "lineup")
    links.update(
        starting=f"{links['self']}/starting",
        substitutes=f"{links['self']}/substitutes",
        substitutions=f"{links['self']}/substitutions",
    )
    return {"data": lineup, "links": links}


@router.get("/{match_id}/lineup/starting", response_model=DataEnvelope[list[int]])
async def get_starting_lineup(match_id: int = Path(ge=1), db: Session = Depends(get_db)):
    lineup = match_service.get_lineup(db, match_id)
    return {"data": lineup["starting"], "links": sub_links(match_id, "lineup/starting")}


@router.put("/{match_id}/lineup/starting", response_model=DataEnvelope[list[int]])
async def replace_starting_lineup(
    response: Response,
    player_ids: list[int] = Body(..., description="Exactly 11 player ids"),
    match_id: int = Path(ge=1),
    db: Session = Depends(get_db),
):
    row = match_service.replace_starting(db, match_id, player_ids)
    response.headers["Last-Modified"] = http_date(row.updated_at)
    return {"data": row.lineup["starting"], "links": sub_links(match_id, "lineup/starting")}


@router.get("/{match_id}/lineup/substitutes", response_model=DataEnvelope[list[int]])
async def get_substitutes(match_id: int = Path(ge=1), db: Session = Depends(get_db)):
    lineup = match_service.get_lineup(db, match_id)
    return {"data": lineup["substitutes"], "links": sub_links(match_id, "lineup/substitutes")}


@router.put("/{match_id}/lineup/substitutes", response_model=DataEnvelope[list[int]])
async def replace_substitutes(
    response: Response,
    player_ids: list[int] = Body(..., description="Bench player ids"),
    match_id: int = Path(ge=1),
    db: Session = Depends(get_db),
):
    row = match_service.replace_substitutes(db, match_id, player_ids)
    response.headers["Last-Modified"] = http_date(row.updated_at)
    return {"data": row.lineup["substitutes"], "links": sub_links(match_id, "lineup/substitutes")}


# ========== SUBSTITUTIONS ==========


@router.get("/{match_id}/lineup/substitutions", response_model=DataEnvelope[list[Substitution]])
async def list_substitutions(match_id: int = Path(ge=1), db: Session = Depends(get_db)):
    substitutions = match_service.list_substitutions(db, match_id)
    return {"data": substitutions, "links": sub_links(match_id, "lineup/substitutions")}


@router.get("/{match_id}/lineup/substitutions/{index}", response_model=DataEnvelope[Substitution])
async def get_substitution(match_id: int = Path(ge=1), index: int = Path(ge=0), db: Session = Depends(get_db)):
    substitution = match_service.get_substitution(db, match_id, index)
    return {"data": substitution, "links": sub_links(match_id, "lineup/substitutions", index)}


@router.post("/{match_id}/lineup/substitutions", status_code=201, response_model=DataEnvelope[Substitution])
async def add_substitution(
    payload: Substitution,
    response: Response,
    match_id: int = Path(ge=1),
    db: Session = Depends(get_db),
):
    row, index = match_service.add_substitution(db, match_id, payload)
    links = sub_links(match_id, "lineup/substitutions", index)
    response.headers["Location"] = links["self"]
    response.headers["Last-Modified"] = http_date(row.updated_at)
    return {"data": row.lineup["substitutions"][index], "links": links}


@router.put("/{match_id}/lineup/substitutions/{index}", response_model=DataEnvelope[Substitution])
async def replace_substitution(
    payload: Substitution,
    response: Response,
    match_id: int = Path(ge=1),
    index: int = Path(ge=0),
    db: Session = Depends(get_db),
):
    row = match_service.replace_substitution(db, match_id, index, payload)
    response.headers["Last-Modified"] = http_date(row.updated_at)
    return {
        "data": row.lineup["substitutions"][index],
        "links": sub_links(match_id, "lineup/substitutions", index),
    }


@router.delete("/{match_id}/lineup/substitutions/{index}", status_code=204)
async def remove_substitution(match_id: int = Path(ge=1), index: int = Path(ge=0), db: Session = Depends(get_db)):
    match_service.remove_substitution(db, match_id, index)
    return no_content({"X-Deleted-At": http_date(None)})


# ========== GOALS ==========


@router.get("/{match_id}/goals", response_model=DataEnvelope[list[Goal]])
async def list_goals(match_id: int = Path(ge=1), db: Session = Depends(get_db)):
    return {"data": match_service.list_goals(db, match_id), "links": sub_links(match_id, "goals")}


@router.get("/{match_id}/goals/{index}", response_model=DataEnvelope[Goal])
async def get_goal(match_id: int = Path(ge=1), index: int = Path(ge=0), db: Session = Depends(get_db)):
    goal = match_service.get_goal(db, match_id, index)
    links = sub_links(match_id, "goals", index)
    links["scorer"] = item_url("players", goal["scorer_id"])
    return {"data": goal, "links": links}


@router.post("/{match_id}/goals", status_code=201, response_model=DataEnvelope[Goal])
async def add_goal(
    payload: Goal,
    response: Response,
    match_id: int = Path(ge=1),
    db: Session = Depends(get_db),
):
    """
    Record a goal for the club.

    The scorer (and assistant, if given) must be in the matchday squad, and the
    club's side of the score is bumped to the new goal count.
    """
    row, index = match_service.add_goal(db, match_id, payload)
    links = sub_links(match_id, "goals", index)
    response.headers["Location"] = links["self"]
    response.headers["Last-Modified"] = http_date(row.updated_at)
    return {"data": row.goals[index], "links": links}


@router.put("/{match_id}/goals/{index}", response_model=DataEnvelope[Goal])
async def replace_goal(
    payload: Goal,
    response: Response,
    match_id: int = Path(ge=1),
    index: int = Path(ge=0),
    db: Session = Depends(get_db),
):
    row = match_service.replace_goal(db, match_id, index, payload)
    response.headers["Last-Modified"] = http_date(row.updated_at)
    return {"data": row.goals[index], "links": sub_links(match_id, "goals", index)}


@router.delete("/{match_id}/goals/{index}", status_code=204)
async def remove_goal(match_id: int = Path(ge=1), index: int = Path(ge=0), db: Session = Depends(get_db)):
    match_service.remove_goal(db, match_id, index)
    return no_content({"X-Deleted-At": http_date(None)})

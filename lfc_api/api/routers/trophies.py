"""Trophy endpoints: /trophies."""

from ...services import trophy_service
from ..schemas import TrophyCreate, TrophyResponse, TrophyUpdate
from .crud import ResourceView, build_crud_router

view = ResourceView(
    "trophies",
    "Trophy",
    TrophyResponse,
    related={"competition": ("competitions", "competition_id")},
)

router = build_crud_router(trophy_service, view, TrophyCreate, TrophyUpdate)

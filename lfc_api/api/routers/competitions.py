"""Competition endpoints: /competitions."""

from ...services import competition_service
from ..schemas import CompetitionCreate, CompetitionResponse, CompetitionUpdate
from .crud import ResourceView, build_crud_router

view = ResourceView("competitions", "Competition", CompetitionResponse)

router = build_crud_router(competition_service, view, CompetitionCreate, CompetitionUpdate)

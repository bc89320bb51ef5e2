"""Season endpoints: /seasons."""

from ...services import season_service
from ..schemas import SeasonCreate, SeasonResponse, SeasonUpdate
from .crud import ResourceView, build_crud_router

# A season links to its manager; trophy ids are listed in the document itself
view = ResourceView("seasons", "Season", SeasonResponse, related={"manager": ("managers", "manager_id")})

router = build_crud_router(season_service, view, SeasonCreate, SeasonUpdate)

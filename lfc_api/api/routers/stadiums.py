"""Stadium endpoints: /stadiums."""

from ...services import stadium_service
from ..schemas import StadiumCreate, StadiumResponse, StadiumUpdate
from .crud import ResourceView, build_crud_router

view = ResourceView("stadiums", "Stadium", StadiumResponse)

router = build_crud_router(stadium_service, view, StadiumCreate, StadiumUpdate)

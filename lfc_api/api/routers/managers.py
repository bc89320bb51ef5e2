"""Manager endpoints: /managers."""

from ...services import manager_service
from ..schemas import ManagerCreate, ManagerResponse, ManagerUpdate
from .crud import ResourceView, build_crud_router

view = ResourceView("managers", "Manager", ManagerResponse)

router = build_crud_router(manager_service, view, ManagerCreate, ManagerUpdate)

# ecell/api/router.py
from fastapi import APIRouter

from ecell.modules.admin.router import router as admin_router
from ecell.modules.contact.router import router as contact_router, admin_router as contact_admin_router
from ecell.modules.events.router import router as events_router, admin_router as events_admin_router
from ecell.modules.team.router import router as team_router, admin_router as team_admin_router

api_router = APIRouter()

# público
api_router.include_router(contact_router, tags=["contact"])
api_router.include_router(events_router,  tags=["events"])
api_router.include_router(team_router,    tags=["team"])

# admin (login/logout/status/dashboard + rotas protegidas)
api_router.include_router(admin_router,         prefix="/admin", tags=["admin"])
api_router.include_router(contact_admin_router, prefix="/admin", tags=["admin"])
api_router.include_router(events_admin_router,  prefix="/admin", tags=["admin"])
api_router.include_router(team_admin_router,    prefix="/admin", tags=["admin"])

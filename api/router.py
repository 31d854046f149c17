from __future__ import annotations

from fastapi import APIRouter

from api.endpoints import auth as auth_endpoints
from api.endpoints import services as services_endpoints
from api.endpoints import bookings as bookings_endpoints


api_router = APIRouter()

api_router.include_router(auth_endpoints.router)
api_router.include_router(services_endpoints.router)
api_router.include_router(bookings_endpoints.router)

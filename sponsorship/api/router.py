"""API router aggregation.

All routes use dependencies from sponsorship.api.dependencies; mounted under
/api by sponsorship.main.
"""

from fastapi import APIRouter

from sponsorship.api.endpoints import (
    auth,
    certificates,
    elements,
    health,
    reservations,
    sponsorships,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, tags=["session"])
api_router.include_router(elements.router, prefix="/elements", tags=["elements"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(reservations.router, prefix="/reservations", tags=["reservations"])
api_router.include_router(sponsorships.router, prefix="/sponsorships", tags=["sponsorships"])
api_router.include_router(certificates.router, prefix="/certificates", tags=["certificates"])

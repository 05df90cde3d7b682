"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import challenges, players, protocol, rankings, sessions

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    protocol.router, prefix="/protocol", tags=["Protocol"]
)
api_router.include_router(
    players.router, prefix="/players", tags=["Players"]
)
api_router.include_router(
    sessions.router, prefix="/sessions", tags=["Test sessions"]
)
api_router.include_router(
    challenges.router, prefix="/challenges", tags=["Challenges"]
)
api_router.include_router(
    rankings.router, prefix="/rankings", tags=["Rankings"]
)

"""
Shared API dependencies.

Reusable FastAPI dependencies for permissions, database access and the
analysis flags.
"""

from typing import Callable, Optional

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import settings
from app.core.permissions import Action, Role, can
from app.schemas.protocol import PrecisionTimeStrategy, StdDevMode
from app.schemas.results import AnalysisOptions
from app.services.test_session_service import resolve_options

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_role(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme), ) -> Role:
    """Resolve the caller's role from the bearer token."""
    role = settings.ACCESS_TOKENS.get(credentials.credentials) if credentials else None
    if role is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or missing access token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return Role(role)


def require_permission(action: Action) -> Callable[..., Role]:
    """Dependency factory: the caller's role must be allowed to perform *action*."""

    def dependency(role: Role = Depends(get_current_role)) -> Role:
        if not can(role, action):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                                detail=f"Role '{role.value}' may not perform '{action.value}'", )
        return role

    return dependency


def get_analysis_options(
    std_dev_mode: Optional[StdDevMode] = Query(None, description="sample (n-1) or population (n)"),
    precision_time_strategy: Optional[PrecisionTimeStrategy] = Query(
        None, description="A: direct indexing, B: paired groundstroke series"
    ),
) -> AnalysisOptions:
    return resolve_options(std_dev_mode, precision_time_strategy)

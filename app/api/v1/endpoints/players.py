"""
Player endpoints.

CRUD for the player registry and each player's precision trend.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_analysis_options, get_current_role, require_permission
from app.core.permissions import Action
from app.db.session import get_db
from app.schemas.player import PlayerCreate, PlayerResponse, PlayerUpdate
from app.schemas.results import AnalysisOptions, PlayerHistory
from app.services.player_service import PlayerService
from app.services.test_session_service import TestSessionService

router = APIRouter()


@router.post("", summary="Register a player.", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_permission(Action.EDIT_PLAYERS))], )
def create_player(data: PlayerCreate, db: Session = Depends(get_db)):
    return PlayerService(db).create(data)


@router.get("", summary="List players.", response_model=list[PlayerResponse],
            dependencies=[Depends(get_current_role)], )
def list_players(skip: int = Query(0, ge=0), limit: int = Query(100, ge=1, le=500), db: Session = Depends(get_db), ):
    return PlayerService(db).list_all(skip, limit)


@router.get("/{player_id}", summary="Get a player.", response_model=PlayerResponse,
            dependencies=[Depends(get_current_role)], )
def get_player(player_id: str, db: Session = Depends(get_db)):
    return PlayerService(db).get(player_id)


@router.put("/{player_id}", summary="Update a player.", response_model=PlayerResponse,
            dependencies=[Depends(require_permission(Action.EDIT_PLAYERS))], )
def update_player(player_id: str, data: PlayerUpdate, db: Session = Depends(get_db)):
    return PlayerService(db).update(player_id, data)


@router.delete("/{player_id}", summary="Delete a player and their sessions.", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_permission(Action.EDIT_PLAYERS))], )
def delete_player(player_id: str, db: Session = Depends(get_db)):
    PlayerService(db).delete(player_id)


@router.get("/{player_id}/history", summary="Percent of ideal over the player's completed sessions.",
            response_model=PlayerHistory, dependencies=[Depends(get_current_role)], )
def get_player_history(player_id: str, options: AnalysisOptions = Depends(get_analysis_options),
                       db: Session = Depends(get_db), ):
    return TestSessionService(db).history(player_id, options)

"""
Test session endpoints.

Sessions are saved whole, replaced whole and deleted by id.  Results
are recomputed on every read.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from app.api.dependencies import get_analysis_options, get_current_role, require_permission
from app.core.permissions import Action
from app.db.session import get_db
from app.schemas.protocol import Category
from app.schemas.results import AnalysisOptions, SessionResultsResponse
from app.schemas.session import TestSessionCreate, TestSessionResponse
from app.services.test_session_service import TestSessionService

router = APIRouter()

_CSV = "text/csv; charset=utf-8"


@router.post("", summary="Save a test session.", response_model=TestSessionResponse,
             status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_permission(Action.CREATE_TEST))], )
def create_session(data: TestSessionCreate, db: Session = Depends(get_db)):
    return TestSessionService(db).create(data)


@router.get("", summary="List test sessions, optionally for one player or category.",
            response_model=list[TestSessionResponse], dependencies=[Depends(get_current_role)], )
def list_sessions(player_id: Optional[str] = Query(None), category: Optional[Category] = Query(None),
                  db: Session = Depends(get_db), ):
    return TestSessionService(db).list_all(player_id=player_id, category=category)


@router.get("/export.csv", summary="Export the session history as CSV.", response_class=PlainTextResponse,
            dependencies=[Depends(get_current_role)], )
def export_history(player_id: Optional[str] = Query(None), options: AnalysisOptions = Depends(get_analysis_options),
                   db: Session = Depends(get_db), ):
    content = TestSessionService(db).export_history(options, player_id=player_id)
    return PlainTextResponse(content, media_type=_CSV,
                             headers={"Content-Disposition": 'attachment; filename="tpt_storico.csv"'})


@router.get("/{session_id}", summary="Get a test session.", response_model=TestSessionResponse,
            dependencies=[Depends(get_current_role)], )
def get_session(session_id: str, db: Session = Depends(get_db)):
    return TestSessionService(db).get(session_id)


@router.put("/{session_id}", summary="Replace a test session.", response_model=TestSessionResponse,
            dependencies=[Depends(require_permission(Action.CREATE_TEST))], )
def replace_session(session_id: str, data: TestSessionCreate, db: Session = Depends(get_db)):
    return TestSessionService(db).replace(session_id, data)


@router.delete("/{session_id}", summary="Delete a test session.", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_permission(Action.CREATE_TEST))], )
def delete_session(session_id: str, db: Session = Depends(get_db)):
    TestSessionService(db).delete(session_id)


@router.get("/{session_id}/results", summary="Stroke statistics, radar area and precision over time.",
            response_model=SessionResultsResponse, dependencies=[Depends(get_current_role)], )
def get_session_results(session_id: str, options: AnalysisOptions = Depends(get_analysis_options),
                        db: Session = Depends(get_db), ):
    return TestSessionService(db).results(session_id, options)


@router.get("/{session_id}/export.csv", summary="Export one session as CSV.", response_class=PlainTextResponse,
            dependencies=[Depends(get_current_role)], )
def export_session(session_id: str, options: AnalysisOptions = Depends(get_analysis_options),
                   db: Session = Depends(get_db), ):
    content = TestSessionService(db).export_session(session_id, options)
    return PlainTextResponse(content, media_type=_CSV,
                             headers={"Content-Disposition": f'attachment; filename="tpt_{session_id}.csv"'})

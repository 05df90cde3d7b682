"""
Challenge endpoints: 1v1, 2v2, free-for-all and session comparison.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_analysis_options, get_current_role
from app.db.session import get_db
from app.schemas.comparison import ChallengeRequest, MatchResult, RoundRobinResult
from app.schemas.results import AnalysisOptions
from app.services.challenge_service import ChallengeService

router = APIRouter(dependencies=[Depends(get_current_role)])


@router.post("/1v1", summary="Head-to-head challenge between two sessions.", response_model=MatchResult)
def one_vs_one(data: ChallengeRequest, options: AnalysisOptions = Depends(get_analysis_options),
               db: Session = Depends(get_db), ):
    return ChallengeService(db).one_vs_one(data.session_ids, options)


@router.post("/2v2", summary="Team challenge: sessions 1-2 against sessions 3-4.", response_model=MatchResult)
def two_vs_two(data: ChallengeRequest, options: AnalysisOptions = Depends(get_analysis_options),
               db: Session = Depends(get_db), ):
    return ChallengeService(db).two_vs_two(data.session_ids, options)


@router.post("/ffa", summary="Round robin between all given sessions.", response_model=RoundRobinResult)
def free_for_all(data: ChallengeRequest, options: AnalysisOptions = Depends(get_analysis_options),
                 db: Session = Depends(get_db), ):
    return ChallengeService(db).free_for_all(data.session_ids, options)


@router.get("/compare/{first_id}/{second_id}", summary="Compare two sessions stroke by stroke.",
            response_model=MatchResult, )
def compare_sessions(first_id: str, second_id: str, options: AnalysisOptions = Depends(get_analysis_options),
                     db: Session = Depends(get_db), ):
    return ChallengeService(db).compare(first_id, second_id, options)

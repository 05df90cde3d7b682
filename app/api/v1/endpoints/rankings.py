"""
Ranking endpoints: per-category podiums and the general leaderboard.
"""

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_analysis_options, get_current_role
from app.db.session import get_db
from app.schemas.comparison import GeneralLeaderboardEntry, LeaderboardEntry
from app.schemas.protocol import Category
from app.schemas.results import AnalysisOptions
from app.services.challenge_service import ChallengeService

router = APIRouter(dependencies=[Depends(get_current_role)])


@router.get("/categories/{category}", summary="Completed sessions of a category by percent of ideal.",
            response_model=list[LeaderboardEntry], )
def get_category_ranking(category: Category, options: AnalysisOptions = Depends(get_analysis_options),
                         db: Session = Depends(get_db), ):
    return ChallengeService(db).category_ranking(category, options)


@router.get("/general", summary="Best percent of ideal per player across categories.",
            response_model=list[GeneralLeaderboardEntry], )
def get_general_ranking(
    by_name: bool = Query(False, description="Group players by trimmed, case-insensitive name instead of id"),
    options: AnalysisOptions = Depends(get_analysis_options),
    db: Session = Depends(get_db),
):
    return ChallengeService(db).general_ranking(options, by_name=by_name)

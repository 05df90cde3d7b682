"""Precision-test core: protocol catalog, statistics engine, session results and challenges."""

from app.precision.aggregator import compute_session_results, validate_session
from app.precision.comparison import ComparisonError, head_to_head, round_robin, team_match

__all__ = ["compute_session_results", "validate_session", "ComparisonError", "head_to_head", "round_robin",
           "team_match"]

"""Services that tie scoring, settings and history together."""

from jaucp_scorer.services.scoring_service import ScoringOrchestrator

__all__ = ["ScoringOrchestrator"]

"""Proposal generation modules."""

from smartrfp.generation.generator import ProposalGenerator, generate_proposal_from_rfp
from smartrfp.generation.relevance import calculate_relevance, rank_knowledge

__all__ = [
    "ProposalGenerator",
    "generate_proposal_from_rfp",
    "calculate_relevance",
    "rank_knowledge",
]

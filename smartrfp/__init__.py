"""SmartRFP - RFP analysis and proposal drafting from a company knowledge base."""

__version__ = "1.0.0"

from smartrfp.analysis.analyzer import RFPAnalyzer, analyze_rfp
from smartrfp.generation.generator import ProposalGenerator, generate_proposal_from_rfp
from smartrfp.models.analysis import RFPAnalysis
from smartrfp.models.proposal import GeneratedProposal

__all__ = [
    "RFPAnalyzer",
    "analyze_rfp",
    "ProposalGenerator",
    "generate_proposal_from_rfp",
    "RFPAnalysis",
    "GeneratedProposal",
]

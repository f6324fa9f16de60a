"""API routes for SmartRFP."""

from fastapi import APIRouter, File, HTTPException, UploadFile
from pydantic import BaseModel

from smartrfp import __version__
from smartrfp.api.dependencies import AnalyzerDep, SettingsDep
from smartrfp.generation.generator import generate_proposal_from_rfp
from smartrfp.loaders.pdf_loader import PDFLoader, validate_pdf_upload
from smartrfp.models.analysis import RFPAnalysis
from smartrfp.models.knowledge import KnowledgeBase, KnowledgeBaseItem
from smartrfp.models.proposal import GeneratedProposal
from smartrfp.models.requests import (
    AnalyzeTextRequest,
    GenerateProposalRequest,
    KnowledgeSearchRequest,
)
from smartrfp.utils.exceptions import DocumentLoadError, InvalidUploadError
from smartrfp.utils.logging import get_logger


logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["RFP Proposals"])


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str = __version__


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


@router.post("/analyze", response_model=RFPAnalysis)
def analyze_text(request: AnalyzeTextRequest, analyzer: AnalyzerDep) -> RFPAnalysis:
    """Analyze pasted RFP text.

    Args:
        request: RFP text and optional page count.
        analyzer: Injected analyzer.

    Returns:
        Structured RFP analysis.
    """
    metadata = {"page_count": request.page_count} if request.page_count else None
    return analyzer.analyze(request.text, metadata)


@router.post("/analyze/upload", response_model=RFPAnalysis)
def analyze_upload(
    analyzer: AnalyzerDep,
    settings: SettingsDep,
    file: UploadFile = File(...),
) -> RFPAnalysis:
    """Extract text from an uploaded PDF and analyze it.

    Args:
        analyzer: Injected analyzer.
        settings: Application settings, for the upload limit.
        file: PDF file to analyze.

    Returns:
        Structured RFP analysis.
    """
    content = file.file.read()

    try:
        validate_pdf_upload(
            file.filename,
            file.content_type,
            len(content),
            max_bytes=settings.max_upload_bytes,
        )
    except InvalidUploadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        document = PDFLoader.from_bytes(content, filename=file.filename).load()
    except DocumentLoadError as e:
        logger.warning("PDF upload rejected", file=file.filename, error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    return analyzer.analyze(document.text, {"page_count": document.page_count})


@router.post("/proposals/generate", response_model=GeneratedProposal)
def generate_proposal(request: GenerateProposalRequest) -> GeneratedProposal:
    """Assemble a proposal draft from an analysis and knowledge items."""
    return generate_proposal_from_rfp(
        request.analysis,
        request.knowledge_items,
        request.project_title,
        request.client_name,
        request.additional_context,
    )


@router.post("/knowledge/search", response_model=list[KnowledgeBaseItem])
def search_knowledge(request: KnowledgeSearchRequest) -> list[KnowledgeBaseItem]:
    """Search knowledge items by title, content and tags."""
    return KnowledgeBase(items=request.items).search(request.query)

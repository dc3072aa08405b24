"""Upload endpoint mapping documents to inventory records."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import JSONResponse

from inventory_extractor.api import deps
from inventory_extractor.core.logging import get_logger
from inventory_extractor.models.inventory import ErrorResponse, ExtractionResult
from inventory_extractor.services import extraction
from inventory_extractor.services.analyzer import DocumentAnalyzer

router = APIRouter()
logger = get_logger(__name__)


@router.post(
    "/extract-inventory",
    response_model=ExtractionResult,
    status_code=status.HTTP_200_OK,
    summary="Extract inventory records from an uploaded document.",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def extract_inventory(
    file: UploadFile | None = File(default=None),
    analyzer: DocumentAnalyzer = Depends(deps.get_document_analyzer),
) -> ExtractionResult | JSONResponse:
    """Analyze the uploaded file and map its first table onto the inventory schema."""

    if file is None or not file.filename:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "No file uploaded"})

    document = await file.read()
    logger.info("extraction.upload", filename=file.filename, size=len(document))

    return await extraction.extract_inventory(document, file.filename, analyzer)

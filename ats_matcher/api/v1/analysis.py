import logging

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status
from fastapi.responses import Response

from ats_matcher.core.config import settings
from ats_matcher.core.rate_limit import rate_limit
from ats_matcher.parsing import UnsupportedFileError, extract_text_from_file
from ats_matcher.parsing.file_security import ensure_supported_extension
from ats_matcher.schemas.analysis import AnalysisResult, AnalyzeRequest, ExtractTextResponse
from ats_matcher.services.analysis_service import (
    AnalysisFailedError,
    MissingFieldError,
    run_analysis,
)
from ats_matcher.services.report_service import build_report, render_report_json, report_filename

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_UPLOAD_BYTES = settings.max_upload_mb * 1024 * 1024


def _analyze_or_raise(payload: AnalyzeRequest) -> AnalysisResult:
    try:
        return run_analysis(payload)
    except MissingFieldError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except AnalysisFailedError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("/analyze", response_model=AnalysisResult)
@rate_limit()
async def analyze(request: Request, payload: AnalyzeRequest):
    _ = request
    return _analyze_or_raise(payload)


@router.post("/analyze/report")
@rate_limit()
async def analyze_report(request: Request, payload: AnalyzeRequest):
    _ = request
    report = build_report(_analyze_or_raise(payload))
    return Response(
        content=render_report_json(report),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{report_filename()}"'},
    )


@router.post("/extract-text", response_model=ExtractTextResponse)
@rate_limit()
async def extract_text(request: Request, file: UploadFile = File(...)):
    _ = request
    filename = file.filename or "uploaded-file"

    try:
        ensure_supported_extension(filename)
    except UnsupportedFileError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > MAX_UPLOAD_BYTES:
            raise HTTPException(
                status_code=413,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_mb} MB.",
            )
        chunks.append(chunk)
    payload = b"".join(chunks)

    try:
        return extract_text_from_file(filename=filename, content=payload)
    except ValueError as exc:
        logger.warning("extract_text_rejected filename=%s reason=%s", filename, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Could not read file. Use PDF (.pdf) or Text (.txt). {exc}",
        ) from exc

"""FastAPI application serving treasury reports, proofs and PDFs."""

import asyncio
import os
import time
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from privaudit import __version__
from privaudit.application.use_cases.verify_solvency_proof import (
    VerifySolvencyProofUseCase,
)
from privaudit.domain.errors import (
    InvalidRequestError,
    PrivAuditError,
    ProofGenerationError,
    ReportGenerationError,
    TreasuryFetchError,
)
from privaudit.domain.models import (
    DataSource,
    TreasuryReport,
    TreasuryReportResult,
    TreasurySnapshot,
    VerificationResult,
)
from privaudit.infrastructure.container import (
    build_demo_report_use_case,
    build_pdf_use_case,
    build_treasury_report_use_case,
    load_demo_snapshot,
)
from privaudit.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

ERROR_STATUS = {
    InvalidRequestError: 400,
    TreasuryFetchError: 502,
    ProofGenerationError: 500,
    ReportGenerationError: 500,
}


class ReportRequest(BaseModel):
    """Body of the report endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    dao_address: str | None = Field(default=None, alias="daoAddress")
    etherscan_api_key: str | None = Field(
        default=None,
        alias="etherscanApiKey",
    )
    ai_api_key: str | None = Field(default=None, alias="aiApiKey")
    generate_pdf: bool = Field(default=False, alias="generatePDF")
    allow_demo_fallback: bool = Field(
        default=False,
        alias="allowDemoFallback",
    )


class PdfRequest(BaseModel):
    """Body of the PDF endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    report_data: dict[str, Any] | None = Field(
        default=None,
        alias="reportData",
    )
    treasury_data: dict[str, Any] | None = Field(
        default=None,
        alias="treasuryData",
    )
    verification_result: dict[str, Any] | None = Field(
        default=None,
        alias="verificationResult",
    )


app = FastAPI(title="PrivAudit", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("PRIVAUDIT_CORS_ORIGINS", "*").split(","),
    allow_headers=["*"],
    allow_methods=["*"],
)


def _error_response(
    status_code: int,
    error: str,
    details: str,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "details": details},
    )


@app.exception_handler(PrivAuditError)
async def privaudit_error_handler(
    request: Request,
    exc: PrivAuditError,
) -> JSONResponse:
    status_code = next(
        (
            code
            for error_type, code in ERROR_STATUS.items()
            if isinstance(exc, error_type)
        ),
        500,
    )
    logger = get_app_logger()
    if status_code >= 500:
        logger.error(f"{request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.url.path} rejected: {exc}")
    return _error_response(status_code, _error_title(exc), str(exc))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    get_app_logger().warning(f"{request.url.path} invalid body: {exc}")
    return _error_response(400, "Invalid request body", str(exc))


@app.exception_handler(Exception)
async def unhandled_error_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    get_app_logger().exception(f"Unhandled error on {request.url.path}")
    return _error_response(500, "Internal server error", str(exc))


@app.middleware("http")
async def usage_logging_middleware(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed = (time.perf_counter() - started) * 1000
    get_usage_logger().info(
        f"{request.method} {request.url.path} {response.status_code} "
        f"{elapsed:.0f}ms"
    )
    return response


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": __version__}


@app.post("/api/generate-real-report")
async def generate_real_report(body: ReportRequest) -> dict[str, Any]:
    """Build a report from the block explorer and RPC sources."""
    address = _require_address(body)
    pipeline = build_treasury_report_use_case(
        DataSource.REAL,
        etherscan_api_key=body.etherscan_api_key,
        ai_api_key=body.ai_api_key,
    )
    result = await pipeline.execute(address)
    return result.to_dict()


@app.post("/api/generate-simple-report", response_model=None)
async def generate_simple_report(body: ReportRequest) -> Any:
    """Build a report from public RPC sources, optionally as a PDF."""
    address = _require_address(body)
    data_source = (
        DataSource.FALLBACK_DEMO
        if body.allow_demo_fallback
        else DataSource.SIMPLE
    )
    pipeline = build_treasury_report_use_case(
        data_source,
        ai_api_key=body.ai_api_key,
    )
    result = await pipeline.execute(address)
    if body.generate_pdf:
        return await _result_pdf(result)
    return result.to_dict()


@app.post("/api/generate-pdf")
async def generate_pdf(body: PdfRequest) -> Response:
    """Render a previously generated report as PDF."""
    if not body.report_data:
        raise InvalidRequestError("reportData is required")
    try:
        report = TreasuryReport.from_dict(body.report_data)
        snapshot = (
            TreasurySnapshot.from_dict(body.treasury_data)
            if body.treasury_data
            else None
        )
        verification = (
            VerificationResult.from_dict(body.verification_result)
            if body.verification_result
            else None
        )
    except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
        raise InvalidRequestError(f"Malformed report payload: {exc}") from exc

    content = await asyncio.to_thread(
        build_pdf_use_case().execute,
        report,
        snapshot,
        verification,
    )
    return _pdf_response(content, report.dao_address)


@app.post("/api/test-pdf")
async def render_demo_pdf() -> Response:
    """Render a report for the built-in demo treasury."""
    result = await build_demo_report_use_case().analyze(load_demo_snapshot())
    return await _result_pdf(result)


@app.post("/api/verify-proof")
async def verify_proof(body: dict[str, Any]) -> dict[str, Any]:
    """Verify a proof artifact, sent bare or under ``proofArtifact``."""
    artifact = body.get("proofArtifact", body)
    result = VerifySolvencyProofUseCase(logger=get_app_logger()).execute(
        artifact
    )
    return {"success": True, "verificationResult": result.to_dict()}


def _require_address(body: ReportRequest) -> str:
    address = (body.dao_address or "").strip()
    if not address:
        raise InvalidRequestError("DAO address is required")
    return address


async def _result_pdf(result: TreasuryReportResult) -> Response:
    content = await asyncio.to_thread(
        build_pdf_use_case().execute,
        result.report,
        result.snapshot,
        result.verification,
    )
    return _pdf_response(content, result.report.dao_address)


def _pdf_response(content: bytes, dao_address: str) -> Response:
    stem = (dao_address or "report")[:8]
    return Response(
        content=content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": (
                f'attachment; filename="treasury-report-{stem}.pdf"'
            )
        },
    )


def _error_title(exc: PrivAuditError) -> str:
    if isinstance(exc, InvalidRequestError):
        return "Invalid request"
    if isinstance(exc, TreasuryFetchError):
        return "Failed to fetch treasury data"
    if isinstance(exc, ProofGenerationError):
        return "Failed to generate solvency proof"
    if isinstance(exc, ReportGenerationError):
        return "Failed to generate report"
    return "Request failed"


def main() -> None:
    """Serve the API with uvicorn."""
    uvicorn.run(
        app,
        host=os.getenv("PRIVAUDIT_HOST", "127.0.0.1"),
        port=int(os.getenv("PRIVAUDIT_PORT", "8000")),
    )


if __name__ == "__main__":  # pragma: no cover
    main()


__all__ = ["app", "ReportRequest", "PdfRequest", "main"]

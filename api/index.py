"""
FastAPI wrapper for the N-Gram SEO Analyzer - Vercel Serverless Function.

This module exposes page analysis as a REST API. Each request is a
single round trip: the client sends text (or HTML, or a URL) and gets the
full analysis result back.
"""

import io
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ngram_analyzer import __version__
from ngram_analyzer.analysis import analyze
from ngram_analyzer.config import AnalyzerConfig
from ngram_analyzer.content_sources import (
    ContentExtractionError,
    extract_page_content,
    fetch_url_content,
)
from ngram_analyzer.export import default_export_filename, export_to_csv
from ngram_analyzer.models import StructuralContext
from ngram_analyzer.report import build_alerts

logger = logging.getLogger(__name__)

app = FastAPI(
    title="N-Gram SEO Analyzer API",
    description="N-gram frequency analysis and on-page SEO checks for page text",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class StructuralContextInput(BaseModel):
    """Page structure supplied alongside the text."""
    paragraph_texts: list[str] = Field(default_factory=list, description="Text of each paragraph element")
    h1_count: int = Field(0, ge=0)
    h2_count: int = Field(0, ge=0)
    h3_count: int = Field(0, ge=0)
    strong_count: int = Field(0, ge=0, description="Number of strong/bold elements")
    link_hrefs: list[str] = Field(default_factory=list, description="href of every link on the page")
    hostname: str = Field("", description="Hostname of the analyzed page")

    def to_context(self) -> StructuralContext:
        return StructuralContext(
            paragraph_texts=list(self.paragraph_texts),
            h1_count=self.h1_count,
            h2_count=self.h2_count,
            h3_count=self.h3_count,
            strong_count=self.strong_count,
            link_hrefs=list(self.link_hrefs),
            hostname=self.hostname,
        )


class AnalyzeTextRequest(BaseModel):
    """Request model for analyzing already-extracted text."""
    text: str = Field(..., description="Visible page text")
    context: Optional[StructuralContextInput] = Field(None, description="Page structure counts")


class AnalyzeHtmlRequest(BaseModel):
    """Request model for analyzing raw HTML."""
    html: str = Field(..., description="HTML markup of the page")
    hostname: str = Field("", description="Hostname the page is served from")


class AnalyzeURLRequest(BaseModel):
    """Request model for URL-based analysis."""
    url: str = Field(..., description="URL to fetch and analyze")
    timeout: Optional[int] = Field(None, gt=0, description="Request timeout in seconds")


class AnalyzeResponse(BaseModel):
    """Response model for analysis results."""
    success: bool
    result: dict
    alerts: list[dict] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


def _respond(text: str, context: StructuralContext) -> AnalyzeResponse:
    result = analyze(text, context)
    return AnalyzeResponse(
        success=True,
        result=result.to_dict(),
        alerts=[alert.to_dict() for alert in build_alerts(result.issues)],
    )


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze_text(request: AnalyzeTextRequest):
    """Analyze text with an optional structural context."""
    context = request.context.to_context() if request.context else StructuralContext()
    return _respond(request.text, context)


@app.post("/api/analyze/html", response_model=AnalyzeResponse)
async def analyze_html(request: AnalyzeHtmlRequest):
    """Extract text and structure from HTML, then analyze it."""
    page = extract_page_content(request.html, hostname=request.hostname)
    return _respond(page.text, page.context)


@app.post("/api/analyze/url", response_model=AnalyzeResponse)
def analyze_url(request: AnalyzeURLRequest):
    """
    Fetch a page and analyze it.

    Fetch failures are reported as 502 with retry guidance; invalid URLs
    as 400.
    """
    config = AnalyzerConfig.from_env()
    timeout = request.timeout or config.request_timeout

    try:
        page = fetch_url_content(request.url, timeout=timeout, user_agent=config.user_agent)
    except ContentExtractionError as e:
        logger.warning(f"Content extraction failed for {request.url}: {e}")
        status_code = 400 if str(e).startswith("Invalid URL") else 502
        raise HTTPException(status_code=status_code, detail=str(e))

    return _respond(page.text, page.context)


@app.post("/api/export/csv")
async def export_csv(request: AnalyzeTextRequest):
    """Analyze text and return the n-gram metrics as a CSV download."""
    context = request.context.to_context() if request.context else StructuralContext()
    csv_text = export_to_csv(analyze(request.text, context))

    return StreamingResponse(
        io.BytesIO(csv_text.encode("utf-8")),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{default_export_filename()}"'},
    )

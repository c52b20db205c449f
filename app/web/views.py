"""
Server-rendered form and summary display.

`GET /` shows the form. `POST /` validates the form, runs the same pipeline
as `POST /api/summarize` and renders the result or the error.
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from loguru import logger

from app.api.dependencies import get_video_summary_service
from app.core.config import settings
from app.core.constants import FormMessages
from app.core.exceptions import AppException
from app.models import FocusAreas, SummarizeRequest, SummaryLength, SummaryOptions
from app.services.video_summary import VideoSummaryService
from app.web.presenters import (
    FORM_URL_PATTERN_SOURCE,
    FormState,
    SummaryView,
    validate_form_url,
)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


def render_page(
    request: Request,
    form: FormState,
    summary: Optional[SummaryView] = None,
    error: Optional[str] = None,
    status_code: int = 200,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "project_name": settings.PROJECT_NAME,
            "url_pattern": FORM_URL_PATTERN_SOURCE,
            "form": form,
            "summary": summary,
            "error": error,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render the empty form."""
    return render_page(request, FormState())


@router.post("/", response_class=HTMLResponse)
async def summarize_form(
    request: Request,
    url: str = Form(""),
    length: SummaryLength = Form(SummaryLength.BRIEF),
    key_points: bool = Form(False),
    timestamps: bool = Form(False),
    takeaways: bool = Form(False),
    summary_service: VideoSummaryService = Depends(get_video_summary_service),
):
    """Validate the submitted form, summarize the video and render the result."""
    options = SummaryOptions(
        length=length,
        focus_areas=FocusAreas(
            key_points=key_points, timestamps=timestamps, takeaways=takeaways
        ),
    )
    form = FormState(url=url, options=options)

    form_error = validate_form_url(url)
    if form_error:
        form.error = form_error
        return render_page(request, form, status_code=400)

    try:
        result = await summary_service.summarize(SummarizeRequest(url=url, options=options))
    except AppException as e:
        return render_page(request, form, error=e.detail, status_code=e.status_code)
    except Exception as e:
        logger.exception(f"Form summarization failed: {e}")
        return render_page(request, form, error=FormMessages.REQUEST_FAILED, status_code=500)

    return render_page(request, form, summary=SummaryView.from_response(result))

"""
Shared pytest fixtures and configuration.
"""
import json

import httpx
import pytest
from unittest.mock import AsyncMock

from app.main import app
from app.api.dependencies import get_video_summary_service
from app.core.providers.llm_provider import LLMProvider, LLMResponse
from app.services.metadata import MetadataService
from app.services.summarization import SummarizationService
from app.services.transcript import TranscriptService
from app.services.video_summary import VideoSummaryService


VIDEO_ID = "dQw4w9WgXcQ"
VIDEO_URL = f"https://www.youtube.com/watch?v={VIDEO_ID}"

SUMMARY_JSON = {
    "briefSummary": "A short summary.",
    "detailedSummary": "A much longer summary.",
    "keyPoints": ["First point", "Second point"],
    "timestamps": [{"time": "0:42", "text": "The chorus"}],
    "mainTakeaways": ["Never give up"],
}


def make_videos_payload(**overrides) -> dict:
    """A YouTube Data API `videos` response with one item."""
    item = {
        "id": VIDEO_ID,
        "snippet": {
            "title": "Test",
            "channelTitle": "Test Channel",
            "publishedAt": "2009-10-25T06:57:33Z",
            "thumbnails": {"high": {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg"}},
        },
        "contentDetails": {"duration": "PT3M33S"},
        "statistics": {"viewCount": "1500000000"},
    }
    item.update(overrides)
    return {"items": [item]}


def make_http_client(payload: dict, status_code: int = 200) -> httpx.AsyncClient:
    """Async client whose every request returns the given JSON payload."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, json=payload)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client.recorded_requests = requests
    return client


@pytest.fixture
def mock_llm_provider():
    provider = AsyncMock(spec=LLMProvider)
    provider.generate_text.return_value = LLMResponse(
        content=json.dumps(SUMMARY_JSON), model="test-model"
    )
    return provider


@pytest.fixture
def mock_metadata_service():
    return AsyncMock(spec=MetadataService)


@pytest.fixture
def mock_transcript_service():
    service = AsyncMock(spec=TranscriptService)
    service.fetch_transcript.return_value = "hello world"
    return service


@pytest.fixture
def mock_summarization_service():
    return AsyncMock(spec=SummarizationService)


@pytest.fixture
def pipeline(mock_llm_provider, mock_transcript_service):
    """Pipeline with a real metadata client over a mocked transport."""
    metadata_service = MetadataService(
        api_key="test-key", http_client=make_http_client(make_videos_payload())
    )
    return VideoSummaryService(
        metadata_service=metadata_service,
        transcript_service=mock_transcript_service,
        summarization_service=SummarizationService(llm_provider=mock_llm_provider),
    )


@pytest.fixture
def override_pipeline(pipeline):
    """Serve `pipeline` from the summarize endpoints."""
    app.dependency_overrides[get_video_summary_service] = lambda: pipeline

    yield pipeline

    app.dependency_overrides.clear()


@pytest.fixture
def videos_payload():
    return make_videos_payload()


@pytest.fixture
def http_client_factory():
    return make_http_client


@pytest.fixture
def summary_json():
    return dict(SUMMARY_JSON)

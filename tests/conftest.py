"""Shared test fixtures."""

from __future__ import annotations

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from coverletter.config import Settings, get_settings
from coverletter.extractor import PlaceholderPDFExtractor, UploadedResume
from coverletter.main import app, get_extractor, get_provider
from coverletter.provider import ProviderError

JOB_DESCRIPTION = """Acme Corp
We are hiring a Senior Backend Developer to join our platform team.
Job requirements: Python, PostgreSQL, Docker.
"""


class FakeProvider:
    """Records prompts; returns ``text`` or raises ``error``."""

    def __init__(self, text: str = "Dear Acme, hire me.", error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.prompts: List[str] = []
        self.max_tokens: List[Optional[int]] = []

    async def __call__(self, prompt: str, max_tokens: Optional[int] = None) -> str:
        self.prompts.append(prompt)
        self.max_tokens.append(max_tokens)
        if self.error is not None:
            raise self.error
        return self.text


class RecordingExtractor(PlaceholderPDFExtractor):
    def __init__(self, error: Optional[Exception] = None):
        super().__init__()
        self.error = error
        self.calls = 0

    def extract(self, resume: UploadedResume) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return super().extract(resume)


@pytest.fixture
def job_description() -> str:
    return JOB_DESCRIPTION


@pytest.fixture
def resume_pdf() -> UploadedResume:
    return UploadedResume(filename="resume.pdf", content_type="application/pdf", data=b"%PDF-1.4 fake")


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def extractor() -> RecordingExtractor:
    return RecordingExtractor()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def failing_provider() -> FakeProvider:
    return FakeProvider(error=ProviderError("boom"))


@pytest.fixture
def client(settings, extractor, provider):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_extractor] = lambda: extractor
    app.dependency_overrides[get_provider] = lambda: provider
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

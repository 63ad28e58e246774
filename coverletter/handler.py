from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Optional

from .config import Settings
from .errors import ExtractionFailure, GenerationError, InternalFailure, MissingInput
from .extractor import ResumeExtractor, UploadedResume
from .model import render_local
from .prompt_templates import build_prompt
from .provider import Provider, ProviderError, attempt_generate

logger = logging.getLogger("uvicorn.error")


@dataclass
class UploadRequest:
    resume_file: Optional[UploadedResume]
    job_description: Optional[str]


@dataclass
class GeneratedLetter:
    text: str
    mode: str


def validate(request: UploadRequest) -> None:
    resume = request.resume_file
    if resume is None or not resume.data:
        raise MissingInput()
    if not request.job_description or not request.job_description.strip():
        raise MissingInput()


async def generate_cover_letter(
    request: UploadRequest,
    *,
    extractor: ResumeExtractor,
    provider: Provider,
    settings: Settings,
) -> GeneratedLetter:
    """
    Validate the upload, extract resume text and generate a letter.

    - Provider failures are logged and answered with the local template.
    - Anything unexpected becomes InternalFailure with a generic message.
    """
    validate(request)
    job_description = request.job_description

    try:
        try:
            resume_text = extractor.extract(request.resume_file)
        except Exception:
            logger.exception("Resume extraction failed")
            raise ExtractionFailure()

        try:
            text = await attempt_generate(
                resume_text,
                job_description,
                partial(build_prompt, variant=settings.prompt_variant),
                provider,
                max_tokens=settings.max_tokens,
            )
            mode = "llm"
        except ProviderError as e:
            logger.warning("LLM unavailable (%s); falling back to local", e)
            text = render_local(resume_text, job_description)
            mode = "local"
        except Exception:
            logger.exception("LLM path failed; falling back to local")
            text = render_local(resume_text, job_description)
            mode = "local"

        logger.info("Cover letter generated (mode=%s)", mode)
        return GeneratedLetter(text=text, mode=mode)

    except GenerationError:
        raise
    except Exception:
        logger.exception("generate_cover_letter() failed")
        raise InternalFailure()

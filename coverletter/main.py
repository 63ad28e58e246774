from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from .config import Settings, get_settings
from .errors import GenerationError, InternalFailure, MissingInput
from .extractor import PlaceholderPDFExtractor, ResumeExtractor, UploadedResume
from .handler import UploadRequest, generate_cover_letter
from .provider import OpenAIProvider, Provider

# -------------------------------------------------
# Setup
# -------------------------------------------------

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="Cover Letter Generator API", version="0.1.0")

cors_origins = get_settings().cors_origins

# credentials are only allowed for an explicit origin list
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials="*" not in cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------------------------------
# Schemas
# -------------------------------------------------

class GenerateOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cover_letter: str = Field(..., alias="coverLetter")


class ErrorOut(BaseModel):
    error: str


# -------------------------------------------------
# Dependencies
# -------------------------------------------------

def get_extractor() -> ResumeExtractor:
    return PlaceholderPDFExtractor()


def get_provider(settings: Settings = Depends(get_settings)) -> Provider:
    return OpenAIProvider(settings)


@app.exception_handler(GenerationError)
async def generation_error_handler(request: Request, exc: GenerationError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # e.g. a resume part sent as a text field instead of a file
    logger.warning("Rejected malformed upload: %d validation error(s)", len(exc.errors()))
    return JSONResponse(status_code=MissingInput.status_code, content={"error": MissingInput.message})


# -------------------------------------------------
# Routes
# -------------------------------------------------

@app.get("/")
def index():
    return {"ok": True, "routes": ["/healthz", "/api/generate-cover-letter", "/docs"]}


@app.get("/healthz")
async def healthz():
    return {"ok": True}


@app.post(
    "/api/generate-cover-letter",
    response_model=GenerateOut,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def generate(
    resume: Optional[UploadFile] = File(None),
    job_description: Optional[str] = Form(None, alias="jobDescription"),
    extractor: ResumeExtractor = Depends(get_extractor),
    provider: Provider = Depends(get_provider),
    settings: Settings = Depends(get_settings),
):
    """
    Generate a cover letter from a resume PDF and a job description.

    - Uses the LLM when ENABLE_LLM=1 and OPENAI_API_KEY is set.
    - Otherwise, or when the LLM call fails, uses the local template.
    """
    try:
        uploaded = None
        if resume is not None:
            uploaded = UploadedResume(
                filename=resume.filename,
                content_type=resume.content_type,
                data=await resume.read(),
            )
        letter = await generate_cover_letter(
            UploadRequest(resume_file=uploaded, job_description=job_description),
            extractor=extractor,
            provider=provider,
            settings=settings,
        )
    except GenerationError:
        raise
    except Exception:
        logger.exception("generate() failed")
        raise InternalFailure()

    return GenerateOut(cover_letter=letter.text)

from __future__ import annotations


class GenerationError(Exception):
    """Base for errors reported to the caller as ``{"error": message}``."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingInput(GenerationError):
    status_code = 400
    message = "Resume file and job description are required"


class ExtractionFailure(GenerationError):
    status_code = 400
    message = "Failed to parse PDF file"


class InternalFailure(GenerationError):
    status_code = 500
    message = "Internal server error"

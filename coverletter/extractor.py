from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

PDF_MEDIA_TYPE = "application/pdf"

# Stand-in for parsed resume content until a real PDF parser is wired in.
SAMPLE_RESUME_TEXT = """
John Doe
Software Engineer
Email: john.doe@email.com
Phone: (555) 123-4567

EXPERIENCE:
- 5+ years of full-stack web development
- Proficient in React, Node.js, Python, and TypeScript
- Experience with cloud platforms (AWS, Azure)
- Strong background in database design and optimization
- Led development teams of 3-5 engineers

SKILLS:
- Frontend: React, Vue.js, HTML5, CSS3, JavaScript/TypeScript
- Backend: Node.js, Python, Java, REST APIs
- Databases: PostgreSQL, MongoDB, Redis
- Cloud: AWS, Docker, Kubernetes
- Tools: Git, Jenkins, Jira

EDUCATION:
Bachelor of Science in Computer Science
University of Technology, 2018
"""


class ExtractionError(Exception):
    pass


# -------- Data models --------
@dataclass
class UploadedResume:
    filename: Optional[str]
    content_type: Optional[str]
    data: bytes


# -------- Extractors --------
class ResumeExtractor(ABC):
    """Turns an uploaded resume into plain text. Raise ExtractionError on failure."""

    @abstractmethod
    def extract(self, resume: UploadedResume) -> str:
        ...


class PlaceholderPDFExtractor(ResumeExtractor):
    """Accepts PDF uploads and returns ``text`` instead of parsing them."""

    def __init__(self, text: str = SAMPLE_RESUME_TEXT):
        self.text = text

    def extract(self, resume: UploadedResume) -> str:
        media_type = (resume.content_type or "").split(";")[0].strip().lower()
        if media_type != PDF_MEDIA_TYPE:
            raise ExtractionError(f"expected {PDF_MEDIA_TYPE}, got {resume.content_type!r}")
        return self.text

from __future__ import annotations

from typing import Optional

SYSTEM_PROMPT = "You are a professional career advisor and expert cover letter writer. Write in plain English."

PROMPT_VARIANTS = {
    "professional": {
        "tone": "Use a professional but engaging tone",
        "words": 350,
    },
    "conversational": {
        "tone": "Use a warm, conversational tone that still reads as professional",
        "words": 400,
    },
}
DEFAULT_VARIANT = "professional"

USER_PROMPT = (
    "Based on the provided resume and job description, write a compelling, tailored cover letter.\n\n"
    "RESUME CONTENT:\n{resume}\n\n"
    "JOB DESCRIPTION:\n{jd}\n\n"
    "INSTRUCTIONS:\n"
    "1. Write a professional cover letter that is under {words} words\n"
    "2. Highlight relevant skills and experiences from the resume that match the job requirements\n"
    "3. Show enthusiasm for the specific role and company\n"
    "4. {tone}\n"
    "5. Include a strong opening that grabs attention\n"
    "6. End with a clear call to action\n"
    "7. Make it feel personal and tailored, not generic\n"
    "8. Focus on value proposition - what the candidate can bring to the role\n\n"
    "FORMAT:\n"
    "- Start with a professional greeting\n"
    "- 3-4 paragraphs maximum\n"
    "- Professional closing\n"
    "- Do not include placeholder text like [Your Name] or [Company Name]\n"
    "- Do not use em dashes or semicolons\n\n"
    "Write the cover letter now:"
)


def build_prompt(resume_text: str, job_description: str, variant: Optional[str] = None) -> str:
    opts = PROMPT_VARIANTS.get(variant or DEFAULT_VARIANT, PROMPT_VARIANTS[DEFAULT_VARIANT])
    return USER_PROMPT.format(
        resume=resume_text,
        jd=job_description,
        tone=opts["tone"],
        words=opts["words"],
    )

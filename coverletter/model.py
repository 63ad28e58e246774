from __future__ import annotations
import re
from typing import List
from jinja2 import Template

# -------- Catalogs --------
SKILL_CATALOG = [
    "React",
    "Node.js",
    "Python",
    "TypeScript",
    "JavaScript",
    "AWS",
    "Docker",
    "PostgreSQL",
    "MongoDB",
    "Vue.js",
    "Angular",
    "Java",
    "C++",
    "Git",
    "Kubernetes",
]

TITLE_CATALOG = [
    "Software Engineer",
    "Full Stack Developer",
    "Frontend Developer",
    "Backend Developer",
    "DevOps Engineer",
    "Data Scientist",
    "Product Manager",
]

DEFAULT_EXPERIENCE = "3+"
DEFAULT_TITLE = "Software Engineer"
DEFAULT_COMPANY = "your company"
NAME_PLACEHOLDER = "[Your Name]"
MAX_SKILLS = 3
COMPANY_SCAN_LINES = 5

EXPERIENCE_RE = re.compile(r"(\d+)\+?\s*years?", re.IGNORECASE)

LOCAL_TEMPLATE = Template(
    """Dear Hiring Manager,

I am writing to express my strong interest in the {{ job_title }} position at {{ company }}. With {{ experience }} years of experience in software development and a proven track record of delivering high-quality solutions, I am excited about the opportunity to contribute to your team.

My technical expertise includes {{ skills | join(', ') }}, which aligns perfectly with the requirements outlined in your job posting. In my previous roles, I have successfully led development projects, collaborated with cross-functional teams, and implemented scalable solutions that have driven business growth.

What particularly excites me about this opportunity is the chance to work with cutting-edge technologies and contribute to innovative projects. I am passionate about writing clean, efficient code and staying current with industry best practices. My experience with both frontend and backend development, combined with my strong problem-solving skills, makes me well-suited for this role.

I would welcome the opportunity to discuss how my skills and experience can contribute to {{ company }}'s continued success. Thank you for considering my application, and I look forward to hearing from you soon.

Best regards,
{{ signature }}"""
)


# -------- Extraction heuristics --------
def extract_skills(resume_text: str) -> List[str]:
    text = resume_text.lower()
    return [s for s in SKILL_CATALOG if s.lower() in text]


def extract_experience_years(resume_text: str) -> str:
    """Digits of the first "<n> year(s)" mention, or "3+" when there is none."""
    m = EXPERIENCE_RE.search(resume_text)
    return m.group(1) if m else DEFAULT_EXPERIENCE


def extract_job_title(job_description: str) -> str:
    text = job_description.lower()
    for title in TITLE_CATALOG:
        if title.lower() in text:
            return title
    return DEFAULT_TITLE


def extract_company_name(job_description: str) -> str:
    # first non-empty line among the first few that isn't a job/position heading
    for line in job_description.split("\n")[:COMPANY_SCAN_LINES]:
        low = line.lower()
        if line.strip() and "job" not in low and "position" not in low:
            return line.strip()
    return DEFAULT_COMPANY


# -------- Renderer --------
def compose(skills: List[str], experience: str, job_title: str, company: str) -> str:
    return LOCAL_TEMPLATE.render(
        job_title=job_title,
        company=company,
        experience=experience,
        skills=list(skills[:MAX_SKILLS]),
        signature=NAME_PLACEHOLDER,
    )


def render_local(resume_text: str, job_description: str) -> str:
    return compose(
        skills=extract_skills(resume_text),
        experience=extract_experience_years(resume_text),
        job_title=extract_job_title(job_description),
        company=extract_company_name(job_description),
    )

"""
Sample Jobs
Demo postings for filling an empty collection.
"""
import logging
from datetime import datetime, timedelta
from typing import List, Optional

from app.schemas.job import JobCreate, JobResponse

logger = logging.getLogger(__name__)

SAMPLE_JOBS = [
    {
        "title": "Full Stack Developer",
        "company": "Tech Corp",
        "location": "New York",
        "type": "FULL_TIME",
        "salary": "$80,000 - $120,000",
        "description": "We are looking for a Full Stack Developer with experience in React and Node.js.",
        "requirements": "3+ years of experience with React, Node.js, and TypeScript.",
        "experienceLevel": "MID",
        "skills": ["React", "Node.js", "TypeScript", "MongoDB"],
        "companyId": "tech-corp-001",
    },
    {
        "title": "Frontend Engineer",
        "company": "Startup Inc",
        "location": "San Francisco",
        "type": "FULL_TIME",
        "salary": "$90,000 - $130,000",
        "description": "Join our team as a Frontend Engineer working with modern JavaScript frameworks.",
        "requirements": "Experience with React, Vue.js, or Angular. Knowledge of CSS and responsive design.",
        "experienceLevel": "SENIOR",
        "skills": ["React", "Vue.js", "CSS", "JavaScript"],
        "companyId": "startup-inc-001",
    },
    {
        "title": "Backend Developer",
        "company": "Enterprise Solutions",
        "location": "Remote",
        "type": "CONTRACT",
        "salary": "$70,000 - $100,000",
        "description": "Backend developer needed for API development and database management.",
        "requirements": "Experience with Node.js, Express, and PostgreSQL.",
        "experienceLevel": "MID",
        "skills": ["Node.js", "Express", "PostgreSQL", "REST APIs"],
        "companyId": "enterprise-solutions-001",
    },
    {
        "title": "Part-time Web Developer",
        "company": "Small Business Inc",
        "location": "Chicago",
        "type": "PART_TIME",
        "salary": "$40,000 - $60,000",
        "description": "Part-time web developer needed for website maintenance and updates.",
        "requirements": "Experience with HTML, CSS, JavaScript, and basic PHP.",
        "experienceLevel": "ENTRY",
        "skills": ["HTML", "CSS", "JavaScript", "PHP"],
        "companyId": "small-business-inc-001",
    },
    {
        "title": "Software Engineering Intern",
        "company": "Tech Startup",
        "location": "Austin",
        "type": "INTERNSHIP",
        "salary": "$25,000 - $35,000",
        "description": "Internship opportunity for software engineering students.",
        "requirements": "Currently enrolled in Computer Science or related field.",
        "experienceLevel": "ENTRY",
        "skills": ["Java", "Python", "Git", "Agile"],
        "companyId": "tech-startup-001",
    },
]


def build_sample_jobs(now: Optional[datetime] = None, days_open: int = 30) -> List[JobCreate]:
    """Active sample postings, posted at ``now`` and open for ``days_open`` days."""
    now = now or datetime.utcnow()
    return [
        JobCreate(
            **sample,
            active=True,
            postedDate=now,
            expiryDate=now + timedelta(days=days_open),
            applicants=[],
        )
        for sample in SAMPLE_JOBS
    ]


async def seed_sample_jobs(store, now: Optional[datetime] = None) -> List[JobResponse]:
    """Insert every sample job through ``store`` and return them with their ids."""
    created = []
    for job in build_sample_jobs(now):
        created.append(await store.create_job(job))
    logger.info("Added %d sample jobs", len(created))
    return created

"""
Seed sample portfolio content. Each table is only seeded while it is empty,
so running this twice does not duplicate rows:
  python -m portfolio.scripts.seed_data
"""

import logging
import sys

from sqlalchemy.orm import Session

from portfolio.core.database import SessionLocal
from portfolio.models import Project, Skill, Testimonial
from portfolio.services.storage import ProjectStorage, SkillStorage, TestimonialStorage

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

SAMPLE_PROJECTS = [
    {
        "title": "Real-time Data Pipeline on AWS",
        "description": "Scalable real-time pipeline using Kinesis, Lambda and Redshift processing millions of events per day.",
        "technologies": ["AWS", "Python", "Kinesis", "Lambda", "Redshift", "Glue"],
        "githubUrl": "https://github.com/example/aws-data-pipeline",
        "category": "regular",
        "featured": True,
    },
    {
        "title": "ML Model Deployment with MLflow",
        "description": "Production model deployment with MLflow, Docker and Kubernetes, including versioning and monitoring.",
        "technologies": ["Python", "MLflow", "Docker", "Kubernetes", "Airflow"],
        "githubUrl": "https://github.com/example/mlops-pipeline",
        "category": "regular",
        "featured": True,
    },
    {
        "title": "E-commerce Analytics Platform",
        "description": "Analytics platform for an e-commerce client built on PySpark, Kafka and MongoDB.",
        "technologies": ["PySpark", "Kafka", "MongoDB", "React", "AWS"],
        "liveUrl": "https://analytics-demo.example.com",
        "category": "freelance",
    },
    {
        "title": "Healthcare Data Integration",
        "description": "Integrated healthcare data sources with Apache Airflow and PostgreSQL for a research organization.",
        "technologies": ["Apache Airflow", "PostgreSQL", "Python", "Tableau"],
        "category": "freelance",
    },
]

SAMPLE_TESTIMONIALS = [
    {
        "name": "Sarah Johnson",
        "title": "Head of Data",
        "company": "TechCorp",
        "content": "Delivered a robust pipeline ahead of schedule and documented it thoroughly.",
        "rating": 5,
    },
    {
        "name": "Michael Chen",
        "title": "CTO",
        "company": "DataFlow Inc",
        "content": "Clear communication and excellent engineering judgement throughout the project.",
        "rating": 5,
    },
]

SAMPLE_SKILLS = [
    {"name": "Python", "icon": "Code", "color": "bg-blue-600", "category": "data", "order": 1},
    {"name": "AWS", "icon": "Cloud", "color": "bg-amber-500", "category": "data", "order": 2},
    {"name": "PySpark", "icon": "Zap", "color": "bg-red-500", "category": "data", "order": 3},
    {"name": "PostgreSQL", "icon": "Server", "color": "bg-blue-700", "category": "data", "order": 4},
    {"name": "Git", "icon": "GitBranch", "color": "bg-gray-800", "category": "devops", "order": 5},
    {"name": "React", "icon": "Code", "color": "bg-blue-500", "category": "frontend", "order": 6},
    {"name": "Docker", "icon": "Cpu", "color": "bg-blue-700", "category": "devops", "order": 7},
    {"name": "Redis", "icon": "Database", "color": "bg-red-600", "category": "backend", "order": 8},
]


def seed(db: Session) -> dict[str, int]:
    """Insert samples into empty tables; return rows inserted per table."""
    inserted = {"projects": 0, "testimonials": 0, "skills": 0}
    plan = (
        ("projects", Project, ProjectStorage(db), SAMPLE_PROJECTS),
        ("testimonials", Testimonial, TestimonialStorage(db), SAMPLE_TESTIMONIALS),
        ("skills", Skill, SkillStorage(db), SAMPLE_SKILLS),
    )
    for name, model, storage, samples in plan:
        if db.query(model).count() > 0:
            logger.info("Table %s already has rows; skipping", name)
            continue
        for payload in samples:
            storage.create(payload)
        inserted[name] = len(samples)
    return inserted


def main() -> int:
    db = SessionLocal()
    try:
        inserted = seed(db)
        logger.info("Seeding completed", extra=inserted)
        return 0
    except Exception as e:
        logger.exception("Seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())

"""API routes, mounted under API_PREFIX (/api)."""

from fastapi import APIRouter

from portfolio.api import (
    auth,
    contacts,
    env_config,
    github,
    github_configs,
    health,
    personal_info,
    projects,
    skills,
    testimonials,
    upload,
    website_sections,
)

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(contacts.router, tags=["contacts"])
router.include_router(testimonials.router, prefix="/testimonials", tags=["testimonials"])
router.include_router(skills.router, prefix="/skills", tags=["skills"])
router.include_router(
    website_sections.router, prefix="/website-sections", tags=["website-sections"]
)
router.include_router(personal_info.router, prefix="/personal-info", tags=["personal-info"])
router.include_router(github_configs.router, prefix="/github-configs", tags=["github-configs"])
router.include_router(upload.router, prefix="/upload", tags=["upload"])
router.include_router(env_config.router, prefix="/env-config", tags=["env-config"])
router.include_router(github.router, prefix="/github", tags=["github"])

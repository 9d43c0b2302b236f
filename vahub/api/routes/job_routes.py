"""
Job Routes

GET /jobs - List approved jobs (featured first, then newest)
GET /jobs/{job_id} - Get job details, any status
POST /jobs - Create job posting (always pending until an admin approves)
POST /applications - Apply to a job
POST /applications/{application_id}/status - Shortlist/reject/hire an application
"""

import logging

from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.exc import IntegrityError
from typing import List, Optional

from vahub.api.deps import get_repositories
from vahub.db.repositories import Repositories
from vahub.schemas.schemas import (
    JobCreate, JobResponse, ApplicationCreate, ApplicationStatusUpdate,
    IdResponse, SuccessResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Jobs"])


@router.get("/jobs", response_model=List[JobResponse])
async def list_jobs(
    search: Optional[str] = Query(None, description="Substring of title or description"),
    repos: Repositories = Depends(get_repositories, scope="function")
):
    """List approved jobs with company fields and skill tags."""
    return repos.jobs.list_approved(search)


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, repos: Repositories = Depends(get_repositories, scope="function")):
    """Get details of a specific job regardless of its status."""
    job = repos.jobs.get(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post("/jobs", response_model=IdResponse)
async def create_job(job: JobCreate, repos: Repositories = Depends(get_repositories, scope="function")):
    """Create a new job posting. It stays pending until an admin approves it."""
    job_id = repos.jobs.create(
        employer_id=job.employer_id, title=job.title, description=job.description,
        salary_min=job.salary_min, salary_max=job.salary_max,
        job_type=job.job_type, experience_level=job.experience_level
    )
    repos.jobs.add_skills(job_id, job.skills)
    logger.info("Job %s posted by employer %s (pending approval)", job_id, job.employer_id)
    return IdResponse(id=job_id)


@router.post("/applications", response_model=IdResponse)
async def apply_to_job(application: ApplicationCreate, repos: Repositories = Depends(get_repositories, scope="function")):
    """Apply to a job. Repeated applications to the same job are allowed."""
    try:
        application_id = repos.applications.create(
            application.job_id, application.va_id, application.cover_letter
        )
        repos.db.flush()
    except IntegrityError as e:
        logger.warning("Application failed for job %s: %s", application.job_id, e.orig)
        raise HTTPException(status_code=400, detail="Application failed")
    return IdResponse(id=application_id)


@router.post("/applications/{application_id}/status", response_model=SuccessResponse)
async def update_application_status(
    application_id: str,
    update: ApplicationStatusUpdate,
    repos: Repositories = Depends(get_repositories, scope="function")
):
    """Move an application to applied/shortlisted/rejected/hired."""
    if repos.applications.set_status(application_id, update.status.value) == 0:
        raise HTTPException(status_code=404, detail="Application not found")
    return SuccessResponse(message=f"Status updated to '{update.status.value}'")

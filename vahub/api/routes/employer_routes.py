"""
Employer Routes

GET /employer/jobs - Every job the employer owns, any status
GET /employer/applications - Applications received for the employer's jobs
GET /employer/profile/{user_id} - Company profile
POST /employer/profile - Update company profile
POST /hire - Mark an application as hired
POST /unhire - Move a hired application back to shortlisted
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List

from vahub.api.deps import get_repositories
from vahub.db.repositories import Repositories
from vahub.schemas.schemas import (
    JobResponse, ApplicationResponse, EmployerProfileUpdate, EmployerProfileResponse,
    HireRequest, SuccessResponse, ApplicationStatus
)

router = APIRouter(tags=["Employers"])


@router.get("/employer/jobs", response_model=List[JobResponse])
async def get_employer_jobs(employer_id: str = Query(...), repos: Repositories = Depends(get_repositories, scope="function")):
    return repos.jobs.list_for_employer(employer_id)


@router.get("/employer/applications", response_model=List[ApplicationResponse])
async def get_employer_applications(employer_id: str = Query(...), repos: Repositories = Depends(get_repositories, scope="function")):
    """Applications for the employer's jobs, newest first."""
    return repos.applications.list_for_employer(employer_id)


@router.get("/employer/profile/{user_id}", response_model=EmployerProfileResponse)
async def get_employer_profile(user_id: str, repos: Repositories = Depends(get_repositories, scope="function")):
    profile = repos.employer_profiles.get(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post("/employer/profile", response_model=SuccessResponse)
async def update_employer_profile(data: EmployerProfileUpdate, repos: Repositories = Depends(get_repositories, scope="function")):
    """Update company metadata. Only provided fields are written."""
    fields = data.model_dump(exclude={"user_id"}, exclude_unset=True)
    if not fields:
        raise HTTPException(status_code=400, detail="No fields to update")
    if repos.employer_profiles.update(data.user_id, fields) == 0:
        raise HTTPException(status_code=404, detail="Profile not found")
    return SuccessResponse(message="Profile updated successfully")


def _set_application_status(repos: Repositories, application_id: str, status: ApplicationStatus):
    if repos.applications.set_status(application_id, status.value) == 0:
        raise HTTPException(status_code=404, detail="Application not found")


@router.post("/hire", response_model=SuccessResponse)
async def hire(request: HireRequest, repos: Repositories = Depends(get_repositories, scope="function")):
    _set_application_status(repos, request.application_id, ApplicationStatus.hired)
    return SuccessResponse()


@router.post("/unhire", response_model=SuccessResponse)
async def unhire(request: HireRequest, repos: Repositories = Depends(get_repositories, scope="function")):
    _set_application_status(repos, request.application_id, ApplicationStatus.shortlisted)
    return SuccessResponse()

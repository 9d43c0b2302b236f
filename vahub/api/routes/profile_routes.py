"""
VA Profile & Talent Routes

GET /va/profile/{user_id} - VA profile with skills
POST /va/profile - Update profile; replaces the whole skill list
GET /va/applications - The VA's application history
GET /talents - Approved VAs with skills, optional ?search= and ?skill=
"""

import logging

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from vahub.api.deps import get_repositories
from vahub.db.database import utcnow_iso
from vahub.db.repositories import Repositories
from vahub.schemas.schemas import (
    VAProfileUpdate, VAProfileResponse, ApplicationResponse, SuccessResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["VA Profiles"])

# Always written by an update, even when null in the payload
CORE_PROFILE_FIELDS = ["headline", "bio", "hourly_rate", "monthly_salary", "availability"]
OPTIONAL_PROFILE_FIELDS = ["education", "experience_years", "intro_video_url", "resume_url"]


@router.get("/va/profile/{user_id}", response_model=VAProfileResponse)
async def get_va_profile(user_id: str, repos: Repositories = Depends(get_repositories, scope="function")):
    profile = repos.va_profiles.get(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post("/va/profile", response_model=SuccessResponse)
async def update_va_profile(data: VAProfileUpdate, repos: Repositories = Depends(get_repositories, scope="function")):
    """
    Update a VA profile.

    The skills in the payload replace every stored skill (delete, then
    reinsert) within the request's transaction.
    """
    if not repos.va_profiles.exists(data.user_id):
        raise HTTPException(status_code=404, detail="Profile not found")

    fields = {f: getattr(data, f) for f in CORE_PROFILE_FIELDS}
    fields.update(data.model_dump(include=set(OPTIONAL_PROFILE_FIELDS), exclude_unset=True))
    fields["last_active"] = utcnow_iso()

    repos.va_profiles.update(data.user_id, fields)
    repos.va_profiles.replace_skills(data.user_id, [s.model_dump() for s in data.skills])
    logger.info("VA %s updated profile with %d skill(s)", data.user_id, len(data.skills))
    return SuccessResponse(message="Profile updated successfully")


@router.get("/va/applications", response_model=List[ApplicationResponse])
async def get_va_applications(va_id: str = Query(...), repos: Repositories = Depends(get_repositories, scope="function")):
    """Applications sent by the VA, newest first, with job and company names."""
    return repos.applications.list_for_va(va_id)


@router.get("/talents", response_model=List[VAProfileResponse])
async def list_talents(
    search: Optional[str] = Query(None, description="Substring of name or headline"),
    skill: Optional[str] = Query(None, description="Substring of a skill name"),
    repos: Repositories = Depends(get_repositories, scope="function")
):
    """All approved VAs. No pagination."""
    return repos.va_profiles.list_talents(search, skill)

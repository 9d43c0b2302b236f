"""
Admin Routes - every endpoint requires an admin bearer token.

GET /admin/stats - User and job counts
GET /admin/pending-jobs - Jobs awaiting moderation
POST /admin/approve-job - pending -> approved
POST /admin/reject-job - pending -> rejected (with reason)
POST /admin/feature-job - Toggle the featured flag
GET /admin/users - Non-admin users, optional ?search=
POST /admin/update-user-status - Set pending/approved/suspended
DELETE /admin/delete-user - Remove a users row (no cascade)
GET /admin/logs - Latest 100 admin actions
GET /admin/subscriptions - Every employer subscription
"""

import logging

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from vahub.api.deps import get_repositories
from vahub.core.auth import get_current_admin
from vahub.db.repositories import Repositories
from vahub.schemas.schemas import (
    AdminStatsResponse, PendingJobResponse, JobModerationRequest, JobRejectRequest,
    JobFeatureRequest, UserResponse, UserStatusUpdate, UserDeleteRequest,
    AdminLogResponse, AdminSubscriptionResponse, SuccessResponse, JobStatus
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


def _require_pending_job(repos: Repositories, job_id: str):
    status = repos.jobs.get_status(job_id)
    if status is None:
        raise HTTPException(status_code=404, detail="Job not found")
    if status != JobStatus.pending.value:
        raise HTTPException(status_code=400, detail=f"Job is already {status}")


@router.get("/stats", response_model=AdminStatsResponse)
async def get_stats(admin: dict = Depends(get_current_admin), repos: Repositories = Depends(get_repositories, scope="function")):
    return AdminStatsResponse(
        total_vas=repos.users.count_by_role("va"),
        total_employers=repos.users.count_by_role("employer"),
        total_jobs=repos.jobs.count(),
        pending_jobs=repos.jobs.count(JobStatus.pending.value)
    )


@router.get("/pending-jobs", response_model=List[PendingJobResponse])
async def get_pending_jobs(admin: dict = Depends(get_current_admin), repos: Repositories = Depends(get_repositories, scope="function")):
    return repos.jobs.list_pending()


@router.post("/approve-job", response_model=SuccessResponse)
async def approve_job(
    request: JobModerationRequest,
    admin: dict = Depends(get_current_admin),
    repos: Repositories = Depends(get_repositories, scope="function")
):
    """Approve a pending job and record the action in the admin log."""
    _require_pending_job(repos, request.id)
    repos.jobs.approve(request.id)
    repos.admin_logs.create(admin["id"], "job_approved", f"Approved job: {request.id}")
    logger.info("Admin %s approved job %s", admin["id"], request.id)
    return SuccessResponse()


@router.post("/reject-job", response_model=SuccessResponse)
async def reject_job(
    request: JobRejectRequest,
    admin: dict = Depends(get_current_admin),
    repos: Repositories = Depends(get_repositories, scope="function")
):
    """Reject a pending job with a reason and record the action in the admin log."""
    _require_pending_job(repos, request.id)
    repos.jobs.reject(request.id, request.reason)
    repos.admin_logs.create(
        admin["id"], "job_rejected", f"Rejected job: {request.id}. Reason: {request.reason}"
    )
    logger.info("Admin %s rejected job %s", admin["id"], request.id)
    return SuccessResponse()


@router.post("/feature-job", response_model=SuccessResponse)
async def feature_job(
    request: JobFeatureRequest,
    admin: dict = Depends(get_current_admin),
    repos: Repositories = Depends(get_repositories, scope="function")
):
    if repos.jobs.set_featured(request.id, request.is_featured) == 0:
        raise HTTPException(status_code=404, detail="Job not found")
    action = "Featured" if request.is_featured else "Unfeatured"
    repos.admin_logs.create(admin["id"], "job_featured", f"{action} job: {request.id}")
    return SuccessResponse()


@router.get("/users", response_model=List[UserResponse])
async def get_users(
    search: Optional[str] = Query(None, description="Substring of name or email"),
    admin: dict = Depends(get_current_admin),
    repos: Repositories = Depends(get_repositories, scope="function")
):
    return repos.users.list_non_admin(search)


@router.post("/update-user-status", response_model=SuccessResponse)
async def update_user_status(
    request: UserStatusUpdate,
    admin: dict = Depends(get_current_admin),
    repos: Repositories = Depends(get_repositories, scope="function")
):
    """Set a user's status. Any status can move to any other."""
    repos.users.update_status(request.id, request.status.value)
    repos.admin_logs.create(
        admin["id"], "user_status_updated",
        f"Updated user status to {request.status.value}", target_user_id=request.id
    )
    logger.info("Admin %s set user %s to %s", admin["id"], request.id, request.status.value)
    return SuccessResponse()


@router.delete("/delete-user", response_model=SuccessResponse)
async def delete_user(
    request: UserDeleteRequest,
    admin: dict = Depends(get_current_admin),
    repos: Repositories = Depends(get_repositories, scope="function")
):
    """
    Delete the users row. Profile, skill, application and message rows that
    reference the user are left in place.
    """
    repos.users.delete(request.id)
    repos.admin_logs.create(
        admin["id"], "user_deleted", f"Deleted user: {request.id}", target_user_id=request.id
    )
    logger.info("Admin %s deleted user %s", admin["id"], request.id)
    return SuccessResponse()


@router.get("/logs", response_model=List[AdminLogResponse])
async def get_logs(admin: dict = Depends(get_current_admin), repos: Repositories = Depends(get_repositories, scope="function")):
    return repos.admin_logs.list_recent(100)


@router.get("/subscriptions", response_model=List[AdminSubscriptionResponse])
async def get_subscriptions(admin: dict = Depends(get_current_admin), repos: Repositories = Depends(get_repositories, scope="function")):
    return repos.subscriptions.list_all()

"""
Subscription Routes

GET /plans - Plan catalog
GET /subscriptions - The employer's subscription, or the Free default
POST /subscriptions - Same as /subscriptions/upgrade
POST /subscriptions/upgrade - Replace the employer's subscription (no payment)

Plan limits are returned for display only; no endpoint enforces them.
"""

import calendar
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List

from vahub.api.deps import get_repositories
from vahub.db.repositories import Repositories
from vahub.schemas.schemas import (
    PlanResponse, SubscriptionResponse, SubscriptionUpgrade, SuccessResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Subscriptions"])

FREE_PLAN_DEFAULT = {"plan_name": "Free", "job_post_limit": 3}


def add_one_month(moment: datetime) -> datetime:
    """Same day next month, clamped to the last day of that month."""
    year = moment.year + moment.month // 12
    month = moment.month % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


@router.get("/plans", response_model=List[PlanResponse])
async def list_plans(repos: Repositories = Depends(get_repositories, scope="function")):
    return repos.plans.list()


@router.get("/subscriptions", response_model=SubscriptionResponse)
async def get_subscription(employer_id: str = Query(...), repos: Repositories = Depends(get_repositories, scope="function")):
    """The employer's current subscription joined with its plan."""
    return repos.subscriptions.get_for_employer(employer_id) or FREE_PLAN_DEFAULT


@router.post("/subscriptions", response_model=SuccessResponse)
@router.post("/subscriptions/upgrade", response_model=SuccessResponse)
async def upgrade_subscription(request: SubscriptionUpgrade, repos: Repositories = Depends(get_repositories, scope="function")):
    """
    Switch the employer to a plan for one month.

    The old row is deleted and the new one inserted in the same
    transaction; concurrent upgrades are last-write-wins.
    """
    if not repos.plans.get(request.plan_id):
        raise HTTPException(status_code=404, detail="Plan not found")

    now = datetime.now(timezone.utc).replace(tzinfo=None)
    period_end = add_one_month(now).isoformat(timespec="microseconds")
    repos.subscriptions.replace(request.employer_id, request.plan_id, period_end)
    logger.info("Employer %s switched to plan %s until %s", request.employer_id, request.plan_id, period_end)
    return SuccessResponse(message="Subscription upgraded successfully")

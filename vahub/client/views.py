"""
Page-level views.

Each view fetches what it shows on mount() and keeps it as plain attributes.
Every mutating action re-fetches. An ApiError becomes the view's `error`
string instead of propagating.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from vahub.client.api import ApiError, VAHubClient

logger = logging.getLogger(__name__)

PLAN_IDS = {"PRO": "pro-plan", "PREMIUM": "premium-plan"}


class View:
    """Base view: holds the API client, the current user and the last error."""

    def __init__(self, api: VAHubClient, user: Optional[Dict[str, Any]] = None):
        self.api = api
        self.user = user
        self.error = ""
        self.message = ""

    def _call(self, func: Callable, *args, **kwargs) -> Any:
        """Run an API call; on ApiError store the message and return None."""
        try:
            return func(*args, **kwargs)
        except ApiError as e:
            logger.warning("%s: %s", type(self).__name__, e.message)
            self.error = e.message
            return None

    def mount(self):
        self.error = ""
        self.refresh()

    def refresh(self):
        raise NotImplementedError


class AdminDashboard(View):

    def __init__(self, api: VAHubClient, user: Optional[Dict[str, Any]] = None):
        super().__init__(api, user)
        self.stats: Dict[str, Any] = {}
        self.pending_jobs: List[dict] = []
        self.users: List[dict] = []
        self.logs: List[dict] = []
        self.subscriptions: List[dict] = []
        self.user_search = ""

    def refresh(self):
        self.stats = self._call(self.api.admin_stats) or {}
        self.pending_jobs = self._call(self.api.admin_pending_jobs) or []
        self.users = self._call(self.api.admin_users, self.user_search or None) or []
        self.logs = self._call(self.api.admin_logs) or []
        self.subscriptions = self._call(self.api.admin_subscriptions) or []

    def search_users(self, query: str):
        self.user_search = query
        self.users = self._call(self.api.admin_users, query or None) or []

    def approve(self, job_id: str):
        self._call(self.api.approve_job, job_id)
        self.refresh()

    def reject(self, job_id: str, reason: str):
        self._call(self.api.reject_job, job_id, reason)
        self.refresh()

    def feature(self, job_id: str, is_featured: bool = True):
        self._call(self.api.feature_job, job_id, is_featured)
        self.refresh()

    def update_user_status(self, user_id: str, status: str):
        self._call(self.api.update_user_status, user_id, status)
        self.refresh()

    def delete_user(self, user_id: str):
        self._call(self.api.delete_user, user_id)
        self.refresh()


class EmployerDashboard(View):

    def __init__(self, api: VAHubClient, user: Dict[str, Any]):
        super().__init__(api, user)
        self.applications: List[dict] = []
        self.jobs: List[dict] = []
        self.subscription: Dict[str, Any] = {}

    def refresh(self):
        employer_id = self.user["id"]
        self.applications = self._call(self.api.employer_applications, employer_id) or []
        self.jobs = self._call(self.api.employer_jobs, employer_id) or []
        self.subscription = self._call(self.api.get_subscription, employer_id) or {}

    def post_job(self, title: str, description: str, **fields) -> Optional[str]:
        """Submit a job; it shows up in `jobs` as pending until approved."""
        job_id = self._call(self.api.create_job, self.user["id"], title, description, **fields)
        if job_id:
            self.message = "Job posted! It will be visible after admin approval."
        self.refresh()
        return job_id

    def hire(self, application_id: str):
        self._call(self.api.hire, application_id)
        self.refresh()

    def unhire(self, application_id: str):
        self._call(self.api.unhire, application_id)
        self.refresh()


class VADashboard(View):

    def __init__(self, api: VAHubClient, user: Dict[str, Any]):
        super().__init__(api, user)
        self.jobs: List[dict] = []
        self.profile: Dict[str, Any] = {}
        self.applications: List[dict] = []
        self.skills: List[dict] = []

    def refresh(self):
        self.jobs = self._call(self.api.list_jobs) or []
        self.profile = self._call(self.api.get_va_profile, self.user["id"]) or {}
        self.skills = [dict(s) for s in self.profile.get("skills", [])]
        self.applications = self._call(self.api.va_applications, self.user["id"]) or []

    def add_skill(self, skill_name: str, years_experience: Optional[str] = None):
        """Local edit; stored on save_profile()."""
        self.skills.append({"skill_name": skill_name, "years_experience": years_experience})

    def remove_skill(self, index: int):
        del self.skills[index]

    def save_profile(self, **fields) -> bool:
        """Save profile fields together with the edited skill list."""
        self.error = ""
        result = self._call(self.api.update_va_profile, self.user["id"], skills=self.skills, **fields)
        if result is not None:
            self.message = "Profile updated successfully"
        self.refresh()
        return result is not None

    def apply(self, job_id: str, cover_letter: Optional[str] = None) -> Optional[str]:
        application_id = self._call(self.api.apply, job_id, self.user["id"], cover_letter)
        self.refresh()
        return application_id


class JobBoardView(View):

    def __init__(self, api: VAHubClient, user: Optional[Dict[str, Any]] = None):
        super().__init__(api, user)
        self.jobs: List[dict] = []
        self.search = ""
        self.selected_job: Optional[dict] = None

    def refresh(self):
        self.jobs = self._call(self.api.list_jobs, self.search or None) or []

    def set_search(self, search: str):
        self.search = search
        self.refresh()

    def open_job(self, job_id: str) -> Optional[dict]:
        self.selected_job = self._call(self.api.get_job, job_id)
        return self.selected_job

    def apply(self, job_id: str, cover_letter: Optional[str] = None) -> Optional[str]:
        """Apply as the current user. Only VA accounts may apply."""
        if not self.user:
            self.error = "Please log in to apply."
            return None
        if self.user.get("role") != "va":
            self.error = "Only Virtual Assistants can apply for jobs."
            return None
        application_id = self._call(self.api.apply, job_id, self.user["id"], cover_letter)
        if application_id:
            self.message = "Your application has been submitted successfully."
        return application_id


class TalentsView(View):

    def __init__(self, api: VAHubClient, user: Optional[Dict[str, Any]] = None):
        super().__init__(api, user)
        self.talents: List[dict] = []
        self.search = ""
        self.skill = ""

    def refresh(self):
        self.talents = self._call(self.api.talents, self.search or None, self.skill or None) or []

    def filter(self, search: str = "", skill: str = ""):
        self.search = search
        self.skill = skill
        self.refresh()


class PricingView(View):

    def __init__(self, api: VAHubClient, user: Optional[Dict[str, Any]] = None):
        super().__init__(api, user)
        self.plans: List[dict] = []
        self.subscription: Dict[str, Any] = {}

    def refresh(self):
        self.plans = self._call(self.api.plans) or []
        if self.user and self.user.get("role") == "employer":
            self.subscription = self._call(self.api.get_subscription, self.user["id"]) or {}

    def upgrade(self, plan_name: str) -> bool:
        """
        Switch to the plan shown as `plan_name` (FREE, PRO or PREMIUM).

        FREE is a no-op; an anonymous visitor gets an error instead.
        """
        if not self.user:
            self.error = "Please login to upgrade"
            return False
        plan_id = PLAN_IDS.get(plan_name.upper())
        if plan_id is None:
            return False
        if self._call(self.api.upgrade_subscription, self.user["id"], plan_id) is None:
            return False
        self.message = "Subscription upgraded successfully!"
        self.refresh()
        return True

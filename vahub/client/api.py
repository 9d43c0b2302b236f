"""
HTTP client for the VA Hub API.

One method per endpoint. Non-2xx responses raise ApiError carrying the
server's `detail` message.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class VAHubClient:
    """
    Thin wrapper over the /api endpoints.

    Args:
        base_url: Server root, e.g. http://localhost:8000
        session: Anything with requests.Session's request() signature
        timeout: Per-request timeout in seconds
    """

    def __init__(self, base_url: str = "http://localhost:8000", session=None,
                 timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.token: Optional[str] = None

    def _request(self, method: str, path: str, params: Optional[dict] = None,
                 json: Optional[dict] = None) -> Any:
        headers = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        response = self.session.request(
            method, f"{self.base_url}/api{path}",
            params=params or None, json=json, headers=headers, timeout=self.timeout
        )
        if response.status_code >= 400:
            try:
                message = response.json().get("detail", response.text)
            except ValueError:
                message = response.text
            logger.warning("%s %s failed with %s: %s", method, path, response.status_code, message)
            raise ApiError(response.status_code, str(message))
        return response.json()

    # ============================================================
    # AUTH
    # ============================================================

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Log in and keep the returned token for later requests."""
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = data["access_token"]
        return data

    def register(self, name: str, email: str, password: str, role: str) -> Dict[str, Any]:
        data = self._request("POST", "/auth/register", json={
            "name": name, "email": email, "password": password, "role": role
        })
        self.token = data["access_token"]
        return data

    def me(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/me")

    def logout(self):
        self.token = None

    # ============================================================
    # JOBS + APPLICATIONS
    # ============================================================

    def list_jobs(self, search: Optional[str] = None) -> List[dict]:
        return self._request("GET", "/jobs", params={"search": search})

    def get_job(self, job_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/jobs/{job_id}")

    def create_job(self, employer_id: str, title: str, description: str, **fields) -> str:
        payload = {"employer_id": employer_id, "title": title, "description": description}
        payload.update(fields)
        return self._request("POST", "/jobs", json=payload)["id"]

    def apply(self, job_id: str, va_id: str, cover_letter: Optional[str] = None) -> str:
        return self._request("POST", "/applications", json={
            "job_id": job_id, "va_id": va_id, "cover_letter": cover_letter
        })["id"]

    def update_application_status(self, application_id: str, status: str) -> Dict[str, Any]:
        return self._request("POST", f"/applications/{application_id}/status", json={"status": status})

    # ============================================================
    # EMPLOYER
    # ============================================================

    def employer_jobs(self, employer_id: str) -> List[dict]:
        return self._request("GET", "/employer/jobs", params={"employer_id": employer_id})

    def employer_applications(self, employer_id: str) -> List[dict]:
        return self._request("GET", "/employer/applications", params={"employer_id": employer_id})

    def get_employer_profile(self, user_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/employer/profile/{user_id}")

    def update_employer_profile(self, user_id: str, **fields) -> Dict[str, Any]:
        return self._request("POST", "/employer/profile", json={"user_id": user_id, **fields})

    def hire(self, application_id: str) -> Dict[str, Any]:
        return self._request("POST", "/hire", json={"application_id": application_id})

    def unhire(self, application_id: str) -> Dict[str, Any]:
        return self._request("POST", "/unhire", json={"application_id": application_id})

    # ============================================================
    # ADMIN (requires an admin token)
    # ============================================================

    def admin_stats(self) -> Dict[str, Any]:
        return self._request("GET", "/admin/stats")

    def admin_pending_jobs(self) -> List[dict]:
        return self._request("GET", "/admin/pending-jobs")

    def admin_users(self, search: Optional[str] = None) -> List[dict]:
        return self._request("GET", "/admin/users", params={"search": search})

    def admin_logs(self) -> List[dict]:
        return self._request("GET", "/admin/logs")

    def admin_subscriptions(self) -> List[dict]:
        return self._request("GET", "/admin/subscriptions")

    def approve_job(self, job_id: str) -> Dict[str, Any]:
        return self._request("POST", "/admin/approve-job", json={"id": job_id})

    def reject_job(self, job_id: str, reason: Optional[str] = None) -> Dict[str, Any]:
        return self._request("POST", "/admin/reject-job", json={"id": job_id, "reason": reason})

    def feature_job(self, job_id: str, is_featured: bool = True) -> Dict[str, Any]:
        return self._request("POST", "/admin/feature-job", json={"id": job_id, "is_featured": is_featured})

    def update_user_status(self, user_id: str, status: str) -> Dict[str, Any]:
        return self._request("POST", "/admin/update-user-status", json={"id": user_id, "status": status})

    def delete_user(self, user_id: str) -> Dict[str, Any]:
        return self._request("DELETE", "/admin/delete-user", json={"id": user_id})

    # ============================================================
    # PROFILES + TALENTS
    # ============================================================

    def get_va_profile(self, user_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/va/profile/{user_id}")

    def update_va_profile(self, user_id: str, skills: Optional[List[dict]] = None, **fields) -> Dict[str, Any]:
        payload = {"user_id": user_id, "skills": skills or []}
        payload.update(fields)
        return self._request("POST", "/va/profile", json=payload)

    def va_applications(self, va_id: str) -> List[dict]:
        return self._request("GET", "/va/applications", params={"va_id": va_id})

    def talents(self, search: Optional[str] = None, skill: Optional[str] = None) -> List[dict]:
        return self._request("GET", "/talents", params={"search": search, "skill": skill})

    # ============================================================
    # SUBSCRIPTIONS
    # ============================================================

    def plans(self) -> List[dict]:
        return self._request("GET", "/plans")

    def get_subscription(self, employer_id: str) -> Dict[str, Any]:
        return self._request("GET", "/subscriptions", params={"employer_id": employer_id})

    def upgrade_subscription(self, employer_id: str, plan_id: str) -> Dict[str, Any]:
        return self._request("POST", "/subscriptions/upgrade", json={
            "employer_id": employer_id, "plan_id": plan_id
        })

    # ============================================================
    # MESSAGES
    # ============================================================

    def get_messages(self, user_id: str) -> List[dict]:
        return self._request("GET", f"/messages/{user_id}")

    def send_message(self, sender_id: str, receiver_id: str, message_body: str) -> str:
        return self._request("POST", "/messages", json={
            "sender_id": sender_id, "receiver_id": receiver_id, "message_body": message_body
        })["id"]

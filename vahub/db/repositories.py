"""
Repositories - one class per entity, all raw SQL.

Each repository wraps the request's Session, so every statement issued while
handling one request belongs to the same transaction.
"""

import uuid
from typing import Dict, List, Optional, Any

from sqlalchemy import text
from sqlalchemy.orm import Session

from vahub.db.database import utcnow_iso


def new_id() -> str:
    return str(uuid.uuid4())


def _all(result) -> List[Dict[str, Any]]:
    return [dict(r) for r in result.mappings().all()]


def _first(result) -> Optional[Dict[str, Any]]:
    row = result.mappings().first()
    return dict(row) if row else None


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def _execute(self, sql: str, params: dict = None):
        return self.db.execute(text(sql), params or {})


# ============================================================
# USERS
# ============================================================

class UserRepository(BaseRepository):

    def get(self, user_id: str) -> Optional[dict]:
        return _first(self._execute("SELECT * FROM users WHERE id = :id", {"id": user_id}))

    def get_by_email(self, email: str) -> Optional[dict]:
        return _first(self._execute("SELECT * FROM users WHERE email = :email", {"email": email}))

    def authenticate(self, email: str, password: str) -> Optional[dict]:
        """Exact match on email and stored password."""
        return _first(self._execute(
            "SELECT * FROM users WHERE email = :email AND password = :password",
            {"email": email, "password": password}
        ))

    def create(self, name: str, email: str, password: str, role: str,
               status: str = "pending", user_id: Optional[str] = None) -> str:
        user_id = user_id or new_id()
        self._execute(
            """
            INSERT INTO users (id, role, name, email, password, status, created_at)
            VALUES (:id, :role, :name, :email, :password, :status, :created_at)
            """,
            {"id": user_id, "role": role, "name": name, "email": email,
             "password": password, "status": status, "created_at": utcnow_iso()}
        )
        return user_id

    def set_password(self, email: str, password: str) -> int:
        result = self._execute(
            "UPDATE users SET password = :password WHERE email = :email",
            {"email": email, "password": password}
        )
        return result.rowcount

    def list_non_admin(self, search: Optional[str] = None) -> List[dict]:
        sql = "SELECT id, name, email, role, status, created_at FROM users WHERE role != 'admin'"
        params = {}
        if search:
            sql += " AND (LOWER(name) LIKE :search OR LOWER(email) LIKE :search)"
            params["search"] = f"%{search.lower()}%"
        sql += " ORDER BY created_at DESC"
        return _all(self._execute(sql, params))

    def count_by_role(self, role: str) -> int:
        return self._execute(
            "SELECT COUNT(*) FROM users WHERE role = :role", {"role": role}
        ).scalar_one()

    def update_status(self, user_id: str, status: str) -> int:
        result = self._execute(
            "UPDATE users SET status = :status WHERE id = :id",
            {"id": user_id, "status": status}
        )
        return result.rowcount

    def delete(self, user_id: str) -> int:
        """Delete the users row only. Profiles, applications and messages stay."""
        result = self._execute("DELETE FROM users WHERE id = :id", {"id": user_id})
        return result.rowcount


# ============================================================
# VA PROFILES + SKILLS
# ============================================================

VA_PROFILE_FIELDS = [
    "headline", "bio", "hourly_rate", "monthly_salary", "availability",
    "experience_years", "id_proof_score", "iq_score", "english_score",
    "education", "last_active", "intro_video_url", "resume_url",
]


class VAProfileRepository(BaseRepository):

    def create(self, user_id: str, profile_id: Optional[str] = None, **fields) -> str:
        profile_id = profile_id or new_id()
        columns = ["id", "user_id"] + [f for f in VA_PROFILE_FIELDS if f in fields]
        params = {"id": profile_id, "user_id": user_id}
        params.update({f: fields[f] for f in columns[2:]})
        self._execute(
            f"INSERT INTO va_profiles ({', '.join(columns)}) "
            f"VALUES ({', '.join(':' + c for c in columns)})",
            params
        )
        return profile_id

    def get(self, user_id: str) -> Optional[dict]:
        profile = _first(self._execute(
            """
            SELECT va_profiles.*, users.name, users.email
            FROM va_profiles
            JOIN users ON va_profiles.user_id = users.id
            WHERE va_profiles.user_id = :uid
            """,
            {"uid": user_id}
        ))
        if profile:
            profile["skills"] = self.get_skills(user_id)
        return profile

    def exists(self, user_id: str) -> bool:
        return self._execute(
            "SELECT 1 FROM va_profiles WHERE user_id = :uid", {"uid": user_id}
        ).first() is not None

    def update(self, user_id: str, fields: Dict[str, Any]) -> int:
        """Update the given columns; None values are written as NULL."""
        columns = [f for f in VA_PROFILE_FIELDS if f in fields]
        if not columns:
            return 0
        params = {f: fields[f] for f in columns}
        params["uid"] = user_id
        result = self._execute(
            f"UPDATE va_profiles SET {', '.join(f'{c} = :{c}' for c in columns)} WHERE user_id = :uid",
            params
        )
        return result.rowcount

    def get_skills(self, user_id: str) -> List[dict]:
        return _all(self._execute(
            "SELECT skill_name, years_experience FROM va_skills WHERE va_id = :uid",
            {"uid": user_id}
        ))

    def add_skills(self, user_id: str, skills: List[dict]):
        for skill in skills:
            self._execute(
                "INSERT INTO va_skills (id, va_id, skill_name, years_experience) VALUES (:id, :uid, :name, :exp)",
                {"id": new_id(), "uid": user_id, "name": skill["skill_name"],
                 "exp": skill.get("years_experience")}
            )

    def replace_skills(self, user_id: str, skills: List[dict]):
        """Full replace: delete every skill row, then insert the new list."""
        self._execute("DELETE FROM va_skills WHERE va_id = :uid", {"uid": user_id})
        self.add_skills(user_id, skills)

    def list_talents(self, search: Optional[str] = None, skill: Optional[str] = None) -> List[dict]:
        sql = """
            SELECT va_profiles.*, users.name, users.email
            FROM va_profiles
            JOIN users ON va_profiles.user_id = users.id
            WHERE users.status = 'approved'
        """
        params = {}
        if search:
            sql += " AND (LOWER(users.name) LIKE :search OR LOWER(va_profiles.headline) LIKE :search)"
            params["search"] = f"%{search.lower()}%"
        if skill:
            sql += """ AND EXISTS (SELECT 1 FROM va_skills
                                   WHERE va_skills.va_id = va_profiles.user_id
                                   AND LOWER(va_skills.skill_name) LIKE :skill)"""
            params["skill"] = f"%{skill.lower()}%"

        profiles = _all(self._execute(sql, params))
        for profile in profiles:
            profile["skills"] = self.get_skills(profile["user_id"])
        return profiles


# ============================================================
# EMPLOYER PROFILES
# ============================================================

EMPLOYER_PROFILE_FIELDS = [
    "company_name", "company_description", "website", "industry", "team_size", "logo_url",
]


class EmployerProfileRepository(BaseRepository):

    def create(self, user_id: str, profile_id: Optional[str] = None, **fields) -> str:
        profile_id = profile_id or new_id()
        columns = ["id", "user_id"] + [f for f in EMPLOYER_PROFILE_FIELDS if f in fields]
        params = {"id": profile_id, "user_id": user_id}
        params.update({f: fields[f] for f in columns[2:]})
        self._execute(
            f"INSERT INTO employer_profiles ({', '.join(columns)}) "
            f"VALUES ({', '.join(':' + c for c in columns)})",
            params
        )
        return profile_id

    def get(self, user_id: str) -> Optional[dict]:
        return _first(self._execute(
            """
            SELECT employer_profiles.*, users.name, users.email
            FROM employer_profiles
            JOIN users ON employer_profiles.user_id = users.id
            WHERE employer_profiles.user_id = :uid
            """,
            {"uid": user_id}
        ))

    def update(self, user_id: str, fields: Dict[str, Any]) -> int:
        columns = [f for f in EMPLOYER_PROFILE_FIELDS if f in fields]
        if not columns:
            return 0
        params = {f: fields[f] for f in columns}
        params["uid"] = user_id
        result = self._execute(
            f"UPDATE employer_profiles SET {', '.join(f'{c} = :{c}' for c in columns)} WHERE user_id = :uid",
            params
        )
        return result.rowcount


# ============================================================
# JOBS + SKILLS
# ============================================================

class JobRepository(BaseRepository):

    def _with_skills(self, jobs: List[dict]) -> List[dict]:
        for job in jobs:
            job["skills"] = self.get_skills(job["id"])
        return jobs

    def get_skills(self, job_id: str) -> List[str]:
        rows = self._execute(
            "SELECT skill_name FROM job_skills WHERE job_id = :jid", {"jid": job_id}
        ).fetchall()
        return [r[0] for r in rows]

    def add_skills(self, job_id: str, skills: List[str]):
        for skill_name in skills:
            self._execute(
                "INSERT INTO job_skills (id, job_id, skill_name) VALUES (:id, :jid, :name)",
                {"id": new_id(), "jid": job_id, "name": skill_name}
            )

    def list_approved(self, search: Optional[str] = None) -> List[dict]:
        sql = """
            SELECT jobs.*, employer_profiles.company_name, employer_profiles.logo_url
            FROM jobs
            JOIN employer_profiles ON jobs.employer_id = employer_profiles.user_id
            WHERE jobs.status = 'approved'
        """
        params = {}
        if search:
            sql += " AND (LOWER(jobs.title) LIKE :search OR LOWER(jobs.description) LIKE :search)"
            params["search"] = f"%{search.lower()}%"
        sql += " ORDER BY jobs.is_featured DESC, jobs.created_at DESC"
        return self._with_skills(_all(self._execute(sql, params)))

    def get(self, job_id: str) -> Optional[dict]:
        job = _first(self._execute(
            """
            SELECT jobs.*, employer_profiles.company_name, employer_profiles.company_description,
                   employer_profiles.logo_url
            FROM jobs
            JOIN employer_profiles ON jobs.employer_id = employer_profiles.user_id
            WHERE jobs.id = :jid
            """,
            {"jid": job_id}
        ))
        if job:
            job["skills"] = self.get_skills(job_id)
        return job

    def get_status(self, job_id: str) -> Optional[str]:
        row = self._execute("SELECT status FROM jobs WHERE id = :jid", {"jid": job_id}).first()
        return row[0] if row else None

    def create(self, employer_id: str, title: str, description: str,
               salary_min: Optional[float] = None, salary_max: Optional[float] = None,
               job_type: Optional[str] = None, experience_level: Optional[str] = None,
               status: str = "pending", is_featured: bool = False,
               job_id: Optional[str] = None) -> str:
        job_id = job_id or new_id()
        self._execute(
            """
            INSERT INTO jobs (id, employer_id, title, description, salary_min, salary_max,
                              job_type, experience_level, status, is_featured, created_at)
            VALUES (:id, :employer_id, :title, :description, :salary_min, :salary_max,
                    :job_type, :experience_level, :status, :is_featured, :created_at)
            """,
            {"id": job_id, "employer_id": employer_id, "title": title, "description": description,
             "salary_min": salary_min, "salary_max": salary_max, "job_type": job_type,
             "experience_level": experience_level, "status": status,
             "is_featured": 1 if is_featured else 0, "created_at": utcnow_iso()}
        )
        return job_id

    def list_pending(self) -> List[dict]:
        return _all(self._execute(
            """
            SELECT jobs.*, employer_profiles.company_name
            FROM jobs
            JOIN employer_profiles ON jobs.employer_id = employer_profiles.user_id
            WHERE jobs.status = 'pending'
            ORDER BY jobs.created_at DESC
            """
        ))

    def list_for_employer(self, employer_id: str) -> List[dict]:
        return self._with_skills(_all(self._execute(
            "SELECT * FROM jobs WHERE employer_id = :eid ORDER BY created_at DESC",
            {"eid": employer_id}
        )))

    def approve(self, job_id: str) -> int:
        return self._execute(
            "UPDATE jobs SET status = 'approved' WHERE id = :jid", {"jid": job_id}
        ).rowcount

    def reject(self, job_id: str, reason: Optional[str]) -> int:
        return self._execute(
            "UPDATE jobs SET status = 'rejected', rejection_reason = :reason WHERE id = :jid",
            {"jid": job_id, "reason": reason}
        ).rowcount

    def set_featured(self, job_id: str, is_featured: bool) -> int:
        return self._execute(
            "UPDATE jobs SET is_featured = :featured WHERE id = :jid",
            {"jid": job_id, "featured": 1 if is_featured else 0}
        ).rowcount

    def count(self, status: Optional[str] = None) -> int:
        if status:
            return self._execute(
                "SELECT COUNT(*) FROM jobs WHERE status = :status", {"status": status}
            ).scalar_one()
        return self._execute("SELECT COUNT(*) FROM jobs").scalar_one()


# ============================================================
# APPLICATIONS
# ============================================================

class ApplicationRepository(BaseRepository):

    def create(self, job_id: str, va_id: str, cover_letter: Optional[str]) -> str:
        application_id = new_id()
        self._execute(
            """
            INSERT INTO applications (id, job_id, va_id, cover_letter, status, created_at)
            VALUES (:id, :job_id, :va_id, :cover_letter, 'applied', :created_at)
            """,
            {"id": application_id, "job_id": job_id, "va_id": va_id,
             "cover_letter": cover_letter, "created_at": utcnow_iso()}
        )
        return application_id

    def set_status(self, application_id: str, status: str) -> int:
        return self._execute(
            "UPDATE applications SET status = :status WHERE id = :aid",
            {"aid": application_id, "status": status}
        ).rowcount

    def list_for_employer(self, employer_id: str) -> List[dict]:
        return _all(self._execute(
            """
            SELECT applications.*, users.name AS va_name, jobs.title AS job_title
            FROM applications
            JOIN users ON applications.va_id = users.id
            JOIN jobs ON applications.job_id = jobs.id
            WHERE jobs.employer_id = :eid
            ORDER BY applications.created_at DESC
            """,
            {"eid": employer_id}
        ))

    def list_for_va(self, va_id: str) -> List[dict]:
        return _all(self._execute(
            """
            SELECT applications.*, jobs.title AS job_title, jobs.status AS job_status,
                   employer_profiles.company_name
            FROM applications
            JOIN jobs ON applications.job_id = jobs.id
            LEFT JOIN employer_profiles ON jobs.employer_id = employer_profiles.user_id
            WHERE applications.va_id = :vid
            ORDER BY applications.created_at DESC
            """,
            {"vid": va_id}
        ))


# ============================================================
# MESSAGES
# ============================================================

class MessageRepository(BaseRepository):

    def list_for_user(self, user_id: str) -> List[dict]:
        return _all(self._execute(
            """
            SELECT messages.*, sender.name AS sender_name, receiver.name AS receiver_name
            FROM messages
            JOIN users AS sender ON messages.sender_id = sender.id
            JOIN users AS receiver ON messages.receiver_id = receiver.id
            WHERE messages.sender_id = :uid OR messages.receiver_id = :uid
            ORDER BY messages.created_at ASC
            """,
            {"uid": user_id}
        ))

    def create(self, sender_id: str, receiver_id: str, message_body: str) -> str:
        message_id = new_id()
        self._execute(
            """
            INSERT INTO messages (id, sender_id, receiver_id, message_body, created_at)
            VALUES (:id, :sender_id, :receiver_id, :body, :created_at)
            """,
            {"id": message_id, "sender_id": sender_id, "receiver_id": receiver_id,
             "body": message_body, "created_at": utcnow_iso()}
        )
        return message_id


# ============================================================
# PLANS + SUBSCRIPTIONS
# ============================================================

class PlanRepository(BaseRepository):

    def list(self) -> List[dict]:
        return _all(self._execute("SELECT * FROM plans ORDER BY price ASC"))

    def get(self, plan_id: str) -> Optional[dict]:
        return _first(self._execute("SELECT * FROM plans WHERE id = :pid", {"pid": plan_id}))

    def count(self) -> int:
        return self._execute("SELECT COUNT(*) FROM plans").scalar_one()

    def create(self, plan_id: str, name: str, price: float, job_post_limit: int,
               messaging_limit: int, candidate_unlock_limit: int, featured_jobs_limit: int):
        self._execute(
            """
            INSERT INTO plans (id, name, price, job_post_limit, messaging_limit,
                               candidate_unlock_limit, featured_jobs_limit)
            VALUES (:id, :name, :price, :job_post_limit, :messaging_limit,
                    :candidate_unlock_limit, :featured_jobs_limit)
            """,
            {"id": plan_id, "name": name, "price": price, "job_post_limit": job_post_limit,
             "messaging_limit": messaging_limit, "candidate_unlock_limit": candidate_unlock_limit,
             "featured_jobs_limit": featured_jobs_limit}
        )

    def update_price(self, plan_id: str, name: str, price: float) -> int:
        return self._execute(
            "UPDATE plans SET name = :name, price = :price WHERE id = :id",
            {"id": plan_id, "name": name, "price": price}
        ).rowcount


class SubscriptionRepository(BaseRepository):

    def get_for_employer(self, employer_id: str) -> Optional[dict]:
        return _first(self._execute(
            """
            SELECT subscriptions.*, plans.name AS plan_name, plans.price,
                   plans.job_post_limit, plans.messaging_limit
            FROM subscriptions
            JOIN plans ON subscriptions.plan_id = plans.id
            WHERE subscriptions.employer_id = :eid
            """,
            {"eid": employer_id}
        ))

    def replace(self, employer_id: str, plan_id: str, current_period_end: str) -> str:
        """Delete the employer's subscription, then insert an active one."""
        subscription_id = new_id()
        self._execute("DELETE FROM subscriptions WHERE employer_id = :eid", {"eid": employer_id})
        self._execute(
            """
            INSERT INTO subscriptions (id, employer_id, plan_id, status, current_period_end)
            VALUES (:id, :eid, :pid, 'active', :period_end)
            """,
            {"id": subscription_id, "eid": employer_id, "pid": plan_id,
             "period_end": current_period_end}
        )
        return subscription_id

    def list_all(self) -> List[dict]:
        return _all(self._execute(
            """
            SELECT subscriptions.*, users.name AS employer_name, users.email AS employer_email,
                   plans.name AS plan_name
            FROM subscriptions
            JOIN users ON subscriptions.employer_id = users.id
            JOIN plans ON subscriptions.plan_id = plans.id
            """
        ))


# ============================================================
# ADMIN LOGS
# ============================================================

class AdminLogRepository(BaseRepository):

    def create(self, admin_id: str, action_type: str, description: str,
               target_user_id: Optional[str] = None) -> str:
        log_id = new_id()
        self._execute(
            """
            INSERT INTO admin_logs (id, admin_id, action_type, target_user_id, description, created_at)
            VALUES (:id, :admin_id, :action_type, :target_user_id, :description, :created_at)
            """,
            {"id": log_id, "admin_id": admin_id, "action_type": action_type,
             "target_user_id": target_user_id, "description": description,
             "created_at": utcnow_iso()}
        )
        return log_id

    def list_recent(self, limit: int = 100) -> List[dict]:
        return _all(self._execute(
            """
            SELECT admin_logs.*, users.name AS admin_name
            FROM admin_logs
            JOIN users ON admin_logs.admin_id = users.id
            ORDER BY admin_logs.created_at DESC
            LIMIT :limit
            """,
            {"limit": limit}
        ))


class Repositories:
    """All repositories bound to one session (one transaction)."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.va_profiles = VAProfileRepository(db)
        self.employer_profiles = EmployerProfileRepository(db)
        self.jobs = JobRepository(db)
        self.applications = ApplicationRepository(db)
        self.messages = MessageRepository(db)
        self.plans = PlanRepository(db)
        self.subscriptions = SubscriptionRepository(db)
        self.admin_logs = AdminLogRepository(db)

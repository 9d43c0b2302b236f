"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    admin = "admin"
    employer = "employer"
    va = "va"


class UserStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    suspended = "suspended"


class JobStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    closed = "closed"


class ApplicationStatus(str, Enum):
    applied = "applied"
    shortlisted = "shortlisted"
    rejected = "rejected"
    hired = "hired"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str
    role: str

class LoginRequest(BaseModel):
    email: str
    password: str

class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    status: Optional[str] = None
    created_at: Optional[datetime] = None

class AuthResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str = "bearer"


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(BaseModel):
    employer_id: str
    title: str
    description: str
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    skills: List[str] = []

class JobResponse(BaseModel):
    id: str
    employer_id: str
    title: str
    description: str
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    status: str
    is_featured: bool = False
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    company_name: Optional[str] = None
    company_description: Optional[str] = None
    logo_url: Optional[str] = None
    skills: List[str] = []

class PendingJobResponse(BaseModel):
    id: str
    employer_id: str
    title: str
    description: str
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    job_type: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    company_name: Optional[str] = None


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(BaseModel):
    job_id: str
    va_id: str
    cover_letter: Optional[str] = None

class HireRequest(BaseModel):
    application_id: str
    employer_id: Optional[str] = None

class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus

class ApplicationResponse(BaseModel):
    id: str
    job_id: str
    va_id: str
    cover_letter: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    va_name: Optional[str] = None
    job_title: Optional[str] = None
    job_status: Optional[str] = None
    company_name: Optional[str] = None


# ============================================================
# ADMIN SCHEMAS
# ============================================================

class AdminStatsResponse(BaseModel):
    total_vas: int
    total_employers: int
    total_jobs: int
    pending_jobs: int

class JobModerationRequest(BaseModel):
    id: str

class JobRejectRequest(BaseModel):
    id: str
    reason: Optional[str] = None

class JobFeatureRequest(BaseModel):
    id: str
    is_featured: bool = True

class UserStatusUpdate(BaseModel):
    id: str
    status: UserStatus

class UserDeleteRequest(BaseModel):
    id: str

class AdminLogResponse(BaseModel):
    id: str
    admin_id: str
    admin_name: Optional[str] = None
    action_type: str
    target_user_id: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None

class AdminSubscriptionResponse(BaseModel):
    id: str
    employer_id: str
    plan_id: str
    status: Optional[str] = None
    current_period_end: Optional[datetime] = None
    employer_name: Optional[str] = None
    employer_email: Optional[str] = None
    plan_name: Optional[str] = None


# ============================================================
# SUBSCRIPTION SCHEMAS
# ============================================================

class PlanResponse(BaseModel):
    id: str
    name: str
    price: float
    job_post_limit: Optional[int] = None
    messaging_limit: Optional[int] = None
    candidate_unlock_limit: Optional[int] = None
    featured_jobs_limit: Optional[int] = None

class SubscriptionUpgrade(BaseModel):
    employer_id: str
    plan_id: str

class SubscriptionResponse(BaseModel):
    id: Optional[str] = None
    employer_id: Optional[str] = None
    plan_id: Optional[str] = None
    status: Optional[str] = None
    current_period_end: Optional[datetime] = None
    plan_name: str
    price: Optional[float] = None
    job_post_limit: Optional[int] = None
    messaging_limit: Optional[int] = None


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class VASkill(BaseModel):
    skill_name: str
    years_experience: Optional[str] = None

class VAProfileUpdate(BaseModel):
    user_id: str
    headline: Optional[str] = None
    bio: Optional[str] = None
    hourly_rate: Optional[float] = None
    monthly_salary: Optional[float] = None
    availability: Optional[str] = None
    education: Optional[str] = None
    experience_years: Optional[int] = None
    intro_video_url: Optional[str] = None
    resume_url: Optional[str] = None
    skills: List[VASkill] = []

class VAProfileResponse(BaseModel):
    id: str
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    headline: Optional[str] = None
    bio: Optional[str] = None
    hourly_rate: Optional[float] = None
    monthly_salary: Optional[float] = None
    availability: Optional[str] = None
    experience_years: Optional[int] = None
    id_proof_score: Optional[int] = 0
    iq_score: Optional[int] = 0
    english_score: Optional[int] = 0
    education: Optional[str] = None
    last_active: Optional[str] = None
    intro_video_url: Optional[str] = None
    resume_url: Optional[str] = None
    profile_views: Optional[int] = 0
    is_featured: bool = False
    skills: List[VASkill] = []

    @field_validator("is_featured", mode="before")
    @classmethod
    def null_is_false(cls, v):
        return bool(v)

class EmployerProfileUpdate(BaseModel):
    user_id: str
    company_name: Optional[str] = None
    company_description: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    team_size: Optional[str] = None
    logo_url: Optional[str] = None

class EmployerProfileResponse(BaseModel):
    id: str
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    company_name: Optional[str] = None
    company_description: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    team_size: Optional[str] = None
    logo_url: Optional[str] = None


# ============================================================
# MESSAGE SCHEMAS
# ============================================================

class MessageCreate(BaseModel):
    sender_id: str
    receiver_id: str
    message_body: str

class MessageResponse(BaseModel):
    id: str
    sender_id: str
    receiver_id: str
    message_body: str
    is_flagged: bool = False
    created_at: Optional[datetime] = None
    sender_name: Optional[str] = None
    receiver_name: Optional[str] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class IdResponse(BaseModel):
    id: str

class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None

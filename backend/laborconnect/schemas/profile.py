"""
Worker and employer profile schemas
"""
from typing import Optional
from .base import CamelModel
from .user import UserResponse


class WorkerProfileCreate(CamelModel):
    user_id: str
    skills: str
    experience: str
    location: str
    availability: Optional[str] = None
    description: Optional[str] = None
    hourly_rate: Optional[str] = None


class WorkerProfileResponse(CamelModel):
    id: str
    user_id: str
    skills: str
    experience: str
    location: str
    availability: str
    description: Optional[str] = None
    hourly_rate: Optional[str] = None


class EmployerProfileCreate(CamelModel):
    user_id: str
    company_name: str
    industry: str
    job_needs: Optional[str] = None
    location: Optional[str] = None


class EmployerProfileResponse(CamelModel):
    id: str
    user_id: str
    company_name: str
    industry: str
    job_needs: Optional[str] = None
    location: Optional[str] = None


class WorkerFilters(CamelModel):
    """Worker search filters; empty values are ignored"""
    skills: Optional[str] = None
    location: Optional[str] = None
    availability: Optional[str] = None


class WorkerWithProfile(UserResponse):
    """Worker user joined with its profile"""
    worker_profile: WorkerProfileResponse

# ========================================
# app/schemas/job.py
# ========================================

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime, timezone

# 0. Shared shape. Loose on purpose: documents already in the
# collection may have been written by hand or by older clients.
class JobBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    type: Optional[str] = None  # FULL_TIME, PART_TIME, CONTRACT, etc.
    salary: Optional[str] = None
    experience_level: Optional[str] = Field(None, alias="experienceLevel")  # ENTRY, MID, SENIOR, etc.
    skills: Optional[List[str]] = []
    posted_date: Optional[datetime] = Field(None, alias="postedDate")
    expiry_date: Optional[datetime] = Field(None, alias="expiryDate")
    active: Optional[bool] = False
    company_id: Optional[str] = Field(None, alias="companyId")
    applicants: Optional[List[str]] = []

# 1. Input: What the client sends for create and full replace
class JobCreate(JobBase):
    title: str
    company: str
    location: str
    description: str
    skills: List[str] = []
    expiry_date: datetime = Field(..., alias="expiryDate")
    active: bool = False
    applicants: List[str] = []

    @field_validator("title", "company", "location", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("posted_date", "expiry_date")
    @classmethod
    def as_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Store offsets as UTC without tzinfo, the way MongoDB hands dates back."""
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

# 2. Output: Stored job with its id
class JobResponse(JobBase):
    id: str

# 3. Output: One page of jobs
class JobListResponse(BaseModel):
    jobs: List[JobResponse]
    total: int
    page: int
    size: int

# 4. Input: Apply to a job
class JobApply(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1)

# 5. Output: Plain acknowledgement
class MessageResponse(BaseModel):
    message: str

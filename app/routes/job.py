# ========================================
# app/routes/job.py
# ========================================

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from app.schemas.job import JobApply, JobCreate, JobResponse, JobListResponse, MessageResponse
from app.services.job_store import JobStore, get_job_store
from app.utils.auth import require_api_key
from app.utils.pagination import paginate

router = APIRouter(prefix="/api/jobs")

# ===========================
# PUBLIC ENDPOINTS
# ===========================

# 1. LIST ALL JOBS, ONE PAGE AT A TIME
@router.get("", response_model=JobListResponse)
async def get_all_jobs(
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(10, ge=0, description="Jobs per page"),
    store: JobStore = Depends(get_job_store),
):
    """Get one page of all jobs, in the order the store returns them."""

    all_jobs = await store.list_jobs()
    jobs, total = paginate(all_jobs, page, size)

    return {"jobs": jobs, "total": total, "page": page, "size": size}


# 2. SEARCH JOBS
# Declared before /{job_id} so "search" is not taken for an id.
@router.get("/search", response_model=JobListResponse)
async def search_jobs(
    keyword: Optional[str] = Query(None, description="Title prefix, case-sensitive"),
    location: Optional[str] = Query(None, description="Exact location"),
    type: Optional[str] = Query(None, description="Exact job type, e.g. FULL_TIME"),
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=0),
    store: JobStore = Depends(get_job_store),
):
    """Filter jobs by title prefix, location and type. Every filter is optional."""

    matches = await store.search_jobs(keyword, location, type)
    jobs, total = paginate(matches, page, size)

    return {"jobs": jobs, "total": total, "page": page, "size": size}


# 3. GET SINGLE JOB
@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, store: JobStore = Depends(get_job_store)):
    job = await store.get_job(job_id)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


# ===========================
# API KEY ENDPOINTS
# ===========================

# 4. POST A JOB
@router.post("", response_model=JobResponse, dependencies=[Depends(require_api_key)])
async def create_job(job: JobCreate, store: JobStore = Depends(get_job_store)):
    """Create a job posting. The id is generated by the server."""
    return await store.create_job(job)


# 5. REPLACE A JOB
@router.put("/{job_id}", response_model=JobResponse, dependencies=[Depends(require_api_key)])
async def update_job(
    job_id: str,
    job: JobCreate,
    store: JobStore = Depends(get_job_store),
):
    """Replace the whole job document. Fields missing from the body are not kept."""
    return await store.replace_job(job_id, job)


# 6. DELETE A JOB
@router.delete("/{job_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
async def delete_job(job_id: str, store: JobStore = Depends(get_job_store)):
    """Delete a job posting. Succeeds whether or not the job existed."""
    await store.delete_job(job_id)
    return {"message": "Job deleted"}


# ===========================
# JOBSEEKER ENDPOINTS
# ===========================

# 7. APPLY TO A JOB
@router.post("/{job_id}/apply", response_model=MessageResponse)
async def apply_to_job(
    job_id: str,
    application: JobApply,
    store: JobStore = Depends(get_job_store),
):
    """Record a user as an applicant. Applying twice keeps a single entry."""

    applied = await store.add_applicant(job_id, application.user_id)

    if not applied:
        raise HTTPException(status_code=404, detail="Job not found")

    return {"message": "Application successful"}

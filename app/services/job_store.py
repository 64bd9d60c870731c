"""
Job Store
Thin pass-through to the MongoDB ``jobs`` collection.

Each method is a single round trip. Documents are keyed by the job id
(``_id``) and carry the camelCase field names used on the wire.
"""
import logging
import re
from typing import Any, Dict, List, Optional

from bson import ObjectId

from app.database import get_jobs_collection
from app.schemas.job import JobCreate, JobResponse

logger = logging.getLogger(__name__)


def to_document(job_id: str, job: JobCreate) -> Dict[str, Any]:
    """Build the stored document for ``job`` under ``job_id``."""
    document = job.model_dump(by_alias=True)
    document["_id"] = job_id
    return document


def from_document(document: Dict[str, Any]) -> JobResponse:
    """Map a stored document back to a job, ``_id`` becoming ``id``."""
    data = dict(document)
    data["id"] = str(data.pop("_id"))
    return JobResponse.model_validate(data)


def build_search_query(
    keyword: Optional[str] = None,
    location: Optional[str] = None,
    job_type: Optional[str] = None,
) -> Dict[str, Any]:
    """AND together the title prefix, location and type filters that are set.

    The keyword matches the start of the title only, case-sensitively.
    Location and type must match exactly.
    """
    query: Dict[str, Any] = {}

    if keyword:
        query["title"] = {"$regex": "^" + re.escape(keyword)}

    if location:
        query["location"] = location

    if job_type:
        query["type"] = job_type

    return query


class JobStore:
    """
    Job persistence over one motor collection.
    No validation, retry or caching is layered on top of the driver.
    """

    def __init__(self, collection):
        self.collection = collection

    async def list_jobs(self) -> List[JobResponse]:
        documents = await self.collection.find({}).to_list(length=None)
        return [from_document(document) for document in documents]

    async def get_job(self, job_id: str) -> Optional[JobResponse]:
        document = await self.collection.find_one({"_id": job_id})
        if document is None:
            return None
        return from_document(document)

    async def create_job(self, job: JobCreate) -> JobResponse:
        """Insert ``job`` under a freshly generated id and return it with that id."""
        job_id = str(ObjectId())
        document = to_document(job_id, job)
        await self.collection.insert_one(document)
        logger.info("Created job %s", job_id)
        return from_document(document)

    async def replace_job(self, job_id: str, job: JobCreate) -> JobResponse:
        """Overwrite the whole document for ``job_id``, creating it if missing.

        Fields the new job leaves unset fall back to their defaults; nothing
        is merged from the previous version.
        """
        document = to_document(job_id, job)
        await self.collection.replace_one({"_id": job_id}, document, upsert=True)
        logger.info("Replaced job %s", job_id)
        return from_document(document)

    async def delete_job(self, job_id: str) -> None:
        await self.collection.delete_one({"_id": job_id})
        logger.info("Deleted job %s", job_id)

    async def add_applicant(self, job_id: str, user_id: str) -> bool:
        """Add ``user_id`` to the job's applicants once. False if the job is missing."""
        result = await self.collection.update_one(
            {"_id": job_id},
            {"$addToSet": {"applicants": user_id}},
        )
        if result.matched_count == 0:
            return False
        logger.info("Recorded applicant for job %s", job_id)
        return True

    async def search_jobs(
        self,
        keyword: Optional[str] = None,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
    ) -> List[JobResponse]:
        query = build_search_query(keyword, location, job_type)
        documents = await self.collection.find(query).to_list(length=None)
        return [from_document(document) for document in documents]


def get_job_store() -> JobStore:
    """FastAPI dependency: a store bound to the connected database."""
    return JobStore(get_jobs_collection())

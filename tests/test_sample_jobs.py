"""
Tests for services/sample_jobs.py - demo data seeding.
"""

import asyncio
from datetime import datetime

import pytest

from app.services.job_store import JobStore
from app.services.sample_jobs import SAMPLE_JOBS, build_sample_jobs, seed_sample_jobs


class TestBuildSampleJobs:

    def test_jobs_are_valid_and_active(self):
        now = datetime(2026, 1, 1, 12, 0)

        jobs = build_sample_jobs(now)

        assert len(jobs) == len(SAMPLE_JOBS)
        for job in jobs:
            assert job.active is True
            assert job.posted_date == now
            assert job.expiry_date == datetime(2026, 1, 31, 12, 0)
            assert job.applicants == []

    def test_covers_several_job_types(self):
        types = {job.type for job in build_sample_jobs()}

        assert {"FULL_TIME", "PART_TIME", "CONTRACT", "INTERNSHIP"} <= types


class TestSeedSampleJobs:

    @pytest.mark.asyncio
    async def test_inserts_every_sample(self, collection):
        created = await seed_sample_jobs(JobStore(collection))

        assert len(created) == len(SAMPLE_JOBS)
        assert set(collection.documents) == {job.id for job in created}
        titles = [doc["title"] for doc in collection.documents.values()]
        assert "Backend Developer" in titles

    def test_seeded_jobs_are_searchable(self, collection, client):
        asyncio.run(seed_sample_jobs(JobStore(collection)))

        response = client.get("/api/jobs/search", params={"location": "Remote"})

        assert [job["title"] for job in response.json()["jobs"]] == ["Backend Developer"]

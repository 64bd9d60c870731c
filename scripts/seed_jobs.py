#!/usr/bin/env python3
"""
Fill the jobs collection with demo postings.

Usage:
    python scripts/seed_jobs.py
    python scripts/seed_jobs.py --dry-run
"""

import argparse
import asyncio
import os
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import connect_to_mongo, close_mongo_connection, get_jobs_collection
from app.services.job_store import JobStore
from app.services.sample_jobs import build_sample_jobs, seed_sample_jobs
from app.utils.logger import setup_logging


async def seed(dry_run: bool = False):
    if dry_run:
        print("[DRY RUN] Would add the following jobs:")
        for i, job in enumerate(build_sample_jobs(), 1):
            print(f"  {i}. {job.title} at {job.company} ({job.location})")
        return

    await connect_to_mongo()
    try:
        created = await seed_sample_jobs(JobStore(get_jobs_collection()))
    finally:
        await close_mongo_connection()

    for job in created:
        print(f"  {job.id}: {job.title} at {job.company}")


def main():
    parser = argparse.ArgumentParser(description="Add sample jobs to the jobs collection")
    parser.add_argument("--dry-run", action="store_true",
                        help="List the sample jobs without writing them")
    args = parser.parse_args()

    setup_logging(os.getenv("LOG_LEVEL", "INFO"))
    asyncio.run(seed(dry_run=args.dry_run))


if __name__ == "__main__":
    main()

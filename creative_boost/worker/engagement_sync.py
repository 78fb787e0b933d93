"""Engagement Sync Background Worker

Creates the month's client months for active billing engagements that
include a Creative Boost billing line. Can be run as a standalone script or
integrated with a scheduler.
"""

import asyncio
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from creative_boost.adapter.repositories import (
    SqlAlchemyClientMonthRepository,
    SqlAlchemyCreativeBoostClientRepository,
    SqlAlchemyEngagementDirectoryRepository,
)
from creative_boost.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from creative_boost.app.use_cases.creative_boost import EnsureClientMonthsForActiveEngagements, SyncResultDTO
from creative_boost.domain.base import utcnow
from creative_boost.domain.creative_boost_client import PackageDefaults

logger = logging.getLogger(__name__)


class EngagementSyncWorker:
    """
    Background worker for the engagement sync

    Features:
    - Idempotent: safe to run several times per month
    - Carries the previous month's settings forward per billing line
    - Can run once for a given month or continuously for the current month

    Usage:
        # Run once
        worker = EngagementSyncWorker()
        result = await worker.run_once(2024, 3)

        # Run continuously
        worker = EngagementSyncWorker()
        await worker.run_forever(interval_seconds=86400)  # Daily
    """

    def __init__(self, db_uri: Optional[str] = None, config=ApplicationConfig):
        self.config = config
        self.db_uri = db_uri or config.DB_URI

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info("EngagementSyncWorker initialized")

    async def run_once(self, year: Optional[int] = None, month: Optional[int] = None) -> Optional[SyncResultDTO]:
        """
        Run the sync once

        Args:
            year: Calendar year (defaults to the current year)
            month: Calendar month (defaults to the current month)

        Returns:
            SyncResultDTO, or None when the sync is disabled
        """
        if not self.config.ENGAGEMENT_SYNC_ENABLED:
            logger.info("Engagement sync is disabled, skipping")
            return None

        now = utcnow()
        year = year or now.year
        month = month or now.month

        async with self.async_session_factory() as session:
            use_case = EnsureClientMonthsForActiveEngagements(
                uow=SqlAlchemyUnitOfWork(session),
                client_month_repo=SqlAlchemyClientMonthRepository(session),
                client_repo=SqlAlchemyCreativeBoostClientRepository(session),
                engagement_directory=SqlAlchemyEngagementDirectoryRepository(session),
                service_id=self.config.CREATIVE_BOOST_SERVICE_ID,
                package_defaults=PackageDefaults.from_config(self.config),
            )

            result = await use_case.execute(year, month)

            if result.is_err():
                logger.error(f"Engagement sync failed: {result.error.message} ({result.error.reason})")
                raise RuntimeError(f"Engagement sync failed: {result.error.message}")

            return result.value

    async def run_forever(self, interval_seconds: int = 86400):
        """
        Run the sync for the current month at the given interval

        Args:
            interval_seconds: Seconds between runs (default: 24 hours)
        """
        logger.info(f"Starting continuous engagement sync with {interval_seconds}s interval")

        while True:
            try:
                result = await self.run_once()
                if result:
                    logger.info(
                        f"Sync cycle complete for {result.year}-{result.month:02d}: "
                        f"{result.client_months_created} created, "
                        f"{result.client_months_linked} linked, "
                        f"{result.client_months_existing} existing"
                    )
            except Exception as e:
                logger.error(f"Sync cycle failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        await self.engine.dispose()
        logger.info("EngagementSyncWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        # Sync the current month once
        python -m creative_boost.worker.engagement_sync

        # Sync a given month
        python -m creative_boost.worker.engagement_sync --year 2024 --month 3

        # Sync the current month continuously
        python -m creative_boost.worker.engagement_sync --continuous --interval 3600
    """
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Creative Boost Engagement Sync Worker")
    parser.add_argument("--year", type=int, default=None, help="Year to sync (default: current)")
    parser.add_argument("--month", type=int, default=None, choices=range(1, 13), help="Month to sync (default: current)")
    parser.add_argument("--continuous", action="store_true", help="Keep syncing the current month")
    parser.add_argument(
        "--interval", type=int, default=ApplicationConfig.ENGAGEMENT_SYNC_INTERVAL_SECONDS,
        help="Interval between runs in seconds (default: ENGAGEMENT_SYNC_INTERVAL_SECONDS)"
    )
    args = parser.parse_args()

    worker = EngagementSyncWorker()

    try:
        if args.continuous:
            await worker.run_forever(interval_seconds=args.interval)
        else:
            result = await worker.run_once(args.year, args.month)
            if result is None:
                print("Engagement sync is disabled")
            else:
                print(f"Engagement sync complete for {result.year}-{result.month:02d}:")
                print(f"  Engagements checked: {result.engagements_checked}")
                print(f"  Client months created: {result.client_months_created}")
                print(f"  Client months linked: {result.client_months_linked}")
                print(f"  Client months existing: {result.client_months_existing}")
                print(f"  Client configs created: {result.client_configs_created}")
                print(f"  Execution time: {result.execution_time_ms}ms")
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())

"""EnsureClientMonthsForActiveEngagements Use Case

Reconciles the monthly credit ledger against active billing engagements
that include a Creative Boost billing line.
"""

import logging
import time
from calendar import monthrange
from datetime import date
from decimal import Decimal
from creative_boost.libs.result import Result, Return, Error
from creative_boost.app.services.unit_of_work import UnitOfWork
from creative_boost.app.repositories.client_month_repository import ClientMonthRepository
from creative_boost.app.repositories.creative_boost_client_repository import CreativeBoostClientRepository
from creative_boost.app.repositories.directory_repository import EngagementDirectoryRepository
from creative_boost.domain.base import utcnow
from creative_boost.domain.client_month import ClientMonth, MonthStatus
from creative_boost.domain.creative_boost_client import PackageDefaults, DEFAULT_PACKAGE
from creative_boost.domain.directory import Engagement
from .add_creative_boost_client import get_or_create_client_config
from .dtos import SyncResultDTO

logger = logging.getLogger(__name__)

CREATIVE_BOOST_SERVICE_ID = "srv-3"
ACTIVE_ENGAGEMENT_STATUS = "active"

# Billing lines without a configured minimum have none
SYNC_FALLBACK_MIN_CREDITS = Decimal("0")


def previous_period(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def engagement_covers_month(engagement: Engagement, year: int, month: int) -> bool:
    """Engagement started before the month ends and did not end before it starts"""
    month_start = date(year, month, 1)
    month_end = date(year, month, monthrange(year, month)[1])

    if engagement.start_date > month_end:
        return False
    if engagement.end_date and engagement.end_date < month_start:
        return False
    return True


class EnsureClientMonthsForActiveEngagements:
    """
    Use Case: Engagement sync

    Business Rules:
    1. Every active engagement covering the month with a Creative Boost
       billing line gets exactly one client month for
       (engagement_service_id, year, month)
    2. New client months carry forward the previous month's min/max/price/
       colleague of the same billing line, else the billing line's
       configured values, else the package defaults (min 0)
    3. A client month that already exists for the client but is not linked
       to any billing line is linked instead of duplicated
    4. Missing client configs are created from the new client month
    5. Idempotent: re-running for the same month creates nothing

    Flow:
    1. Get active engagements
    2. For each engagement covering the month:
       a. Find its Creative Boost billing line
       b. Skip if a linked client month exists
       c. Link an unlinked client month of the client, or create one
       d. Ensure the client config
    3. Commit and return counters
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_month_repo: ClientMonthRepository,
        client_repo: CreativeBoostClientRepository,
        engagement_directory: EngagementDirectoryRepository,
        service_id: str = CREATIVE_BOOST_SERVICE_ID,
        package_defaults: PackageDefaults = DEFAULT_PACKAGE,
    ):
        self.uow = uow
        self.client_month_repo = client_month_repo
        self.client_repo = client_repo
        self.engagement_directory = engagement_directory
        self.service_id = service_id
        self.package_defaults = package_defaults

    async def execute(self, year: int, month: int) -> Result[SyncResultDTO]:
        start_time = time.time()

        engagements_checked = 0
        created = 0
        linked = 0
        existing = 0
        configs_created = 0

        try:
            logger.info(f"Starting engagement sync for {year}-{month:02d}")

            # Step 1: Active engagements
            engagements = await self.engagement_directory.list_by_status(ACTIVE_ENGAGEMENT_STATUS)

            # Step 2: Reconcile each engagement
            for engagement in engagements:
                if not engagement_covers_month(engagement, year, month):
                    continue

                # Step 2a: Creative Boost billing line
                billing_line = await self.engagement_directory.get_service(engagement.id, self.service_id)
                if not billing_line:
                    continue
                engagements_checked += 1

                # Step 2b: Already synced
                linked_month = await self.client_month_repo.get_by_engagement_service_period(
                    billing_line.id, year, month
                )
                if linked_month:
                    existing += 1
                    continue

                # Step 2c: Link or create
                client_month = await self.client_month_repo.get_by_client_period(
                    engagement.client_id, year, month
                )
                if client_month:
                    if client_month.engagement_service_id:
                        logger.warning(
                            f"Client {engagement.client_id} already has a client month for "
                            f"{year}-{month:02d} linked to billing line "
                            f"{client_month.engagement_service_id}; skipping billing line {billing_line.id}"
                        )
                        continue

                    client_month.engagement_service_id = billing_line.id
                    client_month.engagement_id = engagement.id
                    client_month.updated_at = utcnow()
                    await self.client_month_repo.update(client_month)
                    linked += 1
                    logger.info(
                        f"Linked client month {client_month.id} to billing line {billing_line.id}"
                    )
                else:
                    prev_year, prev_month = previous_period(year, month)
                    previous = await self.client_month_repo.get_by_engagement_service_period(
                        billing_line.id, prev_year, prev_month
                    )

                    if previous:
                        min_credits = previous.min_credits
                        max_credits = previous.max_credits
                        price_per_credit = previous.price_per_credit
                        colleague_id = previous.colleague_id
                    else:
                        min_credits = self._pick(
                            billing_line.creative_boost_min_credits, SYNC_FALLBACK_MIN_CREDITS
                        )
                        max_credits = self._pick(
                            billing_line.creative_boost_max_credits, self.package_defaults.max_credits
                        )
                        price_per_credit = self._pick(
                            billing_line.creative_boost_price_per_credit,
                            self.package_defaults.price_per_credit,
                        )
                        colleague_id = ""

                    client_month = await self.client_month_repo.create(
                        ClientMonth(
                            client_id=engagement.client_id,
                            year=year,
                            month=month,
                            min_credits=min_credits,
                            max_credits=max_credits,
                            price_per_credit=price_per_credit,
                            colleague_id=colleague_id,
                            status=MonthStatus.ACTIVE,
                            engagement_service_id=billing_line.id,
                            engagement_id=engagement.id,
                        )
                    )
                    created += 1
                    logger.info(
                        f"Created client month {client_month.id} for client {engagement.client_id} "
                        f"({year}-{month:02d}, carried_forward={previous is not None})"
                    )

                # Step 2d: Client config
                _, config_created = await get_or_create_client_config(
                    self.client_repo,
                    engagement.client_id,
                    min_credits=client_month.min_credits,
                    max_credits=client_month.max_credits,
                    price_per_credit=client_month.price_per_credit,
                    package_defaults=self.package_defaults,
                )
                if config_created:
                    configs_created += 1

            # Step 3: Commit
            await self.uow.commit()

            execution_time_ms = int((time.time() - start_time) * 1000)
            logger.info(
                f"Engagement sync for {year}-{month:02d} complete: "
                f"{engagements_checked} engagements, {created} created, {linked} linked, "
                f"{existing} existing, {configs_created} configs created in {execution_time_ms}ms"
            )

            return Return.ok(
                SyncResultDTO(
                    year=year,
                    month=month,
                    engagements_checked=engagements_checked,
                    client_months_created=created,
                    client_months_linked=linked,
                    client_months_existing=existing,
                    client_configs_created=configs_created,
                    execution_time_ms=execution_time_ms,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Engagement sync for {year}-{month:02d} failed: {e}")
            return Return.err(
                Error(
                    code="ENGAGEMENT_SYNC_FAILED",
                    message="Failed to sync client months with engagements",
                    reason=str(e),
                )
            )

    @staticmethod
    def _pick(value, fallback: Decimal) -> Decimal:
        return fallback if value is None else value

"""Client Month Summary Use Cases

Projects monthly summaries (used/remaining credits, estimated invoice)
from the ledger, the output log and the output type catalog. Summaries are
recomputed on every read and never stored.
"""

import logging
from decimal import Decimal
from typing import List, Optional, Sequence
from creative_boost.libs.result import Result, Return, Error
from creative_boost.app.repositories.client_month_repository import ClientMonthRepository
from creative_boost.app.repositories.client_month_output_repository import ClientMonthOutputRepository
from creative_boost.app.repositories.output_type_repository import OutputTypeRepository
from creative_boost.app.repositories.directory_repository import ClientDirectoryRepository
from creative_boost.domain.client_month import ClientMonth
from creative_boost.domain.client_month_output import ClientMonthOutput
from creative_boost.domain.credit_calculator import CreditCalculator
from creative_boost.domain.directory import Client
from .calculate_output_credits import load_credit_calculator
from .dtos import ClientMonthSummaryDTO

logger = logging.getLogger(__name__)


def project_client_month_summary(
    client_month: ClientMonth,
    client: Client,
    outputs: Sequence[ClientMonthOutput],
    calculator: CreditCalculator,
) -> ClientMonthSummaryDTO:
    normal_credits = Decimal("0")
    express_credits = Decimal("0")

    for output in outputs:
        credits = calculator.calculate_output_credits(
            output.output_type_id, output.normal_count, output.express_count
        )
        normal_credits += credits.normal_credits
        express_credits += credits.express_credits

    used_credits = normal_credits + express_credits
    max_credits = Decimal(client_month.max_credits)
    price_per_credit = Decimal(client_month.price_per_credit)

    return ClientMonthSummaryDTO(
        client_id=client_month.client_id,
        client_name=client.name,
        brand_name=client.brand_name,
        year=client_month.year,
        month=client_month.month,
        min_credits=client_month.min_credits,
        max_credits=max_credits,
        used_credits=used_credits,
        normal_credits=normal_credits,
        express_credits=express_credits,
        # Negative on overage
        remaining_credits=max_credits - used_credits,
        estimated_invoice=used_credits * price_per_credit,
        price_per_credit=price_per_credit,
        status=client_month.status,
        item_count=len(outputs),
    )


class GetClientMonthSummaries:
    """
    Use Case: Monthly overview of every client on the ledger

    Business Rules:
    1. One summary per client month of the period
    2. Clients missing from the CRM directory are skipped
    3. remaining_credits may be negative (overage is a valid state)
    """

    def __init__(
        self,
        client_month_repo: ClientMonthRepository,
        output_repo: ClientMonthOutputRepository,
        output_type_repo: OutputTypeRepository,
        client_directory: ClientDirectoryRepository,
    ):
        self.client_month_repo = client_month_repo
        self.output_repo = output_repo
        self.output_type_repo = output_type_repo
        self.client_directory = client_directory

    async def execute(self, year: int, month: int) -> Result[List[ClientMonthSummaryDTO]]:
        try:
            client_months = await self.client_month_repo.list_for_period(year, month)
            calculator = await load_credit_calculator(self.output_type_repo)

            summaries: List[ClientMonthSummaryDTO] = []
            for client_month in client_months:
                client = await self.client_directory.get_by_id(client_month.client_id)
                if not client:
                    logger.warning(
                        f"Skipping summary of client month {client_month.id}: "
                        f"client {client_month.client_id} not found"
                    )
                    continue

                outputs = await self.output_repo.list_for_client_period(client_month.client_id, year, month)
                summaries.append(project_client_month_summary(client_month, client, outputs, calculator))

            return Return.ok(summaries)

        except Exception as e:
            logger.error(f"Failed to build client month summaries for {year}-{month:02d}: {e}")
            return Return.err(
                Error(
                    code="SUMMARY_FAILED",
                    message="Failed to build client month summaries",
                    reason=str(e),
                )
            )


class GetClientMonthSummaryByEngagementService:
    """
    Use Case: Summary of the client month linked to a billing line

    Used when the caller knows only the engagement service id. Returns None
    when there is no linked client month or its client cannot be resolved.
    """

    def __init__(
        self,
        client_month_repo: ClientMonthRepository,
        output_repo: ClientMonthOutputRepository,
        output_type_repo: OutputTypeRepository,
        client_directory: ClientDirectoryRepository,
    ):
        self.client_month_repo = client_month_repo
        self.output_repo = output_repo
        self.output_type_repo = output_type_repo
        self.client_directory = client_directory

    async def execute(
        self, engagement_service_id: str, year: int, month: int
    ) -> Result[Optional[ClientMonthSummaryDTO]]:
        try:
            client_month = await self.client_month_repo.get_by_engagement_service_period(
                engagement_service_id, year, month
            )
            if not client_month:
                return Return.ok(None)

            client = await self.client_directory.get_by_id(client_month.client_id)
            if not client:
                return Return.ok(None)

            calculator = await load_credit_calculator(self.output_type_repo)
            outputs = await self.output_repo.list_for_client_period(client_month.client_id, year, month)

            return Return.ok(project_client_month_summary(client_month, client, outputs, calculator))

        except Exception as e:
            logger.error(
                f"Failed to build summary for engagement service {engagement_service_id} "
                f"in {year}-{month:02d}: {e}"
            )
            return Return.err(
                Error(
                    code="SUMMARY_FAILED",
                    message="Failed to build client month summary",
                    reason=str(e),
                )
            )

"""Colleague Credit Use Cases

Rolls up credits produced by a colleague for compensation displays.
"""

from decimal import Decimal
from typing import Dict, List, Optional
from creative_boost.libs.result import Result, Return
from creative_boost.app.repositories.client_month_output_repository import ClientMonthOutputRepository
from creative_boost.app.repositories.output_type_repository import OutputTypeRepository
from creative_boost.app.repositories.directory_repository import ClientDirectoryRepository
from .calculate_output_credits import load_credit_calculator
from .dtos import ColleagueCreditsDTO, ColleagueCreditDetailDTO, ColleagueClientCreditsDTO

UNKNOWN_CLIENT = "Unknown client"
UNKNOWN_OUTPUT_TYPE = "Unknown type"

DEFAULT_REWARD_PER_CREDIT = Decimal("80")


class GetColleagueCredits:
    """
    Use Case: Total credits of a colleague for one month

    Sums total_credits over every output row attributed to the colleague.
    """

    def __init__(self, output_repo: ClientMonthOutputRepository, output_type_repo: OutputTypeRepository):
        self.output_repo = output_repo
        self.output_type_repo = output_type_repo

    async def execute(self, colleague_id: str, year: int, month: int) -> Result[ColleagueCreditsDTO]:
        outputs = await self.output_repo.list_for_colleague(colleague_id, year=year, month=month)
        calculator = await load_credit_calculator(self.output_type_repo)

        total = sum(
            (
                calculator.calculate_output_credits(o.output_type_id, o.normal_count, o.express_count).total_credits
                for o in outputs
            ),
            Decimal("0"),
        )
        return Return.ok(ColleagueCreditsDTO(colleague_id=colleague_id, year=year, month=month, total_credits=total))


class GetColleagueCreditsYear:
    """Use Case: Total credits of a colleague across a whole year"""

    def __init__(self, output_repo: ClientMonthOutputRepository, output_type_repo: OutputTypeRepository):
        self.output_repo = output_repo
        self.output_type_repo = output_type_repo

    async def execute(self, colleague_id: str, year: int) -> Result[ColleagueCreditsDTO]:
        outputs = await self.output_repo.list_for_colleague(colleague_id, year=year)
        calculator = await load_credit_calculator(self.output_type_repo)

        total = sum(
            (
                calculator.calculate_output_credits(o.output_type_id, o.normal_count, o.express_count).total_credits
                for o in outputs
            ),
            Decimal("0"),
        )
        return Return.ok(ColleagueCreditsDTO(colleague_id=colleague_id, year=year, month=None, total_credits=total))


class GetColleagueCreditsDetail:
    """
    Use Case: Itemized credits of a colleague

    One row per output row, not aggregated. Client and output type names
    that cannot be resolved degrade to a placeholder.
    """

    def __init__(
        self,
        output_repo: ClientMonthOutputRepository,
        output_type_repo: OutputTypeRepository,
        client_directory: ClientDirectoryRepository,
    ):
        self.output_repo = output_repo
        self.output_type_repo = output_type_repo
        self.client_directory = client_directory

    async def execute(
        self, colleague_id: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> Result[List[ColleagueCreditDetailDTO]]:
        outputs = await self.output_repo.list_for_colleague(colleague_id, year=year, month=month)
        output_types = {t.id: t for t in await self.output_type_repo.list_all(active_only=False)}
        calculator = await load_credit_calculator(self.output_type_repo)

        details: List[ColleagueCreditDetailDTO] = []
        for output in outputs:
            client = await self.client_directory.get_by_id(output.client_id)
            output_type = output_types.get(output.output_type_id)
            credits = calculator.calculate_output_credits(
                output.output_type_id, output.normal_count, output.express_count
            )

            details.append(
                ColleagueCreditDetailDTO(
                    client_id=output.client_id,
                    client_name=client.brand_name if client is not None else UNKNOWN_CLIENT,
                    output_type_id=output.output_type_id,
                    output_type_name=output_type.name if output_type else UNKNOWN_OUTPUT_TYPE,
                    year=output.year,
                    month=output.month,
                    normal_count=output.normal_count,
                    express_count=output.express_count,
                    normal_credits=credits.normal_credits,
                    express_credits=credits.express_credits,
                    total_credits=credits.total_credits,
                )
            )

        return Return.ok(details)


class GetColleagueCreditsByClient:
    """
    Use Case: Credits of a colleague per client, converted to a reward

    total_reward = total_credits * reward_per_credit, where the reward per
    credit can be overridden per client and otherwise uses the default.
    """

    def __init__(
        self,
        output_repo: ClientMonthOutputRepository,
        output_type_repo: OutputTypeRepository,
        client_directory: ClientDirectoryRepository,
        default_reward_per_credit: Decimal = DEFAULT_REWARD_PER_CREDIT,
        reward_overrides: Optional[Dict[str, Decimal]] = None,
    ):
        self.output_repo = output_repo
        self.output_type_repo = output_type_repo
        self.client_directory = client_directory
        self.default_reward_per_credit = default_reward_per_credit
        self.reward_overrides = reward_overrides or {}

    async def execute(self, colleague_id: str, year: int, month: int) -> Result[List[ColleagueClientCreditsDTO]]:
        outputs = await self.output_repo.list_for_colleague(colleague_id, year=year, month=month)
        calculator = await load_credit_calculator(self.output_type_repo)

        credits_by_client: Dict[str, Decimal] = {}
        for output in outputs:
            credits = calculator.calculate_output_credits(
                output.output_type_id, output.normal_count, output.express_count
            )
            credits_by_client[output.client_id] = (
                credits_by_client.get(output.client_id, Decimal("0")) + credits.total_credits
            )

        rows: List[ColleagueClientCreditsDTO] = []
        for client_id, total_credits in credits_by_client.items():
            client = await self.client_directory.get_by_id(client_id)
            reward_per_credit = self.reward_overrides.get(client_id, self.default_reward_per_credit)

            rows.append(
                ColleagueClientCreditsDTO(
                    client_id=client_id,
                    client_name=client.brand_name if client is not None else UNKNOWN_CLIENT,
                    total_credits=total_credits,
                    reward_per_credit=reward_per_credit,
                    total_reward=total_credits * reward_per_credit,
                )
            )

        return Return.ok(rows)

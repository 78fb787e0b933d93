"""
Calculate Output Credits Use Case

Converts production counts of one output type into credits without
touching any ledger.
"""
from creative_boost.libs.result import Result, Return
from creative_boost.app.repositories.output_type_repository import OutputTypeRepository
from creative_boost.domain.credit_calculator import CreditCalculator
from .dtos import CalculateCreditsCommandDTO, OutputCreditsDTO


async def load_credit_calculator(output_type_repo: OutputTypeRepository) -> CreditCalculator:
    """
    Snapshot the whole catalog, inactive types included, so outputs logged
    before a type was deactivated keep their price.
    """
    output_types = await output_type_repo.list_all(active_only=False)
    return CreditCalculator(output_types)


class CalculateOutputCredits:
    """
    Use case: Credit calculation preview

    normal = normal_count * base_credits
    express = express_count * base_credits * 1.5
    Unknown output types cost 0 credits.
    """

    def __init__(self, output_type_repo: OutputTypeRepository):
        self.output_type_repo = output_type_repo

    async def execute(self, command: CalculateCreditsCommandDTO) -> Result[OutputCreditsDTO]:
        calculator = await load_credit_calculator(self.output_type_repo)
        credits = calculator.calculate_output_credits(
            command.output_type_id, command.normal_count, command.express_count
        )

        return Return.ok(
            OutputCreditsDTO(
                normal_credits=credits.normal_credits,
                express_credits=credits.express_credits,
                total_credits=credits.total_credits,
            )
        )

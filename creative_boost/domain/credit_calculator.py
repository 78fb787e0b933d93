"""Credit Calculator

Converts production counts into credits using the output type catalog.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional
from creative_boost.domain.output_type import OutputType

# Rush deliverables cost 50% more
EXPRESS_MULTIPLIER = Decimal("1.5")


@dataclass(frozen=True)
class OutputCredits:
    normal_credits: Decimal
    express_credits: Decimal
    total_credits: Decimal


class CreditCalculator:
    """
    Pure credit calculation over a snapshot of the output type catalog.

    Unknown output types cost 0 credits, so outputs that reference a
    removed or misspelled type never break a summary.
    """

    def __init__(self, output_types: Iterable[OutputType]):
        self.base_credits: dict[str, Decimal] = {
            output_type.id: Decimal(output_type.base_credits) for output_type in output_types
        }

    def get_base_credits(self, output_type_id: str) -> Decimal:
        return self.base_credits.get(output_type_id, Decimal("0"))

    def calculate_output_credits(
        self,
        output_type_id: Optional[str],
        normal_count: int,
        express_count: int,
    ) -> OutputCredits:
        base = self.get_base_credits(output_type_id) if output_type_id else Decimal("0")

        normal_credits = Decimal(normal_count or 0) * base
        express_credits = Decimal(express_count or 0) * base * EXPRESS_MULTIPLIER

        return OutputCredits(
            normal_credits=normal_credits,
            express_credits=express_credits,
            total_credits=normal_credits + express_credits,
        )

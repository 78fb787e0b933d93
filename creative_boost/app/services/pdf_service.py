"""PDF Generation Service Interface

Defines the contract for rendering monthly credit statements.
"""

from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from creative_boost.app.use_cases.creative_boost.dtos import ClientMonthSummaryDTO, StatementLineDTO


class StatementPdfService(ABC):
    """
    Service interface for PDF generation

    Renders a client's monthly Creative Boost statement.
    """

    @abstractmethod
    def generate_month_statement(
        self,
        summary: "ClientMonthSummaryDTO",
        lines: List["StatementLineDTO"],
        company_name: str = "Creative Boost",
        company_address: str = "",
    ) -> bytes:
        """
        Generate a monthly credit statement PDF

        Args:
            summary: Projected month summary (credits, remaining, estimated invoice)
            lines: Per-output-type breakdown
            company_name: Company name to display on the statement
            company_address: Company address to display on the statement

        Returns:
            PDF document as bytes
        """
        pass

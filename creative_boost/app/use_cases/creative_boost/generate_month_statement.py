"""GenerateMonthStatement Use Case

Renders a client's monthly Creative Boost statement as a PDF.
"""

import base64
from creative_boost.domain.base import utcnow
from typing import Optional
from creative_boost.libs.result import Result, Return, Error
from creative_boost.app.repositories.client_month_repository import ClientMonthRepository
from creative_boost.app.repositories.client_month_output_repository import ClientMonthOutputRepository
from creative_boost.app.repositories.output_type_repository import OutputTypeRepository
from creative_boost.app.repositories.directory_repository import ClientDirectoryRepository
from creative_boost.app.services.pdf_service import StatementPdfService
from creative_boost.domain.credit_calculator import CreditCalculator
from .get_client_month_summaries import project_client_month_summary
from .get_colleague_credits import UNKNOWN_OUTPUT_TYPE
from .dtos import MonthStatementResponseDTO, StatementLineDTO


class GenerateMonthStatement:
    """
    Use Case: Monthly statement PDF

    Business Rules:
    1. The client month and its CRM client must exist, otherwise None
    2. The statement shows the same figures as the month summary
    3. One line per output row, named after its output type
    4. Returns the PDF as a base64-encoded string

    Flow:
    1. Retrieve client month and client
    2. Retrieve output rows and the output type catalog
    3. Project summary and lines
    4. Generate PDF using PDF service
    """

    def __init__(
        self,
        client_month_repo: ClientMonthRepository,
        output_repo: ClientMonthOutputRepository,
        output_type_repo: OutputTypeRepository,
        client_directory: ClientDirectoryRepository,
        pdf_service: StatementPdfService,
        company_name: str = "Creative Boost",
        company_address: str = "",
    ):
        self.client_month_repo = client_month_repo
        self.output_repo = output_repo
        self.output_type_repo = output_type_repo
        self.client_directory = client_directory
        self.pdf_service = pdf_service
        self.company_name = company_name
        self.company_address = company_address

    async def execute(self, client_id: str, year: int, month: int) -> Result[Optional[MonthStatementResponseDTO]]:
        try:
            # Step 1: Client month and client
            client_month = await self.client_month_repo.get_by_client_period(client_id, year, month)
            if not client_month:
                return Return.ok(None)

            client = await self.client_directory.get_by_id(client_id)
            if not client:
                return Return.ok(None)

            # Step 2: Outputs and catalog
            outputs = await self.output_repo.list_for_client_period(client_id, year, month)
            output_types = await self.output_type_repo.list_all(active_only=False)
            names = {t.id: t.name for t in output_types}
            calculator = CreditCalculator(output_types)

            # Step 3: Summary and lines
            summary = project_client_month_summary(client_month, client, outputs, calculator)

            lines = []
            for output in outputs:
                credits = calculator.calculate_output_credits(
                    output.output_type_id, output.normal_count, output.express_count
                )
                lines.append(
                    StatementLineDTO(
                        output_type_id=output.output_type_id,
                        output_type_name=names.get(output.output_type_id, UNKNOWN_OUTPUT_TYPE),
                        normal_count=output.normal_count,
                        express_count=output.express_count,
                        base_credits=calculator.get_base_credits(output.output_type_id),
                        normal_credits=credits.normal_credits,
                        express_credits=credits.express_credits,
                        total_credits=credits.total_credits,
                    )
                )
            lines.sort(key=lambda line: line.output_type_name)

            # Step 4: PDF
            pdf_bytes = self.pdf_service.generate_month_statement(
                summary=summary,
                lines=lines,
                company_name=self.company_name,
                company_address=self.company_address,
            )
            pdf_base64 = base64.b64encode(pdf_bytes).decode("utf-8")

            return Return.ok(
                MonthStatementResponseDTO(
                    summary=summary,
                    lines=lines,
                    pdf_base64=pdf_base64,
                    generated_at=utcnow(),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GENERATE_STATEMENT_FAILED",
                    message="Failed to generate monthly statement",
                    reason=str(e),
                )
            )

"""ReportLab Statement PDF Service

Renders monthly Creative Boost statements with ReportLab.
"""

from calendar import month_name
from decimal import Decimal
from io import BytesIO
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from creative_boost.app.services.pdf_service import StatementPdfService
from creative_boost.app.use_cases.creative_boost.dtos import ClientMonthSummaryDTO, StatementLineDTO

PRIMARY_COLOR = colors.HexColor("#2C3E50")
MUTED_COLOR = colors.HexColor("#7F8C8D")
OVERAGE_COLOR = colors.HexColor("#E74C3C")
GRID_COLOR = colors.HexColor("#D5DBDB")
STRIPE_COLOR = colors.HexColor("#F4F6F6")


def format_credits(value: Decimal) -> str:
    """Up to 2 decimals, trailing zeros dropped (e.g. 1.5, 12)"""
    text = f"{Decimal(value):,.2f}"
    return text.rstrip("0").rstrip(".") if "." in text else text


def format_money(value: Decimal) -> str:
    return f"{Decimal(value):,.2f}"


class ReportLabStatementPdfService(StatementPdfService):
    """
    ReportLab implementation of StatementPdfService

    Layout: company header, period and client block, credit overview,
    per-output-type breakdown and the estimated invoice total.
    """

    def generate_month_statement(
        self,
        summary: ClientMonthSummaryDTO,
        lines: List[StatementLineDTO],
        company_name: str = "Creative Boost",
        company_address: str = "",
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=10,
            textColor=PRIMARY_COLOR,
        )
        subtitle_style = ParagraphStyle(
            "SubtitleStyle",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=PRIMARY_COLOR,
            spaceAfter=16,
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=MUTED_COLOR,
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )

        # Header
        elements.append(Paragraph(company_name, title_style))
        if company_address:
            elements.append(Paragraph(company_address, header_style))
        elements.append(Spacer(1, 8 * mm))
        elements.append(
            Paragraph(f"CREDIT STATEMENT {month_name[summary.month].upper()} {summary.year}", subtitle_style)
        )

        # Client block
        elements.append(Paragraph("Client:", bold_style))
        elements.append(Paragraph(summary.brand_name or summary.client_name, styles["Normal"]))
        if summary.brand_name and summary.brand_name != summary.client_name:
            elements.append(Paragraph(summary.client_name, header_style))
        elements.append(Spacer(1, 8 * mm))

        # Credit overview
        overview = [
            ["Minimum credits:", format_credits(summary.min_credits)],
            ["Maximum credits:", format_credits(summary.max_credits)],
            ["Used credits:", format_credits(summary.used_credits)],
            ["  of which normal:", format_credits(summary.normal_credits)],
            ["  of which express:", format_credits(summary.express_credits)],
            ["Remaining credits:", format_credits(summary.remaining_credits)],
            ["Price per credit:", format_money(summary.price_per_credit)],
            ["Status:", summary.status.value.upper()],
        ]
        overview_table = Table(overview, colWidths=[45 * mm, 60 * mm])
        overview_style = [
            ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("TEXTCOLOR", (0, 0), (0, -1), MUTED_COLOR),
            ("ALIGN", (1, 0), (1, -1), "RIGHT"),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
        if summary.remaining_credits < 0:
            overview_style.append(("TEXTCOLOR", (1, 5), (1, 5), OVERAGE_COLOR))
        overview_table.setStyle(TableStyle(overview_style))

        elements.append(overview_table)
        elements.append(Spacer(1, 10 * mm))

        # Breakdown
        line_data = [["Output type", "Normal", "Express", "Base", "Credits"]]
        for line in lines:
            line_data.append(
                [
                    line.output_type_name,
                    str(line.normal_count),
                    str(line.express_count),
                    format_credits(line.base_credits),
                    format_credits(line.total_credits),
                ]
            )
        if not lines:
            line_data.append(["No outputs logged this month", "", "", "", "0"])

        col_widths = [70 * mm, 22 * mm, 22 * mm, 25 * mm, 31 * mm]
        line_table = Table(line_data, colWidths=col_widths)
        line_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), PRIMARY_COLOR),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("LINEBELOW", (0, 0), (-1, -1), 0.25, GRID_COLOR),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, STRIPE_COLOR],
                    ),
                ]
            )
        )

        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Total
        total_data = [
            ["", "", "", "Total credits:", format_credits(summary.used_credits)],
            ["", "", "", "Estimated:", format_money(summary.estimated_invoice)],
        ]
        total_table = Table(total_data, colWidths=col_widths)
        total_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (3, 0), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 11),
                    ("ALIGN", (3, 0), (-1, -1), "RIGHT"),
                    ("LINEABOVE", (3, 0), (-1, 0), 1.5, PRIMARY_COLOR),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                ]
            )
        )

        elements.append(total_table)
        elements.append(Spacer(1, 15 * mm))

        elements.append(
            Paragraph(
                "<i>Express deliveries are charged at 1.5x the base credits. "
                "The estimated amount is based on used credits and is not an invoice.</i>",
                ParagraphStyle(
                    "FooterNote",
                    parent=styles["Normal"],
                    fontSize=9,
                    textColor=colors.HexColor("#95A5A6"),
                ),
            )
        )

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

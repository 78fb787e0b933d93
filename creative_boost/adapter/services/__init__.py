from .unit_of_work import SqlAlchemyUnitOfWork
from .pdf_service import ReportLabStatementPdfService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ReportLabStatementPdfService",
]

from .unit_of_work import UnitOfWork
from .pdf_service import StatementPdfService

__all__ = [
    "UnitOfWork",
    "StatementPdfService",
]

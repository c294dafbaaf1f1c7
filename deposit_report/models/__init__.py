from .deposit import DepositStatus, ReportedDeposit
from .page import DepositPage
from .filter import FILTER_FIELDS, ReportFilter
from .export import ExportResult

__all__ = [
    "DepositStatus",
    "ReportedDeposit",
    "DepositPage",
    "FILTER_FIELDS",
    "ReportFilter",
    "ExportResult",
]

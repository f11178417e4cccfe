"""Report use cases."""

from .dismiss_report import (
    DismissReportRequest,
    DismissReportResponse,
    DismissReportUseCase,
)
from .file_report import FileReportRequest, FileReportUseCase, ReportItem
from .list_reports import ListReportsRequest, ListReportsResponse, ListReportsUseCase
from .update_report_status import UpdateReportStatusRequest, UpdateReportStatusUseCase

__all__ = [
    "ReportItem",
    "DismissReportRequest",
    "DismissReportResponse",
    "DismissReportUseCase",
    "FileReportRequest",
    "FileReportUseCase",
    "ListReportsRequest",
    "ListReportsResponse",
    "ListReportsUseCase",
    "UpdateReportStatusRequest",
    "UpdateReportStatusUseCase",
]

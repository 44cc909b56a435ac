"""Report rendering services."""

from .report_service import TextReportSink, JsonReportSink

__all__ = ["TextReportSink", "JsonReportSink"]

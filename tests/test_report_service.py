"""
Tests for text and JSON report rendering.
"""
import io
import json
from dupes.services.report_service import TextReportSink, JsonReportSink
from dupes.core.models import ReportEntry, ReportKind


def _entries():
    return [
        ReportEntry(ReportKind.UNIQUE, 1, "", ("/u",)),
        ReportEntry(ReportKind.DUPLICATE, 2, "AA", ("/d2", "/d1")),
        ReportEntry(ReportKind.DUPLICATE, 2, "BB", ("/d3",)),
        ReportEntry(ReportKind.AVOIDED, 99, "", ("/big2", "/big1")),
    ]


class TestTextReportSink:

    def test_layout(self):
        out = io.StringIO()
        sink = TextReportSink(out)
        for entry in _entries():
            sink.add(entry)
        sink.finish()

        assert out.getvalue().splitlines() == [
            "1",
            "  /u",
            "2",
            "  AA",
            "    /d1",
            "    /d2",
            "  BB",
            "    /d3",
            "99 (avoiding disambiguation)",
            "  /big1",
            "  /big2",
        ]
        assert sink.entries_written == 4

    def test_read_error_inline_under_its_size(self):
        out = io.StringIO()
        sink = TextReportSink(out)
        sink.file_error(5, "/locked", PermissionError(13, "Permission denied"))
        sink.add(ReportEntry(ReportKind.DUPLICATE, 5, "CC", ("/x", "/y")))

        assert out.getvalue().splitlines() == [
            "5",
            "  PermissionError error reading file /locked",
            "  CC",
            "    /x",
            "    /y",
        ]

    def test_nothing_written_without_entries(self):
        out = io.StringIO()
        sink = TextReportSink(out)
        sink.finish()
        assert out.getvalue() == ""


class TestJsonReportSink:

    def test_single_document_on_finish(self):
        out = io.StringIO()
        sink = JsonReportSink(out)
        for entry in _entries():
            sink.add(entry)

        assert out.getvalue() == ""
        sink.finish()

        assert json.loads(out.getvalue()) == [
            ["", 1, ["/u"]],
            ["AA", 2, ["/d1", "/d2"]],
            ["BB", 2, ["/d3"]],
            ["(avoiding disambiguation)", 99, ["/big1", "/big2"]],
        ]

    def test_empty_result_is_empty_array(self):
        out = io.StringIO()
        sink = JsonReportSink(out)
        sink.finish()
        assert json.loads(out.getvalue()) == []

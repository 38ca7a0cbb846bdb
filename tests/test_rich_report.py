"""Tests for ui.rich_report."""

import io

import pytest
from rich.console import Console

from i18n import set_locale
from locfile.encoding import EncodingVerdict
from locfile.line_parser import MalformedReason
from locfile.map_builder import ParseWarning
from locfile.scanner import ByteSequenceIssue, FlaggedCharacter, ScanReport
from locfile.substitution import TranslationStats
from ui.rich_report import RichReporter


@pytest.fixture
def reporter():
    set_locale("en_US")
    console = Console(file=io.StringIO(), width=120, color_system=None, highlight=False)
    return RichReporter(console=console)


def output(reporter):
    return reporter.console.file.getvalue()


def test_markup_in_content_is_escaped(reporter):
    reporter.info("key=[bold]value[/bold]")
    assert "key=[bold]value[/bold]" in output(reporter)


def test_show_stats(reporter):
    reporter.show_stats(TranslationStats(total=5, translated=2, unchanged=2, skipped=1, not_found=1))
    text = output(reporter)
    assert "Translation statistics" in text
    assert "Lines translated" in text
    assert "5" in text


def test_show_warnings(reporter):
    reporter.show_warnings([ParseWarning(7, MalformedReason.NO_SEPARATOR, "broken line")])
    text = output(reporter)
    assert "7" in text
    assert "broken line" in text
    assert "no '=' separator" in text


def test_show_warnings_empty_prints_nothing(reporter):
    reporter.show_warnings([])
    assert output(reporter) == ""


def test_truncation(reporter):
    reporter.max_rows = 2
    warnings = [ParseWarning(i, MalformedReason.EMPTY_KEY, f"=v{i}") for i in range(1, 6)]
    reporter.show_warnings(warnings)
    text = output(reporter)
    assert "=v2" in text
    assert "=v3" not in text
    assert "... 3 more" in text


class TestScanReport:
    def test_utf8_with_findings(self, reporter):
        report = ScanReport(
            EncodingVerdict.UTF8,
            flagged=[FlaggedCharacter(1, "国", "Country=国家", "國")],
        )
        reporter.show_scan_report(report)
        text = output(reporter)
        assert "U+56FD" in text
        assert "Country=国家" in text
        assert "Found 1 Simplified characters" in text

    def test_utf8_clean(self, reporter):
        reporter.show_scan_report(ScanReport(EncodingVerdict.UTF8))
        assert "Found" not in output(reporter)

    def test_big5(self, reporter):
        reporter.show_scan_report(
            ScanReport(EncodingVerdict.TRADITIONAL_BYTE_ENCODING, character_count=42)
        )
        text = output(reporter)
        assert "BIG5 (Traditional)" in text
        assert "Total characters: 42" in text

    def test_gbk(self, reporter):
        report = ScanReport(
            EncodingVerdict.SIMPLIFIED_BYTE_ENCODING,
            flagged=[FlaggedCharacter(2, "家", "k=家"), FlaggedCharacter(2, "门", "家门", "門")],
        )
        reporter.show_scan_report(report)
        assert "Found 2 Simplified characters" in output(reporter)

    def test_unknown_with_byte_issues(self, reporter):
        report = ScanReport(
            EncodingVerdict.UNKNOWN,
            byte_issues=[ByteSequenceIssue(3, 17, 0xB0, 0xA1)],
        )
        reporter.show_scan_report(report)
        text = output(reporter)
        assert "B0 A1" in text
        assert "17" in text
        assert "Found 1 potential Simplified Chinese byte sequences" in text

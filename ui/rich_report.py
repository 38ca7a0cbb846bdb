# -*- coding: utf-8 -*-
"""
Rich report module
Renders extraction warnings, translation statistics and scan results
with the 'rich' library.
"""

from typing import List, Optional, TYPE_CHECKING

from rich.box import DOUBLE, ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from i18n import reason_text, t as _t, verdict_name
from locfile.encoding import EncodingVerdict

if TYPE_CHECKING:
    from locfile.map_builder import ParseWarning
    from locfile.scanner import ScanReport
    from locfile.substitution import TranslationStats


class RichReporter:
    """
    Console reporter shared by the command line tools.
    Only formats data produced by the core; never decides anything.
    """

    def __init__(self, console: Optional[Console] = None, max_rows: int = 500):
        self.console = console or Console(highlight=False)
        self.max_rows = max_rows  # Tables longer than this are truncated

    # --- Plain messages ---

    def title(self, text: str) -> None:
        self.console.print(Panel(escape(text), style="bold cyan", box=DOUBLE))

    def info(self, text: str) -> None:
        self.console.print(escape(text))

    def success(self, text: str) -> None:
        self.console.print(f"[green]{escape(text)}[/green]")

    def warning(self, text: str) -> None:
        self.console.print(f"[yellow]{escape(text)}[/yellow]")

    def error(self, text: str) -> None:
        self.console.print(f"[bold red]{escape(text)}[/bold red]")

    def blank(self) -> None:
        self.console.print()

    # --- Tables ---

    def _truncation_note(self, total: int) -> None:
        if total > self.max_rows:
            self.console.print(f"[dim]... {total - self.max_rows} more[/dim]")

    def show_warnings(self, warnings: List['ParseWarning']) -> None:
        """Table of malformed lines found while extracting."""
        if not warnings:
            return

        table = Table(title=_t("warnings.title"), box=ROUNDED, title_style="bold yellow")
        table.add_column(_t("col.line"), justify="right", style="cyan")
        table.add_column(_t("col.reason"), style="yellow")
        table.add_column(_t("col.content"))

        for warning in warnings[:self.max_rows]:
            table.add_row(
                str(warning.line_number),
                escape(reason_text(warning.reason)),
                escape(warning.content),
            )

        self.console.print(table)
        self._truncation_note(len(warnings))

    def show_stats(self, stats: 'TranslationStats') -> None:
        table = Table(title=_t("stats.title"), box=ROUNDED, show_header=False)
        table.add_column("Name", style="cyan")
        table.add_column("Count", justify="right", style="green")

        table.add_row(_t("stats.total"), str(stats.total))
        table.add_row(_t("stats.translated"), str(stats.translated))
        table.add_row(_t("stats.unchanged"), str(stats.unchanged))
        table.add_row(_t("stats.skipped"), str(stats.skipped))
        table.add_row(_t("stats.not_found"), str(stats.not_found))

        self.console.print(table)

    def show_flagged(self, report: 'ScanReport') -> None:
        table = Table(title=_t("scan.table_title"), box=ROUNDED)
        table.add_column(_t("col.line"), justify="right", style="cyan")
        table.add_column(_t("col.char"), style="bold red")
        table.add_column(_t("col.code"), style="magenta")
        table.add_column(_t("col.traditional"), style="green")
        table.add_column(_t("col.context"))

        for item in report.flagged[:self.max_rows]:
            table.add_row(
                str(item.line_number),
                escape(item.char),
                item.code_label,
                escape(item.traditional or ""),
                escape(item.context),
            )

        self.console.print(table)
        self._truncation_note(len(report.flagged))

    def show_byte_issues(self, report: 'ScanReport') -> None:
        table = Table(title=_t("scan.bytes_title"), box=ROUNDED)
        table.add_column(_t("col.line"), justify="right", style="cyan")
        table.add_column(_t("col.offset"), justify="right")
        table.add_column(_t("col.bytes"), style="magenta")
        table.add_column(_t("col.issue"), style="yellow")

        for issue in report.byte_issues[:self.max_rows]:
            table.add_row(
                str(issue.line_number),
                str(issue.offset),
                issue.hex,
                _t("scan.issue_gbk"),
            )

        self.console.print(table)
        self._truncation_note(len(report.byte_issues))

    def show_scan_report(self, report: 'ScanReport') -> None:
        """Full scan output, worded according to the encoding verdict."""
        self.info(_t("scan.verdict", name=verdict_name(report.verdict.value)))
        self.blank()

        if report.verdict is EncodingVerdict.SIMPLIFIED_BYTE_ENCODING:
            self.warning(_t("scan.gbk_warning"))
            self.info(_t("scan.gbk_hint"))
            self.blank()
            if report.flagged:
                self.show_flagged(report)
            self.warning(_t("scan.found", count=len(report.flagged)))

        elif report.verdict is EncodingVerdict.UTF8:
            self.info(_t("scan.utf8_scanning"))
            if report.flagged:
                self.show_flagged(report)
                self.warning(_t("scan.found", count=len(report.flagged)))
            else:
                self.success(_t("scan.none_found"))
                self.info(_t("scan.limited_note"))

        elif report.verdict is EncodingVerdict.TRADITIONAL_BYTE_ENCODING:
            self.success(_t("scan.big5_ok"))
            self.info(_t("scan.big5_chars", count=report.character_count))

        else:
            self.warning(_t("scan.unknown"))
            if report.byte_issues:
                self.show_byte_issues(report)
                self.warning(_t("scan.issues_found", count=len(report.byte_issues)))
            else:
                self.success(_t("scan.no_issues"))

"""简体中文字符扫描工具
判定文件整体编码，并列出简体字符或可疑字节序列

用法:
    python -m tools.find_simplified [path]

发现简体字符属于扫描结果而非错误，退出码仍为 0。
"""

from __future__ import annotations

import argparse
import logging
import sys

from i18n import t as _t
from locfile.config import ToolConfig
from locfile.scanner import ScanReport, scan_file
from tools.cli_common import EXIT_OK, add_common_arguments, prepare, run_guarded
from ui.rich_report import RichReporter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="扫描文件中的简体中文字符")
    parser.add_argument("path", nargs="?", default=None, help="要扫描的文件")
    add_common_arguments(parser)
    return parser


def run_scan(path: str, config: ToolConfig, reporter: RichReporter) -> ScanReport:
    reporter.title(_t("scan.title"))
    reporter.info(_t("scan.file", path=path))
    reporter.blank()

    report = scan_file(
        path,
        table=config.resolve_simplified_table(),
        context_width=config.context_width,
        prefer_utf8=config.prefer_utf8,
    )
    reporter.show_scan_report(report)
    return report


def main(argv: list[str] | None = None, config: ToolConfig | None = None,
         reporter: RichReporter | None = None) -> int:
    """程序入口"""
    args = build_parser().parse_args(argv)
    reporter = reporter or RichReporter()

    def body() -> int:
        cfg = prepare(args, config)
        run_scan(args.path or cfg.source_file, cfg, reporter)
        return EXIT_OK

    return run_guarded(body, reporter)


if __name__ == "__main__":
    sys.exit(main())

"""INI 键值提取工具
读取源 INI 文件，把所有 ``key=value`` 写成翻译映射文件

用法:
    python -m tools.extract_map [source] [--output PATH] [--format json|text]
"""

from __future__ import annotations

import argparse
import logging
import sys

from i18n import t as _t
from locfile.config import ToolConfig
from locfile.map_builder import extract_from_file
from locfile.map_store import save_map_json, save_map_text
from tools.cli_common import EXIT_OK, add_common_arguments, prepare, run_guarded
from ui.rich_report import RichReporter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="从 INI 文件提取键值对")
    parser.add_argument("source", nargs="?", default=None, help="源 INI 文件")
    parser.add_argument("-o", "--output", default=None, help="映射输出文件")
    parser.add_argument(
        "--format", choices=["json", "text"], default="json", help="输出格式 (默认: json)"
    )
    add_common_arguments(parser)
    return parser


def run_extract(
    source: str,
    output: str,
    fmt: str,
    reporter: RichReporter,
    encoding: str = "utf-8",
) -> int:
    reporter.title(_t("extract.title"))
    reporter.info(_t("extract.reading", path=source))

    result = extract_from_file(source, encoding=encoding)
    reporter.show_warnings(result.warnings)
    reporter.info(_t("extract.done", count=len(result)))
    if result.duplicates:
        reporter.warning(_t("extract.duplicates", count=result.duplicates))

    if fmt == "text":
        save_map_text(output, result.mapping)
    else:
        save_map_json(output, result.mapping)
    reporter.success(_t("extract.written", path=output))

    reporter.blank()
    reporter.info(_t("extract.complete"))
    return EXIT_OK


def main(argv: list[str] | None = None, config: ToolConfig | None = None,
         reporter: RichReporter | None = None) -> int:
    """程序入口"""
    args = build_parser().parse_args(argv)
    reporter = reporter or RichReporter()

    def body() -> int:
        cfg = prepare(args, config)
        return run_extract(
            args.source or cfg.source_file,
            args.output or cfg.map_output_file,
            args.format,
            reporter,
            encoding=cfg.file_encoding,
        )

    return run_guarded(body, reporter)


if __name__ == "__main__":
    sys.exit(main())

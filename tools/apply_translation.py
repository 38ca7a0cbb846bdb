"""翻译处理工具

流程:
1. 加载翻译映射
2. 把上一次的输出文件移到备份路径（失败只告警）
3. 把源文件复制到输出路径
4. 就地翻译输出文件（原子替换）

用法:
    python -m tools.apply_translation [source] [--map PATH] [--output PATH] [--backup PATH]
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from i18n import t as _t
from locfile.config import ToolConfig
from locfile.exceptions import BackupError, SourceReadError
from locfile.fileops import backup_file, copy_file
from locfile.map_store import load_map
from locfile.substitution import TranslationStats, translate_file
from tools.cli_common import EXIT_OK, add_common_arguments, prepare, run_guarded
from ui.rich_report import RichReporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessPaths:
    source: str
    translation_map: str
    output: str
    backup: str


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="把翻译映射应用到 INI 文件")
    parser.add_argument("source", nargs="?", default=None, help="源 INI 文件")
    parser.add_argument("--map", dest="translation_map", default=None, help="翻译映射 JSON")
    parser.add_argument("-o", "--output", default=None, help="输出文件")
    parser.add_argument("--backup", default=None, help="旧输出文件的备份路径")
    add_common_arguments(parser)
    return parser


def run_process(paths: ProcessPaths, reporter: RichReporter, encoding: str = "utf-8") -> TranslationStats:
    reporter.title(_t("apply.title"))

    # 映射和源文件都确认可用后才动输出文件
    mapping = load_map(paths.translation_map)
    reporter.success(_t("apply.loaded", count=len(mapping), path=paths.translation_map))
    if not Path(paths.source).is_file():
        raise SourceReadError(file_path=paths.source, reason="file does not exist")

    try:
        backup_file(paths.output, paths.backup)
    except BackupError as e:
        logger.warning("Could not backup file: %s (continuing anyway)", e)
        reporter.warning(_t("apply.backup_skip", error=e.reason or e))
    else:
        reporter.success(_t("apply.backup_ok", src=paths.output, dst=paths.backup))

    copy_file(paths.source, paths.output)
    reporter.success(_t("apply.copied", src=paths.source, dst=paths.output))

    stats = translate_file(paths.output, mapping, encoding=encoding)
    reporter.success(_t("apply.translated", path=paths.output))
    reporter.blank()

    reporter.info(_t("apply.complete"))
    reporter.show_stats(stats)
    reporter.info(_t("apply.output", path=paths.output))
    reporter.info(_t("apply.backup_path", path=paths.backup))
    return stats


def main(argv: list[str] | None = None, config: ToolConfig | None = None,
         reporter: RichReporter | None = None) -> int:
    """程序入口"""
    args = build_parser().parse_args(argv)
    reporter = reporter or RichReporter()

    def body() -> int:
        cfg = prepare(args, config)
        paths = ProcessPaths(
            source=args.source or cfg.source_file,
            translation_map=args.translation_map or cfg.translation_map_file,
            output=args.output or cfg.output_file,
            backup=args.backup or cfg.backup_file,
        )
        run_process(paths, reporter, encoding=cfg.file_encoding)
        return EXIT_OK

    return run_guarded(body, reporter)


if __name__ == "__main__":
    sys.exit(main())

"""命令行工具的公共部分：参数、日志初始化和统一的错误出口"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from i18n import set_locale, t as _t
from locfile.config import ToolConfig, get_config
from locfile.exceptions import ConfigurationError, LocfileError
from logging_config import setup_logging
from ui.rich_report import RichReporter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-v", "--verbose", action="store_true", help="在控制台输出详细日志")
    parser.add_argument("--lang", choices=["zh_CN", "en_US"], default=None, help="界面语言")


def prepare(args: argparse.Namespace, config: ToolConfig | None = None) -> ToolConfig:
    """初始化日志和语言，返回校验过的配置

    Raises:
        ConfigurationError: 配置校验失败
    """
    config = config or get_config()
    setup_logging(
        level="DEBUG" if args.verbose or config.debug_mode else config.log_level,
        log_file=config.log_file or None,
        console_level="DEBUG" if args.verbose else None,
    )
    if args.lang:
        set_locale(args.lang)

    errors = config.validate()
    if errors:
        raise ConfigurationError(_t("cli.invalid_config", errors="; ".join(errors)))
    return config


def run_guarded(body: Callable[[], int], reporter: RichReporter) -> int:
    """执行工具主体，把致命错误转换为退出码"""
    try:
        return body()
    except LocfileError as e:
        logger.error("Run aborted: %s", e)
        reporter.error(_t("cli.error", error=e))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        reporter.warning(_t("cli.interrupted"))
        return EXIT_INTERRUPTED

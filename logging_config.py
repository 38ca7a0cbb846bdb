"""日志初始化

工具的报告输出走 rich 控制台，运行日志写入 UTF-8 文件（含中文内容）。
级别和文件路径由 ``ToolConfig`` 提供，这里不再读取环境变量。

用法::

    from logging_config import setup_logging
    setup_logging(level=config.log_level, log_file=config.log_file)

重复调用只会更新已安装处理器的级别和格式，不会重复添加。
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

FILE_HANDLER_NAME = "locfile_file"
CONSOLE_HANDLER_NAME = "locfile_console"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str | int) -> int:
    """``"debug"`` / ``"INFO"`` / 数字 → logging 级别，无法识别时为 INFO"""
    if isinstance(level, int):
        return level
    return logging._nameToLevel.get((level or "").strip().upper(), logging.INFO)


def _find_handler(root: logging.Logger, name: str) -> logging.Handler | None:
    for handler in root.handlers:
        if handler.get_name() == name:
            return handler
    return None


def _file_handler(path: Path, max_bytes: int, backup_count: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        str(path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.set_name(FILE_HANDLER_NAME)
    return handler


def setup_logging(
    *,
    level: str | int = "INFO",
    log_file: str | Path | None = None,
    console_level: str | int | None = None,
    max_bytes: int = 2 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """配置根 logger

    Args:
        level: 文件日志级别
        log_file: 日志文件路径；None 或空串表示不写文件
        console_level: 控制台日志级别；None 表示不输出到控制台（默认）
        max_bytes / backup_count: 日志轮转参数

    Returns:
        根 logger
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file:
        path = Path(log_file)
        if not path.is_absolute():
            path = Path.cwd() / path
        handler = _find_handler(root, FILE_HANDLER_NAME)
        if handler is None:
            handler = _file_handler(path, max_bytes, backup_count)
            root.addHandler(handler)
        handler.setFormatter(formatter)
        handler.setLevel(parse_level(level))

    if console_level is not None:
        handler = _find_handler(root, CONSOLE_HANDLER_NAME)
        if handler is None:
            handler = logging.StreamHandler()
            handler.set_name(CONSOLE_HANDLER_NAME)
            root.addHandler(handler)
        handler.setFormatter(formatter)
        handler.setLevel(parse_level(console_level))

    logging.getLogger(__name__).info(
        "Logging initialized | level=%s file=%s console=%s",
        level,
        log_file or "-",
        console_level or "-",
    )
    return root


def teardown_logging() -> None:
    """移除并关闭 setup_logging() 安装的处理器"""
    root = logging.getLogger()
    for name in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
        handler = _find_handler(root, name)
        if handler is not None:
            root.removeHandler(handler)
            handler.close()

"""简体专用字符表

默认表只收录少量常见的简体专用字，键为简体字，值为对应繁体字。
需要更完整的检测时，可用 ``load_table()`` 读入额外的 JSON 映射。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from .exceptions import MapLoadError
from .models import describe_errors, validate_simplified_table

logger = logging.getLogger(__name__)

# CJK 统一表意文字基本区
CJK_START = 0x4E00
CJK_END = 0x9FFF

DEFAULT_SIMPLIFIED_ONLY: Mapping[str, str] = {
    "国": "國",
    "门": "門",
    "长": "長",
    "开": "開",
    "车": "車",
    "贝": "貝",
    "见": "見",
    "气": "氣",
    "无": "無",
    "专": "專",
}


def is_cjk(char: str) -> bool:
    """是否为 CJK 基本区字符 (U+4E00–U+9FFF)"""
    return CJK_START <= ord(char) <= CJK_END


def default_table() -> dict[str, str]:
    """返回默认简体专用字符表的副本"""
    return dict(DEFAULT_SIMPLIFIED_ONLY)


def load_table(path: str | Path, base: Mapping[str, str] | None = None) -> dict[str, str]:
    """读取 JSON 格式的简体→繁体映射并合并到 ``base`` 之上

    Args:
        path: JSON 文件路径，内容为 ``{"简": "繁", ...}``
        base: 基础表，默认使用内置表

    Raises:
        MapLoadError: 文件无法读取或内容不是单字符映射
    """
    table = dict(DEFAULT_SIMPLIFIED_ONLY if base is None else base)
    try:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MapLoadError(file_path=str(path), reason=str(e)) from e

    try:
        extra = validate_simplified_table(raw)
    except ValidationError as e:
        raise MapLoadError(file_path=str(path), reason=describe_errors(e)) from e

    table.update(extra)
    logger.debug("Loaded %d extra simplified-only entries from %s", len(extra), path)
    return table

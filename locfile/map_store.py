"""翻译映射的持久化

映射以扁平 JSON 对象保存（键 → 值），也可以导出为纯文本
``KEY=VALUE`` 格式供人工查看。
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from .exceptions import MapLoadError
from .fileops import atomic_write_text
from .models import describe_errors, validate_translation_map

logger = logging.getLogger(__name__)

PLAIN_TEXT_HEADER = "# Translation Map - Plain Text Format"


def save_map_json(path: str | Path, mapping: Mapping[str, str]) -> str:
    """以 2 空格缩进的 JSON 保存映射

    Returns:
        保存的文件路径

    Raises:
        OutputWriteError: 写入失败
    """
    text = json.dumps(dict(mapping), ensure_ascii=False, indent=2) + "\n"
    atomic_write_text(path, text)
    logger.info("Saved %d entries to %s", len(mapping), path)
    return str(path)


def save_map_text(path: str | Path, mapping: Mapping[str, str]) -> str:
    """以纯文本格式保存映射（每行一个 ``KEY=VALUE``）

    Raises:
        OutputWriteError: 写入失败
    """
    lines = [
        PLAIN_TEXT_HEADER,
        f"# Total entries: {len(mapping)}",
        "# Format: KEY=VALUE",
        "",
    ]
    lines.extend(f"{key}={value}" for key, value in mapping.items())
    atomic_write_text(path, "\n".join(lines) + "\n")
    logger.info("Saved %d entries to %s (plain text)", len(mapping), path)
    return str(path)


def load_map(path: str | Path) -> dict[str, str]:
    """从 JSON 文件加载翻译映射

    Raises:
        MapLoadError: 文件不存在、JSON 格式错误或内容不是字符串映射
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MapLoadError(file_path=str(path), reason=str(e)) from e

    try:
        mapping = validate_translation_map(raw)
    except ValidationError as e:
        raise MapLoadError(file_path=str(path), reason=describe_errors(e)) from e

    logger.info("Loaded %d translations from %s", len(mapping), path)
    return mapping

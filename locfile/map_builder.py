"""翻译映射构建

按扫描顺序把 ``LineRecord`` 折叠成有序映射。同一个键出现多次时，
以最后一次出现的值为准。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import SourceReadError
from .line_parser import LineKind, LineRecord, MalformedReason, iter_records, split_terminated

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseWarning:
    """解析警告：行号 + 原因"""

    line_number: int
    reason: str
    content: str = ""


@dataclass
class MapBuildResult:
    """映射构建结果"""

    mapping: dict[str, str] = field(default_factory=dict)
    warnings: list[ParseWarning] = field(default_factory=list)
    duplicates: int = 0

    def __len__(self) -> int:
        return len(self.mapping)


def build_translation_map(records: Iterable[LineRecord]) -> MapBuildResult:
    """把解析记录折叠为翻译映射

    - 空行和注释不产生任何内容，也不告警
    - 格式错误的行记录一条警告
    - 键重复时后出现的覆盖先出现的
    """
    result = MapBuildResult()

    for record in records:
        if record.kind in (LineKind.BLANK, LineKind.COMMENT):
            continue

        if record.kind is LineKind.MALFORMED:
            result.warnings.append(
                ParseWarning(
                    record.line_number,
                    record.reason or MalformedReason.NO_SEPARATOR,
                    record.content.strip(),
                )
            )
            continue

        key = record.key.strip()
        if not key:
            result.warnings.append(
                ParseWarning(record.line_number, MalformedReason.EMPTY_KEY, record.content.strip())
            )
            continue

        if key in result.mapping:
            result.duplicates += 1
            logger.debug("Duplicate key %r at line %d overrides earlier value", key, record.line_number)
        result.mapping[key] = record.value

    for warning in result.warnings:
        logger.warning("Line %d: %s: %s", warning.line_number, warning.reason, warning.content)

    return result


def extract_from_text(text: str) -> MapBuildResult:
    """从整段文本中提取键值对"""
    lines = [body for body, _ in split_terminated(text)]
    return build_translation_map(iter_records(lines))


def extract_from_file(path: str | Path, encoding: str = "utf-8") -> MapBuildResult:
    """从 INI 文件中提取键值对

    Raises:
        SourceReadError: 文件不存在或无法按 ``encoding`` 读取
    """
    try:
        with open(path, encoding=encoding, newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(file_path=str(path), reason=str(e)) from e

    result = extract_from_text(text)
    logger.info("Extracted %d entries from %s (%d warnings)", len(result), path, len(result.warnings))
    return result

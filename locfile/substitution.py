"""翻译替换

逐行解析目标文件，键在映射中则把值替换为译文，并统计每行的处理结果。
输出与输入行数相同、顺序相同；第 1 行的 BOM 总会被保留。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path

from .exceptions import SourceReadError
from .fileops import atomic_write_text
from .line_parser import BOM, LineKind, parse_line, split_terminated

logger = logging.getLogger(__name__)


@dataclass
class TranslationStats:
    """翻译统计

    不变量: ``total == translated + unchanged + skipped``；
    ``not_found`` 是 ``unchanged`` 的子集，不单独计入 total。
    """

    total: int = 0
    translated: int = 0
    unchanged: int = 0
    skipped: int = 0
    not_found: int = 0

    @property
    def is_consistent(self) -> bool:
        return (
            self.total == self.translated + self.unchanged + self.skipped
            and self.not_found <= self.unchanged
        )

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass
class SubstitutionResult:
    """替换结果"""

    lines: list[str] = field(default_factory=list)
    stats: TranslationStats = field(default_factory=TranslationStats)


def apply_translation(lines: Iterable[str], mapping: Mapping[str, str]) -> SubstitutionResult:
    """对行序列应用翻译映射

    Args:
        lines: 原始行（不含换行符）
        mapping: 键 → 译文

    Returns:
        SubstitutionResult，``lines`` 与输入一一对应
    """
    result = SubstitutionResult()
    stats = result.stats

    for line_number, raw in enumerate(lines, 1):
        record = parse_line(raw, line_number)
        stats.total += 1

        if record.kind in (LineKind.BLANK, LineKind.COMMENT):
            stats.skipped += 1
            out = record.content
        elif record.kind is LineKind.MALFORMED:
            stats.unchanged += 1
            out = record.content
        elif record.key in mapping:
            stats.translated += 1
            out = record.render(mapping[record.key])
        else:
            stats.unchanged += 1
            stats.not_found += 1
            out = record.content

        if record.had_bom:
            out = BOM + out
        result.lines.append(out)

    return result


def translate_text(text: str, mapping: Mapping[str, str]) -> tuple[str, TranslationStats]:
    """翻译整段文本，每行保留原来的行尾（LF / CRLF 可以混用）"""
    pairs = split_terminated(text)
    result = apply_translation([body for body, _ in pairs], mapping)
    out = "".join(line + eol for line, (_, eol) in zip(result.lines, pairs))
    return out, result.stats


def translate_file(
    path: str | Path, mapping: Mapping[str, str], encoding: str = "utf-8"
) -> TranslationStats:
    """就地翻译文件

    整个文件处理成功后才原子替换原文件，中途失败不会留下半翻译的文件。

    Raises:
        SourceReadError: 文件无法读取
        OutputWriteError: 结果无法写回
    """
    try:
        with open(path, encoding=encoding, newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(file_path=str(path), reason=str(e)) from e

    out, stats = translate_text(text, mapping)
    atomic_write_text(path, out, encoding=encoding)

    logger.info(
        "Translated %s: total=%d translated=%d unchanged=%d skipped=%d not_found=%d",
        path,
        stats.total,
        stats.translated,
        stats.unchanged,
        stats.skipped,
        stats.not_found,
    )
    return stats

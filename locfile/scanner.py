"""简体中文字符扫描

先判定整体编码，再按判定结果做二次扫描：

- UTF-8: 只标记简体专用字符表中的字符
- GBK: 整个文件都是简体编码，标记所有 CJK 字符
- BIG5: 解码并统计字符数
- 未知: 按字节查找形似 GBK 的双字节序列

所有扫描都是单次线性遍历，不修改输入。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .charsets import DEFAULT_SIMPLIFIED_ONLY, is_cjk
from .encoding import (
    GBK_LEAD,
    GBK_TRAIL,
    UTF8_BOM,
    EncodingVerdict,
    classify_encoding,
)
from .exceptions import SourceReadError

logger = logging.getLogger(__name__)

REPLACEMENT_CHAR = "\ufffd"

DEFAULT_CONTEXT_WIDTH = 10


@dataclass(frozen=True)
class FlaggedCharacter:
    """被标记的字符"""

    line_number: int
    char: str
    context: str
    traditional: str | None = None

    @property
    def codepoint(self) -> int:
        return ord(self.char)

    @property
    def code_label(self) -> str:
        return f"U+{self.codepoint:04X}"


@dataclass(frozen=True)
class ByteSequenceIssue:
    """可疑的双字节序列（字节级扫描）"""

    line_number: int
    offset: int
    lead: int
    trail: int

    @property
    def hex(self) -> str:
        return f"{self.lead:02X} {self.trail:02X}"


@dataclass
class ScanReport:
    """一次扫描的完整结果"""

    verdict: EncodingVerdict
    path: str | None = None
    flagged: list[FlaggedCharacter] = field(default_factory=list)
    byte_issues: list[ByteSequenceIssue] = field(default_factory=list)
    character_count: int = 0

    @property
    def has_findings(self) -> bool:
        return bool(self.flagged or self.byte_issues)


def _context(chars: str, index: int, width: int) -> str:
    start = max(0, index - width)
    return chars[start:index + width + 1]


def scan_utf8_text(
    text: str,
    table: Mapping[str, str] = DEFAULT_SIMPLIFIED_ONLY,
    context_width: int = DEFAULT_CONTEXT_WIDTH,
) -> list[FlaggedCharacter]:
    """标记文本中出现在简体专用表里的字符

    Args:
        text: 已解码的文本
        table: 简体 → 繁体 映射
        context_width: 每侧上下文的最大字符数（同一行内）
    """
    flagged: list[FlaggedCharacter] = []
    for line_number, line in enumerate(text.split("\n"), 1):
        line = line.rstrip("\r")
        for i, char in enumerate(line):
            if char in table:
                flagged.append(
                    FlaggedCharacter(line_number, char, _context(line, i, context_width), table[char])
                )
    return flagged


def scan_simplified_text(
    text: str,
    context_width: int = DEFAULT_CONTEXT_WIDTH,
    table: Mapping[str, str] | None = None,
) -> list[FlaggedCharacter]:
    """标记文本中所有 CJK 字符（用于整体为简体编码的文件）

    ``table`` 只用于补充已知的繁体对应字，不影响是否标记。
    """
    table = table or {}
    flagged: list[FlaggedCharacter] = []
    for line_number, line in enumerate(text.split("\n"), 1):
        line = line.rstrip("\r")
        for i, char in enumerate(line):
            if is_cjk(char):
                flagged.append(
                    FlaggedCharacter(
                        line_number, char, _context(line, i, context_width), table.get(char)
                    )
                )
    return flagged


def scan_mixed_bytes(buffer: bytes) -> list[ByteSequenceIssue]:
    """按字节查找形似 GBK 的双字节序列

    换行字节推进行号；命中的序列整体跳过两个字节。
    """
    issues: list[ByteSequenceIssue] = []
    line_number = 1
    pos = 0
    n = len(buffer)
    while pos < n:
        b = buffer[pos]
        if b == 0x0A:
            line_number += 1
            pos += 1
            continue
        if pos + 1 < n and GBK_LEAD[0] <= b <= GBK_LEAD[1]:
            trail = buffer[pos + 1]
            if any(lo <= trail <= hi for lo, hi in GBK_TRAIL):
                issues.append(ByteSequenceIssue(line_number, pos, b, trail))
                pos += 2
                continue
        pos += 1
    return issues


def _decode(buffer: bytes, verdict: EncodingVerdict) -> str:
    """按判定结果解码，无法解码的序列替换为 U+FFFD 并记录数量"""
    if verdict is EncodingVerdict.UTF8 and buffer.startswith(UTF8_BOM):
        buffer = buffer[len(UTF8_BOM):]
    text = buffer.decode(verdict.codec, errors="replace")
    replaced = text.count(REPLACEMENT_CHAR)
    if replaced:
        logger.debug(
            "%d undecodable sequences replaced with U+FFFD while decoding as %s",
            replaced,
            verdict.codec,
        )
    return text


def scan_buffer(
    buffer: bytes,
    *,
    table: Mapping[str, str] = DEFAULT_SIMPLIFIED_ONLY,
    context_width: int = DEFAULT_CONTEXT_WIDTH,
    prefer_utf8: bool = True,
    path: str | None = None,
) -> ScanReport:
    """判定编码并按结果执行二次扫描"""
    verdict = classify_encoding(buffer, prefer_utf8=prefer_utf8)
    report = ScanReport(verdict=verdict, path=path)
    logger.info("Encoding verdict for %s: %s", path or "<buffer>", verdict.value)

    if verdict is EncodingVerdict.UTF8:
        text = _decode(buffer, verdict)
        report.character_count = len(text)
        report.flagged = scan_utf8_text(text, table, context_width)
    elif verdict is EncodingVerdict.SIMPLIFIED_BYTE_ENCODING:
        text = _decode(buffer, verdict)
        report.character_count = len(text)
        report.flagged = scan_simplified_text(text, context_width, table)
    elif verdict is EncodingVerdict.TRADITIONAL_BYTE_ENCODING:
        text = _decode(buffer, verdict)
        report.character_count = len(text)
    else:
        report.byte_issues = scan_mixed_bytes(buffer)

    logger.info(
        "Scan finished: %d flagged characters, %d byte issues",
        len(report.flagged),
        len(report.byte_issues),
    )
    return report


def scan_file(
    path: str | Path,
    *,
    table: Mapping[str, str] = DEFAULT_SIMPLIFIED_ONLY,
    context_width: int = DEFAULT_CONTEXT_WIDTH,
    prefer_utf8: bool = True,
) -> ScanReport:
    """读取文件并扫描

    Raises:
        SourceReadError: 文件无法读取
    """
    try:
        buffer = Path(path).read_bytes()
    except OSError as e:
        raise SourceReadError(file_path=str(path), reason=str(e)) from e

    return scan_buffer(
        buffer,
        table=table,
        context_width=context_width,
        prefer_utf8=prefer_utf8,
        path=str(path),
    )

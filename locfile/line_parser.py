"""INI 行解析器

把一行原始文本分类为空行 / 注释 / 格式错误 / 有效键值对。
解析永不抛出异常：无法识别的行只会被标记为 ``MALFORMED``，
由调用方决定如何报告。
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

# 解码后的 UTF-8 BOM (EF BB BF)
BOM = "\ufeff"

COMMENT_PREFIXES = ("#", ";")
SEPARATOR = "="


class LineKind(Enum):
    """行分类"""

    BLANK = "blank"
    COMMENT = "comment"
    MALFORMED = "malformed"
    VALID = "valid"


class MalformedReason:
    """格式错误原因（与 i18n 的 ``reason.*`` 键对应）"""

    NO_SEPARATOR = "no_separator"
    EMPTY_KEY = "empty_key"


@dataclass(frozen=True)
class LineRecord:
    """单行的解析结果"""

    raw: str
    line_number: int
    kind: LineKind
    key: str = ""
    value: str = ""
    had_bom: bool = False
    reason: str | None = None

    @property
    def content(self) -> str:
        """去掉 BOM 后的行内容（未 trim）"""
        return self.raw[len(BOM):] if self.had_bom else self.raw

    def render(self, value: str | None = None) -> str:
        """以 ``key=value`` 的规范形式输出（等号两侧无空格）

        Args:
            value: 替换值，None 则使用原值
        """
        return f"{self.key}{SEPARATOR}{self.value if value is None else value}"


def parse_line(raw: str, line_number: int) -> LineRecord:
    """解析一行文本

    Args:
        raw: 原始行文本（不含行尾换行符）
        line_number: 从 1 开始的行号；只有第 1 行会检查 BOM

    Returns:
        LineRecord，总会返回一个分类
    """
    had_bom = line_number == 1 and raw.startswith(BOM)
    content = raw[len(BOM):] if had_bom else raw
    stripped = content.strip()

    if not stripped:
        return LineRecord(raw, line_number, LineKind.BLANK, had_bom=had_bom)

    if stripped.startswith(COMMENT_PREFIXES):
        return LineRecord(raw, line_number, LineKind.COMMENT, had_bom=had_bom)

    # 只有第一个 '=' 是分隔符，值里可以再出现 '='
    key, sep, value = stripped.partition(SEPARATOR)
    if not sep:
        return LineRecord(
            raw,
            line_number,
            LineKind.MALFORMED,
            had_bom=had_bom,
            reason=MalformedReason.NO_SEPARATOR,
        )

    key = key.strip()
    if not key:
        return LineRecord(
            raw,
            line_number,
            LineKind.MALFORMED,
            had_bom=had_bom,
            reason=MalformedReason.EMPTY_KEY,
        )

    return LineRecord(
        raw,
        line_number,
        LineKind.VALID,
        key=key,
        value=value.strip(),
        had_bom=had_bom,
    )


def split_terminated(text: str) -> list[tuple[str, str]]:
    """按 ``\\n`` 拆分文本，并保留每一行自己的行尾

    行尾是 ``"\\r\\n"``、``"\\n"``，最后一行也可能是单独的 ``"\\r"``
    或空串（文件不以换行结尾）。把每行的正文和行尾重新拼接即可
    逐字节还原原文。

    Returns:
        ``(正文, 行尾)`` 列表；空文本返回空列表
    """
    pairs: list[tuple[str, str]] = []
    start = 0
    n = len(text)
    while start < n:
        end = text.find("\n", start)
        if end == -1:
            rest = text[start:]
            if rest.endswith("\r"):
                pairs.append((rest[:-1], "\r"))
            else:
                pairs.append((rest, ""))
            break
        line = text[start:end]
        if line.endswith("\r"):
            pairs.append((line[:-1], "\r\n"))
        else:
            pairs.append((line, "\n"))
        start = end + 1
    return pairs


def iter_records(lines: Iterable[str]) -> Iterator[LineRecord]:
    """逐行解析，行号从 1 开始"""
    for line_number, raw in enumerate(lines, 1):
        yield parse_line(raw.rstrip("\r\n"), line_number)

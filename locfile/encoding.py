"""文件编码判定

启发式地判断字节内容是 UTF-8、BIG5（繁体双字节编码）还是
GB2312/GBK（简体双字节编码）。这不是严格的编码检测器：
没有任何高位字节的内容（例如纯 ASCII）一律判定为 UTF-8。
"""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"

# (起, 止) 闭区间
BIG5_LEAD = (0xA1, 0xF9)
BIG5_TRAIL = ((0x40, 0x7E), (0xA1, 0xFE))
GBK_LEAD = (0x81, 0xFE)
GBK_TRAIL = ((0x40, 0xFE),)

# Python 解码器名称
BIG5_CODEC = "big5"
GBK_CODEC = "gbk"


class EncodingVerdict(Enum):
    """编码判定结果"""

    UTF8 = "utf-8"
    TRADITIONAL_BYTE_ENCODING = "big5"
    SIMPLIFIED_BYTE_ENCODING = "gbk"
    UNKNOWN = "unknown"

    @property
    def codec(self) -> str | None:
        """对应的 Python 解码器名称"""
        return {
            EncodingVerdict.UTF8: "utf-8",
            EncodingVerdict.TRADITIONAL_BYTE_ENCODING: BIG5_CODEC,
            EncodingVerdict.SIMPLIFIED_BYTE_ENCODING: GBK_CODEC,
        }.get(self)


def _in_range(b: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= b <= bounds[1]


def has_bom(buffer: bytes) -> bool:
    return buffer.startswith(UTF8_BOM)


def is_valid_utf8(buffer: bytes) -> bool:
    try:
        buffer.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def has_double_byte_range(buffer: bytes) -> bool:
    """是否含有任一双字节中文编码使用的高位字节

    BIG5 的 0xA1–0xF9 是 GBK 的 0x81–0xFE 的子集，所以只需检查后者。
    """
    return any(_in_range(b, GBK_LEAD) for b in buffer)


def count_double_byte_pairs(
    buffer: bytes,
    lead: tuple[int, int],
    trails: tuple[tuple[int, int], ...],
) -> int | None:
    """按双字节编码规则遍历整个缓冲区

    ASCII 字节（< 0x80）单独通过；首字节落在 ``lead`` 区间时必须紧跟
    一个落在 ``trails`` 任一区间内的尾字节。

    Returns:
        合法双字节序列的个数；遇到非法字节序列时返回 None
    """
    pairs = 0
    i = 0
    n = len(buffer)
    while i < n:
        b = buffer[i]
        if b < 0x80:
            i += 1
            continue
        if not _in_range(b, lead) or i + 1 >= n:
            return None
        trail = buffer[i + 1]
        if not any(_in_range(trail, bounds) for bounds in trails):
            return None
        pairs += 1
        i += 2
    return pairs


def is_big5_encoded(buffer: bytes) -> bool:
    """整个缓冲区都符合 BIG5 规则，且至少含一个双字节序列"""
    pairs = count_double_byte_pairs(buffer, BIG5_LEAD, BIG5_TRAIL)
    return bool(pairs)


def is_gbk_encoded(buffer: bytes) -> bool:
    """整个缓冲区都符合 GBK 规则，且至少含一个双字节序列"""
    pairs = count_double_byte_pairs(buffer, GBK_LEAD, GBK_TRAIL)
    return bool(pairs)


def classify_encoding(buffer: bytes, *, prefer_utf8: bool = True) -> EncodingVerdict:
    """判定缓冲区的整体编码

    判定顺序：BOM → 无高位字节的合法 UTF-8 → BIG5 → GBK → UNKNOWN。

    Args:
        buffer: 文件原始字节
        prefer_utf8: 合法 UTF-8 但含高位字节时直接判定为 UTF-8。
            关闭后会先尝试 BIG5 / GBK，UTF-8 中文文本经常能按 GBK
            规则完整解析，因而会被判成简体编码。

    Returns:
        EncodingVerdict，解码失败只会排除该候选，不会抛出异常
    """
    if has_bom(buffer):
        return EncodingVerdict.UTF8

    valid_utf8 = is_valid_utf8(buffer)
    if valid_utf8 and not has_double_byte_range(buffer):
        return EncodingVerdict.UTF8

    if valid_utf8 and prefer_utf8:
        logger.debug("Buffer is valid UTF-8 with high bytes; preferring UTF-8")
        return EncodingVerdict.UTF8

    if is_big5_encoded(buffer):
        return EncodingVerdict.TRADITIONAL_BYTE_ENCODING

    if is_gbk_encoded(buffer):
        return EncodingVerdict.SIMPLIFIED_BYTE_ENCODING

    logger.debug("No encoding candidate matched (%d bytes)", len(buffer))
    return EncodingVerdict.UNKNOWN

# -*- coding: utf-8 -*-
"""翻译替换的性质测试（Property-based）。

核心不变量：
1. 输出行数 == 输入行数
2. total == translated + unchanged + skipped，且 not_found ≤ unchanged
3. 空映射时输出与输入逐字相同
4. 用同一映射再翻译一遍，结果不变
5. 每行的行尾（LF / CRLF / 无）原样保留
"""

from __future__ import annotations

import sys
from pathlib import Path

# 确保项目根目录在 sys.path 中
_project_root = str(Path(__file__).resolve().parents[2])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from hypothesis import given, settings
from hypothesis import strategies as st

from locfile.line_parser import BOM, split_terminated
from locfile.substitution import apply_translation, translate_text

key_alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_"
keys = st.text(alphabet=key_alphabet, min_size=1, max_size=8)
free_text = st.text(
    alphabet=st.characters(blacklist_characters="\r\n", blacklist_categories=("Cs",)),
    max_size=30,
)

# 混合各类行：键值对、注释、空行、任意文本
ini_line = st.one_of(
    st.builds(lambda k, v: f"{k}={v}", keys, free_text),
    st.builds(lambda k, v: f"  {k} = {v}  ", keys, free_text),
    free_text.map(lambda s: "# " + s),
    st.sampled_from(["", "   ", "; note", "=orphan", "no separator"]),
    free_text,
)
ini_lines = st.lists(ini_line, max_size=40)
mappings = st.dictionaries(keys, free_text, max_size=10)


@given(lines=ini_lines, mapping=mappings)
@settings(max_examples=200)
def test_line_count_and_stats(lines, mapping):
    result = apply_translation(lines, mapping)
    stats = result.stats
    assert len(result.lines) == len(lines)
    assert stats.total == len(lines)
    assert stats.total == stats.translated + stats.unchanged + stats.skipped
    assert stats.not_found <= stats.unchanged
    assert stats.is_consistent


@given(lines=ini_lines)
def test_empty_mapping_is_identity(lines):
    result = apply_translation(lines, {})
    assert result.lines == lines
    assert result.stats.translated == 0


@given(lines=ini_lines, mapping=mappings, bom=st.booleans())
@settings(max_examples=200)
def test_reapply_is_idempotent(lines, mapping, bom):
    if bom and lines:
        lines = [BOM + lines[0]] + lines[1:]
    once = apply_translation(lines, mapping).lines
    twice = apply_translation(once, mapping).lines
    assert twice == once
    if bom and lines:
        assert once[0].startswith(BOM)


@st.composite
def terminated_text(draw):
    """每行独立选择 LF / CRLF，最后一行可以没有行尾"""
    lines = draw(ini_lines)
    endings = [draw(st.sampled_from(["\n", "\r\n"])) for _ in lines]
    if endings:
        endings[-1] = draw(st.sampled_from(["\n", "\r\n", "\r", ""]))
    return "".join(line + eol for line, eol in zip(lines, endings))


@given(text=terminated_text(), mapping=mappings)
@settings(max_examples=200)
def test_line_endings_preserved(text, mapping):
    out, _ = translate_text(text, mapping)
    assert [eol for _, eol in split_terminated(out)] == [
        eol for _, eol in split_terminated(text)
    ]


@given(text=terminated_text())
def test_empty_mapping_text_is_identity(text):
    out, _ = translate_text(text, {})
    assert out == text

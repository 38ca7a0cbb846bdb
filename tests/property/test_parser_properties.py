# -*- coding: utf-8 -*-
"""行解析与映射构建的性质测试（Property-based）。

核心不变量：
1. parse_line 对任意单行输入都不抛异常，并给出四种分类之一
2. 有效行的 key 非空、无首尾空白、不含 '='
3. render() 的输出再解析得到同样的 key / value
4. 重复键时后出现的值生效
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

from locfile.line_parser import LineKind, iter_records, parse_line
from locfile.map_builder import build_translation_map

# 单行文本：不含换行
line_text = st.text(
    alphabet=st.characters(blacklist_characters="\r\n", blacklist_categories=("Cs",)),
    max_size=60,
)

keys = st.text(
    alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_,.",
    min_size=1,
    max_size=20,
)
values = st.text(
    # 不含会被 strip() 去掉的空白字符
    alphabet=st.characters(
        blacklist_characters="\r\n",
        blacklist_categories=("Cs", "Zs", "Zl", "Zp", "Cc"),
    ),
    max_size=20,
)


@given(raw=line_text, line_number=st.integers(min_value=1, max_value=10_000))
@settings(max_examples=300)
def test_parse_never_raises(raw, line_number):
    record = parse_line(raw, line_number)
    assert record.kind in LineKind
    assert record.line_number == line_number
    if record.kind is LineKind.MALFORMED:
        assert record.reason is not None


@given(raw=line_text)
@settings(max_examples=300)
def test_valid_key_shape(raw):
    record = parse_line(raw, 2)
    if record.kind is LineKind.VALID:
        assert record.key
        assert record.key == record.key.strip()
        assert "=" not in record.key
        assert record.value == record.value.strip()


@given(raw=line_text)
@settings(max_examples=300)
def test_render_reparse_is_stable(raw):
    record = parse_line(raw, 2)
    if record.kind is LineKind.VALID:
        again = parse_line(record.render(), 2)
        assert again.kind is LineKind.VALID
        assert (again.key, again.value) == (record.key, record.value)


@given(pairs=st.lists(st.tuples(keys, values), max_size=30))
def test_last_write_wins(pairs):
    lines = [f"{k}={v}" for k, v in pairs]
    result = build_translation_map(iter_records(lines))
    assert result.mapping == dict(pairs)
    assert result.duplicates == len(pairs) - len(dict(pairs))
    assert result.warnings == []

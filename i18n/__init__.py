"""轻量级 i18n 框架：零外部依赖。

用法::

    from i18n import t, set_locale

    set_locale("en_US")
    print(t("extract.done", count=12))

    # 便捷别名
    from i18n import _
    print(_("stats.translated"))  # → "Lines translated" (en_US) / "已翻译行数" (zh_CN)

    # 领域助手
    from i18n import verdict_name, reason_text
    print(verdict_name("big5"))      # → "BIG5（繁体）" / "BIG5 (Traditional)"
    print(reason_text("no_separator"))
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "zh_CN"

_locale: str = os.environ.get("LOCFILE_LANG", DEFAULT_LOCALE)
_tables: dict[str, dict[str, str]] = {}


def _load_table(locale: str) -> dict[str, str]:
    """按需加载翻译表。"""
    if locale == "zh_CN":
        from .zh_CN import STRINGS
    elif locale == "en_US":
        from .en_US import STRINGS
    else:
        raise ValueError(f"Unsupported locale: {locale}")
    return dict(STRINGS)


def set_locale(locale: str) -> None:
    """设置当前语言。"""
    global _locale
    # 预加载以确保 locale 有效
    if locale not in _tables:
        _tables[locale] = _load_table(locale)
    _locale = locale


def get_locale() -> str:
    """获取当前语言。"""
    return _locale


def get_available_locales() -> list[str]:
    """返回所有可用的 locale 列表。"""
    return ["zh_CN", "en_US"]


def t(key: str, **kwargs: object) -> str:
    """翻译函数。

    查找当前 locale 对应的字符串，用 ``kwargs`` 做 format 替换。
    若 key 缺失则回退到 zh_CN，仍缺失则返回 ``[key]``。

    Args:
        key: 翻译键，如 ``"apply.loaded"``。
        **kwargs: 格式化参数，如 ``count=3``。
    """
    if _locale not in _tables:
        try:
            _tables[_locale] = _load_table(_locale)
        except ValueError:
            logger.warning("i18n unsupported locale '%s', using %s", _locale, DEFAULT_LOCALE)
            _tables[_locale] = _load_table(DEFAULT_LOCALE)

    table = _tables[_locale]
    template = table.get(key)

    # 回退到 zh_CN
    if template is None and _locale != DEFAULT_LOCALE:
        if DEFAULT_LOCALE not in _tables:
            _tables[DEFAULT_LOCALE] = _load_table(DEFAULT_LOCALE)
        template = _tables[DEFAULT_LOCALE].get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s, using %s", key, _locale, DEFAULT_LOCALE)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if kwargs:
        try:
            return template.format_map(kwargs)
        except KeyError as e:
            logger.warning("i18n format error: key='%s', missing=%s", key, e)
            return template
    return template


# ── 便捷别名 ──
_ = t


# ── 领域助手函数 ──


def _is_missing(key: str, result: str) -> bool:
    """检查 t() 返回值是否表示 key 缺失。"""
    return result == f"[{key}]"


def verdict_name(value: str) -> str:
    """获取编码判定结果的显示名。

    Args:
        value: ``EncodingVerdict`` 的值，如 ``"utf-8"``、``"gbk"``。
    """
    key = f"verdict.{value}"
    result = t(key)
    return result if not _is_missing(key, result) else value


def reason_text(reason: str) -> str:
    """获取解析警告原因的说明文字。"""
    key = f"reason.{reason}"
    result = t(key)
    return result if not _is_missing(key, result) else reason

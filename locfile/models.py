"""JSON 映射文件的 Pydantic 校验模型

翻译映射和简体专用字符表都由外部 JSON 文件提供。读入后先经
Pydantic 模型校验，再交给业务代码使用：拒绝非对象的顶层结构、
非字符串的值以及不合规的键。

设计原则:
  - 校验模型与内部 dict 分离 (校验层 vs 业务层)
  - 校验失败抛出 pydantic.ValidationError，由调用方转换为 MapLoadError
"""

from __future__ import annotations

from pydantic import RootModel, ValidationError, field_validator


class TranslationMapModel(RootModel[dict[str, str]]):
    """翻译映射：扁平的 键 → 译文 对象"""


class SimplifiedTableModel(RootModel[dict[str, str]]):
    """简体专用字符表：单个简体字 → 对应繁体字"""

    @field_validator("root")
    @classmethod
    def keys_are_single_chars(cls, v: dict[str, str]) -> dict[str, str]:
        bad = [k for k in v if len(k) != 1]
        if bad:
            raise ValueError(f"keys must be single characters: {bad[:5]!r}")
        return v


def validate_translation_map(raw_json: str | bytes) -> dict[str, str]:
    """校验翻译映射 JSON，返回保持文件顺序的 dict

    Raises:
        pydantic.ValidationError: JSON 无法解析或结构不符
    """
    return TranslationMapModel.model_validate_json(raw_json).root


def validate_simplified_table(raw_json: str | bytes) -> dict[str, str]:
    """校验简体专用字符表 JSON

    Raises:
        pydantic.ValidationError: JSON 无法解析、结构不符或键不是单字符
    """
    return SimplifiedTableModel.model_validate_json(raw_json).root


def describe_errors(error: ValidationError, limit: int = 3) -> str:
    """把 ValidationError 压缩成一行，用于异常详情和日志"""
    parts = []
    for item in error.errors()[:limit]:
        loc = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    if error.error_count() > limit:
        parts.append(f"... {error.error_count() - limit} more")
    return "; ".join(parts)

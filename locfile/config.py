"""工具配置中心 (SSOT - 单一事实来源)

所有可配置参数在此定义，支持从环境变量覆盖。
文件路径、上下文宽度、简体专用字符表都通过配置传入各组件，
不使用进程级的可变全局状态。
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from .charsets import default_table, load_table


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置"""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


def _get_env_str(key: str, default: str) -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class ToolConfig:
    """工具配置类 (不可变)

    所有配置项支持通过环境变量覆盖：
    - LOCFILE_SOURCE: 源 INI 文件
    - LOCFILE_MAP_OUTPUT: 提取步骤写出的映射文件
    - LOCFILE_TRANSLATION_MAP: 翻译步骤读取的映射文件
    - LOCFILE_OUTPUT / LOCFILE_BACKUP: 翻译输出与备份路径
    - LOCFILE_CONTEXT_WIDTH: 扫描报告中每侧的上下文字符数
    - LOCFILE_PREFER_UTF8: 合法 UTF-8 是否优先判定为 UTF-8
    - LOCFILE_SC_TABLE: 额外的简体专用字符表 (JSON)
    - LOCFILE_LOG_LEVEL / LOCFILE_LOG_FILE: 日志级别与日志文件 (空串表示不写文件)

    simplified_table 构造后冻结为只读映射，不参与 hash。
    """

    # ==================== 文件路径 ====================
    source_file: str = field(
        default_factory=lambda: _get_env_str("LOCFILE_SOURCE", "../source/global.ini")
    )
    map_output_file: str = field(
        default_factory=lambda: _get_env_str("LOCFILE_MAP_OUTPUT", "translation_map.json")
    )
    translation_map_file: str = field(
        default_factory=lambda: _get_env_str(
            "LOCFILE_TRANSLATION_MAP", "../init/translation_map_tc.json"
        )
    )
    output_file: str = field(
        default_factory=lambda: _get_env_str("LOCFILE_OUTPUT", "output/global.ini")
    )
    backup_file: str = field(
        default_factory=lambda: _get_env_str("LOCFILE_BACKUP", "bak/global_bak.ini")
    )
    file_encoding: str = "utf-8"

    # ==================== 扫描 ====================
    context_width: int = field(
        default_factory=lambda: _get_env_int("LOCFILE_CONTEXT_WIDTH", 10)
    )
    prefer_utf8: bool = field(
        default_factory=lambda: _get_env_bool("LOCFILE_PREFER_UTF8", True)
    )
    simplified_table: Mapping[str, str] = field(
        default_factory=default_table, hash=False
    )
    simplified_table_file: str = field(
        default_factory=lambda: _get_env_str("LOCFILE_SC_TABLE", "")
    )

    # ==================== 日志与调试 ====================
    log_level: str = field(
        default_factory=lambda: _get_env_str("LOCFILE_LOG_LEVEL", "INFO")
    )
    log_file: str = field(
        default_factory=lambda: _get_env_str("LOCFILE_LOG_FILE", "logs/locfile.log")
    )
    debug_mode: bool = field(
        default_factory=lambda: _get_env_bool("LOCFILE_DEBUG", False)
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "simplified_table", MappingProxyType(dict(self.simplified_table))
        )

    @classmethod
    def from_env(cls) -> ToolConfig:
        """从环境变量创建配置实例"""
        return cls()

    def with_overrides(self, **changes: object) -> ToolConfig:
        """返回替换了部分字段的新配置"""
        return replace(self, **changes)

    def resolve_simplified_table(self) -> dict[str, str]:
        """合并内置表与 ``simplified_table_file`` 指定的额外表

        Raises:
            MapLoadError: 额外表无法读取
        """
        if self.simplified_table_file:
            return load_table(self.simplified_table_file, base=self.simplified_table)
        return dict(self.simplified_table)

    def validate(self) -> list[str]:
        """校验配置，返回错误列表（空列表表示有效）"""
        errors: list[str] = []
        if self.context_width < 0:
            errors.append(f"context_width must be >= 0, got {self.context_width}")
        for name in ("source_file", "map_output_file", "translation_map_file", "output_file"):
            if not getattr(self, name):
                errors.append(f"{name} must not be empty")
        if self.backup_file and self.backup_file == self.output_file:
            errors.append("backup_file must differ from output_file")
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"log_level is not a logging level: {self.log_level}")
        bad_keys = [k for k in self.simplified_table if len(k) != 1]
        if bad_keys:
            errors.append(f"simplified_table keys must be single characters: {bad_keys!r}")
        return errors


# 全局配置单例
_config: ToolConfig | None = None


def get_config() -> ToolConfig:
    """获取全局配置实例（懒加载）"""
    global _config
    if _config is None:
        _config = ToolConfig.from_env()
    return _config


def reset_config() -> None:
    """重置配置（用于测试）"""
    global _config
    _config = None

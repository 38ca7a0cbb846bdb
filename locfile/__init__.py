# -*- coding: utf-8 -*-
"""
INI 本地化文件维护工具核心模块
包含行解析、映射构建、翻译替换、编码判定和简体字符扫描
"""

from .line_parser import BOM, LineKind, LineRecord, parse_line, iter_records, split_terminated
from .map_builder import MapBuildResult, ParseWarning, build_translation_map, extract_from_file
from .substitution import SubstitutionResult, TranslationStats, apply_translation, translate_file
from .encoding import EncodingVerdict, classify_encoding
from .scanner import ByteSequenceIssue, FlaggedCharacter, ScanReport, scan_buffer, scan_file
from .map_store import load_map, save_map_json, save_map_text
from .config import ToolConfig, get_config
from .exceptions import (
    LocfileError, SourceReadError, MapLoadError, OutputWriteError,
    BackupError, ConfigurationError
)

__all__ = [
    # 行解析
    'BOM', 'LineKind', 'LineRecord', 'parse_line', 'iter_records', 'split_terminated',
    # 映射构建
    'MapBuildResult', 'ParseWarning', 'build_translation_map', 'extract_from_file',
    # 翻译替换
    'SubstitutionResult', 'TranslationStats', 'apply_translation', 'translate_file',
    # 编码判定与扫描
    'EncodingVerdict', 'classify_encoding',
    'ByteSequenceIssue', 'FlaggedCharacter', 'ScanReport', 'scan_buffer', 'scan_file',
    # 持久化
    'load_map', 'save_map_json', 'save_map_text',
    # 配置
    'ToolConfig', 'get_config',
    # 异常
    'LocfileError', 'SourceReadError', 'MapLoadError', 'OutputWriteError',
    'BackupError', 'ConfigurationError',
]

__version__ = '1.0.0'

# -*- coding: utf-8 -*-
"""
UI模块
提供终端报告显示
"""

from .rich_report import RichReporter

__all__ = ['RichReporter']

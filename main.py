# -*- coding: utf-8 -*-
"""
INI 本地化文件维护工具
主程序入口

使用方法:
    python main.py extract [source] [--output PATH] [--format json|text]
    python main.py scan [path]
    python main.py apply [source] [--map PATH] [--output PATH] [--backup PATH]

依赖:
    - Python 3.10+
    - rich
"""

import sys
from pathlib import Path

# 确保可以导入项目模块
sys.path.insert(0, str(Path(__file__).parent))

from tools import apply_translation, extract_map, find_simplified

COMMANDS = {
    "extract": extract_map.main,
    "scan": find_simplified.main,
    "apply": apply_translation.main,
}


def usage() -> str:
    return "usage: main.py {" + ",".join(COMMANDS) + "} [args...]"


def main(argv: list[str] | None = None) -> int:
    """程序入口"""
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] in ("-h", "--help"):
        print(usage())
        return 0 if argv else 2

    command, rest = argv[0], argv[1:]
    handler = COMMANDS.get(command)
    if handler is None:
        print(usage(), file=sys.stderr)
        return 2
    return handler(rest)


if __name__ == "__main__":
    sys.exit(main())

"""命令行工具: 提取映射、扫描简体字符、应用翻译"""

"""简体中文翻译表。"""

STRINGS: dict[str, str] = {
    # ── 异常 ──
    "exc.source_read": "无法读取源文件",
    "exc.map_load": "无法加载翻译映射",
    "exc.output_write": "无法写入输出文件",
    "exc.backup_failed": "无法备份文件",
    "exc.config_error": "配置错误",
    # ── 编码判定 ──
    "verdict.utf-8": "UTF-8",
    "verdict.big5": "BIG5（繁体）",
    "verdict.gbk": "GB2312/GBK（简体）",
    "verdict.unknown": "未知编码",
    # ── 警告原因 ──
    "reason.no_separator": "缺少 '=' 分隔符，已跳过",
    "reason.empty_key": "键为空，已跳过",
    # ── extract ──
    "extract.title": "=== INI 键值提取 ===",
    "extract.reading": "读取: {path}",
    "extract.done": "提取了 {count} 个键值对",
    "extract.duplicates": "重复键 {count} 个（以最后一次出现为准）",
    "extract.written": "✓ 已写入: {path}",
    "extract.complete": "=== 提取完成 ===",
    # ── scan ──
    "scan.title": "=== 扫描简体中文字符 ===",
    "scan.file": "文件: {path}",
    "scan.verdict": "整体文件编码: {name}",
    "scan.gbk_warning": "⚠️  警告: 整个文件以 GB2312/GBK（简体中文）编码!",
    "scan.gbk_hint": "该文件应重新编码为 BIG5 或使用繁体字的 UTF-8。",
    "scan.utf8_scanning": "正在扫描 UTF-8 文件中的简体专用字符...",
    "scan.big5_ok": "✓ 文件以 BIG5（繁体中文）编码",
    "scan.big5_chars": "字符总数: {count}",
    "scan.unknown": "未知编码 - 尝试按字节扫描...",
    "scan.none_found": "✓ 未发现常见简体专用字符",
    "scan.limited_note": "注意: 本检查仅使用有限的简体专用字符表。",
    "scan.found": "⚠️  发现 {count} 个简体字符",
    "scan.no_issues": "✓ 未检测到编码问题",
    "scan.issues_found": "⚠️  发现 {count} 处疑似简体中文字节序列",
    "scan.issue_gbk": "疑似 GBK（简体）",
    "scan.table_title": "简体字符",
    "scan.bytes_title": "可疑字节序列",
    # ── apply ──
    "apply.title": "=== 翻译处理 ===",
    "apply.backup_ok": "✓ 第 2 步: 已将 {src} 备份到 {dst}",
    "apply.backup_skip": "警告: 无法备份文件: {error}（继续执行）",
    "apply.copied": "✓ 第 3 步: 已将 {src} 复制到 {dst}",
    "apply.loaded": "✓ 第 1 步: 从 {path} 加载了 {count} 条翻译",
    "apply.translated": "✓ 第 4 步: 已翻译 {path}",
    "apply.complete": "=== 翻译完成 ===",
    "apply.output": "输出文件: {path}",
    "apply.backup_path": "备份文件: {path}",
    # ── 统计 ──
    "stats.title": "翻译统计",
    "stats.total": "处理总行数",
    "stats.translated": "已翻译行数",
    "stats.unchanged": "未改变行数",
    "stats.skipped": "跳过行数（空行/注释）",
    "stats.not_found": "映射中未找到的键",
    # ── 表格列 ──
    "col.line": "行",
    "col.char": "字符",
    "col.code": "Unicode",
    "col.traditional": "繁体",
    "col.context": "上下文",
    "col.offset": "字节位置",
    "col.bytes": "字节",
    "col.issue": "问题",
    "col.reason": "原因",
    "col.content": "内容",
    "warnings.title": "警告",
    # ── CLI ──
    "cli.error": "发生错误: {error}",
    "cli.interrupted": "已中断。",
    "cli.invalid_config": "配置无效: {errors}",
}

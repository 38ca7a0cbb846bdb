"""English translation table."""

STRINGS: dict[str, str] = {
    # ── exceptions ──
    "exc.source_read": "Cannot read source file",
    "exc.map_load": "Cannot load translation map",
    "exc.output_write": "Cannot write output file",
    "exc.backup_failed": "Cannot back up file",
    "exc.config_error": "Configuration error",
    # ── encoding verdicts ──
    "verdict.utf-8": "UTF-8",
    "verdict.big5": "BIG5 (Traditional)",
    "verdict.gbk": "GB2312/GBK (Simplified)",
    "verdict.unknown": "Unknown encoding",
    # ── warning reasons ──
    "reason.no_separator": "no '=' separator, skipping",
    "reason.empty_key": "empty key, skipping",
    # ── extract ──
    "extract.title": "=== INI Key-Value Extractor ===",
    "extract.reading": "Reading from: {path}",
    "extract.done": "Extracted {count} key-value pairs",
    "extract.duplicates": "{count} duplicate keys (last occurrence wins)",
    "extract.written": "✓ Written to: {path}",
    "extract.complete": "=== Extraction Complete ===",
    # ── scan ──
    "scan.title": "=== Scanning for Simplified Chinese Characters ===",
    "scan.file": "File: {path}",
    "scan.verdict": "Overall file encoding: {name}",
    "scan.gbk_warning": "⚠️  WARNING: Entire file is encoded in GB2312/GBK (Simplified Chinese)!",
    "scan.gbk_hint": "This file should be re-encoded to BIG5 or UTF-8 with Traditional Chinese characters.",
    "scan.utf8_scanning": "Scanning UTF-8 file for Simplified-only characters...",
    "scan.big5_ok": "✓ File is encoded in BIG5 (Traditional Chinese)",
    "scan.big5_chars": "Total characters: {count}",
    "scan.unknown": "Unknown encoding - attempting byte-level scan...",
    "scan.none_found": "✓ No common Simplified-only characters found",
    "scan.limited_note": "Note: this check uses a limited set of Simplified-only characters.",
    "scan.found": "⚠️  Found {count} Simplified characters",
    "scan.no_issues": "✓ No encoding issues detected",
    "scan.issues_found": "⚠️  Found {count} potential Simplified Chinese byte sequences",
    "scan.issue_gbk": "Possible GBK (Simplified)",
    "scan.table_title": "Simplified characters",
    "scan.bytes_title": "Suspicious byte sequences",
    # ── apply ──
    "apply.title": "=== Translation Processor ===",
    "apply.backup_ok": "✓ Step 2: Backed up {src} to {dst}",
    "apply.backup_skip": "Warning: Could not backup file: {error} (continuing anyway)",
    "apply.copied": "✓ Step 3: Copied {src} to {dst}",
    "apply.loaded": "✓ Step 1: Loaded {count} translations from {path}",
    "apply.translated": "✓ Step 4: Translated {path}",
    "apply.complete": "=== Translation Complete ===",
    "apply.output": "Output file: {path}",
    "apply.backup_path": "Backup file: {path}",
    # ── stats ──
    "stats.title": "Translation statistics",
    "stats.total": "Total lines processed",
    "stats.translated": "Lines translated",
    "stats.unchanged": "Lines unchanged",
    "stats.skipped": "Lines skipped (empty/comment)",
    "stats.not_found": "Keys not found in map",
    # ── table columns ──
    "col.line": "Line",
    "col.char": "Character",
    "col.code": "Unicode",
    "col.traditional": "Traditional",
    "col.context": "Context",
    "col.offset": "Byte Pos",
    "col.bytes": "Bytes",
    "col.issue": "Issue",
    "col.reason": "Reason",
    "col.content": "Content",
    "warnings.title": "Warnings",
    # ── CLI ──
    "cli.error": "Error: {error}",
    "cli.interrupted": "Interrupted.",
    "cli.invalid_config": "Invalid configuration: {errors}",
}

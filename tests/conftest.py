"""pytest 共用 fixtures"""

import pytest

from i18n import get_locale, set_locale
from locfile.config import reset_config
from logging_config import teardown_logging


@pytest.fixture(autouse=True)
def _isolate_run(tmp_path, monkeypatch):
    """每个测试独立的日志文件、配置和语言"""
    for key in (
        "LOCFILE_SOURCE", "LOCFILE_MAP_OUTPUT", "LOCFILE_TRANSLATION_MAP",
        "LOCFILE_OUTPUT", "LOCFILE_BACKUP", "LOCFILE_CONTEXT_WIDTH",
        "LOCFILE_PREFER_UTF8", "LOCFILE_SC_TABLE", "LOCFILE_LOG_LEVEL",
        "LOCFILE_DEBUG",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LOCFILE_LOG_FILE", str(tmp_path / "logs" / "test.log"))
    original_locale = get_locale()
    reset_config()
    yield
    teardown_logging()
    reset_config()
    set_locale(original_locale)


@pytest.fixture
def write_bytes(tmp_path):
    """在 tmp_path 下写入字节文件并返回路径"""

    def _write(name: str, data: bytes):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write

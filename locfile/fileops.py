"""文件操作：原子写入、备份、复制"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from .exceptions import BackupError, OutputWriteError, SourceReadError

logger = logging.getLogger(__name__)


def atomic_write_text(path: str | Path, text: str, encoding: str = "utf-8") -> None:
    """原子写入文本文件

    先写入同目录下的临时文件，成功后再 ``os.replace`` 到目标路径；
    失败时删除临时文件，目标文件保持原样。

    Raises:
        OutputWriteError: 目录无法创建或写入失败
    """
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=p.parent, prefix=f".{p.name}.", suffix=".tmp")
    except OSError as e:
        raise OutputWriteError(file_path=str(p), reason=str(e)) from e

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
        os.replace(tmp_path, p)
    except (OSError, UnicodeEncodeError) as e:
        try:
            os.unlink(tmp_path)
        except OSError:
            logger.debug("Temp file %s already gone", tmp_path)
        raise OutputWriteError(file_path=str(p), reason=str(e)) from e

    logger.debug("Atomically wrote %s", p)


def backup_file(src: str | Path, dst: str | Path) -> None:
    """把 ``src`` 移动到 ``dst``，已有备份会被替换

    Raises:
        BackupError: 源文件不存在或移动失败
    """
    src_path, dst_path = Path(src), Path(dst)
    if not src_path.exists():
        raise BackupError(src=str(src_path), dst=str(dst_path), reason="source file does not exist")

    try:
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        os.replace(src_path, dst_path)
    except OSError as e:
        raise BackupError(src=str(src_path), dst=str(dst_path), reason=str(e)) from e

    logger.info("Backed up %s -> %s", src_path, dst_path)


def copy_file(src: str | Path, dst: str | Path) -> None:
    """复制文件，必要时创建目标目录

    Raises:
        SourceReadError: 源文件不存在或不可读
        OutputWriteError: 目标无法写入
    """
    src_path, dst_path = Path(src), Path(dst)
    if not src_path.is_file():
        raise SourceReadError(file_path=str(src_path), reason="file does not exist")

    try:
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src_path, dst_path)
    except PermissionError as e:
        if not os.access(src_path, os.R_OK):
            raise SourceReadError(file_path=str(src_path), reason=str(e)) from e
        raise OutputWriteError(file_path=str(dst_path), reason=str(e)) from e
    except OSError as e:
        raise OutputWriteError(file_path=str(dst_path), reason=str(e)) from e

    logger.info("Copied %s -> %s", src_path, dst_path)

"""本地化工具异常模块
定义提取、扫描、翻译各步骤中的致命错误类型

格式错误的行和编码尝试失败不属于异常：前者记录为警告，后者只是
让该编码候选被排除。这里的异常都表示本次运行必须中止。
"""

from i18n import t as _t


class LocfileError(Exception):
    """本地化工具异常基类

    所有工具相关的异常都应该继承此类，
    提供统一的异常处理接口。
    """

    def __init__(self, message: str, details: dict | None = None):
        """初始化异常

        Args:
            message: 错误消息
            details: 额外的错误详情（可选）
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== 文件 I/O 异常 ====================


class SourceReadError(LocfileError):
    """源文件读取异常

    当源 INI 文件不存在或无法读取时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.source_read")
        details = {}
        if file_path:
            details["file_path"] = file_path
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.file_path = file_path
        self.reason = reason


class MapLoadError(LocfileError):
    """翻译映射加载异常

    当映射文件缺失、JSON 格式错误或内容不是字符串映射时抛出
    """

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.map_load")
        details = {}
        if file_path:
            details["file_path"] = file_path
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.file_path = file_path
        self.reason = reason


class OutputWriteError(LocfileError):
    """输出写入异常

    当目标文件或临时文件无法写入时抛出；原目标文件保持不变
    """

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.output_write")
        details = {}
        if file_path:
            details["file_path"] = file_path
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.file_path = file_path
        self.reason = reason


class BackupError(LocfileError):
    """备份异常

    当待备份文件不存在或无法移动时抛出。翻译流程将其视为警告
    """

    def __init__(
        self,
        message: str | None = None,
        src: str | None = None,
        dst: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.backup_failed")
        details = {}
        if src:
            details["src"] = src
        if dst:
            details["dst"] = dst
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.src = src
        self.dst = dst
        self.reason = reason


# ==================== 配置异常 ====================


class ConfigurationError(LocfileError):
    """配置错误异常

    当工具配置校验失败时抛出
    """

    def __init__(self, message: str | None = None, config_key: str | None = None):
        if message is None:
            message = _t("exc.config_error")
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key

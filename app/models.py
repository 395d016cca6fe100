from enum import Enum
from dataclasses import dataclass


# 枚举定义

class DbStatus(str, Enum):
    success = "SUCCESS"
    failed = "FAILED"
    error = "ERROR"


# 探测结果：三种互斥结果之一，只有 error 带消息

@dataclass(frozen=True)
class ProbeResult:
    status: DbStatus
    message: str = ""

    @classmethod
    def success(cls) -> "ProbeResult":
        return cls(DbStatus.success)

    @classmethod
    def failed(cls) -> "ProbeResult":
        return cls(DbStatus.failed)

    @classmethod
    def error(cls, message: str) -> "ProbeResult":
        return cls(DbStatus.error, message)

    @property
    def ok(self) -> bool:
        return self.status is DbStatus.success

    @property
    def text(self) -> str:
        """响应体文本，例如 "DB Connection: ERROR - Connection refused" """
        if self.status is DbStatus.error:
            return f"DB Connection: {self.status.value} - {self.message}"
        return f"DB Connection: {self.status.value}"

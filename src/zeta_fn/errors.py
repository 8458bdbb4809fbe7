"""에러 타입 정의"""
from dataclasses import dataclass


class PipelineArityError(TypeError):
    """파이프라인 단계 수 오류"""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"pipe() requires at least one stage, got {count}")


@dataclass(frozen=True)
class ConfigError:
    """설정 에러 (값으로 반환됨)"""
    field: str
    message: str
    code: str = "CONFIG_ERROR"


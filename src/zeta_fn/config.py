"""설정 타입 (Pydantic + YAML)"""
from pathlib import Path
from typing import Literal
from pydantic import BaseModel, Field, ValidationError
import yaml

from zeta_fn.result import Result, Success, Failure, bind
from zeta_fn.errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


# ============================================================
# 트레이스 / 로깅 설정
# ============================================================

class TraceConfig(BaseModel):
    """파이프라인 트레이스 설정"""
    enabled: bool = False
    level: LogLevel = "DEBUG"
    max_length: int = Field(default=10, ge=1, le=1000)  # 컨테이너 항목 수
    max_string: int = Field(default=80, ge=8, le=10000)  # 문자열 길이
    rich: bool = False

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """로거 설정"""
    name: str = "zeta_fn"
    level: LogLevel = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = {"frozen": True}


class FnConfig(BaseModel):
    """전체 설정"""
    trace: TraceConfig = Field(default_factory=TraceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}


# ============================================================
# YAML 로더 (순수 함수)
# ============================================================

DEFAULT_PATHS = (
    Path("zeta-fn.yaml"),
    Path("zeta-fn.yml"),
    Path.home() / ".config" / "zeta-fn" / "config.yaml",
)


def load_yaml(path: Path) -> Result[dict, ConfigError]:
    """YAML 파일 로드"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return Failure(ConfigError(
            field="config_path",
            message=f"Config file not found: {path}",
        ))
    except yaml.YAMLError as e:
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Invalid YAML: {e}",
        ))
    if data is not None and not isinstance(data, dict):
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Top-level YAML must be a mapping, got {type(data).__name__}",
        ))
    return Success(data or {})


def parse_config(data: dict) -> Result[FnConfig, ConfigError]:
    """딕셔너리를 FnConfig로 파싱"""
    try:
        return Success(FnConfig(**data))
    except ValidationError as e:
        return Failure(ConfigError(
            field="config",
            message=str(e),
        ))


def load_config(path: Path | str | None = None) -> Result[FnConfig, ConfigError]:
    """
    설정 로드 (YAML + 기본값)

    path가 없으면 기본 경로들을 탐색하고, 파일이 없으면 기본값을 사용한다.
    """
    if path is None:
        path = next((p for p in DEFAULT_PATHS if p.exists()), None)

    if path is None:
        return Success(FnConfig())

    return bind(load_yaml(Path(path)), parse_config)


def merge_config(base: FnConfig, overrides: dict) -> FnConfig:
    """설정 병합 (중첩 딕셔너리)"""
    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    return FnConfig(**deep_merge(base.model_dump(), overrides))

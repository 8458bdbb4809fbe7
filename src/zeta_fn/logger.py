"""프로젝트 로거 설정"""
import logging
import os
import sys

from rich.logging import RichHandler

from zeta_fn.config import LoggingConfig

__all__ = ["setup_logger", "logger_from_config"]


def setup_logger(
    name: str = "zeta_fn",
    level: str | None = None,
    format_string: str | None = None,
    use_rich: bool = False,
) -> logging.Logger:
    """
    로거 구성 후 반환

    Args:
        name: 로거 이름
        level: 로그 레벨 (없으면 ZETA_FN_LOG_LEVEL, 기본 INFO)
        format_string: 로그 포맷
        use_rich: True면 rich 핸들러 사용

    Returns:
        구성된 로거
    """
    level = level or os.getenv("ZETA_FN_LOG_LEVEL", "INFO")
    format_string = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger(name)

    # 이미 구성된 로거는 건드리지 않음
    if not logger.handlers:
        if use_rich:
            handler: logging.Handler = RichHandler(show_path=False)
            handler.setFormatter(logging.Formatter("%(message)s"))
        else:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


def logger_from_config(config: LoggingConfig, use_rich: bool = False) -> logging.Logger:
    """LoggingConfig로 로거 구성"""
    return setup_logger(
        name=config.name,
        level=config.level,
        format_string=config.format,
        use_rich=use_rich,
    )

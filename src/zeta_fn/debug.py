"""파이프라인 트레이스 (디버깅용)

핵심 조합자는 로그를 남기지 않는다. 값의 흐름을 보고 싶을 때만
`trace` 단계를 끼우거나 `traced_pipe`를 사용한다.
"""
import logging
from typing import Any, Callable, TypeVar

from rich.pretty import pretty_repr

from zeta_fn.config import FnConfig, load_config
from zeta_fn.errors import PipelineArityError
from zeta_fn.function import Pipeline, pipe, stage_name
from zeta_fn.logger import logger_from_config
from zeta_fn.result import unwrap_or

A = TypeVar('A')


class TraceStage:
    """
    값을 로그로 남기고 그대로 반환하는 단계

    logger가 None이면 로그 없이 값만 통과시킨다. 함수가 아닌 객체이므로
    메서드 파이프라인 안에서도 receiver에 바인딩되지 않는다.
    """

    def __init__(self, label: str, config: FnConfig, logger: logging.Logger | None) -> None:
        self.label = label
        self.__name__ = f"trace[{label}]"
        self._config = config.trace
        self._level = logging.getLevelName(config.trace.level)
        self._logger = logger

    @property
    def enabled(self) -> bool:
        return self._logger is not None

    def __call__(self, value: A) -> A:
        if self._logger is not None and self._logger.isEnabledFor(self._level):
            rendered = pretty_repr(
                value,
                max_length=self._config.max_length,
                max_string=self._config.max_string,
            )
            self._logger.log(self._level, "%s: %s", self.label, rendered)
        return value

    def __repr__(self) -> str:
        return f"TraceStage({self.label!r})"


def _resolve(config: FnConfig | None, logger: logging.Logger | None) -> tuple[FnConfig, logging.Logger | None]:
    config = config or unwrap_or(load_config(), FnConfig())
    if not config.trace.enabled:
        return config, None
    return config, logger or logger_from_config(config.logging, use_rich=config.trace.rich)


def tracer(
    config: FnConfig | None = None,
    logger: logging.Logger | None = None,
) -> Callable[[str], TraceStage]:
    """
    설정을 한 번만 읽고 라벨별 트레이스 단계를 만드는 팩토리

    config가 없으면 `load_config()` 결과(실패 시 기본값)를 사용한다.
    """
    config, logger = _resolve(config, logger)

    def make(label: str) -> TraceStage:
        return TraceStage(label, config, logger)
    return make


def trace(
    label: str,
    config: FnConfig | None = None,
    logger: logging.Logger | None = None,
) -> TraceStage:
    """트레이스 단계 생성 (꺼져 있으면 값만 통과)"""
    return tracer(config, logger)(label)


def traced_pipe(
    *stages: Callable[[Any], Any],
    config: FnConfig | None = None,
    logger: logging.Logger | None = None,
) -> Pipeline[Any, Any]:
    """입력과 각 단계의 출력을 로그로 남기는 pipe"""
    if not stages:
        raise PipelineArityError(0)

    config, logger = _resolve(config, logger)
    if logger is None:
        return pipe(*stages)

    make = tracer(config, logger)
    traced: list[Callable[[Any], Any]] = [make("input")]
    for stage in stages:
        traced.append(stage)
        traced.append(make(stage_name(stage)))
    return pipe(*traced)

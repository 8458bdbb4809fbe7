"""Zeta Fn - 함수 조합자 라이브러리"""
from zeta_fn.function import (
    # Types
    Lazy, FunctionN, Predicate, Refinement,
    Endomorphism, BinaryOperation, Kleisli, Cokleisli,
    Curried2, Curried3, Curried4, Curried5,
    Curried6, Curried7, Curried8, Curried9,
    # Producers
    identity, unsafe_coerce, constant,
    const_true, const_false, const_null, const_undefined, const_void,
    # Predicates
    not_, or_, and_,
    # Argument order
    flip, on, apply, apply_flipped, tuple_,
    # Pipeline
    Pipeline, pipe,
    # Misc
    phantom, increment, decrement,
)
from zeta_fn.hkt import HKT
from zeta_fn.result import (
    Result, Success, Failure,
    bind, unwrap_or,
)
from zeta_fn.errors import PipelineArityError, ConfigError
from zeta_fn.config import (
    TraceConfig, LoggingConfig, FnConfig,
    load_yaml, parse_config, load_config, merge_config,
)
from zeta_fn.logger import setup_logger, logger_from_config
from zeta_fn.debug import TraceStage, tracer, trace, traced_pipe

__version__ = "0.1.0"

__all__ = [
    # Types
    "Lazy", "FunctionN", "Predicate", "Refinement",
    "Endomorphism", "BinaryOperation", "Kleisli", "Cokleisli", "HKT",
    "Curried2", "Curried3", "Curried4", "Curried5",
    "Curried6", "Curried7", "Curried8", "Curried9",
    # Producers
    "identity", "unsafe_coerce", "constant",
    "const_true", "const_false", "const_null", "const_undefined", "const_void",
    # Predicates
    "not_", "or_", "and_",
    # Argument order
    "flip", "on", "apply", "apply_flipped", "tuple_",
    # Pipeline
    "Pipeline", "pipe",
    # Misc
    "phantom", "increment", "decrement",
    # Result
    "Result", "Success", "Failure",
    "bind", "unwrap_or",
    # Errors
    "PipelineArityError", "ConfigError",
    # Config
    "TraceConfig", "LoggingConfig", "FnConfig",
    "load_yaml", "parse_config", "load_config", "merge_config",
    # Debug
    "setup_logger", "logger_from_config",
    "TraceStage", "tracer", "trace", "traced_pipe",
]

"""설정 로딩용 Result 값 (Success | Failure)"""
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E


Result = Union[Success[T], Failure[E]]


def bind(result: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Success면 다음 단계로 넘기고, Failure는 그대로 둔다"""
    if isinstance(result, Failure):
        return result
    return f(result.value)


def unwrap_or(result: Result[T, E], default: T) -> T:
    """Failure면 기본값"""
    return result.value if isinstance(result, Success) else default

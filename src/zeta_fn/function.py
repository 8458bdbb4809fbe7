"""함수 조합자 (순수 함수, 상태 없음)"""
from typing import (
    Any, Callable, Generic, ParamSpec, TypeGuard, TypeVar, TypeVarTuple,
    overload,
)

from zeta_fn.errors import PipelineArityError
from zeta_fn.hkt import HKT

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')
E = TypeVar('E')
F = TypeVar('F')
G = TypeVar('G')
H = TypeVar('H')
I = TypeVar('I')  # noqa: E741
J = TypeVar('J')
B1 = TypeVar('B1')
B2 = TypeVar('B2')
N = TypeVar('N', int, float)
P = ParamSpec('P')
Ts = TypeVarTuple('Ts')


# ============================================================
# 함수 형태 (타입 별칭)
# ============================================================

# 썽크: 호출될 때까지 계산을 미룬다
Lazy = Callable[[], A]

# n-인자 함수
FunctionN = Callable[P, B]

Predicate = Callable[[A], bool]

# True면 입력이 B로 좁혀짐을 타입 검사기에 알리는 술어
Refinement = Callable[[A], TypeGuard[B]]

Endomorphism = Callable[[A], A]

BinaryOperation = Callable[[A, A], B]

Kleisli = Callable[[A], HKT[F, B]]
Cokleisli = Callable[[HKT[F, A]], B]

# 커링된 함수: 인자를 하나씩 받아 마지막 인자에서 결과를 낸다
Curried2 = Callable[[A], Callable[[B], C]]
Curried3 = Callable[[A], Callable[[B], Callable[[C], D]]]
Curried4 = Callable[[A], Callable[[B], Callable[[C], Callable[[D], E]]]]
Curried5 = Callable[[A], Callable[[B], Callable[[C], Callable[[D], Callable[[E], F]]]]]
Curried6 = Callable[
    [A], Callable[[B], Callable[[C], Callable[[D], Callable[[E], Callable[[F], G]]]]]
]
Curried7 = Callable[
    [A],
    Callable[[B], Callable[[C], Callable[[D], Callable[[E], Callable[[F], Callable[[G], H]]]]]],
]
Curried8 = Callable[
    [A],
    Callable[
        [B],
        Callable[[C], Callable[[D], Callable[[E], Callable[[F], Callable[[G], Callable[[H], I]]]]]],
    ],
]
Curried9 = Callable[
    [A],
    Callable[
        [B],
        Callable[
            [C],
            Callable[[D], Callable[[E], Callable[[F], Callable[[G], Callable[[H], Callable[[I], J]]]]]],
        ],
    ],
]


# ============================================================
# 항등 / 상수
# ============================================================

def identity(a: A) -> A:
    """항등 함수"""
    return a


def unsafe_coerce(a: A) -> B:  # type: ignore[type-var]
    """
    타입 검사를 우회하는 강제 변환 (위험)

    런타임에서는 `identity`와 같다. 실제 타입이 B가 아니면 잘못된 동작은
    변환 시점이 아니라 값을 B로 사용하는 지점에서 나타난다.
    안전성은 호출자가 책임진다.
    """
    return a  # type: ignore[return-value]


def constant(a: A) -> Lazy[A]:
    """항상 a를 반환하는 썽크"""
    return lambda *_: a


# 썽크는 인자를 무시하므로 술어 자리에도 쓸 수 있다
def const_true(*_: object) -> bool:
    """항상 True"""
    return True


def const_false(*_: object) -> bool:
    """항상 False"""
    return False


def const_null(*_: object) -> None:
    """항상 None"""
    return None


# Python에는 "값 없음"이 None 하나뿐이므로 같은 함수다
const_undefined = const_null
const_void = const_null


# ============================================================
# 술어 대수
# ============================================================

def not_(predicate: Predicate[A]) -> Predicate[A]:
    """술어 부정"""
    return lambda a: not predicate(a)


@overload
def or_(p1: Refinement[A, B1], p2: Refinement[A, B2]) -> Refinement[A, B1 | B2]: ...
@overload
def or_(p1: Predicate[A], p2: Predicate[A]) -> Predicate[A]: ...
def or_(p1: Predicate[A], p2: Predicate[A]) -> Predicate[A]:
    """단락 평가 OR: p1이 True면 p2는 호출하지 않는다"""
    return lambda a: bool(p1(a) or p2(a))


def and_(p1: Predicate[A], p2: Predicate[A]) -> Predicate[A]:
    """단락 평가 AND: p1이 False면 p2는 호출하지 않는다"""
    return lambda a: bool(p1(a) and p2(a))


# ============================================================
# 인자 순서
# ============================================================

def flip(f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """2인자 함수의 인자 순서 뒤집기"""
    return lambda b, a: f(a, b)


def on(op: BinaryOperation[B, C]) -> Callable[[Callable[[A], B]], BinaryOperation[A, C]]:
    """
    이항 연산의 정의역 변경

    두 피연산자에 f를 먼저 적용한 뒤 op로 결합한다.
    예: `on(operator.eq)(len)("ab", "cd")` -> True
    """
    def with_projection(f: Callable[[A], B]) -> BinaryOperation[A, C]:
        return lambda x, y: op(f(x), f(y))
    return with_projection


def apply(f: Callable[[A], B]) -> Callable[[A], B]:
    """함수에 인자 적용 ($)"""
    return lambda a: f(a)


def apply_flipped(a: A) -> Callable[[Callable[[A], B]], B]:
    """인자에 함수 적용 (#)"""
    return lambda f: f(a)


def tuple_(*items: *Ts) -> tuple[*Ts]:
    """위치 인자를 고정 길이 튜플로 묶기 (각 위치의 타입 유지)"""
    return items


# ============================================================
# 파이프라인
# ============================================================

def stage_name(stage: Callable[..., Any]) -> str:
    """로그/repr용 단계 이름"""
    return getattr(stage, '__name__', None) or repr(stage)


def _is_member(stage: object, owner: type) -> bool:
    """stage가 owner(또는 부모 클래스)에 정의된 속성인지"""
    if isinstance(stage, (classmethod, staticmethod)):
        return True
    return any(
        stage is value
        for klass in owner.__mro__
        for value in vars(klass).values()
    )


def _bind(stage: Callable[[Any], Any], receiver: object, owner: type) -> Callable[[Any], Any]:
    """클래스에 정의된 메서드 단계만 receiver에 바인딩"""
    binder = getattr(type(stage), '__get__', None)
    if binder is None or not _is_member(stage, owner):
        return stage
    return binder(stage, receiver, owner)


class Pipeline(Generic[A, B]):
    """
    왼쪽에서 오른쪽으로 합성된 함수

    클래스 속성으로 두면 메서드처럼 동작한다. 인스턴스로 호출하면
    그 클래스에 정의된 메서드 단계는 같은 receiver에 바인딩되고,
    나머지 단계(자유 함수, 내장 함수 등)는 값 하나만 받는다.
    """

    def __init__(self, stages: tuple[Callable[[Any], Any], ...]) -> None:
        self.stages = stages
        self._calls = stages

    def __call__(self, x: A) -> B:
        value: Any = x
        for call in self._calls:
            value = call(value)
        return value

    def __get__(self, instance: object, owner: type | None = None) -> 'Pipeline[A, B]':
        if instance is None:
            return self
        owner = owner or type(instance)
        bound: Pipeline[A, B] = Pipeline(self.stages)
        bound._calls = tuple(_bind(stage, instance, owner) for stage in self.stages)
        return bound

    def __repr__(self) -> str:
        names = ', '.join(stage_name(stage) for stage in self.stages)
        return f"Pipeline({names})"


@overload
def pipe(ab: Callable[[A], B]) -> Pipeline[A, B]: ...
@overload
def pipe(ab: Callable[[A], B], bc: Callable[[B], C]) -> Pipeline[A, C]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D]
) -> Pipeline[A, D]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D],
    de: Callable[[D], E],
) -> Pipeline[A, E]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D],
    de: Callable[[D], E], ef: Callable[[E], F],
) -> Pipeline[A, F]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D],
    de: Callable[[D], E], ef: Callable[[E], F], fg: Callable[[F], G],
) -> Pipeline[A, G]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D],
    de: Callable[[D], E], ef: Callable[[E], F], fg: Callable[[F], G],
    gh: Callable[[G], H],
) -> Pipeline[A, H]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D],
    de: Callable[[D], E], ef: Callable[[E], F], fg: Callable[[F], G],
    gh: Callable[[G], H], hi: Callable[[H], I],
) -> Pipeline[A, I]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D],
    de: Callable[[D], E], ef: Callable[[E], F], fg: Callable[[F], G],
    gh: Callable[[G], H], hi: Callable[[H], I], ij: Callable[[I], J],
) -> Pipeline[A, J]: ...
def pipe(*stages: Callable[[Any], Any]) -> Pipeline[Any, Any]:
    """
    왼쪽에서 오른쪽으로 함수 합성

    `pipe(f, g, h)(x) == h(g(f(x)))`. 단계에서 발생한 예외는 그대로 전파되며
    이후 단계는 호출되지 않는다.
    """
    if not stages:
        raise PipelineArityError(0)
    return Pipeline(stages)


# ============================================================
# 기타
# ============================================================

# 팬텀 필드용 자리표시자 (런타임에 검사하지 말 것)
phantom: Any = None


def increment(n: N) -> N:
    return n + 1


def decrement(n: N) -> N:
    return n - 1

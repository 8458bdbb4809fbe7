"""고차 타입(HKT) 위트니스

Python에는 고차 제네릭이 없으므로 `HKT[F, A]`로 "F로 감싼 A"를 표현한다.
F는 효과를 식별하는 URI 타입(태그)이고, 이 모듈은 값을 생성하거나 검사하지 않는다.
"""
from typing import Generic, TypeVar

F = TypeVar('F')
A = TypeVar('A', covariant=True)


class HKT(Generic[F, A]):
    """효과 F에 담긴 A 값의 타입 수준 표현 (불투명)"""

    __slots__ = ()

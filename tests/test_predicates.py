import pytest

from zeta_fn import not_, or_, and_, const_true, const_false

is_even = lambda n: n % 2 == 0
is_positive = lambda n: n > 0

NUMBERS = [-4, -1, 0, 1, 2, 7]


def make_probe(result):
    """호출 횟수를 세는 술어"""
    calls = []

    def probe(value):
        calls.append(value)
        return result

    return probe, calls


@pytest.mark.parametrize("n", NUMBERS)
def test_not_negates(n):
    assert not_(is_even)(n) is (not is_even(n))


@pytest.mark.parametrize("n", NUMBERS)
def test_double_negation(n):
    assert not_(not_(is_even))(n) == is_even(n)


@pytest.mark.parametrize("n", NUMBERS)
def test_identity_elements(n):
    assert and_(const_true, is_positive)(n) == is_positive(n)
    assert or_(const_false, is_positive)(n) == is_positive(n)


@pytest.mark.parametrize("n", NUMBERS)
def test_or_and_truth_table(n):
    assert or_(is_even, is_positive)(n) == (is_even(n) or is_positive(n))
    assert and_(is_even, is_positive)(n) == (is_even(n) and is_positive(n))


def test_or_short_circuits():
    probe, calls = make_probe(False)
    assert or_(lambda _: True, probe)(1) is True
    assert calls == []

    assert or_(lambda _: False, probe)(2) is False
    assert calls == [2]


def test_and_short_circuits():
    probe, calls = make_probe(True)
    assert and_(lambda _: False, probe)(1) is False
    assert calls == []

    assert and_(lambda _: True, probe)(2) is True
    assert calls == [2]


def test_results_are_bool():
    assert or_(lambda s: s, lambda s: s)("x") is True
    assert and_(lambda s: s, lambda s: s)("") is False


def test_refinements_combine_to_union():
    is_int = lambda x: isinstance(x, int)
    is_str = lambda x: isinstance(x, str)
    int_or_str = or_(is_int, is_str)
    assert [x for x in (1, "a", 2.5, None) if int_or_str(x)] == [1, "a"]


def test_predicate_errors_propagate():
    def boom(_):
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        not_(boom)(1)
    with pytest.raises(ValueError):
        or_(const_false, boom)(1)

from typing import Any

import pytest

from categorica.category import CompactClosedCategory, CompositionError, DaggerCategory
from categorica.finset import FinSet, FiniteSet, ListMonad, PowerSetFunctor, SetFunction
from categorica.functor import IdentityFunctor
from categorica.monad import MaybeMonad
from categorica.verifier import LawVerifier, verify_laws


class _PointCategory(CompactClosedCategory):
    """One object, one morphism: every law holds trivially."""

    def domain(self, f: Any) -> Any:
        return "*"

    def codomain(self, f: Any) -> Any:
        return "*"

    def identity(self, obj: Any) -> Any:
        return "id"

    def compose(self, f: Any, g: Any) -> Any:
        return "id"

    def unit(self) -> Any:
        return "*"

    def tensor_objects(self, a: Any, b: Any) -> Any:
        return "*"

    def tensor_morphisms(self, f: Any, g: Any) -> Any:
        return "id"

    def left_unitor(self, a: Any) -> Any:
        return "id"

    def right_unitor(self, a: Any) -> Any:
        return "id"

    def associator(self, a: Any, b: Any, c: Any) -> Any:
        return "id"

    def braiding(self, a: Any, b: Any) -> Any:
        return "id"

    def dual(self, a: Any) -> Any:
        return "*"

    def unit_morphism(self, a: Any) -> Any:
        return "id"

    def counit_morphism(self, a: Any) -> Any:
        return "id"


class _IntegerGroup(DaggerCategory):
    """The integers under addition as a one-object category."""

    def __init__(self, dagger_shift: int = 0) -> None:
        self.dagger_shift = dagger_shift

    def domain(self, f: int) -> Any:
        return None

    def codomain(self, f: int) -> Any:
        return None

    def identity(self, obj: Any) -> int:
        return 0

    def compose(self, f: int, g: int) -> int:
        return f + g

    def dagger(self, f: int) -> int:
        return -f + self.dagger_shift


@pytest.fixture
def finset() -> FinSet:
    return FinSet()


@pytest.fixture
def sets() -> tuple[FiniteSet, FiniteSet, FiniteSet]:
    return FiniteSet.range(1, 4), FiniteSet.range(10, 13), FiniteSet.range(20, 23)


@pytest.fixture
def functions(sets):
    a, b, c = sets
    f = SetFunction.create(a, b, {1: 10, 2: 11, 3: 12})
    g = SetFunction.create(b, c, {10: 20, 11: 21, 12: 20})
    return f, g


def test_verify_laws_returns_working_verifier(finset, sets):
    verifier = verify_laws()
    a = sets[0]
    assert verifier.verify_category(finset, [a], [(finset.identity(a), 0, 0)]) is True


def test_verify_category_with_endomorphisms(finset, sets):
    a = sets[0]
    swap = SetFunction.create(a, a, {1: 2, 2: 1, 3: 3})
    morphisms = [(swap, 0, 0), (finset.identity(a), 0, 0)]
    assert LawVerifier().verify_category(finset, [a], morphisms) is True


def test_verify_category_rejects_cross_object_identity_order(finset, sets, functions):
    a, b, _ = sets
    f, _ = functions
    # compose(f, id_A) does not typecheck when A differs from B.
    assert LawVerifier().verify_category(finset, [a, b], [(f, 0, 1)]) is False


def test_verify_monoidal(finset):
    verifier = LawVerifier()
    assert verifier.verify_monoidal(finset, [FiniteSet.range(1, 3)]) is True
    assert verifier.verify_monoidal(finset, []) is False


def test_verify_symmetric_monoidal(finset):
    verifier = LawVerifier()
    assert verifier.verify_symmetric_monoidal(finset, [FiniteSet.range(1, 3)]) is True
    assert verifier.verify_symmetric_monoidal(finset, []) is False


def test_verify_compact_closed():
    verifier = LawVerifier()
    assert verifier.verify_compact_closed(_PointCategory(), ["*"]) is True
    assert verifier.verify_compact_closed(_PointCategory(), []) is False


def test_verify_dagger():
    verifier = LawVerifier()
    assert verifier.verify_dagger(_IntegerGroup(), [1, -2, 5]) is True
    assert verifier.verify_dagger(_IntegerGroup(dagger_shift=1), [1, -2, 5]) is False
    assert verifier.verify_dagger(_IntegerGroup(), []) is False


def test_verify_functor_identity_and_power_set(finset, sets, functions):
    verifier = LawVerifier()
    f, g = functions
    objects = list(sets)
    assert verifier.verify_functor(IdentityFunctor(), finset, finset, objects, [f, g]) is True
    assert verifier.verify_functor(PowerSetFunctor(), finset, finset, objects, [f, g]) is True


def test_point_category_composes_to_identity():
    point = _PointCategory()
    assert point.compose("id", "id") == point.identity("*")
    assert LawVerifier().verify_category(point, ["*"], [("id", 0, 0)]) is True


def test_finset_compose_mismatch_raises(finset, functions):
    f, g = functions
    with pytest.raises(CompositionError):
        finset.compose(g, f)
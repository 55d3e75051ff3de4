from dataclasses import dataclass

import pytest

from categorica.category import Category, CompositionError
from categorica.functor import (
    ConstantFunctor,
    Functor,
    IdentityFunctor,
    IdentityNaturalTransformation,
    NaturalTransformation,
)


@dataclass(frozen=True)
class Fn:
    domain: frozenset
    codomain: frozenset
    pairs: frozenset


def fn(domain, codomain, mapping):
    return Fn(frozenset(domain), frozenset(codomain), frozenset(mapping.items()))


class Sets(Category):
    def domain(self, f):
        return f.domain

    def codomain(self, f):
        return f.codomain

    def identity(self, obj):
        return Fn(obj, obj, frozenset((x, x) for x in obj))

    def compose(self, f, g):
        if f.codomain != g.domain:
            raise CompositionError("codomain of f differs from domain of g")
        g_map = dict(g.pairs)
        return Fn(f.domain, g.codomain, frozenset((x, g_map[y]) for x, y in f.pairs))


class Doubling(Functor):
    def map_object(self, c, d, obj):
        return frozenset(2 * x for x in obj)

    def map_morphism(self, c, d, f):
        return Fn(
            self.map_object(c, d, f.domain),
            self.map_object(c, d, f.codomain),
            frozenset((2 * x, 2 * y) for x, y in f.pairs),
        )


class ObjectsOnly(Functor):
    """Doubles objects but leaves morphisms alone."""

    def map_object(self, c, d, obj):
        return frozenset(2 * x for x in obj)

    def map_morphism(self, c, d, f):
        return f


class Widening(Functor):
    """Adds an extra element to every codomain, breaking composability."""

    def map_object(self, c, d, obj):
        return obj

    def map_morphism(self, c, d, f):
        return Fn(f.domain, f.codomain | {-1}, f.pairs)


class Misplaced(NaturalTransformation):
    def component(self, c, d, f, g, obj):
        return d.identity(frozenset({-5}))


SETS = Sets()
A = frozenset({1, 2})
B = frozenset({10, 11})
C = frozenset({20})
F = fn(A, B, {1: 10, 2: 11})
G = fn(B, C, {10: 20, 11: 20})
SWAP = fn(A, A, {1: 2, 2: 1})


def test_doubling_preserves_identity_and_composition():
    doubling = Doubling()
    assert Functor.preserves_identity(doubling, SETS, SETS, A) is True
    assert Functor.preserves_composition(doubling, SETS, SETS, F, G) is True


def test_doubling_satisfies_functor_laws():
    assert Functor.verify_functor_laws(Doubling(), SETS, SETS, [A, B, C], [F, G, SWAP]) is True


def test_preserves_composition_vacuous_when_not_composable():
    assert Functor.preserves_composition(Widening(), SETS, SETS, G, F) is True


def test_preserves_composition_fails_when_images_do_not_compose():
    assert Functor.preserves_composition(Widening(), SETS, SETS, F, G) is False
    assert Functor.verify_functor_laws(Widening(), SETS, SETS, [A], [F, G]) is False


def test_objects_only_breaks_domain_and_codomain():
    functor = ObjectsOnly()
    assert Functor.preserves_domain(functor, SETS, SETS, F) is False
    assert Functor.preserves_codomain(functor, SETS, SETS, F) is False
    assert Functor.preserves_identity(functor, SETS, SETS, A) is False


def test_identity_functor_returns_inputs():
    identity = IdentityFunctor()
    assert identity.map_object(SETS, SETS, A) == A
    assert identity.map_morphism(SETS, SETS, F) == F
    assert identity.verify_functor_laws(SETS, SETS, [A, B, C], [F, G])


def test_constant_functor_maps_everything_to_one_object():
    constant = ConstantFunctor(SETS, C)
    assert constant.map_object(SETS, SETS, A) == C
    assert constant.map_morphism(SETS, SETS, F) == SETS.identity(C)
    assert constant.verify_functor_laws(SETS, SETS, [A, B], [F, G, SWAP])


def test_identity_transformation_component_is_identity_on_image():
    doubling = Doubling()
    eta = IdentityNaturalTransformation()
    component = eta.component(SETS, SETS, doubling, doubling, A)
    assert component == SETS.identity(doubling.map_object(SETS, SETS, A))


def test_identity_transformation_is_natural_on_endomorphisms():
    identity = IdentityFunctor()
    eta = IdentityNaturalTransformation()
    assert eta.is_natural(SETS, SETS, identity, identity, SWAP)
    assert eta.verify_naturality(SETS, SETS, identity, identity, [SWAP, SETS.identity(B)])


def test_identity_transformation_has_valid_components():
    doubling = Doubling()
    eta = IdentityNaturalTransformation()
    assert eta.has_valid_components(SETS, SETS, doubling, doubling, [A, B, C])


def test_misplaced_components_are_rejected():
    identity = IdentityFunctor()
    bad = Misplaced()
    assert bad.has_valid_components(SETS, SETS, identity, identity, [A]) is False
    assert bad.is_natural(SETS, SETS, identity, identity, SWAP) is False
    assert bad.verify_naturality(SETS, SETS, identity, identity, [SWAP]) is False


def test_functor_is_abstract():
    with pytest.raises(TypeError):
        Functor()
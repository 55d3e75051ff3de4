"""Checks of the coherence laws for categories and their monoidal refinements.

Morphisms passed to the category-level checks come as triples
``(morphism, source_index, target_index)``, where the indices point into the
list of test objects.  Composition follows :meth:`Category.compose`: the
first argument runs first.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import product
from typing import Any

from categorica.category import (
    Category,
    CompactClosedCategory,
    CompositionError,
    DaggerCategory,
    MonoidalCategory,
    SymmetricMonoidalCategory,
)

IndexedMorphism = tuple[Any, int, int]

_FAILED = object()


def _compose_or_fail(category: Category, f: Any, g: Any) -> Any:
    """Compose ``f`` then ``g``, or return the failure sentinel."""
    try:
        return category.compose(f, g)
    except CompositionError:
        return _FAILED


def _identity_law_holds(category: Category, f: Any, source: Any, target: Any) -> bool:
    id_source = category.identity(source)
    id_target = category.identity(target)
    try:
        with_source = category.compose(f, id_source)
        with_target = category.compose(id_target, f)
    except CompositionError:
        return False
    return with_source == f and with_target == f


def _associates(category: Category, f: Any, g: Any, h: Any) -> bool:
    try:
        g_f = category.compose(g, f)
        h_g = category.compose(h, g)
        h_g_f = category.compose(h, g_f)
        h_g_f_alt = category.compose(h_g, f)
    except CompositionError:
        # A triple that does not compose is inconclusive and counts as passing.
        return True
    return h_g_f == h_g_f_alt


def verify_category_laws(
    category: Category,
    test_objects: Iterable[Any],
    test_morphisms: Iterable[IndexedMorphism],
) -> bool:
    """Check the identity and associativity laws on the given morphisms."""
    objects = list(test_objects)
    morphisms = list(test_morphisms)

    identity_law = all(
        _identity_law_holds(category, f, objects[src], objects[tgt])
        for f, src, tgt in morphisms
    )

    composable_triples = [
        (f, g, h)
        for f, _, f_tgt in morphisms
        for g, g_src, g_tgt in morphisms
        for h, h_src, _ in morphisms
        if objects[f_tgt] == objects[g_src] and objects[g_tgt] == objects[h_src]
    ]
    associativity_law = all(_associates(category, f, g, h) for f, g, h in composable_triples)

    return identity_law and associativity_law


def _unitors_well_typed(category: MonoidalCategory, a: Any) -> bool:
    left = category.left_unitor(a)
    right = category.right_unitor(a)
    expected_left_domain = category.tensor_objects(category.unit(), a)
    expected_right_domain = category.tensor_objects(a, category.unit())
    return (
        category.domain(left) == expected_left_domain
        and category.codomain(left) == a
        and category.domain(right) == expected_right_domain
        and category.codomain(right) == a
    )


def _associator_well_typed(category: MonoidalCategory, a: Any, b: Any, c: Any) -> bool:
    alpha = category.associator(a, b, c)
    expected_domain = category.tensor_objects(category.tensor_objects(a, b), c)
    expected_codomain = category.tensor_objects(a, category.tensor_objects(b, c))
    return category.domain(alpha) == expected_domain and category.codomain(alpha) == expected_codomain


def _triangle_holds(category: MonoidalCategory, objects: list[Any]) -> bool:
    for a, b in product(objects, repeat=2):
        unit = category.unit()
        alpha = category.associator(a, b, unit)
        id_a = category.identity(a)
        rho_b_tensor_id_a = category.tensor_morphisms(category.right_unitor(b), id_a)
        id_a_tensor_lambda_b = category.tensor_morphisms(id_a, category.left_unitor(b))

        left_side = _compose_or_fail(category, rho_b_tensor_id_a, alpha)
        if left_side is not _FAILED and left_side != id_a_tensor_lambda_b:
            return False
    return True


def _pentagon_holds(category: MonoidalCategory, objects: list[Any]) -> bool:
    for a, b, c, d in product(objects, repeat=4):
        a_b = category.tensor_objects(a, b)
        b_c = category.tensor_objects(b, c)
        c_d = category.tensor_objects(c, d)

        path_1 = _compose_or_fail(
            category,
            category.associator(a_b, c, d),
            category.associator(a, b, c_d),
        )

        id_a_tensor_alpha_bcd = category.tensor_morphisms(
            category.identity(a), category.associator(b, c, d)
        )
        first_step = _compose_or_fail(
            category,
            category.associator(a_b, c, d),
            category.associator(a, b_c, d),
        )
        path_2 = (
            _FAILED
            if first_step is _FAILED
            else _compose_or_fail(category, first_step, id_a_tensor_alpha_bcd)
        )

        if path_1 is not _FAILED and path_2 is not _FAILED and path_1 != path_2:
            return False
    return True


def verify_monoidal_laws(category: MonoidalCategory, test_objects: Iterable[Any]) -> bool:
    """Check unitors, associator, triangle and pentagon on the given objects.

    Returns ``False`` when no objects are given.  The associator types are
    checked with at least three objects, the triangle with at least two and
    the pentagon with at least four.
    """
    objects = list(test_objects)
    if not objects:
        return False

    unit_laws = all(_unitors_well_typed(category, a) for a in objects)
    associativity_laws = len(objects) < 3 or all(
        _associator_well_typed(category, a, b, c) for a, b, c in product(objects, repeat=3)
    )
    triangle_identity = len(objects) < 2 or _triangle_holds(category, objects)
    pentagon_identity = len(objects) < 4 or _pentagon_holds(category, objects)

    return unit_laws and associativity_laws and triangle_identity and pentagon_identity


def _braiding_self_inverse(category: SymmetricMonoidalCategory, a: Any, b: Any) -> bool:
    braiding_ab = category.braiding(a, b)
    braiding_ba = category.braiding(b, a)
    id_a_tensor_b = category.identity(category.tensor_objects(a, b))
    composed = _compose_or_fail(category, braiding_ba, braiding_ab)
    return composed is not _FAILED and composed == id_a_tensor_b


def _hexagon_holds(category: SymmetricMonoidalCategory, objects: list[Any]) -> bool:
    for a, b, c in product(objects, repeat=3):
        a_b = category.tensor_objects(a, b)
        id_a_tensor_sigma_bc = category.tensor_morphisms(
            category.identity(a), category.braiding(b, c)
        )
        path_1 = _compose_or_fail(category, category.associator(a, b, c), id_a_tensor_sigma_bc)

        first_step = _compose_or_fail(
            category, category.braiding(a_b, c), category.associator(c, a, b)
        )
        path_2 = (
            _FAILED
            if first_step is _FAILED
            else _compose_or_fail(category, first_step, category.associator(a, c, b))
        )

        if path_1 is not _FAILED and path_2 is not _FAILED and path_1 != path_2:
            return False
    return True


def verify_symmetric_monoidal_laws(
    category: SymmetricMonoidalCategory, test_objects: Iterable[Any]
) -> bool:
    """Check that braiding is self-inverse and the hexagon identity holds.

    Returns ``False`` when no objects are given; the hexagon is checked with
    at least three objects.
    """
    objects = list(test_objects)
    if not objects:
        return False

    symmetry_law = all(_braiding_self_inverse(category, a, b) for a, b in product(objects, repeat=2))
    hexagon = len(objects) < 3 or _hexagon_holds(category, objects)
    return symmetry_law and hexagon


def verify_braiding_naturality(
    category: SymmetricMonoidalCategory,
    test_objects: Iterable[Any],
    test_morphisms: Iterable[IndexedMorphism],
) -> bool:
    """Check (g ⊗ f) after σ_{A,B} equals σ_{C,D} after (f ⊗ g) for all pairs.

    Returns ``False`` when there are no objects or no morphisms.
    """
    objects = list(test_objects)
    morphisms = list(test_morphisms)
    if not objects or not morphisms:
        return False

    for (f, f_src, f_tgt), (g, g_src, g_tgt) in product(morphisms, repeat=2):
        a, c = objects[f_src], objects[f_tgt]
        b, d = objects[g_src], objects[g_tgt]

        sigma_a_b = category.braiding(a, b)
        sigma_c_d = category.braiding(c, d)
        f_tensor_g = category.tensor_morphisms(f, g)
        g_tensor_f = category.tensor_morphisms(g, f)

        left_side = _compose_or_fail(category, sigma_a_b, g_tensor_f)
        right_side = _compose_or_fail(category, f_tensor_g, sigma_c_d)
        if left_side is not _FAILED and right_side is not _FAILED and left_side != right_side:
            return False
    return True


def _snake_equations_hold(category: CompactClosedCategory, a: Any) -> bool:
    a_dual = category.dual(a)
    unit_a = category.unit_morphism(a)
    counit_a = category.counit_morphism(a)
    id_a = category.identity(a)
    id_a_dual = category.identity(a_dual)

    first = _compose_or_fail(
        category,
        category.tensor_morphisms(counit_a, id_a),
        category.tensor_morphisms(id_a_dual, unit_a),
    )
    second = _compose_or_fail(
        category,
        category.tensor_morphisms(id_a, counit_a),
        category.tensor_morphisms(unit_a, id_a_dual),
    )
    first_ok = first is not _FAILED and first == id_a
    second_ok = second is not _FAILED and second == id_a
    return first_ok and second_ok


def verify_compact_closed_laws(category: CompactClosedCategory, test_objects: Iterable[Any]) -> bool:
    """Check both snake equations for every object; ``False`` when none given."""
    objects = list(test_objects)
    if not objects:
        return False
    return all(_snake_equations_hold(category, a) for a in objects)


def _dagger_contravariant(category: DaggerCategory, f: Any, g: Any) -> bool:
    g_then_f = _compose_or_fail(category, g, f)
    if g_then_f is _FAILED:
        return True
    dagger_composite = category.dagger(g_then_f)
    composite_of_daggers = _compose_or_fail(category, category.dagger(f), category.dagger(g))
    return composite_of_daggers is not _FAILED and dagger_composite == composite_of_daggers


def verify_dagger_laws(category: DaggerCategory, test_morphisms: Iterable[Any]) -> bool:
    """Check that the dagger is involutive and reverses composition.

    Returns ``False`` when no morphisms are given.
    """
    morphisms = list(test_morphisms)
    if not morphisms:
        return False

    involutive = all(category.dagger(category.dagger(f)) == f for f in morphisms)
    contravariant = all(_dagger_contravariant(category, f, g) for f, g in product(morphisms, repeat=2))
    return involutive and contravariant
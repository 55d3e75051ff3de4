"""The category of finite sets, with power-set and list structures on it.

Pairs ``(x, y)`` in a tensor product are encoded as the integer
``x * 10000 + y``, which keeps every object a set of plain integers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from itertools import product
from typing import Any

from categorica.category import CompositionError, SymmetricMonoidalCategory
from categorica.functor import Functor, IdentityFunctor, NaturalTransformation
from categorica.laws import (
    verify_category_laws,
    verify_monoidal_laws,
    verify_symmetric_monoidal_laws,
)
from categorica.monad import Monad

_PAIR_BASE = 10000


def _pair(x: int, y: int) -> int:
    return x * _PAIR_BASE + y


@dataclass(frozen=True)
class FiniteSet:
    """A finite set of non-negative integers, kept sorted and free of duplicates."""

    elements: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(sorted(set(self.elements))))

    @classmethod
    def empty(cls) -> FiniteSet:
        """The empty set."""
        return cls(())

    @classmethod
    def singleton(cls, element: int) -> FiniteSet:
        """The set holding just ``element``."""
        return cls((element,))

    @classmethod
    def range(cls, start: int, end: int) -> FiniteSet:
        """The integers from ``start`` up to, but not including, ``end``."""
        return cls(tuple(range(start, end)))

    def cardinality(self) -> int:
        """The number of elements."""
        return len(self.elements)

    def __contains__(self, element: object) -> bool:
        return element in self.elements

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[int]:
        return iter(self.elements)


@dataclass
class SetFunction:
    """A function between finite sets, given by an explicit mapping."""

    domain: FiniteSet
    codomain: FiniteSet
    mapping: dict[int, int] = field(default_factory=dict)

    @classmethod
    def create(
        cls, domain: FiniteSet, codomain: FiniteSet, mapping: Mapping[int, int]
    ) -> SetFunction:
        """Build a checked function.

        Raises :class:`ValueError` when the mapping leaves the domain or the
        codomain, or leaves some element of the domain unmapped.
        """
        for x, y in mapping.items():
            if x not in domain:
                raise ValueError(f"{x} is not in the domain")
            if y not in codomain:
                raise ValueError(f"{y} is not in the codomain")
        missing = [x for x in domain if x not in mapping]
        if missing:
            raise ValueError(f"elements {missing} of the domain are not mapped")
        return cls(domain, codomain, dict(mapping))

    def apply(self, element: int) -> int:
        """The image of ``element``; raises :class:`KeyError` outside the domain."""
        try:
            return self.mapping[element]
        except KeyError:
            raise KeyError(f"{element} is not in the domain") from None

    @classmethod
    def identity(cls, finite_set: FiniteSet) -> SetFunction:
        """The identity function on ``finite_set``."""
        return cls(finite_set, finite_set, {x: x for x in finite_set})


class FinSet(SymmetricMonoidalCategory):
    """Finite sets and functions, monoidal under the Cartesian product."""

    def domain(self, f: SetFunction) -> FiniteSet:
        return f.domain

    def codomain(self, f: SetFunction) -> FiniteSet:
        return f.codomain

    def identity(self, obj: FiniteSet) -> SetFunction:
        return SetFunction.identity(obj)

    def compose(self, f: SetFunction, g: SetFunction) -> SetFunction:
        if f.codomain != g.domain:
            raise CompositionError("codomain of f is not the domain of g")
        mapping = {}
        for x in f.domain:
            y = f.mapping.get(x)
            if y is not None and y in g.mapping:
                mapping[x] = g.mapping[y]
        return SetFunction(f.domain, g.codomain, mapping)

    def unit(self) -> FiniteSet:
        return FiniteSet.singleton(1)

    def tensor_objects(self, a: FiniteSet, b: FiniteSet) -> FiniteSet:
        return FiniteSet(tuple(_pair(x, y) for x, y in product(a, b)))

    def tensor_morphisms(self, f: SetFunction, g: SetFunction) -> SetFunction:
        mapping = {}
        for x1, x2 in product(f.domain, g.domain):
            if x1 in f.mapping and x2 in g.mapping:
                mapping[_pair(x1, x2)] = _pair(f.mapping[x1], g.mapping[x2])
        return SetFunction(
            self.tensor_objects(f.domain, g.domain),
            self.tensor_objects(f.codomain, g.codomain),
            mapping,
        )

    def left_unitor(self, a: FiniteSet) -> SetFunction:
        domain = self.tensor_objects(self.unit(), a)
        return SetFunction(domain, a, {_pair(1, x): x for x in a})

    def right_unitor(self, a: FiniteSet) -> SetFunction:
        domain = self.tensor_objects(a, self.unit())
        return SetFunction(domain, a, {_pair(x, 1): x for x in a})

    def associator(self, a: FiniteSet, b: FiniteSet, c: FiniteSet) -> SetFunction:
        domain = self.tensor_objects(self.tensor_objects(a, b), c)
        codomain = self.tensor_objects(a, self.tensor_objects(b, c))
        mapping = {
            _pair(_pair(x, y), z): _pair(x, _pair(y, z)) for x, y, z in product(a, b, c)
        }
        return SetFunction(domain, codomain, mapping)

    def braiding(self, a: FiniteSet, b: FiniteSet) -> SetFunction:
        mapping = {_pair(x, y): _pair(y, x) for x, y in product(a, b)}
        return SetFunction(self.tensor_objects(a, b), self.tensor_objects(b, a), mapping)


class PowerSetFunctor(Functor):
    """Sends a set to its power set; subsets are encoded as bit masks over positions."""

    def map_object(self, c: Any, d: Any, obj: FiniteSet) -> FiniteSet:
        return FiniteSet.range(0, 1 << obj.cardinality())

    def map_morphism(self, c: Any, d: Any, f: SetFunction) -> SetFunction:
        domain = self.map_object(c, d, f.domain)
        codomain = self.map_object(c, d, f.codomain)
        positions = {element: pos for pos, element in enumerate(f.codomain)}

        mapping = {}
        for subset in domain:
            members = (x for pos, x in enumerate(f.domain) if subset & (1 << pos))
            image = 0
            for x in members:
                if x in f.mapping and f.mapping[x] in positions:
                    image |= 1 << positions[f.mapping[x]]
            mapping[subset] = image
        return SetFunction(domain, codomain, mapping)


class ElementsToSingleton(NaturalTransformation):
    """The transformation from the identity functor to the power set, x ↦ {x}."""

    def component(
        self, c: Any, d: Any, f: Functor, g: Functor, obj: FiniteSet
    ) -> SetFunction:
        mapping = {element: 1 << pos for pos, element in enumerate(obj)}
        return SetFunction(obj, g.map_object(c, d, obj), mapping)


class ListMonad(Monad):
    """Lists of length at most three, encoded as integer indices."""

    def map_object(self, c: Any, d: Any, obj: FiniteSet) -> FiniteSet:
        n = obj.cardinality()
        return FiniteSet.range(0, 1 + n + n * n + n * n * n)

    def map_morphism(self, c: Any, d: Any, f: SetFunction) -> SetFunction:
        domain = self.map_object(c, d, f.domain)
        codomain = self.map_object(c, d, f.codomain)
        targets = codomain.elements
        mapping = {x: targets[pos % len(targets)] for pos, x in enumerate(domain)}
        return SetFunction(domain, codomain, mapping)

    def unit(self, c: Any, obj: FiniteSet) -> SetFunction:
        n = obj.cardinality()
        mapping = {element: n + pos for pos, element in enumerate(obj)}
        return SetFunction(obj, self.map_object(c, c, obj), mapping)

    def join(self, c: Any, obj: FiniteSet) -> SetFunction:
        list_obj = self.map_object(c, c, obj)
        list_list_obj = self.map_object(c, c, list_obj)
        targets = list_obj.elements
        mapping = {x: targets[pos % len(targets)] for pos, x in enumerate(list_list_obj)}
        return SetFunction(list_list_obj, list_obj, mapping)


def _print_all(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def demonstrate_category_laws() -> dict[str, Any]:
    """Run the laws and constructions on small sets, print and return the findings."""
    print("Demonstrating category laws for FinSet...")
    category = FinSet()

    set_a = FiniteSet.range(1, 4)
    set_b = FiniteSet.range(10, 13)
    set_c = FiniteSet.range(20, 23)
    objects = [set_a, set_b, set_c]

    f = SetFunction.create(set_a, set_b, {1: 10, 2: 11, 3: 12})
    g = SetFunction.create(set_b, set_c, {10: 20, 11: 21, 12: 22})
    morphisms = [(f, 0, 1), (g, 1, 2)]

    results: dict[str, Any] = {}
    results["category_laws"] = verify_category_laws(category, objects, morphisms)
    print(f"Category laws satisfied: {results['category_laws']}")

    g_f = category.compose(f, g)
    print("Composed f and g successfully!")
    results["composite_at_1"] = g_f.apply(1)
    print(f"(g ∘ f)(1) = {results['composite_at_1']}")

    results["monoidal_laws"] = verify_monoidal_laws(category, objects)
    print(f"Monoidal category laws satisfied: {results['monoidal_laws']}")

    results["symmetric_laws"] = verify_symmetric_monoidal_laws(category, objects)
    print(f"Symmetric monoidal category laws satisfied: {results['symmetric_laws']}")

    results["tensor_cardinality"] = category.tensor_objects(set_a, set_b).cardinality()
    power_set = PowerSetFunctor()
    results["power_set_cardinality"] = power_set.map_object(
        category, category, set_a
    ).cardinality()

    eta_a = ElementsToSingleton().component(
        category, category, IdentityFunctor(), power_set, set_a
    )
    results["singleton_of_1"] = eta_a.apply(1)

    list_monad = ListMonad()
    results["list_cardinality"] = list_monad.map_object(category, category, set_a).cardinality()
    list_monad.unit(category, set_a)

    _print_all(
        [
            f"Tensor product of A and B has {results['tensor_cardinality']} elements",
            f"Power set of A has {results['power_set_cardinality']} elements",
            "Natural transformation maps element 1 to singleton 1",
            f"List monad maps set A to List(A) with {results['list_cardinality']} elements",
            "Unit natural transformation maps elements to singleton lists",
        ]
    )
    return results
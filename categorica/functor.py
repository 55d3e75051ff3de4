"""Functors between categories and natural transformations between functors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any

from categorica.category import Category, CompositionError


class Functor(ABC):
    """A structure-preserving map from category ``c`` to category ``d``."""

    @abstractmethod
    def map_object(self, c: Category, d: Category, obj: Any) -> Any:
        """Map an object of ``c`` to an object of ``d``."""

    @abstractmethod
    def map_morphism(self, c: Category, d: Category, f: Any) -> Any:
        """Map a morphism of ``c`` to a morphism of ``d``."""

    def preserves_domain(self, c: Category, d: Category, f: Any) -> bool:
        """Whether F(dom f) equals dom F(f)."""
        mapped_domain = d.domain(self.map_morphism(c, d, f))
        return self.map_object(c, d, c.domain(f)) == mapped_domain

    def preserves_codomain(self, c: Category, d: Category, f: Any) -> bool:
        """Whether F(cod f) equals cod F(f)."""
        mapped_codomain = d.codomain(self.map_morphism(c, d, f))
        return self.map_object(c, d, c.codomain(f)) == mapped_codomain

    def preserves_identity(self, c: Category, d: Category, obj: Any) -> bool:
        """Whether F(id_A) equals id_F(A)."""
        mapped_identity = self.map_morphism(c, d, c.identity(obj))
        return mapped_identity == d.identity(self.map_object(c, d, obj))

    def preserves_composition(self, c: Category, d: Category, f: Any, g: Any) -> bool:
        """Whether F(f then g) equals F(f) then F(g).

        Vacuously true when ``f`` and ``g`` do not compose in ``c``.
        """
        if not c.can_compose(f, g):
            return True
        try:
            mapped_composite = self.map_morphism(c, d, c.compose(f, g))
        except CompositionError:
            return False

        mapped_f = self.map_morphism(c, d, f)
        mapped_g = self.map_morphism(c, d, g)
        if not d.can_compose(mapped_f, mapped_g):
            return False
        try:
            composite_of_mapped = d.compose(mapped_f, mapped_g)
        except CompositionError:
            return False
        return mapped_composite == composite_of_mapped

    def verify_functor_laws(
        self,
        c: Category,
        d: Category,
        test_objects: Iterable[Any],
        test_morphisms: Sequence[Any],
    ) -> bool:
        """Check identity, composition, domain and codomain preservation."""
        identity_ok = all(self.preserves_identity(c, d, obj) for obj in test_objects)
        composition_ok = all(
            self.preserves_composition(c, d, f, g)
            for f in test_morphisms
            for g in test_morphisms
            if c.can_compose(f, g)
        )
        domain_ok = all(self.preserves_domain(c, d, f) for f in test_morphisms)
        codomain_ok = all(self.preserves_codomain(c, d, f) for f in test_morphisms)
        return identity_ok and composition_ok and domain_ok and codomain_ok


class NaturalTransformation(ABC):
    """A family of morphisms F(A) -> G(A) between two functors F, G: C -> D."""

    @abstractmethod
    def component(self, c: Category, d: Category, f: Functor, g: Functor, obj: Any) -> Any:
        """The component at ``obj``: a morphism F(obj) -> G(obj) in ``d``."""

    def is_natural(
        self, c: Category, d: Category, f: Functor, g: Functor, morphism: Any
    ) -> bool:
        """Check the naturality square for one morphism h: A -> B."""
        a = c.domain(morphism)
        b = c.codomain(morphism)

        fh = f.map_morphism(c, d, morphism)
        gh = g.map_morphism(c, d, morphism)
        eta_a = self.component(c, d, f, g, a)
        eta_b = self.component(c, d, f, g, b)

        components_ok = (
            d.domain(eta_a) == f.map_object(c, d, a)
            and d.codomain(eta_a) == g.map_object(c, d, a)
            and d.domain(eta_b) == f.map_object(c, d, b)
            and d.codomain(eta_b) == g.map_object(c, d, b)
        )
        if not components_ok:
            return False

        try:
            lhs = d.compose(gh, eta_a)
            rhs = d.compose(eta_b, fh)
        except CompositionError:
            return False
        return lhs == rhs

    def verify_naturality(
        self,
        c: Category,
        d: Category,
        f: Functor,
        g: Functor,
        test_morphisms: Iterable[Any],
    ) -> bool:
        """Check the naturality square for every test morphism."""
        return all(self.is_natural(c, d, f, g, h) for h in test_morphisms)

    def has_valid_components(
        self,
        c: Category,
        d: Category,
        f: Functor,
        g: Functor,
        test_objects: Iterable[Any],
    ) -> bool:
        """Check that each component runs from F(A) to G(A)."""
        for obj in test_objects:
            eta = self.component(c, d, f, g, obj)
            if d.domain(eta) != f.map_object(c, d, obj):
                return False
            if d.codomain(eta) != g.map_object(c, d, obj):
                return False
        return True


class IdentityFunctor(Functor):
    """The functor that leaves every object and morphism unchanged."""

    def map_object(self, c: Category, d: Category, obj: Any) -> Any:
        return obj

    def map_morphism(self, c: Category, d: Category, f: Any) -> Any:
        return f


class ConstantFunctor(Functor):
    """The functor sending everything to one object and its identity."""

    def __init__(self, d: Category, obj: Any) -> None:
        self.object = obj
        self.morphism = d.identity(obj)

    def map_object(self, c: Category, d: Category, obj: Any) -> Any:
        return self.object

    def map_morphism(self, c: Category, d: Category, f: Any) -> Any:
        return self.morphism


class IdentityNaturalTransformation(NaturalTransformation):
    """The transformation F => F whose components are identities."""

    def component(self, c: Category, d: Category, f: Functor, g: Functor, obj: Any) -> Any:
        return d.identity(f.map_object(c, d, obj))
"""A single entry point for checking every kind of categorical law."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from categorica.category import (
    Category,
    CompactClosedCategory,
    DaggerCategory,
    MonoidalCategory,
    SymmetricMonoidalCategory,
)
from categorica.functor import Functor
from categorica.laws import (
    IndexedMorphism,
    verify_category_laws,
    verify_compact_closed_laws,
    verify_dagger_laws,
    verify_monoidal_laws,
    verify_symmetric_monoidal_laws,
)
from categorica.monad import Monad


class LawVerifier:
    """Bundles the law checks for categories, functors and monads."""

    def verify_category(
        self,
        category: Category,
        test_objects: Iterable[Any],
        test_morphisms: Iterable[IndexedMorphism],
    ) -> bool:
        """Check the identity and associativity laws."""
        return verify_category_laws(category, test_objects, test_morphisms)

    def verify_monoidal(self, category: MonoidalCategory, test_objects: Iterable[Any]) -> bool:
        """Check the monoidal category laws."""
        return verify_monoidal_laws(category, test_objects)

    def verify_symmetric_monoidal(
        self, category: SymmetricMonoidalCategory, test_objects: Iterable[Any]
    ) -> bool:
        """Check the symmetric monoidal category laws."""
        return verify_symmetric_monoidal_laws(category, test_objects)

    def verify_compact_closed(
        self, category: CompactClosedCategory, test_objects: Iterable[Any]
    ) -> bool:
        """Check the snake equations of a compact closed category."""
        return verify_compact_closed_laws(category, test_objects)

    def verify_dagger(self, category: DaggerCategory, test_morphisms: Iterable[Any]) -> bool:
        """Check that the dagger is involutive and contravariant."""
        return verify_dagger_laws(category, test_morphisms)

    def verify_functor(
        self,
        functor: Functor,
        c: Category,
        d: Category,
        test_objects: Iterable[Any],
        test_morphisms: Sequence[Any],
    ) -> bool:
        """Check that a functor preserves identities, composition and (co)domains."""
        return functor.verify_functor_laws(c, d, test_objects, test_morphisms)

    def verify_monad(self, monad: Monad, category: Category, test_objects: Iterable[Any]) -> bool:
        """Check the monad laws at every test object."""
        return monad.verify_all_monad_laws(category, test_objects)


def verify_laws() -> LawVerifier:
    """A fresh :class:`LawVerifier`."""
    return LawVerifier()
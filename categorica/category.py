"""Categories and their monoidal, symmetric, compact-closed and dagger refinements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CompositionError(ValueError):
    """Raised when two morphisms cannot be composed."""


class Category(ABC):
    """Objects and morphisms between them, with identities and composition.

    ``compose(f, g)`` means "first f, then g": for ``f: A -> B`` and
    ``g: B -> C`` it returns a morphism ``A -> C``.  Implementations raise
    :class:`CompositionError` when the codomain of ``f`` is not the domain
    of ``g``.
    """

    @abstractmethod
    def domain(self, f: Any) -> Any:
        """The source object of a morphism."""

    @abstractmethod
    def codomain(self, f: Any) -> Any:
        """The target object of a morphism."""

    @abstractmethod
    def identity(self, obj: Any) -> Any:
        """The identity morphism on an object."""

    @abstractmethod
    def compose(self, f: Any, g: Any) -> Any:
        """Compose ``f: A -> B`` with ``g: B -> C`` into ``A -> C``."""

    def is_valid_morphism(self, f: Any) -> bool:
        """Whether ``f`` is a morphism of this category.

        The domain and codomain are computed, so a morphism this category
        cannot inspect raises here.
        """
        self.domain(f)
        self.codomain(f)
        return True

    def can_compose(self, f: Any, g: Any) -> bool:
        """Whether the codomain of ``f`` equals the domain of ``g``."""
        return self.codomain(f) == self.domain(g)


class MonoidalCategory(Category):
    """A category with a tensor product and a unit object."""

    @abstractmethod
    def unit(self) -> Any:
        """The monoidal unit I."""

    @abstractmethod
    def tensor_objects(self, a: Any, b: Any) -> Any:
        """The tensor product of two objects."""

    @abstractmethod
    def tensor_morphisms(self, f: Any, g: Any) -> Any:
        """The tensor product of two morphisms."""

    @abstractmethod
    def left_unitor(self, a: Any) -> Any:
        """The left unitor I ⊗ A -> A."""

    @abstractmethod
    def right_unitor(self, a: Any) -> Any:
        """The right unitor A ⊗ I -> A."""

    @abstractmethod
    def associator(self, a: Any, b: Any, c: Any) -> Any:
        """The associator (A ⊗ B) ⊗ C -> A ⊗ (B ⊗ C)."""


class SymmetricMonoidalCategory(MonoidalCategory):
    """A monoidal category with a symmetry swapping tensor factors."""

    @abstractmethod
    def braiding(self, a: Any, b: Any) -> Any:
        """The braiding A ⊗ B -> B ⊗ A."""


class CompactClosedCategory(SymmetricMonoidalCategory):
    """A symmetric monoidal category in which every object has a dual."""

    @abstractmethod
    def dual(self, a: Any) -> Any:
        """The dual object A*."""

    @abstractmethod
    def unit_morphism(self, a: Any) -> Any:
        """The unit I -> A* ⊗ A."""

    @abstractmethod
    def counit_morphism(self, a: Any) -> Any:
        """The counit A ⊗ A* -> I."""


class DaggerCategory(Category):
    """A category with an involutive, identity-on-objects adjoint."""

    @abstractmethod
    def dagger(self, f: Any) -> Any:
        """The adjoint of a morphism."""


class DaggerCompactCategory(DaggerCategory, CompactClosedCategory):
    """A category that is both dagger and compact closed."""
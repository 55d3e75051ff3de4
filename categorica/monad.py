"""Monads on a category and the Kleisli category they induce."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any

from categorica.category import Category, CompositionError
from categorica.functor import Functor


class Monad(Functor):
    """An endofunctor T with a unit η: A -> T(A) and a join μ: T(T(A)) -> T(A)."""

    @abstractmethod
    def unit(self, c: Category, obj: Any) -> Any:
        """The unit component η_A: A -> T(A)."""

    @abstractmethod
    def join(self, c: Category, obj: Any) -> Any:
        """The join component μ_A: T(T(A)) -> T(A)."""

    def map_t(self, c: Category, f: Any) -> Any:
        """Map ``f: A -> B`` to ``T(f): T(A) -> T(B)``."""
        return self.map_morphism(c, c, f)

    def map_obj_t(self, c: Category, obj: Any) -> Any:
        """Map an object A to T(A)."""
        return self.map_object(c, c, obj)

    def map_obj_t_t(self, c: Category, obj: Any) -> Any:
        """Map an object A to T(T(A))."""
        return self.map_obj_t(c, self.map_obj_t(c, obj))

    def map_t_t(self, c: Category, f: Any) -> Any:
        """Map ``f: A -> B`` to ``T(T(f))``."""
        return self.map_t(c, self.map_t(c, f))

    def kleisli_compose(self, c: Category, f: Any, g: Any) -> Any:
        """Kleisli composite of ``f: A -> T(B)`` and ``g: B -> T(C)``.

        Raises :class:`CompositionError` when the codomain of ``f`` is not
        T applied to the domain of ``g``, or when an underlying composition
        fails.
        """
        inner = c.domain(g)
        if c.codomain(f) != self.map_obj_t(c, inner):
            raise CompositionError("codomain of f is not T applied to the domain of g")

        t_g_after_f = c.compose(f, self.map_t(c, g))
        return c.compose(t_g_after_f, self.join(c, inner))

    def verify_monad_laws(self, c: Category, obj: Any) -> bool:
        """Check left identity, right identity and associativity at ``obj``."""
        t_obj = self.map_obj_t(c, obj)
        id_t_obj = c.identity(t_obj)

        unit_obj = self.unit(c, obj)
        unit_t_obj = self.unit(c, t_obj)
        t_unit_obj = self.map_t(c, unit_obj)
        join_obj = self.join(c, obj)
        join_t_obj = self.join(c, t_obj)
        t_join_obj = self.map_t(c, join_obj)

        try:
            left_identity = c.compose(unit_t_obj, join_obj) == id_t_obj
        except CompositionError:
            left_identity = False

        try:
            right_identity = c.compose(t_unit_obj, join_obj) == id_t_obj
        except CompositionError:
            right_identity = False

        try:
            associativity = c.compose(join_t_obj, join_obj) == c.compose(t_join_obj, join_obj)
        except CompositionError:
            associativity = False

        return left_identity and right_identity and associativity

    def verify_all_monad_laws(self, c: Category, test_objects: Iterable[Any]) -> bool:
        """Check the monad laws at every test object."""
        return all(self.verify_monad_laws(c, obj) for obj in test_objects)


class Kleisli(Category):
    """The Kleisli category of a monad: identities are units, composition is Kleisli."""

    def __init__(self, monad: Monad, category: Category) -> None:
        self.monad = monad
        self.category = category

    def domain(self, f: Any) -> Any:
        return self.category.domain(f)

    def codomain(self, f: Any) -> Any:
        return self.category.codomain(f)

    def identity(self, obj: Any) -> Any:
        return self.monad.unit(self.category, obj)

    def compose(self, f: Any, g: Any) -> Any:
        return self.monad.kleisli_compose(self.category, f, g)


class MaybeMonad(Monad):
    """The optional-value monad, modelled as the identity on every category."""

    def map_object(self, c: Category, d: Category, obj: Any) -> Any:
        return obj

    def map_morphism(self, c: Category, d: Category, f: Any) -> Any:
        return f

    def unit(self, c: Category, obj: Any) -> Any:
        return c.identity(obj)

    def join(self, c: Category, obj: Any) -> Any:
        return c.identity(obj)


class StateMonad(Monad):
    """The state monad, modelled as the identity on every category."""

    def map_object(self, c: Category, d: Category, obj: Any) -> Any:
        return obj

    def map_morphism(self, c: Category, d: Category, f: Any) -> Any:
        return f

    def unit(self, c: Category, obj: Any) -> Any:
        return c.identity(obj)

    def join(self, c: Category, obj: Any) -> Any:
        return c.identity(obj)


class QuantumMonad(Monad):
    """A monad for quantum effects: unit prepares a state, join measures.

    Every object is treated as already quantum, so objects and morphisms
    are mapped to themselves and unit and join are identities.
    """

    def __init__(self, qubit_count: int) -> None:
        self.qubit_count = qubit_count

    def _is_quantum_object(self, obj: Any) -> bool:
        return True

    def _make_quantum(self, obj: Any) -> Any:
        return obj

    def map_object(self, c: Category, d: Category, obj: Any) -> Any:
        if self._is_quantum_object(obj):
            return obj
        return self._make_quantum(obj)

    def map_morphism(self, c: Category, d: Category, f: Any) -> Any:
        return f

    def unit(self, c: Category, obj: Any) -> Any:
        return c.identity(obj)

    def join(self, c: Category, obj: Any) -> Any:
        nested = self.map_object(c, c, self.map_object(c, c, obj))
        return c.identity(nested)
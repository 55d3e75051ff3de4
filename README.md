# categorica

Categories, functors, natural transformations and monads as plain Python
classes. The package also has functions that check their laws against
concrete objects and morphisms. The category of finite sets is included as a
worked example.

It needs nothing beyond the standard library.

## Modules

- `categorica.category`: the abstract interfaces `Category`,
  `MonoidalCategory`, `SymmetricMonoidalCategory`, `CompactClosedCategory`,
  `DaggerCategory` and `DaggerCompactCategory`.
  - `Category.compose(f, g)` composes "f then g". It raises
    `CompositionError`, a `ValueError`, when the codomain of `f` is not the
    domain of `g`.
  - `Category.can_compose(f, g)` tells you whether that composition is
    possible.
- `categorica.functor`: `Functor`, `NaturalTransformation`,
  `IdentityFunctor`, `ConstantFunctor` and `IdentityNaturalTransformation`.
  - A functor has `preserves_identity`, `preserves_composition`,
    `preserves_domain`, `preserves_codomain` and `verify_functor_laws`.
  - A natural transformation has `is_natural`, `verify_naturality` and
    `has_valid_components`.
- `categorica.monad`: `Monad`, the `Kleisli` category, and the monads
  `MaybeMonad`, `StateMonad` and `QuantumMonad`.
  - `Monad` provides unit, join, `kleisli_compose`, `verify_monad_laws` and
    `verify_all_monad_laws`.
  - `MaybeMonad`, `StateMonad` and `QuantumMonad` map every object and
    morphism to itself. Their unit and join are identities.
- `categorica.laws`: `verify_category_laws`, `verify_monoidal_laws`,
  `verify_symmetric_monoidal_laws`, `verify_braiding_naturality`,
  `verify_compact_closed_laws` and `verify_dagger_laws`. Each returns a
  `bool`.
- `categorica.finset`: the category `FinSet` of finite sets and functions
  between them.
  - Objects are `FiniteSet`: sorted, duplicate-free integers, with
    `empty`, `singleton` and `range` constructors.
  - Morphisms are `SetFunction`. Use `SetFunction.create` to build a checked
    function; it raises `ValueError` on a bad mapping.
  - The tensor is the Cartesian product. A pair `(x, y)` is encoded as
    `x * 10000 + y`.
  - The module also provides the braiding, `PowerSetFunctor` (subsets as bit
    masks), `ElementsToSingleton` and a small `ListMonad`.
  - `demonstrate_category_laws()` runs a short demonstration. It prints its
    findings and returns them as a dict.
- `categorica.verifier`: `LawVerifier`, which gathers every check behind one
  object, and `verify_laws()`, which returns a new `LawVerifier`.

## Install

    pip install .

For the tests:

    pip install .[test]
    pytest

## Example

```python
from categorica.finset import FinSet, FiniteSet, SetFunction, PowerSetFunctor
from categorica.laws import verify_category_laws, verify_monoidal_laws

finset = FinSet()
a = FiniteSet.range(1, 4)      # {1, 2, 3}
b = FiniteSet.range(10, 13)    # {10, 11, 12}
c = FiniteSet.range(20, 23)    # {20, 21, 22}

f = SetFunction.create(a, b, {1: 10, 2: 11, 3: 12})
g = SetFunction.create(b, c, {10: 20, 11: 21, 12: 22})

g_after_f = finset.compose(f, g)
assert g_after_f.apply(1) == 20

objects = [a, b, c]
assert verify_category_laws(finset, objects, [(f, 0, 1), (g, 1, 2)])
print(verify_monoidal_laws(finset, objects))

power = PowerSetFunctor()
assert power.map_object(finset, finset, a).cardinality() == 8
```

Morphisms given to `verify_category_laws` and `verify_braiding_naturality`
are triples `(morphism, source_index, target_index)`. The indices point into
the list of test objects.

## Command line

    categorica
    categorica --seed 42

This command does the following, in order:

1. It runs `demonstrate_category_laws()`.
2. It builds random functions between four small finite sets.
3. It checks the category, monoidal, symmetric monoidal and
   braiding-naturality laws on them.
4. It checks the power-set functor's identity and composition laws, and the
   list monad's left identity law.

It prints each result. Where a result is false, it also prints likely
reasons. `--seed` fixes the random functions so that a run can be repeated.
The command exits with status 0.

## What it does not do

- The package works only with abstract categorical structure and finite
  sets. It has no quantum circuits, state vectors or simulators.
- `QuantumMonad` only records a qubit count. It acts as the identity.
- The command does not check the list monad's right identity or
  associativity laws.
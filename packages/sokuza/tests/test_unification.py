"""
tests/test_unification.py - Unification Tests

Key Properties Tested:
    - Ground terms unify with themselves without growing the store
    - Unbound variables bind to whatever they meet
    - Variables are resolved before comparison
    - Pairs thread bindings from car to cdr
    - Pair vs atom and unequal atoms fail with None
    - Occurs-check is off by default and can be turned on
"""

import pytest

from sokuza import (
    NIL,
    Atom,
    InvalidTermShapeError,
    cons,
    empty,
    extend,
    list_,
    lookup,
    occurs_check,
    substitute,
    unify,
    var,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def x():
    return var("x")


@pytest.fixture
def y():
    return var("y")


# =============================================================================
# GROUND TERMS
# =============================================================================


class TestGroundUnification:
    """Unification of variable-free terms."""

    @pytest.mark.parametrize(
        "term",
        [Atom(1), Atom("apple"), NIL, list_(1, 2, 3), cons(list_(1), cons(2, 3))],
    )
    def test_term_unifies_with_itself(self, term):
        result = unify(term, term, empty())
        assert result is not None
        assert result == empty()

    def test_equal_copies_unify(self):
        assert unify(list_(1, 2), list_(1, 2), empty()) == empty()

    def test_unequal_atoms_fail(self):
        assert unify(Atom(1), Atom(2), empty()) is None

    def test_pair_vs_atom_fails(self):
        assert unify(cons(1, 2), Atom(1), empty()) is None
        assert unify(Atom(1), cons(1, 2), empty()) is None

    def test_nil_vs_pair_fails(self):
        assert unify(NIL, list_(1), empty()) is None

    def test_different_lengths_fail(self):
        assert unify(list_(1, 2), list_(1, 2, 3), empty()) is None


# =============================================================================
# VARIABLES
# =============================================================================


class TestVariableUnification:
    """Binding behavior of unbound and bound variables."""

    def test_variable_binds_to_term(self, x):
        s = unify(x, list_(1, 2), empty())
        assert lookup(x, s) == list_(1, 2)

    def test_term_binds_variable_on_right(self, x):
        s = unify(Atom(7), x, empty())
        assert lookup(x, s) == Atom(7)

    def test_variable_to_variable_chain(self, x, y):
        s = unify(x, y, empty())
        s = unify(x, Atom(1), s)
        assert lookup(y, s) == Atom(1)
        assert lookup(x, s) == Atom(1)

    def test_variable_with_itself(self, x):
        assert unify(x, x, empty()) == empty()

    def test_variables_bound_to_same_value(self, x, y):
        """Resolution happens before the equality check."""
        s = extend(y, Atom(3), extend(x, Atom(3), empty()))
        assert unify(x, y, s) is s

    def test_variables_bound_to_different_values(self, x, y):
        s = extend(y, Atom(4), extend(x, Atom(3), empty()))
        assert unify(x, y, s) is None

    def test_bound_variable_checked_against_value(self, x):
        s = extend(x, Atom(1), empty())
        assert unify(x, Atom(1), s) is s
        assert unify(x, Atom(2), s) is None

    def test_original_store_untouched(self, x):
        s0 = empty()
        unify(x, Atom(1), s0)
        assert len(s0) == 0


# =============================================================================
# PAIRS
# =============================================================================


class TestPairUnification:
    """Structural unification of pairs."""

    def test_car_binding_visible_in_cdr(self, x, y):
        s = unify(cons(x, y), cons(y, 1), empty())
        assert s is not None
        assert lookup(x, s) == Atom(1)
        assert lookup(y, s) == Atom(1)

    def test_conflict_in_cdr_fails(self, x):
        assert unify(cons(x, x), cons(1, 2), empty()) is None

    def test_partial_bindings_discarded_on_failure(self, x):
        """A failing pair returns None, not the bindings made so far."""
        assert unify(list_(x, 1), list_(5, 2), empty()) is None

    def test_list_with_variables(self, x, y):
        s = unify(list_(1, x, 3), list_(y, 2, 3), empty())
        assert lookup(x, s) == Atom(2)
        assert lookup(y, s) == Atom(1)

    def test_deep_nesting(self, x):
        """Deeply nested pairs do not exhaust the call stack."""
        depth = 20000
        left = x
        right = Atom("leaf")
        for _ in range(depth):
            left = cons(left, NIL)
            right = cons(right, NIL)
        s = unify(left, right, empty())
        assert lookup(x, s) == Atom("leaf")

    def test_long_lists(self):
        n = 20000
        assert unify(list_(*range(n)), list_(*range(n)), empty()) == empty()


# =============================================================================
# SHAPE ERRORS
# =============================================================================


class TestShapeErrors:
    """Non-terms are rejected with a tagged error."""

    def test_raw_value_rejected(self, x):
        with pytest.raises(InvalidTermShapeError):
            unify(x, 1, empty())

    def test_raw_value_on_left_rejected(self):
        with pytest.raises(InvalidTermShapeError):
            unify([1, 2], NIL, empty())


# =============================================================================
# OCCURS CHECK
# =============================================================================


class TestOccursCheck:
    """Cyclic bindings are allowed unless the occurs-check is requested."""

    def test_default_allows_cycle(self, x):
        s = unify(x, cons(1, x), empty())
        assert s is not None
        assert s[x] == cons(1, x)

    def test_enabled_rejects_cycle(self, x):
        assert unify(x, cons(1, x), empty(), occurs_check=True) is None

    def test_enabled_rejects_indirect_cycle(self, x, y):
        s = extend(y, list_(x), empty())
        assert unify(x, cons(1, y), s, occurs_check=True) is None

    def test_enabled_allows_acyclic(self, x, y):
        s = unify(x, cons(1, y), empty(), occurs_check=True)
        assert lookup(x, s) == cons(1, y)

    def test_occurs_check_function(self, x, y):
        assert occurs_check(x, list_(1, x), empty())
        assert not occurs_check(x, list_(1, y), empty())
        assert occurs_check(x, y, extend(y, x, empty()))


# =============================================================================
# SUBSTITUTION
# =============================================================================


class TestSubstitute:
    """Deep resolution of terms against a store."""

    def test_resolves_nested_variables(self, x, y):
        s = extend(y, Atom(2), extend(x, list_(1, y), empty()))
        assert substitute(x, s) == list_(1, 2)

    def test_leaves_unbound(self, x, y):
        s = extend(x, cons(1, y), empty())
        assert substitute(x, s) == cons(1, y)

    def test_resolves_tail_variable(self, x, y):
        s = extend(y, list_(2, 3), empty())
        assert substitute(cons(1, y), s) == list_(1, 2, 3)

    def test_atom_unchanged(self):
        assert substitute(Atom(5), empty()) == Atom(5)

    def test_long_list(self):
        items = list(range(20000))
        assert substitute(list_(*items), empty()) == list_(*items)


# =============================================================================
# ATOM TYPES
# =============================================================================


class TestAtomTypes:
    """Atoms of different types do not unify even when Python calls them equal."""

    @pytest.mark.parametrize(
        "left,right",
        [(1, True), (1, 1.0), (0, False)],
    )
    def test_different_types_fail(self, left, right):
        assert unify(Atom(left), Atom(right), empty()) is None

    def test_same_type_succeeds(self):
        assert unify(Atom(1.5), Atom(1.5), empty()) == empty()

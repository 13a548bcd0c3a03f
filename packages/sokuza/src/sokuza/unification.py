"""
sokuza/unification.py - Unification Algorithm

Finds the most general extension of a store that makes two terms equal.

Key operations:
- unify(t1, t2, store): Extended store, or None if the terms cannot be equal
- substitute(t, store): Resolve every variable in t as deeply as possible
- occurs_check(var, t, store): Check for circular references

Failure is the value None, never an exception. The occurs-check is off
unless requested (see config.EngineSettings.occurs_check), so by default
unifying ?x with (1 . ?x) succeeds and leaves a cyclic binding.
"""
from __future__ import annotations

import logging
from typing import Optional

from .config import get_settings
from .errors import InvalidTermShapeError
from .store import Store
from .terms import Atom, Nil, Pair, Term, Var

logger = logging.getLogger(__name__)


def unify(
    t1: Term,
    t2: Term,
    store: Store,
    occurs_check: Optional[bool] = None,
) -> Store | None:
    """Unify two terms under a store.

    Pairs are unified car first, then cdr, so bindings made in the car are
    visible in the cdr. Nested pairs are handled with an explicit work
    stack rather than recursion.

    Args:
        t1: First term
        t2: Second term
        store: Current bindings
        occurs_check: Reject cyclic bindings (default: from settings)

    Returns:
        Extended store, or None if unification fails

    Raises:
        InvalidTermShapeError: if t1 or t2 is not a term (wrap raw
            values with to_term)

    Example:
        x, y = Var("x"), Var("y")
        s = unify(cons(x, y), cons(y, 1), empty())
        # lookup(x, s) == Atom(1)
    """
    _check_shape(t1)
    _check_shape(t2)
    if occurs_check is None:
        occurs_check = get_settings().occurs_check

    pending: list[tuple[Term, Term]] = [(t1, t2)]
    while pending:
        a, b = pending.pop()

        if isinstance(a, Var):
            a = store.lookup(a)
        if isinstance(b, Var):
            b = store.lookup(b)

        # Same instance, or the same variable
        if a is b or (isinstance(a, Var) and a == b):
            continue

        if isinstance(a, Var):
            if occurs_check and _occurs(a, b, store):
                logger.debug(f"Occurs check: {a!r} in {b!r}")
                return None
            store = store.extend(a, b)
        elif isinstance(b, Var):
            if occurs_check and _occurs(b, a, store):
                logger.debug(f"Occurs check: {b!r} in {a!r}")
                return None
            store = store.extend(b, a)
        elif isinstance(a, Pair) and isinstance(b, Pair):
            # cdr pushed first so the car is unified first
            pending.append((a.cdr, b.cdr))
            pending.append((a.car, b.car))
        elif isinstance(a, Atom) and isinstance(b, Atom):
            if a != b:
                return None
        elif isinstance(a, Nil) and isinstance(b, Nil):
            continue
        else:
            return None

    return store


def _check_shape(term) -> None:
    if not isinstance(term, (Atom, Var, Pair, Nil)):
        raise InvalidTermShapeError(term, "a term (Atom, Var, Pair or Nil)")


def _occurs(var: Var, term: Term, store: Store) -> bool:
    stack: list[Term] = [term]
    while stack:
        t = stack.pop()
        if isinstance(t, Var):
            t = store.lookup(t)
        if isinstance(t, Var):
            if t == var:
                return True
        elif isinstance(t, Pair):
            stack.append(t.cdr)
            stack.append(t.car)
    return False


def occurs_check(var: Var, term: Term, store: Store) -> bool:
    """Check if variable occurs in term (prevents infinite structures).

    Returns True if var appears in term once the store is applied, which
    would create a circular binding like x = (1 . x).

    Args:
        var: Variable to check for
        term: Term to search in
        store: Current bindings

    Returns:
        True if var occurs in term
    """
    return _occurs(var, term, store)


def substitute(term: Term, store: Store) -> Term:
    """Apply store to term.

    Replaces every variable in term with its resolved value, recursively
    through pairs. Unbound variables are left in place.

    Does not terminate on cyclic bindings, which only arise with the
    occurs-check turned off. Walks the cdr spine in a loop but recurses
    into each car, so very deep nesting in car position can exceed the
    recursion limit.

    Args:
        term: Term to substitute in
        store: Bindings to apply

    Returns:
        Term with substitutions applied
    """
    if isinstance(term, Var):
        term = store.lookup(term)

    if not isinstance(term, Pair):
        _check_shape(term)
        return term

    # Walk the cdr spine iteratively, then rebuild from the tail.
    cars: list[Term] = []
    while isinstance(term, Pair):
        cars.append(substitute(term.car, store))
        term = term.cdr
        if isinstance(term, Var):
            term = store.lookup(term)

    _check_shape(term)
    result = term
    for item in reversed(cars):
        result = Pair(item, result)
    return result

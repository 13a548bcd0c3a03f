"""
sokuza/relations.py - Relations built from the goal combinators

choice(x, lst)       x is one of the elements of lst
common_el(l1, l2)    l1 and l2 share an element
conso(a, d, p)       p is the pair (a . d)
nullo(t)             t is the empty list
"""
from __future__ import annotations

from typing import Any

from .goals import Goal, conj, disj_all, eq, fail
from .terms import NIL, Pair, iter_list, to_term, var


def choice(term: Any, lst: Any) -> Goal:
    """Succeed once for each element of lst that unifies with term.

    Results follow list order. Equivalent to
    disj(eq(term, car(lst)), choice(term, cdr(lst))), with fail() for
    the empty list, but built as a single flat disjunction.

    Raises:
        InvalidTermShapeError: if lst is not a proper list

    Example:
        x = var("x")
        run(choice(x, list_(1, 2, 3)))  # x = 1, then 2, then 3
    """
    elements = list(iter_list(to_term(lst)))
    if not elements:
        return fail()
    return disj_all(*(eq(term, element) for element in elements))


def common_el(l1: Any, l2: Any) -> Goal:
    """Succeed once for each element of l1 that also appears in l2.

    Duplicates are kept: an element listed twice in l1 gives two results.
    The shared element is bound to a fresh variable named "v".
    """
    v = var("v")
    return conj(choice(v, l1), choice(v, l2))


def conso(first: Any, rest: Any, pair: Any) -> Goal:
    """pair is the cons of first and rest."""
    return eq(Pair(first, rest), pair)


def nullo(term: Any) -> Goal:
    """term is the empty list."""
    return eq(term, NIL)

"""
sokuza/goals.py - Goal Combinators

A goal is a function from a store to the list of stores under which it
succeeds. Combinators build larger goals out of smaller ones without
running anything; nothing happens until a goal is applied to a store.

    fail()        -> []
    succeed()     -> [s]
    disj(g1, g2)  -> g1(s) + g2(s)                     (OR)
    conj(g1, g2)  -> [s2 for s1 in g1(s) for s2 in g2(s1)]  (AND)
    eq(t1, t2)    -> [unify(t1, t2, s)] or []

Results are lists, computed eagerly and in order.
"""
from __future__ import annotations

from typing import Any, Callable

from .store import Store
from .terms import to_term
from .unification import unify

# Type alias for goals
Goal = Callable[[Store], list[Store]]


def fail() -> Goal:
    """Goal that never succeeds."""
    def goal(store: Store) -> list[Store]:
        return []
    return goal


def succeed() -> Goal:
    """Goal that succeeds once with the input store unchanged."""
    def goal(store: Store) -> list[Store]:
        return [store]
    return goal


def disj(g1: Goal, g2: Goal) -> Goal:
    """Logical OR: results of g1, then results of g2, from the same store."""
    def goal(store: Store) -> list[Store]:
        return g1(store) + g2(store)
    return goal


def conj(g1: Goal, g2: Goal) -> Goal:
    """Logical AND: run g2 on every store produced by g1, depth-first."""
    def goal(store: Store) -> list[Store]:
        results: list[Store] = []
        for s in g1(store):
            results.extend(g2(s))
        return results
    return goal


def eq(t1: Any, t2: Any) -> Goal:
    """Goal that succeeds when t1 and t2 unify.

    Raw Python values are wrapped as Atoms.
    """
    t1 = to_term(t1)
    t2 = to_term(t2)

    def goal(store: Store) -> list[Store]:
        result = unify(t1, t2, store)
        if result is None:
            return []
        return [result]
    return goal


def disj_all(*goals: Goal) -> Goal:
    """N-ary disjunction.

    Same results as disj(g1, disj(g2, ...)), evaluated in a loop.
    With no goals it behaves like fail().
    """
    def goal(store: Store) -> list[Store]:
        results: list[Store] = []
        for g in goals:
            results.extend(g(store))
        return results
    return goal


def conj_all(*goals: Goal) -> Goal:
    """N-ary conjunction.

    Same results as conj(g1, conj(g2, ...)), evaluated in a loop.
    With no goals it behaves like succeed().
    """
    def goal(store: Store) -> list[Store]:
        stores = [store]
        for g in goals:
            next_stores: list[Store] = []
            for s in stores:
                next_stores.extend(g(s))
            if not next_stores:
                return []
            stores = next_stores
        return stores
    return goal

"""
sokuza/store.py - Substitution Store

A store maps logic variables to the terms they are bound to. Stores are
persistent: ``extend`` returns a new store sharing every existing binding
with the old one, which is left untouched.

Representation is an association list with shared tails, so extending is
O(1) and a lookup walks the bindings most-recent first.

Lookup semantics:
    lookup(x, {x -> y, y -> 1})  ==  1
    lookup(x, {x -> y})          ==  y   (y is unbound)
    lookup(x, {})                ==  x   (an unbound variable is its own value)
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Optional

from .terms import Term, Var


class _Binding:
    __slots__ = ("var", "term", "next")

    def __init__(self, var: Var, term: Term, next: Optional[_Binding]):
        self.var = var
        self.term = term
        self.next = next


class Store(Mapping):
    """Immutable mapping from Var to Term.

    Behaves as a read-only ``Mapping``: ``store[x]`` is the raw binding of
    ``x`` (use ``lookup`` to follow variable chains), ``len(store)`` is the
    number of bindings. Stores with the same bindings compare equal.
    """

    __slots__ = ("_head", "_size")

    def __init__(self, head: Optional[_Binding] = None, size: int = 0):
        self._head = head
        self._size = size

    def _find(self, var: Var) -> Optional[_Binding]:
        node = self._head
        while node is not None:
            if node.var == var:
                return node
            node = node.next
        return None

    def __getitem__(self, var: Var) -> Term:
        node = self._find(var)
        if node is None:
            raise KeyError(var)
        return node.term

    def __contains__(self, var) -> bool:
        return isinstance(var, Var) and self._find(var) is not None

    def __iter__(self) -> Iterator[Var]:
        node = self._head
        while node is not None:
            yield node.var
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        items = ", ".join(f"{v!r}: {t!r}" for v, t in reversed(list(self.items())))
        return f"Store({{{items}}})"

    def extend(self, var: Var, term: Term) -> Store:
        """Return a new store with ``var`` bound to ``term``."""
        return Store(_Binding(var, term, self._head), self._size + 1)

    def lookup(self, var: Var) -> Term:
        """Follow variable-to-variable bindings starting at ``var``."""
        term: Term = var
        while isinstance(term, Var):
            node = self._find(term)
            if node is None:
                return term
            term = node.term
        return term


_EMPTY = Store()


def empty() -> Store:
    """The store with no bindings."""
    return _EMPTY


def extend(var: Var, term: Term, store: Store) -> Store:
    """Bind ``var`` to ``term`` on top of ``store``.

    ``var`` must be unbound in ``store``; the unifier guarantees this.
    """
    return store.extend(var, term)


def lookup(var: Var, store: Store) -> Term:
    """Resolve ``var`` to an unbound variable or a non-variable term."""
    return store.lookup(var)

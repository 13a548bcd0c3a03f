"""
sokuza/terms.py - Term Algebra for Relational Programming

Implements the term structures goals operate over:
- Atom: Opaque constants compared by value and type (e.g., 42, "apple")
- Var: Logic variables, identified by a generated token
- Pair: Immutable cons cells (car, cdr)
- Nil: The empty-list marker terminating cons-lists

Cons-lists are right-nested pairs ending in NIL:
    list_(1, 2, 3) == cons(1, cons(2, cons(3, NIL)))

Terms are immutable; no operation ever mutates a term in place.
"""
from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Union

from .errors import InvalidTermShapeError


class TermBase(ABC):
    """Base class for all term types."""

    @abstractmethod
    def is_ground(self) -> bool:
        """Return True if term contains no variables."""
        pass

    @abstractmethod
    def variables(self) -> set[Var]:
        """Return set of variables in term."""
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass

    @abstractmethod
    def __eq__(self, other) -> bool:
        pass


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Var(TermBase):
    """Logic variable.

    The name is a display label only. Identity comes from ``id``, which is
    generated at creation, so two variables named "x" are different
    variables, while a variable loaded back from storage is the same one.

    Example:
        x = Var("x")
        y = Var("x")   # x != y
    """
    name: str
    id: str = field(default_factory=_new_id)

    def is_ground(self) -> bool:
        return False

    def variables(self) -> set[Var]:
        return {self}

    def __repr__(self) -> str:
        return f"?{self.name}"

    def __hash__(self) -> int:
        return hash(("Var", self.id))

    def __eq__(self, other) -> bool:
        return isinstance(other, Var) and self.id == other.id


@dataclass(frozen=True)
class Atom(TermBase):
    """Ground constant (atom).

    Wraps any hashable value; two atoms are equal when their values are
    equal and of the same type, so Atom(1), Atom(1.0) and Atom(True) are
    three different atoms.

    Example:
        Atom(3) == Atom(3)
        Atom("apple")
    """
    value: Any

    def is_ground(self) -> bool:
        return True

    def variables(self) -> set[Var]:
        return set()

    def __repr__(self) -> str:
        if isinstance(self.value, str):
            return f'"{self.value}"'
        return str(self.value)

    def __hash__(self) -> int:
        return hash(("Atom", type(self.value), self.value))

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Atom)
            and type(self.value) is type(other.value)
            and self.value == other.value
        )


@dataclass(frozen=True)
class Nil(TermBase):
    """Empty-list marker. Use the NIL singleton."""

    def is_ground(self) -> bool:
        return True

    def variables(self) -> set[Var]:
        return set()

    def __repr__(self) -> str:
        return "()"

    def __hash__(self) -> int:
        return hash("Nil")

    def __eq__(self, other) -> bool:
        return isinstance(other, Nil)


NIL = Nil()


@dataclass(frozen=True)
class Pair(TermBase):
    """Cons cell with a car and a cdr.

    Raw Python values given as fields are wrapped in Atoms.

    Equality, hashing and repr walk the cdr spine in a loop, but recurse
    into the car, so pairs nested thousands deep in car position can
    exceed the recursion limit.

    Example:
        Pair(1, NIL)              # the one-element list (1)
        Pair(Var("x"), Var("y"))  # (?x . ?y)
    """
    car: Term
    cdr: Term

    def __post_init__(self):
        object.__setattr__(self, 'car', to_term(self.car))
        object.__setattr__(self, 'cdr', to_term(self.cdr))

    def is_ground(self) -> bool:
        return not self.variables()

    def variables(self) -> set[Var]:
        result: set[Var] = set()
        stack: list[Term] = [self]
        while stack:
            term = stack.pop()
            if isinstance(term, Pair):
                stack.append(term.cdr)
                stack.append(term.car)
            else:
                result.update(term.variables())
        return result

    def __repr__(self) -> str:
        items = []
        term: Term = self
        while isinstance(term, Pair):
            items.append(repr(term.car))
            term = term.cdr
        body = " ".join(items)
        if isinstance(term, Nil):
            return f"({body})"
        return f"({body} . {term!r})"

    def __hash__(self) -> int:
        h = hash("Pair")
        term: Term = self
        while isinstance(term, Pair):
            h = hash((h, term.car))
            term = term.cdr
        return hash((h, term))

    def __eq__(self, other) -> bool:
        a: Term = self
        b = other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a == b


# Type alias for any term value
Term = Union[Atom, Var, Pair, Nil]


def to_term(value: Any) -> Term:
    """Wrap a raw value as an Atom; terms pass through unchanged."""
    if isinstance(value, TermBase):
        return value
    return Atom(value)


# =============================================================================
# BUILDERS
# =============================================================================


def var(name: str) -> Var:
    """Create a fresh logic variable."""
    return Var(name)


def cons(car: Any, cdr: Any) -> Pair:
    """Build a pair from a car and a cdr."""
    return Pair(car, cdr)


def car(pair: Term) -> Term:
    """First field of a pair."""
    if not isinstance(pair, Pair):
        raise InvalidTermShapeError(pair, "a pair")
    return pair.car


def cdr(pair: Term) -> Term:
    """Second field of a pair."""
    if not isinstance(pair, Pair):
        raise InvalidTermShapeError(pair, "a pair")
    return pair.cdr


def list_(*items: Any) -> Term:
    """Build a cons-list of items terminated by NIL.

    Example:
        list_(1, 2, 3)  # cons(1, cons(2, cons(3, NIL)))
        list_()         # NIL
    """
    result: Term = NIL
    for item in reversed(items):
        result = Pair(item, result)
    return result


def iter_list(term: Term) -> Iterator[Term]:
    """Iterate the elements of a proper cons-list.

    Raises:
        InvalidTermShapeError: if the chain of pairs does not end in NIL
    """
    while isinstance(term, Pair):
        yield term.car
        term = term.cdr
    if not isinstance(term, Nil):
        raise InvalidTermShapeError(term, "a proper list terminated by NIL")

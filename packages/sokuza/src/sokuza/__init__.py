"""
sokuza - Minimal Relational Programming Engine

Sokuza-Kanren style logic programming: terms, unification, and goal
combinators searching the space of variable bindings.

This module implements:
- Terms: atoms, logic variables, pairs and cons-lists
- Persistent substitution stores
- Unification (no occurs-check unless configured)
- Goals: fail, succeed, disj, conj, eq
- Relations: choice, common_el
- Eager execution with run()

Example:
    from sokuza import common_el, list_, lookup, run

    for store in run(common_el(list_(1, 2, 3), list_(3, 4, 1, 7))):
        v = next(iter(store))
        print(lookup(v, store))   # 1, then 3
"""

__version__ = "0.1.0"

from .config import EngineSettings, get_settings
from .errors import InvalidTermShapeError, SerializationError, SokuzaError
from .goals import Goal, conj, conj_all, disj, disj_all, eq, fail, succeed
from .relations import choice, common_el, conso, nullo
from .runner import run, run_values
from .serialization import (
    dict_to_store,
    dict_to_term,
    load_store_json,
    load_store_yaml,
    save_store_json,
    save_store_yaml,
    store_to_dict,
    term_to_dict,
)
from .store import Store, empty, extend, lookup
from .terms import (
    NIL,
    Atom,
    Nil,
    Pair,
    Term,
    Var,
    car,
    cdr,
    cons,
    iter_list,
    list_,
    to_term,
    var,
)
from .unification import occurs_check, substitute, unify

__all__ = [
    # Terms
    "Term",
    "Var",
    "Atom",
    "Pair",
    "Nil",
    "NIL",
    "var",
    "cons",
    "car",
    "cdr",
    "list_",
    "iter_list",
    "to_term",
    # Store
    "Store",
    "empty",
    "extend",
    "lookup",
    # Unification
    "unify",
    "substitute",
    "occurs_check",
    # Goals
    "Goal",
    "fail",
    "succeed",
    "disj",
    "conj",
    "disj_all",
    "conj_all",
    "eq",
    # Relations
    "choice",
    "common_el",
    "conso",
    "nullo",
    # Runner
    "run",
    "run_values",
    # Persistence
    "term_to_dict",
    "dict_to_term",
    "store_to_dict",
    "dict_to_store",
    "save_store_json",
    "load_store_json",
    "save_store_yaml",
    "load_store_yaml",
    # Config and errors
    "EngineSettings",
    "get_settings",
    "SokuzaError",
    "InvalidTermShapeError",
    "SerializationError",
]

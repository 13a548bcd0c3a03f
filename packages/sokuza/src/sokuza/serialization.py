"""
sokuza/serialization.py - Persistence for terms and stores

Terms and stores are converted to plain dictionaries and saved as JSON or
YAML. Variables keep their identifier, so a store loaded back binds the
same variables as the one that was saved:

    {"type": "var", "name": "x", "id": "5f0c..."}
    {"type": "atom", "value": 3}
    {"type": "list", "items": [{...}, ...], "tail": {"type": "nil"}}
    {"type": "nil"}
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict

import yaml

from .config import get_settings
from .errors import InvalidTermShapeError, SerializationError
from .store import Store, empty
from .terms import NIL, Atom, Nil, Pair, Term, Var

logger = logging.getLogger(__name__)


def term_to_dict(term: Term) -> Dict[str, Any]:
    """Convert term to dictionary.

    A chain of pairs is written as one "list" entry: its cars in order and
    the term that ends the chain. Long lists therefore stay flat; only
    pairs nested in car position produce nested dictionaries.
    """
    if isinstance(term, Var):
        return {"type": "var", "name": term.name, "id": term.id}
    elif isinstance(term, Atom):
        return {"type": "atom", "value": term.value}
    elif isinstance(term, Nil):
        return {"type": "nil"}
    elif isinstance(term, Pair):
        items = []
        while isinstance(term, Pair):
            items.append(term_to_dict(term.car))
            term = term.cdr
        return {"type": "list", "items": items, "tail": term_to_dict(term)}
    raise InvalidTermShapeError(term, "a term (Atom, Var, Pair or Nil)")


def dict_to_term(data: Dict[str, Any]) -> Term:
    """Convert dictionary to term."""
    try:
        t = data["type"]
        if t == "var":
            return Var(data["name"], data["id"])
        elif t == "atom":
            return Atom(data["value"])
        elif t == "nil":
            return NIL
        elif t == "list":
            items = data["items"]
            if not isinstance(items, list):
                raise SerializationError(f"List items must be a list, got {items!r}")
            result = dict_to_term(data["tail"])
            for item in reversed(items):
                result = Pair(dict_to_term(item), result)
            return result
        elif t == "pair":
            return Pair(dict_to_term(data["car"]), dict_to_term(data["cdr"]))
    except (KeyError, TypeError) as e:
        raise SerializationError(f"Malformed term data: {data!r}") from e
    raise SerializationError(f"Unknown term type: {t}")


def store_to_dict(store: Store) -> Dict[str, Any]:
    """Export store bindings, oldest first."""
    bindings = [
        {"var": term_to_dict(v), "term": term_to_dict(t)}
        for v, t in store.items()
    ]
    bindings.reverse()
    return {"bindings": bindings}


def dict_to_store(data: Dict[str, Any]) -> Store:
    """Import store bindings.

    Raises:
        SerializationError: if the data is not a mapping with a list of
            bindings, or if a variable is bound more than once
    """
    if not isinstance(data, dict):
        raise SerializationError(f"Store data must be a mapping, got {data!r}")
    bindings = data.get("bindings", [])
    if not isinstance(bindings, list):
        raise SerializationError(f"Store bindings must be a list, got {bindings!r}")

    store = empty()
    for binding in bindings:
        try:
            v = dict_to_term(binding["var"])
            term = dict_to_term(binding["term"])
        except (KeyError, TypeError) as e:
            raise SerializationError(f"Malformed binding: {binding!r}") from e
        if not isinstance(v, Var):
            raise SerializationError(f"Binding key must be a variable, got {v!r}")
        if v in store:
            raise SerializationError(f"Variable bound more than once: {v!r}")
        store = store.extend(v, term)
    return store


def save_store_json(store: Store, path: str) -> None:
    """Save store to JSON file."""
    with open(path, 'w') as f:
        json.dump(store_to_dict(store), f, indent=get_settings().serialization_indent)
    logger.info(f"Saved store: {len(store)} bindings to {path}")


def load_store_json(path: str) -> Store:
    """Load store from JSON file."""
    with open(path) as f:
        store = dict_to_store(json.load(f))
    logger.info(f"Loaded store: {len(store)} bindings from {path}")
    return store


def save_store_yaml(store: Store, path: str) -> None:
    """Save store to YAML file."""
    with open(path, 'w') as f:
        yaml.dump(store_to_dict(store), f, default_flow_style=False)
    logger.info(f"Saved store: {len(store)} bindings to {path}")


def load_store_yaml(path: str) -> Store:
    """Load store from YAML file."""
    with open(path) as f:
        store = dict_to_store(yaml.safe_load(f) or {})
    logger.info(f"Loaded store: {len(store)} bindings from {path}")
    return store

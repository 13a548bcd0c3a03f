"""
sokuza/runner.py - Goal execution

run() applies a goal to the empty store and returns every result store.
The whole search tree is expanded before returning: goals over infinite
search spaces do not terminate.
"""
from __future__ import annotations

import logging
from typing import Any

from .goals import Goal
from .store import Store, empty
from .terms import Term, to_term
from .unification import substitute

logger = logging.getLogger(__name__)


def run(goal: Goal) -> list[Store]:
    """Run a goal from the empty store.

    Returns:
        All stores under which the goal succeeds, in order.
        An empty list means the goal is unsatisfiable.
    """
    results = goal(empty())
    logger.debug(f"Goal produced {len(results)} result stores")
    return results


def run_values(goal: Goal, term: Any) -> list[Term]:
    """Run a goal and resolve term against each result store.

    Example:
        x = var("x")
        run_values(choice(x, list_(1, 2)), x)  # [Atom(1), Atom(2)]
    """
    term = to_term(term)
    return [substitute(term, store) for store in run(goal)]

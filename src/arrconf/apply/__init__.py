"""Apply engine: plan and apply declared resources."""

from .declarations import Declaration, load_declarations, parse_declarations
from .engine import Action, ApplyReport, Change, Reconciler, state_entry
from .state import STATE_VERSION, State, StateEntry, load_state, save_state

__all__ = [
    "Declaration",
    "load_declarations",
    "parse_declarations",
    "Action",
    "ApplyReport",
    "Change",
    "Reconciler",
    "state_entry",
    "STATE_VERSION",
    "State",
    "StateEntry",
    "load_state",
    "save_state",
]

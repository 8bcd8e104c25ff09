"""Input adapters that materialize league snapshots."""

from .state import StateLoadError, fetch_state, load_state, state_from_payload

__all__ = [
    "StateLoadError",
    "fetch_state",
    "load_state",
    "state_from_payload",
]

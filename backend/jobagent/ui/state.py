# jobagent/ui/state.py
"""
Per-client UI state for the dashboard shell.

One ``UiState`` exists per client session. It is created on first use,
dropped on sign-out, and never persisted, so a process restart starts every
client with the overlay closed.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Hashable, Optional


@dataclass
class UiState:
    is_mobile_nav_open: bool = False
    current_path: Optional[str] = None

    def open_mobile_nav(self) -> None:
        self.set_mobile_nav_open(True)

    def close_mobile_nav(self) -> None:
        self.set_mobile_nav_open(False)

    def toggle_mobile_nav(self) -> None:
        self.set_mobile_nav_open(not self.is_mobile_nav_open)

    def set_mobile_nav_open(self, is_open: bool) -> None:
        self.is_mobile_nav_open = bool(is_open)

    def on_navigate(self, path: str) -> None:
        # Re-rendering the same page keeps the overlay; a route change dismisses it.
        if path != self.current_path:
            self.close_mobile_nav()
        self.current_path = path

    def to_dict(self) -> dict:
        return {"is_mobile_nav_open": self.is_mobile_nav_open}


class UiStateRegistry:
    """Owns the UiState of every live client session."""

    def __init__(self) -> None:
        self._states: dict[Hashable, UiState] = {}
        self._lock = threading.Lock()

    def for_client(self, client_id: Hashable) -> UiState:
        with self._lock:
            state = self._states.get(client_id)
            if state is None:
                state = UiState()
                self._states[client_id] = state
            return state

    def discard(self, client_id: Hashable) -> None:
        with self._lock:
            self._states.pop(client_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)

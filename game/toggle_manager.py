"""
Toggle Manager

Tracks which weather fields the panel shows. Active keys keep the order in
which they were switched on.
"""

from typing import Iterable, List


class ToggleManager:
    def __init__(self, active: Iterable[str] = ("Description", "Temperature")):
        self._active: List[str] = list(active)

    @property
    def active_toggles(self) -> List[str]:
        return list(self._active)

    def __len__(self) -> int:
        return len(self._active)

    def is_active(self, key: str) -> bool:
        return key in self._active

    def add(self, key: str):
        if key not in self._active:
            self._active.append(key)

    def remove(self, key: str):
        if key in self._active:
            self._active.remove(key)

    def toggle(self, key: str) -> bool:
        """Flip key; returns the new state."""
        if self.is_active(key):
            self.remove(key)
            return False
        self.add(key)
        return True

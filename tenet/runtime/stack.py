# tenet/runtime/stack.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Bounded debug call stack."""

from collections import deque
from typing import Deque, List, Optional


class CallStack:
    """
    Names of the wrapped functions currently executing, oldest first.

    Runtime Invariants:
    - never holds more than max_size entries; pushing past the bound evicts
      the oldest entry
    - popping an empty stack is a no-op
    - empty names are never recorded
    """

    def __init__(self, max_size: int) -> None:
        self._frames: Deque[str] = deque(maxlen=max_size)

    @property
    def max_size(self) -> int:
        return self._frames.maxlen

    def push(self, name: str) -> None:
        if name:
            self._frames.append(name)

    def pop(self) -> Optional[str]:
        if not self._frames:
            return None
        return self._frames.pop()

    def snapshot(self) -> List[str]:
        return list(self._frames)

    def resize(self, max_size: int) -> None:
        """Change the bound, keeping the most recent entries."""
        if max_size != self._frames.maxlen:
            self._frames = deque(self._frames, maxlen=max_size)

    def clear(self) -> None:
        self._frames.clear()

    def __len__(self) -> int:
        return len(self._frames)

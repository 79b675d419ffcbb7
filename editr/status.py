"""Transient status messages shown under the status bar."""

import time
from dataclasses import dataclass, field
from typing import Optional

from .constants import EditorConstants


@dataclass
class StatusMessage:
    text: str = ""
    time: float = field(default_factory=time.monotonic)

    def is_visible(self, now: Optional[float] = None) -> bool:
        """True while the message is younger than the display timeout."""
        if now is None:
            now = time.monotonic()
        return now - self.time < EditorConstants.STATUS_MESSAGE_TIMEOUT

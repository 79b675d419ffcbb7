"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')

    def is_special(self, name: str) -> bool:
        return self.key_type == KeyType.SPECIAL and self.value == name

    def is_printable(self) -> bool:
        """True for regular keys that insert text."""
        return (self.key_type == KeyType.REGULAR
                and bool(self.value)
                and (self.value == '\t' or ord(self.value[0]) >= 32))


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down',
}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event and map curtsies-style names to KeyEvent."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: Token such as 'a', '<LEFT>', '<Ctrl-q>' or a raw control char

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Esc+a>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            lower = key_str[1:-1].lower().replace('+', '-')
            parts = lower.split('-')
            base = parts[-1]
            mods = set(parts[:-1])
            # Normalize meta/esc prefixes to alt
            if mods & {'meta', 'esc'}:
                mods.add('alt')
            if base in ('pageup', 'page_up', 'ppage'):
                base = 'page_up'
            elif base in ('pagedown', 'page_down', 'npage'):
                base = 'page_down'

            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value=' ')
            if base == 'tab' and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value='\t')
            if 'ctrl' in mods and len(base) == 1:
                # Ctrl-J / Ctrl-M are what terminals send for Enter
                if base in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter')
                return KeyEvent(key_type=KeyType.CTRL, value=base)
            if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
                return KeyEvent(key_type=KeyType.ALT, value=base)
            if base in SPECIAL_KEYS:
                # Shift-modified specials move like the plain keys
                return KeyEvent(key_type=KeyType.SPECIAL, value=base)
            if base in ('esc', 'escape'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape')
            return KeyEvent(key_type=KeyType.SPECIAL, value=base)

        if len(key_str) == 1:
            o = ord(key_str)
            if o in (10, 13):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter')
            if o == 9:
                return KeyEvent(key_type=KeyType.REGULAR, value='\t')
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                return KeyEvent(key_type=KeyType.CTRL, value=chr(ord('a') + o - 1))
            if o == 127:
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace')
            if key_str == '\x1b':
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape')

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str)

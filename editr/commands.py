"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType
from .viewport import Direction

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command
        """
        pass


class MoveCommand(EditorCommand):
    """Cursor movement in one direction."""

    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, editor, key_event):
        editor.viewport.move(self.direction, editor.document)


class InsertCharCommand(EditorCommand):
    def execute(self, editor, key_event):
        if key_event.is_printable():
            editor.insert_char(key_event.value)


class InsertNewlineCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.insert_char('\n')


class BackspaceCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.backspace()


class DeleteCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.document.delete(editor.viewport.cursor)


class QuitCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.request_quit()


class SaveCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.save()


class SearchCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.search()


class HelpCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.show_help()


class CommandRegistry:
    """Maps key events to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_command = InsertCharCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        # Control keys
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.CTRL, 's'), SaveCommand())
        self.register((KeyType.CTRL, 'f'), SearchCommand())
        self.register((KeyType.CTRL, 'h'), HelpCommand())

        # Navigation
        for direction in Direction:
            self.register((KeyType.SPECIAL, direction.value), MoveCommand(direction))

        # Editing
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'delete'), DeleteCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key, if any."""
        if key_type == KeyType.REGULAR:
            return self._insert_command
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> Optional[EditorCommand]:
        """Execute the command bound to a key event.

        Returns:
            The command that ran, or None if the key is unbound
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is not None:
            command.execute(editor, key_event)
        return command

"""
Undo/Redo system for the color editor.

Provides a command-based undo stack for all saved colors modifications.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

from PySide6.QtCore import QObject, Signal

if TYPE_CHECKING:
    from chromaspace.core.collection import ColorCollection
    from chromaspace.core.data_types import SavedColor

logger = logging.getLogger(__name__)


class Command(ABC):
    """Abstract base for undoable commands."""

    @abstractmethod
    def redo(self) -> None:
        """Execute or re-execute the command."""
        pass

    @abstractmethod
    def undo(self) -> None:
        """Reverse the command."""
        pass

    @property
    def description(self) -> str:
        """Human-readable description of the command."""
        return self.__class__.__name__


class AddPointCommand(Command):
    """Command to add a user point."""

    def __init__(self, collection: ColorCollection, rgb: Sequence[float] | None = None):
        self._collection = collection
        self._rgb = rgb
        self._point: SavedColor | None = None
        self._index = 0
        self._previous_selection = collection.selected_id

    @property
    def point(self) -> SavedColor | None:
        """The added point, once executed."""
        return self._point

    def redo(self) -> None:
        """Add the point (same entity on re-execution)."""
        if self._point is None:
            self._point = self._collection.add_point(self._rgb)
            self._index = self._collection.index_of(self._point.id)
        else:
            self._collection.insert(self._point, self._index)

    def undo(self) -> None:
        """Remove the point."""
        if self._point is not None:
            self._collection.remove(self._point.id)
            if self._previous_selection in self._collection:
                self._collection.select(self._previous_selection)

    @property
    def description(self) -> str:
        return "Add Point"


class RemovePointCommand(Command):
    """Command to remove a user point."""

    def __init__(self, collection: ColorCollection, color_id: str):
        self._collection = collection
        self._point = collection.get(color_id)
        self._index = 0
        # Removal may switch interpolation off
        self._interpolation_enabled = collection.interpolation_enabled
        self._steps = collection.interpolation_steps
        self._previous_selection = collection.selected_id

    def redo(self) -> None:
        """Remove the point."""
        self._index = self._collection.remove(self._point.id)

    def undo(self) -> None:
        """Restore the point, interpolation state and selection."""
        self._collection.insert(self._point, self._index)

        if self._interpolation_enabled and not self._collection.interpolation_enabled:
            self._collection.set_interpolation(True, self._steps)

        if self._previous_selection in self._collection:
            self._collection.select(self._previous_selection)

    @property
    def description(self) -> str:
        return f"Remove {self._point.id}"


class DuplicatePointCommand(Command):
    """Command to duplicate a user point."""

    def __init__(self, collection: ColorCollection, color_id: str):
        self._collection = collection
        self._source_id = color_id
        self._copy: SavedColor | None = None
        self._index = 0

    @property
    def copy(self) -> SavedColor | None:
        """The duplicate, once executed."""
        return self._copy

    def redo(self) -> None:
        """Create the duplicate (same entity on re-execution)."""
        if self._copy is None:
            self._copy = self._collection.duplicate(self._source_id)
            self._index = self._collection.index_of(self._copy.id)
        else:
            self._collection.insert(self._copy, self._index)

    def undo(self) -> None:
        """Remove the duplicate and reselect its source."""
        if self._copy is not None:
            self._collection.remove(self._copy.id)
            if self._source_id in self._collection:
                self._collection.select(self._source_id)

    @property
    def description(self) -> str:
        return f"Duplicate {self._source_id}"


class ChangeColorCommand(Command):
    """Command to replace the RGB of a user point."""

    def __init__(self, collection: ColorCollection, color_id: str, new_rgb: Sequence[float]):
        self._collection = collection
        self._color_id = color_id
        self._old_rgb = collection.get(color_id).rgb
        self._new_rgb = tuple(new_rgb)

    def redo(self) -> None:
        """Set to new color."""
        self._collection.set_rgb(self._color_id, self._new_rgb)

    def undo(self) -> None:
        """Set to old color."""
        self._collection.set_rgb(self._color_id, self._old_rgb)

    @property
    def description(self) -> str:
        return f"Change {self._color_id}"


class ToggleInterpolationCommand(Command):
    """Command to switch interpolation on or off."""

    def __init__(self, collection: ColorCollection, enabled: bool, steps: int | None = None):
        self._collection = collection
        self._enabled = enabled
        self._steps = steps
        self._old_enabled = collection.interpolation_enabled
        self._old_steps = collection.interpolation_steps

    def redo(self) -> None:
        """Apply the new interpolation state."""
        self._collection.set_interpolation(self._enabled, self._steps)

    def undo(self) -> None:
        """Restore the previous interpolation state."""
        self._collection.set_interpolation(self._old_enabled, self._old_steps)

    @property
    def description(self) -> str:
        return "Enable Interpolation" if self._enabled else "Disable Interpolation"


class UndoStack(QObject):
    """
    Manages undo/redo operations.

    Maintains a stack of commands that can be undone and redone.
    """

    can_undo_changed = Signal(bool)
    can_redo_changed = Signal(bool)
    command_executed = Signal(str)  # Emits command description

    def __init__(self, max_size: int = 100):
        super().__init__()
        self._undo_stack: list[Command] = []
        self._redo_stack: list[Command] = []
        self._max_size = max_size

    def push(self, command: Command) -> None:
        """
        Push and execute a command.

        This clears the redo stack. A command that raises is not recorded.
        """
        command.redo()

        self._undo_stack.append(command)
        self._redo_stack.clear()

        # Limit stack size
        while len(self._undo_stack) > self._max_size:
            self._undo_stack.pop(0)

        logger.debug("Executed %s", command.description)
        self._emit_state_changes()
        self.command_executed.emit(command.description)

    def undo(self) -> bool:
        """Undo the last command."""
        if not self._undo_stack:
            return False

        command = self._undo_stack.pop()
        command.undo()
        self._redo_stack.append(command)

        logger.debug("Undid %s", command.description)
        self._emit_state_changes()
        return True

    def redo(self) -> bool:
        """Redo the last undone command."""
        if not self._redo_stack:
            return False

        command = self._redo_stack.pop()
        command.redo()
        self._undo_stack.append(command)

        logger.debug("Redid %s", command.description)
        self._emit_state_changes()
        return True

    def clear(self) -> None:
        """Clear both stacks."""
        self._undo_stack.clear()
        self._redo_stack.clear()
        self._emit_state_changes()

    def can_undo(self) -> bool:
        """Check if undo is available."""
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        """Check if redo is available."""
        return bool(self._redo_stack)

    def undo_text(self) -> str:
        """Get description of command that would be undone."""
        if self._undo_stack:
            return self._undo_stack[-1].description
        return ""

    def redo_text(self) -> str:
        """Get description of command that would be redone."""
        if self._redo_stack:
            return self._redo_stack[-1].description
        return ""

    def _emit_state_changes(self) -> None:
        """Emit signals for state changes."""
        self.can_undo_changed.emit(self.can_undo())
        self.can_redo_changed.emit(self.can_redo())

"""
Editor session assembly.

Builds the saved colors collection, undo stack and color editor from one
configuration, the way the main window wires them together.
"""

from __future__ import annotations

from dataclasses import dataclass

from chromaspace.core.collection import ColorCollection
from chromaspace.core.config import EditorConfig
from chromaspace.logging_config import setup_logging
from chromaspace.ui.editor import ColorEditor
from chromaspace.ui.undo import (
    AddPointCommand,
    DuplicatePointCommand,
    RemovePointCommand,
    ToggleInterpolationCommand,
    UndoStack,
)


@dataclass
class EditorSession:
    """
    Everything one editor window works with.

    Attributes:
        config: Settings the session was built from
        collection: Saved colors and selection
        undo_stack: History of collection edits
        editor: Controller behind the color controls
    """

    config: EditorConfig
    collection: ColorCollection
    undo_stack: UndoStack
    editor: ColorEditor

    @classmethod
    def create(
        cls, config: EditorConfig | None = None, configure_logging: bool = False
    ) -> EditorSession:
        """
        Build a session.

        Args:
            config: Settings, defaults if omitted
            configure_logging: Also apply ``config.log_level`` to the package logger
        """
        config = config if config is not None else EditorConfig()
        if configure_logging:
            setup_logging(config.log_level)

        collection = ColorCollection(config)
        undo_stack = UndoStack(max_size=config.undo_limit)
        editor = ColorEditor(collection, undo_stack)
        return cls(config=config, collection=collection, undo_stack=undo_stack, editor=editor)

    # Undoable shortcuts for the saved colors panel

    def add_point(self) -> str:
        """Add a point, returning its id."""
        command = AddPointCommand(self.collection)
        self.undo_stack.push(command)
        return command.point.id

    def duplicate_selected(self) -> str:
        """Duplicate the selected point, returning the copy's id."""
        command = DuplicatePointCommand(self.collection, self.collection.selected_id)
        self.undo_stack.push(command)
        return command.copy.id

    def remove(self, color_id: str) -> None:
        self.undo_stack.push(RemovePointCommand(self.collection, color_id))

    def set_interpolation(self, enabled: bool, steps: int | None = None) -> None:
        self.undo_stack.push(ToggleInterpolationCommand(self.collection, enabled, steps))

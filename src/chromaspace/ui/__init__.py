"""
chromaspace user interface layer.

Qt-side controllers for the color controls and the undo stack.
"""

from chromaspace.ui.editor import ColorEditor
from chromaspace.ui.session import EditorSession
from chromaspace.ui.undo import (
    AddPointCommand,
    ChangeColorCommand,
    Command,
    DuplicatePointCommand,
    RemovePointCommand,
    ToggleInterpolationCommand,
    UndoStack,
)

__all__ = [
    "ColorEditor",
    "EditorSession",
    "Command",
    "AddPointCommand",
    "RemovePointCommand",
    "DuplicatePointCommand",
    "ChangeColorCommand",
    "ToggleInterpolationCommand",
    "UndoStack",
]

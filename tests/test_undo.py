"""
Tests for the undo/redo system.
"""

import pytest

from chromaspace.core.collection import ColorCollection
from chromaspace.ui.undo import (
    AddPointCommand,
    ChangeColorCommand,
    Command,
    DuplicatePointCommand,
    RemovePointCommand,
    ToggleInterpolationCommand,
    UndoStack,
)


class RecordingCommand(Command):
    """Command that logs calls."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    def redo(self):
        self.log.append(("redo", self.name))

    def undo(self):
        self.log.append(("undo", self.name))


@pytest.fixture
def stack():
    return UndoStack()


class TestUndoStack:
    """Stack mechanics."""

    def test_push_undo_redo(self, stack):
        log = []
        stack.push(RecordingCommand("a", log))

        assert stack.can_undo()
        assert not stack.can_redo()
        assert stack.undo() is True
        assert stack.can_redo()
        assert stack.redo() is True
        assert log == [("redo", "a"), ("undo", "a"), ("redo", "a")]

    def test_empty_stack(self, stack):
        assert stack.undo() is False
        assert stack.redo() is False
        assert stack.undo_text() == ""
        assert stack.redo_text() == ""

    def test_push_clears_redo(self, stack):
        log = []
        stack.push(RecordingCommand("a", log))
        stack.undo()
        stack.push(RecordingCommand("b", log))

        assert not stack.can_redo()

    def test_max_size(self):
        stack = UndoStack(max_size=2)
        log = []
        for name in "abc":
            stack.push(RecordingCommand(name, log))

        assert stack.undo()
        assert stack.undo()
        assert not stack.undo()

    def test_clear(self, stack):
        stack.push(RecordingCommand("a", []))
        stack.clear()
        assert not stack.can_undo()

    def test_signals(self, stack):
        events = []
        stack.can_undo_changed.connect(lambda value: events.append(("undo", value)))
        stack.command_executed.connect(lambda text: events.append(("exec", text)))

        stack.push(RecordingCommand("a", []))

        assert ("undo", True) in events
        assert ("exec", "RecordingCommand") in events


class TestCollectionCommands:
    """Undoable saved colors operations."""

    def test_add_point(self, stack, collection):
        command = AddPointCommand(collection, (255, 0, 0))
        stack.push(command)
        point_id = command.point.id

        assert collection.selected_id == point_id
        assert stack.undo_text() == "Add Point"

        stack.undo()
        assert point_id not in collection
        assert collection.selected_id == ColorCollection.INITIAL_ID

        stack.redo()
        assert collection.get(point_id).rgb == (255.0, 0.0, 0.0)

    def test_remove_point(self, stack, collection):
        first = collection.add_point((1, 1, 1))
        collection.add_point((2, 2, 2))

        stack.push(RemovePointCommand(collection, first.id))
        assert first.id not in collection

        stack.undo()
        assert collection.index_of(first.id) == 1
        assert collection.get(first.id).rgb == (1.0, 1.0, 1.0)

    def test_undo_restores_same_entities(self, stack, collection):
        """Undo and redo bring back the entity objects, hue memory included."""
        add = AddPointCommand(collection, (0, 0, 255))
        stack.push(add)
        point = add.point
        point.hue_memory.derive_hsv(point.rgb)

        stack.push(RemovePointCommand(collection, point.id))
        stack.undo()
        assert collection.get(point.id) is point

        stack.undo()
        stack.redo()
        assert collection.get(point.id) is point
        assert point.hue_memory.hsv == pytest.approx(240.0)

    def test_remove_restores_interpolation(self, stack, black_white):
        """Undoing a removal that disabled interpolation turns it back on."""
        black_white.set_interpolation(True, 5)
        white = black_white.user_points[1]

        stack.push(RemovePointCommand(black_white, white.id))
        assert black_white.interpolation_enabled is False

        stack.undo()
        assert black_white.interpolation_enabled is True
        assert black_white.interpolation_steps == 5
        assert len(black_white.interpolated_points) == 3

    def test_remove_interpolated_not_recorded(self, stack, black_white):
        black_white.set_interpolation(True, 3)
        generated = black_white.interpolated_points[0]

        with pytest.raises(ValueError):
            stack.push(RemovePointCommand(black_white, generated.id))
        assert not stack.can_undo()

    def test_duplicate_point(self, stack, collection):
        command = DuplicatePointCommand(collection, ColorCollection.INITIAL_ID)
        stack.push(command)
        copy_id = command.copy.id

        assert collection.get(copy_id).rgb == collection.get(ColorCollection.INITIAL_ID).rgb

        stack.undo()
        assert copy_id not in collection
        assert collection.selected_id == ColorCollection.INITIAL_ID

        stack.redo()
        assert copy_id in collection

    def test_change_color(self, stack, collection):
        stack.push(ChangeColorCommand(collection, ColorCollection.INITIAL_ID, (9, 8, 7)))
        assert collection.selected.rgb == (9.0, 8.0, 7.0)

        stack.undo()
        assert collection.selected.rgb == (127.0, 127.0, 127.0)

    def test_toggle_interpolation(self, stack, black_white):
        stack.push(ToggleInterpolationCommand(black_white, True, 4))
        assert len(black_white.interpolated_points) == 2
        assert stack.undo_text() == "Enable Interpolation"

        stack.undo()
        assert black_white.interpolation_enabled is False
        assert black_white.interpolated_points == []

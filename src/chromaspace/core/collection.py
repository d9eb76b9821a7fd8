"""
Saved colors list.

Manages the ordered collection of point entities, the current selection and
the read-only points generated by interpolation between user points.
"""

from __future__ import annotations

import logging
import uuid
from typing import Iterator, Sequence

from PySide6.QtCore import QObject, Signal

from chromaspace.core.config import EditorConfig
from chromaspace.core.conversions import clamp_rgb
from chromaspace.core.data_types import SavedColor
from chromaspace.core.interpolation import interpolate_path

logger = logging.getLogger(__name__)


class ColorCollection(QObject):
    """
    Ordered collection of saved point colors.

    User points are mutable and can be duplicated or removed. When
    interpolation is enabled, read-only points are generated between every
    pair of consecutive user points and listed right after the point that
    starts their segment. The interpolated set is rebuilt whenever user
    points change.

    Signals:
        colors_changed: Emitted when entities are added, removed or regenerated
        color_changed: Emitted with an entity id after its RGB is replaced
        selection_changed: Emitted with the newly selected id
    """

    colors_changed = Signal()
    color_changed = Signal(str)
    selection_changed = Signal(str)

    INITIAL_ID = "initial"

    def __init__(self, config: EditorConfig | None = None, parent: QObject | None = None):
        super().__init__(parent)
        self.config = config if config is not None else EditorConfig()

        self._points: list[SavedColor] = [
            SavedColor(id=self.INITIAL_ID, rgb=self.config.initial_rgb)
        ]
        self._interpolated: dict[str, list[SavedColor]] = {}
        self._interpolation_enabled = False
        self._steps = self.config.interpolation_steps
        self._selected_id = self.INITIAL_ID

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def colors(self) -> list[SavedColor]:
        """All entities in display order."""
        result: list[SavedColor] = []
        for point in self._points:
            result.append(point)
            result.extend(self._interpolated.get(point.id, []))
        return result

    @property
    def user_points(self) -> list[SavedColor]:
        """User-created points in order."""
        return list(self._points)

    @property
    def interpolated_points(self) -> list[SavedColor]:
        """Generated points in display order."""
        return [c for c in self.colors if c.interpolated]

    @property
    def selected_id(self) -> str:
        return self._selected_id

    @property
    def selected(self) -> SavedColor:
        """The selected entity."""
        return self.get(self._selected_id)

    @property
    def interpolation_enabled(self) -> bool:
        return self._interpolation_enabled

    @property
    def interpolation_steps(self) -> int:
        return self._steps

    def get(self, color_id: str) -> SavedColor:
        """
        Look up an entity by id.

        Raises:
            KeyError: If no entity has this id
        """
        for color in self.colors:
            if color.id == color_id:
                return color
        raise KeyError(color_id)

    def index_of(self, color_id: str) -> int:
        """Position of a user point among user points."""
        for i, point in enumerate(self._points):
            if point.id == color_id:
                return i
        raise KeyError(color_id)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def add_point(self, rgb: Sequence[float] | None = None) -> SavedColor:
        """
        Append a new user point and select it.

        Args:
            rgb: Initial color, the configured initial color if omitted

        Returns:
            The new entity
        """
        point = SavedColor(
            id=self._new_id(),
            rgb=tuple(rgb) if rgb is not None else self.config.initial_rgb,
        )
        return self.insert(point, len(self._points))

    def insert(self, point: SavedColor, index: int) -> SavedColor:
        """
        Insert an existing user point at a position and select it.

        Used to restore removed points.
        """
        if point.interpolated:
            raise ValueError("Interpolated points cannot be inserted")
        if point.id in self:
            raise ValueError(f"Color with ID '{point.id}' already exists")

        self._points.insert(index, point)
        logger.debug("Added point %s at %d", point.id, index)

        self._regenerate()
        self.colors_changed.emit()
        self.select(point.id)
        return point

    def duplicate(self, color_id: str) -> SavedColor:
        """
        Copy a user point, inserting the copy right after it.

        Raises:
            ValueError: If the source point is interpolated
        """
        source = self.get(color_id)
        if source.interpolated:
            raise ValueError("Interpolated points cannot be duplicated")

        copy = source.copy_with(self._new_id())
        return self.insert(copy, self.index_of(color_id) + 1)

    def remove(self, color_id: str) -> int:
        """
        Remove a user point.

        Interpolation is switched off when fewer user points remain than
        it requires.

        Returns:
            Index the point had among user points

        Raises:
            ValueError: If the point is interpolated or the last one left
        """
        point = self.get(color_id)
        if point.interpolated:
            raise ValueError("Interpolated points cannot be removed")
        if len(self._points) == 1:
            raise ValueError("Cannot remove the last color")

        index = self.index_of(color_id)
        del self._points[index]
        logger.debug("Removed point %s", color_id)

        if (
            self._interpolation_enabled
            and len(self._points) < self.config.min_interpolation_points
        ):
            logger.debug("Too few points left, disabling interpolation")
            self._interpolation_enabled = False

        self._regenerate()
        self.colors_changed.emit()
        self._ensure_selection()
        return index

    def set_rgb(self, color_id: str, rgb: Sequence[float]) -> None:
        """
        Replace the color of a user point.

        Raises:
            ValueError: If the point is interpolated
        """
        point = self.get(color_id)
        if point.interpolated:
            raise ValueError("Interpolated points are read-only")

        point.rgb = clamp_rgb(rgb)
        self.color_changed.emit(color_id)

        if self._interpolation_enabled:
            self._regenerate()
            self.colors_changed.emit()
            self._ensure_selection()

    def select(self, color_id: str) -> None:
        """Select an entity by id."""
        if color_id not in self:
            raise KeyError(color_id)

        self._selected_id = color_id
        self.selection_changed.emit(color_id)

    # -------------------------------------------------------------------------
    # Interpolation
    # -------------------------------------------------------------------------

    def set_interpolation(self, enabled: bool, steps: int | None = None) -> None:
        """
        Turn interpolation on or off.

        Args:
            enabled: Whether to generate interpolated points
            steps: Samples per segment including both endpoints

        Raises:
            ValueError: If enabling with too few user points or steps < 2
        """
        if steps is not None:
            if steps < 2:
                raise ValueError(f"Interpolation needs at least 2 steps, got {steps}")
            self._steps = steps

        if enabled and len(self._points) < self.config.min_interpolation_points:
            raise ValueError(
                f"Interpolation needs at least {self.config.min_interpolation_points} points"
            )

        self._interpolation_enabled = enabled
        self._regenerate()
        self.colors_changed.emit()
        self._ensure_selection()

    def _regenerate(self) -> None:
        """Rebuild all interpolated points from the user points."""
        self._interpolated = {}
        if not self._interpolation_enabled:
            return

        segments = interpolate_path([p.rgb for p in self._points], self._steps)
        for index, colors in segments:
            start = self._points[index]
            self._interpolated[start.id] = [
                SavedColor(id=f"{start.id}:interp-{k + 1}", rgb=rgb, interpolated=True)
                for k, rgb in enumerate(colors)
            ]

        logger.debug(
            "Regenerated %d interpolated points (%d steps)",
            sum(len(c) for c in self._interpolated.values()),
            self._steps,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _ensure_selection(self) -> None:
        """Fall back to the first entity if the selection vanished."""
        if self._selected_id not in self:
            self.select(self._points[0].id)

    def _new_id(self) -> str:
        while True:
            color_id = f"point-{uuid.uuid4().hex[:8]}"
            if color_id not in self:
                return color_id

    def __len__(self) -> int:
        """Number of entities, interpolated included."""
        return len(self.colors)

    def __iter__(self) -> Iterator[SavedColor]:
        return iter(self.colors)

    def __contains__(self, color_id: object) -> bool:
        return any(c.id == color_id for c in self.colors)

    def __repr__(self) -> str:
        return (
            f"ColorCollection(points={len(self._points)}, "
            f"interpolated={len(self.interpolated_points)})"
        )

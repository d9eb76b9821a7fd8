"""
Color editor controller.

Headless model behind the RGB, HLS and HSV sliders and the color picker.
The selected entity's RGB is the single source of truth: every edit is
converted to RGB, stored, and the HLS/HSV readouts are derived again from
the stored RGB using the entity's hue memory.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from PySide6.QtCore import QObject, Signal

from chromaspace.core.conversions import hls_to_rgb, hsv_to_rgb
from chromaspace.core.data_types import ColorValues, SavedColor, hex_to_rgb
from chromaspace.ui.undo import ChangeColorCommand

if TYPE_CHECKING:
    from chromaspace.core.collection import ColorCollection
    from chromaspace.ui.undo import UndoStack

logger = logging.getLogger(__name__)


class ColorEditor(QObject):
    """
    Edits the selected color in any supported model.

    Signals:
        values_changed: Emitted with a ColorValues after every recompute
    """

    values_changed = Signal(object)

    def __init__(
        self,
        collection: ColorCollection,
        undo_stack: UndoStack | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._collection = collection
        self._undo_stack = undo_stack

        self._values = self._derive(collection.selected)

        collection.selection_changed.connect(self._on_selection_changed)
        collection.color_changed.connect(self._on_color_changed)
        collection.colors_changed.connect(self._on_colors_changed)

    @property
    def values(self) -> ColorValues:
        """Current derived values of the selected color."""
        return self._values

    @property
    def selected(self) -> SavedColor:
        return self._collection.selected

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def set_rgb(self, rgb: Sequence[float]) -> None:
        """Replace the selected color."""
        if len(rgb) != 3:
            raise ValueError(f"RGB must have 3 channels, got {len(rgb)}")
        self._apply(tuple(float(c) for c in rgb))

    def set_channel(self, index: int, value: float) -> None:
        """Replace one RGB channel (0 = red, 1 = green, 2 = blue)."""
        if index not in (0, 1, 2):
            raise ValueError(f"Channel index must be 0, 1 or 2, got {index}")

        rgb = list(self.selected.rgb)
        rgb[index] = float(value)
        self._apply(tuple(rgb))

    def set_hls(self, hue: float, lightness: float, saturation: float) -> None:
        """Set the selected color from HLS."""
        self._apply(hls_to_rgb(hue, lightness, saturation))

    def set_hsv(self, hue: float, saturation: float, value: float) -> None:
        """Set the selected color from HSV."""
        self._apply(hsv_to_rgb(hue, saturation, value))

    def set_hex(self, value: str) -> None:
        """Set the selected color from a ``#rrggbb`` string."""
        self._apply(hex_to_rgb(value))

    def refresh(self) -> ColorValues:
        """Derive HLS/HSV again from the selected RGB and notify."""
        self._values = self._derive(self.selected)
        self.values_changed.emit(self._values)
        return self._values

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _apply(self, rgb: tuple[float, ...]) -> None:
        """Store a new RGB on the selected entity."""
        selected = self.selected
        if selected.interpolated:
            raise ValueError("Interpolated points are read-only")

        if self._undo_stack is not None:
            self._undo_stack.push(ChangeColorCommand(self._collection, selected.id, rgb))
        else:
            self._collection.set_rgb(selected.id, rgb)

    @staticmethod
    def _derive(color: SavedColor) -> ColorValues:
        return ColorValues(
            rgb=color.rgb,
            hls=color.hue_memory.derive_hls(color.rgb),
            hsv=color.hue_memory.derive_hsv(color.rgb),
        )

    def _on_selection_changed(self, color_id: str) -> None:
        # Entities are created with fresh hue memory; reselecting keeps it
        logger.debug("Editing %s", color_id)
        self.refresh()

    def _on_color_changed(self, color_id: str) -> None:
        if color_id == self._collection.selected_id:
            self.refresh()

    def _on_colors_changed(self) -> None:
        # Selection is re-established after this signal when it vanished
        if self._collection.selected_id not in self._collection:
            return
        # Regenerated interpolated entities replace the selected object
        if self.selected.interpolated:
            self.refresh()

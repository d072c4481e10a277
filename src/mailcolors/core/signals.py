# mailcolors/core/signals.py
"""
Singleton event bus for colour invalidation.

Renderers that cache resolved colours (for example per index row) connect to
this bus and drop their cache when a class changes.

Usage:
    # Listen
    ColorSignals.get().connect("color-set", self._on_color_set)

    # Emit (done by the engine after a successful index colour change)
    ColorSignals.get().notify_color_set(ColorId.INDEX)
"""

import gi

gi.require_version("GObject", "2.0")
from gi.repository import GObject


class ColorSignals(GObject.Object):
    """
    Singleton event bus for colour changes.

    Signals:
        color-set: A colour class changed; carries the class id.
        colors-reset: Every regex colour list was cleared.
    """

    __gsignals__ = {
        "color-set": (GObject.SignalFlags.RUN_FIRST, None, (int,)),
        "colors-reset": (GObject.SignalFlags.RUN_FIRST, None, ()),
    }

    _instance = None

    def __init__(self):
        super().__init__()

    @classmethod
    def get(cls) -> "ColorSignals":
        """Get the singleton ColorSignals instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """
        Reset the singleton instance (useful for testing).

        Warning: This drops every connected handler.
        """
        cls._instance = None

    def notify_color_set(self, class_id) -> None:
        self.emit("color-set", int(class_id))

    def notify_colors_reset(self) -> None:
        self.emit("colors-reset")


def get_color_signals() -> ColorSignals:
    """Get the global ColorSignals instance."""
    return ColorSignals.get()

"""Layout constants used across layout modules.

Centralizes the numbers shared by the engine, the overflow estimator
and the placer.
"""

# ---------------------------------------------------------------------------
# Font / text metrics
# ---------------------------------------------------------------------------
TAB_WIDTH_IN_SPACES: float = 4.0
"""Width of a tab stop, in multiples of the font's space advance."""

DEFAULT_LINE_HEIGHT: float = 1.0
"""Line height factor applied to the font size when none is given."""

DEFAULT_FONT_SIZE: float = 16.0
"""Font size used by the CLI when none is given."""

# ---------------------------------------------------------------------------
# Font backend unit conversion
# ---------------------------------------------------------------------------
DEFAULT_SIZE_FACTOR: float = 1.0
"""Font size conversion factor for backends that already work in pixels."""

# ---------------------------------------------------------------------------
# Scrollbar reservation
# ---------------------------------------------------------------------------
DEFAULT_SCROLLBAR_THICKNESS: float = 10.0
"""Width of a vertical (or height of a horizontal) scrollbar in pixels."""

DEFAULT_SCROLLBAR_PADDING: float = 2.0
"""Inset of the scrollbar thumb inside its track, in pixels."""

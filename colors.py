import random

from errors import ConfigurationError


class ColorScale:
    """
    Ordered list of colors from "few views" to "many views".
    Colors are stored exactly as they appear in the source (no leading '#').
    """

    def __init__(self, colors, max_views):
        if not colors:
            raise ConfigurationError("Color scale is empty")
        if max_views < 1:
            raise ConfigurationError(f"max_views must be at least 1, got {max_views}")
        self._colors = tuple(colors)
        self._max_views = max_views

    @classmethod
    def from_source(cls, text, max_views):
        # One color per line, blank lines are ignored
        colors = [line for line in text.split("\n") if line]
        return cls(colors, max_views)

    @property
    def colors(self):
        return self._colors

    @property
    def max_views(self):
        return self._max_views

    def color_for_count(self, count):
        """
        Linear interpolation of the view count onto the color indices.
        Counts above max_views keep the last color.
        """
        views = min(max(count, 0), self._max_views)
        # floor(views * (len - 1) / max_views) without float rounding
        index = views * (len(self._colors) - 1) // self._max_views
        return self._colors[index]

    def random_color(self, rng=None):
        rng = rng or random
        if len(self._colors) == 1:
            return self._colors[0]
        # The last color is never picked; possible off-by-one, see DESIGN.md
        return self._colors[rng.randrange(0, len(self._colors) - 1)]

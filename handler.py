from dataclasses import dataclass

from errors import CounterUnavailable
from schema import FillMode


@dataclass(frozen=True)
class BadgeResult:
    """Either a rendered SVG (ok) or the error text to send back."""
    ok: bool
    body: str
    views: int | None = None
    color: str | None = None


class BadgeHandler:
    """
    Composition root: counter -> color scale -> template.

    The scale and template are read-only and shared by every worker thread.
    The counter is the only mutable piece and does its own locking.
    """

    def __init__(self, counter, scale, template):
        self.counter = counter
        self.scale = scale
        self.template = template

    def pick_color(self, views, fill_mode):
        if fill_mode == FillMode.RANDOM:
            return self.scale.random_color()
        return self.scale.color_for_count(views)

    def handle(self, key, fill_mode=FillMode.MILESTONE):
        try:
            views = self.counter.increment_and_get(key)
        except CounterUnavailable as exc:
            # No retry: the view is simply not counted
            return BadgeResult(ok=False, body=f"Failed to calculate view count, try again: {exc}")

        color = "#" + self.pick_color(views, fill_mode or FillMode.MILESTONE)
        return BadgeResult(ok=True, body=self.template.render(color, views), views=views, color=color)

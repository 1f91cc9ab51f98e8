import math


class FakeClock:
    """Deterministic monotonic clock for debounce tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def on_circle(center, r, theta):
    """Screen point at distance ``r`` and angle ``theta`` (degrees, clockwise with y down)."""
    return (
        center[0] + r * math.cos(math.radians(theta)),
        center[1] + r * math.sin(math.radians(theta)),
    )


def get_pixel(image, center, r, theta):
    """Helper to get the RGBA value of ``image`` at given polar coordinates."""
    x, y = on_circle(center, r, theta)
    return image.getpixel((int(x), int(y)))

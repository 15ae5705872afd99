import matplotlib

matplotlib.use("Agg")

import pytest

from phasordiagram import Canvas


class RecordingCanvas(Canvas):
    """Canvas that records the drawing calls instead of drawing."""

    def __init__(self) -> None:
        self.calls = []

    def draw_line(self, points, color, linestyle, linewidth) -> None:
        self.calls.append(("line", {
            "points": list(points),
            "color": color,
            "linestyle": linestyle,
            "linewidth": linewidth,
        }))

    def draw_arrow(self, start, end, edgecolor, facecolor, width, headlength, headwidth) -> None:
        self.calls.append(("arrow", {
            "start": start,
            "end": end,
            "edgecolor": edgecolor,
            "facecolor": facecolor,
            "width": width,
            "headlength": headlength,
            "headwidth": headwidth,
        }))

    def draw_text(self, point, text, ha, va, rotation) -> None:
        self.calls.append(("text", {
            "point": point,
            "text": text,
            "ha": ha,
            "va": va,
            "rotation": rotation,
        }))

    def get(self, kind: str) -> dict:
        return next(kw for name, kw in self.calls if name == kind)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

__all__ = ["Canvas", "MatplotlibCanvas"]


Point = tuple[float, float]


class Canvas(ABC):
    """
    Abstract drawing target of phasors.

    Implementations provide the three drawing primitives that are needed to
    draw a phasor: a line (the shaft), an arrow (the head) and a text (the
    label).
    """
    @abstractmethod
    def draw_line(
        self,
        points: Sequence[Point],
        color: str,
        linestyle: str,
        linewidth: float
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_arrow(
        self,
        start: Point,
        end: Point,
        edgecolor: str,
        facecolor: str,
        width: float,
        headlength: float,
        headwidth: float
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_text(
        self,
        point: Point,
        text: str,
        ha: str,
        va: str,
        rotation: float
    ) -> None:
        raise NotImplementedError


class MatplotlibCanvas(Canvas):
    """
    Draws onto matplotlib axes.

    Parameters
    ----------
    ax: Axes, optional
        The axes to draw on. If None, the current axes of pyplot is looked up
        each time something is drawn.
    """
    def __init__(self, ax: Axes | None = None) -> None:
        self._ax = ax

    @property
    def ax(self) -> Axes:
        if self._ax is None:
            return plt.gca()
        return self._ax

    def draw_line(self, points, color, linestyle, linewidth) -> None:
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        self.ax.plot(
            xs, ys,
            color=color,
            linestyle=linestyle,
            linewidth=linewidth
        )

    def draw_arrow(
        self,
        start,
        end,
        edgecolor,
        facecolor,
        width,
        headlength,
        headwidth
    ) -> None:
        # The head is drawn without the shaft's line style; a dashed style
        # would otherwise also apply to the contour of the head.
        self.ax.annotate(
            "",
            xy=end,
            xytext=start,
            xycoords="data",
            arrowprops={
                "edgecolor": edgecolor,
                "facecolor": facecolor,
                "width": width,
                "linestyle": "-",
                "headlength": headlength,
                "headwidth": headwidth
            },
            annotation_clip=False
        )

    def draw_text(self, point, text, ha, va, rotation) -> None:
        self.ax.text(
            point[0], point[1], text,
            ha=ha,
            va=va,
            rotation=rotation
        )

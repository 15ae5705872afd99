from __future__ import annotations
import logging

from .canvas import Canvas, MatplotlibCanvas
from .geometry import phasor_geometry
from .style import PhasorStyle

__all__ = ["phasor"]

logger = logging.getLogger(__name__)


def phasor(
    c,
    *,
    origin=None,
    ref=None,
    style: PhasorStyle | None = None,
    canvas: Canvas | None = None,
    **options
) -> None:
    """
    Draws a phasor from `origin` to `origin + c`. The phasor consists of a
    shaft, an arrow head and an (optional) label.

    Each phasor is drawn as a per-unit quantity, i.e. `c / ref` is what
    actually appears in the plot. This way phasors of different quantities,
    e.g. voltages and currents, can be drawn in one diagram: one constant
    `ref` is used for all voltage phasors and another one for all current
    phasors. Arguments `c`, `origin` and `ref` must have the same unit.

    Parameters
    ----------
    c:
        Complex phasor; may be a pint quantity.
    origin: optional
        Start point of the phasor, with the same unit as `c`. Default is zero.
    ref: optional
        Reference length for scaling, with the same unit as `c`. Default is
        `abs(c)`.
    style: PhasorStyle, optional
        Layout and style of the phasor. See class PhasorStyle for the
        available options and their defaults.
    canvas: Canvas, optional
        Drawing target. Default is the current matplotlib axes.
    **options:
        Individual PhasorStyle options (e.g. `label`, `tlabel`, `relrot`,
        `color`, `linestyle`, `par`) that override those of `style`.

    Raises
    ------
    DimensionMismatch
        If `c`, `origin` and `ref` do not have the same dimension. Nothing is
        drawn in that case.

    Example
    -------
    V1 = 100 * ureg.volt
    Z1 = (30 + 40j) * ureg.ohm
    I1 = V1 / Z1
    phasor(V1, label="$V_1$", tlabel=-0.1, relrot=True)
    phasor(I1, ref=0.8 * abs(I1), label="$I_1$", linestyle="--", par=0.05)
    """
    if style is None:
        style = PhasorStyle()
    style = style.replace(**options)
    if canvas is None:
        canvas = MatplotlibCanvas()

    geo = phasor_geometry(
        c, origin, ref,
        par=style.par,
        rlabel=style.rlabel,
        tlabel=style.tlabel
    )
    logger.debug(
        "Drawing phasor %r: length %.4g p.u., angle %.4g°",
        style.label, geo.dr, geo.absangle
    )
    # Shaft and head are drawn separately, so that the line style of the
    # shaft does not affect the head.
    canvas.draw_line(
        [geo.shaft_start, geo.shaft_end],
        color=style.color,
        linestyle=style.linestyle,
        linewidth=style.linewidth
    )
    canvas.draw_arrow(
        geo.head_start,
        geo.head_end,
        edgecolor=style.color,
        facecolor=style.color,
        width=style.width,
        headlength=style.headlength,
        headwidth=style.headwidth
    )
    canvas.draw_text(
        geo.label_anchor,
        style.label,
        ha=style.ha,
        va=style.va,
        rotation=style.label_rotation(geo.absangle)
    )

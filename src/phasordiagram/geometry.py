from __future__ import annotations
import logging
import math
from dataclasses import dataclass

import pint

from .units import DimensionMismatch, abs_like, magnitude, to_per_unit, zero_like

__all__ = ["PhasorGeometry", "phasor_geometry"]

logger = logging.getLogger(__name__)

Point = tuple[float, float]

# Fraction of the phasor after which the arrow head starts.
HEAD_ROOT = 0.99


@dataclass(frozen=True)
class PhasorGeometry:
    """
    Per-unit geometry of a phasor in the plot plane.

    Attributes
    ----------
    xorigin, yorigin: float
        Start point of the phasor (without parallel shift).
    drx, dry: float
        Real and imaginary part of the per-unit phasor.
    dr: float
        Per-unit length of the phasor.
    absangle: float
        Angle of the phasor in degrees.
    dtx, dty: float
        Unit vector tangential to the phasor, lagging the phasor by 90°.
        Both are zero for a phasor of zero length.
    dpx, dpy: float
        Parallel shift applied to shaft and head.
    rlabel, tlabel: float
        Radial and tangential per-unit position of the label.
    """
    xorigin: float
    yorigin: float
    drx: float
    dry: float
    dr: float
    absangle: float
    dtx: float
    dty: float
    dpx: float
    dpy: float
    rlabel: float
    tlabel: float

    @property
    def xend(self) -> float:
        return self.xorigin + self.drx

    @property
    def yend(self) -> float:
        return self.yorigin + self.dry

    @property
    def shaft_start(self) -> Point:
        return self.xorigin + self.dpx, self.yorigin + self.dpy

    @property
    def shaft_end(self) -> Point:
        return self.xend + self.dpx, self.yend + self.dpy

    @property
    def head_start(self) -> Point:
        return (
            self.xorigin + self.drx * HEAD_ROOT + self.dpx,
            self.yorigin + self.dry * HEAD_ROOT + self.dpy
        )

    @property
    def head_end(self) -> Point:
        return self.shaft_end

    @property
    def label_anchor(self) -> Point:
        return (
            self.xorigin + self.drx * self.rlabel + self.dtx * self.tlabel + self.dpx,
            self.yorigin + self.dry * self.rlabel + self.dty * self.tlabel + self.dpy
        )


def phasor_geometry(
    c,
    origin=None,
    ref=None,
    par: float = 0.0,
    rlabel: float = 0.5,
    tlabel: float = 0.1
) -> PhasorGeometry:
    """
    Computes the per-unit geometry of phasor `c` drawn from `origin`.

    Parameters
    ----------
    c:
        Complex phasor; may be a pint quantity.
    origin: optional
        Start point of the phasor, with the same unit as `c`. If None, the
        phasor starts at zero.
    ref: optional
        Reference length used to scale the phasor to per-unit values, with the
        same unit as `c`; must be positive. If None, `abs(c)` is used.
    par: float
        Per-unit tangential shift of the phasor.
    rlabel: float
        Radial per-unit position of the label.
    tlabel: float
        Tangential per-unit position of the label.

    Raises
    ------
    DimensionMismatch
        If `c`, `origin` and `ref` do not have the same dimension.
    ValueError
        If `ref` is not positive.
    """
    if origin is None:
        origin = zero_like(c)
    if ref is None:
        ref = abs_like(c)
    if magnitude(ref) <= 0:
        raise ValueError("Reference length 'ref' must be positive.")
    try:
        end = origin + c
        xorigin = to_per_unit(origin.real, ref)
        yorigin = to_per_unit(origin.imag, ref)
        xend = to_per_unit(end.real, ref)
        yend = to_per_unit(end.imag, ref)
    except (DimensionMismatch, pint.DimensionalityError) as err:
        raise DimensionMismatch(
            "Dimension mismatch of arguments 'c', 'origin' and 'ref'. "
            "The arguments 'c', 'origin' and 'ref' must have the same "
            "dimension (coherent SI unit)."
        ) from err

    drx = xend - xorigin
    dry = yend - yorigin
    dr = math.hypot(drx, dry)
    absangle = math.degrees(math.atan2(dry, drx))
    if dr == 0.0:
        logger.warning(
            "Phasor has zero length; label is placed without tangential offset."
        )
        dtx, dty = 0.0, 0.0
    else:
        dtx, dty = dry / dr, -drx / dr
    return PhasorGeometry(
        xorigin=xorigin,
        yorigin=yorigin,
        drx=drx,
        dry=dry,
        dr=dr,
        absangle=absangle,
        dtx=dtx,
        dty=dty,
        dpx=par * dtx,
        dpy=par * dty,
        rlabel=rlabel,
        tlabel=tlabel
    )

from __future__ import annotations
from typing import Any

import numpy as np
import pint

__all__ = ["j", "pol", "polar"]


j = 1j


def pol(r, phi):
    """
    Returns the complex quantity with length `r` and angle `phi`.

    Parameters
    ----------
    r:
        Length of the complex quantity. May be a pint quantity, e.g. a voltage,
        in which case the result carries the same unit. A negative length
        reverses the direction.
    phi:
        Angle in radians, or a pint angle quantity (e.g. `45 * ureg.degree`).

    Both arguments may also be numpy arrays; the conversion is then done
    element-wise.

    Examples
    --------
    pol(2 * ureg.volt, math.pi)                     -> -2 + 0j V
    pol(math.sqrt(2) * ureg.volt, 45 * ureg.degree) ->  1 + 1j V
    """
    if isinstance(phi, pint.Quantity):
        phi = phi.m_as("radian")
    return r * np.cos(phi) + 1j * r * np.sin(phi)


def polar(z) -> tuple[Any, float]:
    """Returns (magnitude, angle_deg) of `z`. The magnitude keeps the unit of `z`."""
    if isinstance(z, pint.Quantity):
        angle = np.angle(z.magnitude, deg=True)
    else:
        angle = np.angle(z, deg=True)
    return abs(z), float(angle)

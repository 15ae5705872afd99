from __future__ import annotations

import pint

__all__ = [
    "ureg",
    "Quantity",
    "DimensionMismatch",
    "magnitude",
    "to_per_unit",
    "zero_like",
    "abs_like"
]

ureg = pint.UnitRegistry()
Quantity = ureg.Quantity


class DimensionMismatch(ValueError):
    """
    Raised when quantities that are combined into one per-unit value do not
    share the same physical dimension.
    """
    pass


def magnitude(q):
    """Returns the numeric magnitude of `q`, stripped of its unit."""
    if isinstance(q, pint.Quantity):
        return q.magnitude
    return q


def to_per_unit(value, ref) -> float:
    """
    Divides `value` by `ref` and returns the dimensionless result as a float.

    Parameters
    ----------
    value:
        Real number or pint quantity.
    ref:
        Reference scale; must have the same dimension as `value`.

    Raises
    ------
    DimensionMismatch
        If `value / ref` is not dimensionless.
    """
    q = value / ref
    if isinstance(q, pint.Quantity):
        try:
            return float(q.m_as("dimensionless"))
        except pint.DimensionalityError as err:
            raise DimensionMismatch(
                f"Cannot convert '{q.units}' to a per-unit value."
            ) from err
    return float(q)


def zero_like(c):
    """Returns complex zero with the unit of `c` (if any)."""
    if isinstance(c, pint.Quantity):
        return Quantity(0.0 + 0.0j, c.units)
    return 0.0 + 0.0j


def abs_like(c):
    """Returns the magnitude of `c`, keeping its unit (if any)."""
    if isinstance(c, pint.Quantity):
        return Quantity(abs(c.magnitude), c.units)
    return abs(c)

from __future__ import annotations
from dataclasses import dataclass, replace

__all__ = ["PhasorStyle"]


@dataclass(frozen=True)
class PhasorStyle:
    """
    Layout and style options of a single phasor.

    Attributes
    ----------
    par: float
        Per-unit tangential shift of the phasor with respect to `ref`. Used to
        draw parallel phasors next to each other; typical values are 0.05 to
        0.1. Default is 0 (no shift).
    rlabel: float
        Radial per-unit position of the label in the direction of the phasor:
        0 is the start of the shaft, 1 is the arrow head. Default is 0.5.
    tlabel: float
        Tangential per-unit displacement of the label with respect to `ref`:
        0 puts the label onto the phasor, a negative value (e.g. -0.1) puts it
        on top of the phasor. Default is 0.1.
    label: str
        Label text; may contain matplotlib mathtext.
    ha: str
        Horizontal alignment of the label, i.e. its tangential alignment.
    va: str
        Vertical alignment of the label, i.e. its radial alignment.
    relrot: bool
        If False, the label is rotated by `relangle` only. If True, the label
        is rotated by the angle of the phasor plus `relangle`.
    relangle: float
        Label rotation in degrees.
    color: str
        Color of shaft and arrow head.
    linestyle: str
        Line style of the shaft. The arrow head is always drawn solid.
    linewidth: float
        Line width of the shaft.
    width: float
        Width of the arrow.
    headlength: float
        Length of the arrow head.
    headwidth: float
        Width of the arrow head.
    """
    par: float = 0.0
    rlabel: float = 0.5
    tlabel: float = 0.1
    label: str = ""
    ha: str = "center"
    va: str = "center"
    relrot: bool = False
    relangle: float = 0.0
    color: str = "black"
    linestyle: str = "-"
    linewidth: float = 1.0
    width: float = 0.2
    headlength: float = 10.0
    headwidth: float = 5.0

    def label_rotation(self, absangle: float) -> float:
        """Rotation of the label in degrees for a phasor at `absangle` degrees."""
        if self.relrot:
            return absangle + self.relangle
        return self.relangle

    def replace(self, **changes) -> PhasorStyle:
        """Returns a copy with the given options changed."""
        if not changes:
            return self
        return replace(self, **changes)

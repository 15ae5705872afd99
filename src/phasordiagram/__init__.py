from .units import ureg, Quantity, DimensionMismatch
from .polar import j, pol, polar
from .style import PhasorStyle
from .geometry import PhasorGeometry, phasor_geometry
from .canvas import Canvas, MatplotlibCanvas
from .drawing import phasor

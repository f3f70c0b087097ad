"""Vector diagrams from geometric primitives, serialized as SVG.

Diagrams are assembled from paths, polygons, stars and ellipses
into a tree of SVG elements. Finalizing the tree computes bounding
boxes and bakes transforms, after which the tree is serialized as a
stream of markup events which can be written out as XML with lxml.
"""

import importlib.metadata

from .bbox import BBox
from .bezier import Bezier
from .bezierpath import BezierPath
from .color import Color
from .element import SvgElement
from .errors import InvalidTransformMatrix, SvgError
from .events import ElementIter, EventKind, XmlEvent
from .interval import Interval
from .point import P
from .polygon import Polygon
from .svg import Svg, SvgConfig, SvgVersion
from .transform import Transform

__version__ = importlib.metadata.version('svg-diagram')

__all__ = [
    'BBox',
    'Bezier',
    'BezierPath',
    'Color',
    'ElementIter',
    'EventKind',
    'InvalidTransformMatrix',
    'Interval',
    'P',
    'Polygon',
    'Svg',
    'SvgConfig',
    'SvgElement',
    'SvgError',
    'SvgVersion',
    'Transform',
    'XmlEvent',
]

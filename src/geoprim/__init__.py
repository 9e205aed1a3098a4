# -*- coding: utf-8 -*-
"""low-dimensional Euclidean geometry primitives"""

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("geoprim")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from geoprim.core import *
from geoprim.errors import *
from geoprim.vector import Vector, triple
from geoprim.point import Point
from geoprim.line import Line
from geoprim.segment import LineSegment, SegmentIntersection
from geoprim.plane import Plane
from geoprim.aliases import *
from geoprim.log import setup_logging

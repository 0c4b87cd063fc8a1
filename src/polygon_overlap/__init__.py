from .common.bounds import make_bounds, intersects, contains
from .common.shapes import interpolate_polygon, point_in_polygon
from .region_tree.quadtree import QuadTreeNode, new_tree
from .region_tree.overlap import OverlapDetector
from .annotation.session import AnnotationSession, PolygonRecord

__version__ = '0.0.1'
name = 'polygon_overlap'

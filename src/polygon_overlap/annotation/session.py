"""
Annotation session state: the polygons drawn by the admin and the user,
the drawing buffer and the overlap between the two roles.
"""

import torch

from ..common import shapes, polygon_utils
from ..common.bounds import make_bounds
from ..region_tree.quadtree import QuadTreeNode, DEFAULT_BOUNDS, MAX_ITEMS, MAX_DEPTH
from ..region_tree.overlap import OverlapDetector, ROLES, check_role

COLOR_CHOICES = {
    "Red": "#FF0000",
    "Green": "#00FF00",
    "Blue": "#0000FF",
    "Yellow": "#FFFF00",
    "Magenta": "#FF00FF",
}
DEFAULT_COLORS = {"admin": "#FF0000", "user": "#0000FF"}
SHOW_DEBUG_LOGS = False

def check_color(color):
    if color not in COLOR_CHOICES.values():
        raise ValueError("Unsupported color '{}', expected one of {}".format(
            color, sorted(COLOR_CHOICES.values())))

class PolygonRecord:
    """
    A finalized polygon. Owns its clicked vertices, its densified boundary
    points and a quadtree over those points used for debug drawing.
    """
    def __init__(self, vertices, points, color, role, tree):
        self.vertices = vertices
        self.points = points
        self.color = color
        self.role = role
        self.tree = tree

    def __repr__(self):
        return "PolygonRecord(role={}, color={}, vertices={}, points={})".format(
            self.role, self.color, len(self.vertices), len(self.points))

class AnnotationSession:
    def __init__(self, bbox=None, max_items=MAX_ITEMS, depth=MAX_DEPTH,
                 step=shapes.INTERPOLATION_STEP, tolerance=0.):
        if bbox is None:
            bbox = make_bounds(*DEFAULT_BOUNDS)
        self.bbox = bbox
        self.max_items = max_items
        self.depth = depth
        self.step = step
        self.stage = "admin"
        self.colors = dict(DEFAULT_COLORS)
        self.current = []
        self.is_drawing = False
        self.polygons = {role: [] for role in ROLES}
        self.selected = None
        self.detector = OverlapDetector(bbox, max_items, depth, tolerance)

    @property
    def common_points(self):
        return self.detector.common_points

    def start_polygon(self):
        self.is_drawing = True
        self.current = []

    def add_click(self, x, y):
        if not self.is_drawing:
            return
        self.current.append([float(x), float(y)])

    def end_polygon(self):
        """
        Finalizes the polygon in the drawing buffer for the current stage.

        Returns:
        - The new PolygonRecord, or None if the buffer held fewer than three
            distinct vertices.
        """
        self.is_drawing = False
        vertices, self.current = self.current, []
        if shapes.distinct_vertex_count(vertices) < 3:
            if SHOW_DEBUG_LOGS:
                print("discarding polygon with {} vertices".format(len(vertices)))
            return None
        return self.add_polygon(self.stage, self.colors[self.stage], vertices)

    def add_polygon(self, role, color, vertices):
        check_role(role)
        vertices = torch.as_tensor(vertices, dtype=torch.float64).reshape(-1, 2)
        points = shapes.interpolate_polygon(vertices, self.step)
        tree = QuadTreeNode(self.bbox, self.max_items, self.depth)
        tree.insert_all(points)
        record = PolygonRecord(vertices, points, color, role, tree)
        self.polygons[role].append(record)
        self.detector.add_points(role, points)
        if SHOW_DEBUG_LOGS:
            print("added {}, {} common points".format(record, len(self.common_points)))
        return record

    def set_color(self, role, color):
        check_role(role)
        check_color(color)
        self.colors[role] = color

    def select_polygon(self, record):
        self.selected = record

    def all_polygons(self):
        return self.polygons["admin"] + self.polygons["user"]

    def upload(self, role, filename):
        """
        Saves the polygons of `role` to `filename`. Uploading as admin hands
        the session over to the user.
        """
        check_role(role)
        polygon_utils.save_polygons(filename, self.polygons[role])
        if role == "admin":
            self.stage = "user"
        self.current = []

    def load(self, filename):
        """
        Replays the polygons saved in `filename`. Every role and color is
        checked before any polygon is added, so a bad file leaves the
        session unchanged.
        """
        polygons = polygon_utils.load_polygons(filename)
        for role, color, _ in polygons:
            check_role(role)
            check_color(color)
        records = []
        for role, color, vertices in polygons:
            records.append(self.add_polygon(role, color, vertices))
        return records

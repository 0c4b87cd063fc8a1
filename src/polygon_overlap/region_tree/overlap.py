"""
Overlap detection between the admin and user point collections.
"""

from ..common.bounds import make_bounds
from .quadtree import QuadTreeNode, DEFAULT_BOUNDS, MAX_ITEMS, MAX_DEPTH

ROLES = ("admin", "user")

def check_role(role):
    if role not in ROLES:
        raise ValueError("Unknown role '{}', expected one of {}".format(role, ROLES))

class OverlapDetector:
    """
    Holds one shared quadtree per role and the admin points whose
    coordinates also appear among the user points.

    The trees are append-only. `common_points` is recomputed after every
    `add_points` call, so readers always see the result for the current
    contents of both trees.
    """
    def __init__(self, bbox=None, max_items=MAX_ITEMS, depth=MAX_DEPTH, tolerance=0.):
        if bbox is None:
            bbox = make_bounds(*DEFAULT_BOUNDS)
        if tolerance < 0:
            raise ValueError("tolerance must be non-negative, got {}".format(tolerance))
        self.tolerance = tolerance
        self.admin_tree = QuadTreeNode(bbox, max_items, depth)
        self.user_tree = QuadTreeNode(bbox, max_items, depth)
        self.common_points = []

    def tree_for(self, role):
        check_role(role)
        return self.admin_tree if role == "admin" else self.user_tree

    def add_points(self, role, points):
        """
        Appends boundary points to the shared tree of `role` and recomputes
        the overlap.

        Returns:
        - The number of points accepted by the tree.
        """
        accepted = self.tree_for(role).insert_all(points)
        self.recompute()
        return accepted

    def recompute(self):
        self.common_points = self.admin_tree.find_common_points(
            self.user_tree, self.tolerance)
        return self.common_points

"""
Quadtree data structure storing 2D points in image pixel space.
"""

import torch

from ..common import debug_utils
from ..common.bounds import make_bounds, point_bounds, intersects, contains, center, quadrants

DEFAULT_BOUNDS = (0., 0., 600., 400.)
MAX_ITEMS = 1
MAX_DEPTH = 8
SHOW_DEBUG_LOGS = False

class QuadTreeNode:
    def __init__(self, bbox, max_items=MAX_ITEMS, depth=MAX_DEPTH):
        """
        Args:
        - bbox: Tensor of shape [2, 2] (see common.bounds) giving the region of
            space covered by this node.
        - max_items: number of points a node stores directly before it
            subdivides.
        - depth: remaining subdivision budget. A node with depth 0 never
            subdivides and stores every point it contains.
        """
        if max_items < 1:
            raise ValueError("max_items must be at least 1, got {}".format(max_items))
        if depth < 0:
            raise ValueError("depth must be non-negative, got {}".format(depth))
        if bbox[0, 0] > bbox[1, 0] or bbox[0, 1] > bbox[1, 1]:
            raise ValueError("Invalid bounds {}".format(bbox.tolist()))
        self.bbox = bbox
        self.max_items = max_items
        self.depth = depth
        self.points = []
        self.children = []

    def __len__(self):
        return len(self.points) + sum(len(child) for child in self.children)

    def insert(self, point):
        """
        Inserts a point into the subtree rooted at this node.

        Returns:
        - True if the point was stored, False if it lies outside the bounds.
        """
        return self._insert(debug_utils.as_point(point))

    def _insert(self, p):
        if not contains(self.bbox, p):
            return False

        if self.depth == 0 or len(self.points) < self.max_items:
            self.points.append(p)
            return True

        if len(self.children) == 0:
            self.subdivide()
        # The first child accepting the point wins, so points on a shared
        # edge go to the earliest quadrant in top-left, top-right,
        # bottom-left, bottom-right order.
        for child in self.children:
            if child._insert(p):
                return True
        return False

    def insert_all(self, points):
        """
        Inserts every point of an iterable (or a tensor of shape [N, 2]) in order.

        Returns:
        - The number of points that were accepted.
        """
        accepted = 0
        total = 0
        for point in points:
            total += 1
            if self.insert(point):
                accepted += 1
            elif SHOW_DEBUG_LOGS:
                print("rejected point {} outside bounds {}".format(
                    torch.as_tensor(point).tolist(), self.bbox.tolist()))
        if SHOW_DEBUG_LOGS:
            print("inserted {} of {} points".format(accepted, total))
        return accepted

    def subdivide(self):
        if len(self.children) != 0 or self.depth == 0:
            return
        next_depth = self.depth - 1
        self.children = [
            QuadTreeNode(child_bbox, self.max_items, next_depth)
            for child_bbox in quadrants(self.bbox)
        ]

    def query_range(self, range_bbox, found=None):
        """
        Finds all points within a given bounding box (inclusive edges).

        Args:
        - range_bbox: Tensor of shape [2, 2]. May have zero area.
        - found: optional list to which found points will be appended.

        Returns:
        - A list of point tensors: this node's points in insertion order,
            followed by the points of each child in quadrant order.
        """
        if found is None:
            found = []
        if not intersects(range_bbox, self.bbox):
            return found

        for p in self.points:
            if contains(range_bbox, p):
                found.append(p)

        for child in self.children:
            child.query_range(range_bbox, found)

        return found

    def find_common_points(self, other, tolerance=0., common=None):
        """
        Finds the points of this tree which have a counterpart in `other`.

        Every point stored here is looked up in `other` with a range query
        centered on it. With tolerance 0 the query is a single point, so only
        exact coordinate matches count. The two trees need not share any
        structure, only a coordinate space.

        Args:
        - other: root QuadTreeNode to match against.
        - tolerance: half-width of the square matching window in pixels.

        Returns:
        - A list of point tensors from this tree, in query_range order.
        """
        if common is None:
            common = []
        if not intersects(self.bbox, other.bbox):
            return common

        for p in self.points:
            if len(other.query_range(point_bounds(p, tolerance))) > 0:
                common.append(p)

        for child in self.children:
            child.find_common_points(other, tolerance, common)

        return common

    def get_center(self):
        return center(self.bbox)

    def leaves(self):
        """
        Debug-draw traversal. Yields (bbox, center) for every node without
        children, in quadrant order.
        """
        if len(self.children) == 0:
            yield self.bbox, self.get_center()
            return
        for child in self.children:
            yield from child.leaves()

    def leaf_for_point(self, p):
        p = torch.as_tensor(p, dtype=torch.float64)
        if not contains(self.bbox, p):
            return None
        for child in self.children:
            l = child.leaf_for_point(p)
            if l is not None:
                return l
        return self

    def max_path_length(self):
        """Returns the number of nodes on the longest root-to-leaf path."""
        if len(self.children) == 0:
            return 1
        return 1 + max(child.max_path_length() for child in self.children)

def new_tree(bounds=DEFAULT_BOUNDS, max_items=MAX_ITEMS, depth=MAX_DEPTH):
    """
    Creates an empty tree over the given (left, top, right, bottom) bounds.
    """
    return QuadTreeNode(make_bounds(*bounds), max_items, depth)

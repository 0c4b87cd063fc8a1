"""
Axis-aligned bounding boxes in image pixel space.

A bounding box is a float64 tensor of shape [2, 2] where bbox[0] gives the
xy-coordinate of the top-left corner (left, top) and bbox[1] gives the
bottom-right corner (right, bottom). All tests are inclusive on every edge.
"""

import torch

def make_bounds(left, top, right, bottom):
    """
    Builds a bounding box from its four edges.

    Raises:
    - ValueError if left > right or top > bottom.
    """
    if left > right or top > bottom:
        raise ValueError(
            "Invalid bounds (left={}, top={}, right={}, bottom={}): "
            "expected left <= right and top <= bottom.".format(
                left, top, right, bottom))
    return torch.tensor([[left, top], [right, bottom]], dtype=torch.float64)

def point_bounds(p, tolerance=0.):
    """
    Returns the square range of half-width `tolerance` centered on the 2D
    point p. With tolerance 0 the range is degenerate and only matches points
    at exactly the coordinates of p.
    """
    if tolerance < 0:
        raise ValueError("tolerance must be non-negative, got {}".format(tolerance))
    return torch.stack([p - tolerance, p + tolerance])

def intersects(bbox1, bbox2):
    """
    Returns whether two two-dimensional bounding boxes intersect.

    Args:
    - bbox1: Tensor of shape [2, 2] where bbox1[0] gives the xy-coordinate
        of the top-left corner and bbox[1] gives the bottom-right corner.
    - bbox2: Same format as bbox1.

    Returns:
    - A boolean indicating whether the bounding boxes intersect.
    """
    return bool(bbox1[0, 0] <= bbox2[1, 0] and bbox1[1, 0] >= bbox2[0, 0] and
                bbox1[0, 1] <= bbox2[1, 1] and bbox1[1, 1] >= bbox2[0, 1])

def contains(bbox, p):
    """
    Returns whether a bounding box contains a 2D point p.

    Args:
    - bbox: Tensor of shape [2, 2] where bbox1[0] gives the xy-coordinate
        of the top-left corner and bbox[1] gives the bottom-right corner.
    - p: Tensor of shape [2].

    Returns:
    - A boolean indicating whether bbox contains p.
    """
    return bool(p[0] <= bbox[1][0] and p[0] >= bbox[0][0] and
                p[1] <= bbox[1][1] and p[1] >= bbox[0][1])

def center(bbox):
    return (bbox[0] + bbox[1]) / 2.

def quadrants(bbox):
    """
    Splits a bounding box at the midpoint of each axis.

    Returns:
    - A list of four bounding boxes in the order top-left, top-right,
        bottom-left, bottom-right. Points on a shared edge belong to the first
        quadrant in this order whose bounds contain them.
    """
    top = bbox[0][1]
    left = bbox[0][0]
    right = bbox[1][0]
    bottom = bbox[1][1]
    mid = center(bbox)
    return [
        # top-left
        torch.stack([bbox[0], mid]),
        # top-right
        torch.stack([
            torch.stack([mid[0], top]),
            torch.stack([right, mid[1]])
        ]),
        # bottom-left
        torch.stack([
            torch.stack([left, mid[1]]),
            torch.stack([mid[0], bottom])
        ]),
        # bottom-right
        torch.stack([mid, bbox[1]]),
    ]

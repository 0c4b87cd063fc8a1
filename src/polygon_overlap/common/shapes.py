import torch
import numpy as np

INTERPOLATION_STEP = 5.

def interpolate_segment(start, end, step=INTERPOLATION_STEP):
    """
    Samples points along the line segment from `start` to `end`.

    Args:
    - start, end: 2D points, tensors with shape [2] or (x, y) pairs.
    - step: maximum spacing in pixels between consecutive samples.

    Returns: Float tensor of shape [ceil(distance / step) + 1, 2]. The first
    row is `start` and the last row is (up to rounding) `end`. A zero-length
    segment yields the single point `start`.
    """
    if step <= 0:
        raise ValueError("step must be positive, got {}".format(step))
    start = torch.as_tensor(start, dtype=torch.float64)
    end = torch.as_tensor(end, dtype=torch.float64)
    distance = float(torch.linalg.vector_norm(end - start, ord=2))
    steps = int(np.ceil(distance / step))
    if steps == 0:
        return start[None, :].clone()
    step_xy = (end - start) / steps
    i = torch.arange(steps + 1, dtype=torch.float64)[:, None] # [steps + 1, 1]
    return start[None, :] + step_xy[None, :] * i

def interpolate_polygon(vertices, step=INTERPOLATION_STEP):
    """
    Densifies a closed polygon into a sequence of boundary points.

    Each edge is sampled with interpolate_segment, including the closing edge
    from the last vertex back to the first. Shared vertices appear once at
    the end of one edge and once at the start of the next.

    Returns: Float tensor of shape [N, 2].
    """
    vertices = torch.as_tensor(vertices, dtype=torch.float64)
    if len(vertices.shape) != 2 or vertices.shape[1] != 2:
        raise ValueError("vertices must have shape [vertex_count, 2]")
    if len(vertices) == 0:
        return torch.zeros([0, 2], dtype=torch.float64)
    edges = []
    for i in range(len(vertices)):
        # wraps around to close the polygon
        edges.append(interpolate_segment(vertices[i - 1], vertices[i], step))
    # rotate so that the first edge starts at vertices[0]
    edges = edges[1:] + edges[:1]
    return torch.cat(edges, 0)

def distinct_vertex_count(vertices):
    vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 2)
    if len(vertices) == 0:
        return 0
    return len(np.unique(vertices, axis=0))

def point_in_polygon(p, polygon):
    """
    Even-odd ray casting test for a 2D point against a closed polygon.

    Args:
    - p: 2D point, a tensor with shape [2] or an (x, y) pair.
    - polygon: vertices with shape [vertex_count, 2].

    Returns:
    - A boolean indicating whether p is inside the polygon. Points exactly on
        an edge may be reported either way.
    """
    x, y = np.asarray(p, dtype=np.float64)
    polygon = np.asarray(polygon, dtype=np.float64)
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside

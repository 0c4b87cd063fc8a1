import torch

def load_polygons(filename):
    """
    Load annotated polygons from a plain-text polygon file.
    The format supports polygon headers (p role color), clicked vertices
    (v x y) and comments (# ...). Each vertex belongs to the most recent
    polygon header.

    Returns:
    - A list of (role, color, vertices) tuples where vertices is a float64
        tensor with shape [vertex_count, 2].
    """
    polygons = []
    with open(filename) as f:
        lines = f.readlines()

    for line_number, line in enumerate(lines, 1):
        parts = line.split()
        if len(parts) == 0 or parts[0].startswith('#'):
            continue
        if parts[0] == 'p':
            if len(parts) != 3:
                raise ValueError("{}:{}: expected 'p <role> <color>'".format(
                    filename, line_number))
            polygons.append((parts[1], parts[2], []))
        elif parts[0] == 'v':
            if len(polygons) == 0:
                raise ValueError("{}:{}: vertex before any polygon header".format(
                    filename, line_number))
            if len(parts) != 3:
                raise ValueError("{}:{}: expected 'v <x> <y>'".format(
                    filename, line_number))
            polygons[-1][2].append([float(v) for v in parts[1:3]])
        else:
            raise ValueError("{}:{}: unknown line type '{}'".format(
                filename, line_number, parts[0]))

    return [
        (role, color, torch.tensor(vertices, dtype=torch.float64).reshape(-1, 2))
        for role, color, vertices in polygons
    ]

def save_polygons(filename, records):
    """
    Save polygons to a plain-text polygon file.
    Only the clicked vertices are written; boundary points are recomputed
    by interpolation when the file is loaded back into a session.

    Args:
    - records: iterable of objects with `role`, `color` and `vertices`
        attributes, vertices having shape [vertex_count, 2].
    """
    with open(filename, "w") as f:
        for record in records:
            vertices = torch.as_tensor(record.vertices)
            if len(vertices.shape) != 2 or vertices.shape[1] != 2:
                raise ValueError("vertices must have shape [vertex_count, 2]")
            f.write("p {} {}\n".format(record.role, record.color))
            for vertex in vertices:
                f.write("v {} {}\n".format(float(vertex[0]), float(vertex[1])))

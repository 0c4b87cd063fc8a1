"""
Draws an annotation session onto an RGBA frame: the background image, every
polygon with its label, the quadtree of the selected polygon and the points
shared by the admin and user polygons.
"""

import numpy as np
import imageio
from skimage import io, img_as_float
from matplotlib.figure import Figure
from matplotlib.backends.backend_agg import FigureCanvasAgg
import matplotlib.patches as patches

OVERLAP_COLOR = "#FFA500"
TREE_EDGE_COLOR = (0., 0., 0., 0.2)
TREE_CENTER_COLOR = "red"
DPI = 100

def load_image(filename):
    """
    Returns the image as a float array with values in [0, 1] and shape
    [height, width, channels].
    """
    return img_as_float(io.imread(filename))

def render_session(session, image=None, show_tree=True):
    """
    Renders the session onto a canvas the size of the session bounds.

    Args:
      session: an AnnotationSession.
      image: optional background image, an array of shape [height, width]
        or [height, width, channels]. It is scaled to fit the canvas while
        keeping its aspect ratio, anchored at the top-left corner.
      show_tree: whether to draw the leaves of the selected polygon's quadtree.

    Returns:
      A uint8 numpy array of shape [canvas_height, canvas_width, 4].
    """
    left, top = [float(v) for v in session.bbox[0]]
    right, bottom = [float(v) for v in session.bbox[1]]
    width = right - left
    height = bottom - top

    fig = Figure(figsize=(width / DPI, height / DPI), dpi=DPI)
    canvas = FigureCanvasAgg(fig)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_axis_off()
    ax.set_xlim(left, right)
    ax.set_ylim(bottom, top) # image coordinates: y grows downwards

    if image is not None:
        image_height, image_width = image.shape[:2]
        scale = min(width / image_width, height / image_height)
        ax.imshow(image, extent=(
            left, left + image_width * scale, top + image_height * scale, top))
        ax.set_xlim(left, right)
        ax.set_ylim(bottom, top)

    for record in session.all_polygons():
        points = record.points.numpy()
        if len(points) < 2:
            continue
        closed = np.concatenate([points, points[:1]], axis=0)
        ax.plot(closed[:, 0], closed[:, 1], color=record.color, linewidth=2)
        ax.text(points[0, 0], points[0, 1] - 5, record.role,
                color=record.color, fontsize=9)
        ax.scatter(points[:, 0], points[:, 1], color=record.color, marker='s', s=2)

        if show_tree and record is session.selected:
            for bbox, center in record.tree.leaves():
                (x0, y0), (x1, y1) = bbox.tolist()
                ax.add_patch(patches.Rectangle(
                    (x0, y0), x1 - x0, y1 - y0,
                    fill=False, edgecolor=TREE_EDGE_COLOR, linewidth=1))
                ax.add_patch(patches.Circle(
                    center.tolist(), 2, color=TREE_CENTER_COLOR))

    if len(session.common_points) > 0:
        common = np.stack([p.numpy() for p in session.common_points])
        ax.scatter(common[:, 0], common[:, 1], color=OVERLAP_COLOR,
                   marker='s', s=16, zorder=10)

    canvas.draw()
    frame = np.asarray(canvas.buffer_rgba()).copy()
    return frame

def save_render(filename, frame):
    imageio.imwrite(filename, frame)

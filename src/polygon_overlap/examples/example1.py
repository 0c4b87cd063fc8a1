"""
Example 1: Highlighting where admin and user polygons overlap.

Replays polygon files through an annotation session and writes the rendered
canvas, with the shared boundary points highlighted, to a PNG.

    python -m polygon_overlap.examples.example1 -i photo.png
"""

import os
import argparse

import matplotlib.pyplot as plt

from ..annotation.session import AnnotationSession
from ..annotation import render
from ..common import debug_utils
from ..common.bounds import make_bounds
from ..region_tree import quadtree

current_dir = os.path.dirname(os.path.realpath(__file__))
data_dir = os.path.join(current_dir, '.')

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument('-a', '--filename_admin', type=str, default=os.path.join(data_dir, 'data/admin.poly'))
    parser.add_argument('-u', '--filename_user', type=str, default=os.path.join(data_dir, 'data/user.poly'))
    parser.add_argument('-i', '--filename_image', type=str, default=None)
    parser.add_argument('-o', '--filename_output', type=str, default=os.path.join(data_dir, 'example1.png'))
    parser.add_argument('--width', type=float, default=600.)
    parser.add_argument('--height', type=float, default=400.)
    parser.add_argument('--max_items', type=int, default=quadtree.MAX_ITEMS)
    parser.add_argument('--depth', type=int, default=quadtree.MAX_DEPTH)
    parser.add_argument('--tolerance', type=float, default=0.)
    parser.add_argument('--select', type=int, default=None,
        help='index of the polygon whose quadtree should be drawn')
    parser.add_argument('--show', action='store_true')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    quadtree.SHOW_DEBUG_LOGS = args.verbose

    session = AnnotationSession(
        bbox=make_bounds(0., 0., args.width, args.height),
        max_items=args.max_items,
        depth=args.depth,
        tolerance=args.tolerance)
    session.load(args.filename_admin)
    if args.filename_user is not None:
        session.load(args.filename_user)

    polygons = session.all_polygons()
    print("loaded {} admin and {} user polygons".format(
        len(session.polygons["admin"]), len(session.polygons["user"])))
    if args.select is not None:
        session.select_polygon(polygons[args.select])

    print("found {} common points".format(len(session.common_points)))
    if args.verbose:
        debug_utils.debug_points(session.common_points, "common points")

    image = None
    if args.filename_image is not None:
        image = render.load_image(args.filename_image)
    frame = render.render_session(session, image)
    render.save_render(args.filename_output, frame)
    print("wrote {}".format(args.filename_output))

    if args.show:
        plt.imshow(frame)
        plt.show()

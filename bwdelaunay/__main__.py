"""
Triangulate the square [-1, 1] x [-1, 1], sample random interior points and
write a report.

    python -m bwdelaunay --samples 1000 --sections VERTEX EDGE --output output.txt
"""
import argparse
import logging
import sys

from bwdelaunay import config
from bwdelaunay.errors import DelaunayError
from bwdelaunay.random_points import random_points_in_box
from bwdelaunay.report import write_report
from bwdelaunay.triangulation.bowyer_watson import BowyerWatson
from bwdelaunay.validation import is_delaunay

logger = logging.getLogger("bwdelaunay")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(prog="bwdelaunay", description=__doc__,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--samples", type=int, default=config.SAMPLE_POINTS,
                    help="number of random points added after the boundary")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--output", default=config.REPORT_FILE)
    ap.add_argument("--sections", nargs="+", default=list(config.DEFAULT_SECTIONS),
                    help=f"report sections, any of {' '.join(config.SECTION_TAGS)}")
    ap.add_argument("--check", action="store_true", help="run the brute-force Delaunay check")
    ap.add_argument("--plot", action="store_true", help="show the mesh with matplotlib")
    ap.add_argument("--verbose", "-v", action="store_true")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        dt = BowyerWatson(config.SQUARE_BOUNDARY, config.BIG_TRIANGLE)
        points = random_points_in_box(args.samples, seed=args.seed)
        dt.add_points(points)
        write_report(dt, args.output, args.sections)
    except DelaunayError as err:
        logger.error("%s: %s", type(err).__name__, err)
        return 1

    logger.info("%d vertices, %d triangles, %d edges", dt.num_vertices, dt.num_triangles, len(dt.edges()))
    if args.check and not is_delaunay(dt):
        return 1
    if args.plot:
        from bwdelaunay.draw import draw
        draw(dt)
    return 0


if __name__ == "__main__":
    sys.exit(main())

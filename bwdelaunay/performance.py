import logging
import time

import pandas as pd

from bwdelaunay import config
from bwdelaunay.random_points import random_points_in_box
from bwdelaunay.triangulation.bowyer_watson import BowyerWatson

logger = logging.getLogger(__name__)


def benchmark_insertion(ns=None, csv_filename=None, seed=0):
    """
    Time add_point over n random points in the unit-square example for each n
    in ns. Returns a DataFrame with columns n, triangles, time_s; also saved
    to csv_filename when given.
    """
    if ns is None:
        ns = config.BENCHMARK_SIZES
    results = []

    for n in ns:
        dt = BowyerWatson(config.SQUARE_BOUNDARY, config.BIG_TRIANGLE)
        points = random_points_in_box(n, seed=seed)

        start = time.perf_counter()
        dt.add_points(points)
        end = time.perf_counter()

        elapsed = end - start
        logger.info("n=%d: %.6f seconds", n, elapsed)
        results.append({"n": n, "triangles": dt.num_triangles, "time_s": elapsed})

    df = pd.DataFrame(results)
    if csv_filename is not None:
        df.to_csv(csv_filename, index=False)
        logger.info("Benchmark results saved to %s", csv_filename)
    return df

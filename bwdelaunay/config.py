import math

# |orientation| at or below this times the longest squared edge is a
# degenerate (collinear) triangle
AREA_TOLERANCE = 1e-12

# two points closer than this are the same vertex
DUPLICATE_TOLERANCE = 1e-12

# enclosing_triangle(): circumradius of the super-triangle in units of the
# bounding-box half diagonal
SUPER_TRIANGLE_SCALE = 100.0

# super-triangle and boundary of the unit square example
BIG_TRIANGLE = [0.0, 5.0,
                -5.0 / math.sqrt(2), -5.0 / math.sqrt(2),
                5.0 / math.sqrt(2), -5.0 / math.sqrt(2)]

SQUARE_BOUNDARY = [-1.0, 1.0,
                   -1.0, -1.0,
                   1.0, -1.0,
                   1.0, 1.0]

SAMPLE_POINTS = 1000

# report
REPORT_PRECISION = 9
SECTION_TAGS = ("VERTEX", "TRIANGLE", "EDGE")
DEFAULT_SECTIONS = ("VERTEX", "EDGE")
REPORT_FILE = "output.txt"

# performance
BENCHMARK_SIZES = [10, 50, 100, 250, 500, 1000, 2000]
BENCHMARK_CSV = "benchmark_results.csv"

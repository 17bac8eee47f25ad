"""
Text report of a triangulation.

Each requested section is a header line followed by one line per item:

    num_vertices: N      then N lines "x y" (fixed precision)
    num_triangles: M     then M lines "i j k" (ascending within a line)
    num_edges: E         then E lines "i j", deduplicated and sorted

Sections are written in the order they are requested.
"""
import logging

from bwdelaunay import config
from bwdelaunay.errors import MalformedReport, UnknownSection

logger = logging.getLogger(__name__)

HEADERS = {
    "VERTEX": "num_vertices",
    "TRIANGLE": "num_triangles",
    "EDGE": "num_edges",
}


def check_sections(sections):
    if isinstance(sections, str):
        sections = [sections]
    sections = list(sections)
    unknown = [tag for tag in sections if tag not in config.SECTION_TAGS]
    if unknown:
        raise UnknownSection(f"unknown report sections {unknown}, expected any of {list(config.SECTION_TAGS)}")
    return sections


def _vertex_lines(mesh, precision):
    lines = [f"{HEADERS['VERTEX']}: {mesh.num_vertices}"]
    for x, y in mesh.vertices:
        lines.append(f"{x:.{precision}f} {y:.{precision}f}")
    return lines


def _triangle_lines(mesh):
    lines = [f"{HEADERS['TRIANGLE']}: {mesh.num_triangles}"]
    for a, b, c in mesh.triangles:
        lines.append(f"{a} {b} {c}")
    return lines


def _edge_lines(mesh):
    edges = mesh.edges()
    lines = [f"{HEADERS['EDGE']}: {len(edges)}"]
    for a, b in edges:
        lines.append(f"{a} {b}")
    return lines


def format_report(mesh, sections=None, precision=None):
    if sections is None:
        sections = config.DEFAULT_SECTIONS
    if precision is None:
        precision = config.REPORT_PRECISION
    sections = check_sections(sections)

    lines = []
    for tag in sections:
        if tag == "VERTEX":
            lines.extend(_vertex_lines(mesh, precision))
        elif tag == "TRIANGLE":
            lines.extend(_triangle_lines(mesh))
        else:
            lines.extend(_edge_lines(mesh))
    return "\n".join(lines) + "\n"


def write_report(mesh, path, sections=None, precision=None):
    if sections is None:
        sections = config.DEFAULT_SECTIONS
    sections = check_sections(sections)
    text = format_report(mesh, sections, precision)
    with open(path, "w") as f:
        f.write(text)
    logger.info("report with sections %s written to %s", sections, path)
    return path


def parse_report(text):
    """
    Parse a report back into a dict:
    {"VERTEX": [(x, y), ...], "TRIANGLE": [(i, j, k), ...], "EDGE": [(i, j), ...]}
    """
    tags = {header: tag for tag, header in HEADERS.items()}
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    out = {}
    i = 0
    while i < len(lines):
        header, _, count = lines[i].partition(":")
        if header not in tags or not count.strip().isdigit():
            raise MalformedReport(f"unexpected report line {i}: {lines[i]!r}")
        tag = tags[header]
        n = int(count)
        body = lines[i + 1:i + 1 + n]
        if len(body) != n:
            raise MalformedReport(f"section {tag} announces {n} lines, found {len(body)}")
        if tag == "VERTEX":
            out[tag] = [tuple(float(v) for v in ln.split()) for ln in body]
        else:
            out[tag] = [tuple(int(v) for v in ln.split()) for ln in body]
        i += 1 + n
    return out


def read_report(path):
    with open(path) as f:
        return parse_report(f.read())

"""
Graph description files

Layout (one item per line)::

    <node count>
    <negative edge fraction>
    <positive edge fraction>
    <density>
    <n adjacency rows, one '0'/'1' character per node>
    <n sign rows, one '0'/'+'/'-' character per node>

Cells may be separated by whitespace when read; blank lines are ignored.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from ..exceptions import GraphFormatError, InvalidGraphError
from ..graph import GraphModel, Sign


@dataclass(frozen=True)
class GraphDescription:
    """A graph plus the generation parameters stored in its file header."""
    graph: GraphModel
    negative_fraction: float = 0.0
    positive_fraction: float = 0.0
    density: float = 0.0


def _lines(text: str) -> Iterator[Tuple[int, str]]:
    for line_num, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if line:
            yield line_num, line


def _row_cells(line: str, n: int, line_num: int, kind: str) -> List[str]:
    cells = list("".join(line.split()))
    if len(cells) != n:
        raise GraphFormatError(f"{kind} row has {len(cells)} cells, expected {n}", line_num)
    return cells


def parse_graph(text: str) -> GraphDescription:
    """
    Parse a graph description.

    Raises:
        GraphFormatError: if the text does not follow the layout, or
            describes a graph that breaks the GraphModel invariants
    """
    lines = _lines(text)

    def next_line(what: str) -> Tuple[int, str]:
        try:
            return next(lines)
        except StopIteration:
            raise GraphFormatError(f"Unexpected end of file, expected {what}") from None

    line_num, line = next_line("node count")
    try:
        n = int(line)
    except ValueError:
        raise GraphFormatError(f"Invalid node count {line!r}", line_num) from None
    if n < 1:
        raise GraphFormatError("Node count must be at least 1", line_num)

    scalars = []
    for what in ("negative edge fraction", "positive edge fraction", "density"):
        line_num, line = next_line(what)
        try:
            scalars.append(float(line))
        except ValueError:
            raise GraphFormatError(f"Invalid {what} {line!r}", line_num) from None

    adjacency = []
    for _ in range(n):
        line_num, line = next_line("adjacency row")
        cells = _row_cells(line, n, line_num, "Adjacency")
        if any(c not in "01" for c in cells):
            raise GraphFormatError(f"Adjacency row must contain only 0/1: {line!r}", line_num)
        adjacency.append([c == "1" for c in cells])

    sign = []
    for _ in range(n):
        line_num, line = next_line("sign row")
        cells = _row_cells(line, n, line_num, "Sign")
        try:
            sign.append([Sign.from_symbol(c).value for c in cells])
        except ValueError as e:
            raise GraphFormatError(str(e), line_num) from None

    extra = next(lines, None)
    if extra is not None:
        raise GraphFormatError("Trailing data after sign matrix", extra[0])

    try:
        graph = GraphModel(n, adjacency, sign)
    except InvalidGraphError as e:
        raise GraphFormatError(str(e)) from e
    return GraphDescription(graph, *scalars)


def read_graph(path: Union[str, Path]) -> GraphDescription:
    """Read a graph description file."""
    try:
        with open(path, "r") as f:
            text = f.read()
    except OSError as e:
        raise GraphFormatError(f"Cannot read graph file {path}: {e}") from e
    return parse_graph(text)


def format_graph(description: GraphDescription) -> str:
    graph = description.graph
    lines = [
        str(graph.node_count),
        repr(float(description.negative_fraction)),
        repr(float(description.positive_fraction)),
        repr(float(description.density)),
    ]
    lines.extend("".join("1" if cell else "0" for cell in row) for row in graph.adjacency)
    lines.extend("".join(Sign(int(cell)).symbol for cell in row) for row in graph.sign)
    return "\n".join(lines) + "\n"


def write_graph(description: GraphDescription, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_graph(description))
    return path

"""
Property-based tests for the KML write/read round trip using Hypothesis.

Properties Verified:
-------------------
1. Round trip: read(write(g)) == g for points, line strings, polygons and
   geometry collections built directly from coordinates.
2. Namespace coverage: with a prefix, every emitted tag carries it, however
   deeply the geometry is nested.
3. Point order: line string vertices come back in the order they were written.
"""

import re

from hypothesis import given, settings, strategies as st

from geokml import GeometryCollection, KmlAdapter, LineString, Point, Polygon

coordinates = st.floats(allow_nan=False, allow_infinity=False, width=64)
points = st.builds(Point, coordinates, coordinates)
linestrings = st.builds(LineString, st.lists(points, min_size=1, max_size=8).map(tuple))
rings = st.lists(points, min_size=3, max_size=8).map(lambda pts: LineString(tuple(pts) + (pts[0],)))
polygons = st.builds(Polygon, st.lists(rings, min_size=1, max_size=4).map(tuple))
simple_geometries = st.one_of(points, linestrings, polygons)
geometries = st.recursive(
    simple_geometries,
    lambda children: st.builds(
        GeometryCollection, st.lists(children, min_size=1, max_size=4).map(tuple)
    ),
    max_leaves=12,
)

adapter = KmlAdapter()


@settings(max_examples=200)
@given(geometry=geometries)
def test_round_trip(geometry) -> None:
    """read(write(g)) reproduces g exactly."""
    assert adapter.read(adapter.write(geometry)) == geometry


@given(geometry=geometries, namespace=st.sampled_from(["gx", "kml", "ns0"]))
def test_every_tag_is_prefixed(geometry, namespace: str) -> None:
    """Every opening and closing tag carries the namespace prefix."""
    text = adapter.write(geometry, namespace=namespace)

    tags = re.findall(r"</?([^<>]+)>", text)
    assert tags
    assert all(tag.startswith(f"{namespace}:") for tag in tags)


@given(line=linestrings)
def test_linestring_order_preserved(line: LineString) -> None:
    """Vertices come back in the order they were written."""
    result = adapter.read(adapter.write(line))

    assert [(p.x, p.y) for p in result.points] == [(p.x, p.y) for p in line.points]

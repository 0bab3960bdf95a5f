import pytest

from hashdd.trace import GraphTraceNode


def test_root_node_renders_start_line():
    root = GraphTraceNode(root_name="ua")
    assert root.render() == "--- Start of 'ua'---\n"


def test_matched_node_shows_source_characters():
    node = GraphTraceNode(
        index=3, length=2, first_index=2, last_index=5,
        hash_code=0xFF, matched=True,
    )
    assert node.render("abcdefgh") == "  |de-|(3) ff\n"


def test_matched_node_without_source_shows_carets():
    node = GraphTraceNode(
        index=3, length=2, first_index=2, last_index=5,
        hash_code=0xFF, matched=True,
    )
    line = node.render()
    assert line[3:5] == "^^"
    assert line.endswith("(3) ff\n")


def test_unmatched_node_has_no_hash_code():
    node = GraphTraceNode(index=4, length=2, first_index=2, last_index=5)
    line = node.render("abcdefgh")
    assert line.endswith("(4)\n")
    assert line[4:6] == "^^"


@pytest.mark.parametrize("first,last,length", [(0, 0, 1), (1, 4, 3), (5, 9, 2)])
def test_marker_width_matches_node_range(first, last, length):
    node = GraphTraceNode(
        index=last, length=length, first_index=first, last_index=last
    )
    line = node.render()
    markers = line[: line.index("(")]
    assert len(markers) == last + length
    assert markers[:first] == " " * first


def test_append_adds_to_tail_and_iterates_in_order():
    root = GraphTraceNode(root_name="graph")
    first = GraphTraceNode(index=1)
    second = GraphTraceNode(index=2)
    root.append(first)
    root.append(second)
    assert list(root) == [root, first, second]
    assert first.next is second
    assert second.next is None


def test_render_concatenates_route():
    root = GraphTraceNode(root_name="graph")
    child = GraphTraceNode(index=1, length=1, first_index=0, last_index=2)
    root.append(child)
    assert root.render("xyz") == "--- Start of 'graph'---\n" + child.render("xyz")


def test_render_from_middle_of_route_skips_earlier_nodes():
    root = GraphTraceNode(root_name="graph")
    child = GraphTraceNode(index=0, length=1, first_index=0, last_index=0)
    root.append(child)
    assert "Start of" not in child.render()
    assert child.render() in root.render()
import pytest

from hashdd.graph import (
    GraphNode,
    GraphNodeHash,
    get_matching_hash_from_binary_node,
    get_matching_hash_from_list_node,
    get_matching_hash_from_list_node_search,
    get_matching_hash_from_list_node_table,
    get_matching_hash_from_node,
)


def _table_node():
    hashes = [
        GraphNodeHash(8, -1),   # slot 0
        GraphNodeHash(0, 4),    # slot 1: overflow starts at 4
        GraphNodeHash(6, -2),   # slot 2
        GraphNodeHash(0, 0),    # slot 3: empty
        GraphNodeHash(5, -3),
        GraphNodeHash(9, -4),
        GraphNodeHash(0, 0),    # end of overflow
    ]
    return GraphNode(
        unmatched_node_offset=-7,
        first_index=0,
        last_index=10,
        length=3,
        hashes=hashes,
        modulo=4,
    )


def _search_node():
    hashes = [GraphNodeHash(code, -code) for code in (2, 11, 40, 77, 300)]
    return GraphNode(
        unmatched_node_offset=20,
        first_index=1,
        last_index=5,
        length=2,
        hashes=hashes,
    )


def test_table_direct_hit():
    node = _table_node()
    assert get_matching_hash_from_list_node_table(node, 8) is node.hashes[0]
    assert get_matching_hash_from_list_node_table(node, 6) is node.hashes[2]


def test_table_overflow_hits():
    node = _table_node()
    assert get_matching_hash_from_list_node_table(node, 5) is node.hashes[4]
    assert get_matching_hash_from_list_node_table(node, 9) is node.hashes[5]


@pytest.mark.parametrize("code", [13, 7, 10, 12])
def test_table_misses(code):
    assert get_matching_hash_from_list_node_table(_table_node(), code) is None


def test_search_finds_every_record():
    node = _search_node()
    for record in node.hashes:
        assert get_matching_hash_from_list_node_search(
            node, record.hash_code
        ) is record


@pytest.mark.parametrize("code", [0, 3, 41, 299, 301])
def test_search_misses(code):
    assert get_matching_hash_from_list_node_search(_search_node(), code) is None


def test_search_empty_node():
    node = GraphNode(unmatched_node_offset=0, first_index=0, last_index=0,
                     length=1)
    assert get_matching_hash_from_list_node_search(node, 5) is None
    assert get_matching_hash_from_node(node, 5) is None


def test_list_node_dispatch_on_modulo():
    table = _table_node()
    search = _search_node()
    assert get_matching_hash_from_list_node(table, 9) is table.hashes[5]
    assert get_matching_hash_from_list_node(search, 77) is search.hashes[3]


def test_binary_node():
    node = GraphNode(unmatched_node_offset=3, first_index=0, last_index=2,
                     length=4, hashes=[GraphNodeHash(1234, -9)])
    assert get_matching_hash_from_binary_node(node, 1234) is node.hashes[0]
    assert get_matching_hash_from_binary_node(node, 1235) is None
    assert get_matching_hash_from_node(node, 1234).node_offset == -9
    assert get_matching_hash_from_node(node, 1) is None


def test_node_dispatch_multi():
    node = _search_node()
    assert get_matching_hash_from_node(node, 40) is node.hashes[2]
    table = _table_node()
    assert get_matching_hash_from_node(table, 5) is table.hashes[4]


@pytest.mark.parametrize("offset,leaf", [(-5, True), (0, True), (1, False),
                                         (100, False)])
def test_is_leaf_offset(offset, leaf):
    assert GraphNode.is_leaf_offset(offset) is leaf


def test_hashes_count_and_size():
    node = _table_node()
    assert node.hashes_count == len(node.hashes)
    assert node.size == GraphNode.HEADER_SIZE + GraphNodeHash.SIZE * len(node.hashes)


def test_packed_sizes_match_layout():
    empty = GraphNode(unmatched_node_offset=0, first_index=0, last_index=0,
                      length=1)
    single = GraphNode(unmatched_node_offset=0, first_index=0, last_index=0,
                       length=1, hashes=[GraphNodeHash(1, -1)])
    assert len(empty.to_bytes()) == 18
    assert empty.size == 18
    assert len(single.to_bytes()) == 26
    assert single.size == 26


def test_bytes_round_trip():
    node = GraphNode(unmatched_node_offset=-12, first_index=-1,
                     last_index=300, length=7,
                     hashes=[GraphNodeHash(4000000000, -3),
                             GraphNodeHash(17, 99)],
                     modulo=5, flags=2)
    data = node.to_bytes()
    assert len(data) == node.size
    assert GraphNode.from_bytes(data) == node


def test_from_bytes_at_offset():
    node = _search_node()
    data = b"\x00" * 5 + node.to_bytes()
    assert GraphNode.from_bytes(data, 5) == node


def test_from_bytes_short_header():
    with pytest.raises(ValueError):
        GraphNode.from_bytes(b"\x0c")


def test_from_bytes_short_hashes():
    data = _search_node().to_bytes()
    with pytest.raises(ValueError):
        GraphNode.from_bytes(data[:-1])
"""Directed acyclic graph nodes used to find matching substring hashes.

Each node covers a range of character positions where its hash values are
expected, the length of the substring to hash, and the hash records
themselves. A matching hash leads to the node at its offset. No match leads
to the node at the unmatched offset. An offset of zero or less marks a leaf,
and its negation is the value the graph stores.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = [
    "GraphNodeHash",
    "GraphNode",
    "get_matching_hash_from_list_node_table",
    "get_matching_hash_from_list_node_search",
    "get_matching_hash_from_list_node",
    "get_matching_hash_from_binary_node",
    "get_matching_hash_from_node",
]

# Packed little-endian layouts of the stored records.
_NODE_HEADER = struct.Struct("<iBhhBii")
_NODE_HASH = struct.Struct("<Ii")


@dataclass(frozen=True)
class GraphNodeHash:
    """A hash record compared against a substring hash."""

    hash_code: int
    node_offset: int

    SIZE = _NODE_HASH.size


@dataclass(frozen=True)
class GraphNode:
    """A node in the hash graph."""

    unmatched_node_offset: int
    first_index: int
    last_index: int
    length: int
    hashes: tuple[GraphNodeHash, ...] = field(default=())
    modulo: int = 0
    flags: int = 0

    HEADER_SIZE = _NODE_HEADER.size

    def __post_init__(self) -> None:
        object.__setattr__(self, "hashes", tuple(self.hashes))

    @property
    def hashes_count(self) -> int:
        """Number of hash records held by the node."""
        return len(self.hashes)

    @property
    def size(self) -> int:
        """Number of bytes the node takes in its stored form."""
        return self.HEADER_SIZE + GraphNodeHash.SIZE * self.hashes_count

    @staticmethod
    def is_leaf_offset(offset: int) -> bool:
        """True when the node offset marks a leaf rather than another node."""
        return offset <= 0

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> GraphNode:
        """Read a node and its hash records from stored bytes at the offset."""
        view = memoryview(data)
        if offset < 0 or len(view) - offset < _NODE_HEADER.size:
            raise ValueError("not enough data for a graph node header")
        (
            unmatched,
            flags,
            first_index,
            last_index,
            length,
            count,
            modulo,
        ) = _NODE_HEADER.unpack_from(view, offset)
        if count < 0:
            raise ValueError("graph node has a negative hash count")
        start = offset + _NODE_HEADER.size
        if len(view) - start < count * _NODE_HASH.size:
            raise ValueError("not enough data for the graph node hashes")
        hashes = (
            GraphNodeHash(code, node_offset)
            for code, node_offset in _NODE_HASH.iter_unpack(
                view[start:start + count * _NODE_HASH.size]
            )
        )
        return cls(
            unmatched_node_offset=unmatched,
            first_index=first_index,
            last_index=last_index,
            length=length,
            hashes=tuple(hashes),
            modulo=modulo,
            flags=flags,
        )

    def to_bytes(self) -> bytes:
        """Return the node in its packed stored form."""
        header = _NODE_HEADER.pack(
            self.unmatched_node_offset,
            self.flags,
            self.first_index,
            self.last_index,
            self.length,
            self.hashes_count,
            self.modulo,
        )
        return header + b"".join(
            _NODE_HASH.pack(h.hash_code, h.node_offset) for h in self.hashes
        )


def _overflow(hashes: Iterable[GraphNodeHash]) -> Iterable[GraphNodeHash]:
    for node_hash in hashes:
        if node_hash.hash_code == 0:
            return
        yield node_hash


def get_matching_hash_from_list_node_table(
    node: GraphNode, hash_code: int
) -> GraphNodeHash | None:
    """Find a hash in a node whose records form a hash table."""
    hashes = node.hashes
    candidate = hashes[hash_code % node.modulo]
    if candidate.hash_code == hash_code:
        return candidate
    if candidate.hash_code == 0 and candidate.node_offset > 0:
        # Several records share this slot; they follow from the offset given
        # until a record with a zero hash code.
        for node_hash in _overflow(hashes[candidate.node_offset:]):
            if node_hash.hash_code == hash_code:
                return node_hash
    return None


def get_matching_hash_from_list_node_search(
    node: GraphNode, hash_code: int
) -> GraphNodeHash | None:
    """Find a hash in a node whose records are ordered, by binary search."""
    hashes = node.hashes
    lower, upper = 0, node.hashes_count - 1
    while lower <= upper:
        middle = lower + (upper - lower) // 2
        current = hashes[middle].hash_code
        if current == hash_code:
            return hashes[middle]
        if current > hash_code:
            upper = middle - 1
        else:
            lower = middle + 1
    return None


def get_matching_hash_from_list_node(
    node: GraphNode, hash_code: int
) -> GraphNodeHash | None:
    """Find a hash in a node with several records."""
    if node.modulo == 0:
        return get_matching_hash_from_list_node_search(node, hash_code)
    return get_matching_hash_from_list_node_table(node, hash_code)


def get_matching_hash_from_binary_node(
    node: GraphNode, hash_code: int
) -> GraphNodeHash | None:
    """Find a hash in a node holding a single record."""
    first = node.hashes[0]
    return first if first.hash_code == hash_code else None


def get_matching_hash_from_node(
    node: GraphNode, hash_code: int
) -> GraphNodeHash | None:
    """Find the hash record in any node that matches the hash code."""
    if node.hashes_count == 1:
        return get_matching_hash_from_binary_node(node, hash_code)
    return get_matching_hash_from_list_node(node, hash_code)
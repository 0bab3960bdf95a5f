"""Trace routes recording the path taken through a hash graph."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["GraphTraceNode"]


@dataclass(eq=False)
class GraphTraceNode:
    """One step of a route through a graph, linked to the next step.

    A node with a ``root_name`` marks the start of a graph's route. Other
    nodes describe an evaluated graph node: where its hashes were searched
    for, where a hash was found (or the last position tried), and the hash
    code that matched.
    """

    index: int = 0
    length: int = 0
    first_index: int = 0
    last_index: int = 0
    hash_code: int = 0
    matched: bool = False
    root_name: str | None = None
    next: GraphTraceNode | None = field(default=None, repr=False)

    def __iter__(self) -> Iterator[GraphTraceNode]:
        node: GraphTraceNode | None = self
        while node is not None:
            yield node
            node = node.next

    def append(self, node: GraphTraceNode) -> None:
        """Add a node to the tail of the route starting at this node."""
        last = self
        while last.next is not None:
            last = last.next
        last.next = node

    def _render_line(self, source: str | None) -> str:
        if self.root_name is not None:
            return f"--- Start of '{self.root_name}'---\n"
        end = self.last_index + self.length
        chars = []
        for i in range(end):
            if i < self.first_index:
                chars.append(" ")
            elif self.index <= i < self.index + self.length:
                if source is None or not self.matched or i >= len(source):
                    chars.append("^")
                else:
                    chars.append(source[i])
            elif i == self.first_index or i == end - 1:
                chars.append("|")
            else:
                chars.append("-")
        if self.matched:
            suffix = f"({self.index}) {self.hash_code:x}\n"
        else:
            suffix = f"({self.index})\n"
        return "".join(chars) + suffix

    def render(self, source: str | None = None) -> str:
        """Return the route from this node on in a readable form.

        ``source`` is the evidence, usually a User-Agent, whose matched
        characters are shown; without it matched positions show as ``^``.
        """
        return "".join(node._render_line(source) for node in self)
"""Results of Hash device detection and the metrics of how they were found."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from hashdd.trace import GraphTraceNode

__all__ = ["NoValuesAvailableError", "ResultHash", "ResultsHash"]

_JS_HARDWARE_PROFILE = "javascripthardwareprofile"


class NoValuesAvailableError(LookupError):
    """Raised when the results hold no values for the property requested."""


@dataclass
class ResultHash:
    """The outcome of matching a single piece of evidence, usually a User-Agent.

    ``profile_ids`` holds one profile id per component, zero where no
    profile was found. ``trace`` is the route taken through the graph when
    tracing was enabled.
    """

    target_user_agent: str = ""
    matched_user_agent: str | None = None
    profile_ids: tuple[int, ...] = ()
    iterations: int = 0
    matched_nodes: int = 0
    drift: int = 0
    difference: int = 0
    method: int = 0
    trace: GraphTraceNode | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.profile_ids = tuple(self.profile_ids)

    @property
    def device_id(self) -> str:
        """Profile ids of the result joined with hyphens."""
        return "-".join(str(profile_id) for profile_id in self.profile_ids)


class ResultsHash:
    """Results of processing evidence with values and Hash specific metrics.

    ``values`` maps the index of a required property to the value names
    found for it; ``None`` entries stand for values that could not be read
    and are skipped. ``available`` names the required properties in index
    order, so properties can also be requested by name.
    """

    def __init__(
        self,
        items: Iterable[ResultHash] = (),
        values: Mapping[int, Sequence[str | None]] | None = None,
        available: Iterable[str] = (),
    ) -> None:
        self.items: tuple[ResultHash, ...] = tuple(items)
        self._values: dict[int, tuple[str | None, ...]] = {
            index: tuple(names) for index, names in (values or {}).items()
        }
        self.available: tuple[str, ...] = tuple(available)
        self._js_hardware_profile_index = self._index_of(_JS_HARDWARE_PROFILE)

    def _index_of(self, name: str) -> int:
        lowered = name.lower()
        for index, available in enumerate(self.available):
            if available.lower() == lowered:
                return index
        return -1

    def _resolve(self, property_index: int | str) -> int:
        if isinstance(property_index, str):
            index = self._index_of(property_index)
            if index < 0:
                raise KeyError(
                    f"property '{property_index}' is not available"
                )
            return index
        return property_index

    def values(self, property_index: int | str) -> list[str]:
        """Return the values for the required property index or name.

        Values of the JavaScript hardware profile property are returned as
        JavaScript snippets that store the profile ids in a cookie.
        """
        index = self._resolve(property_index)
        names = self._values.get(index)
        if names is None:
            raise NoValuesAvailableError(
                f"no values available for property index {index}"
            )
        present = [name for name in names if name is not None]
        if index == self._js_hardware_profile_index >= 0:
            return [
                "var profileIds = []\n"
                f"{name}"
                '\ndocument.cookie = "51D_ProfileIds=" + '
                'profileIds.join("|")'
                for name in present
            ]
        return present

    def has_values(self, property_index: int | str) -> bool:
        """True if there are values for the required property."""
        index = self._resolve(property_index)
        names = self._values.get(index)
        return names is not None and any(name is not None for name in names)

    def device_id(self, result_index: int | None = None) -> str:
        """Return the device id of one result, or of all results combined.

        With several results each component takes the first non-zero
        profile id found. An index out of range gives an empty string.
        """
        if result_index is not None:
            if 0 <= result_index < len(self.items):
                return self.items[result_index].device_id
            return ""
        if not self.items:
            return ""
        width = max(len(item.profile_ids) for item in self.items)
        combined = []
        for component in range(width):
            ids = (
                item.profile_ids[component]
                for item in self.items
                if component < len(item.profile_ids)
            )
            combined.append(next((i for i in ids if i != 0), 0))
        return "-".join(str(profile_id) for profile_id in combined)

    def iterations(self) -> int:
        """Total number of graph nodes visited to find the results."""
        return sum(item.iterations for item in self.items)

    def matched_nodes(self) -> int:
        """Total number of hash nodes matched within the evidence."""
        return sum(item.matched_nodes for item in self.items)

    def drift(self, result_index: int | None = None) -> int:
        """Drift of one result, or the total over all results."""
        if result_index is None:
            return sum(item.drift for item in self.items)
        return self._item(result_index).drift

    def difference(self, result_index: int | None = None) -> int:
        """Difference of one result, or the total over all results."""
        if result_index is None:
            return sum(item.difference for item in self.items)
        return self._item(result_index).difference

    def method(self, result_index: int | None = None) -> int:
        """Method of one result, or the highest method used by any result.

        An index out of range gives zero.
        """
        if result_index is not None:
            if 0 <= result_index < len(self.items):
                return self.items[result_index].method
            return 0
        return max((item.method for item in self.items), default=0)

    def trace(self, result_index: int | None = None) -> str:
        """Readable trace route of one result, or of all results in turn."""
        if result_index is None:
            return "".join(self.trace(i) for i in range(len(self.items)))
        if not 0 <= result_index < len(self.items):
            return ""
        item = self.items[result_index]
        if item.trace is None:
            return ""
        return item.trace.render(item.target_user_agent)

    def user_agent_count(self) -> int:
        """Number of User-Agents the results were found from."""
        return len(self.items)

    def user_agent(self, result_index: int) -> str:
        """Matched characters of the User-Agent at the index, or ''."""
        if 0 <= result_index < len(self.items):
            matched = self.items[result_index].matched_user_agent
            if matched is not None:
                return matched
        return ""

    def _item(self, result_index: int) -> ResultHash:
        if not 0 <= result_index < len(self.items):
            raise IndexError(f"result index {result_index} out of range")
        return self.items[result_index]
"""Collections of property meta data drawn from a Hash data set."""

from __future__ import annotations

from collections.abc import Iterator

from hashdd.dataset import DataSet, PropertyMetaData, build_property_meta_data

__all__ = [
    "PropertyMetaDataCollectionHash",
    "PropertyMetaDataCollectionForPropertyHash",
]


def _require(data_set: DataSet | None) -> DataSet:
    if data_set is None:
        raise ValueError("Data set can not be None")
    return data_set


class PropertyMetaDataCollectionHash:
    """Meta data for every property held in a data set."""

    def __init__(self, data_set: DataSet | None) -> None:
        self.data_set = _require(data_set)

    def get_by_index(self, index: int) -> PropertyMetaData:
        """Return meta data for the property at the index.

        Raises IndexError when the index is out of range.
        """
        prop = self.data_set.property_at(index)
        return build_property_meta_data(self.data_set, prop)

    def get_by_key(self, name: str) -> PropertyMetaData | None:
        """Return meta data for the property with the name, or None."""
        prop = self.data_set.property_by_name(name)
        if prop is None:
            return None
        return build_property_meta_data(self.data_set, prop)

    def __len__(self) -> int:
        return len(self.data_set.properties)

    def __iter__(self) -> Iterator[PropertyMetaData]:
        for prop in self.data_set.properties:
            yield build_property_meta_data(self.data_set, prop)


class PropertyMetaDataCollectionForPropertyHash:
    """Meta data for the evidence properties that a property relies on."""

    def __init__(
        self, data_set: DataSet | None, prop: PropertyMetaData
    ) -> None:
        data_set = _require(data_set)
        self._properties: list[PropertyMetaData] = [
            build_property_meta_data(data_set, data_set.property_at(index))
            for index in prop.evidence_properties
        ]

    def get_by_index(self, index: int) -> PropertyMetaData:
        """Return the evidence property at the index.

        Raises IndexError when the index is out of range.
        """
        if not 0 <= index < len(self._properties):
            raise IndexError(f"property index {index} out of range")
        return self._properties[index]

    def get_by_key(self, name: str) -> PropertyMetaData | None:
        """Return the evidence property with the name, or None."""
        return next((p for p in self._properties if p.name == name), None)

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[PropertyMetaData]:
        return iter(self._properties)
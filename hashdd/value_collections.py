"""Collections of value meta data drawn from a Hash data set."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from hashdd.dataset import (
    DataSet,
    Profile,
    Property,
    PropertyMetaData,
    ValueMetaData,
    ValueMetaDataKey,
    build_value_meta_data,
)
from hashdd.value_base import ValueMetaDataCollectionBaseHash

__all__ = [
    "ValueMetaDataCollectionHash",
    "ValueMetaDataCollectionForPropertyHash",
    "ValueMetaDataCollectionForProfileHash",
]


class _HasProfileId(Protocol):
    profile_id: int


def _check_index(index: int, size: int) -> None:
    if not 0 <= index < size:
        raise IndexError(f"value index {index} out of range")


class ValueMetaDataCollectionHash(ValueMetaDataCollectionBaseHash):
    """Meta data for every value held in a data set."""

    def get_by_index(self, index: int) -> ValueMetaData | None:
        """Return meta data for the value at the index.

        Raises IndexError when the index is out of range.
        """
        value = self.data_set.value_at(index)
        return build_value_meta_data(self.data_set, value)

    def __len__(self) -> int:
        return len(self.data_set.values)

    def __iter__(self) -> Iterator[ValueMetaData]:
        for value in self.data_set.values:
            result = build_value_meta_data(self.data_set, value)
            if result is not None:
                yield result


class ValueMetaDataCollectionForPropertyHash(ValueMetaDataCollectionBaseHash):
    """Meta data for the values that belong to one property."""

    def __init__(
        self, data_set: DataSet | None, prop: PropertyMetaData
    ) -> None:
        super().__init__(data_set)
        found = self.data_set.property_by_name(prop.name)
        if found is None:
            raise KeyError(f"property '{prop.name}' is not in the data set")
        self._property: Property = found

    def get_by_index(self, index: int) -> ValueMetaData | None:
        """Return meta data for the property's value at the index.

        Raises IndexError when the index is outside the property's values.
        """
        _check_index(index, len(self))
        value = self.data_set.value_at(self._property.first_value_index + index)
        return build_value_meta_data(self.data_set, value)

    def get_by_key(self, key: ValueMetaDataKey) -> ValueMetaData | None:
        """Return meta data for the key, or None if it is another property's."""
        result = super().get_by_key(key)
        if result is None or result.key.property_name != self._property.name:
            return None
        return result

    def __len__(self) -> int:
        return len(self._property.value_indexes)

    def __iter__(self) -> Iterator[ValueMetaData]:
        for index in range(len(self)):
            result = self.get_by_index(index)
            if result is not None:
                yield result


class ValueMetaDataCollectionForProfileHash(ValueMetaDataCollectionBaseHash):
    """Meta data for the values held by one profile."""

    def __init__(self, data_set: DataSet | None, profile: _HasProfileId) -> None:
        super().__init__(data_set)
        found = self.data_set.profile_by_id(profile.profile_id)
        if found is None:
            raise KeyError(
                f"profile {profile.profile_id} is not in the data set"
            )
        self._profile: Profile = found

    def get_by_index(self, index: int) -> ValueMetaData | None:
        """Return meta data for the profile's value at the index.

        Raises IndexError when the index is outside the profile's values.
        """
        _check_index(index, len(self))
        value = self.data_set.value_at(self._profile.value_indexes[index])
        return build_value_meta_data(self.data_set, value)

    def get_by_key(self, key: ValueMetaDataKey) -> ValueMetaData | None:
        """Return meta data for the key if the profile holds that value."""
        prop = self.data_set.property_by_name(key.property_name)
        if prop is None:
            return None
        found = None
        for value in self.data_set.values_for_property(self._profile, prop):
            if value.name == key.value_name:
                found = value
        if found is None:
            return None
        return build_value_meta_data(self.data_set, found)

    def __len__(self) -> int:
        return self._profile.value_count

    def __iter__(self) -> Iterator[ValueMetaData]:
        for index in range(len(self)):
            result = self.get_by_index(index)
            if result is not None:
                yield result
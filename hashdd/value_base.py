"""Shared lookup of value meta data by key in a Hash data set."""

from __future__ import annotations

from hashdd.dataset import (
    DataSet,
    ValueMetaData,
    ValueMetaDataKey,
    build_value_meta_data,
)

__all__ = ["ValueMetaDataCollectionBaseHash"]


class ValueMetaDataCollectionBaseHash:
    """Value meta data in a data set, found by property and value name."""

    def __init__(self, data_set: DataSet | None) -> None:
        if data_set is None:
            raise ValueError("Data set can not be None")
        self.data_set = data_set

    def get_by_key(self, key: ValueMetaDataKey) -> ValueMetaData | None:
        """Return meta data for the value named by the key, or None."""
        prop = self.data_set.property_by_name(key.property_name)
        if prop is None:
            return None
        value = self.data_set.value_by_name(prop, key.value_name)
        if value is None:
            return None
        return build_value_meta_data(self.data_set, value)
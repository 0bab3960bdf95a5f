"""In-memory data set of properties, values and profiles, with meta data."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = [
    "Property",
    "Value",
    "Profile",
    "ValueMetaDataKey",
    "ValueMetaData",
    "PropertyMetaData",
    "DataSet",
    "build_value_meta_data",
    "build_property_meta_data",
]


@dataclass(frozen=True)
class Property:
    """A property and the contiguous range of values that belong to it.

    A ``first_value_index`` of -1 means the property has no values.
    """

    name: str
    first_value_index: int = -1
    last_value_index: int = -1
    value_type: str = "string"
    category: str = ""
    description: str = ""
    url: str = ""
    evidence_properties: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "evidence_properties", tuple(self.evidence_properties)
        )

    @property
    def value_indexes(self) -> range:
        """Indexes of the values belonging to the property."""
        if self.first_value_index == -1:
            return range(0)
        return range(self.first_value_index, self.last_value_index + 1)


@dataclass(frozen=True)
class Value:
    """A value of a property. Missing description or url is ``None``."""

    property_index: int
    name: str
    description: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class Profile:
    """A profile and the indexes of the values it holds."""

    profile_id: int
    value_indexes: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "value_indexes", tuple(self.value_indexes))

    @property
    def value_count(self) -> int:
        return len(self.value_indexes)


@dataclass(frozen=True, order=True)
class ValueMetaDataKey:
    """Identifies a value by its property name and value name."""

    property_name: str
    value_name: str


@dataclass(frozen=True)
class ValueMetaData:
    """Meta data for a value, holding copies of all its strings."""

    key: ValueMetaDataKey
    description: str = ""
    url: str = ""


@dataclass(frozen=True)
class PropertyMetaData:
    """Meta data for a property, holding copies of all its details."""

    name: str
    value_type: str = "string"
    category: str = ""
    description: str = ""
    url: str = ""
    evidence_properties: tuple[int, ...] = ()


@dataclass(frozen=True)
class DataSet:
    """Properties, values and profiles with lookups by index, name and id."""

    properties: tuple[Property, ...] = ()
    values: tuple[Value, ...] = ()
    profiles: tuple[Profile, ...] = ()
    _property_names: dict[str, int] = field(
        init=False, repr=False, compare=False
    )
    _profile_ids: dict[int, Profile] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", tuple(self.properties))
        object.__setattr__(self, "values", tuple(self.values))
        object.__setattr__(self, "profiles", tuple(self.profiles))
        for prop in self.properties:
            if prop.first_value_index == -1:
                continue
            if not (
                0 <= prop.first_value_index <= prop.last_value_index
                < len(self.values)
            ):
                raise ValueError(
                    f"property '{prop.name}' has an invalid value range"
                )
        for value in self.values:
            if not 0 <= value.property_index < len(self.properties):
                raise ValueError(
                    f"value '{value.name}' refers to a missing property"
                )
        for profile in self.profiles:
            if any(not 0 <= i < len(self.values) for i in profile.value_indexes):
                raise ValueError(
                    f"profile {profile.profile_id} refers to a missing value"
                )
        names: dict[str, int] = {}
        for index, prop in enumerate(self.properties):
            names.setdefault(prop.name, index)
        object.__setattr__(self, "_property_names", names)
        object.__setattr__(
            self, "_profile_ids", {p.profile_id: p for p in self.profiles}
        )

    @staticmethod
    def _at(items: tuple, index: int, kind: str):
        if not 0 <= index < len(items):
            raise IndexError(f"{kind} index {index} out of range")
        return items[index]

    def property_at(self, index: int) -> Property:
        """Return the property at the index."""
        return self._at(self.properties, index, "property")

    def property_by_name(self, name: str) -> Property | None:
        """Return the property with the name, or None."""
        index = self._property_names.get(name)
        return None if index is None else self.properties[index]

    def value_at(self, index: int) -> Value:
        """Return the value at the index."""
        return self._at(self.values, index, "value")

    def value_by_name(self, prop: Property, name: str) -> Value | None:
        """Return the value of the property with the name, or None."""
        for index in prop.value_indexes:
            value = self.values[index]
            if value.name == name:
                return value
        return None

    def profile_by_id(self, profile_id: int) -> Profile | None:
        """Return the profile with the id, or None."""
        return self._profile_ids.get(profile_id)

    def values_for_property(
        self, profile: Profile, prop: Property
    ) -> list[Value]:
        """Return the values of the profile that belong to the property."""
        owned = prop.value_indexes
        return [self.values[i] for i in profile.value_indexes if i in owned]


def build_value_meta_data(
    data_set: DataSet, value: Value
) -> ValueMetaData | None:
    """Build meta data for the value, or None if its property is missing."""
    try:
        prop = data_set.property_at(value.property_index)
    except IndexError:
        return None
    return ValueMetaData(
        ValueMetaDataKey(prop.name, value.name),
        "" if value.description is None else value.description,
        "" if value.url is None else value.url,
    )


def build_property_meta_data(
    data_set: DataSet, prop: Property
) -> PropertyMetaData:
    """Build meta data for the property of the data set."""
    return PropertyMetaData(
        name=prop.name,
        value_type=prop.value_type,
        category=prop.category,
        description=prop.description,
        url=prop.url,
        evidence_properties=tuple(
            i for i in prop.evidence_properties
            if 0 <= i < len(data_set.properties)
        ),
    )


def _iter_names(items: Iterable[Property]) -> list[str]:
    return [item.name for item in items]
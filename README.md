# hashdd

Building blocks for device detection from User-Agent strings by walking a
graph of substring hashes, and for reading the results and meta data that
such a detection produces.

## Modules

- `hashdd.graph`: the graph structures `GraphNode` and `GraphNodeHash`.
  - `get_matching_hash_from_node(node, hash_code)` finds the hash record that
    matches, or returns `None`. A node with one record is checked directly.
    A node with a non-zero `modulo` is searched as a hash table. Any other
    node is searched by binary search over its ordered records.
  - `GraphNode.is_leaf_offset(offset)` is true for offsets of zero or less.
    The negation of such an offset is the value the graph stores.
  - `GraphNode.from_bytes(data, offset=0)` and `GraphNode.to_bytes()` read
    and write a node in its packed little-endian form. `from_bytes` raises
    `ValueError` when there is too little data.
- `hashdd.trace`: `GraphTraceNode` is one step in a linked route through a
  graph.
  - `append(node)` adds a step to the end of the route, and iterating over a
    node walks the route from that node on.
  - `render(source=None)` returns the route as readable text. A step with a
    `root_name` prints as `--- Start of '<name>'---`. Any other step prints
    as a marker line showing the searched range. The matched characters of
    `source` appear there, or `^` when no source is given or nothing
    matched. Each such line ends with the index, followed by the hash code
    in hex when a hash matched.
- `hashdd.config`: `ConfigDeviceDetection` holds three options:
  `update_matched_user_agent` (default `True`),
  `max_matched_user_agent_length` (default `500`; it must be a
  non-negative integer) and `allow_unmatched` (default `False`).
- `hashdd.dataset`: `DataSet` holds properties (`Property`), values
  (`Value`) and profiles (`Profile`). Construction checks that these refer
  to one another consistently and raises `ValueError` when they do not. Its
  lookups are `property_at`, `property_by_name`, `value_at`,
  `value_by_name`, `profile_by_id` and `values_for_property`. The meta data
  types are `PropertyMetaData`, `ValueMetaData` and `ValueMetaDataKey`, and
  they are built with `build_property_meta_data` and
  `build_value_meta_data`.
- `hashdd.results`: `ResultHash` is the outcome for one User-Agent.
  `ResultsHash` gathers several of them, and gives access to:
  - `values` and `has_values`, which take a property index or a name. For
    the `JavaScriptHardwareProfile` property, `values` returns JavaScript
    snippets.
  - `device_id`, `iterations`, `matched_nodes`, `drift`, `difference`,
    `method`, `trace`, `user_agent_count` and `user_agent`.

  `values` raises `NoValuesAvailableError` when a property has no values.
- `hashdd.property_collections`: `PropertyMetaDataCollectionHash` covers
  every property in a data set. `PropertyMetaDataCollectionForPropertyHash`
  covers the evidence properties of one property. Both offer
  `get_by_index`, `get_by_key`, `len()` and iteration.
- `hashdd.value_base`: `ValueMetaDataCollectionBaseHash` finds value meta
  data with `get_by_key(ValueMetaDataKey(...))`.
- `hashdd.value_collections`: three collections of value meta data.
  `ValueMetaDataCollectionHash` covers all values.
  `ValueMetaDataCollectionForPropertyHash` covers the values of one
  property, and `ValueMetaDataCollectionForProfileHash` the values held by
  one profile. All three offer `get_by_index`, `get_by_key`, `len()` and
  iteration.

## Install

```
pip install .
```

## Example

```python
from hashdd.graph import GraphNode, GraphNodeHash, get_matching_hash_from_node

node = GraphNode(
    unmatched_node_offset=-1,
    first_index=0,
    last_index=10,
    length=3,
    modulo=0,
    hashes=[GraphNodeHash(hash_code=42, node_offset=-7)],
)
found = get_matching_hash_from_node(node, 42)
if found is not None and GraphNode.is_leaf_offset(found.node_offset):
    print("leaf value", -found.node_offset)
```

```python
from hashdd.dataset import DataSet, Property, Value, ValueMetaDataKey
from hashdd.value_collections import ValueMetaDataCollectionHash

data_set = DataSet(
    properties=[Property("IsMobile", first_value_index=0, last_value_index=1)],
    values=[Value(0, "True"), Value(0, "False")],
)
values = ValueMetaDataCollectionHash(data_set)
print(len(values), values.get_by_key(ValueMetaDataKey("IsMobile", "True")))
```

## What the package does not do

The package does not read data set files. A `DataSet` has to be built in
memory. There is no detection engine that turns evidence into a
`ResultsHash`, because results are built directly from `ResultHash` items.
There is also no command-line program.

## Tests

```
pip install .[test]
pytest
```
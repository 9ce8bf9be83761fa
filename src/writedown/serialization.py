"""JSON serialization of writedown section trees.

Parsed documents can be cached or handed to tools written in other
languages. Every node becomes a dict tagged with ``_type``; tuples become
lists and locations become ``SourceLocation`` dicts (or are left out).

Example:
    from writedown import parse
    from writedown.serialization import to_json, from_json

    doc = parse("= Hello\\nworld\\n")
    assert from_json(to_json(doc)) == doc

Output is deterministic: keys are sorted, so equal trees produce equal
strings.

"""

import json
from dataclasses import fields
from typing import Any

from writedown.location import SourceLocation
from writedown.nodes import (
    CodeBlock,
    FuncCall,
    Node,
    Paragraph,
    Section,
    Sentence,
    Unknown,
)

_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls for cls in (Section, Paragraph, CodeBlock, Sentence, FuncCall, Unknown)
}

_LOCATION_TYPE = "SourceLocation"


def to_dict(node: Node, *, include_locations: bool = True) -> dict[str, Any]:
    """Convert a node and everything below it to plain dicts and lists.

    Args:
        node: Any writedown node
        include_locations: Emit ``location`` entries; dropped when False

    """
    data: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, SourceLocation):
            if include_locations:
                data[f.name] = _location_to_dict(value)
            continue
        data[f.name] = _encode(value, include_locations)
    return data


def _encode(value: Any, include_locations: bool) -> Any:
    match value:
        case Node():
            return to_dict(value, include_locations=include_locations)
        case tuple():
            return [_encode(item, include_locations) for item in value]
        case _:
            return value


def _location_to_dict(location: SourceLocation) -> dict[str, Any]:
    return {
        "_type": _LOCATION_TYPE,
        "lineno": location.lineno,
        "col_offset": location.col_offset,
        "offset": location.offset,
        "end_offset": location.end_offset,
        "source_file": location.source_file,
    }


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node from the output of to_dict.

    Raises:
        ValueError: If ``_type`` is missing or names no node class.

    """
    type_name = data.get("_type")
    if type_name is None:
        raise ValueError("Serialized node has no '_type' field")
    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        raise ValueError(f"Unknown node type: {type_name!r}")

    return node_cls(**{f.name: _decode(data[f.name]) for f in fields(node_cls) if f.name in data})


def _decode(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_decode(item) for item in value)
    if not isinstance(value, dict):
        return value
    if value.get("_type") == _LOCATION_TYPE:
        return SourceLocation(
            lineno=value["lineno"],
            col_offset=value["col_offset"],
            offset=value.get("offset", 0),
            end_offset=value.get("end_offset", 0),
            source_file=value.get("source_file"),
        )
    return from_dict(value)


def to_json(doc: Section, *, indent: int | None = None, include_locations: bool = True) -> str:
    """Serialize a section tree to a JSON string with sorted keys."""
    return json.dumps(
        to_dict(doc, include_locations=include_locations), sort_keys=True, indent=indent
    )


def from_json(text: str) -> Section:
    """Deserialize a section tree from a JSON string.

    Raises:
        ValueError: If the JSON is not a serialized Section.

    """
    node = from_dict(json.loads(text))
    if not isinstance(node, Section):
        raise ValueError(f"Expected Section at the root, got {type(node).__name__}")
    return node

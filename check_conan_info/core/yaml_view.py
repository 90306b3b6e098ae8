"""Typed read-only view over a composed YAML node tree.

PyYAML's composer keeps document order and node kinds, which matters here:
"first" entries are positional, and a ``url`` may be a scalar or a sequence.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

import yaml

from check_conan_info.errors import KeyNotFoundError, TypeMismatchError, YamlParseError


class NodeKind(StrEnum):
    """Kinds of YAML nodes."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


_KINDS: dict[type[yaml.Node], NodeKind] = {
    yaml.MappingNode: NodeKind.MAPPING,
    yaml.SequenceNode: NodeKind.SEQUENCE,
    yaml.ScalarNode: NodeKind.SCALAR,
}


@dataclass(frozen=True)
class YamlNode:
    """A YAML node tagged with its kind."""

    node: yaml.Node

    @property
    def kind(self) -> NodeKind:
        return _KINDS[type(self.node)]

    @property
    def text(self) -> str:
        """Scalar text of the node; empty for collections."""
        if self.kind is NodeKind.SCALAR:
            return str(self.node.value)
        return ""

    def items(self) -> Iterator[tuple[YamlNode, YamlNode]]:
        """Yield key/value pairs of a mapping in document order."""
        if self.kind is not NodeKind.MAPPING:
            raise TypeMismatchError(f"node is not a mapping node: {self.describe()}")
        for key, value in self.node.value:
            yield YamlNode(key), YamlNode(value)

    def elements(self) -> Iterator[YamlNode]:
        """Yield elements of a sequence in document order."""
        if self.kind is not NodeKind.SEQUENCE:
            raise TypeMismatchError(f"node is not a sequence node: {self.describe()}")
        for value in self.node.value:
            yield YamlNode(value)

    def get(self, key: str) -> YamlNode:
        """Return the value stored under *key* in a mapping node."""
        if self.kind is not NodeKind.MAPPING:
            raise KeyNotFoundError(f"node is not a mapping node: {self.describe()}")
        for key_node, value_node in self.items():
            if key_node.text == key:
                return value_node
        raise KeyNotFoundError(f"key not found: {key}")

    def first_item(self) -> tuple[YamlNode, YamlNode]:
        """Return the first key/value pair of a mapping node."""
        if self.kind is not NodeKind.MAPPING:
            raise KeyNotFoundError(f"node is not a mapping node: {self.describe()}")
        for pair in self.items():
            return pair
        raise KeyNotFoundError("mapping has no entries")

    def describe(self) -> str:
        mark = self.node.start_mark
        where = f"line {mark.line + 1}" if mark is not None else "unknown position"
        return f"{self.kind} at {where}"


def parse_document(text: str) -> YamlNode:
    """Compose the first YAML document in *text* into a typed view.

    An empty document becomes an empty mapping.

    Raises:
        YamlParseError: If the text is not valid YAML
    """
    try:
        root = next(iter(yaml.compose_all(text, Loader=yaml.SafeLoader)), None)
    except yaml.YAMLError as exc:
        raise YamlParseError(str(exc)) from exc

    if root is None:
        root = yaml.MappingNode(tag="tag:yaml.org,2002:map", value=[])
    return YamlNode(root)

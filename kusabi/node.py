from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, TypeAlias


AttrMap: TypeAlias = dict[str, str]


@dataclass(frozen=True)
class Element:
    tag_name: str
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # stored as a read-only copy so the tree can not change after parsing
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __hash__(self) -> int:
        return hash((self.tag_name, frozenset(self.attributes.items())))

    def __repr__(self) -> str:
        if self.attributes:
            return f"<{self.tag_name} {self.attribute_str}>"
        return f"<{self.tag_name}>"

    @property
    def attribute_str(self) -> str:
        attrs: list[str] = []
        for key, value in self.attributes.items():
            attrs.append(f'{key}="{value}"')
        return " ".join(attrs)


@dataclass(frozen=True)
class Text:
    data: str = ""

    def __repr__(self) -> str:
        return repr(self.data)


@dataclass(frozen=True)
class Node:
    node_type: Element | Text
    children: tuple["Node", ...] = ()

    @classmethod
    def element(
        cls,
        tag_name: str,
        attributes: AttrMap | None = None,
        *children: "Node",
    ) -> "Node":
        return cls(
            node_type=Element(tag_name=tag_name, attributes=attributes or {}),
            children=tuple(children),
        )

    @classmethod
    def text(cls, data: str) -> "Node":
        return cls(node_type=Text(data=data))

    @property
    def is_element(self) -> bool:
        return isinstance(self.node_type, Element)

    @property
    def is_text(self) -> bool:
        return isinstance(self.node_type, Text)

    def __repr__(self) -> str:
        return repr(self.node_type)

    def to_dict(self) -> dict[str, Any]:
        """Plain nested data, suitable for ``json.dumps``."""
        if isinstance(self.node_type, Text):
            return {"type": "text", "data": self.node_type.data}
        return {
            "type": "element",
            "tag_name": self.node_type.tag_name,
            "attributes": dict(self.node_type.attributes),
            "children": [child.to_dict() for child in self.children],
        }


def print_tree(node: Node, indent: int = 0) -> None:
    print(" " * indent, node)
    for child in node.children:
        print_tree(child, indent + 2)

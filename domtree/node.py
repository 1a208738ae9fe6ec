from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from domtree.constants import CLASS_ATTRIBUTE, CLASS_SEPARATOR, ID_ATTRIBUTE


AttrMap = dict[str, str]


@dataclass
class ElementData:
    tag_name: str = ""
    attributes: AttrMap = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"<{self.tag_name}{self.attribute_str}>"

    @property
    def attribute_str(self) -> str:
        attrs: list[str] = []
        for key, value in self.attributes.items():
            attrs.append(f' {key}="{value}"')
        return "".join(attrs)

    def get_id(self) -> str | None:
        return self.attributes.get(ID_ATTRIBUTE)

    def get_classes(self) -> set[str]:
        classes = self.attributes.get(CLASS_ATTRIBUTE)
        if classes is None:
            return set()
        return set(classes.split(CLASS_SEPARATOR))


@dataclass
class Text:
    content: str = ""

    def __repr__(self) -> str:
        return self.content


@dataclass
class Element:
    data: ElementData = field(default_factory=ElementData)

    def __repr__(self) -> str:
        return repr(self.data)


@dataclass
class Comment:
    content: str = ""

    def __repr__(self) -> str:
        return self.content


NodeType = Union[Text, Element, Comment]


@dataclass(eq=False)
class Node:
    node_type: NodeType
    children: list['Node'] = field(default_factory=list)

    def __repr__(self) -> str:
        return repr(self.node_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented

        # walk both trees side by side; deep documents would overflow
        # the interpreter stack with a recursive comparison
        pending: list[tuple[Node, Node]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if left.node_type != right.node_type:
                return False
            if len(left.children) != len(right.children):
                return False
            pending.extend(zip(left.children, right.children))
        return True


def text(content: str) -> Node:
    return Node(Text(content), [])


def comment(content: str) -> Node:
    return Node(Comment(content), [])


def elem(
    tag_name: str,
    attributes: AttrMap | None = None,
    children: list[Node] | None = None,
) -> Node:
    data = ElementData(tag_name, attributes if attributes is not None else {})
    return Node(Element(data), children if children is not None else [])


def iter_nodes(node: Node) -> Iterator[Node]:
    """
    Yield every node of the subtree rooted at `node` in document order.
    """
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))

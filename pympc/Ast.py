from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Iterator, Tuple

from .Input import Position


@dataclass(frozen=True)
class AstNode:
    """A node of the tree built by the `tag` and `root` combinators."""
    tag: str
    contents: str = ""
    position: Position = field(default_factory=Position)
    children: Tuple['AstNode', ...] = ()

    def retag(self, tag: str) -> 'AstNode':
        return replace(self, tag=tag)

    def walk(self) -> Iterator['AstNode']:
        """Depth-first, parents before children."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def render(self) -> str:
        lines = []
        self._render_into(lines, 0)
        return "\n".join(lines)

    def _render_into(self, lines: list, depth: int) -> None:
        line = "  " * depth + self.tag
        if self.contents:
            line += f" '{self.contents}'"
        lines.append(line)
        for child in self.children:
            child._render_into(lines, depth + 1)

    def __str__(self) -> str:
        return self.render()


def render_contents(value: Any) -> str:
    """Text stored in a tagged node for a non-tree sub-result."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, AstNode):
        return value.contents + "".join(render_contents(c) for c in value.children)
    if isinstance(value, (list, tuple)):
        return "".join(render_contents(v) for v in value)
    return str(value)


def gather_children(values: Iterable[Any]) -> Tuple[AstNode, ...]:
    """
    Children for a node built over several sub-results.

    Untagged, contentless nodes and nested lists are flattened into their
    children; other plain values become untagged leaf nodes and None values
    are dropped.
    """
    children = []
    for x in values:
        if x is None:
            continue
        if isinstance(x, AstNode):
            if x.tag == "" and not x.contents:
                children.extend(x.children)
            else:
                children.append(x)
        elif isinstance(x, (list, tuple)):
            children.extend(gather_children(x))
        else:
            children.append(AstNode("", render_contents(x)))
    return tuple(children)


def _holds_node(value: Any) -> bool:
    if isinstance(value, AstNode):
        return True
    if isinstance(value, (list, tuple)):
        return any(_holds_node(v) for v in value)
    return False


def make_node(tag: str, value: Any, position: Position) -> AstNode:
    """
    Wrap a sub-result into a tagged node.

    A node value becomes the only child. A list holding a node at any depth
    becomes the children, see gather_children. Anything else is rendered to
    text as the node's contents.
    """
    if isinstance(value, AstNode):
        return AstNode(tag, "", position, (value,))
    if isinstance(value, (list, tuple)) and _holds_node(value):
        return AstNode(tag, "", position, gather_children(value))
    return AstNode(tag, render_contents(value), position)

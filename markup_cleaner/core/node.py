"""Parser-independent node model: ``Text`` and ``Element`` under a ``Document``."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class Text:
    """Literal character data."""

    data: str


@dataclass
class Element:
    """A tag with ordered attribute pairs and ordered children."""

    tag: str
    attrs: Tuple[Tuple[str, str], ...] = ()
    children: List["Node"] = field(default_factory=list)

    def get(self, name: str) -> Optional[str]:
        """Return the first value of attribute *name*, or None."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    def text_content(self) -> str:
        """Concatenated data of every descendant ``Text``, in document order."""
        parts: List[str] = []
        stack: List[Node] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            if isinstance(node, Text):
                parts.append(node.data)
            else:
                stack.extend(reversed(node.children))
        return "".join(parts)


Node = Union[Text, Element]


@dataclass
class Document:
    """One conversion's tree; ``root`` is the content root (``<body>``)."""

    root: Element

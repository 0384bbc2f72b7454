"""Parsed SVG document model.

A document is a tree of two node kinds: ``Element`` and ``Text``. Nodes are
frozen; emitters build new strings from them and never rewrite them.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Text(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    # Raw, unescaped, untrimmed character data
    value: str


class Element(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["element"] = "element"
    name: str
    # Unescaped values, document order
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list[Node] = Field(default_factory=list)

    def find(self, name: str) -> Element | None:
        """Return the first descendant element (or self) with the given tag name."""
        if self.name == name:
            return self
        for child in self.children:
            if isinstance(child, Element):
                found = child.find(name)
                if found is not None:
                    return found
        return None


Node = Annotated[Union[Element, Text], Field(discriminator="kind")]

Element.model_rebuild()


class ParsedSvg(BaseModel):
    """Represents a parsed SVG file.

    ``view_box``, ``width`` and ``height`` are read straight off the root so
    they can never drift from it.
    """

    model_config = ConfigDict(frozen=True)

    root: Element

    @property
    def view_box(self) -> str | None:
        return self.root.attributes.get("viewBox")

    @property
    def width(self) -> str | None:
        return self.root.attributes.get("width")

    @property
    def height(self) -> str | None:
        return self.root.attributes.get("height")

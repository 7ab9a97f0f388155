"""Todo tree data model."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from nestodo.core.ids import new_id

logger = logging.getLogger(__name__)

# Ids double as widget ids in the terminal UI
_ID_PATTERN = re.compile(r"[0-9A-Za-z_-]+")


@dataclass
class TodoNode:
    """A todo item owning its ordered children."""

    text: str
    completed: bool = False
    children: list[TodoNode] = field(default_factory=list)
    id: str = field(default_factory=new_id)

    @property
    def is_leaf(self) -> bool:
        return not self.children


class TodoRecord(BaseModel):
    """Persisted shape of a todo node.

    Also accepts exports from the browser version, which stored the text as
    ``todoText`` and the children as ``todos``.
    Ids outside ``[0-9A-Za-z_-]`` are replaced with fresh ones on load.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    text: str = Field(validation_alias=AliasChoices("text", "todoText"))
    completed: bool = False
    children: list[TodoRecord] = Field(default_factory=list, validation_alias=AliasChoices("children", "todos"))

    @field_validator("id")
    @classmethod
    def reissue_unusable_id(cls, value: str) -> str:
        if _ID_PATTERN.fullmatch(value):
            return value
        fresh = new_id()
        logger.warning("Replacing todo id %r with %s", value, fresh)
        return fresh

    @classmethod
    def from_node(cls, node: TodoNode) -> TodoRecord:
        return cls(
            id=node.id,
            text=node.text,
            completed=node.completed,
            children=[cls.from_node(child) for child in node.children],
        )

    def to_node(self) -> TodoNode:
        return TodoNode(
            id=self.id,
            text=self.text,
            completed=self.completed,
            children=[child.to_node() for child in self.children],
        )


TodoRecord.model_rebuild()

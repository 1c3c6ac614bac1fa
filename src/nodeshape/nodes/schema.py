"""Schema definitions for node self-documentation."""

from __future__ import annotations

import json
from typing import Any, ClassVar

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ..models import DataType, Direction, YAMLMixin


class FieldSchema(BaseModel):
    """Describes one field of a composite port value.

    Field order matters: it is the key order of the dumped JSON.
    """

    name: str
    type: DataType
    direction: Direction | None = None  # Resolved from the enclosing port/field
    title: str | None = None
    fields: list[FieldSchema] | None = None  # Only for composite, non-null values


class PortSchema(BaseModel):
    """Describes one port of a node instance."""

    name: str
    direction: Direction | None = None
    title: str | None = None
    type: DataType
    fields: list[FieldSchema] | None = None


class NodePorts(BaseModel):
    """Ports split by direction, each in declaration order."""

    inputs: list[PortSchema] = Field(default_factory=list)
    outputs: list[PortSchema] = Field(default_factory=list)


class NodeSchema(YAMLMixin, BaseModel):
    """Structural description of a node instance.

    This schema is what an editor needs to draw the node: its
    ports, their types and directions, and nested field shapes.
    """

    id: str  # Generation token, not stable across calls
    type: str
    category: str
    title: str | None = None
    description: str | None = None
    ports: NodePorts = Field(default_factory=NodePorts)

    @property
    def port_count(self) -> int:
        return len(self.ports.inputs) + len(self.ports.outputs)

    def to_dict(self) -> dict[str, Any]:
        """Dump to plain JSON-compatible data, omitting unset optionals."""
        return self.model_dump(mode="json", exclude_none=True)


class NodeData(YAMLMixin, BaseModel):
    """Current values of a node instance, keyed by port name."""

    yaml_exclude_none: ClassVar[bool] = False

    id: str
    values: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Dump to plain JSON-compatible data, keeping null values."""
        return self.model_dump(mode="json")


class SerializedNode(YAMLMixin, BaseModel):
    """A schema and a data snapshot generated together under one id."""

    model_config = ConfigDict(populate_by_name=True)

    node_schema: NodeSchema = Field(alias="schema")
    data: NodeData

    def to_dict(self) -> dict[str, Any]:
        """Dump as {"schema": ..., "data": ...} with each part's null handling."""
        return {"schema": self.node_schema.to_dict(), "data": self.data.to_dict()}

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_yaml(self) -> str:
        return yaml.dump(
            self.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

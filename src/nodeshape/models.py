"""Pydantic data models for node and field metadata."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Self

import yaml
from pydantic import BaseModel, Field


class YAMLMixin:
    """Mixin class providing YAML serialization methods."""

    yaml_exclude_none: ClassVar[bool] = True

    def to_yaml(self) -> str:
        """Serialize model to YAML string."""
        return yaml.dump(
            self.model_dump(mode="json", exclude_none=self.yaml_exclude_none),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def save_yaml(self, path: str | Path) -> None:
        """Save model to a YAML file."""
        path = Path(path)
        with path.open("w") as f:
            f.write(self.to_yaml())

    @classmethod
    def from_yaml(cls, yaml_str: str) -> Self:
        """Load model from YAML string."""
        data = yaml.safe_load(yaml_str)
        return cls.model_validate(data)

    @classmethod
    def load_yaml(cls, path: str | Path) -> Self:
        """Load model from a YAML file."""
        path = Path(path)
        with path.open() as f:
            return cls.from_yaml(f.read())


class ValueKind(str, Enum):
    """Whether a value is a leaf or has nested fields."""

    SCALAR = "scalar"
    COMPOSITE = "composite"


class DataType(str, Enum):
    """Declared type of a port or field."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    STREAM = "stream"

    @property
    def kind(self) -> ValueKind:
        if self is DataType.OBJECT:
            return ValueKind.COMPOSITE
        return ValueKind.SCALAR

    @property
    def is_composite(self) -> bool:
        return self.kind is ValueKind.COMPOSITE


class Direction(str, Enum):
    """Whether a port is consumed or produced by its node."""

    IN = "in"  # Consumed by the node
    OUT = "out"  # Produced by the node


class PortConfig(BaseModel):
    """Declared configuration of a port or field, minus its name."""

    type: DataType = Field(description="Declared data type")
    direction: Direction | None = Field(
        default=None,
        description="Port direction; fields inherit it from their parent when unset",
    )
    title: str | None = Field(default=None, description="Human-readable label")
    description: str | None = Field(default=None, description="Longer help text")
    default: Any = Field(default=None, description="Default value shown to editors")
    optional: bool | None = Field(
        default=None, description="Whether a connection is optional"
    )
    config: Any = Field(default=None, description="Free-form editor configuration")
    # Never read by the generator; nesting comes from register_field()
    fields: list[PortDescriptor] | None = Field(
        default=None,
        description="Port-level nested field declarations (not consulted)",
    )


class PortDescriptor(PortConfig):
    """A named port declared on a node type."""

    name: str = Field(description="Property name on the node class")

    @classmethod
    def from_config(cls, name: str, config: PortConfig) -> Self:
        """Attach a name to a port configuration."""
        return cls(name=name, **config.model_dump(exclude_unset=True, exclude={"name"}))


class FieldDescriptor(PortDescriptor):
    """A named field declared on a composite value class."""


class NodeDescriptor(YAMLMixin, BaseModel):
    """Everything registered for one node type."""

    type: str = Field(default="", description="Node type identifier, e.g. 'UserProfileNode'")
    category: str = Field(default="", description="Palette category")
    title: str | None = Field(default=None, description="Display title")
    description: str | None = Field(default=None, description="Display description")
    ports: dict[str, PortDescriptor] = Field(
        default_factory=dict,
        description="Ports keyed by property name, in declaration order",
    )

    @property
    def inputs(self) -> list[PortDescriptor]:
        return [p for p in self.ports.values() if p.direction == Direction.IN]

    @property
    def outputs(self) -> list[PortDescriptor]:
        return [p for p in self.ports.values() if p.direction != Direction.IN]


PortConfig.model_rebuild()
PortDescriptor.model_rebuild()
FieldDescriptor.model_rebuild()
NodeDescriptor.model_rebuild()

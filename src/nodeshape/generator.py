"""Schema and data generation for registered node instances."""

import itertools
import logging
from enum import Enum
from typing import Any

from .config import NodeShapeConfig
from .errors import CyclicStructure
from .models import DataType, Direction, PortDescriptor, ValueKind
from .nodes.registry import get_fields, lookup_node
from .nodes.schema import (
    FieldSchema,
    NodeData,
    NodePorts,
    NodeSchema,
    PortSchema,
    SerializedNode,
)

logger = logging.getLogger(__name__)

# Values passed through unchanged by extract_values
SCALAR_TYPES = (str, int, float, bool, Enum)

_id_counter = itertools.count(1)


def next_node_id(prefix: str = "node") -> str:
    """Return a process-unique node id such as "node_42"."""
    return f"{prefix}_{next(_id_counter)}"


def _is_object(value: Any) -> bool:
    return value is not None and not isinstance(value, SCALAR_TYPES)


def _recurses(type_: DataType, value: Any) -> bool:
    return type_.kind is ValueKind.COMPOSITE and _is_object(value)


class SchemaGenerator:
    """Builds schema and data trees for registered node instances.

    Both traversals only read the registry and the instance:
    1. generate_schema() walks ports and registered fields to describe shape
    2. generate_node_data() walks the same structure collecting values

    They can be called independently, so an editor can fetch the schema
    once and poll data repeatedly.
    """

    def __init__(self, config: NodeShapeConfig | None = None):
        """Initialize the generator.

        Args:
            config: Optional configuration (id prefix, rendering defaults)
        """
        self.config = config or NodeShapeConfig()

    def new_id(self) -> str:
        return next_node_id(self.config.id_prefix)

    def generate_schema(self, instance: Any, node_id: str | None = None) -> NodeSchema:
        """Describe the ports and nested fields of a node instance.

        Args:
            instance: Instance of a registered node class
            node_id: Correlation id to use instead of a generated one

        Returns:
            NodeSchema with ports split into inputs and outputs

        Raises:
            MissingMetadata: If the instance's class was never registered
            CyclicStructure: If a nested value refers back to an ancestor
        """
        descriptor = lookup_node(type(instance))
        ports = NodePorts()

        for name, port in descriptor.ports.items():
            port_schema = self._process_port(port, getattr(instance, name, None))
            # Only explicit "in" ports are inputs
            if port.direction == Direction.IN:
                ports.inputs.append(port_schema)
            else:
                ports.outputs.append(port_schema)

        schema = NodeSchema(
            id=node_id or self.new_id(),
            type=descriptor.type,
            category=descriptor.category,
            title=descriptor.title,
            description=descriptor.description,
            ports=ports,
        )
        logger.debug(
            f"Generated schema {schema.id} for {descriptor.type}: "
            f"{len(ports.inputs)} inputs, {len(ports.outputs)} outputs"
        )
        return schema

    def _process_port(self, port: PortDescriptor, value: Any) -> PortSchema:
        schema = PortSchema(
            name=port.name,
            direction=port.direction,
            title=port.title,
            type=port.type,
        )
        if _recurses(port.type, value):
            schema.fields = self._process_fields(value, port.direction, [port.name], set())
        return schema

    def process_fields(
        self, value: Any, parent_direction: Direction | None = None
    ) -> list[FieldSchema]:
        """Describe the registered fields of a composite value.

        Classes without registered fields produce an empty list.

        Args:
            value: The composite value
            parent_direction: Direction inherited by fields that declare none

        Returns:
            Field schemas in declaration order
        """
        return self._process_fields(value, parent_direction, [type(value).__name__], set())

    def _process_fields(
        self,
        value: Any,
        parent_direction: Direction | None,
        path: list[str],
        active: set[int],
    ) -> list[FieldSchema]:
        if id(value) in active:
            raise CyclicStructure(path)
        active.add(id(value))
        try:
            fields = []
            for name, field in (get_fields(type(value)) or {}).items():
                field_value = getattr(value, name, None)
                direction = field.direction or parent_direction
                field_schema = FieldSchema(
                    name=field.name,
                    type=field.type,
                    direction=direction,
                    title=field.title,
                )
                if _recurses(field.type, field_value):
                    field_schema.fields = self._process_fields(
                        field_value, direction, path + [name], active
                    )
                fields.append(field_schema)
            return fields
        finally:
            active.discard(id(value))

    def generate_node_data(self, instance: Any, node_id: str | None = None) -> NodeData:
        """Collect the current values of a node instance's ports.

        Args:
            instance: Instance of a registered node class
            node_id: Correlation id to use instead of a generated one

        Returns:
            NodeData with one value per port, in declaration order

        Raises:
            MissingMetadata: If the instance's class was never registered
            CyclicStructure: If a nested value refers back to an ancestor
        """
        descriptor = lookup_node(type(instance))
        values = {
            name: self._extract(getattr(instance, name, None), [name], set())
            for name in descriptor.ports
        }
        data = NodeData(id=node_id or self.new_id(), values=values)
        logger.debug(f"Generated data {data.id} for {descriptor.type}")
        return data

    def extract_values(self, value: Any) -> Any:
        """Convert a value to plain data following registered fields.

        Scalars and None are returned unchanged. Lists and tuples are
        converted item by item. Any other object, dicts included, becomes
        a dict of its registered fields (empty if it has none).
        """
        return self._extract(value, [type(value).__name__], set())

    def _extract(self, value: Any, path: list[str], active: set[int]) -> Any:
        if not _is_object(value):
            return value
        if id(value) in active:
            raise CyclicStructure(path)
        active.add(id(value))
        try:
            if isinstance(value, (list, tuple)):
                return [
                    self._extract(item, path + [str(i)], active)
                    for i, item in enumerate(value)
                ]
            return {
                name: self._extract(getattr(value, name, None), path + [name], active)
                for name in get_fields(type(value)) or {}
            }
        finally:
            active.discard(id(value))

    def build_document(self, instance: Any, node_id: str | None = None) -> SerializedNode:
        """Generate paired schema and data sharing one id.

        Returns:
            SerializedNode holding both trees
        """
        node_id = node_id or self.new_id()
        return SerializedNode(
            node_schema=self.generate_schema(instance, node_id),
            data=self.generate_node_data(instance, node_id),
        )

    def serialize_node(
        self,
        instance: Any,
        output_format: str | None = None,
        node_id: str | None = None,
    ) -> str:
        """Render a node's schema and data as text.

        Args:
            instance: Instance of a registered node class
            output_format: "json" or "yaml" (defaults to config.output_format)
            node_id: Correlation id to use instead of a generated one

        Returns:
            The rendered document

        Raises:
            ValueError: If the output format is unknown
        """
        output_format = output_format or self.config.output_format
        if output_format not in ("json", "yaml"):
            raise ValueError(f"Invalid output format: {output_format}")

        document = self.build_document(instance, node_id)
        if output_format == "yaml":
            return document.to_yaml()
        return document.to_json(indent=self.config.json_indent)


def generate_schema(instance: Any, node_id: str | None = None) -> NodeSchema:
    """Describe a node instance using the default configuration."""
    return SchemaGenerator().generate_schema(instance, node_id)


def generate_node_data(instance: Any, node_id: str | None = None) -> NodeData:
    """Collect a node instance's values using the default configuration."""
    return SchemaGenerator().generate_node_data(instance, node_id)


def extract_values(value: Any) -> Any:
    """Convert a value to plain data following registered fields."""
    return SchemaGenerator().extract_values(value)


def serialize_node(
    instance: Any, output_format: str | None = None, node_id: str | None = None
) -> str:
    """Render a node's schema and data using the default configuration."""
    return SchemaGenerator().serialize_node(instance, output_format, node_id)

"""
nodeshape - Schema and data introspection for dataflow editor nodes.

Usage:
    from nodeshape import DataType, Direction, flow_node, port, serialize_node

    @flow_node(
        type="EchoNode",
        category="Utility",
        ports={
            "text": port(DataType.STRING, Direction.IN, "Text"),
            "echo": port(DataType.STRING, Direction.OUT, "Echo"),
        },
    )
    class EchoNode:
        def __init__(self):
            self.text = ""
            self.echo = ""

    print(serialize_node(EchoNode()))

    # Or use CLI:
    #   nodeshape list --module my_package.nodes
    #   nodeshape show EchoNode --module my_package.nodes --part schema
"""

from .models import (
    DataType,
    Direction,
    ValueKind,
    PortConfig,
    PortDescriptor,
    FieldDescriptor,
    NodeDescriptor,
    YAMLMixin,
)
from .errors import NodeShapeError, MissingMetadata, CyclicStructure
from .config import NodeShapeConfig, get_config
from .nodes import (
    FieldSchema,
    PortSchema,
    NodePorts,
    NodeSchema,
    NodeData,
    SerializedNode,
    type_key,
    register_node,
    register_port,
    register_field,
    lookup_node,
    lookup_fields,
    get_all_nodes,
    flow_node,
    field_ports,
    port,
    field_port,
)
from .generator import (
    SchemaGenerator,
    generate_schema,
    generate_node_data,
    extract_values,
    serialize_node,
    next_node_id,
)

__all__ = [
    "SchemaGenerator",
    "generate_schema",
    "generate_node_data",
    "extract_values",
    "serialize_node",
    "next_node_id",
    "DataType",
    "Direction",
    "ValueKind",
    "PortConfig",
    "PortDescriptor",
    "FieldDescriptor",
    "NodeDescriptor",
    "YAMLMixin",
    "FieldSchema",
    "PortSchema",
    "NodePorts",
    "NodeSchema",
    "NodeData",
    "SerializedNode",
    "NodeShapeError",
    "MissingMetadata",
    "CyclicStructure",
    "NodeShapeConfig",
    "get_config",
    "type_key",
    "register_node",
    "register_port",
    "register_field",
    "lookup_node",
    "lookup_fields",
    "get_all_nodes",
    "flow_node",
    "field_ports",
    "port",
    "field_port",
]

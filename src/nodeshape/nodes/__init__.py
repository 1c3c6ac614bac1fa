"""Node metadata registry, registration decorators and example nodes."""

from .schema import FieldSchema, PortSchema, NodePorts, NodeSchema, NodeData, SerializedNode
from .registry import (
    type_key,
    register_node,
    register_port,
    register_field,
    register_node_class,
    get_node,
    get_fields,
    lookup_node,
    lookup_fields,
    get_node_class,
    get_all_nodes,
)
from .decorators import flow_node, field_ports, port, field_port

from .user_profile import Address, UserProfile, UserProfileNode

__all__ = [
    # Schema
    "FieldSchema",
    "PortSchema",
    "NodePorts",
    "NodeSchema",
    "NodeData",
    "SerializedNode",
    # Registry
    "type_key",
    "register_node",
    "register_port",
    "register_field",
    "register_node_class",
    "get_node",
    "get_fields",
    "lookup_node",
    "lookup_fields",
    "get_node_class",
    "get_all_nodes",
    # Registration
    "flow_node",
    "field_ports",
    "port",
    "field_port",
    # Nodes
    "Address",
    "UserProfile",
    "UserProfileNode",
]

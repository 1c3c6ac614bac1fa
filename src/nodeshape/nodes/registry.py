"""Metadata registry for node ports and composite value fields."""

import logging
from typing import Any, Type

from ..errors import MissingMetadata
from ..models import FieldDescriptor, NodeDescriptor, PortConfig, PortDescriptor

logger = logging.getLogger(__name__)


# Global registries keyed by stable type identifier
_node_registry: dict[str, NodeDescriptor] = {}
_field_registry: dict[str, dict[str, FieldDescriptor]] = {}
_node_classes: dict[str, Type] = {}


def type_key(target: str | Type) -> str:
    """Return the registry identifier for a class or identifier string.

    Args:
        target: A class, or an identifier that is returned unchanged

    Returns:
        "<module>.<qualname>" for classes
    """
    if isinstance(target, str):
        return target
    return f"{target.__module__}.{target.__qualname__}"


def _port_config(declared: PortConfig | None, kwargs: dict[str, Any]) -> PortConfig:
    if declared is not None and kwargs:
        raise TypeError("Pass either a PortConfig or keyword arguments, not both")
    if declared is None:
        declared = PortConfig(**kwargs)
    return declared


def register_node(
    type_id: str | Type,
    *,
    type: str | None = None,
    category: str | None = None,
    title: str | None = None,
    description: str | None = None,
) -> NodeDescriptor:
    """Merge node-level metadata into a type's descriptor.

    Keys passed as None are left untouched. Ports are never cleared.

    Args:
        type_id: Class or registry identifier
        type: Node type name shown to editors
        category: Palette category
        title: Display title
        description: Display description

    Returns:
        The updated descriptor
    """
    key = type_key(type_id)
    updates = {
        name: value
        for name, value in {
            "type": type,
            "category": category,
            "title": title,
            "description": description,
        }.items()
        if value is not None
    }
    current = _node_registry.get(key) or NodeDescriptor()
    descriptor = current.model_copy(update=updates)
    _node_registry[key] = descriptor
    logger.debug(f"Registered node {key} ({descriptor.type or '<untyped>'})")
    return descriptor


def register_port(
    type_id: str | Type,
    name: str,
    port_config: PortConfig | None = None,
    **kwargs: Any,
) -> PortDescriptor:
    """Insert or replace a port on a node type.

    The node descriptor is created if absent. An existing port with the
    same name is replaced entirely.

    Args:
        type_id: Class or registry identifier
        name: Property name of the port on the node class
        port_config: Port configuration (or pass its fields as keyword arguments)

    Returns:
        The stored port descriptor
    """
    key = type_key(type_id)
    port = PortDescriptor.from_config(name, _port_config(port_config, kwargs))
    current = _node_registry.get(key) or NodeDescriptor()
    ports = dict(current.ports)
    ports[name] = port
    _node_registry[key] = current.model_copy(update={"ports": ports})
    logger.debug(f"Registered port {key}.{name} ({port.type.value})")
    return port


def register_field(
    class_id: str | Type,
    name: str,
    field_config: PortConfig | None = None,
    **kwargs: Any,
) -> FieldDescriptor:
    """Insert or replace a field on a composite value class.

    Args:
        class_id: Class or registry identifier
        name: Attribute name of the field
        field_config: Field configuration (or pass its fields as keyword arguments)

    Returns:
        The stored field descriptor
    """
    key = type_key(class_id)
    field = FieldDescriptor.from_config(name, _port_config(field_config, kwargs))
    _field_registry.setdefault(key, {})[name] = field
    logger.debug(f"Registered field {key}.{name} ({field.type.value})")
    return field


def register_node_class(cls: Type) -> Type:
    """Remember the class behind a node identifier.

    Can be used as a decorator or called directly.

    Args:
        cls: The node class

    Returns:
        The same class (for decorator use)
    """
    _node_classes[type_key(cls)] = cls
    return cls


def get_node(type_id: str | Type) -> NodeDescriptor | None:
    """Get a copy of a node descriptor, or None if the type was never registered."""
    descriptor = _node_registry.get(type_key(type_id))
    if descriptor is None:
        return None
    return descriptor.model_copy(deep=True)


def get_fields(class_id: str | Type) -> dict[str, FieldDescriptor] | None:
    """Get a class's field descriptors, or None if none were registered."""
    fields = _field_registry.get(type_key(class_id))
    if fields is None:
        return None
    return dict(fields)


def lookup_node(type_id: str | Type) -> NodeDescriptor:
    """Get a node descriptor.

    Args:
        type_id: Class or registry identifier

    Returns:
        The registered descriptor

    Raises:
        MissingMetadata: If the type was never registered
    """
    descriptor = get_node(type_id)
    if descriptor is None:
        raise MissingMetadata(type_key(type_id))
    return descriptor


def lookup_fields(class_id: str | Type) -> dict[str, FieldDescriptor]:
    """Get a class's field descriptors in declaration order.

    Args:
        class_id: Class or registry identifier

    Returns:
        Mapping of attribute name to field descriptor

    Raises:
        MissingMetadata: If no field was ever registered for the class
    """
    fields = get_fields(class_id)
    if fields is None:
        raise MissingMetadata(type_key(class_id), kind="field")
    return fields


def get_node_class(type_id: str) -> Type | None:
    """Get a node class by its registry identifier or node type name.

    Args:
        type_id: Registry identifier (e.g., "nodeshape.nodes.user_profile.UserProfileNode")
            or node type (e.g., "UserProfileNode")

    Returns:
        The node class, or None if not found
    """
    cls = _node_classes.get(type_id)
    if cls is not None:
        return cls
    for key, descriptor in _node_registry.items():
        if descriptor.type == type_id and key in _node_classes:
            return _node_classes[key]
    return None


def get_all_nodes() -> dict[str, NodeDescriptor]:
    """Get all registered node descriptors.

    Returns:
        Dictionary mapping registry identifiers to descriptors
    """
    return {
        key: descriptor.model_copy(deep=True)
        for key, descriptor in _node_registry.items()
    }

"""Class decorators that declare ports and fields at definition time."""

from typing import Any, Callable, Type, TypeVar

from ..models import DataType, Direction, PortConfig
from .registry import register_field, register_node, register_node_class, register_port

T = TypeVar("T", bound=Type)


def port(
    type: DataType | str,
    direction: Direction | str | None = None,
    title: str | None = None,
    **config: Any,
) -> PortConfig:
    """Build a port configuration.

    Args:
        type: Declared data type
        direction: "in" or "out"; ports without one are treated as outputs
        title: Display title
        **config: Any other PortConfig field (description, default, ...)
    """
    return PortConfig(type=type, direction=direction, title=title, **config)


def field_port(
    type: DataType | str,
    title: str | None = None,
    **config: Any,
) -> PortConfig:
    """Build a field configuration.

    Fields usually leave direction unset so they inherit it from their port.
    """
    return PortConfig(type=type, title=title, **config)


def flow_node(
    type: str,
    category: str,
    title: str | None = None,
    description: str | None = None,
    ports: dict[str, PortConfig] | None = None,
) -> Callable[[T], T]:
    """Register a class as a node type with its ports.

    Ports are registered in dict order, which is also their output order.

    Example:
        @flow_node(
            type="EchoNode",
            category="Utility",
            ports={
                "text": port(DataType.STRING, Direction.IN),
                "echo": port(DataType.STRING, Direction.OUT),
            },
        )
        class EchoNode: ...
    """

    def decorator(cls: T) -> T:
        register_node(
            cls, type=type, category=category, title=title, description=description
        )
        for name, config in (ports or {}).items():
            register_port(cls, name, config)
        return register_node_class(cls)

    return decorator


def field_ports(**fields: PortConfig) -> Callable[[T], T]:
    """Register the fields of a composite value class.

    Keyword order is declaration order.

    Example:
        @field_ports(
            street=field_port(DataType.STRING, "Street"),
            city=field_port(DataType.STRING, "City"),
        )
        class Address: ...
    """

    def decorator(cls: T) -> T:
        for name, config in fields.items():
            register_field(cls, name, config)
        return cls

    return decorator

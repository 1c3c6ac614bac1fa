"""Example node exposing a nested user profile on both sides."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models import DataType, Direction
from .decorators import field_port, field_ports, flow_node, port

POSTFIX = " (executed)"


@field_ports(
    street=field_port(DataType.STRING, "Street"),
    city=field_port(DataType.STRING, "City"),
    zip_code=field_port(DataType.STRING, "Zip Code"),
    nested_address=field_port(DataType.OBJECT, "Nested Address"),
)
@dataclass
class Address:
    """Postal address; may nest another address."""

    street: str = ""
    city: str = ""
    zip_code: str = ""
    nested_address: Address | None = None


@field_ports(
    name=field_port(DataType.STRING, "Name"),
    age=field_port(DataType.NUMBER, "Age"),
    email=field_port(DataType.STRING, "Email"),
    address=field_port(DataType.OBJECT, "Address"),
)
@dataclass
class UserProfile:
    """A user with contact details."""

    name: str = ""
    age: int = 0
    email: str = ""
    address: Address | None = field(default_factory=Address)


def _tag_address(source: Address, target: Address) -> None:
    target.street = source.street + POSTFIX
    target.city = source.city + POSTFIX
    target.zip_code = source.zip_code + POSTFIX
    if source.nested_address is not None:
        if target.nested_address is None:
            target.nested_address = Address()
        _tag_address(source.nested_address, target.nested_address)


@flow_node(
    type="UserProfileNode",
    category="Data Processing",
    title="User Profile Node",
    ports={
        "user_profile": port(DataType.OBJECT, Direction.IN, "User Profile Input"),
        "processed_profile": port(DataType.OBJECT, Direction.OUT, "Processed User Profile"),
    },
)
class UserProfileNode:
    """
    Copies a user profile to its output, tagging every string value.

    Ports:
        Reads: user_profile
        Writes: processed_profile
    """

    def __init__(
        self,
        user_profile: UserProfile | None = None,
        processed_profile: UserProfile | None = None,
    ):
        self.user_profile = user_profile or UserProfile()
        self.processed_profile = processed_profile or UserProfile()

    def execute(self) -> None:
        """Append POSTFIX to every string in the input; copy age verbatim."""
        source = self.user_profile
        target = self.processed_profile

        target.name = source.name + POSTFIX
        if source.email:
            target.email = source.email + POSTFIX
        if source.address is not None:
            if target.address is None:
                target.address = Address()
            _tag_address(source.address, target.address)
        target.age = source.age

"""Shared pytest fixtures for introspection tests."""

import pytest

from nodeshape.config import NodeShapeConfig
from nodeshape.generator import SchemaGenerator
from nodeshape.nodes import Address, UserProfile, UserProfileNode


@pytest.fixture
def test_config():
    """Return a NodeShapeConfig with test defaults."""
    return NodeShapeConfig(
        id_prefix="test",
        json_indent=2,
        output_format="json",
        log_level="DEBUG",
    )


@pytest.fixture
def generator(test_config):
    """Return a SchemaGenerator using the test configuration."""
    return SchemaGenerator(test_config)


@pytest.fixture
def alice_profile():
    """Return the Alice profile with one level of nested address."""
    return UserProfile(
        name="Alice",
        age=30,
        email="alice@example.com",
        address=Address(
            street="123 Main St",
            city="Wonderland",
            zip_code="12345",
            nested_address=Address(
                street="456 Sub St",
                city="Underland",
                zip_code="54321",
            ),
        ),
    )


@pytest.fixture
def alice_node(alice_profile):
    """Return a UserProfileNode holding Alice, already executed."""
    node = UserProfileNode(user_profile=alice_profile)
    node.execute()
    return node


@pytest.fixture
def empty_node():
    """Return a UserProfileNode with default (empty) profiles."""
    return UserProfileNode()

"""
CLI interface for node introspection.

Usage:
    nodeshape list --module my_package.nodes
    nodeshape show UserProfileNode --part schema --format yaml
    nodeshape demo
"""

import importlib
import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from . import NodeShapeConfig, NodeShapeError, SchemaGenerator
from .nodes import UserProfile, UserProfileNode, Address, get_all_nodes, get_node_class

app = typer.Typer(
    name="nodeshape",
    help="Inspect node schemas and data for dataflow editors",
)
console = Console()

ModulesOption = Annotated[
    list[str] | None,
    typer.Option("--module", "-m", help="Module to import so its nodes register"),
]
FormatOption = Annotated[
    str | None,
    typer.Option("--format", help="Output format: json or yaml"),
]


def _configure_logging(config: NodeShapeConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _import_modules(modules: list[str] | None) -> None:
    for module in modules or []:
        try:
            importlib.import_module(module)
        except ImportError as e:
            raise typer.BadParameter(f"Cannot import module '{module}': {e}") from e


def _check_format(output_format: str | None) -> None:
    if output_format is not None and output_format not in ("json", "yaml"):
        raise typer.BadParameter("Output format must be json or yaml")


def _render(payload, output_format: str, indent: int) -> str:
    if output_format == "yaml":
        return payload.to_yaml()
    return json.dumps(payload.to_dict(), indent=indent, ensure_ascii=False)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
):
    """Inspect node schemas and data for dataflow editors."""
    _configure_logging(NodeShapeConfig(), verbose)


@app.command("list")
def list_cmd(
    modules: ModulesOption = None,
    show_class: Annotated[
        bool, typer.Option("--show-class", help="Add the registry identifier column")
    ] = False,
):
    """List registered node types."""
    _import_modules(modules)

    table = Table(title="Registered Nodes")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Category")
    table.add_column("Title")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")
    if show_class:
        table.add_column("Class", style="dim", overflow="fold")

    for key, descriptor in get_all_nodes().items():
        row = [
            descriptor.type,
            descriptor.category,
            descriptor.title or "",
            str(len(descriptor.inputs)),
            str(len(descriptor.outputs)),
        ]
        if show_class:
            row.append(key)
        table.add_row(*row)

    console.print(table)


@app.command("show")
def show_cmd(
    type_id: Annotated[str, typer.Argument(help="Node type or registry identifier")],
    modules: ModulesOption = None,
    part: Annotated[
        str, typer.Option("--part", help="What to print: all, schema or data")
    ] = "all",
    output_format: FormatOption = None,
):
    """Instantiate a registered node with defaults and print it."""
    _check_format(output_format)
    if part not in ("all", "schema", "data"):
        raise typer.BadParameter("--part must be all, schema or data")
    _import_modules(modules)

    cls = get_node_class(type_id)
    if cls is None:
        console.print(f"[red]Unknown node type: {type_id}[/red]")
        raise typer.Exit(1)

    config = NodeShapeConfig()
    generator = SchemaGenerator(config)
    output_format = output_format or config.output_format

    try:
        instance = cls()
    except TypeError as e:
        console.print(f"[red]Cannot instantiate {type_id} without arguments: {e}[/red]")
        raise typer.Exit(1)

    try:
        if part == "schema":
            text = _render(generator.generate_schema(instance), output_format, config.json_indent)
        elif part == "data":
            text = _render(generator.generate_node_data(instance), output_format, config.json_indent)
        else:
            text = generator.serialize_node(instance, output_format)
    except NodeShapeError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def build_demo_node() -> UserProfileNode:
    """Build the example node with a filled-in, executed profile."""
    node = UserProfileNode(
        user_profile=UserProfile(
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
    )
    node.execute()
    return node


@app.command("demo")
def demo_cmd(output_format: FormatOption = None):
    """Serialize the example UserProfileNode after executing it."""
    _check_format(output_format)
    generator = SchemaGenerator()
    console.print("[bold]Serialized Node:[/bold]")
    console.print(
        generator.serialize_node(build_demo_node(), output_format),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

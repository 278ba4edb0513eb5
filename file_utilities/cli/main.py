"""Command line interface for base-path-scoped file operations."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click
from click.core import ParameterSource

from file_utilities.application.file_utility import FileUtility
from file_utilities.domain.exceptions import FileUtilityError
from file_utilities.domain.services import build_path
from file_utilities.infrastructure.factory import InfrastructureFactory


def _parse_mode(ctx, param, value):
    """Parse an octal permission string such as ``755``."""
    if value is None:
        return None
    try:
        return int(value, 8)
    except ValueError as e:
        raise click.BadParameter(f"'{value}' is not an octal mode") from e


@contextmanager
def _reported(ctx: click.Context) -> Iterator[None]:
    """Print domain errors and exit with status 1."""
    try:
        yield
    except FileUtilityError as e:
        ctx.obj["console"].print_error(e.message)
        ctx.exit(1)


@click.group()
@click.option("--base-path", "-b", default="", help="Base directory (defaults to cwd)")
@click.option("--overwrite/--no-overwrite", default=False, help="Allow replacing existing files")
@click.option(
    "--create-directories/--no-create-directories",
    default=True,
    help="Create missing parent directories",
)
@click.pass_context
def main(ctx, base_path, overwrite, create_directories):
    """Read, write and manage files relative to a base directory."""
    overrides = {}
    for name, value in (
        ("base_path", base_path),
        ("overwrite", overwrite),
        ("create_directories", create_directories),
    ):
        if ctx.get_parameter_source(name) is not ParameterSource.DEFAULT:
            overrides[name] = value

    factory = InfrastructureFactory()
    ctx.ensure_object(dict)
    ctx.obj["console"] = factory.create_console()
    ctx.obj["utility"] = FileUtility.from_settings(factory.create_settings(**overrides))


@main.command()
@click.pass_context
def info(ctx):
    """Show the base path and active options."""
    utility = ctx.obj["utility"]
    rows = [["base_path", utility.get_base_path()]]
    rows.extend([key, str(value)] for key, value in utility.options.model_dump().items())
    ctx.obj["console"].print_table(["Setting", "Value"], rows, title="file-utilities")


@main.command()
@click.argument("path")
@click.pass_context
def exists(ctx, path):
    """Print whether PATH exists."""
    ctx.obj["console"].print("true" if ctx.obj["utility"].exists(path) else "false")


@main.command()
@click.argument("path")
@click.pass_context
def size(ctx, path):
    """Print the size of PATH in bytes."""
    with _reported(ctx):
        ctx.obj["console"].print(str(ctx.obj["utility"].size(path)))


@main.command()
@click.argument("path")
@click.pass_context
def read(ctx, path):
    """Print the contents of PATH."""
    with _reported(ctx):
        ctx.obj["console"].print(ctx.obj["utility"].read(path))


@main.command()
@click.argument("path")
@click.argument("content")
@click.pass_context
def write(ctx, path, content):
    """Write CONTENT to PATH."""
    with _reported(ctx):
        ctx.obj["utility"].write(path, content)
        ctx.obj["console"].print_success(f"Wrote {path}")


@main.command()
@click.argument("path")
@click.pass_context
def delete(ctx, path):
    """Delete PATH; a missing file is not an error."""
    with _reported(ctx):
        ctx.obj["utility"].delete(path)
        ctx.obj["console"].print_success(f"Deleted {path}")


@main.command()
@click.argument("source")
@click.argument("destination")
@click.option("--create-dest", is_flag=True, help="Create the destination directory")
@click.pass_context
def copy(ctx, source, destination, create_dest):
    """Copy SOURCE to DESTINATION."""
    with _reported(ctx):
        ctx.obj["utility"].copy(source, destination, create_dest)
        ctx.obj["console"].print_success(f"Copied {source} to {destination}")


@main.command()
@click.argument("source")
@click.argument("destination")
@click.option("--create-dest", is_flag=True, help="Create the destination directory")
@click.pass_context
def move(ctx, source, destination, create_dest):
    """Move SOURCE to DESTINATION."""
    with _reported(ctx):
        ctx.obj["utility"].move(source, destination, create_dest)
        ctx.obj["console"].print_success(f"Moved {source} to {destination}")


@main.command()
@click.argument("source")
@click.argument("new_name")
@click.pass_context
def rename(ctx, source, new_name):
    """Rename SOURCE to NEW_NAME within its directory."""
    with _reported(ctx):
        ctx.obj["utility"].rename(source, new_name)
        ctx.obj["console"].print_success(f"Renamed {source} to {new_name}")


@main.command()
@click.argument("path")
@click.option("--mode", "-m", default="755", callback=_parse_mode, help="Octal permission bits")
@click.option("--recursive/--no-recursive", default=True, help="Create missing parents")
@click.pass_context
def mkdir(ctx, path, mode, recursive):
    """Create directory PATH."""
    with _reported(ctx):
        ctx.obj["utility"].mkdir(path, mode, recursive)
        ctx.obj["console"].print_success(f"Directory ready: {path}")


@main.command()
@click.argument("segments", nargs=-1, required=True)
@click.pass_context
def join(ctx, segments):
    """Join SEGMENTS into a single normalized path."""
    ctx.obj["console"].print(build_path(segments))


if __name__ == "__main__":
    main()

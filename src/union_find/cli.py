"""ufind: build a partition table from the command line and query it."""

from __future__ import annotations

import json
import logging
from typing import Annotated, NoReturn, Optional

import typer

from union_find.config import PartitionConfig
from union_find.table import PartitionView, UnionFind

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ufind",
    help="Union-Find partition tables over 0..N",
    no_args_is_help=True,
)

UnionOption = Annotated[
    Optional[list[str]],
    typer.Option("--union", "-u", help="Attach J to I's partition, as I:J (repeatable)"),
]
ReadOnlyOption = Annotated[
    bool,
    typer.Option("--read-only", "-r", help="Query with find_only (no path compression)"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging (same as --log-level DEBUG)"),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level: DEBUG, INFO, WARNING, ERROR"),
    ] = "WARNING",
) -> None:
    """Union-Find partition tables over 0..N."""
    try:
        config = PartitionConfig(log_level="DEBUG" if verbose else log_level.upper())
    except ValueError as e:
        fail(str(e))
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def fail(message: str) -> NoReturn:
    """Print an error and exit with a usage status."""
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(2)


def parse_union(value: str) -> tuple[int, int]:
    """Parse an ``I:J`` pair."""
    left, sep, right = value.partition(":")
    if not sep:
        raise ValueError(f"union must look like I:J, got '{value}'")
    try:
        return int(left), int(right)
    except ValueError:
        raise ValueError(f"union must look like I:J, got '{value}'") from None


def _creates_cycle(view: PartitionView, i: int, j: int) -> bool:
    # union(i, j) writes parent[j] = parent[i]; that closes a loop when
    # parent[i] hangs below j.
    p = view.parent_of(i)
    if p == j:
        return False
    while view.parent_of(p) != p:
        if p == j:
            return True
        p = view.parent_of(p)
    return p == j


def build_table(config: PartitionConfig, unions: list[str] | None) -> UnionFind:
    """Create a table of ``config.size`` elements and apply the given unions in order."""
    table = UnionFind(config.size)
    view = table.view()
    for raw in unions or []:
        i, j = parse_union(raw)
        view.find_only(i)
        view.find_only(j)
        if _creates_cycle(view, i, j):
            raise ValueError(f"union {i}:{j} would link {j} below itself; pass a root as J")
        table.union(i, j)
        logger.debug("union(%d, %d): parent of %d is now %d", i, j, j, table.parent_of(j))
    return table


def render_groups(table: UnionFind, config: PartitionConfig) -> str:
    """Format the partitions of ``table`` for output."""
    if config.read_only:
        groups = table.view().groups()
    else:
        groups = {}
        for i in range(len(table)):
            groups.setdefault(table.find(i), []).append(i)
    groups = dict(sorted(groups.items()))

    if config.as_json:
        return json.dumps(
            {"size": len(table), "count": len(groups), "groups": groups},
            indent=2,
        )
    return "\n".join(f"{root}: {' '.join(map(str, members))}" for root, members in groups.items())


@app.command("groups")
def groups_cmd(
    size: Annotated[int, typer.Argument(help="Number of elements")],
    union: UnionOption = None,
    read_only: ReadOnlyOption = False,
    as_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Print every partition as ``root: members``.

    Examples:
        ufind groups 6 -u 0:2 -u 0:4 -u 1:3
        ufind groups 6 -u 0:2 --json
    """
    try:
        config = PartitionConfig(size=size, read_only=read_only, as_json=as_json)
        table = build_table(config, union)
    except (ValueError, IndexError) as e:
        fail(str(e))
    output = render_groups(table, config)
    if output:
        typer.echo(output)


@app.command("find")
def find_cmd(
    size: Annotated[int, typer.Argument(help="Number of elements")],
    element: Annotated[int, typer.Argument(help="Element to look up")],
    union: UnionOption = None,
    read_only: ReadOnlyOption = False,
) -> None:
    """Print the canonical element of ELEMENT's partition."""
    try:
        config = PartitionConfig(size=size, read_only=read_only)
        table = build_table(config, union)
        root = table.view().find_only(element) if config.read_only else table.find(element)
    except (ValueError, IndexError) as e:
        fail(str(e))
    typer.echo(str(root))


@app.command("same")
def same_cmd(
    size: Annotated[int, typer.Argument(help="Number of elements")],
    first: Annotated[int, typer.Argument(help="First element")],
    second: Annotated[int, typer.Argument(help="Second element")],
    union: UnionOption = None,
    read_only: ReadOnlyOption = False,
) -> None:
    """Print whether two elements share a partition; exit 1 if they do not."""
    try:
        config = PartitionConfig(size=size, read_only=read_only)
        table = build_table(config, union)
        if config.read_only:
            result = table.view().same_only(first, second)
        else:
            result = table.same(first, second)
    except (ValueError, IndexError) as e:
        fail(str(e))
    typer.echo("true" if result else "false")
    if not result:
        raise typer.Exit(1)


@app.command("parity")
def parity_cmd(
    size: Annotated[int, typer.Argument(help="Number of elements")] = 20,
    as_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Split 0..SIZE into even and odd partitions rooted at 0 and 1."""
    try:
        config = PartitionConfig(size=size, as_json=as_json)
        table = UnionFind(config.size)
        for i in range(config.size):
            table.union(i & 1, i)
    except (ValueError, IndexError) as e:
        fail(str(e))
    output = render_groups(table, config)
    if output:
        typer.echo(output)

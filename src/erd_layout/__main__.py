"""CLI entry point for erd-layout."""

import json
import logging
import sys

import click

from erd_layout.config import LayoutConfig
from erd_layout.document import DEFAULT_MAX_NODES, DiagramError, layout_document_result


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--h-gap", type=float, default=None, help="Horizontal gap between nodes in a row")
@click.option("--v-gap", type=float, default=None, help="Vertical gap between levels")
@click.option("--origin-x", type=float, default=None, help="Column every row is centered on")
@click.option("--origin-y", type=float, default=None, help="y of the top level")
@click.option("--min-gap", type=float, default=None, help="Minimum horizontal distance within a row")
@click.option("--iterations", type=int, default=None, help="Barycenter sweep iterations")
@click.option("--max-nodes", type=int, default=DEFAULT_MAX_NODES, show_default=True, help="Refuse larger diagrams")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indent (0 for compact)")
@click.option("--stats", is_flag=True, help="Print level and crossing counts to stderr")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    input: str | None,
    output: str | None,
    h_gap: float | None,
    v_gap: float | None,
    origin_x: float | None,
    origin_y: float | None,
    min_gap: float | None,
    iterations: int | None,
    max_nodes: int,
    indent: int,
    stats: bool,
    verbose: bool,
) -> None:
    """Lay out an entity-relationship diagram (JSON nodes/edges) top to bottom."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        click.echo(f"error: invalid JSON: {e}", err=True)
        sys.exit(1)

    config = LayoutConfig().replace(
        h_gap=h_gap,
        v_gap=v_gap,
        origin_x=origin_x,
        origin_y=origin_y,
        min_gap=min_gap,
        iterations=iterations,
    )

    try:
        laid_out, result = layout_document_result(doc, config, max_nodes)
    except DiagramError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if stats:
        click.echo(
            f"nodes: {len(result.nodes)} levels: {result.level_count} "
            f"crossings: {result.crossings} skipped edges: {result.skipped_edges} "
            f"cyclic nodes: {len(result.cyclic_nodes)}",
            err=True,
        )

    rendered = json.dumps(laid_out, indent=indent or None) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()

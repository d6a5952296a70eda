"""CLI entry point for aisvg."""

import sys
from pathlib import Path

import click

from aisvg.config import RenderConfig
from aisvg.errors import LayoutError, SpecError
from aisvg.layout.engine import full_layout
from aisvg.log import configure_logging
from aisvg.ir.coordinate import CoordinateSpec
from aisvg.parsers import parse, parser_for
from aisvg.renderers.svg import DRAW_ORDERS, CoordinateSvgRenderer, SvgRenderer
from aisvg.storage import DiagramStore


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--output", "-o", "output", type=str, default=None, help="Write SVG to this file instead of stdout")
@click.option(
    "--order",
    "draw_order",
    type=click.Choice(DRAW_ORDERS),
    default="dependency",
    help="Element order in the output (layout order or document order)",
)
@click.option("--save", is_flag=True, help="Also store the SVG and its spec in the output directory")
@click.option(
    "--out-dir",
    "out_dir",
    type=click.Path(file_okay=False),
    default="diagrams",
    help="Directory for saved diagrams and metadata.json",
)
@click.option("--prompt", type=str, default="", help="Prompt text recorded with a saved diagram")
@click.option("--last", "use_last", is_flag=True, help="Re-render the most recently saved spec")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging to stderr")
@click.option("--log-json", is_flag=True, help="Log as JSON lines")
def main(
    input: str | None,
    output: str | None,
    draw_order: str,
    save: bool,
    out_dir: str,
    prompt: str,
    use_last: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Semantic shape JSON to SVG markup.

    Coordinate documents (a viewBox and explicit element coordinates) are
    rendered as given, in document order; --order does not apply to them.
    """
    config = RenderConfig(output_dir=Path(out_dir), draw_order=draw_order, verbose=verbose, log_json=log_json)
    configure_logging(verbose=config.verbose, log_json=config.log_json)
    store = DiagramStore(config.output_dir)

    try:
        if use_last:
            entry = store.last()
            if entry is None:
                click.echo(f"error: no saved diagram in '{config.output_dir}'", err=True)
                sys.exit(1)
            spec = parser_for(entry.mode).parse_mapping(entry.spec)
            prompt = prompt or entry.prompt
        else:
            if input:
                try:
                    with open(input) as f:
                        text = f.read()
                except OSError as e:
                    click.echo(f"error: cannot read '{input}': {e}", err=True)
                    sys.exit(1)
            else:
                text = sys.stdin.read()
            spec = parse(text)
    except SpecError as e:
        click.echo(f"spec error: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if isinstance(spec, CoordinateSpec):
        mode = "coordinate"
        rendered = CoordinateSvgRenderer().render(spec)
    else:
        mode = "semantic"
        try:
            result = full_layout(spec)
        except LayoutError as e:
            click.echo(f"layout error: {e}", err=True)
            sys.exit(1)
        rendered = SvgRenderer(draw_order=config.draw_order).render(result)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered + "\n")
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered)

    if save:
        try:
            path = store.save(rendered, spec, prompt=prompt, mode=mode)
        except OSError as e:
            click.echo(f"error: cannot save to '{config.output_dir}': {e}", err=True)
            sys.exit(1)
        click.echo(f"saved: {path}", err=True)


if __name__ == "__main__":
    main()

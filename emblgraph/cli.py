import typer
import logging
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

from emblgraph.config import Config
from emblgraph.core.io import iter_json_lines, write_json_lines
from emblgraph.errors import EmblGraphError
from emblgraph.graph.builder import build_graph_lines
from emblgraph.graph.chain import FeatureChain
from emblgraph.graph.dot import render_dot_file
from emblgraph.parsing.accumulator import parse_annotation_file
from emblgraph.reverse.reducer import convert_graph_array

# Always written to the working directory.
DOT_OUTPUT = "graph.dot"

app = typer.Typer(
    name="emblgraph",
    help="Convert EMBL-style annotation files to and from graph JSON.",
    add_completion=False,
    no_args_is_help=True
)

ConfigOption = Annotated[Optional[Path], typer.Option("--config", help="YAML configuration file")]


def setup_logging(level: int):
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_config(config: Optional[Path], verbose: bool, **overrides) -> Config:
    try:
        settings = Config().load(str(config) if config else None, overrides)
    except EmblGraphError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    setup_logging(logging.DEBUG if verbose else settings.log_level)
    return settings


def fail(error: Exception):
    logging.debug("Command failed", exc_info=True)
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.command()
def process(
    input_embl: Annotated[Path, typer.Argument(help="EMBL-style annotation file")],
    output_json: Annotated[Path, typer.Argument(help="Output graph file (JSON Lines)")],
    config: ConfigOption = None,
    progress: Annotated[Optional[bool], typer.Option("--progress/--no-progress", help="Show a progress bar")] = None,
    verbose: bool = False
):
    """Convert an annotation file to graph JSON Lines and write graph.dot."""
    settings = load_config(config, verbose, progress=progress)
    try:
        summary = parse_annotation_file(input_embl, progress=bool(settings.get("progress")))
        write_json_lines(output_json, build_graph_lines(summary))
        render_dot_file(output_json, DOT_OUTPUT)
    except (EmblGraphError, OSError) as e:
        fail(e)
    typer.echo(f"Graph saved to {output_json} ({len(summary.features)} features), DOT graph saved to {DOT_OUTPUT}")


@app.command()
def convert(
    input_json: Annotated[Path, typer.Argument(help="Graph file holding a JSON array of nodes")],
    output_embl: Annotated[Path, typer.Argument(help="Output annotation file")],
    config: ConfigOption = None,
    verbose: bool = False
):
    """Convert a graph JSON array back to flat-file annotation entries."""
    load_config(config, verbose)
    try:
        count = convert_graph_array(input_json, output_embl)
    except (EmblGraphError, OSError) as e:
        fail(e)
    typer.echo(f"{count} entries saved to {output_embl}")


@app.command()
def inspect(
    graph_json: Annotated[Path, typer.Argument(help="Graph file (JSON Lines) written by process")],
    config: ConfigOption = None,
    verbose: bool = False
):
    """Print the feature chain of each contig in a graph file."""
    load_config(config, verbose)
    chain = FeatureChain()
    try:
        chain.build_from_elements(iter_json_lines(graph_json))
    except (EmblGraphError, OSError) as e:
        fail(e)

    stats = chain.summary()
    typer.echo(f"{stats['nodes']} nodes, {stats['relationships']} relationships")
    for contig in chain.contigs():
        features = chain.chain(contig)
        names = [chain.graph.nodes[node_id].get('properties', {}).get('name', node_id) for node_id in features]
        typer.echo(f"{contig}: {len(features)} features")
        if names:
            typer.echo("  " + " -> ".join(str(name) for name in names))


def main():
    app()


if __name__ == "__main__":
    main()

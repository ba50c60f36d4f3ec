"""CLI entry point for swagger-doc."""

import json
import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from swagger_doc.builder import generate_document
from swagger_doc.config import SwaggerDocConfig, load_config
from swagger_doc.errors import SwaggerDocError
from swagger_doc.parser.base import Document


def _load_config(config_path: Path | None, scan_dir: str | None, suffix: str | None) -> SwaggerDocConfig:
    """Load config file (or defaults) and apply command-line overrides."""
    try:
        config = load_config(config_path) if config_path else SwaggerDocConfig()
    except SwaggerDocError as e:
        raise click.ClickException(str(e)) from e

    overrides = {}
    if scan_dir:
        overrides["dir_scanner"] = scan_dir
    if suffix:
        overrides["suffix"] = suffix
    if overrides:
        try:
            config = SwaggerDocConfig(**{**config.model_dump(), **overrides})
        except ValidationError as e:
            raise click.ClickException(str(e)) from e
    return config


def _build(config: SwaggerDocConfig) -> Document:
    try:
        return generate_document(config)
    except SwaggerDocError as e:
        raise click.ClickException(str(e)) from e


def _render(doc: Document, fmt: str) -> str:
    data = doc.to_dict()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def _count_operations(doc: Document) -> int:
    return sum(len(methods) for methods in doc.paths.values())


config_option = click.option(
    "-c", "--config", "config_path", default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file.",
)
dir_option = click.option("--dir", "scan_dir", default=None, help="Directory to scan, relative to the config's base_dir.")
suffix_option = click.option("--suffix", default=None, help="Extension of files to scan, e.g. .js")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log skipped files, blocks and duplicate routes.")
def main(verbose: bool):
    """swagger-doc: build a Swagger 2.0 document from annotated source comments."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@main.command()
@config_option
@dir_option
@suffix_option
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file. Prints to stdout if omitted.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def generate(config_path: Path | None, scan_dir: str | None, suffix: str | None, output: Path | None, fmt: str):
    """Generate the Swagger document."""
    config = _load_config(config_path, scan_dir, suffix)
    doc = _build(config)
    text = _render(doc, fmt)

    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Swagger document saved to {output}", err=True)


@main.command()
@config_option
@dir_option
@suffix_option
def check(config_path: Path | None, scan_dir: str | None, suffix: str | None):
    """Parse all annotations and report what was found."""
    config = _load_config(config_path, scan_dir, suffix)
    click.echo(f"Scanning {config.scan_dir} ({config.suffix})...")
    doc = _build(config)
    click.echo(f"Found {len(doc.tags)} tags, {_count_operations(doc)} operations.")

"""Command-line interface for JSON Commons."""

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Tuple, Union

import click

from .links import LinkCurator
from .types import CurationOptions, DEFAULT_SEPARATOR, MIN_PRETTIFY_LENGTH, ProcessingError
from .utils.strings import normalize_url as _normalize_url
from .utils.strings import prettify_string, replace_placeholders
from .utils.validation import ValidationUtils, format_validation_result


def _read_json(input_file: Path):
    return json.loads(input_file.read_text(encoding='utf-8'))


def _extract_links(data):
    """Accept either a bare link list or an API object with a ``links`` member."""
    if isinstance(data, dict) and "links" in data:
        return data["links"]
    return data


def _parse_variables(pairs: Tuple[str, ...]) -> Dict[str, Union[str, List[str]]]:
    variables: Dict[str, Union[str, List[str]]] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"expected key=value, got '{pair}'", param_hint="--var")
        key, value = pair.split("=", 1)
        if key in variables:
            current = variables[key]
            variables[key] = (current if isinstance(current, list) else [current]) + [value]
        else:
            variables[key] = value
    return variables


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def main(verbose: bool):
    """JSON Commons - Normalize values and metadata from JSON APIs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument('tokens', nargs=-1, required=True)
@click.option('--separator', '-s', default=DEFAULT_SEPARATOR, show_default=True,
              help='Separator between prettified tokens')
@click.option('--min-length', default=MIN_PRETTIFY_LENGTH, show_default=True,
              help='Tokens shorter than this are left unchanged')
def prettify(tokens: Tuple[str, ...], separator: str, min_length: int):
    """Turn identifiers like collection_id or spatialExtent into readable text."""
    click.echo(prettify_string(list(tokens), separator=separator, min_length=min_length))


@main.command('normalize-url')
@click.argument('base')
@click.argument('path', required=False)
def normalize_url(base: str, path: str):
    """Join BASE and an optional PATH without duplicate slashes."""
    click.echo(_normalize_url(base, path))


@main.command()
@click.argument('message')
@click.option('--var', 'pairs', multiple=True, help='Placeholder value as key=value')
def placeholders(message: str, pairs: Tuple[str, ...]):
    """Replace {name} placeholders in MESSAGE."""
    click.echo(replace_placeholders(message, _parse_variables(pairs)))


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--sort/--no-sort', default=True, help='Sort links by title (default: sort)')
@click.option('--ignore-rel', '-i', multiple=True, help='Relation type to drop (default: self)')
def links(input_file: Path, sort: bool, ignore_rel: Tuple[str, ...]):
    """Print the curated link list from a JSON file."""
    try:
        data = _read_json(input_file)
    except (OSError, ValueError, RecursionError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    options = CurationOptions(sort=sort)
    if ignore_rel:
        options.ignore_rel = list(ignore_rel)

    curated = LinkCurator(options).curate(_extract_links(data))
    click.echo(json.dumps(curated, indent=2, ensure_ascii=False))


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--links', 'as_links', is_flag=True, help='Validate the file as a link list')
def validate(input_file: Path, as_links: bool):
    """Check that a file holds valid JSON (or a valid link list)."""
    try:
        text = input_file.read_text(encoding='utf-8')
        if as_links:
            result = ValidationUtils.validate_link_list(_extract_links(json.loads(text)))
        else:
            result = ValidationUtils.validate_json_string(text)
    except (OSError, ValueError, RecursionError, ProcessingError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    errors, warnings = format_validation_result(result)
    for warning in warnings:
        click.echo(f"warning: {warning}")
    for error in errors:
        click.echo(f"error: {error}")

    if not result.is_valid:
        sys.exit(1)
    click.echo("OK")


if __name__ == '__main__':
    main()

"""CLI entry point for openapi-params."""

import json
import logging
from fnmatch import fnmatch
from pathlib import Path

import click
import yaml

from openapi_params.config import ParserSettings
from openapi_params.errors import DocumentError
from openapi_params.parser.base import Operation, Service
from openapi_params.parser.document import parse_file


def _filter_operations(operations: list[Operation], patterns: tuple[str, ...]) -> list[Operation]:
    """Keep operations matching any 'METHOD /path-glob' or '/path-glob' pattern."""
    if not patterns:
        return list(operations)
    selected = []
    for op in operations:
        for pattern in patterns:
            method, _, path_glob = pattern.strip().rpartition(" ")
            if method and method.upper() != op.method:
                continue
            if fnmatch(op.path, path_glob):
                selected.append(op)
                break
    return selected


def _load_settings(config: Path | None, version_marker: str | None, no_expand: bool) -> ParserSettings:
    try:
        settings = ParserSettings.from_file(config) if config else ParserSettings()
    except ValueError as e:
        if config:
            raise click.BadParameter(str(e), param_hint="--config") from e
        raise click.ClickException(f"Invalid OPENAPI_PARAMS_* environment settings: {e}") from e
    updates: dict = {}
    if version_marker:
        updates["version_marker"] = version_marker
    if no_expand:
        updates.update(expand_parameters=False, expand_request_body=False)
    return settings.model_copy(update=updates)


def _parse(doc_path: Path, settings: ParserSettings, patterns: tuple[str, ...]) -> list[Service]:
    try:
        services = parse_file(doc_path, settings=settings)
    except DocumentError as e:
        raise click.ClickException(str(e)) from e

    filtered = []
    for service in services:
        operations = _filter_operations(service.operations, patterns)
        if operations:
            filtered.append(service.model_copy(update={"operations": operations}))
    return filtered


def format_signature(op: Operation) -> str:
    """Render the call signature a client method for `op` would get."""
    arguments = []
    for parameter in op.parameters:
        if parameter.is_required:
            arguments.append(parameter.name)
        else:
            arguments.append(f"{parameter.name}={parameter.default!r}")
    return f"{op.service}.{op.name}({', '.join(arguments)})"


def parser_options(func):
    """Options shared by every command that parses a document."""
    func = click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))(func)
    func = click.option("--operation", "patterns", multiple=True, help="Only operations matching 'METHOD /path' or '/path' (glob).")(func)
    func = click.option("--config", type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None, help="YAML file with parser settings.")(func)
    func = click.option("--version-marker", default=None, help="Parameter name to drop from every operation.")(func)
    func = click.option("--no-expand", is_flag=True, help="Never explode object parameters or request bodies.")(func)
    return func


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log parsing decisions.")
def main(verbose: bool):
    """openapi-params: normalize API operations into call-site parameters."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@main.command()
@parser_options
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Write to a file instead of stdout.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def inspect(doc_path: Path, patterns: tuple[str, ...], config: Path | None, version_marker: str | None,
            no_expand: bool, output: Path | None, fmt: str):
    """Dump the normalized operations of an API document."""
    settings = _load_settings(config, version_marker, no_expand)
    services = _parse(doc_path, settings, patterns)
    data = [service.model_dump(mode="json") for service in services]

    if fmt == "yaml":
        text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(data, indent=2, ensure_ascii=False)

    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Wrote {sum(len(s.operations) for s in services)} operations to {output}")


@main.command()
@parser_options
def signatures(doc_path: Path, patterns: tuple[str, ...], config: Path | None, version_marker: str | None,
               no_expand: bool):
    """Print the call signature of every operation."""
    settings = _load_settings(config, version_marker, no_expand)
    for service in _parse(doc_path, settings, patterns):
        for op in service.operations:
            click.echo(f"{op.method} {op.path}  ->  {format_signature(op)}")

from __future__ import annotations

import logging
import sys
from typing import IO, Any, NoReturn

import click

from schemanorm.cli.data import Data
from schemanorm.config import ConfigError, SchemanormConfig
from schemanorm.conversion import convert as convert_root
from schemanorm.core.errors import ConversionError, DecodingError
from schemanorm.jsonschema.decoding import loads
from schemanorm.jsonschema.encoding import dumps

if sys.version_info < (3, 11):
    from tomli import TOMLDecodeError
else:
    from tomllib import TOMLDecodeError

__all__ = ["schemanorm", "convert"]

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


def _fail(ctx: click.Context, title: str, detail: str) -> NoReturn:
    click.secho(f"❌  {title}", fg="red", bold=True, err=True)
    click.echo(f"\n{detail}", err=True)
    ctx.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)  # type: ignore[untyped-decorator]
@click.option(  # type: ignore[untyped-decorator]
    "--config-file",
    "config_file",
    help="The path to `schemanorm.toml` file to use for configuration",
    metavar="PATH",
    type=str,
)
@click.option(  # type: ignore[untyped-decorator]
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log conversion details to stderr",
)
@click.version_option(package_name="schemanorm")  # type: ignore[untyped-decorator]
@click.pass_context  # type: ignore[untyped-decorator]
def schemanorm(ctx: click.Context, config_file: str | None, verbose: bool) -> None:
    """Normalize JSON Schema documents that use boolean `required` annotations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        if config_file is not None:
            config = SchemanormConfig.from_path(config_file)
        else:
            config = SchemanormConfig.discover()
    except FileNotFoundError:
        _fail(ctx, f"Failed to load configuration file from {config_file}", "The configuration file does not exist")
    except PermissionError:
        _fail(ctx, f"Failed to load configuration file from {config_file}", "Permission denied")
    except (TOMLDecodeError, ConfigError) as exc:
        if isinstance(exc, TOMLDecodeError):
            detail = "The configuration file content is not valid TOML"
        else:
            detail = "The loaded configuration is incorrect"
        _fail(
            ctx,
            f"Failed to load configuration file{f' from {config_file}' if config_file else ''}",
            f"{detail}\n\n{exc}",
        )
    ctx.obj = Data(config=config)


@schemanorm.command(short_help="Convert a schema to its canonical form")  # type: ignore[untyped-decorator]
@click.argument("source", type=click.File("rb"), default="-", metavar="[PATH]")  # type: ignore[untyped-decorator]
@click.option(  # type: ignore[untyped-decorator]
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Where to write the converted schema. Defaults to stdout",
    metavar="PATH",
)
@click.option(  # type: ignore[untyped-decorator]
    "--compact/--pretty",
    default=None,
    help="Emit JSON without indentation",
)
@click.option(  # type: ignore[untyped-decorator]
    "--sort-keys/--keep-order",
    default=None,
    help="Sort object keys instead of keeping the document order",
)
@click.option(  # type: ignore[untyped-decorator]
    "--max-depth",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum nesting depth of schemas",
    metavar="N",
)
@click.pass_obj  # type: ignore[untyped-decorator]
def convert(
    obj: Data,
    source: IO[bytes],
    output: IO[str],
    compact: bool | None,
    sort_keys: bool | None,
    max_depth: int | None,
) -> None:
    """Convert a JSON Schema document to its canonical form.

    Reads PATH, or stdin when PATH is omitted or `-`.
    """
    ctx = click.get_current_context()
    config = obj.config
    config.update(max_depth=max_depth)
    config.output.update(compact=compact, sort_keys=sort_keys)
    name = getattr(source, "name", "<stdin>")
    try:
        root = loads(source.read(), max_depth=config.max_depth)
        converted = convert_root(root, max_depth=config.max_depth)
    except DecodingError as exc:
        _fail(ctx, f"Failed to decode {name}", str(exc))
    except ConversionError as exc:
        _fail(ctx, f"Failed to convert {name}", f"{exc}\n\nLocation: {exc.pointer or '/'}")
    output.write(dumps(converted, sort_keys=config.output.sort_keys, indent=not config.output.compact))
    output.write("\n")

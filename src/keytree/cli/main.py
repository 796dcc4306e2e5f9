"""
Main CLI entry point for keytree.

Provides a command-line interface, using Click, for checking keys and
inspecting the stores they build. Entries are given as KEY=VALUE
arguments and applied in order, exactly as a configuration loader
would apply flattened keys.
"""

import json as _json
import os as _os
import sys as _sys
import typing as _typing

import click as _click
import pydantic as _pydantic
import yaml as _yaml

import keytree
import keytree.config as config
import keytree.constants as constants
import keytree.errors as errors
import keytree.logging as logging
import keytree.properties as properties
import keytree.storage as storage

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

_entries_argument = _click.argument("entries", metavar="[KEY=VALUE]...", nargs=-1)


def _parse_entry(entry: str) -> tuple[str, str]:
    """Split a KEY=VALUE argument at the first '='."""
    key, sep, value = entry.partition("=")
    if not sep:
        raise _click.BadParameter(f"expected KEY=VALUE, got {entry!r}", param_hint="ENTRY")
    return key, value


def _load_properties(
    settings: config.Settings,
    entries: _typing.Iterable[str],
) -> properties.Properties:
    """Apply entries to new Properties, failing on the first error."""
    props = settings.new_properties()
    for entry in entries:
        key, value = _parse_entry(entry)
        try:
            props.set(key, value)
        except errors.KeyTreeError as e:
            raise _click.ClickException(str(e)) from None
    return props


def _should_use_color(cli_flag: bool | None, configured: bool | None) -> tuple[bool, bool]:
    """Determine whether to use color output.

    Priority:
    1. CLI flag (--color / --no-color) if specified
    2. output.color setting (KEYTREE_OUTPUT__COLOR)
    3. NO_COLOR env var (if set, disable color) - standard convention
    4. Auto-detect: color if stdout is a TTY

    Returns:
        Tuple of (color_enabled, force_color).
        force_color is True when color was explicitly requested (not auto-detected).
    """
    for explicit in (cli_flag, configured):
        if explicit is not None:
            return (explicit, explicit)

    if _os.environ.get("NO_COLOR") is not None:
        return (False, False)

    return (_sys.stdout.isatty(), False)


def _print_highlighted(text: str, lexer: str, *, color: bool, force_color: bool) -> None:
    """Print text, with rich syntax highlighting when color is on."""
    if not color:
        _click.echo(text)
        return

    import rich.console as _rich_console
    import rich.syntax as _rich_syntax

    # When forcing color (explicit --color flag):
    # - force_terminal=True: output color even when piped
    # - no_color=False: override NO_COLOR env var
    console = _rich_console.Console(
        force_terminal=force_color,
        no_color=False if force_color else None,
        color_system="truecolor" if force_color else "auto",
    )
    console.print(_rich_syntax.Syntax(text, lexer, theme="monokai", background_color="default"))


# =============================================================================
# Command group
# =============================================================================


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(keytree.__version__, "-v", "--version", prog_name="keytree")
@_click.option(
    "--log-level",
    type=_click.Choice(constants.LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (overrides KEYTREE_LOGGING__LEVEL)",
)
@_click.pass_context
def cli(ctx: _click.Context, log_level: str | None) -> None:
    """keytree - hierarchical key-path store for flattened configuration.

    Keys use dots for map fields and brackets for array positions,
    for example: servers[0].host
    """
    try:
        settings = config.Settings()
    except _pydantic.ValidationError as e:
        raise _click.ClickException(f"Invalid configuration:\n{e}") from None

    logging.setup_logging(
        log_level or settings.logging.level,
        rich_tracebacks=settings.logging.rich_tracebacks,
    )
    ctx.obj = settings


# =============================================================================
# Commands
# =============================================================================


@cli.command()
@_click.argument("key")
@_click.option("--json", "as_json", is_flag=True, help="Output segments as JSON")
def split(key: str, as_json: bool) -> None:
    """Parse KEY and print its segments."""
    try:
        segments = storage.split_path(key)
    except errors.InvalidKeySyntaxError as e:
        raise _click.ClickException(str(e)) from None

    if as_json:
        payload = [{"kind": s.kind.value, "element": s.element} for s in segments]
        _click.echo(_json.dumps(payload, indent=2))
        return
    for segment in segments:
        _click.echo(f"{segment.kind.value}\t{segment.element}")


@cli.command()
@_entries_argument
@_click.pass_obj
def check(settings: config.Settings, entries: tuple[str, ...]) -> None:
    """Apply entries and report the first conflict or syntax error."""
    props = _load_properties(settings, entries)
    _click.echo(f"ok: {len(props)} keys")


@cli.command()
@_entries_argument
@_click.option(
    "--format",
    "output_format",
    type=_click.Choice(["plain", "json", "yaml"]),
    default=None,
    help="Output format (default: KEYTREE_OUTPUT__FORMAT or plain)",
)
@_click.option(
    "--color/--no-color",
    default=None,
    help="Force color on/off (default: auto-detect TTY, respects NO_COLOR)",
)
@_click.pass_obj
def dump(
    settings: config.Settings,
    entries: tuple[str, ...],
    output_format: str | None,
    color: bool | None,
) -> None:
    """Apply entries and print the resulting flat map, sorted by key."""
    props = _load_properties(settings, entries)
    data = {key: props.get(key) for key in props.keys()}
    output_format = output_format or settings.output.format

    if output_format == "json":
        _click.echo(_json.dumps(data, indent=2))
    elif output_format == "yaml":
        color_enabled, force_color = _should_use_color(color, settings.output.color)
        text = _yaml.safe_dump(data, default_flow_style=False, sort_keys=True).rstrip("\n")
        _print_highlighted(text, "yaml", color=color_enabled, force_color=force_color)
    else:
        for key, value in data.items():
            _click.echo(f"{key}={value}")


@cli.command()
@_click.argument("key")
@_entries_argument
@_click.pass_context
def has(ctx: _click.Context, key: str, entries: tuple[str, ...]) -> None:
    """Print whether KEY exists; exits 1 when it does not."""
    found = _load_properties(ctx.obj, entries).has(key)
    _click.echo("true" if found else "false")
    ctx.exit(0 if found else 1)


@cli.command(name="subkeys")
@_click.argument("prefix")
@_entries_argument
@_click.pass_obj
def sub_keys(settings: config.Settings, prefix: str, entries: tuple[str, ...]) -> None:
    """Print the sorted child keys of PREFIX ('' for the root)."""
    props = _load_properties(settings, entries)
    try:
        children = props.sub_keys(prefix)
    except errors.KeyTreeError as e:
        raise _click.ClickException(str(e)) from None
    for child in children:
        _click.echo(child)


@cli.command()
@_click.argument("text")
@_entries_argument
@_click.pass_obj
def resolve(settings: config.Settings, text: str, entries: tuple[str, ...]) -> None:
    """Expand ${key} and ${key:=default} references in TEXT."""
    props = _load_properties(settings, entries)
    try:
        _click.echo(props.resolve(text))
    except errors.ResolveError as e:
        raise _click.ClickException(str(e)) from None


@cli.command(name="config")
@_click.pass_obj
def show_config(settings: config.Settings) -> None:
    """Print the effective settings as JSON."""
    _click.echo(_json.dumps(settings.model_dump(mode="json"), indent=2))


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

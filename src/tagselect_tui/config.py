"""Configuration resolution for tagselect-tui.

Widget options are resolved in priority order (highest to lowest):
1. command-line flags (--max-tags, --min-tags, --no-new, ...)
2. ~/.config/tagselect-tui/config.toml -> [tag_select] section
3. built-in defaults
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from tagselect_tui.errors import ConfigurationError
from tagselect_tui.host import HostOption, HostSelect
from tagselect_tui.models import TagSelectOptions
from tagselect_tui.suggestions import propose_tag_value

_CONFIG_PATH = Path.home() / ".config" / "tagselect-tui" / "config.toml"

_OPTIONS_SECTION = "tag_select"


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib

        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except Exception:
        return {}


def _format_toml_value(value: Any) -> str:
    """Render a scalar as a TOML value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _save_config_dict(data: dict) -> None:
    """Write a config dict to config.toml, preserving nested sections.

    Top-level scalars are written first, followed by any nested dict
    sections (e.g. ``[tag_select]``).  Writing them in this order keeps
    section keys intact when only a scalar like ``theme`` is updated.
    """
    _CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    lines: list[str] = []
    sections: dict[str, dict] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            sections[key] = value
        else:
            lines.append(f"{key} = {_format_toml_value(value)}")
    for section_name, section_dict in sections.items():
        lines.append(f"\n[{section_name}]")
        for k, v in section_dict.items():
            lines.append(f"{k} = {_format_toml_value(v)}")
    _CONFIG_PATH.write_text("\n".join(lines) + "\n", encoding="utf-8")


def load_theme() -> str | None:
    """Return the saved theme name, or None if not set."""
    return _load_config_dict().get("theme")


def save_theme(theme: str) -> None:
    """Persist the selected theme to config.toml.

    Args:
        theme: Theme name to save (e.g. 'nord').
    """
    data = _load_config_dict()
    data["theme"] = theme
    _save_config_dict(data)


def load_option_overrides() -> dict[str, Any]:
    """Load widget options from the ``[tag_select]`` section of config.toml.

    Example config.toml::

        [tag_select]
        max_tags = 5
        allow_new = false
        create_prompt_template = "Add '{tag}'"

    Returns:
        The raw section as a dict, or an empty dict if there is none.
    """
    section = _load_config_dict().get(_OPTIONS_SECTION, {})
    return dict(section) if isinstance(section, dict) else {}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace.
    """
    parser = argparse.ArgumentParser(
        prog="tagselect-tui",
        description="Pick tags from a list of options in the terminal, or create new ones.",
    )
    parser.add_argument(
        "labels",
        nargs="*",
        help="Option labels to offer. Values are derived from the labels.",
    )
    parser.add_argument(
        "-o",
        "--options-file",
        help="File with one option per line, as 'label' or 'value|label'.",
        default=None,
    )
    parser.add_argument(
        "-s",
        "--select",
        action="append",
        default=[],
        metavar="VALUE",
        help="Value to pre-select. May be repeated.",
    )
    parser.add_argument("--max-tags", type=int, default=None, help="Maximum number of tags.")
    parser.add_argument("--min-tags", type=int, default=None, help="Minimum number of tags.")
    parser.add_argument(
        "--no-new",
        dest="allow_new",
        action="store_false",
        default=None,
        help="Do not allow creating new tags.",
    )
    parser.add_argument("--placeholder", default=None, help="Placeholder for the query field.")
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO).")
    parser.add_argument("--log-file", default=None, help="Log file path.")
    return parser.parse_args(argv)


def resolve_options(args: argparse.Namespace | None = None) -> TagSelectOptions:
    """Build validated widget options from config.toml and CLI flags.

    Args:
        args: Parsed CLI arguments.  Flags left unset fall back to the
            config file, then to the defaults.

    Returns:
        The resolved options.

    Raises:
        ConfigurationError: If the combined options are invalid.
    """
    data = load_option_overrides()
    if args is not None:
        for name in ("max_tags", "min_tags", "allow_new", "placeholder"):
            value = getattr(args, name, None)
            if value is not None:
                data[name] = value
    return TagSelectOptions.from_mapping(data)


def _parse_option_line(line: str) -> HostOption | None:
    """Parse 'value|label' or 'label' into a host option; blank lines and comments give None."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    if "|" in line:
        value, label = (part.strip() for part in line.split("|", 1))
        if not value:
            value = propose_tag_value(label)
        return HostOption(value, label or value)
    return HostOption(propose_tag_value(line), line)


def load_host(args: argparse.Namespace) -> HostSelect:
    """Build the host select control the demo application edits.

    Args:
        args: Parsed CLI arguments.

    Returns:
        A multi-select host with options from --options-file and the
        positional labels, and the --select values pre-selected.

    Raises:
        ConfigurationError: If the options file cannot be read.
    """
    host = HostSelect(name="tags")
    lines: list[str] = []
    if args.options_file:
        path = Path(args.options_file).expanduser()
        try:
            lines.extend(path.read_text(encoding="utf-8").splitlines())
        except OSError as exc:
            raise ConfigurationError(f"Cannot read options file {path}: {exc}") from exc
    lines.extend(args.labels)

    for line in lines:
        option = _parse_option_line(line)
        if option is not None and host.find(option.value) is None:
            host.options.append(option)

    for value in args.select:
        host.set_selected(value, True)
    return host

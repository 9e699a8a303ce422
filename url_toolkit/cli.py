"""Minimal CLI entrypoint for url-toolkit."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any
from typing import Sequence
from uuid import uuid4

from core.config import UrlConfig
from core.models import BareEntry
from core.structured_logging import emit_json_event
from quality.encoding import sanitize_path_component
from urls.canonical import canonicalize_url, merge_urls
from urls.components import UrlComponents


PROJECT_ROOT = Path(__file__).resolve().parent.parent
SCHEMAS_DIR = PROJECT_ROOT / "schemas"


def _resolve_command_run_id(args: argparse.Namespace) -> str:
    """Resolve run_id from CLI args or create one for command-level tracing."""
    explicit = getattr(args, "run_id", None)
    if explicit:
        return str(explicit)
    return str(uuid4())


def _emit_cli_event(
    event_type: str,
    *,
    run_id: str,
    command: str,
    **payload: Any,
) -> str:
    """Emit one structured CLI event line with standard fields."""
    return emit_json_event(
        event_type=event_type,
        run_id=run_id,
        command=command,
        **payload,
    )


def _validate_schema_file(path: Path) -> None:
    """Validate that a JSON schema file is well-formed and has required top-level keys."""
    data = json.loads(path.read_text(encoding="utf-8"))
    required_keys = {"$schema", "type", "properties", "required"}
    missing = required_keys.difference(data)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ValueError(f"{path.name} missing required schema keys: {missing_str}")


def _cmd_validate_schemas(args: argparse.Namespace) -> int:
    """Validate schema files for basic structural correctness."""
    components_schema = SCHEMAS_DIR / "url_components.schema.json"
    if not components_schema.exists():
        raise FileNotFoundError(f"Schema file not found: {components_schema}")
    _validate_schema_file(components_schema)
    _emit_cli_event(
        "cli_validate_schemas_completed",
        run_id=_resolve_command_run_id(args),
        command="validate-schemas",
        schema_files=[str(components_schema)],
    )
    return 0


def _cmd_normalize(args: argparse.Namespace) -> int:
    """Print the canonical form of one URL."""
    result = canonicalize_url(args.url, query_separator=args.separator)
    _emit_cli_event(
        "cli_normalize_completed",
        run_id=_resolve_command_run_id(args),
        command="normalize",
        url=args.url,
        result=result,
    )
    return 0


def _cmd_merge(args: argparse.Namespace) -> int:
    """Overlay URLs on a base URL."""
    result = merge_urls(args.base, *args.overlays)
    _emit_cli_event(
        "cli_merge_completed",
        run_id=_resolve_command_run_id(args),
        command="merge",
        base=args.base,
        overlays=list(args.overlays),
        result=result,
    )
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    """Show the components and query parameters of one URL."""
    components = UrlComponents(args.url, query_separator=args.separator)
    parameters = [
        {"key": None, "value": entry.token} if isinstance(entry, BareEntry)
        else {"key": entry.key, "value": entry.value}
        for entry in components.query_string.get_parameters()
    ]
    _emit_cli_event(
        "cli_inspect_completed",
        run_id=_resolve_command_run_id(args),
        command="inspect",
        url=args.url,
        components=components.as_dict(),
        parameters=parameters,
        result=components.build(),
    )
    return 0


def _cmd_sanitize(args: argparse.Namespace) -> int:
    """Turn free text into a path slug."""
    _emit_cli_event(
        "cli_sanitize_completed",
        run_id=_resolve_command_run_id(args),
        command="sanitize",
        text=args.text,
        result=sanitize_path_component(args.text),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser for the url-toolkit CLI."""
    parser = argparse.ArgumentParser(
        prog="url-toolkit",
        description="Parse, normalize, and rebuild scraped URLs",
    )
    parser.add_argument("--version", action="version", version="url-toolkit 0.1.0")
    parser.add_argument("--run-id", help="Optional explicit run ID for logging")

    subparsers = parser.add_subparsers(dest="command")

    validate_parser = subparsers.add_parser(
        "validate-schemas",
        help="Validate JSON schemas used by contract tests",
    )
    validate_parser.set_defaults(func=_cmd_validate_schemas)

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Print the canonical form of a URL",
    )
    normalize_parser.add_argument("url", help="URL to normalize")
    normalize_parser.add_argument(
        "--separator",
        default=UrlConfig.DEFAULT_QUERY_SEPARATOR,
        help="Query parameter separator",
    )
    normalize_parser.set_defaults(func=_cmd_normalize)

    merge_parser = subparsers.add_parser(
        "merge",
        help="Overlay one or more URLs on a base URL",
    )
    merge_parser.add_argument("base", help="Base URL")
    merge_parser.add_argument("overlays", nargs="+", help="URLs applied in order")
    merge_parser.set_defaults(func=_cmd_merge)

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Show URL components and query parameters",
    )
    inspect_parser.add_argument("url", help="URL to inspect")
    inspect_parser.add_argument(
        "--separator",
        default=UrlConfig.DEFAULT_QUERY_SEPARATOR,
        help="Query parameter separator",
    )
    inspect_parser.set_defaults(func=_cmd_inspect)

    sanitize_parser = subparsers.add_parser(
        "sanitize",
        help="Turn text into a URL path slug",
    )
    sanitize_parser.add_argument("text", help="Text to sanitize")
    sanitize_parser.set_defaults(func=_cmd_sanitize)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Execute CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return int(args.func(args))
    except Exception as exc:
        _emit_cli_event(
            "cli_error",
            run_id=_resolve_command_run_id(args),
            command=str(getattr(args, "command", "unknown")),
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return 1


def cli() -> None:
    """Console-script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    raise SystemExit(main())

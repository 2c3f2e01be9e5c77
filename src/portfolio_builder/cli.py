from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from portfolio_builder.models import PortfolioState, default_portfolio
from portfolio_builder.services.renderer import render_portfolio
from portfolio_builder.utils.export import DEFAULT_EXPORT_FILENAME, export_portfolio


def _load_state(path: Path) -> PortfolioState:
    """Read a portfolio JSON file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not a JSON object.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Portfolio JSON must be an object")
    return PortfolioState.from_dict(data)


def _cmd_render(args: argparse.Namespace) -> int:
    try:
        state = _load_state(Path(args.input)) if args.input else default_portfolio()
    except (OSError, ValueError) as exc:
        print(f"❌ Could not read portfolio: {exc}", file=sys.stderr)
        return 1

    if args.stdout:
        sys.stdout.write(render_portfolio(state))
        return 0

    output = Path(args.output)
    try:
        path = export_portfolio(state, output.parent, filename=output.name)
    except OSError as exc:
        print(f"❌ Could not write {output}: {exc}", file=sys.stderr)
        return 1
    print(f"✅ Wrote {path}")
    return 0


def _cmd_default(args: argparse.Namespace) -> int:
    print(json.dumps(default_portfolio().to_dict(), indent=2))
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    from portfolio_builder.api.main import main as serve

    serve()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-builder",
        description="Render a portfolio description into a standalone HTML page.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a portfolio JSON file to HTML.")
    render.add_argument(
        "input",
        nargs="?",
        help="Portfolio JSON file. Uses the starter portfolio when omitted.",
    )
    render.add_argument(
        "-o",
        "--output",
        default=DEFAULT_EXPORT_FILENAME,
        help=f"Output file (default: {DEFAULT_EXPORT_FILENAME}).",
    )
    render.add_argument("--stdout", action="store_true", help="Print HTML instead of writing.")
    render.set_defaults(func=_cmd_render)

    default = sub.add_parser("default", help="Print the starter portfolio JSON.")
    default.set_defaults(func=_cmd_default)

    serve = sub.add_parser("serve", help="Start the preview/export API server.")
    serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

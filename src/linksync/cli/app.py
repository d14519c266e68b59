"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from linksync.contracts.exceptions import (
    AuthenticationError,
    CatalogLoadError,
    ConfigError,
    ServiceError,
)


def main(argv: list[str] | None = None) -> int:
    import linksync.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        result = cli.asyncio.run(cli._run_sync(args))
    except (ConfigError, CatalogLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ServiceError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if not result.outcome.ok:
        print(f"error: {len(result.outcome.errors)} link operation(s) failed", file=sys.stderr)
        return 5
    return 0


__all__ = ["main"]

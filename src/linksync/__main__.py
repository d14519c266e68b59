"""Module entrypoint for ``python -m linksync``."""

from linksync.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

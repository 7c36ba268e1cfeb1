"""Module entry point for ``python -m classperf`` and the ``classperf`` script."""

from __future__ import annotations

import sys

CLI_DEPENDENCIES = frozenset({"typer", "rich"})


def main(argv: list[str] | None = None) -> None:
    """Run the command line on ``argv`` (``sys.argv[1:]`` when omitted).

    The core API only needs numpy; a missing CLI dependency is reported as a
    one-line hint instead of a traceback.
    """
    try:
        from .cli import app
    except ModuleNotFoundError as exc:
        if (exc.name or "").partition(".")[0] not in CLI_DEPENDENCIES:
            raise
        sys.stderr.write(
            f"classperf: the command line needs the `{exc.name}' package; "
            "reinstall with: pip install -U classperf\n"
        )
        raise SystemExit(1) from exc

    app(args=argv, prog_name="classperf")


if __name__ == "__main__":
    main()

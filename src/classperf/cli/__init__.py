"""classperf CLI package."""

from __future__ import annotations

from ._app import (
    app as app,  # noqa: F401
)
from ._app import (
    console as console,  # noqa: F401
)
from ._app import (
    err_console as err_console,  # noqa: F401
)
from ._theme import (
    CP_THEME as CP_THEME,  # noqa: F401
)
from ._theme import (
    PALETTE as PALETTE,  # noqa: F401
)


def _register_commands() -> None:
    """Register command modules in desired help-panel order.

    The import order determines the panel order shown by ``classperf --help``.
    """
    # isort: off
    from . import _targets  # noqa: F401  Curves, Areas, Optimal thresholds
    from . import _summary  # noqa: F401  Reports
    # isort: on


_register_commands()

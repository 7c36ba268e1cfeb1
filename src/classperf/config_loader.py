"""``classperf.toml`` configuration loader.

Parses ``classperf.toml`` into structured defaults for the ``classperf``
command line. Flags given on the command line are merged on top.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redefine]

DEFAULT_CONFIG_NAME = "classperf.toml"


@dataclass(frozen=True)
class OutputSectionConfig:
    """Table rendering options from ``[output]``."""

    print_header: bool = False
    print_thresholds: bool = False


@dataclass(frozen=True)
class CurvesSectionConfig:
    """Curve construction options from ``[curves]``."""

    normalize_precision: bool = False


@dataclass(frozen=True)
class LoggingSectionConfig:
    """Verbosity from ``[logging]``."""

    verbose: int = 0


@dataclass(frozen=True)
class EvaluationConfig:
    """Top-level parsed representation of ``classperf.toml``."""

    output: OutputSectionConfig = field(default_factory=OutputSectionConfig)
    curves: CurvesSectionConfig = field(default_factory=CurvesSectionConfig)
    logging: LoggingSectionConfig = field(default_factory=LoggingSectionConfig)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    def merged(
        self,
        *,
        print_header: bool = False,
        print_thresholds: bool = False,
        normalize_precision: bool = False,
        verbose: int = 0,
    ) -> EvaluationConfig:
        """Return a copy with command-line flags switched on over file values."""
        return replace(
            self,
            output=OutputSectionConfig(
                print_header=self.output.print_header or print_header,
                print_thresholds=self.output.print_thresholds or print_thresholds,
            ),
            curves=CurvesSectionConfig(
                normalize_precision=self.curves.normalize_precision or normalize_precision,
            ),
            logging=LoggingSectionConfig(verbose=max(self.logging.verbose, verbose)),
        )


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, dict):
        return {}
    return value


def load_config(path: str | Path | None = None) -> EvaluationConfig:
    """Load and parse a ``classperf.toml`` file.

    Parameters
    ----------
    path:
        Path to the TOML configuration file. When omitted,
        ``classperf.toml`` in the current directory is used if it exists,
        otherwise defaults are returned.

    Raises
    ------
    FileNotFoundError
        If an explicitly given configuration file does not exist.
    ValueError
        If a value has the wrong type.
    """
    if path is None:
        config_path = Path(DEFAULT_CONFIG_NAME)
        if not config_path.exists():
            return EvaluationConfig()
    else:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("rb") as f:
        raw = tomllib.load(f)

    output_raw = _section(raw, "output")
    curves_raw = _section(raw, "curves")
    logging_raw = _section(raw, "logging")

    verbose = logging_raw.get("verbose", 0)
    if isinstance(verbose, bool) or not isinstance(verbose, int) or verbose < 0:
        raise ValueError(f"logging.verbose must be a non-negative integer, got {verbose!r}")

    return EvaluationConfig(
        output=OutputSectionConfig(
            print_header=bool(output_raw.get("print_header", False)),
            print_thresholds=bool(output_raw.get("print_thresholds", False)),
        ),
        curves=CurvesSectionConfig(
            normalize_precision=bool(curves_raw.get("normalize_precision", False)),
        ),
        logging=LoggingSectionConfig(verbose=verbose),
        raw=raw,
    )

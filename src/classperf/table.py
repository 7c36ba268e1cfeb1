"""Read prediction tables and render result tables as text."""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import BinaryIO, TextIO

import numpy as np

from .errors import ValidationError
from .types import Dataset

logger = logging.getLogger(__name__)

PREDICTION_COLUMNS = ("prediction", "predictions")
LABEL_COLUMNS = ("label", "labels")


def _parse_header(fields: list[str]) -> tuple[int, int]:
    if len(fields) != 2:
        raise ValidationError(
            f"invalid predictions table: header must have exactly two columns, got {len(fields)}"
        )
    i_prediction = next((i for i, name in enumerate(fields) if name in PREDICTION_COLUMNS), -1)
    i_label = next((i for i, name in enumerate(fields) if name in LABEL_COLUMNS), -1)
    if i_prediction == -1:
        raise ValidationError("no column called `predictions' found")
    if i_label == -1:
        raise ValidationError("no column called `labels' found")
    return i_prediction, i_label


def _numbered_lines(stream: Iterable[str] | Iterable[bytes]) -> Iterator[tuple[int, str]]:
    """Yield ``(lineno, text)`` pairs, decoding byte lines as UTF-8."""
    lineno = 0
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except UnicodeDecodeError as exc:
            raise ValidationError(f"line {lineno + 1}: table is not valid UTF-8") from exc
        lineno += 1
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ValidationError(f"line {lineno}: table is not valid UTF-8") from exc
        yield lineno, line


def read_predictions(stream: Iterable[str] | Iterable[bytes]) -> Dataset:
    """Parse a whitespace-delimited ``predictions``/``labels`` table.

    The header names the two columns in either order. Blank lines are
    skipped; every other row must hold a float prediction and an integer
    label equal to 0 or 1. Byte streams are decoded as UTF-8.
    """
    columns: tuple[int, int] | None = None
    values: list[float] = []
    labels: list[int] = []

    for lineno, line in _numbered_lines(stream):
        fields = line.split()
        if not fields:
            continue
        if columns is None:
            columns = _parse_header(fields)
            continue
        if len(fields) != 2:
            raise ValidationError(f"line {lineno}: expected 2 fields, got {len(fields)}")
        i_prediction, i_label = columns
        try:
            label = int(fields[i_label])
        except ValueError as exc:
            raise ValidationError(f"line {lineno}: invalid label {fields[i_label]!r}") from exc
        try:
            value = float(fields[i_prediction])
        except ValueError as exc:
            raise ValidationError(
                f"line {lineno}: invalid prediction {fields[i_prediction]!r}"
            ) from exc
        if math.isnan(value):
            raise ValidationError(f"line {lineno}: prediction must not be NaN")
        if label not in (0, 1):
            raise ValidationError(f"line {lineno}: invalid label `{label}' observed")
        values.append(value)
        labels.append(label)

    if not values:
        raise ValidationError("table is empty")
    return Dataset(scores=np.asarray(values), labels=np.asarray(labels))


def load_predictions(
    path: str | Path | None = None, *, stdin: TextIO | BinaryIO | None = None
) -> Dataset:
    """Read a prediction table from ``path``, or from stdin for ``None``/``-``.

    Files and the process stdin are read as bytes so that undecodable input
    is reported with its line number.
    """
    if path is None or str(path) == "-":
        logger.info("Reading predictions from stdin")
        if stdin is None:
            stdin = getattr(sys.stdin, "buffer", sys.stdin)
        return read_predictions(stdin)

    source = Path(path)
    logger.info("Reading predictions from `%s'", source)
    with source.open("rb") as handle:
        dataset = read_predictions(handle)
    logger.info("Read %d predictions from `%s'", len(dataset), source)
    return dataset


def format_table(
    columns: Sequence[Sequence[float] | np.ndarray],
    names: Sequence[str],
    *,
    print_header: bool = False,
) -> Iterator[str]:
    """Yield whitespace-separated rows of ``columns``, optionally headed by ``names``."""
    if print_header:
        yield " ".join(names)
    for row in zip(*columns):
        yield " ".join(f"{float(value):f}" for value in row)


def format_point(values: dict[str, float], *, print_header: bool = False) -> str:
    """Render one operating point, as ``name=value`` pairs when a header is wanted."""
    if print_header:
        return " ".join(f"{name}={float(value):f}" for name, value in values.items())
    return " ".join(f"{float(value):f}" for value in values.values())

"""Read swag request sheet values from exported ``ValueRange`` JSON files."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from .schema import ValueRange

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

log = getLogger(__name__)


def load_value_range(path: Path) -> ValueRange:
    value_range = ValueRange.model_validate_json(path.read_text(encoding="utf-8"))
    if value_range.major_dimension != "ROWS":
        raise ValueError(f"{path}: expected a ROWS value range, got {value_range.major_dimension}")
    return value_range


@dataclass(frozen=True, slots=True)
class ValueRangeFiles:
    """One exported file per sheet, read in the order given."""

    paths: tuple[Path, ...]

    @classmethod
    def of(cls, *paths: str | Path) -> ValueRangeFiles:
        return cls(paths=tuple(Path(path) for path in paths))

    def __call__(self) -> Iterator[Sequence[Sequence[str]]]:
        for path in self.paths:
            log.debug(f"Reading sheet values from {path}")
            yield load_value_range(path).values

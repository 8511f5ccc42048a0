"""Raw interval samples and their on-disk JSONL representation.

Each line of a sample file is one JSON object::

    {"kind": "sleep", "start": "2026-02-13T23:10:00", "end": "2026-02-14T06:40:00", "quantity": 1}

``quantity`` is minutes for exercise samples, a stage code for sleep samples
and a valence in [0, 1] for mood samples.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Iterator

from healthstats.exceptions import MalformedSampleError
from healthstats.log import get_logger

logger = get_logger(__name__)


class SampleKind(str, Enum):
    """Which statistic a sample feeds."""

    EXERCISE = "exercise"
    SLEEP = "sleep"
    MOOD = "mood"


@dataclass(frozen=True)
class IntervalSample:
    """One raw reading covering ``[start, end]``."""

    start: datetime
    end: datetime
    quantity: float = 0.0

    @property
    def duration_min(self) -> float:
        return (self.end - self.start).total_seconds() / 60.0

    @property
    def is_malformed(self) -> bool:
        """True when the interval runs backwards."""
        return self.end < self.start

    def to_local(self) -> IntervalSample:
        """Return a copy with both instants as aware local datetimes."""
        return IntervalSample(to_local(self.start), to_local(self.end), self.quantity)


def to_local(moment: datetime) -> datetime:
    """Convert *moment* to an aware datetime in the local timezone.

    Naive datetimes are taken to already be local wall-clock times.
    """
    return moment.astimezone()


def parse_sample(record: dict[str, Any]) -> tuple[SampleKind, IntervalSample]:
    """Parse one decoded JSON record into ``(kind, sample)``.

    Raises:
        MalformedSampleError: if a field is missing or has the wrong type.
    """
    try:
        kind = SampleKind(record["kind"])
        start = datetime.fromisoformat(record["start"])
        end = datetime.fromisoformat(record["end"])
        quantity = float(record.get("quantity", 0.0))
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedSampleError(str(e), record) from e
    return kind, IntervalSample(start=start, end=end, quantity=quantity)


def sample_to_record(kind: SampleKind, sample: IntervalSample) -> dict[str, Any]:
    return {
        "kind": kind.value,
        "start": sample.start.isoformat(),
        "end": sample.end.isoformat(),
        "quantity": sample.quantity,
    }


def iter_sample_file(path: str | Path) -> Iterator[tuple[SampleKind, IntervalSample]]:
    """Yield ``(kind, sample)`` pairs from a JSONL sample file.

    Blank lines are ignored. Lines that are not valid JSON or do not parse
    as a sample are logged and skipped.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue

            try:
                entry = json.loads(line)
            except json.JSONDecodeError:
                logger.warning("sample_line_invalid_json", path=str(path), line=line_num)
                continue

            try:
                yield parse_sample(entry)
            except MalformedSampleError as e:
                logger.warning("sample_line_malformed", path=str(path), line=line_num, error=e.message)


def write_sample_file(
    path: str | Path,
    samples: list[tuple[SampleKind, IntervalSample]],
) -> Path:
    """Write ``(kind, sample)`` pairs as JSONL to *path*."""
    outpath = Path(path)
    outpath.parent.mkdir(parents=True, exist_ok=True)
    with open(outpath, "w") as f:
        for kind, sample in samples:
            f.write(json.dumps(sample_to_record(kind, sample)) + "\n")
    return outpath

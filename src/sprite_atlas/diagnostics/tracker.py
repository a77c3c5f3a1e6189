"""Profiling of descriptor reads and writes."""

from __future__ import annotations

import csv
import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from sprite_atlas.data import Atlas


@dataclass
class TimingRecord:
    """Timing metrics for a single read or write."""

    operation: str
    path: str
    pages: int
    regions: int
    elapsed_ms: float


@dataclass
class DiagnosticsTracker:
    """Collects timing records and exports them on request."""

    enable_profiling: bool = False
    profile_output: Optional[Path] = None
    records: List[TimingRecord] = field(default_factory=list)

    def track(self, operation: str, path: Path, atlas: Atlas, elapsed_s: float) -> None:
        if not self.enable_profiling:
            return
        self.records.append(
            TimingRecord(
                operation=operation,
                path=str(path),
                pages=atlas.page_count,
                regions=sum(len(page.regions) for page in atlas.pages),
                elapsed_ms=elapsed_s * 1000.0,
            )
        )

    def export(self) -> None:
        """Export timing records to JSON and a sibling CSV if configured."""

        if not self.records or not self.profile_output:
            return

        self.profile_output.parent.mkdir(parents=True, exist_ok=True)
        payload = [record.__dict__ for record in self.records]
        self.profile_output.write_text(json.dumps(payload, indent=2))

        csv_path = self.profile_output.with_suffix(".csv")
        with csv_path.open("w", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=list(self.records[0].__dict__.keys()))
            writer.writeheader()
            for record in self.records:
                writer.writerow(record.__dict__)


class Timer:
    """Simple context timer for profiling blocks."""

    def __init__(self) -> None:
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, *_exc: object) -> None:
        self.elapsed = time.perf_counter() - self.start

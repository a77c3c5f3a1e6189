"""Read/write profiling."""

from sprite_atlas.diagnostics.tracker import DiagnosticsTracker, Timer, TimingRecord

__all__ = ["DiagnosticsTracker", "Timer", "TimingRecord"]

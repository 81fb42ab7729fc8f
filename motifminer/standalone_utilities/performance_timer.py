"""Timing of consecutive stages of a run."""
import time

import numpy as np
import pandas as pd


class PerformanceTimer:
    """Records named timepoints. Time between consecutive timepoints is attributed to the
    transition between them, and ``report`` tabulates the transitions in first-seen order.
    """
    def __init__(self):
        self.times: dict[tuple[str, str], list[float]] = {}
        self.previous_time: float | None = None
        self.previous_message: str | None = None
        self.start_time: float | None = None

    def record_timepoint(self, message: str) -> None:
        now = time.perf_counter()
        if self.previous_time is None:
            self.start_time = now
        else:
            self.times.setdefault((self.previous_message, message), []).append(now - self.previous_time)
        self.previous_time = now
        self.previous_message = message

    def elapsed(self) -> float:
        if self.start_time is None or self.previous_time is None:
            return 0.0
        return self.previous_time - self.start_time

    def report(self) -> pd.DataFrame:
        all_totals = sum(np.sum(durations) for durations in self.times.values())
        records = []
        for (start, end), durations in self.times.items():
            total = float(np.sum(durations))
            records.append({
                'from': start,
                'to': end,
                'total time spent': total,
                'frequency': len(durations),
                'fraction': total / all_totals if all_totals > 0 else 0.0,
            })
        return pd.DataFrame(records, columns=['from', 'to', 'total time spent', 'frequency', 'fraction'])

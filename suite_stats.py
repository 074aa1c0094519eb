# suite_stats.py
import time
from collections import OrderedDict
from typing import Dict, Iterable

from run_log import Level, RunLog, Tier, iso_timestamp

CORE_COUNTERS = ("passed", "failed", "warnings", "slow_ops")


class SuiteStats:
    """
    Counters for one suite run. Created fresh per run and handed to the
    tests through the suite fixture, so nothing leaks between runs.
    """

    def __init__(self, categories: Iterable[str] = ()):
        self.started = time.perf_counter()
        self.counts: Dict[str, int] = OrderedDict((name, 0) for name in CORE_COUNTERS)
        for name in categories:
            self.counts.setdefault(name, 0)

    def incr(self, name: str, n: int = 1) -> int:
        self.counts[name] = self.counts.get(name, 0) + n
        return self.counts[name]

    def record_pass(self):
        return self.incr("passed")

    def record_fail(self):
        return self.incr("failed")

    def record_warning(self):
        return self.incr("warnings")

    def record_slow_op(self):
        return self.incr("slow_ops")

    def __getitem__(self, name: str) -> int:
        return self.counts[name]

    @property
    def passed(self) -> int:
        return self.counts["passed"]

    @property
    def failed(self) -> int:
        return self.counts["failed"]

    @property
    def warnings(self) -> int:
        return self.counts["warnings"]

    @property
    def slow_ops(self) -> int:
        return self.counts["slow_ops"]

    def duration_ms(self) -> int:
        return int((time.perf_counter() - self.started) * 1000)

    def as_dict(self) -> Dict[str, int]:
        return dict(self.counts)

    def completion_line(self, feature_name: str, duration_ms: int) -> str:
        pairs = " ".join(f"{name}={value}" for name, value in self.counts.items())
        return f"[{iso_timestamp()}] [{feature_name}] COMPLETED - {pairs} duration_ms={duration_ms}"

    def flush(self, run_log: RunLog) -> None:
        duration = self.duration_ms()
        rule = "=" * 60
        run_log.write("", Level.SUMMARY)
        run_log.write(rule, Level.SUMMARY)
        run_log.write(f"{run_log.display_name} - FINAL STATISTICS", Level.SUMMARY)
        run_log.write(f"duration_ms: {duration}", Level.SUMMARY)
        for name, value in self.counts.items():
            run_log.write(f"{name}: {value}", Level.SUMMARY)
        run_log.write(rule, Level.SUMMARY)
        run_log.append(Tier.GLOBAL, self.completion_line(run_log.identity.feature_name, duration))

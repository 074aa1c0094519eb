# suite_run.py
import os
import platform
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Optional, TypeVar, Union

import settings
from log_rotation import rotate_run_logs
from run_log import Level, LogFileSet, RunIdentity, RunLog, Tag
from suite_stats import SuiteStats
from timing import time_action

T = TypeVar("T")


class SuiteRun:
    """One execution of a feature's test module: identity, log tiers and stats."""

    def __init__(
        self,
        feature_name: str,
        display_name: str,
        categories: Iterable[str] = (),
        root: Union[str, Path, None] = None,
        keep: Optional[int] = None,
        slow_ms: Optional[int] = None,
        summary_max_bytes: Optional[int] = None,
        summary_backups: Optional[int] = None,
    ):
        self.identity = RunIdentity.new(feature_name)
        self.files = LogFileSet.for_run(root or settings.TEST_LOG_DIR, self.identity)
        self.log = RunLog(
            self.identity,
            self.files,
            display_name,
            summary_max_bytes=settings.SUITE_SUMMARY_MAX_BYTES if summary_max_bytes is None else summary_max_bytes,
            summary_backups=settings.SUITE_SUMMARY_BACKUPS if summary_backups is None else summary_backups,
        )
        self.stats = SuiteStats(categories)
        self.keep = settings.SUITE_LOG_KEEP if keep is None else keep
        self.slow_ms = slow_ms

    @property
    def feature_name(self) -> str:
        return self.identity.feature_name

    @property
    def display_name(self) -> str:
        return self.log.display_name

    def start(self) -> "SuiteRun":
        self.log.open()
        self._log_environment()
        rotate_run_logs(self.files.feature_dir, self.feature_name, self.keep, run_log=self.log, stats=self.stats)
        self.log.write(f"[BeforeAll] Starting {self.display_name} suite setup...", Level.SUMMARY)
        self.log.write("Environment configuration loaded")
        self.log.write(f"[BeforeAll] {self.display_name} suite setup completed", Level.SUMMARY, (Tag.OUTCOME,))
        return self

    def _log_environment(self) -> None:
        rule = "=" * 60
        for line in (
            rule,
            f"TEST FILE: {self.feature_name}",
            f"TEST SUITE: {self.display_name}",
            f"Python Version: {sys.version.split()[0]}",
            f"Platform: {platform.system().lower()}",
            f"Working Directory: {os.getcwd()}",
            f"Log Directory: {self.files.feature_dir}",
            f"Current Log File: {self.files.per_run_log.name}",
            f"Environment Variables Loaded: {'YES' if settings.credentials_from_env() else 'NO'}",
            rule,
        ):
            self.log.write(line, Level.SUMMARY)

    def info(self, message: str, tags: Iterable[Tag] = ()) -> None:
        self.log.write(message, Level.INFO, tags)

    def step(self, name: str, action: Callable[[], T], context: str = "") -> T:
        return time_action(self.log, name, action, context, stats=self.stats, slow_ms=self.slow_ms)

    @contextmanager
    def case(self, title: str, category: Optional[str] = None):
        """Wrap one test body: logs start/outcome and counts pass or fail."""
        if category:
            self.stats.incr(category)
        self.log.write(f"TEST START: {title}", Level.SUMMARY, (Tag.MILESTONE,))
        try:
            yield self
        except Exception as e:
            self.stats.record_fail()
            self.log.write(f"TEST FAILED: {title} - {e}", Level.ERROR)
            raise
        self.stats.record_pass()
        self.log.write(f"TEST COMPLETED: {title}", Level.SUMMARY, (Tag.OUTCOME, Tag.MILESTONE))

    def finish(self) -> None:
        if not self.log.is_open:
            return
        try:
            self.stats.flush(self.log)
            self.log.write("TEST SUITE COMPLETED", Level.CRITICAL, (Tag.MILESTONE,))
            self.log.write(f"Detailed logs saved to: {self.files.per_run_log}", Level.SUMMARY)
            self.log.write(f"Test file summary: {self.files.feature_summary}", Level.SUMMARY)
            self.log.write(f"Master summary: {self.files.global_summary}", Level.SUMMARY)
        finally:
            self.log.close()

    def __enter__(self):
        return self.start()

    def __exit__(self, *exc):
        self.finish()
        return False

# run_log.py
"""
Three-tier suite log.

Every suite run appends to:
  - its own per-run log   test-logs/<feature>/<feature>_tests_<run_id>.log
  - the feature summary   test-logs/<feature>/<feature>_summary.log
  - the global summary    test-logs/all_tests_summary.log

All lines go to the per-run log. The summaries only receive entries selected
by level or by an explicit Tag, never by what the message text says.
"""
import enum
import logging
import random
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union

import settings


class Level(enum.IntEnum):
    INFO = logging.INFO
    ACTION = 21
    SUCCESS = 25
    WARNING = logging.WARNING
    SUMMARY = 35
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


for _lvl in (Level.ACTION, Level.SUCCESS, Level.SUMMARY):
    logging.addLevelName(_lvl, _lvl.name)


class Tag(enum.Enum):
    OUTCOME = "outcome"        # pass/fail result of a step or test
    MILESTONE = "milestone"    # test start/completion, suite lifecycle


class Tier(enum.Enum):
    RUN = "run"
    FEATURE = "feature"
    GLOBAL = "global"


FEATURE_LEVELS = frozenset({Level.ERROR, Level.SUMMARY})
FEATURE_TAGS = frozenset({Tag.OUTCOME})
GLOBAL_LEVELS = frozenset({Level.ERROR, Level.CRITICAL})
GLOBAL_TAGS = frozenset({Tag.MILESTONE})

RULE = "=" * 80


def iso_timestamp(ts: Optional[float] = None) -> str:
    """UTC ISO-8601 with milliseconds, e.g. 2025-01-01T12:00:00.000Z"""
    dt = datetime.fromtimestamp(time.time() if ts is None else ts, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _coerce_level(level: Union[Level, str, int]) -> Level:
    if isinstance(level, str):
        return Level[level.upper()]
    return Level(level)


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    level: Level
    message: str
    tags: FrozenSet[Tag] = frozenset()

    def render(self) -> str:
        return f"[{self.timestamp}] [{self.level.name}] {self.message}"


@dataclass(frozen=True)
class RunIdentity:
    feature_name: str
    run_id: str

    @classmethod
    def new(cls, feature_name: str) -> "RunIdentity":
        suffix = "".join(random.choice(string.ascii_lowercase + string.digits) for _ in range(9))
        return cls(feature_name, f"run_{int(time.time() * 1000)}_{suffix}")


@dataclass(frozen=True)
class LogFileSet:
    per_run_log: Path
    feature_summary: Path
    global_summary: Path

    @classmethod
    def for_run(cls, root: Union[str, Path], identity: RunIdentity) -> "LogFileSet":
        root = Path(root)
        feature_dir = root / identity.feature_name
        return cls(
            per_run_log=feature_dir / f"{identity.feature_name}_tests_{identity.run_id}.log",
            feature_summary=feature_dir / f"{identity.feature_name}_summary.log",
            global_summary=root / "all_tests_summary.log",
        )

    @property
    def feature_dir(self) -> Path:
        return self.per_run_log.parent

    def ensure_dirs(self) -> None:
        self.feature_dir.mkdir(parents=True, exist_ok=True)
        self.global_summary.parent.mkdir(parents=True, exist_ok=True)


class TierFilter(logging.Filter):
    """Lets an entry through when its level or one of its tags selects this tier."""

    def __init__(self, levels: FrozenSet[Level], tags: FrozenSet[Tag]):
        super().__init__()
        self.levels = levels
        self.tags = tags

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "raw"):
            return True
        entry = getattr(record, "entry", None)
        if entry is None:
            return False
        return entry.level in self.levels or bool(entry.tags & self.tags)


class EntryFormatter(logging.Formatter):
    def __init__(self, template: str, **fields):
        super().__init__()
        self.template = template
        self.fields = fields

    def format(self, record: logging.LogRecord) -> str:
        if hasattr(record, "raw"):
            return record.raw
        entry = record.entry
        return self.template.format(
            timestamp=entry.timestamp,
            level=entry.level.name,
            message=entry.message,
            **self.fields,
        )


@dataclass
class RunLog:
    """
    Log tiers for one suite run.

    Records go straight to the three tier handlers; no logger is registered
    with the logging manager.
    """
    identity: RunIdentity
    files: LogFileSet
    display_name: str = ""
    summary_max_bytes: int = settings.SUITE_SUMMARY_MAX_BYTES
    summary_backups: int = settings.SUITE_SUMMARY_BACKUPS
    _handlers: dict = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        if not self.display_name:
            self.display_name = self.identity.feature_name

    @property
    def name(self) -> str:
        return f"suite.{self.identity.feature_name}.{self.identity.run_id}"

    @property
    def is_open(self) -> bool:
        return bool(self._handlers)

    def open(self) -> "RunLog":
        if self.is_open:
            return self
        self.files.ensure_dirs()
        started = iso_timestamp()
        header = "\n".join(
            ["", RULE, self.display_name.upper(), f"Test Run ID: {self.identity.run_id}",
             f"Started: {started}", RULE, ""]
        )
        self.files.per_run_log.write_text(header, encoding="utf-8")

        feature, run_id = self.identity.feature_name, self.identity.run_id
        built = []
        try:
            run_handler = logging.FileHandler(self.files.per_run_log, mode="a", encoding="utf-8")
            built.append(run_handler)
            run_handler.setFormatter(EntryFormatter("[{timestamp}] [{level}] {message}"))

            feature_handler = self._summary_handler(self.files.feature_summary)
            built.append(feature_handler)
            feature_handler.addFilter(TierFilter(FEATURE_LEVELS, FEATURE_TAGS))
            feature_handler.setFormatter(EntryFormatter("[{timestamp}] [{run_id}] {message}", run_id=run_id))

            global_handler = self._summary_handler(self.files.global_summary)
            built.append(global_handler)
            global_handler.addFilter(TierFilter(GLOBAL_LEVELS, GLOBAL_TAGS))
            global_handler.setFormatter(
                EntryFormatter("[{timestamp}] [{feature}] [{run_id}] {message}", feature=feature, run_id=run_id)
            )
        except OSError:
            for handler in built:
                handler.close()
            raise

        self._handlers = {Tier.RUN: run_handler, Tier.FEATURE: feature_handler, Tier.GLOBAL: global_handler}

        self.append(Tier.FEATURE, f"\n[{started}] {self.display_name} - Run Started: {run_id}")
        self.append(Tier.GLOBAL, f"[{started}] [{feature}] Test Run Started: {run_id}")
        return self

    def _summary_handler(self, path: Path) -> logging.Handler:
        # maxBytes=0 never rolls over, i.e. plain append-only
        return RotatingFileHandler(
            path, mode="a", maxBytes=max(self.summary_max_bytes, 0),
            backupCount=self.summary_backups, encoding="utf-8",
        )

    def _record(self, level: int, text: str, **extra) -> logging.LogRecord:
        return logging.makeLogRecord({
            "name": self.name,
            "levelno": int(level),
            "levelname": logging.getLevelName(int(level)),
            "msg": text,
            **extra,
        })

    def write(self, message: str, level: Union[Level, str] = Level.INFO, tags: Iterable[Tag] = ()) -> None:
        if not self.is_open:
            raise RuntimeError(f"Run log for {self.identity.feature_name} is not open")
        entry = LogEntry(iso_timestamp(), _coerce_level(level), str(message), frozenset(tags))
        record = self._record(entry.level, entry.message, entry=entry)
        for handler in self._handlers.values():
            handler.handle(record)

    def append(self, tier: Tier, text: str) -> None:
        """Append a preformatted line to a single tier, bypassing routing."""
        if not self.is_open:
            raise RuntimeError(f"Run log for {self.identity.feature_name} is not open")
        self._handlers[tier].handle(self._record(logging.INFO, text, raw=text))

    def close(self) -> None:
        if not self.is_open:
            return
        for handler in self._handlers.values():
            handler.close()
        self._handlers = {}

    def __enter__(self):
        return self.open()

    def __exit__(self, *exc):
        self.close()
        return False

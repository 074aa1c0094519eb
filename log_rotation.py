# log_rotation.py
import logging
from pathlib import Path
from typing import List, Optional, Union

import settings
from run_log import Level, RunLog

log = logging.getLogger(__name__)


def _note(run_log: Optional[RunLog], message: str, level: Level = Level.INFO) -> None:
    if run_log is not None and run_log.is_open:
        run_log.write(message, level)
    else:
        log.log(level, message)


def run_log_files(feature_dir: Union[str, Path], feature_name: str) -> List[Path]:
    """Per-run logs for a feature, newest first."""
    prefix = f"{feature_name}_tests_run_"
    files = [
        p for p in Path(feature_dir).iterdir()
        if p.is_file() and p.name.startswith(prefix) and p.name.endswith(".log")
    ]
    mtimes = {p: p.stat().st_mtime for p in files}
    return sorted(files, key=mtimes.__getitem__, reverse=True)


def rotate_run_logs(
    feature_dir: Union[str, Path],
    feature_name: str,
    keep: int = settings.SUITE_LOG_KEEP,
    run_log: Optional[RunLog] = None,
    stats=None,
) -> List[Path]:
    """
    Delete all but the `keep` most recent per-run logs of a feature.

    Cleanup is best effort: a listing or deletion error is logged as a
    WARNING (and counted on `stats`) and the suite carries on.
    Returns the deleted paths.
    """
    deleted: List[Path] = []
    try:
        files = run_log_files(feature_dir, feature_name)
        _note(run_log, f"Found {len(files)} existing log files for {feature_name}")
        stale = files[keep:]
        if stale:
            _note(run_log, f"Cleaning up {len(stale)} old log files")
            for path in stale:
                try:
                    path.unlink()
                except FileNotFoundError:
                    # already removed by a concurrent run of the same feature
                    continue
                deleted.append(path)
                _note(run_log, f"Deleted old log: {path.name}")
    except OSError as e:
        _note(run_log, f"Failed to cleanup old logs: {e}", Level.WARNING)
        if stats is not None:
            stats.record_warning()
    return deleted

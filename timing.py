# timing.py
import time
import traceback
from typing import Callable, Optional, TypeVar

import settings
from run_log import Level, RunLog, Tag

T = TypeVar("T")

_clock = time.perf_counter


def _elapsed_ms(t0: float) -> int:
    return int((_clock() - t0) * 1000)


def time_action(
    run_log: RunLog,
    name: str,
    action: Callable[[], T],
    context: str = "",
    stats=None,
    slow_ms: Optional[int] = None,
) -> T:
    """
    Run `action`, logging its start, outcome and duration.

    Failures are logged once (summary line, message, traceback) and the
    original exception is re-raised. Nothing is retried.
    """
    slow_ms = settings.SLOW_OPERATION_MS if slow_ms is None else slow_ms
    label = f"{context} - {name}" if context else name

    run_log.write(f"STARTING: {label}", Level.ACTION)
    t0 = _clock()
    try:
        result = action()
    except Exception as e:
        ms = _elapsed_ms(t0)
        run_log.write(f"FAILED: {label} after {ms}ms", Level.ERROR, (Tag.OUTCOME,))
        run_log.write(f"ERROR DETAILS: {e}", Level.ERROR)
        run_log.write(f"STACK TRACE: {traceback.format_exc().rstrip()}", Level.ERROR)
        raise

    ms = _elapsed_ms(t0)
    run_log.write(f"COMPLETED: {label} ({ms}ms)", Level.SUCCESS, (Tag.OUTCOME, Tag.MILESTONE))
    if ms > slow_ms:
        run_log.write(f"SLOW OPERATION: {label} took {ms}ms", Level.WARNING)
        if stats is not None:
            stats.record_slow_op()
    return result

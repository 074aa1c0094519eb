# site_probe.py
import logging
import time

import requests

import settings

log = logging.getLogger(__name__)


def check_site(url: str = settings.SITE_URL, timeout: float = settings.PROBE_TIMEOUT) -> dict:
    """GET the shop front page; raises requests.RequestException when it is not usable."""
    t0 = time.perf_counter()
    r = requests.get(url, timeout=timeout)
    ms = (time.perf_counter() - t0) * 1000.0
    r.raise_for_status()
    log.info("%s answered %s in %.0fms", url, r.status_code, ms)
    return {"status": r.status_code, "latency_ms": round(ms, 2)}

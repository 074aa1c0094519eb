from unittest import mock

import pytest
import requests

from site_probe import check_site


def test_reachable_site_reports_status_and_latency():
    response = mock.MagicMock(status_code=200)
    with mock.patch("site_probe.requests.get", return_value=response) as get:
        out = check_site("https://shop.example", timeout=3)

    get.assert_called_once_with("https://shop.example", timeout=3)
    response.raise_for_status.assert_called_once_with()
    assert out["status"] == 200
    assert out["latency_ms"] >= 0


def test_http_error_propagates():
    response = mock.MagicMock(status_code=503)
    response.raise_for_status.side_effect = requests.HTTPError("503 Service Unavailable")
    with mock.patch("site_probe.requests.get", return_value=response):
        with pytest.raises(requests.HTTPError):
            check_site("https://shop.example")


def test_connection_error_propagates():
    with mock.patch("site_probe.requests.get", side_effect=requests.ConnectionError("no route")):
        with pytest.raises(requests.RequestException):
            check_site("https://shop.example")

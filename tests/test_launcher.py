"""Mini README: Tests for the launcher's browser URL hint."""

from main_pocket_ledger import browser_url


def test_wildcard_hosts_point_at_localhost():
    """Wildcard binds cannot be opened in a browser, so localhost is suggested."""

    assert browser_url("0.0.0.0", 8000) == "http://127.0.0.1:8000"
    assert browser_url("::", 8080) == "http://127.0.0.1:8080"


def test_explicit_host_is_kept():
    """A concrete host is echoed back unchanged."""

    assert browser_url("192.168.1.20", 9000) == "http://192.168.1.20:9000"

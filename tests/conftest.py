from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SUBTABLE = '<table class="ipf-st-ip-trains-subtable">{rows}</table>'
ROW = (
    '<tr class="ipf-st-ip-trains-subtable-tr">'
    '<td class="ipf-st-ip-trains-subtable-td-id">{id}</td>'
    '<td class="ipf-st-ip-trains-subtable-td-type">{type}</td>'
    '<td class="ipf-st-ip-trains-subtable-td-arrivaltime">{time}</td>'
    "</tr>"
)


@pytest.fixture(autouse=True)
def use_test_config(tmp_path, monkeypatch):
    """Automatically point the config file at a temporary location for all tests."""
    config_file = tmp_path / "config" / "config.json"
    monkeypatch.setattr("caltrain.constants.CONFIG_FILE", config_file)
    yield config_file


@pytest.fixture
def status_page_path():
    """Saved page with three southbound trains followed by three northbound."""
    return FIXTURES_DIR / "status_page.html"


@pytest.fixture
def status_page(status_page_path):
    return status_page_path.read_bytes()


@pytest.fixture
def northbound_only_page():
    """Saved page whose southbound block has no trains in it."""
    return (FIXTURES_DIR / "status_page_northbound_only.html").read_bytes()


@pytest.fixture
def make_page():
    """Build a page from subtables, each a list of (id, type, time) cell texts."""

    def _make_page(*tables):
        body = "".join(
            SUBTABLE.format(rows="".join(ROW.format(id=i, type=t, time=m) for i, t, m in rows))
            for rows in tables
        )
        return f"<html><body>{body}</body></html>"

    return _make_page

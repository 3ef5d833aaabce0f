"""Shared Playwright fixtures for browser-rendered screenshot tests.

Uses playwright.sync_api. Tests skip when Playwright or its Chromium build
is not installed, so the unit suite runs anywhere.
"""

from __future__ import annotations

import pytest


@pytest.fixture(scope="session")
def browser():
    """Session-scoped headless Chromium browser."""
    sync_api = pytest.importorskip("playwright.sync_api")
    pw = sync_api.sync_playwright().start()
    try:
        b = pw.chromium.launch(headless=True)
    except Exception as e:
        pw.stop()
        pytest.skip(f"Chromium not available: {e}")
    yield b
    b.close()
    pw.stop()


@pytest.fixture
def page(browser):
    """Fresh 800x600 page at device scale 1, so CSS pixels are screen pixels."""
    ctx = browser.new_context(viewport={"width": 800, "height": 600}, device_scale_factor=1)
    p = ctx.new_page()
    yield p
    ctx.close()

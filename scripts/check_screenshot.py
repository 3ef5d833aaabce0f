#!/usr/bin/env python3
"""Check that a popup was rendered nested inside the red reference page.

Logs pixel statistics for every screenshot given, then runs nested-rectangle
detection on the target (the last one, unless --target is given) and checks
containment.

Usage:
    python3 scripts/check_screenshot.py [<screenshot> ...] [options]

With no screenshots given, reads ss1.png, ss2.png and ss3.png from
PIXELCHECK_SCREENSHOT_DIR.

Options:
    --target PATH   Screenshot to run detection on (default: last argument)
    --strict        Also check exact positions from PIXELCHECK_* settings
    --json          Print the detected rectangles as JSON
    --log-level     loguru level for stderr (default: settings.log_level)

Exit codes: 0 nested, 1 detection failed or checks violated, 2 unreadable input.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add src/ to path for running from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from loguru import logger

from pixelcheck.config import settings
from pixelcheck.detection import (
    DetectionError,
    calculate_screenshot_stats,
    detect_nested_rectangles,
    format_stats,
    load_pixel_buffer,
)
from pixelcheck.verify import describe, layout_violations, nesting_violations

# Capture order of the e2e flow: page, popup, whole display. The last one
# is the only capture that shows both windows.
DEFAULT_SCREENSHOTS = ("ss1.png", "ss2.png", "ss3.png")


def log_stats(paths: list[Path]) -> None:
    """Log size and marker pixel count for each readable screenshot file."""
    for path in paths:
        if not path.is_file():
            logger.warning(f"Screenshot not found: {path}")
            continue
        try:
            stats = calculate_screenshot_stats(load_pixel_buffer(path))
        except DetectionError as e:
            logger.warning(f"Cannot read {path}: {e}")
            continue
        logger.info(format_stats(path.name, stats))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Verify a popup is nested inside the red reference page",
    )
    parser.add_argument(
        "screenshots", type=Path, nargs="*",
        help="Screenshot files (default: ss1.png ss2.png ss3.png in settings.screenshot_dir)",
    )
    parser.add_argument("--target", type=Path, default=None, help="Screenshot to check")
    parser.add_argument("--strict", action="store_true", help="Check exact expected layout")
    parser.add_argument("--json", action="store_true", dest="output_json", help="Output JSON")
    parser.add_argument("--log-level", default=settings.log_level, help="stderr log level")
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    screenshots = args.screenshots or [settings.screenshot_dir / name for name in DEFAULT_SCREENSHOTS]
    log_stats(screenshots)

    target = args.target or screenshots[-1]
    try:
        buffer = load_pixel_buffer(target)
    except (FileNotFoundError, DetectionError) as e:
        logger.error(f"Cannot load target screenshot: {e}")
        return 2

    try:
        result = detect_nested_rectangles(buffer)
    except DetectionError as e:
        logger.error(f"Detection failed: {e}")
        return 1

    violations = nesting_violations(result)
    if args.strict:
        layout = settings.expected_layout()
        logger.info(f"Browser header height: {layout.header_offset(result.outer)}px")
        violations.extend(layout_violations(result, layout))

    if args.output_json:
        print(json.dumps({**result.as_dict(), "violations": violations}, indent=2))
    else:
        print(describe(result))
        for v in violations:
            print(f"  FAIL {v}")

    return 1 if violations else 0


if __name__ == "__main__":
    sys.exit(main())

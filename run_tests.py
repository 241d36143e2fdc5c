#!/usr/bin/env python3
"""
run_tests.py
------------
Watch-mode pytest runner for Zen Atelier.

Usage:
    python run_tests.py                    # Run, then re-run on every save
    python run_tests.py --run-once         # Single run, exit code = pytest's
    python run_tests.py --core-only        # tests/core and tests/systems only
    python run_tests.py -m integration     # Only room-flow scenarios
    python run_tests.py --coverage         # Coverage report via pytest-cov
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer


PROJECT_ROOT = Path(__file__).resolve().parent
WATCHED_DIRS = ("atelier", "tests")
WATCHED_SUFFIXES = (".py", ".yaml", ".yml", ".json")
CORE_TEST_PATHS = ("tests/core", "tests/systems")
COVERAGE_THRESHOLD = 70


def build_pytest_command(args) -> list:
    cmd = [sys.executable, "-m", "pytest", "-v"]
    if args.core_only:
        cmd.extend(CORE_TEST_PATHS)
    if args.marker:
        cmd.extend(["-m", args.marker])
    if args.coverage:
        cmd.extend([
            "--cov=atelier",
            "--cov-report=term-missing",
            f"--cov-fail-under={COVERAGE_THRESHOLD}",
        ])
    return cmd


def run_pytest(args) -> int:
    """Run pytest once from the project root and return its exit code."""
    banner = "=" * 60
    print(f"\n{banner}\n{' '.join(build_pytest_command(args)[2:])}\n{banner}")

    try:
        code = subprocess.run(build_pytest_command(args), cwd=PROJECT_ROOT).returncode
    except OSError as e:
        print(f"Could not start pytest: {e}")
        return 1

    print("All tests passed!" if code == 0 else f"pytest exited with {code}")
    return code


class ChangeHandler(FileSystemEventHandler):
    """Re-runs the suite when a watched source file is saved."""

    def __init__(self, args, debounce: float = 1.0):
        self.args = args
        self.debounce = debounce
        self._last_run = 0.0

    def on_modified(self, event):
        if event.is_directory or not str(event.src_path).endswith(WATCHED_SUFFIXES):
            return
        now = time.monotonic()
        if now - self._last_run < self.debounce:
            return
        self._last_run = now
        run_pytest(self.args)


def watch(args) -> int:
    handler = ChangeHandler(args)
    observer = Observer()
    for name in WATCHED_DIRS:
        directory = PROJECT_ROOT / name
        if directory.is_dir():
            observer.schedule(handler, str(directory), recursive=True)

    print(f"Watching {', '.join(d + '/' for d in WATCHED_DIRS)} (Ctrl+C to stop)")
    run_pytest(args)
    observer.start()
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nFile watcher stopped")
    finally:
        observer.stop()
        observer.join()
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Auto-test runner for Zen Atelier")
    parser.add_argument("--run-once", action="store_true",
                        help="Run tests once and exit")
    parser.add_argument("--core-only", action="store_true",
                        help="Run only core and coordinator tests")
    parser.add_argument("-m", "--marker", default=None,
                        help="pytest marker expression (unit, integration, 'not slow')")
    parser.add_argument("--coverage", action="store_true",
                        help="Generate coverage report")
    args = parser.parse_args(argv)

    if args.run_once:
        return run_pytest(args)
    return watch(args)


if __name__ == "__main__":
    sys.exit(main())

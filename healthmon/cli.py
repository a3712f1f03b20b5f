"""Command-line entry point for the health monitor."""

from __future__ import annotations

import argparse
import signal
import sys
import threading

from healthmon.aggregator import Aggregator
from healthmon.checker import Checker
from healthmon.config import load_config
from healthmon.reporter import ConsoleReporter

_WORKERS = 5


def main(argv: list[str] | None = None) -> int:
    """Monitor the configured URLs until SIGINT or SIGTERM arrives."""
    parser = argparse.ArgumentParser(
        prog="healthmon", description="Continuously check the health of HTTP endpoints."
    )
    parser.add_argument(
        "-c", "--config", default="config.json", help="path of the JSON configuration file"
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as exc:
        print(f"Error loading config: {exc}")
        return 1

    checkers = [
        Checker(url, config.timeout_seconds, config.slow_threshold) for url in config.urls
    ]
    reporter = ConsoleReporter()
    aggregator = Aggregator(checkers, reporter, _WORKERS)

    shutdown = threading.Event()

    def _on_signal(signum, frame):
        shutdown.set()

    previous = {
        sig: signal.signal(sig, _on_signal) for sig in (signal.SIGINT, signal.SIGTERM)
    }
    cancel = threading.Event()
    try:
        aggregator.start(cancel)
        print(f"Starting health monitor for {len(config.urls)} URLs...")
        print("Press Ctrl+C to stop")
        while not shutdown.wait(0.1):
            pass
        print("\nShutting down gracefully...")
        aggregator.stop()
    finally:
        cancel.set()
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    stats = reporter.get_stats()
    print("\nFinal Statistics:")
    print(f"Total Checks: {stats.total_checks}")
    print(f"Successful: {stats.success_count}")
    print(f"Failed: {stats.failure_count}")
    print(f"Slow Responses: {stats.slow_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
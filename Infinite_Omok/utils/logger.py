"""Timestamped event lines for matches and debugging."""

import datetime
import sys


def log_event(message, stream=None):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}", file=stream or sys.stdout)

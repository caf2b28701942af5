from __future__ import annotations
import sys
import time

from connectfour.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC

_FRAMES = "|/-\\"


def ai_thinking(label: str = "AI", delay_sec: float = AI_THINK_DELAY_SEC) -> None:
    """
    Pause before an AI move so it doesn't land instantly; spins if enabled.
    """
    if delay_sec <= 0:
        return

    if not AI_THINKING_SPINNER or not sys.stdout.isatty():
        time.sleep(delay_sec)
        return

    deadline = time.monotonic() + delay_sec
    i = 0
    while time.monotonic() < deadline:
        sys.stdout.write(f"\r{label} is thinking... {_FRAMES[i % len(_FRAMES)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + " " * (len(label) + 20) + "\r")
    sys.stdout.flush()

"""Simple questions to the user on the terminal."""

from __future__ import annotations

import sys


def ask_user_forpermission(msg: str) -> bool:
    """Ask whether the user wants msg; only the exact answer "YES" agrees."""
    sys.stdout.write(f"Do you want : {msg} -- (YES/no):")
    sys.stdout.flush()
    answer = sys.stdin.readline().removesuffix("\n")
    return answer == "YES"
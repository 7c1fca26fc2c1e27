from __future__ import annotations

import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from decoders import Failure, Success, Warning, draw  # noqa: E402
from decoders.these import Outcome  # noqa: E402


def banner(title: str) -> None:
    print()
    print("=" * len(title))
    print(title)
    print("=" * len(title))


def show(label: str, outcome: Outcome[object, object]) -> None:
    match draw(outcome):  # type: ignore[arg-type]
        case Success(value):
            print(f"[{label}] ok: {value!r}")
        case Warning(message, value):
            print(f"[{label}] ok with warnings: {value!r}")
            print(message)
        case Failure(message):
            print(f"[{label}] failed:")
            print(message)

"""
Console prompt helpers — re-ask until the input is usable.
"""

from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def prompt_number(
    prompt: str,
    low:    Optional[float] = None,
    high:   Optional[float] = None,
) -> float:
    """Prompt for a number inside the optional inclusive range [low, high]."""
    while True:
        raw = input(prompt).strip()
        try:
            value = float(raw)
        except ValueError:
            print("  ⚠  Please enter a number.")
            continue
        if low is not None and value < low:
            print(f"  ⚠  Value must be at least {low:g}.")
            continue
        if high is not None and value > high:
            print(f"  ⚠  Value must be at most {high:g}.")
            continue
        return value


def prompt_text(prompt: str, default: str = "") -> str:
    """Prompt for free text; an empty answer falls back to default when given."""
    while True:
        value = input(prompt).strip()
        if value:
            return value
        if default:
            return default
        print("  ⚠  Input cannot be empty.")


def prompt_confirm(prompt: str, default: bool = False) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    while True:
        raw = input(f"{prompt} {hint}: ").strip().lower()
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        if raw == "":
            return default
        print("  ⚠  Please enter y or n.")


def prompt_choice(prompt: str, options: Sequence[T], labels: Optional[List[str]] = None) -> T:
    """Show a numbered menu of options and return the one picked."""
    for i, label in enumerate(labels or [str(o) for o in options], 1):
        print(f"    {i}. {label}")
    while True:
        raw = input(prompt).strip()
        try:
            idx = int(raw) - 1
        except ValueError:
            print("  ⚠  Please enter a number.")
            continue
        if 0 <= idx < len(options):
            return options[idx]
        print(f"  ⚠  Please enter 1–{len(options)}.")

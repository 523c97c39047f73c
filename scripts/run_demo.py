#!/usr/bin/env python
from __future__ import annotations

"""Tiny demo that wraps a sequence of people in each printer variant.

Run from the repository root:
  python scripts/run_demo.py                      # stderr sink
  python scripts/run_demo.py config/debug_iter.yaml  # sink and policies from YAML
"""

import logging
import sys
from dataclasses import dataclass

from debug_iter import config
from debug_iter.printer.debug_printer import (
    debug,
    debug_pretty,
    debug_with_caption,
    debug_with_caption_pretty,
    debug_with_policy,
)


@dataclass
class Person:
    name: str
    age: int


def people():
    return [Person(name="Bob", age=age) for age in (4, 8, 12)]


def main() -> None:
    """Drain each printer so every element is echoed once."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if len(sys.argv) > 1:
        settings = config.configure_from_file(sys.argv[1])
    else:
        settings = config.get_settings()

    for _ in debug(people()):
        pass
    for _ in debug_pretty(people()):
        pass
    for _ in debug_with_caption(people(), "This person is"):
        pass
    for _ in debug_with_caption_pretty(people(), "This person is"):
        pass
    for name in settings.policies:
        for _ in debug_with_policy(people(), name):
            pass


if __name__ == "__main__":
    main()

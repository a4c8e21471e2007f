# File: robots_forge/matcher.py
"""
Path pattern matching with robots.txt semantics.

A pattern is matched against a URL path (query and fragment already stripped)
in one of three ways, chosen by its last character:

* ``$``  – the whole path must match (``/*.pdf$`` matches ``/a.pdf`` only);
* ``/``  – directory prefix (``/admin/`` matches ``/admin/page``);
* other  – the path equals the pattern or continues with ``/``
  (``/admin`` matches ``/admin`` and ``/admin/x``, not ``/administration``).

``*`` stands for any run of characters, including none. Everything else is
literal and case-sensitive.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Pattern

from robots_forge.logger import get_logger

logger = get_logger(__name__)


def _expand(pattern: str) -> str:
    return ".*".join(re.escape(part) for part in pattern.split("*"))


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> Pattern[str]:
    """Translate a robots.txt path pattern into an anchored regex."""
    if pattern.endswith("$"):
        regex = f"^{_expand(pattern[:-1])}\\Z"
    elif pattern.endswith("/"):
        regex = f"^{_expand(pattern)}"
    else:
        regex = f"^{_expand(pattern)}(?:\\Z|/)"
    logger.debug("Compiled pattern %r -> %r", pattern, regex)
    return re.compile(regex, re.DOTALL)


def matches(url_path: str, pattern: str) -> bool:
    """Return True if *url_path* is covered by the robots.txt *pattern*."""
    return compile_pattern(pattern).search(url_path) is not None


__all__ = ["compile_pattern", "matches"]

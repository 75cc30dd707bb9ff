from __future__ import annotations

import re
from typing import AbstractSet, List, Optional, Tuple

from java2puml.cir.model import Multiplicity
from java2puml.config import IGNORED_TYPES

# Single level only: "Base<Map<K, V>>" splits into ["Map<K", "V>"]
_GENERIC_RE = re.compile(r"(\w+)\s*<(.+)>")


def is_ignored_type(name: str, ignored: AbstractSet[str] = IGNORED_TYPES) -> bool:
    """
    Default types like String, Float, etc. never become association targets.
    """
    return name in ignored


def parse_generic(expr: str) -> Optional[Tuple[str, List[str]]]:
    """
    "Base<A, B>" -> ("Base", ["A", "B"]); anything else -> None.

    The whole expression must match, so qualified names such as
    java.util.List<Item> are treated as plain names.
    """
    m = _GENERIC_RE.fullmatch(expr.strip())
    if not m:
        return None
    args = [a.strip() for a in m.group(2).split(",")]
    return m.group(1), args


def extract_association_target(expr: str) -> Tuple[str, Multiplicity]:
    """
    Pick the type an association edge should point at.

      List<Item>       -> ("Item", "many")
      Map<Key, Value>  -> ("Value", "many")
      Item             -> ("Item", "one")
    """
    parsed = parse_generic(expr)
    if parsed is None:
        return expr.strip(), "one"

    _, args = parsed
    if len(args) > 1:
        return args[1], "many"
    return args[0], "many"

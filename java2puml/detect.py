import logging
from typing import Optional, Tuple

from java2puml.adapters.java_adapter import JavaAdapter

logger = logging.getLogger(__name__)

JAVA_EXT = ".java"

_adapter = JavaAdapter()


def is_java_filename(filename: Optional[str]) -> bool:
    return bool(filename) and filename.lower().endswith(JAVA_EXT)


def detect_language(code: str, filename: Optional[str] = None) -> Tuple[str, float, str]:
    # Check by file extension
    if filename:
        if is_java_filename(filename):
            return "java", 0.95, "extension"
        return "unknown", 0.0, "none"

    # No filename: Java if it parses into at least one type declaration
    try:
        tree = _adapter.parse_to_ast(code)
    except ValueError as e:
        logger.debug("not Java: %s", e)
        return "unknown", 0.0, "none"

    if not tree.types:
        return "unknown", 0.0, "none"
    return "java", 0.9, "parse"

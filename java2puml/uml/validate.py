# java2puml/uml/validate.py

import re
from typing import List, Tuple

from java2puml.uml.renderer import END_MARKER, START_MARKER

DISALLOWED_DIRECTIVES = [
    r"^\s*!include",
    r"^\s*!includeurl",
    r"^\s*!pragma",
]

MAX_DOCUMENT_SIZE = 2_000_000


def validate_plantuml(text: str) -> Tuple[bool, List[str]]:
    errors: List[str] = []
    if not text or not text.strip():
        return False, ["Empty PlantUML text"]

    if START_MARKER not in text:
        errors.append("Missing @startuml")
    if END_MARKER not in text:
        errors.append("Missing @enduml")

    # type names copied from source must not smuggle in preprocessor lines
    for pat in DISALLOWED_DIRECTIVES:
        if re.search(pat, text, flags=re.IGNORECASE | re.MULTILINE):
            errors.append(f"Disallowed directive found: {pat}")

    if text.count("{") != text.count("}"):
        errors.append("Unbalanced braces in entity blocks")

    if len(text) > MAX_DOCUMENT_SIZE:
        errors.append("PlantUML text too large")

    return (len(errors) == 0), errors

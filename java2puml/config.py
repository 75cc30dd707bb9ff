# java2puml/config.py

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from dotenv import load_dotenv

# Sub-folders of the project root that get scanned, in this order
DEFAULT_SUB_FOLDERS: Tuple[str, ...] = (
    "controllers",
    "models/repositories",
    "services",
)

DEFAULT_OUTPUT_PATH = "output.puml"

# Built-in / trivial types that never produce an association edge
IGNORED_TYPES: FrozenSet[str] = frozenset({
    "String",
    "Integer",
    "Long",
    "Double",
    "Float",
    "Character",
    "Object",
    "Boolean",
    "Byte",
    "Short",
    "T",
})

ENV_SUB_FOLDERS = "JAVA2PUML_SUB_FOLDERS"
ENV_OUTPUT = "JAVA2PUML_OUTPUT"


@dataclass
class GeneratorConfig:
    sub_folders: Tuple[str, ...] = DEFAULT_SUB_FOLDERS
    output_path: str = DEFAULT_OUTPUT_PATH
    ignored_types: FrozenSet[str] = field(default=IGNORED_TYPES)


def load_config() -> GeneratorConfig:
    """
    Build a GeneratorConfig from defaults, overridden by environment
    variables (a local .env file is loaded first):

      JAVA2PUML_SUB_FOLDERS  comma-separated sub-folder list
      JAVA2PUML_OUTPUT       output .puml path
    """
    load_dotenv()
    cfg = GeneratorConfig()

    raw_folders = os.getenv(ENV_SUB_FOLDERS)
    if raw_folders:
        folders = tuple(p.strip() for p in raw_folders.split(",") if p.strip())
        if folders:
            cfg.sub_folders = folders

    output = os.getenv(ENV_OUTPUT)
    if output:
        cfg.output_path = output

    return cfg

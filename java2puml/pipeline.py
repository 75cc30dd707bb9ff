# java2puml/pipeline.py

from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

from java2puml.adapters.java_adapter import JavaAdapter
from java2puml.cir.model import TypeDeclaration
from java2puml.config import GeneratorConfig
from java2puml.uml.builder import BuildContext, build_diagram
from java2puml.uml.renderer import render_document

logger = logging.getLogger(__name__)


class DiagramWriteError(RuntimeError):
    """The rendered diagram could not be written to its destination."""


@dataclass
class ParseReport:
    declarations: List[TypeDeclaration] = field(default_factory=list)
    errors: List[Dict[str, str]] = field(default_factory=list)
    file_count: int = 0


@dataclass
class DiagramResult:
    plantuml: str
    context: BuildContext
    parse_errors: List[Dict[str, str]]
    file_count: int


def collect_java_files(root: str | os.PathLike) -> List[str]:
    """
    Find all .java files under root (recursively), sorted so the visit
    order is the same on every run.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        logger.warning("Source folder not found, skipping: %s", root_path)
        return []
    return sorted(str(p) for p in root_path.rglob("*.java") if p.is_file())


def parse_directory(
    project_root: str | os.PathLike,
    sub_folders: Iterable[str],
    adapter: JavaAdapter | None = None,
) -> ParseReport:
    """
    Parse every configured sub-folder of the project root, in configured
    order. Files that fail to parse are reported and skipped.
    """
    adapter = adapter or JavaAdapter()
    report = ParseReport()
    root = Path(project_root)

    for sub in sub_folders:
        java_files = collect_java_files(root / sub)
        logger.info("Parsing %d Java file(s) under %s", len(java_files), root / sub)

        declarations, errors = adapter.declarations_for_files(java_files)
        report.declarations.extend(declarations)
        report.errors.extend(errors)
        report.file_count += len(java_files)

    return report


def generate_diagram(project_root: str | os.PathLike, config: GeneratorConfig) -> DiagramResult:
    """
    Main entry: sources -> declarations -> diagram model -> PlantUML text.
    """
    report = parse_directory(project_root, config.sub_folders)
    ctx = build_diagram(report.declarations, ignored=config.ignored_types)
    plantuml = render_document(ctx)

    logger.info(
        "Diagram built: %d file(s), %d entities, %d associations, %d parse error(s)",
        report.file_count,
        len(ctx.entities),
        len(ctx.association_lines),
        len(report.errors),
    )
    return DiagramResult(
        plantuml=plantuml,
        context=ctx,
        parse_errors=report.errors,
        file_count=report.file_count,
    )


def _output_mode(out: Path) -> int:
    """
    Mode for the written file: keep an existing target's permissions,
    otherwise what a plain open() would give under the current umask.
    """
    if out.exists():
        return stat.S_IMODE(out.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_diagram(text: str, output_path: str | os.PathLike) -> Path:
    """
    Write the document next to its destination first and swap it in, so a
    failed write never leaves a truncated .puml behind.
    """
    out = Path(output_path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=out.parent,
            prefix=f".{out.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
        os.chmod(tmp_name, _output_mode(out))
        os.replace(tmp_name, out)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise DiagramWriteError(f"Error writing PlantUML code to file: {out}") from e

    logger.debug("Wrote %d characters to %s", len(text), out)
    return out

# java2puml/api.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException  # type: ignore
from pydantic import BaseModel  # type: ignore

from java2puml.adapters.java_adapter import JavaAdapter
from java2puml.cir.graph import build_model_graph
from java2puml.config import load_config
from java2puml.detect import detect_language, is_java_filename
from java2puml.uml.builder import BuildContext, build_diagram
from java2puml.uml.renderer import render_document
from java2puml.uml.validate import validate_plantuml

app = FastAPI(title="Java -> PlantUML Class Diagram Generator")
java_adapter = JavaAdapter()
config = load_config()


class Req(BaseModel):
    code: str
    filename: str | None = None


class UMLClassResponse(BaseModel):
    ok: bool = True
    plantuml: str
    associations: List[str]
    error: Optional[str] = None


def _build_from_request(req: Req) -> BuildContext:
    # without a filename the parse below decides
    if req.filename and not is_java_filename(req.filename):
        raise HTTPException(status_code=400, detail="Only Java source is supported")

    try:
        declarations = java_adapter.declarations_for_code(req.code, req.filename)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return build_diagram(declarations, ignored=config.ignored_types)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/detect")
def detect(req: Req):
    lang, conf, source = detect_language(req.code, req.filename)
    return {
        "language": lang,
        "confidence": conf,
        "source": source
    }


@app.post("/uml/class", response_model=UMLClassResponse)
def uml_class(req: Req) -> UMLClassResponse:
    ctx = _build_from_request(req)
    plantuml = render_document(ctx)

    ok, errs = validate_plantuml(plantuml)
    return UMLClassResponse(
        ok=ok,
        plantuml=plantuml,
        associations=ctx.association_lines,
        error="; ".join(errs[:10]) if errs else None,
    )


@app.post("/parse")
def parse(req: Req) -> Dict[str, Any]:
    ctx = _build_from_request(req)
    graph = build_model_graph(ctx)
    return {
        "language": "java",
        "cir": graph.to_debug_json(),
    }

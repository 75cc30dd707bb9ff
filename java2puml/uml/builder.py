from __future__ import annotations

import logging
from typing import AbstractSet, Dict, Iterable, List, Optional, Tuple

from java2puml.cir.model import (
    AssociationEdge,
    DiagramEntity,
    FieldDecl,
    MethodDecl,
    SpecializedGenericEntity,
    TypeDeclaration,
)
from java2puml.config import IGNORED_TYPES
from java2puml.uml.renderer import render_association
from java2puml.uml.type_rules import (
    extract_association_target,
    is_ignored_type,
    parse_generic,
)

logger = logging.getLogger(__name__)


class BuildContext:
    """
    State of a single diagram run.

    Entities are kept in visit order. Associations form an insertion-ordered
    set keyed by their rendered line, so identical (owner, target,
    multiplicity) edges collapse to one.
    """

    def __init__(self) -> None:
        self.entities: List[DiagramEntity] = []
        self._associations: Dict[str, AssociationEdge] = {}

    def add_entity(self, entity: DiagramEntity) -> None:
        self.entities.append(entity)

    def add_association(self, edge: AssociationEdge) -> bool:
        line = render_association(edge)
        if line in self._associations:
            return False
        self._associations[line] = edge
        return True

    @property
    def associations(self) -> List[AssociationEdge]:
        return list(self._associations.values())

    @property
    def association_lines(self) -> List[str]:
        return list(self._associations.keys())


# ---------------- Helpers ----------------

def _resolve_supertypes(
    extends: Iterable[str],
) -> Tuple[List[str], List[SpecializedGenericEntity], str]:
    """
    Returns (resolved extends-names, synthesized stubs, name prefix).

    Repository<Order> resolves to Repository_Order, adds a stub for it and
    contributes "Order_" to the prefix of the declaring type.
    """
    resolved: List[str] = []
    stubs: List[SpecializedGenericEntity] = []
    prefix_parts: List[str] = []

    for expr in extends:
        parsed = parse_generic(expr)
        if parsed is None:
            resolved.append(expr)
            continue

        base, args = parsed
        stub = SpecializedGenericEntity(base=base, type_arg=args[0])
        stubs.append(stub)
        resolved.append(stub.alias)
        prefix_parts.append(f"{args[0]}_")

    return resolved, stubs, "".join(prefix_parts)


def field_line(f: FieldDecl) -> str:
    return f"+ {f.name}: {f.type_text}"


def method_line(m: MethodDecl) -> str:
    static = "{static} " if m.is_static else ""
    return f"+ {static}{m.signature}"


def _field_association(
    owner: str,
    f: FieldDecl,
    ignored: AbstractSet[str],
) -> Optional[AssociationEdge]:
    if not f.is_reference:
        return None
    target, multiplicity = extract_association_target(f.type_text)
    if is_ignored_type(target, ignored):
        return None
    return AssociationEdge(owner=owner, target=target, multiplicity=multiplicity)


# ---------------- Traversal ----------------

def build_entity(
    decl: TypeDeclaration,
    ctx: BuildContext,
    ignored: AbstractSet[str] = IGNORED_TYPES,
) -> DiagramEntity:
    """
    Build and commit the entity for one declaration (nested declarations
    are not visited here).
    """
    if decl.kind not in ("class", "interface"):
        raise ValueError(f"Unsupported declaration kind: {decl.kind}")

    extends, stubs, prefix = _resolve_supertypes(decl.extends)
    display_name = f"{prefix}{decl.name}"

    members: List[str] = []

    # ---------- fields ----------
    for f in decl.fields:
        members.append(field_line(f))
        edge = _field_association(display_name, f, ignored)
        if edge is not None:
            ctx.add_association(edge)

    # ---------- methods ----------
    for m in decl.methods:
        members.append(method_line(m))

    entity = DiagramEntity(
        kind=decl.kind,
        name=decl.name,
        name_prefix=prefix,
        extends=tuple(extends),
        implements=tuple(decl.implements),
        member_lines=tuple(members),
        specializations=tuple(stubs),
    )
    ctx.add_entity(entity)
    return entity


def visit_declaration(
    decl: TypeDeclaration,
    ctx: BuildContext,
    ignored: AbstractSet[str] = IGNORED_TYPES,
) -> None:
    """
    Depth-first: the declaration itself, then its nested declarations.
    Nested types are flattened into the same namespace (no Outer.Inner names).
    """
    build_entity(decl, ctx, ignored)
    for inner in decl.nested:
        visit_declaration(inner, ctx, ignored)


def build_diagram(
    declarations: Iterable[TypeDeclaration],
    ctx: BuildContext | None = None,
    ignored: AbstractSet[str] = IGNORED_TYPES,
) -> BuildContext:
    ctx = ctx if ctx is not None else BuildContext()
    for decl in declarations:
        visit_declaration(decl, ctx, ignored)

    logger.debug(
        "Built %d entities, %d associations",
        len(ctx.entities),
        len(ctx.association_lines),
    )
    return ctx

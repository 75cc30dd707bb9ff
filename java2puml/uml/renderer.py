from __future__ import annotations

from typing import TYPE_CHECKING, List

from java2puml.cir.model import AssociationEdge, DiagramEntity, SpecializedGenericEntity

if TYPE_CHECKING:
    from java2puml.uml.builder import BuildContext

START_MARKER = "@startuml"
END_MARKER = "@enduml"


def render_stub(stub: SpecializedGenericEntity) -> str:
    return f'class "{stub.label}" as {stub.alias} {{ }}'


def render_header(entity: DiagramEntity) -> str:
    header = f"{entity.kind} {entity.display_name}"
    if entity.extends:
        header += " extends " + ", ".join(entity.extends)
    if entity.implements:
        header += " implements " + ", ".join(entity.implements)
    return header


def render_entity(entity: DiagramEntity) -> str:
    """
    One class/interface block, followed by the stubs for its specialized
    generic supertypes:

        class Order_OrderRepository extends Repository_Order {
        \t+ void save(Order)
        }
        class "Repository<Order>" as Repository_Order { }
    """
    lines: List[str] = [render_header(entity) + " {"]
    for member in entity.member_lines:
        lines.append(f"\t{member}")
    lines.append("}")

    for stub in entity.specializations:
        lines.append(render_stub(stub))

    return "\n".join(lines) + "\n"


def render_association(edge: AssociationEdge) -> str:
    if edge.multiplicity == "many":
        return f'{edge.owner} - "*" {edge.target}'
    return f"{edge.owner} - {edge.target}"


def render_document(ctx: "BuildContext") -> str:
    """
    Full PlantUML document: entity blocks in visit order, then association
    lines in the order they were first seen.
    """
    parts: List[str] = [START_MARKER + "\n"]
    for entity in ctx.entities:
        parts.append(render_entity(entity))
    for line in ctx.association_lines:
        parts.append(line + "\n")
    parts.append(END_MARKER + "\n")
    return "".join(parts)

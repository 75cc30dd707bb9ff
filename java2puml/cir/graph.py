from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any, Dict

import networkx as nx  # type: ignore

if TYPE_CHECKING:
    from java2puml.uml.builder import BuildContext


class CIRGraph:
    """
    Typed multi-graph view of a built diagram.
    Nodes: DiagramEntity, SpecializedGenericEntity, Referenced
    Edges: INHERITS, IMPLEMENTS, SPECIALIZES, ASSOCIATES
    """
    def __init__(self) -> None:
        self.g = nx.MultiDiGraph()

    def add_node(self, node_id: str, kind: str, payload: Any) -> None:
        self.g.add_node(node_id, kind=kind, payload=payload)

    def ensure_node(self, node_id: str) -> None:
        # names that only appear as edge endpoints (library types, raw supertypes)
        if node_id not in self.g:
            self.add_node(node_id, "Referenced", {"name": node_id})

    def add_edge(self, src: str, dst: str, etype: str, **attrs: Any) -> None:
        self.ensure_node(src)
        self.ensure_node(dst)
        self.g.add_edge(src, dst, etype=etype, **attrs)

    def to_debug_json(self) -> Dict[str, Any]:
        """
        Convert graph to JSON-like dict for debugging / API responses.
        """
        nodes = []
        for node_id, data in self.g.nodes(data=True):
            payload = data.get("payload")
            if hasattr(payload, "__dataclass_fields__"):
                attrs = asdict(payload)
            else:
                attrs = dict(payload) if isinstance(payload, dict) else {}
            nodes.append({
                "id": node_id,
                "kind": data.get("kind"),
                "attrs": attrs,
            })

        edges = []
        for src, dst, data in self.g.edges(data=True):
            extra = {k: v for k, v in data.items() if k != "etype"}
            edge = {"src": src, "dst": dst, "type": data.get("etype")}
            if extra:
                edge["attrs"] = extra
            edges.append(edge)

        return {"nodes": nodes, "edges": edges}


def build_model_graph(ctx: "BuildContext") -> CIRGraph:
    graph = CIRGraph()

    for entity in ctx.entities:
        graph.add_node(entity.display_name, "DiagramEntity", entity)
        for stub in entity.specializations:
            if stub.alias not in graph.g:
                graph.add_node(stub.alias, "SpecializedGenericEntity", stub)
                graph.add_edge(stub.alias, stub.base, "SPECIALIZES", type_arg=stub.type_arg)

    for entity in ctx.entities:
        for base in entity.extends:
            graph.add_edge(entity.display_name, base, "INHERITS")
        for iface in entity.implements:
            graph.add_edge(entity.display_name, iface, "IMPLEMENTS")

    for edge in ctx.associations:
        graph.add_edge(edge.owner, edge.target, "ASSOCIATES", multiplicity=edge.multiplicity)

    return graph

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

Kind = Literal["class", "interface"]
Multiplicity = Literal["one", "many"]


# ---------------- Parser output ----------------

@dataclass
class FieldDecl:
    name: str
    type_text: str            # declared type text (e.g. List<Item>)
    is_reference: bool = True  # class/interface type, not primitive/array


@dataclass
class MethodDecl:
    signature: str            # e.g. "double total()", "void add(Item, int)"
    modifiers: Tuple[str, ...] = ()

    @property
    def is_static(self) -> bool:
        return "static" in self.modifiers


@dataclass
class TypeDeclaration:
    kind: Kind
    name: str
    extends: List[str] = field(default_factory=list)
    implements: List[str] = field(default_factory=list)
    fields: List[FieldDecl] = field(default_factory=list)
    methods: List[MethodDecl] = field(default_factory=list)
    nested: List["TypeDeclaration"] = field(default_factory=list)
    source_file: Optional[str] = None


# ---------------- Diagram model ----------------

@dataclass(frozen=True)
class SpecializedGenericEntity:
    """
    Empty stand-in entity for one concrete instantiation of a generic
    supertype, e.g. Repository<Order> -> alias Repository_Order.
    """
    base: str
    type_arg: str

    @property
    def alias(self) -> str:
        return f"{self.base}_{self.type_arg}"

    @property
    def label(self) -> str:
        return f"{self.base}<{self.type_arg}>"


@dataclass(frozen=True)
class DiagramEntity:
    kind: Kind
    name: str
    name_prefix: str = ""
    extends: Tuple[str, ...] = ()
    implements: Tuple[str, ...] = ()
    member_lines: Tuple[str, ...] = ()
    specializations: Tuple[SpecializedGenericEntity, ...] = ()

    @property
    def display_name(self) -> str:
        return f"{self.name_prefix}{self.name}"


@dataclass(frozen=True)
class AssociationEdge:
    owner: str
    target: str
    multiplicity: Multiplicity = "one"

import logging
from typing import Any, Dict, Iterator, List, Tuple

import javalang  # type: ignore

from java2puml.cir.model import FieldDecl, MethodDecl, TypeDeclaration

logger = logging.getLogger(__name__)

_TYPE_DECLS = (javalang.tree.ClassDeclaration, javalang.tree.InterfaceDeclaration)


class JavaAdapter:
    """
    Java -> TypeDeclaration tree.

    Parses compilation units with javalang and converts every class and
    interface into a TypeDeclaration carrying:
      - extends / implements as type-expression text (e.g. Repository<Order>)
      - one FieldDecl per declared variable
      - one MethodDecl per method (constructors excluded)
      - nested classes/interfaces, including those declared inside enums,
        anonymous class bodies and method bodies

    Enums and annotation types produce no declaration of their own.
    Invalid files are skipped during project parsing and their errors
    collected.
    """

    language = "java"

    # ---------------- Type text ----------------

    def _type_argument_text(self, arg) -> str:
        if not isinstance(arg, javalang.tree.TypeArgument):
            return self._type_text(arg)
        if arg.pattern_type == "?":
            return "?"
        inner = self._type_text(arg.type)
        if arg.pattern_type in ("extends", "super"):
            return f"? {arg.pattern_type} {inner}"
        return inner

    def _qualified_text(self, t) -> str:
        # java.util.List<Item> arrives as java -> util -> List<Item> sub_types
        text = getattr(t, "name", "Object")
        args = getattr(t, "arguments", None)
        if args:
            text += "<" + ", ".join(self._type_argument_text(a) for a in args) + ">"
        sub = getattr(t, "sub_type", None)
        if sub is not None:
            text += "." + self._qualified_text(sub)
        return text

    def _type_text(self, t, extra_dims: int = 0) -> str:
        if t is None:
            return "void"
        dims = len(getattr(t, "dimensions", None) or []) + extra_dims
        return self._qualified_text(t) + "[]" * dims

    def _is_reference(self, t, extra_dims: int = 0) -> bool:
        if not isinstance(t, javalang.tree.ReferenceType):
            return False
        return not (t.dimensions or []) and not extra_dims

    # ---------------- Members ----------------

    def _signature(self, method) -> str:
        params: List[str] = []
        for p in method.parameters:
            ptype = self._type_text(p.type)
            if getattr(p, "varargs", False):
                ptype += "..."
            params.append(ptype)
        return f"{self._type_text(method.return_type)} {method.name}({', '.join(params)})"

    def _fields(self, t) -> List[FieldDecl]:
        fields: List[FieldDecl] = []
        for field in getattr(t, "fields", []):
            for decl in field.declarators:
                # C-style arrays: "Item a[];" keeps its brackets on the declarator
                extra = len(getattr(decl, "dimensions", None) or [])
                fields.append(FieldDecl(
                    name=decl.name,
                    type_text=self._type_text(field.type, extra),
                    is_reference=self._is_reference(field.type, extra),
                ))
        return fields

    def _methods(self, t) -> List[MethodDecl]:
        return [
            MethodDecl(signature=self._signature(m), modifiers=tuple(sorted(m.modifiers or ())))
            for m in getattr(t, "methods", [])
        ]

    # ---------------- Tree walk ----------------

    def _child_nodes(self, node) -> Iterator[Any]:
        """
        Direct AST children in source order, with nested lists flattened.
        """
        stack = list(reversed(getattr(node, "children", None) or []))
        while stack:
            c = stack.pop()
            if isinstance(c, (list, tuple)):
                stack.extend(reversed(c))
            elif isinstance(c, javalang.ast.Node):
                yield c

    def _nested_declarations(self, node, source_file: str | None) -> List[TypeDeclaration]:
        """
        Closest class/interface declarations below `node`; each converted
        declaration collects its own nested ones.
        """
        found: List[TypeDeclaration] = []
        for child in self._child_nodes(node):
            if isinstance(child, _TYPE_DECLS):
                found.append(self._convert(child, source_file))
            else:
                found.extend(self._nested_declarations(child, source_file))
        return found

    def _convert(self, t, source_file: str | None) -> TypeDeclaration:
        kind = "interface" if isinstance(t, javalang.tree.InterfaceDeclaration) else "class"

        # class: single ReferenceType, interface: list of them
        extends = getattr(t, "extends", None) or []
        if not isinstance(extends, list):
            extends = [extends]

        implements = getattr(t, "implements", None) or []

        return TypeDeclaration(
            kind=kind,
            name=t.name,
            extends=[self._type_text(e) for e in extends],
            implements=[self._type_text(i) for i in implements],
            fields=self._fields(t),
            methods=self._methods(t),
            nested=self._nested_declarations(t, source_file),
            source_file=source_file,
        )

    # ---------------- Parsing entry points ----------------

    def parse_to_ast(self, code: str):
        try:
            return javalang.parse.parse(code)
        except javalang.parser.JavaSyntaxError as e:
            where = ""
            position = getattr(e.at, "position", None)
            if position:
                where = f" at line {position[0]}, column {position[1]}"
            raise ValueError(f"Java syntax error{where}: {e.description}") from e
        except javalang.tokenizer.LexerError as e:
            raise ValueError(f"Java lexer error: {e}") from e
        except Exception as e:
            raise ValueError(f"Failed to parse Java code: {e}") from e

    def declarations_for_code(self, code: str, filename: str | None = None) -> List[TypeDeclaration]:
        """
        Single-compilation-unit helper. Raises ValueError on invalid Java.
        """
        tree = self.parse_to_ast(code)
        return self._nested_declarations(tree, filename)

    def declarations_for_files(
        self, files: List[str]
    ) -> Tuple[List[TypeDeclaration], List[Dict[str, str]]]:
        """
        Multi-file helper. Skips files that cannot be read or parsed but
        continues with the rest.
        """
        declarations: List[TypeDeclaration] = []
        errors: List[Dict[str, str]] = []

        for path in files:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    code = f.read()
                declarations.extend(self.declarations_for_code(code, filename=path))
            except (OSError, ValueError) as e:
                logger.error("Failed to parse file: %s: %s", path, e)
                errors.append({"file": path, "error": str(e)})
                continue

        return declarations, errors

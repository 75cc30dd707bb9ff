import pytest

from conftest import ORDER_JAVA, ORDER_REPOSITORY_JAVA, REPOSITORY_JAVA


def test_class_fields_and_methods(adapter):
    decls = adapter.declarations_for_code(ORDER_JAVA, "Order.java")

    assert len(decls) == 1
    order = decls[0]
    assert order.kind == "class"
    assert order.name == "Order"
    assert order.source_file == "Order.java"
    assert [(f.name, f.type_text, f.is_reference) for f in order.fields] == [
        ("items", "List<LineItem>", True),
        ("customer", "Customer", True),
        ("note", "String", True),
    ]
    assert [m.signature for m in order.methods] == ["double total()"]
    assert not order.methods[0].is_static


def test_interface_and_generic_supertype(adapter):
    repo = adapter.declarations_for_code(REPOSITORY_JAVA)[0]
    order_repo = adapter.declarations_for_code(ORDER_REPOSITORY_JAVA)[0]

    assert repo.kind == "interface"
    assert repo.name == "Repository"
    assert order_repo.extends == ["Repository<Order>"]
    assert order_repo.implements == []


def test_extends_and_implements_text(adapter):
    code = """
    public class OrderService extends BaseService<Order, Long>
            implements Service<Order>, java.io.Serializable {
    }
    interface Both extends Left, Right<Map<String, Item>> {
    }
    """
    service, both = adapter.declarations_for_code(code)

    assert service.extends == ["BaseService<Order, Long>"]
    assert service.implements == ["Service<Order>", "java.io.Serializable"]
    assert both.kind == "interface"
    assert both.extends == ["Left", "Right<Map<String, Item>>"]


def test_one_field_per_declarator(adapter):
    code = """
    class Point {
        private int x, y;
        private Point origin, target;
    }
    """
    point = adapter.declarations_for_code(code)[0]

    assert [(f.name, f.type_text, f.is_reference) for f in point.fields] == [
        ("x", "int", False),
        ("y", "int", False),
        ("origin", "Point", True),
        ("target", "Point", True),
    ]


def test_arrays_and_wildcards(adapter):
    code = """
    class Holder {
        Item[] items;
        int[][] grid;
        List<? extends Item> some;
        Map<?, Item> any;
        List<int[]> rows;
    }
    """
    holder = adapter.declarations_for_code(code)[0]

    assert [(f.type_text, f.is_reference) for f in holder.fields] == [
        ("Item[]", False),
        ("int[][]", False),
        ("List<? extends Item>", True),
        ("Map<?, Item>", True),
        ("List<int[]>", True),
    ]


def test_qualified_type_text(adapter):
    code = """
    class Ledger {
        java.util.List<Entry> entries;
        Map.Entry<String, Entry> last;
    }
    """
    ledger = adapter.declarations_for_code(code)[0]

    assert [f.type_text for f in ledger.fields] == [
        "java.util.List<Entry>",
        "Map.Entry<String, Entry>",
    ]


def test_method_signatures(adapter):
    code = """
    public class Calculator {
        public Calculator() { }
        public static int add(int a, int b) { return a + b; }
        private void log(String... parts) { }
        protected List<Item> find(Map<String, Item> index, long[] ids) throws Exception { return null; }
        public <T> T first(List<T> values) { return values.get(0); }
    }
    """
    calc = adapter.declarations_for_code(code)[0]

    assert [m.signature for m in calc.methods] == [
        "int add(int, int)",
        "void log(String...)",
        "List<Item> find(Map<String, Item>, long[])",
        "T first(List<T>)",
    ]
    assert [m.is_static for m in calc.methods] == [True, False, False, False]


def test_interface_methods_and_constants(adapter):
    code = """
    public interface Repository<T> {
        int PAGE_SIZE = 20;
        T findById(Long id);
        List<T> findAll();
    }
    """
    repo = adapter.declarations_for_code(code)[0]

    assert [(f.name, f.type_text) for f in repo.fields] == [("PAGE_SIZE", "int")]
    assert [m.signature for m in repo.methods] == ["T findById(Long)", "List<T> findAll()"]


def test_nested_declarations(adapter):
    code = """
    public class Outer {
        private Inner inner;

        static class Inner {
            interface Deep { }
        }

        enum Mode {
            ON, OFF;
            class ModeHelper { }
        }

        void run() {
            class Local { }
        }
    }
    class Sibling { }
    """
    decls = adapter.declarations_for_code(code)

    assert [d.name for d in decls] == ["Outer", "Sibling"]
    outer = decls[0]
    assert [d.name for d in outer.nested] == ["Inner", "ModeHelper", "Local"]
    assert [d.name for d in outer.nested[0].nested] == ["Deep"]
    assert outer.nested[0].nested[0].kind == "interface"
    # nested members are not merged into the parent
    assert [f.name for f in outer.fields] == ["inner"]
    assert [m.signature for m in outer.methods] == ["void run()"]


def test_top_level_enum_produces_no_declaration(adapter):
    code = """
    enum Status {
        OPEN, CLOSED;
        static class Codes { }
    }
    """
    decls = adapter.declarations_for_code(code)

    assert [d.name for d in decls] == ["Codes"]


@pytest.mark.parametrize("code", ["class {", "public class A { int x = ; }", "class A { void f( }"])
def test_invalid_code_raises_value_error(adapter, code):
    with pytest.raises(ValueError):
        adapter.declarations_for_code(code)


def test_files_with_errors_are_skipped(adapter, write_java, caplog):
    good = write_java("src/Good.java", "class Good { Other other; }")
    bad = write_java("src/Bad.java", "class Bad {")
    missing = str(good.parent / "Missing.java")

    decls, errors = adapter.declarations_for_files([str(bad), str(good), missing])

    assert [d.name for d in decls] == ["Good"]
    assert [e["file"] for e in errors] == [str(bad), missing]
    assert "Failed to parse file" in caplog.text


def test_c_style_array_fields(adapter):
    code = "class H { Item a[]; Item[] b; int c[][]; Item d, e[]; }"
    holder = adapter.declarations_for_code(code)[0]

    assert [(f.name, f.type_text, f.is_reference) for f in holder.fields] == [
        ("a", "Item[]", False),
        ("b", "Item[]", False),
        ("c", "int[][]", False),
        ("d", "Item", True),
        ("e", "Item[]", False),
    ]

from pathlib import Path

import pytest

from java2puml.adapters.java_adapter import JavaAdapter


ORDER_JAVA = """
package shop.models;

import java.util.List;

public class Order {
    private List<LineItem> items;
    private Customer customer;
    private String note;

    public double total() {
        return 0.0;
    }
}
"""

REPOSITORY_JAVA = """
package shop.models.repositories;

public interface Repository<T> {
}
"""

ORDER_REPOSITORY_JAVA = """
package shop.models.repositories;

public class OrderRepository extends Repository<Order> {
}
"""


@pytest.fixture
def adapter() -> JavaAdapter:
    return JavaAdapter()


@pytest.fixture
def write_java(tmp_path):
    def _write(rel_path: str, code: str) -> Path:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
        return path

    return _write

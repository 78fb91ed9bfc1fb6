from typing import Any

import pytest


@pytest.fixture(scope="function")
def nested_payload() -> dict[str, Any]:
    return {
        "id": 7,
        "name": "order-7",
        "lines": [
            {"sku": "A-1", "qty": 2},
            {"sku": "B-2", "qty": 1},
        ],
        "note": "ignored",
    }


@pytest.fixture(scope="function")
def broken_payload() -> dict[str, Any]:
    return {
        "id": "7",
        "name": "order-7",
        "lines": [
            {"sku": "A-1", "qty": "two"},
            {"sku": 3, "qty": 1},
            {"sku": "C-3", "qty": 4},
        ],
    }

import json

import pytest
from loguru import logger

from receipt_split.class_models import Receipt


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by the CLI so they do not outlive a test's captured stderr."""
    yield
    logger.remove()


@pytest.fixture
def simple_receipt_data():
    """One item shared equally by two people, with tax."""
    return {
        "items": {"A": {"price": 10, "people": {"x": 1, "y": 1}}},
        "extras": {"tax": 2},
        "total": 12,
    }


@pytest.fixture
def dinner_receipt_data():
    """Two items, uneven weights, tax and tip totalling $10 on $40 of food."""
    return {
        "items": {
            "salad": {"price": 10.0, "people": {"ben": 1, "cy": 1}},
            "pasta": {"price": 30.0, "people": {"ana": 2, "ben": 1}},
        },
        "extras": {"tip": 6.0, "tax": 4.0},
        "total": 50.0,
    }


@pytest.fixture
def simple_receipt(simple_receipt_data):
    return Receipt.model_validate(simple_receipt_data)


@pytest.fixture
def dinner_receipt(dinner_receipt_data):
    return Receipt.model_validate(dinner_receipt_data)


@pytest.fixture
def write_json(tmp_path):
    """Write an object as JSON under tmp_path and return the file path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write

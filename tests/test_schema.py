import json

from receipt_split.schema import JSON_SCHEMA_DIALECT, receipt_schema, write_schema


def test_schema_describes_receipt():
    schema = receipt_schema()

    assert schema["$schema"] == JSON_SCHEMA_DIALECT
    assert schema["type"] == "object"
    assert set(schema["required"]) == {"items", "extras", "total"}

    props = schema["properties"]
    assert set(props) == {"items", "extras", "total"}
    assert props["items"]["type"] == "object"
    assert props["items"]["additionalProperties"] == {"$ref": "#/$defs/Item"}
    assert props["extras"]["type"] == "object"
    assert props["extras"]["additionalProperties"] == {"type": "number"}
    assert props["total"]["type"] == "number"


def test_schema_describes_item():
    item = receipt_schema()["$defs"]["Item"]

    assert item["type"] == "object"
    assert set(item["required"]) == {"price", "people"}
    assert item["properties"]["price"]["type"] == "number"
    assert item["properties"]["people"]["type"] == "object"
    assert item["properties"]["people"]["additionalProperties"] == {"type": "number"}


def test_schema_is_stable():
    assert receipt_schema() == receipt_schema()
    assert json.dumps(receipt_schema()) == json.dumps(receipt_schema())


def test_write_schema_to_path(tmp_path):
    target = tmp_path / "schema.json"

    written = write_schema(target)

    assert written == target
    assert json.loads(target.read_text(encoding="utf-8")) == receipt_schema()
    assert target.read_text(encoding="utf-8").startswith('{\n  "$schema"')


def test_write_schema_defaults_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    written = write_schema()

    assert (tmp_path / written.name).exists()
    assert written.name == "receipt_schema.json"

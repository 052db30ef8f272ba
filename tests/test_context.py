import pytest

from templatetree.context import (
    DataError,
    build_context,
    coerce_value,
    load_data_file,
    set_value,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("true", True),
        ("False", False),
        ("42", 42),
        ("-7", -7),
        ("3.5", 3.5),
        ("0755", 755),
        ("hello", "hello"),
        ("1.2.3", "1.2.3"),
    ],
)
def test_coerce_value(raw, expected):
    assert coerce_value(raw) == expected


def test_load_json(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{"Title": "Manual", "Chapters": [1, 2]}')

    assert load_data_file(path) == {"Title": "Manual", "Chapters": [1, 2]}


def test_load_yaml(tmp_path):
    path = tmp_path / "data.yaml"
    path.write_text("Title: Manual\nAuthor:\n  Name: Frank\n")

    assert load_data_file(path) == {"Title": "Manual", "Author": {"Name": "Frank"}}


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "data.yml"
    path.write_text("")

    assert load_data_file(path) == {}


@pytest.mark.parametrize(
    "name,content",
    [("list.json", "[1, 2]"), ("broken.json", "{"), ("broken.yaml", "a: [")],
)
def test_load_rejects_bad_files(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)

    with pytest.raises(DataError):
        load_data_file(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(DataError):
        load_data_file(tmp_path / "missing.json")


def test_set_value_with_dotted_key():
    data = {"Author": {"Name": "Frank"}}

    set_value(data, "Author.Email", "frank@example.com")
    set_value(data, "Version", 2)

    assert data == {
        "Author": {"Name": "Frank", "Email": "frank@example.com"},
        "Version": 2,
    }


@pytest.mark.parametrize("key", ["", "a..b", ".a"])
def test_set_value_rejects_bad_keys(key):
    with pytest.raises(DataError):
        set_value({}, key, 1)


def test_set_value_through_scalar():
    with pytest.raises(DataError):
        set_value({"a": 1}, "a.b", 2)


def test_build_context_order(tmp_path, monkeypatch):
    path = tmp_path / "data.json"
    path.write_text('{"Title": "From file", "Draft": true}')
    monkeypatch.setenv("TEMPLATETREE_TEST_VAR", "set")

    context = build_context(
        path, [("Title", "Override"), ("Pages", "12")], include_env=True
    )

    assert context["Title"] == "Override"
    assert context["Draft"] is True
    assert context["Pages"] == 12
    assert context["env"]["TEMPLATETREE_TEST_VAR"] == "set"


def test_build_context_without_sources():
    assert build_context() == {}

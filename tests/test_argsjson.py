import json

import pytest

from paxkit.argsjson import parse_json_file, parse_json_string, parse_json_value

SAMPLE = (
    "{ \n"
    '\t"parameter-name": "argument1", \n'
    '\t"group-name": {\n'
    '\t\t"parameter-name": "argument2", \n'
    '\t\t"subname": { \n'
    '\t\t\t"name-id": "name" \n'
    "\t\t} \n"
    "\t} \n"
    "} \n"
)

CORRECT = [
    "from json",
    "parameter-name",
    "argument2",
    "name-id",
    "name",
    "parameter-name",
    "argument1",
]


def test_read_json_string():
    assert parse_json_string(SAMPLE) == CORRECT


def test_read_json_file(tmp_path):
    path = tmp_path / "arguments.json"
    path.write_text(SAMPLE, encoding="utf-8")
    assert parse_json_file(path) == CORRECT
    assert parse_json_file(str(path)) == CORRECT


def test_value_matches_string():
    assert parse_json_value(json.loads(SAMPLE)) == parse_json_string(SAMPLE)


def test_null_gives_only_the_key():
    assert parse_json_value({"flag": None}) == ["from json", "flag"]


def test_array_repeats_key_with_encoded_items():
    assert parse_json_value({"multi": ["abc", 3]}) == [
        "from json",
        "multi",
        '"abc"',
        "multi",
        "3",
    ]


def test_exists_filters_keys():
    result = parse_json_value(
        {"keep": "a", "skip": "b", "list": ["x"]},
        lambda key: key != "skip" and key != "list",
    )
    assert result == ["from json", "keep", "a"]


def test_top_level_string_has_no_key():
    assert parse_json_string('"alone"') == ["from json", "alone"]


def test_non_string_scalar_raises():
    with pytest.raises(TypeError):
        parse_json_value({"number": 12})
    with pytest.raises(TypeError):
        parse_json_string('{"flag": true}')


def test_invalid_json_raises():
    with pytest.raises(json.JSONDecodeError):
        parse_json_string("{ not json")
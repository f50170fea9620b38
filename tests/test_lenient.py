from __future__ import annotations

import pytest

from jsonlens.lenient import LenientParser, parse_lenient


def _props(node):
    return [(prop.key, prop.value.value, prop.is_key_error) for prop in node.children]


def test_missing_comma_between_properties_recovers() -> None:
    node = parse_lenient('{"a":1 "b":2}')

    assert node.type == "object"
    assert _props(node) == [("a", 1, False), ("b", 2, False)]
    assert node.is_error is False


def test_unquoted_key_is_flagged_on_property() -> None:
    node = parse_lenient("{a:1}")

    assert node.type == "object"
    assert len(node.children) == 1
    prop = node.children[0]
    assert prop.key == "a"
    assert prop.is_key_error is True
    assert prop.value.type == "number"
    assert prop.value.value == 1
    assert node.is_error is False


def test_unclosed_object_is_flagged() -> None:
    node = parse_lenient('{"a":1')

    assert node.type == "object"
    assert node.is_error is True
    assert _props(node) == [("a", 1, False)]


def test_missing_colon_flags_key_and_keeps_value() -> None:
    node = parse_lenient('{"a" 1, "b": 2}')

    assert _props(node) == [("a", 1, True), ("b", 2, False)]
    assert node.is_error is False


def test_unquoted_value_is_error_string() -> None:
    node = parse_lenient('{"level": warn}')

    value = node.children[0].value
    assert value.type == "string"
    assert value.value == "warn"
    assert value.is_error is True
    assert node.is_error is False


def test_empty_object_and_array() -> None:
    assert parse_lenient("{}").children == []
    assert parse_lenient("{ }").is_error is False
    assert parse_lenient("[]").items == []
    assert parse_lenient("[ ]").is_error is False


def test_array_missing_comma_recovers() -> None:
    node = parse_lenient("[1 2, 3]")

    assert node.type == "array"
    assert [item.value for item in node.items] == [1, 2, 3]
    assert node.is_error is False


def test_unclosed_array_is_flagged() -> None:
    node = parse_lenient('[1, "two"')

    assert node.type == "array"
    assert node.is_error is True
    assert [item.value for item in node.items] == [1, "two"]


def test_array_ending_after_comma_is_flagged() -> None:
    node = parse_lenient("[1,   ")

    assert node.is_error is True
    assert [item.value for item in node.items] == [1]


def test_stray_character_in_array_is_skipped() -> None:
    node = parse_lenient("[1 : 2]")

    assert [item.value for item in node.items] == [1, 2]
    assert node.is_error is False


def test_elided_array_item_is_kept_as_undefined() -> None:
    node = parse_lenient("[1,,2]")

    assert [item.type for item in node.items] == ["number", "undefined", "number"]
    assert [item.value for item in node.items] == [1, None, 2]
    assert node.is_error is False


def test_lone_comma_array_keeps_undefined_item() -> None:
    node = parse_lenient("[,]")

    assert [item.type for item in node.items] == ["undefined"]
    assert node.is_error is False


def test_array_with_only_stray_closer_skips_it() -> None:
    node = parse_lenient("[}]")

    assert node.items == []
    assert node.is_error is False


def test_stray_character_in_object_key_position_is_skipped() -> None:
    node = parse_lenient('{, "a": 1}')

    assert _props(node) == [("a", 1, False)]
    assert node.is_error is False


def test_object_value_missing_before_close_is_undefined() -> None:
    node = parse_lenient('{"a":}')

    assert node.children[0].value.type == "undefined"
    assert node.is_error is False


def test_truncated_string_returns_partial_text_unflagged() -> None:
    node = parse_lenient('{"msg": "hello wor')

    value = node.children[0].value
    assert value.type == "string"
    assert value.value == "hello wor"
    assert value.is_error is False
    assert node.is_error is True


def test_string_escapes_are_copied_not_decoded() -> None:
    node = parse_lenient('"a\\"b\\nc"')

    assert node.type == "string"
    assert node.value == 'a"bnc'


def test_single_quoted_strings_and_keys() -> None:
    node = parse_lenient("{'name': 'it\\'s'}")

    assert _props(node) == [("name", "it's", False)]


def test_empty_quoted_key_is_kept() -> None:
    node = parse_lenient('{"": 1}')

    assert _props(node) == [("", 1, False)]


def test_duplicate_keys_are_retained_in_order() -> None:
    node = parse_lenient('{"a": 1, "a": 2,}')

    assert _props(node) == [("a", 1, False), ("a", 2, False)]


def test_keywords() -> None:
    node = parse_lenient("[true, false, null]")

    assert [(item.type, item.value) for item in node.items] == [
        ("boolean", True),
        ("boolean", False),
        ("null", None),
    ]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("42", 42),
        ("-7", -7),
        ("3.5", 3.5),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("-2.5E-1", -0.25),
        ("1-2", 0),
        ("-", 0),
    ],
)
def test_numbers(raw: str, expected) -> None:
    node = parse_lenient(raw)

    assert node.type == "number"
    assert node.value == expected
    assert node.is_error is False


def test_nested_containers() -> None:
    node = parse_lenient('{"a": [1, {"b": [true]}], "c": {}}')

    assert node.type == "object"
    inner = node.children[0].value
    assert inner.type == "array"
    assert inner.items[1].children[0].key == "b"
    assert inner.items[1].children[0].value.items[0].value is True
    assert node.children[1].value.type == "object"
    assert node.has_errors() is False


def test_has_errors_finds_nested_flags() -> None:
    node = parse_lenient('{"a": [1, {b: 2}]}')

    assert node.is_error is False
    assert node.has_errors() is True


def test_empty_input_is_undefined() -> None:
    assert parse_lenient("").type == "undefined"
    assert parse_lenient("   \n").type == "undefined"


def test_bare_token_is_error_string() -> None:
    node = parse_lenient("hello world")

    assert node.type == "string"
    assert node.value == "hello"
    assert node.is_error is True


def test_structural_character_alone_is_undefined() -> None:
    assert parse_lenient(":").type == "undefined"


def test_deep_nesting_falls_back_to_raw_string() -> None:
    text = "[" * 100_000

    node = parse_lenient(text)

    assert node.type == "string"
    assert node.value == text
    assert node.is_error is True


def test_parser_instance_is_reusable() -> None:
    parser = LenientParser()

    first = parser.parse('{"a": 1')
    second = parser.parse("[2]")

    assert first.is_error is True
    assert second.type == "array"
    assert second.items[0].value == 2
    assert second.is_error is False

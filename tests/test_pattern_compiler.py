import regex

from alert_parser.pattern_compiler import (
    InvalidPatternError,
    PatternSpec,
    captured_value,
    decode_pattern_list,
    load_patterns,
    safe_search,
    validate_pattern_list,
)


def test_from_notation_reads_pattern_and_flags():
    spec = PatternSpec.from_notation(r"/Rs\.?\s*([0-9]+)/gi")
    assert spec.pattern == r"Rs\.?\s*([0-9]+)"
    assert spec.flags == "gi"
    assert spec.to_notation() == r"/Rs\.?\s*([0-9]+)/gi"


def test_bare_string_is_a_pattern():
    spec = PatternSpec.from_notation("amount")
    assert spec.pattern == "amount"
    assert spec.flags == "i"


def test_pattern_may_contain_slashes():
    spec = PatternSpec.from_notation(r"/UPI\/P2M\/(\d+)/i")
    assert spec.pattern == r"UPI\/P2M\/(\d+)"


def test_flags_always_include_ignorecase():
    flags = PatternSpec("x", flags="ms").regex_flags
    assert flags & regex.IGNORECASE
    assert flags & regex.MULTILINE
    assert flags & regex.DOTALL


def test_compile_rejects_bad_syntax():
    try:
        PatternSpec("(unclosed").compile()
    except InvalidPatternError as e:
        assert "unclosed" in str(e)
    else:
        raise AssertionError("expected InvalidPatternError")


def test_decode_accepts_json_and_lists():
    assert decode_pattern_list('["/a/i", "/b/i"]') == ["/a/i", "/b/i"]
    assert decode_pattern_list(["/a/i"]) == ["/a/i"]
    assert decode_pattern_list(None) == []


def test_malformed_json_is_skipped():
    assert load_patterns("{not json") == []
    assert load_patterns('{"a": 1}') == []
    assert [s.pattern for s in load_patterns('["ok", 5]')] == ["ok"]


def test_validate_pattern_list_reports_each_bad_entry():
    assert validate_pattern_list('["/([0-9]+)/i"]') == []
    errors = validate_pattern_list('["/ok/i", "/(broken/i", "/[z-a]/"]')
    assert len(errors) == 2
    assert errors[0].startswith("Pattern 2")
    assert validate_pattern_list("not json")


def test_safe_search_treats_invalid_regex_as_no_match():
    assert safe_search(PatternSpec("(broken"), "anything", timeout=0.1) is None


def test_captured_value_prefers_first_group():
    match = PatternSpec(r"Rs\.\s*([0-9]+)").compile().search("Rs. 45 paid")
    assert captured_value(match) == "45"

    whole = PatternSpec(r"upi").compile().search("paid via UPI")
    assert captured_value(whole) == "UPI"

    assert captured_value(None) is None

import io

import pytest

from inimap import Document, EncodingError, MalformedHeaderError, ParserOptions, parse, parse_stream
from inimap.parsers import LineKind, classify_lines


def test_names_fold_but_values_keep_case() -> None:
    a = parse("[Section]\nKey=Value")
    b = parse("[section]\nkey=Value")
    assert a == b
    assert a["section"]["key"] == "Value"
    assert parse("K=VaLuE").default["k"] == "VaLuE"


def test_last_write_wins() -> None:
    doc = parse("[s]\na=1\na=2")
    assert doc["s"]["a"] == "2"
    assert len(doc["s"]) == 1


def test_valueless_and_empty_values_differ() -> None:
    doc = parse("[s]\na\nb=\nc =   ")
    assert doc["s"]["a"] is None
    assert doc["s"]["b"] == ""
    assert doc["s"]["c"] == ""
    assert doc["s"]["a"] != doc["s"]["b"]
    assert not doc["s"].has_value("a")
    assert doc["s"].has_value("b")


def test_properties_before_first_header_go_to_default() -> None:
    doc = parse("x=1\n[s]\ny=2")
    assert doc.default == {"x": "1"}
    assert doc["s"] == {"y": "2"}
    assert doc.sections() == ["default", "s"]


def test_default_section_always_present() -> None:
    doc = parse("")
    assert list(doc) == ["default"]
    assert len(doc.default) == 0

    doc = parse("[only]\nk=v")
    assert "default" in doc
    assert len(doc.default) == 0


def test_header_closes_at_last_bracket() -> None:
    doc = parse("[a]b]\nk=v")
    assert "a]b" in doc
    assert doc["a]b"]["k"] == "v"


def test_text_after_closing_bracket_is_ignored() -> None:
    doc = parse("[a] trailing\nk=v")
    assert doc["a"] == {"k": "v"}


def test_unterminated_header_fails() -> None:
    with pytest.raises(MalformedHeaderError) as exc:
        parse("[unterminated\nk=v")
    assert exc.value.line_number == 1
    assert exc.value.line == "[unterminated"
    assert "line 1" in str(exc.value)


def test_unterminated_header_reports_its_own_line() -> None:
    with pytest.raises(MalformedHeaderError) as exc:
        parse("a=1\n\n[ok]\n  [bad  \n")
    assert exc.value.line_number == 4


def test_bare_closing_bracket_is_a_key() -> None:
    doc = parse("]")
    assert doc.default == {"]": None}


def test_separate_parses_share_nothing() -> None:
    text = "[s]\nk=v"
    first = parse(text)
    second = parse(text)

    assert first == second
    assert first is not second
    assert first["s"] is not second["s"]

    copy = first.to_dict()
    copy["s"]["k"] = "changed"
    copy["default"]["new"] = "x"
    assert first["s"]["k"] == "v"
    assert second["s"]["k"] == "v"
    assert "new" not in first.default


def test_edge_whitespace_is_trimmed() -> None:
    doc = parse("[  s  ]\n  k  =  v  ")
    assert doc["s"]["k"] == "v"

    doc = parse("[  My   Section ]\n  Some Key  =  v  v  ")
    assert doc["my   section"]["some key"] == "v  v"


def test_crlf_and_blank_lines() -> None:
    doc = parse("\r\n[s]\r\n\r\n   \t \r\nk = v\r\nbare\r\n")
    assert doc["s"] == {"k": "v", "bare": None}


def test_first_delimiter_splits() -> None:
    doc = parse("url = http://example.org/?a=b")
    assert doc.default["url"] == "http://example.org/?a=b"


def test_empty_key_is_accepted() -> None:
    doc = parse("=value")
    assert doc.default[""] == "value"


def test_redeclared_default_merges() -> None:
    doc = parse("a=1\n[s]\nx=1\n[DEFAULT]\nb=2\n[ Default ]\nc")
    assert doc.default == {"a": "1", "b": "2", "c": None}
    assert doc.sections() == ["default", "s"]


def test_revisiting_a_section_resumes_it() -> None:
    doc = parse("[a]\nx=1\n[b]\ny=2\n[A]\nz=3\nx=4")
    assert doc["a"] == {"x": "4", "z": "3"}
    assert doc["b"] == {"y": "2"}


def test_empty_header_name() -> None:
    doc = parse("[]\nk=v")
    assert doc[""] == {"k": "v"}


def test_bytes_input_and_bom() -> None:
    doc = parse("\ufeff[s]\nk=v".encode("utf-8"))
    assert doc["s"]["k"] == "v"

    doc = parse("\ufeffk=v")
    assert doc.default == {"k": "v"}


def test_invalid_utf8_bytes() -> None:
    with pytest.raises(EncodingError):
        parse(b"[s]\nk=\xff\xfe")


def test_parse_stream_text_and_binary() -> None:
    assert parse_stream(io.StringIO("[s]\nk=v"))["s"]["k"] == "v"
    assert parse_stream(io.BytesIO(b"[s]\nk=v"))["s"]["k"] == "v"


def test_lookup_helpers_normalize_names() -> None:
    doc = parse("[Server]\nHost = example.org\nDebug")
    assert doc.get_value("  SERVER ", "HOST") == "example.org"
    assert doc.get_value("server", "debug") is None
    assert doc.has_key("server", "debug")
    assert not doc.has_key("server", "port")
    assert doc.get_value("server", "port", fallback="80") == "80"
    assert doc.get_value("client", "host", fallback="x") == "x"


def test_to_dict_matches_nested_map_shape() -> None:
    doc = parse("x=1\n[s]\na\nb=")
    assert doc.to_dict() == {"default": {"x": "1"}, "s": {"a": None, "b": ""}}
    assert doc == {"default": {"x": "1"}, "s": {"a": None, "b": ""}}


def test_document_is_read_only() -> None:
    doc = parse("[s]\nk=v")
    with pytest.raises(TypeError):
        doc["s"] = doc.default  # type: ignore[index]
    with pytest.raises(TypeError):
        doc["s"]["k"] = "x"  # type: ignore[index]


def test_classify_lines_records() -> None:
    records = list(classify_lines("\n[S]\nk = v\nbare\n"))
    assert [r.kind for r in records] == [LineKind.HEADER, LineKind.ENTRY, LineKind.ENTRY]
    assert records[0].name == "s"
    assert records[0].line == 2
    assert (records[1].name, records[1].value, records[1].line) == ("k", "v", 3)
    assert records[2].value is None


# ----------------------------
# Options
# ----------------------------

def test_comment_symbols_strip_to_end_of_line() -> None:
    opts = ParserOptions(comment_symbols=[";", "#"])
    doc = parse("; heading comment\nk = v ; trailing\n[s] # note\n# k2 = hidden\nbare # x", options=opts)
    assert doc.default == {"k": "v"}
    assert doc["s"] == {"bare": None}


def test_comments_are_plain_text_by_default() -> None:
    doc = parse("k = v ; not a comment\n# hash")
    assert doc.default == {"k": "v ; not a comment", "# hash": None}


def test_case_sensitive_names() -> None:
    opts = ParserOptions(case_sensitive=True)
    doc = parse("[Sec]\nKey = V\n[sec]\nkey = w", options=opts)
    assert doc["Sec"] == {"Key": "V"}
    assert doc["sec"] == {"key": "w"}
    assert doc.get_value(" Sec ", "Key") == "V"
    assert doc.get_value("SEC", "Key") is None


def test_custom_default_section() -> None:
    opts = ParserOptions(default_section="General")
    doc = parse("x=1\n[GENERAL]\ny=2", options=opts)
    assert doc.default_section == "general"
    assert doc.default == {"x": "1", "y": "2"}
    assert "default" not in doc


def test_extra_delimiters_use_earliest() -> None:
    opts = ParserOptions(delimiters=["=", ":"])
    doc = parse("a: b = c\nd = e:f", options=opts)
    assert doc.default == {"a": "b = c", "d": "e:f"}


def test_malformed_header_still_fails_with_options() -> None:
    opts = ParserOptions(comment_symbols=[";"])
    with pytest.raises(MalformedHeaderError):
        parse("[s ; ]", options=opts)


def test_document_repr_and_type() -> None:
    doc = parse("[s]\nk=v")
    assert isinstance(doc, Document)
    assert "'s'" in repr(doc)


def test_options_normalize_matches_parser_names() -> None:
    assert ParserOptions().normalize("  My Section ") == "my section"
    assert ParserOptions(case_sensitive=True).normalize("  My Section ") == "My Section"
    doc = parse("[  My Section ]\nk=v")
    assert ParserOptions().normalize("  MY SECTION") in doc


def test_edge_trimming_follows_str_strip() -> None:
    # str.strip() also drops the ASCII separators \x1c-\x1f
    doc = parse("k = v\x1c\n\x1fname\x1e = w")
    assert doc.default == {"k": "v", "name": "w"}

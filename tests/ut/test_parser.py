import io
import logging

import pytest

from desiredcaps import CapabilityParser, CollectingSink, ParserSettings, StreamSink, convert
from desiredcaps.core.parser import strip_quotes


@pytest.fixture
def sink():
    return CollectingSink()


@pytest.fixture
def parser(sink):
    return CapabilityParser(sink=sink)


@pytest.mark.ut
def test_empty_and_absent_input():
    assert convert("") == {}
    assert convert(None) == {}
    assert convert("   \t ") == {}


@pytest.mark.ut
def test_version_stays_text():
    assert convert("browserName=firefox,version=45") == {
        "browserName": "firefox",
        "version": "45",
    }


@pytest.mark.ut
def test_boolean_value():
    caps = convert("platform=LINUX,headless=true")
    assert caps == {"platform": "LINUX", "headless": True}
    assert caps["headless"] is True


@pytest.mark.ut
def test_integer_value():
    caps = convert("maxInstances=5")
    assert caps == {"maxInstances": 5}
    assert type(caps["maxInstances"]) is int


@pytest.mark.ut
def test_non_ascii_digits_are_integers():
    assert convert("a=٣,b=-١٢") == {"a": 3, "b": -12}


@pytest.mark.ut
def test_options_object_is_promoted():
    assert convert('chromeOptions={"args": ["--headless"]}') == {
        "chromeOptions": {"args": ["--headless"]},
    }


@pytest.mark.ut
def test_invalid_options_object_falls_back_to_text(parser, sink):
    assert parser.convert("chromeOptions={not valid json") == {
        "chromeOptions": "{not valid json",
    }
    assert sink.messages == []


@pytest.mark.ut
def test_promoted_options_between_other_entries():
    caps = convert('browserName=chrome, goog:chromeOptions = {"args": ["--a", "--b"]} , maxInstances=2')
    assert caps == {
        "browserName": "chrome",
        "goog:chromeOptions": {"args": ["--a", "--b"]},
        "maxInstances": 2,
    }


@pytest.mark.ut
def test_unterminated_array_keeps_text_to_end(parser, sink):
    assert parser.convert("opts=[1,2,3") == {"opts": "[1,2,3"}
    assert sink.messages == []


@pytest.mark.ut
def test_array_value_is_text():
    assert convert('args=["--a", "--b"],n=1') == {"args": '["--a", "--b"]', "n": 1}


@pytest.mark.ut
def test_quoted_values_are_unquoted():
    assert convert('a="abc"') == {"a": "abc"}
    assert convert('a="x, y",b=2') == {"a": "x, y", "b": 2}
    assert convert('a="42"') == {"a": 42}


@pytest.mark.ut
def test_escapes_inside_quotes_are_kept():
    assert convert(r'a="x\"y"') == {"a": r'x\"y'}


@pytest.mark.ut
def test_unterminated_quoted_value_strips_leading_quote():
    assert convert('a="abc') == {"a": "abc"}


@pytest.mark.ut
def test_literal_value_runs_to_next_comma():
    assert convert("url=http://x/?a=b,c=d") == {"url": "http://x/?a=b", "c": "d"}


@pytest.mark.ut
def test_escaped_comma_stays_in_literal():
    assert convert(r"a=x\,y,b=1") == {"a": r"x\,y", "b": 1}


@pytest.mark.ut
def test_whitespace_around_names_and_values_is_trimmed():
    assert convert("  a = 1 ,  b = two  ") == {"a": 1, "b": "two"}


@pytest.mark.ut
def test_last_write_wins_and_keeps_first_position():
    caps = convert("a=1,b=2,a=3")
    assert caps == {"a": 3, "b": 2}
    assert list(caps) == ["a", "b"]


@pytest.mark.ut
def test_bare_names_get_empty_text():
    assert convert("a=1,flag") == {"a": 1, "flag": ""}
    assert convert("flag=") == {"flag": ""}
    assert convert("flag=   ") == {"flag": ""}
    assert convert("a,b=1") == {"a": "", "b": 1}


@pytest.mark.ut
def test_empty_entries_are_skipped():
    assert convert("a=1,,b=2") == {"a": 1, "b": 2}
    assert convert(",") == {}


@pytest.mark.ut
def test_quoted_identifier():
    assert convert('"my name" = value') == {"my name": "value"}


@pytest.mark.ut
def test_unterminated_quoted_identifier():
    assert convert('"abc') == {"abc": ""}


@pytest.mark.ut
def test_trailing_symbols_after_quoted_identifier(parser, sink):
    assert parser.convert('"name" extra =value') == {"name": "value"}
    assert sink.messages == [
        "ERROR: Found extraneous trailing symbols after name identifier name at character 7 that were discarded.",
        "   discarded (extra ) symbols",
    ]


@pytest.mark.ut
def test_identifier_recovery_scans_to_next_equal_sign(parser, sink):
    # the comma and the next name are swallowed
    assert parser.convert('"a",b=c') == {"a": "c"}
    assert sink.messages[1] == "   discarded (,b) symbols"


@pytest.mark.ut
def test_quotes_inside_bare_identifier_do_not_fail(parser, sink):
    assert parser.convert('name "extra" =value') == {'name "extra"': "value"}
    assert sink.messages == []


@pytest.mark.ut
def test_trailing_symbols_after_quoted_value(parser, sink):
    assert parser.convert('a="abc" junk,b=1') == {"a": "abc", "b": 1}
    assert sink.messages == [
        "ERROR: Found extraneous trailing symbols after a definition value at character 8 that were discarded.",
        "   discarded (junk) symbols",
    ]


@pytest.mark.ut
def test_trailing_symbols_after_array_value(parser, sink):
    assert parser.convert("a=[1] x,b=1") == {"a": "[1]", "b": 1}
    assert sink.messages == [
        "ERROR: Found extraneous trailing symbols after a definition value at character 6 that were discarded.",
        "   discarded (x) symbols",
    ]


@pytest.mark.ut
def test_trailing_symbols_after_object_value(parser, sink):
    caps = parser.convert('fooOptions={"a": 1}x y, b=false')
    assert caps == {"fooOptions": {"a": 1}, "b": False}
    assert sink.messages[1] == "   discarded (x y) symbols"


@pytest.mark.ut
def test_nesting_depth_cap(sink):
    parser = CapabilityParser(settings=ParserSettings(max_depth=2), sink=sink)
    assert parser.convert("a=[[[1]]],b=2") == {"a": "[[[1]]]", "b": 2}
    assert sink.messages == [
        "ERROR: Nesting depth exceeds 2 in a definition value at character 4; value kept as text.",
    ]


@pytest.mark.ut
def test_entries_after_deep_value_are_kept(parser, sink):
    deep = "[" * 600 + "]" * 600
    assert parser.convert("a=" + deep + ",b=2") == {"a": deep, "b": 2}
    assert len(sink.messages) == 1


@pytest.mark.ut
def test_deep_options_value_is_not_promoted(sink):
    parser = CapabilityParser(settings=ParserSettings(max_depth=2), sink=sink)
    value = '{"a": {"b": {"c": 1}}}'
    assert parser.convert("fooOptions=" + value + ", n=1") == {"fooOptions": value, "n": 1}


@pytest.mark.ut
def test_nesting_within_cap_is_unaffected():
    settings = ParserSettings(max_depth=3)
    assert convert("a=[[[1]]],b=2", settings=settings) == {"a": "[[[1]]]", "b": 2}


@pytest.mark.ut
def test_pathological_nesting_does_not_raise():
    caps = convert("a=" + "[" * 100_000)
    assert caps["a"].startswith("[[[")


@pytest.mark.ut
def test_default_sink_logs_warnings(caplog):
    with caplog.at_level(logging.WARNING, logger="desiredcaps.diagnostics"):
        assert convert('a="x"y') == {"a": "x"}
    assert [r.levelno for r in caplog.records] == [logging.WARNING, logging.WARNING]
    assert caplog.records[1].getMessage() == "   discarded (y) symbols"


@pytest.mark.ut
def test_stream_sink_writes_lines():
    stream = io.StringIO()
    convert('a="x"y', sink=StreamSink(stream))
    lines = stream.getvalue().splitlines()
    assert lines[0].startswith("ERROR: Found extraneous trailing symbols after a definition value")
    assert lines[1] == "   discarded (y) symbols"


@pytest.mark.ut
def test_reparsing_text_values_is_stable():
    first = convert('browserName="firefox",chromeArgs={"a": 1},headless=true')
    again = convert(",".join(f"{name}={value if not isinstance(value, bool) else str(value).lower()}"
                             for name, value in first.items()))
    assert again == first


@pytest.mark.ut
def test_parser_is_reusable(parser):
    assert parser.convert("a=1") == {"a": 1}
    assert parser.convert("b=2") == {"b": 2}


@pytest.mark.ut
def test_strip_quotes():
    assert strip_quotes('"abc"') == "abc"
    assert strip_quotes('"abc') == "abc"
    assert strip_quotes('"') == ""
    assert strip_quotes("abc") == "abc"

import pytest

from dais_cmdline import ReservedParameterError, UnresolvedParameterError
from dais_cmdline.template import interpolate, parameter_names, tokenize
from dais_cmdline.types import Token


def _bracket(value):
    return f"<{value}>"


def test_tokenize_bare_and_braced_references():
    tokens = tokenize(":one :{two}")

    assert tokens == [
        Token(":one", name="one"),
        Token(" "),
        Token(":{two}", name="two"),
    ]


def test_braced_reference_can_be_followed_by_word_characters():
    assert interpolate(":{name}_suffix", {"name": "x"}, _bracket) == "<x>_suffix"


def test_bare_reference_consumes_whole_identifier():
    assert parameter_names(tokenize(":name_suffix")) == ["name_suffix"]


def test_colons_inside_words_are_literal():
    template = "'a.jpg' xc:black 'b.jpg'"

    assert parameter_names(tokenize(template)) == []
    assert interpolate(template, {}, _bracket) == template


def test_double_colon_is_literal():
    assert interpolate("Foo::Bar", {}, _bracket) == "Foo::Bar"


def test_list_values_quote_each_element():
    assert interpolate("-i :files", {"files": ["a b", "c"]}, _bracket) == "-i <a b> <c>"


def test_non_string_values_are_converted():
    assert interpolate("-q :quality", {"quality": 85}, _bracket) == "-q <85>"


def test_reference_names_are_case_sensitive():
    with pytest.raises(UnresolvedParameterError):
        interpolate(":Name", {"name": "x"}, _bracket)


def test_unresolved_reference_raises():
    with pytest.raises(UnresolvedParameterError) as exc_info:
        interpolate(":one :two", {"one": "a"}, _bracket)
    assert exc_info.value.name == "two"


@pytest.mark.parametrize("template", [":swallow_stderr", ":{expected_outcodes}"])
def test_reserved_reference_raises_even_when_not_supplied(template):
    with pytest.raises(ReservedParameterError):
        interpolate(template, {}, _bracket)


def test_validation_runs_before_quoting():
    calls = []

    def quote(value):
        calls.append(value)
        return value

    with pytest.raises(UnresolvedParameterError):
        interpolate(":one :missing", {"one": "a"}, quote)
    assert calls == []


def test_braced_reference_after_word_character():
    assert interpolate("in.png out_:{n}.png", {"n": "7"}, _bracket) == "in.png out_<7>.png"


def test_braced_reference_after_colon():
    assert interpolate("/out::{file}", {"file": "a"}, _bracket) == "/out:<a>"


def test_bare_reference_after_word_character_stays_literal():
    assert interpolate("out_:n.png", {"n": "7"}, _bracket) == "out_:n.png"


def test_unresolved_braced_reference_after_word_character_raises():
    with pytest.raises(UnresolvedParameterError) as exc_info:
        interpolate("x:{missing}", {}, _bracket)
    assert exc_info.value.name == "missing"


def test_reserved_braced_reference_after_word_character_raises():
    with pytest.raises(ReservedParameterError):
        interpolate("x:{swallow_stderr}", {}, _bracket)


def test_tokens_report_whether_they_reference_a_parameter():
    literal, reference = tokenize("a :b")
    assert literal.is_parameter is False
    assert reference.is_parameter is True


def test_bytes_values_are_decoded_before_quoting():
    assert interpolate(":one :many", {"one": b"a.jpg", "many": [b"b.png", "c.png"]}, _bracket) == "<a.jpg> <b.png> <c.png>"

import pytest
from hypothesis import given, strategies as st

from malt.errors import MaltReadError
from malt.printer import pr_str
from malt.reader.parser import TokenStream, read_str, tokenize
from malt.types import List, Map, Nil, Symbol, Vector, keyword


@pytest.mark.parametrize(
    "source,expected",
    [
        (", ( + 1, 2, ) ,", ["(", "+", "1", "2", ")"]),
        ('(str "he(ll)o" "world")', ["(", "str", '"he(ll)o"', '"world"', ")"]),
        ('"okay"', ['"okay"']),
        ('"okay', ['"okay']),  # unterminated strings survive tokenizing
        ('okay"', ["okay", '"']),
        ('"ok"ay"', ['"ok"', "ay", '"']),
        ('"', ['"']),
        ('"a\\"b"', ['"a\\"b"']),
        ("(a ; comment\n b)", ["(", "a", "b", ")"]),
        ("; only a comment", []),
        ("~@x", ["~@", "x"]),
        ("'`~^@", ["'", "`", "~", "^", "@"]),
        ("[1 {:a 2}]", ["[", "1", "{", ":a", "2", "}", "]"]),
        ("   ", []),
    ]
)
def test_tokenize(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("true", True),
        ("false", False),
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("abc", Symbol("abc")),
        ("def!", Symbol("def!")),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("<=", Symbol("<=")),
        ("=", Symbol("=")),
        ('"hello"', "hello"),
        ('""', ""),
        ('"a\\nb"', "a\\nb"),
        ('"say \\"hi\\""', 'say \\"hi\\"'),
        ('"back\\\\slash"', "back\\\\slash"),
        ('"a\\tb"', "a\\tb"),
        ('"abc\\"', "abc\\"),
        (":kw", keyword("kw")),
        ("(+ 1 2)", List([Symbol("+"), 1, 2])),
        ("()", List()),
        ("[1 [2]]", Vector([1, Vector([2])])),
        ('{"a" 1 :b (x)}', Map([("a", 1), (keyword("b"), List([Symbol("x")]))])),
        ("{}", Map()),
    ]
)
def test_read_str(source, expected):
    result = read_str(source)
    assert result == expected
    assert type(result) is type(expected)


def test_nested_lists():
    assert read_str("(+ 17 (* 25 36))") == List(
        [Symbol("+"), 17, List([Symbol("*"), 25, 36])]
    )


def test_list_and_vector_are_distinct():
    assert read_str("(1 2)") != read_str("[1 2]")


def test_only_first_form_is_read():
    assert read_str("1 2 3") == 1


def test_read_all():
    assert TokenStream(tokenize("1 (a) [b]")).read_all() == [
        1, List([Symbol("a")]), Vector([Symbol("b")])
    ]


@pytest.mark.parametrize(
    "source, message",
    [
        ("", "unexpected end of input"),
        ("; nothing", "unexpected end of input"),
        ("(1 2", "unbalanced"),
        ("[1 (2)", "unbalanced"),
        ('{"a" 1', "unbalanced"),
        ('"abc', "unbalanced string"),
        ('"', "unbalanced string"),
        (")", "unknown token"),
        ("'x", "unknown token"),
        ("1abc", "unknown token"),
        ("@", "unknown token"),
        ("{1 2}", "map key"),
        ("{sym 2}", "map key"),
        ('{"a"}', "even number"),
    ]
)
def test_read_errors(source, message):
    with pytest.raises(MaltReadError) as ex:
        read_str(source)
    assert message in str(ex.value)


# Literal source text that reads and prints back unchanged
_names = st.from_regex(r"[a-z][a-z0-9!?*\-]{0,8}", fullmatch=True).filter(
    lambda s: s not in ("nil", "true", "false")
)
# Backslashes only ever appear as escape pairs inside a string
_string_pieces = st.one_of(
    st.sampled_from(list("abcXYZ019 ()[]{};,'`~@^")),
    st.sampled_from(["\\n", "\\t", "\\\"", "\\\\", "\\q"]),
)
_atoms = st.one_of(
    st.integers().map(str),
    st.sampled_from(["nil", "true", "false", "+", "-", "*", "/", "<=", "="]),
    _names,
    _names.map(lambda s: ":" + s),
    st.lists(_string_pieces, max_size=10).map(lambda ps: '"' + "".join(ps) + '"'),
)
_literals = st.recursive(
    _atoms,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(lambda xs: "(" + " ".join(xs) + ")"),
        st.lists(children, max_size=4).map(lambda xs: "[" + " ".join(xs) + "]"),
    ),
    max_leaves=20,
)


@given(_literals)
def test_print_read_round_trip(text):
    assert pr_str(read_str(text)) == text


def test_round_trip_normalizes_whitespace_and_commas():
    assert pr_str(read_str("( 1 ,  2\n[ a\tb ] )")) == "(1 2 [a b])"


@pytest.mark.parametrize(
    "text",
    ['"a\\tb"', '"x\\qy"', '"a\\nb"', '"say \\"hi\\""', '"back\\\\slash"', '"abc\\"', '[1 "\\\\" :k]'],
)
def test_escapes_survive_round_trip(text):
    assert pr_str(read_str(text)) == text


def test_map_key_error_uses_printed_form():
    with pytest.raises(MaltReadError) as ex:
        read_str("{sym 2}")
    assert str(ex.value) == "map key must be a string or keyword, not sym"
    with pytest.raises(MaltReadError) as ex:
        read_str('{[1 "a"] 2}')
    assert str(ex.value) == 'map key must be a string or keyword, not [1 "a"]'

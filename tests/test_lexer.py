from __future__ import annotations

import pytest

from shaderpad.lexer import Lexer, Token, TokenKind, tokenize

K = TokenKind


def _kinds(src: str) -> list[tuple[str, str]]:
    return [(t.kind.name.lower(), t.text) for t in tokenize(src)]


def _rejoin(src: str) -> str:
    return "".join(t.text for t in tokenize(src))


@pytest.mark.parametrize(
    "src, kind",
    [
        ("if", "keyword"),
        ("vec3", "type"),
        ("normalize", "builtin"),
        ("myVar123", "identifier"),
        ("3.14e-2f", "number"),
        ("#define FOO 1", "preprocessor"),
        ('"a \\" b"', "string"),
        ("/* a\nb */", "comment"),
        ("<=", "operator"),
        ("?", "operator"),
        ("{", "punctuation"),
    ],
)
def test_single_token(src, kind):
    assert _kinds(src) == [(kind, src)]


def test_empty_source():
    assert tokenize("") == []


def test_line_comment_stops_before_newline():
    assert _kinds("// comment\n") == [("comment", "// comment"), ("whitespace", "\n")]


def test_end_to_end_main():
    src = "void main() {\n  gl_Position = vec4(1.0);\n}"
    assert _kinds(src) == [
        ("type", "void"),
        ("whitespace", " "),
        ("identifier", "main"),
        ("punctuation", "("),
        ("punctuation", ")"),
        ("whitespace", " "),
        ("punctuation", "{"),
        ("whitespace", "\n  "),
        ("builtin", "gl_Position"),
        ("whitespace", " "),
        ("operator", "="),
        ("whitespace", " "),
        ("type", "vec4"),
        ("punctuation", "("),
        ("number", "1.0"),
        ("punctuation", ")"),
        ("punctuation", ";"),
        ("whitespace", "\n"),
        ("punctuation", "}"),
    ]


def test_compound_operators():
    assert _kinds("a+=b!=c") == [
        ("identifier", "a"),
        ("operator", "+="),
        ("identifier", "b"),
        ("operator", "!="),
        ("identifier", "c"),
    ]


def test_comment_beats_division():
    assert _kinds("a/b//c") == [
        ("identifier", "a"),
        ("operator", "/"),
        ("identifier", "b"),
        ("comment", "//c"),
    ]


def test_number_shapes():
    assert _kinds("1u") == [("number", "1u")]
    assert _kinds("2E+10") == [("number", "2E+10")]
    assert _kinds(".5") == [("punctuation", "."), ("number", "5")]
    assert _kinds("1.") == [("number", "1"), ("punctuation", ".")]
    assert _kinds("123abc") == [("number", "123"), ("identifier", "abc")]


def test_swizzle():
    assert _kinds("color.rgb") == [
        ("identifier", "color"),
        ("punctuation", "."),
        ("identifier", "rgb"),
    ]


def test_preprocessor_runs_to_end_of_line():
    assert _kinds("#version 300 es\nfloat") == [
        ("preprocessor", "#version 300 es"),
        ("whitespace", "\n"),
        ("type", "float"),
    ]


def test_unterminated_block_comment_runs_to_end():
    assert _kinds("x /* open\nstill") == [
        ("identifier", "x"),
        ("whitespace", " "),
        ("comment", "/* open\nstill"),
    ]


def test_unterminated_string_runs_to_end():
    assert _kinds('x = "abc\nint y;') == [
        ("identifier", "x"),
        ("whitespace", " "),
        ("operator", "="),
        ("whitespace", " "),
        ("string", '"abc\nint y;'),
    ]


def test_unterminated_string_with_trailing_backslash():
    assert _kinds('"abc\\') == [("string", '"abc\\')]


def test_unknown_characters_one_at_a_time():
    assert _kinds("§§§") == [("unknown", "§")] * 3
    assert _kinds("@$") == [("unknown", "@"), ("unknown", "$")]


def test_mixed_whitespace_is_one_token():
    assert _kinds(" \t\n\t ") == [("whitespace", " \t\n\t ")]


@pytest.mark.parametrize(
    "src",
    [
        "",
        "   ",
        "§§§",
        "\x00\x01\x02",
        "/*",
        '"',
        "#",
        "a<<=b>>c ? d : e;",
        "uniform mat4 uMvp;\r\nattribute vec3 aPos;\r\n",
        "void main() { gl_FragColor = texture2D(t, v) * 0.5e3F; } // ok   ",
    ],
)
def test_lossless(src):
    assert _rejoin(src) == src


def test_deterministic():
    src = "float f(in vec2 p) { return dot(p, p); }"
    assert tokenize(src) == tokenize(src)


def test_tokens_are_frozen():
    token = tokenize("if")[0]
    assert token == Token(K.KEYWORD, "if")
    with pytest.raises(AttributeError):
        token.kind = K.IDENTIFIER


def test_lexer_next_token_advances():
    lexer = Lexer("int x")
    assert lexer.next_token() == Token(K.TYPE, "int")
    assert lexer.pos == 3
    assert lexer.next_token() == Token(K.WHITESPACE, " ")
    assert lexer.next_token() == Token(K.IDENTIFIER, "x")
    assert lexer.at_end()


def test_token_repr():
    assert repr(Token(K.NUMBER, "1.0")) == "Token(NUMBER, '1.0')"


def test_numbers_are_ascii_digits_only():
    assert _kinds("٣") == [("unknown", "٣")]
    assert _kinds("x٣") == [("identifier", "x"), ("unknown", "٣")]
    assert _kinds("٣٤") == [("unknown", "٣"), ("unknown", "٤")]


def test_control_separators_are_not_whitespace():
    assert _kinds("\x1cb") == [("unknown", "\x1c"), ("identifier", "b")]
    assert _kinds("a\x85") == [("identifier", "a"), ("unknown", "\x85")]
    assert _kinds("\f\v\r\n") == [("whitespace", "\f\v\r\n")]

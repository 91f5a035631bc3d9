import pytest

from errors import ParsnipLexicalError
from lexer import Lexer


def tokens_of(text):
    lexer = Lexer(text)
    result = []
    while True:
        tok = lexer.get_next_token()
        result.append(tok)
        if tok.type == "EOF":
            return result


def kinds_of(text):
    return [tok.type for tok in tokens_of(text)]


def test_arithmetic_tokens():
    kinds = kinds_of("7 + 3 * (10 / (12 DIV (3 + 1) - 1))")
    expected = [
        "INTEGER_CONST", "PLUS", "INTEGER_CONST", "MUL", "LPAREN", "INTEGER_CONST", "FLOAT_DIV",
        "LPAREN", "INTEGER_CONST", "INTEGER_DIV", "LPAREN", "INTEGER_CONST", "PLUS", "INTEGER_CONST",
        "RPAREN", "MINUS", "INTEGER_CONST", "RPAREN", "RPAREN", "EOF",
    ]
    if kinds != expected:
        raise AssertionError(f"Unexpected token kinds:\n{kinds}")


def test_number_values():
    toks = tokens_of("123 3.14 0.5")
    assert toks[0].type == "INTEGER_CONST" and toks[0].value == 123
    assert isinstance(toks[0].value, int)
    assert toks[1].type == "REAL_CONST" and toks[1].value == 3.14
    assert toks[2].type == "REAL_CONST" and toks[2].value == 0.5


def test_dot_without_digits_is_separate_token():
    assert kinds_of("5.") == ["INTEGER_CONST", "DOT", "EOF"]
    assert kinds_of("END.") == ["END", "DOT", "EOF"]


def test_keywords_are_case_sensitive():
    toks = tokens_of("BEGIN begin Begin")
    assert toks[0].type == "BEGIN"
    assert toks[1].type == "ID" and toks[1].value == "begin"
    assert toks[2].type == "ID" and toks[2].value == "Begin"


def test_all_keywords():
    assert kinds_of("PROGRAM VAR BEGIN END DIV INTEGER REAL") == [
        "PROGRAM", "VAR", "BEGIN", "END", "INTEGER_DIV", "INTEGER", "REAL", "EOF",
    ]


def test_identifier_keeps_exact_text():
    toks = tokens_of("abc1 x2y")
    assert toks[0].value == "abc1"
    assert toks[1].value == "x2y"


def test_assign_and_colon():
    assert kinds_of("a := 5") == ["ID", "ASSIGN", "INTEGER_CONST", "EOF"]
    assert kinds_of("x, y : REAL;") == ["ID", "COMMA", "ID", "COLON", "REAL", "SEMI", "EOF"]


def test_comments_are_skipped():
    assert kinds_of("BEGIN {Part10} END {done}.") == ["BEGIN", "END", "DOT", "EOF"]


def test_unterminated_comment_fails():
    with pytest.raises(ParsnipLexicalError):
        tokens_of("BEGIN { never closed")


def test_unknown_character_fails():
    lexer = Lexer("3 $ 5")
    assert lexer.get_next_token().type == "INTEGER_CONST"
    with pytest.raises(ParsnipLexicalError) as info:
        lexer.get_next_token()
    assert "$" in str(info.value)
    assert info.value.column == 3


def test_integer_literal_out_of_range_fails():
    with pytest.raises(ParsnipLexicalError):
        tokens_of("2147483648")
    assert tokens_of("2147483647")[0].value == 2147483647


def test_line_and_column_tracking():
    toks = tokens_of("BEGIN\n  a := 1\nEND")
    assert (toks[0].line, toks[0].column) == (1, 1)
    assert (toks[1].line, toks[1].column) == (2, 3)
    assert (toks[4].line, toks[4].column) == (3, 1)


def test_eof_is_idempotent():
    lexer = Lexer("1")
    lexer.get_next_token()
    for _ in range(5):
        tok = lexer.get_next_token()
        if tok.type != "EOF":
            raise AssertionError(f"Expected EOF, got {tok!r}")
    assert lexer.current_char is None


def test_empty_input_is_eof():
    assert kinds_of("") == ["EOF"]
    assert kinds_of("   \n\t ") == ["EOF"]


def test_huge_integer_literal_fails_cleanly():
    with pytest.raises(ParsnipLexicalError) as info:
        tokens_of("9" * 5000)
    assert "out of range" in str(info.value)


def test_leading_zeros_do_not_count_toward_range():
    toks = tokens_of("0" * 5000 + "42")
    assert toks[0].type == "INTEGER_CONST" and toks[0].value == 42


def test_non_ascii_letters_and_digits_are_rejected():
    with pytest.raises(ParsnipLexicalError):
        tokens_of("٣")  # ARABIC-INDIC DIGIT THREE
    with pytest.raises(ParsnipLexicalError):
        tokens_of("café := 1")

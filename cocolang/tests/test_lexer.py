"""
Tests for tokenization in Coco Language.
"""
import pytest

from cocolang.exceptions import LexError
from cocolang.lexer import Lexer, Position, tokenize


def kinds(source: str) -> list[str]:
    return [tok.type for tok in tokenize(source)]


def test_declaration_tokens_and_positions():
    """
    Test that a declaration produces typed tokens with line/column positions.
    """
    tokens = tokenize("let x = 1.5;")
    assert [(t.type, t.value) for t in tokens] == [
        ('LET', 'let'),
        ('ID', 'x'),
        ('ASSIGN', '='),
        ('NUMBER', 1.5),
        ('SEMI', ';'),
        ('EOF', None),
    ]
    assert [t.pos for t in tokens] == [(1, 1), (1, 5), (1, 7), (1, 9), (1, 12), (1, 13)]
    assert isinstance(tokens[0].pos, Position)


def test_positions_across_lines():
    """
    Test that line and column counters follow newlines.
    """
    tokens = tokenize("let a = 1\n  a += 2")
    assert tokens[4].type == 'ID'
    assert tokens[4].pos == (2, 3)
    assert tokens[5].type == 'PLUS_ASSIGN'
    assert tokens[5].pos == (2, 5)
    assert tokens[6].pos == (2, 8)


def test_comments_are_skipped():
    """
    Test that line and block comments emit no tokens and keep positions accurate.
    """
    tokens = tokenize("// hi\nlog(1) /* c\n c */ x")
    assert [t.type for t in tokens] == ['ID', 'LPAREN', 'NUMBER', 'RPAREN', 'ID', 'EOF']
    assert tokens[0].pos == (2, 1)
    assert tokens[4].value == 'x'
    assert tokens[4].pos == (3, 7)


def test_longest_match_for_operators():
    """
    Test that multi-character operators win over their one-character prefixes.
    """
    assert kinds("a<=b") == ['ID', 'LE', 'ID', 'EOF']
    assert kinds("a<b") == ['ID', 'LT', 'ID', 'EOF']
    assert kinds("a>=b>c") == ['ID', 'GE', 'ID', 'GT', 'ID', 'EOF']
    assert kinds("a==b=c") == ['ID', 'EQ', 'ID', 'ASSIGN', 'ID', 'EOF']
    assert kinds("a!=!b") == ['ID', 'NE', 'NOT', 'ID', 'EOF']
    assert kinds("x+=1-=2") == ['ID', 'PLUS_ASSIGN', 'NUMBER', 'MINUS_ASSIGN', 'NUMBER', 'EOF']
    assert kinds("a&&b||c") == ['ID', 'AND', 'ID', 'OR', 'ID', 'EOF']
    assert kinds("(){},;") == ['LPAREN', 'RPAREN', 'LBRACE', 'RBRACE', 'COMMA', 'SEMI', 'EOF']


def test_keywords_and_literals():
    """
    Test keyword recognition and literal values.
    """
    tokens = tokenize("while if else fun return true false null letter 007 'it' \"it's\"")
    assert [(t.type, t.value) for t in tokens] == [
        ('WHILE', 'while'),
        ('IF', 'if'),
        ('ELSE', 'else'),
        ('FUN', 'fun'),
        ('RETURN', 'return'),
        ('TRUE', True),
        ('FALSE', False),
        ('NULL', 'null'),
        ('ID', 'letter'),
        ('NUMBER', 7.0),
        ('STRING', 'it'),
        ('STRING', "it's"),
        ('EOF', None),
    ]


def test_string_without_escape_processing():
    """
    Test that backslashes are kept as written.
    """
    tokens = tokenize(r'"a\nb"')
    assert tokens[0].value == 'a\\nb'


def test_unterminated_string_raises():
    """
    Test that an unterminated string reports where it started.
    """
    with pytest.raises(LexError) as exc_info:
        tokenize('let s = "abc')
    assert exc_info.value.line == 1
    assert exc_info.value.column == 9
    assert "Unterminated string" in str(exc_info.value)


def test_unterminated_block_comment_raises():
    """
    Test that an unterminated block comment is a lex error.
    """
    with pytest.raises(LexError, match="Unterminated block comment"):
        tokenize("let a = 1 /* never closed")


def test_unexpected_character_raises():
    """
    Test that an unrecognized character is rejected with its position.
    """
    with pytest.raises(LexError) as exc_info:
        tokenize("let a = 1\nlet b = a @ 2")
    assert exc_info.value.line == 2
    assert exc_info.value.column == 11
    assert "'@'" in str(exc_info.value)


def test_lexer_is_lazy():
    """
    Test that tokens before an error are produced before the error is raised.
    """
    stream = iter(Lexer("let a = 1 @"))
    assert next(stream).type == 'LET'
    assert next(stream).type == 'ID'
    with pytest.raises(LexError):
        list(stream)


def test_lexer_restarts_from_the_beginning():
    """
    Test that iterating a Lexer twice yields the same tokens.
    """
    lexer = Lexer("let coco = 1; while (coco < 67) { coco += 1; }")
    first = [(t.type, t.value, t.line, t.column) for t in lexer]
    second = [(t.type, t.value, t.line, t.column) for t in lexer]
    assert first == second
    assert first[-1][0] == 'EOF'


def test_empty_source_yields_only_eof():
    """
    Test that empty input produces a single EOF token.
    """
    tokens = tokenize("")
    assert len(tokens) == 1
    assert tokens[0].type == 'EOF'
    assert tokens[0].pos == (1, 1)


def test_tokens_are_immutable():
    """
    Test that a produced token cannot be modified.
    """
    tok = tokenize("x")[0]
    with pytest.raises(AttributeError):
        tok.value = 'y'

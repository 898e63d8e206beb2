from monkey import tokens as t
from monkey.lexer import Lexer, tokenize


def kinds(source):
    return [(tok.type, tok.value) for tok in tokenize(source)]


def test_next_token_operators_and_delimiters():
    assert kinds('=+(){}[],;:') == [
        (t.ASSIGN, '='), (t.PLUS, '+'), (t.LPAREN, '('), (t.RPAREN, ')'),
        (t.LBRACE, '{'), (t.RBRACE, '}'), (t.LBRACKET, '['), (t.RBRACKET, ']'),
        (t.COMMA, ','), (t.SEMICOLON, ';'), (t.COLON, ':'), (t.EOF, ''),
    ]


def test_next_token_program():
    source = """let five = 5;
let add = fn(x, y) {
  x + y;
};
!-/*5;
5 < 10 > 5;
if (5 < 10) { return true; } else { return false; }
10 == 10;
10 != 9;
"foobar"
"foo bar"
"""
    expected = [
        (t.LET, 'let'), (t.IDENT, 'five'), (t.ASSIGN, '='), (t.INT, '5'), (t.SEMICOLON, ';'),
        (t.LET, 'let'), (t.IDENT, 'add'), (t.ASSIGN, '='), (t.FUNCTION, 'fn'),
        (t.LPAREN, '('), (t.IDENT, 'x'), (t.COMMA, ','), (t.IDENT, 'y'), (t.RPAREN, ')'),
        (t.LBRACE, '{'), (t.IDENT, 'x'), (t.PLUS, '+'), (t.IDENT, 'y'), (t.SEMICOLON, ';'),
        (t.RBRACE, '}'), (t.SEMICOLON, ';'),
        (t.BANG, '!'), (t.MINUS, '-'), (t.SLASH, '/'), (t.ASTERISK, '*'), (t.INT, '5'), (t.SEMICOLON, ';'),
        (t.INT, '5'), (t.LT, '<'), (t.INT, '10'), (t.GT, '>'), (t.INT, '5'), (t.SEMICOLON, ';'),
        (t.IF, 'if'), (t.LPAREN, '('), (t.INT, '5'), (t.LT, '<'), (t.INT, '10'), (t.RPAREN, ')'),
        (t.LBRACE, '{'), (t.RETURN, 'return'), (t.TRUE, 'true'), (t.SEMICOLON, ';'), (t.RBRACE, '}'),
        (t.ELSE, 'else'), (t.LBRACE, '{'), (t.RETURN, 'return'), (t.FALSE, 'false'), (t.SEMICOLON, ';'),
        (t.RBRACE, '}'),
        (t.INT, '10'), (t.EQ, '=='), (t.INT, '10'), (t.SEMICOLON, ';'),
        (t.INT, '10'), (t.NOT_EQ, '!='), (t.INT, '9'), (t.SEMICOLON, ';'),
        (t.STRING, 'foobar'), (t.STRING, 'foo bar'),
        (t.EOF, ''),
    ]
    assert kinds(source) == expected


def test_identifiers_allow_underscore_but_not_digits():
    assert kinds('foo_bar x1') == [
        (t.IDENT, 'foo_bar'), (t.IDENT, 'x'), (t.INT, '1'), (t.EOF, ''),
    ]


def test_illegal_characters_do_not_stop_scanning():
    assert kinds('1 @ 2 $') == [
        (t.INT, '1'), (t.ILLEGAL, '@'), (t.INT, '2'), (t.ILLEGAL, '$'), (t.EOF, ''),
    ]


def test_unterminated_string_runs_to_end_of_input():
    assert kinds('"abc def') == [(t.STRING, 'abc def'), (t.EOF, '')]


def test_empty_string_literal():
    assert kinds('""') == [(t.STRING, ''), (t.EOF, '')]


def test_eof_is_returned_forever():
    lexer = Lexer('x')
    assert lexer.next_token().type == t.IDENT
    for _ in range(3):
        tok = lexer.next_token()
        assert tok.type == t.EOF
        assert tok.value == ''


def test_empty_and_whitespace_input():
    assert kinds('') == [(t.EOF, '')]
    assert kinds(' \t\r\n ') == [(t.EOF, '')]


def test_tokens_carry_line_and_column():
    toks = tokenize('let x = 1;\n  x + "y"')
    plus = [tok for tok in toks if tok.type == t.PLUS][0]
    assert (plus.line, plus.column) == (2, 5)
    string = [tok for tok in toks if tok.type == t.STRING][0]
    assert (string.line, string.column) == (2, 7)
    assert toks[0].start_pos == 0


def test_lookup_ident():
    assert t.lookup_ident('fn') == t.FUNCTION
    assert t.lookup_ident('return') == t.RETURN
    assert t.lookup_ident('fnord') == t.IDENT

from errors import ParsnipLexicalError
from numeric import INT_MAX


class Token:
    def __init__(self, type, value=None, line=1, column=1):
        self.type = type
        self.value = value
        self.line = line
        self.column = column

    def __repr__(self):
        if self.value is not None:
            return f"{self.type}({self.value})"
        return f"{self.type}"


# reserved words are matched case-sensitively
RESERVED_KEYWORDS = {
    "PROGRAM": "PROGRAM",
    "VAR": "VAR",
    "BEGIN": "BEGIN",
    "END": "END",
    "DIV": "INTEGER_DIV",
    "INTEGER": "INTEGER",
    "REAL": "REAL",
}


# only ASCII letters and digits belong to identifiers and numbers
def is_letter(ch):
    return ch is not None and ch.isascii() and ch.isalpha()


def is_digit(ch):
    return ch is not None and ch.isascii() and ch.isdigit()


SINGLE_CHAR_TOKENS = {
    "+": "PLUS",
    "-": "MINUS",
    "*": "MUL",
    "/": "FLOAT_DIV",
    "(": "LPAREN",
    ")": "RPAREN",
    ";": "SEMI",
    ":": "COLON",
    ".": "DOT",
    ",": "COMMA",
}


class Lexer:
    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current_char = text[0] if text else None
        self.line = 1
        self.column = 1

    def advance(self):
        # track line/column based on current_char before moving
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        if self.pos >= len(self.text):
            self.current_char = None
        else:
            self.current_char = self.text[self.pos]

    def peek(self):
        nxt = self.pos + 1
        if nxt >= len(self.text):
            return None
        return self.text[nxt]

    def skip_whitespace(self):
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def skip_comment(self):
        start_line, start_col = self.line, self.column
        self.advance()  # skip '{'
        while self.current_char is not None and self.current_char != "}":
            self.advance()
        if self.current_char is None:
            raise ParsnipLexicalError("Unterminated comment", start_line, start_col)
        self.advance()  # skip '}'

    def read_identifier(self):
        start_line, start_col = self.line, self.column
        result = ""
        while is_letter(self.current_char) or is_digit(self.current_char):
            result += self.current_char
            self.advance()

        kind = RESERVED_KEYWORDS.get(result)
        if kind is not None:
            return Token(kind, line=start_line, column=start_col)
        return Token("ID", result, line=start_line, column=start_col)

    def read_number(self):
        start_line, start_col = self.line, self.column
        result = ""
        while is_digit(self.current_char):
            result += self.current_char
            self.advance()

        # a dot only belongs to the number when digits follow it ("END." / "5." stay separate)
        if self.current_char == "." and is_digit(self.peek()):
            result += "."
            self.advance()
            while is_digit(self.current_char):
                result += self.current_char
                self.advance()
            return Token("REAL_CONST", float(result), line=start_line, column=start_col)

        # compare digit counts first so huge literals never reach int()
        significant = result.lstrip("0") or "0"
        if len(significant) > len(str(INT_MAX)) or int(significant) > INT_MAX:
            shown = result if len(result) <= 20 else result[:20] + "..."
            raise ParsnipLexicalError(f"Integer literal out of range: {shown}", start_line, start_col)
        return Token("INTEGER_CONST", int(significant), line=start_line, column=start_col)

    def get_next_token(self):
        while self.current_char is not None:

            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            if self.current_char == "{":
                self.skip_comment()
                continue

            # identifiers / keywords
            if is_letter(self.current_char):
                return self.read_identifier()

            # numbers
            if is_digit(self.current_char):
                return self.read_number()

            # :=
            if self.current_char == ":" and self.peek() == "=":
                start_line, start_col = self.line, self.column
                self.advance()
                self.advance()
                return Token("ASSIGN", line=start_line, column=start_col)

            kind = SINGLE_CHAR_TOKENS.get(self.current_char)
            if kind is not None:
                start_line, start_col = self.line, self.column
                self.advance()
                return Token(kind, line=start_line, column=start_col)

            raise ParsnipLexicalError(f"Unknown character: {self.current_char}", self.line, self.column)

        return Token("EOF", line=self.line, column=self.column)

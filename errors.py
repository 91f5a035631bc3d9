class ParsnipError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ParsnipLexicalError(ParsnipError):
    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return f"Lexical error: {self.message}"
        return f"Lexical error: {self.message} at line {self.line}, col {self.column}"


class ParsnipParseError(ParsnipError):
    def __init__(self, message: str, token=None):
        super().__init__(message)
        self.token = token  # offending token, if any

    def __str__(self) -> str:
        tok = self.token
        if tok is None:
            return f"Parse error: {self.message}"
        return f"Parse error: {self.message} at line {tok.line}, col {tok.column}"


class ParsnipRuntimeError(ParsnipError):
    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return f"Runtime error: {self.message}"
        return f"Runtime error: {self.message} (line {self.line})"


class ParsnipNameError(ParsnipRuntimeError):
    pass


class ParsnipArithmeticError(ParsnipRuntimeError):
    pass

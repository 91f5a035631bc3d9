from ast_nodes import (
    Program, Block, VarDecl, Type, Compound, Assign, BinOp, UnaryOp, Num, Var, NoOp,
)
from errors import ParsnipParseError
from numeric import Number


class Parser:
    def __init__(self, lexer):
        self.lexer = lexer
        self.current_token = self.lexer.get_next_token()

    # move to next token, but only if it matches what we expect
    def eat(self, token_type):
        if self.current_token.type == token_type:
            self.current_token = self.lexer.get_next_token()
        else:
            self.error_here(f"Unexpected token: expected {token_type}, got {self.current_token.type}")

    def error_here(self, message):
        raise ParsnipParseError(message, self.current_token)

    # ---------- TOP LEVEL ----------
    # program -> PROGRAM variable SEMI block DOT
    #          | compound_statement DOT
    #          | expr
    def parse(self):
        try:
            if self.current_token.type == "PROGRAM":
                node = self.program()
            elif self.current_token.type == "BEGIN":
                node = self.compound_statement()
                self.eat("DOT")
            else:
                node = self.expr()
        except RecursionError:
            raise ParsnipParseError("expression nested too deeply", self.current_token) from None

        if self.current_token.type != "EOF":
            self.error_here(f"Unexpected token after end of input: {self.current_token.type}")
        return node

    def program(self):
        tok = self.current_token
        self.eat("PROGRAM")
        var_node = self.variable()
        self.eat("SEMI")
        block = self.block()
        self.eat("DOT")
        node = Program(var_node.name, block)
        node.line = tok.line
        return node

    # block -> declarations compound_statement
    def block(self):
        declarations = self.declarations()
        compound = self.compound_statement()
        return Block(declarations, compound)

    # declarations -> (VAR (variable_declaration SEMI)+)?
    def declarations(self):
        declarations = []
        if self.current_token.type == "VAR":
            self.eat("VAR")
            while True:
                declarations.extend(self.variable_declaration())
                self.eat("SEMI")
                if self.current_token.type != "ID":
                    break
        return declarations

    # variable_declaration -> ID (COMMA ID)* COLON type_spec
    def variable_declaration(self):
        var_nodes = [self.variable()]
        while self.current_token.type == "COMMA":
            self.eat("COMMA")
            var_nodes.append(self.variable())

        self.eat("COLON")
        type_node = self.type_spec()

        result = []
        for var_node in var_nodes:
            decl = VarDecl(var_node, type_node)
            decl.line = var_node.line
            result.append(decl)
        return result

    def type_spec(self):
        tok = self.current_token
        if tok.type not in ("INTEGER", "REAL"):
            self.error_here(f"Unexpected token: expected type INTEGER or REAL, got {tok.type}")
        self.eat(tok.type)
        node = Type(tok.type)
        node.line = tok.line
        return node

    # ---------- STATEMENTS ----------
    # compound_statement -> BEGIN statement_list END
    def compound_statement(self):
        tok = self.current_token
        self.eat("BEGIN")
        children = self.statement_list()
        self.eat("END")
        node = Compound(children)
        node.line = tok.line
        return node

    # statement_list -> statement (SEMI statement)*
    def statement_list(self):
        statements = [self.statement()]
        while self.current_token.type == "SEMI":
            self.eat("SEMI")
            statements.append(self.statement())
        return statements

    # statement -> compound_statement | assignment_statement | empty
    def statement(self):
        if self.current_token.type == "BEGIN":
            return self.compound_statement()
        if self.current_token.type == "ID":
            return self.assignment_statement()
        return self.empty()

    def assignment_statement(self):
        left = self.variable()
        tok = self.current_token
        self.eat("ASSIGN")
        right = self.expr()
        node = Assign(left, right)
        node.line = tok.line
        return node

    def variable(self):
        tok = self.current_token
        self.eat("ID")
        node = Var(tok.value)
        node.line = tok.line
        return node

    def empty(self):
        return NoOp()

    # ---------- EXPRESSIONS ----------
    # expr -> term ((PLUS | MINUS) term)*
    def expr(self):
        node = self.term()

        while self.current_token.type in ("PLUS", "MINUS"):
            op_token = self.current_token
            self.eat(op_token.type)
            node = BinOp(node, op_token.type, self.term())
            node.line = op_token.line

        return node

    # term -> factor ((MUL | FLOAT_DIV | INTEGER_DIV) factor)*
    def term(self):
        node = self.factor()

        while self.current_token.type in ("MUL", "FLOAT_DIV", "INTEGER_DIV"):
            op_token = self.current_token
            self.eat(op_token.type)
            node = BinOp(node, op_token.type, self.factor())
            node.line = op_token.line

        return node

    # factor -> (PLUS | MINUS) factor | INTEGER_CONST | REAL_CONST | LPAREN expr RPAREN | variable
    def factor(self):
        tok = self.current_token

        if tok.type in ("PLUS", "MINUS"):
            self.eat(tok.type)
            node = UnaryOp(tok.type, self.factor())
            node.line = tok.line
            return node

        if tok.type == "INTEGER_CONST":
            self.eat("INTEGER_CONST")
            node = Num(Number.integer(tok.value))
            node.line = tok.line
            return node

        if tok.type == "REAL_CONST":
            self.eat("REAL_CONST")
            node = Num(Number.real(tok.value))
            node.line = tok.line
            return node

        if tok.type == "LPAREN":
            self.eat("LPAREN")
            node = self.expr()
            self.eat("RPAREN")
            return node

        if tok.type == "ID":
            return self.variable()

        self.error_here(f"Unexpected token in expression: {tok.type}")

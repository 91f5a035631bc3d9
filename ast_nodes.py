class ASTNode:
    # Optional source line (1-based). Parser may set this.
    line: int | None = None


class Program(ASTNode):
    def __init__(self, name, block):
        self.name = name    # documentation only
        self.block = block


class Block(ASTNode):
    def __init__(self, declarations, compound_statement):
        self.declarations = declarations              # list[VarDecl]
        self.compound_statement = compound_statement  # Compound


class VarDecl(ASTNode):
    def __init__(self, var_node, type_node):
        self.var_node = var_node    # Var
        self.type_node = type_node  # Type


class Type(ASTNode):
    def __init__(self, name):
        self.name = name  # "INTEGER" | "REAL"


class Compound(ASTNode):
    def __init__(self, children):
        self.children = children


class Assign(ASTNode):
    def __init__(self, left, right):
        self.left = left    # Var
        self.right = right  # expression


class BinOp(ASTNode):
    def __init__(self, left, op, right):
        self.left = left
        self.op = op  # token kind, e.g. "PLUS"
        self.right = right


class UnaryOp(ASTNode):
    def __init__(self, op, expr):
        self.op = op
        self.expr = expr


class Num(ASTNode):
    def __init__(self, value):
        self.value = value  # numeric.Number


class Var(ASTNode):
    def __init__(self, name):
        self.name = name


class NoOp(ASTNode):
    pass

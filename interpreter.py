from ast_nodes import (
    Program, Block, VarDecl, Type, Compound, Assign, BinOp, UnaryOp, Num, Var, NoOp,
)
from errors import ParsnipNameError, ParsnipRuntimeError
from numeric import BINARY_OPERATIONS, Number, negate


class Interpreter:
    # value of statements (Compound, NoOp); never shown as a user result for expressions
    SENTINEL = Number.real(0.0)

    def __init__(self, parser=None, trace: bool = False):
        self.parser = parser
        self.trace_enabled = trace
        self.environment = {}      # name -> Number
        self.declared_types = {}   # name -> "INTEGER" | "REAL"

    def reset(self, parser):
        # new input for the same session; bindings are kept
        self.parser = parser

    def get(self, name):
        return self.environment.get(name)

    def interpret(self, tree=None):
        if tree is None:
            if self.parser is None:
                raise ParsnipRuntimeError("Interpreter has no parser to read from")
            tree = self.parser.parse()
        try:
            return self.visit(tree)
        except RecursionError:
            raise ParsnipRuntimeError("expression nested too deeply") from None

    def _trace(self, message):
        if self.trace_enabled:
            print(f"TRACE {message}")

    # -------- dispatch --------
    def visit(self, node):
        if isinstance(node, Program):
            return self.visit_program(node)
        if isinstance(node, Block):
            return self.visit_block(node)
        if isinstance(node, VarDecl):
            return self.visit_var_decl(node)
        if isinstance(node, Compound):
            return self.visit_compound(node)
        if isinstance(node, Assign):
            return self.visit_assign(node)
        if isinstance(node, BinOp):
            return self.visit_bin_op(node)
        if isinstance(node, UnaryOp):
            return self.visit_unary_op(node)
        if isinstance(node, Num):
            return node.value
        if isinstance(node, Var):
            return self.visit_var(node)
        if isinstance(node, NoOp):
            return self.SENTINEL
        if isinstance(node, Type):
            # types only appear inside VarDecl
            return self.SENTINEL

        raise ParsnipRuntimeError(f"Unknown node: {type(node).__name__}", getattr(node, "line", None))

    # -------- statements --------
    def visit_program(self, node):
        self._trace(f"Program {node.name}")
        return self.visit(node.block)

    def visit_block(self, node):
        for decl in node.declarations:
            self.visit(decl)
        return self.visit(node.compound_statement)

    def visit_var_decl(self, node):
        # declaring only records the type; reading before the first assignment fails
        name = node.var_node.name
        self.declared_types[name] = node.type_node.name
        self._trace(f"VarDecl {name} : {node.type_node.name}")
        return self.SENTINEL

    def visit_compound(self, node):
        for child in node.children:
            self.visit(child)
        return self.SENTINEL

    def visit_assign(self, node):
        value = self.visit(node.right)
        self.environment[node.left.name] = value
        self._trace(f"Assign {node.left.name} := {value!r}")
        return value

    # -------- expressions --------
    def visit_bin_op(self, node):
        left = self.visit(node.left)
        right = self.visit(node.right)

        operation = BINARY_OPERATIONS.get(node.op)
        if operation is None:
            raise ParsnipRuntimeError(f"Invalid binary operator: {node.op}", node.line)

        try:
            result = operation(left, right)
        except ParsnipRuntimeError as e:
            if e.line is None:
                e.line = node.line
            raise
        self._trace(f"BinOp {left!r} {node.op} {right!r} -> {result!r}")
        return result

    def visit_unary_op(self, node):
        operand = self.visit(node.expr)
        if node.op == "PLUS":
            return operand
        if node.op == "MINUS":
            try:
                return negate(operand)
            except ParsnipRuntimeError as e:
                if e.line is None:
                    e.line = node.line
                raise
        raise ParsnipRuntimeError(f"Invalid unary operator: {node.op}", node.line)

    def visit_var(self, node):
        value = self.environment.get(node.name)
        if value is None:
            raise ParsnipNameError(f"Variable not found: {node.name}", node.line)
        return value

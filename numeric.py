"""Numeric values of the interpreter.

A value is either INTEGER (signed 32-bit) or REAL (float). Mixing the two
promotes to REAL, "/" always gives REAL and DIV always gives INTEGER.
"""

from errors import ParsnipArithmeticError


INTEGER = "INTEGER"
REAL = "REAL"

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


class Number:
    def __init__(self, kind, value):
        self.kind = kind    # INTEGER or REAL
        self.value = value  # int or float

    @classmethod
    def integer(cls, value: int) -> "Number":
        return cls(INTEGER, _check_int(value))

    @classmethod
    def real(cls, value: float) -> "Number":
        return cls(REAL, float(value))

    def is_integer(self) -> bool:
        return self.kind == INTEGER

    def as_float(self) -> float:
        if self.kind == INTEGER:
            return float(self.value)
        return self.value

    def as_int(self) -> int:
        # REAL -> INTEGER truncates toward zero
        if self.kind == INTEGER:
            return self.value
        try:
            return _check_int(int(self.value))
        except (OverflowError, ValueError):
            raise ParsnipArithmeticError(f"cannot convert {self.value!r} to INTEGER") from None

    def __eq__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return f"{self.kind}({self.value!r})"

    def __str__(self):
        return repr(self.value)


def _check_int(value: int) -> int:
    if value < INT_MIN or value > INT_MAX:
        raise ParsnipArithmeticError("integer overflow")
    return value


def add(left: Number, right: Number) -> Number:
    if left.kind == INTEGER and right.kind == INTEGER:
        return Number.integer(left.value + right.value)
    return Number.real(left.as_float() + right.as_float())


def sub(left: Number, right: Number) -> Number:
    if left.kind == INTEGER and right.kind == INTEGER:
        return Number.integer(left.value - right.value)
    return Number.real(left.as_float() - right.as_float())


def mul(left: Number, right: Number) -> Number:
    if left.kind == INTEGER and right.kind == INTEGER:
        return Number.integer(left.value * right.value)
    return Number.real(left.as_float() * right.as_float())


def float_div(left: Number, right: Number) -> Number:
    divisor = right.as_float()
    if divisor == 0.0:
        raise ParsnipArithmeticError("division by zero")
    return Number.real(left.as_float() / divisor)


def integer_div(left: Number, right: Number) -> Number:
    # operands are truncated to INTEGER first, then the quotient truncates toward zero
    dividend = left.as_int()
    divisor = right.as_int()
    if divisor == 0:
        raise ParsnipArithmeticError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return Number.integer(quotient)


def negate(operand: Number) -> Number:
    if operand.kind == INTEGER:
        return Number.integer(-operand.value)
    return Number.real(-operand.value)


BINARY_OPERATIONS = {
    "PLUS": add,
    "MINUS": sub,
    "MUL": mul,
    "FLOAT_DIV": float_div,
    "INTEGER_DIV": integer_div,
}

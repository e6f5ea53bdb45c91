""" Strict left-to-right arithmetic. """
import math

from syntax import NUMBER_FORMAT, NUMBER_RX, OPERATORS


def _apply(op: str, left: float, right: float) -> float:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    # IEEE semantics for x/0
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def evaluate_expression(expr: str) -> float:
    """
    Evaluate `expr` with no precedence: `2+3*4` is 20.

    Numbers apply the pending operator to the running result; operator
    characters replace the pending operator; anything else is skipped.
    A sign belongs to a number only where an operand is expected.
    """
    result = 0.0
    operator = "+"
    expect_operand = True
    i = 0
    n = len(expr)

    while i < n:
        c = expr[i]
        if c.isspace():
            i += 1
            continue

        if c in OPERATORS and not expect_operand:
            operator = c
            expect_operand = True
            i += 1
            continue

        m = NUMBER_RX.match(expr, i)
        if m and (expect_operand or m.group(0)[0] not in "+-"):
            result = _apply(operator, result, float(m.group(0)))
            expect_operand = False
            i = m.end()
            continue

        if c in OPERATORS:
            # e.g. `2*+` or a leading `*`
            operator = c
            expect_operand = True
        i += 1

    return result


def has_operator(text: str) -> bool:
    return any(op in text for op in OPERATORS)


def format_number(value: float) -> str:
    return NUMBER_FORMAT.format(value)

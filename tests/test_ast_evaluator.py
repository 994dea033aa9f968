import math

from adapters.evaluator.ast_evaluator import ASTEvaluator
from contracts import (
    AdditiveOpToken,
    BinaryOperation,
    MultiplicativeOpToken,
    NumberLiteral,
    PowerToken,
    UnaryOperation,
)
from ports.evaluator import Evaluator


def _num(v: int) -> NumberLiteral:
    return NumberLiteral(value=v)


def _neg(node):
    return UnaryOperation(op=AdditiveOpToken(symbol="-"), operand=node)


def _bin(left, op, right) -> BinaryOperation:
    if op == "^":
        token = PowerToken()
    elif op in "+-":
        token = AdditiveOpToken(symbol=op)
    else:
        token = MultiplicativeOpToken(symbol=op)
    return BinaryOperation(left=left, op=token, right=right)


def test_ast_evaluator_satisfies_port():
    assert isinstance(ASTEvaluator(), Evaluator)


def test_number_literal_evaluates_to_float():
    result = ASTEvaluator().eval_expr(_num(7))

    assert result.value == 7.0
    assert isinstance(result.value, float)
    assert result.steps == []


def test_unary_plus_is_identity_and_minus_negates():
    evaluator = ASTEvaluator()
    plus = UnaryOperation(op=AdditiveOpToken(symbol="+"), operand=_num(3))

    assert evaluator.eval_expr(plus).value == 3.0
    assert evaluator.eval_expr(_neg(_neg(_num(5)))).value == 5.0


def test_division_is_real_valued():
    assert ASTEvaluator().eval_expr(_bin(_num(10), "/", _num(4))).value == 2.5


def test_division_by_zero_follows_ieee():
    evaluator = ASTEvaluator()

    assert evaluator.eval_expr(_bin(_num(10), "/", _num(0))).value == math.inf
    assert evaluator.eval_expr(_bin(_neg(_num(10)), "/", _num(0))).value == -math.inf
    assert evaluator.eval_expr(_bin(_num(10), "/", _neg(_num(0)))).value == -math.inf
    assert math.isnan(evaluator.eval_expr(_bin(_num(0), "/", _num(0))).value)


def test_power_uses_real_exponentiation():
    evaluator = ASTEvaluator()

    assert evaluator.eval_expr(_bin(_num(2), "^", _neg(_num(1)))).value == 0.5
    # (1/4) ^ (1/2)
    quarter = _bin(_num(1), "/", _num(4))
    half = _bin(_num(1), "/", _num(2))
    assert evaluator.eval_expr(_bin(quarter, "^", half)).value == 0.5


def test_power_anomalies_are_values_not_errors():
    evaluator = ASTEvaluator()
    third = _bin(_num(1), "/", _num(3))

    assert math.isnan(evaluator.eval_expr(_bin(_neg(_num(8)), "^", third)).value)
    assert evaluator.eval_expr(_bin(_num(0), "^", _neg(_num(1)))).value == math.inf
    assert evaluator.eval_expr(_bin(_num(10), "^", _num(400))).value == math.inf
    assert evaluator.eval_expr(_bin(_neg(_num(10)), "^", _num(401))).value == -math.inf


def test_huge_literal_becomes_infinity():
    assert ASTEvaluator().eval_expr(_num(10**400)).value == math.inf


def test_steps_are_recorded_in_evaluation_order():
    ast = _bin(_num(2), "+", _bin(_num(3), "*", _num(4)))

    result = ASTEvaluator().eval_expr(ast)

    assert result.value == 14.0
    assert result.steps == ["3 * 4 = 12", "2 + 12 = 14"]


def test_negation_step_is_recorded():
    result = ASTEvaluator().eval_expr(_bin(_neg(_num(5)), "+", _num(3)))

    assert result.steps == ["-(5) = -5", "-5 + 3 = -2"]


def test_power_with_nan_exponent_is_nan():
    nan = _bin(_num(0), "/", _num(0))
    result = ASTEvaluator().eval_expr(_bin(_num(1), "^", nan))

    assert math.isnan(result.value)
    assert result.steps == ["0 / 0 = nan", "1 ^ nan = nan"]


def test_unit_base_with_infinite_exponent_is_nan():
    inf = _bin(_num(1), "/", _num(0))
    minus_one = _neg(_num(1))

    assert math.isnan(ASTEvaluator().eval_expr(_bin(minus_one, "^", inf)).value)
    assert math.isnan(ASTEvaluator().eval_expr(_bin(_num(1), "^", inf)).value)


def test_deep_left_chain_keeps_post_order_steps():
    node = _num(0)
    for _ in range(3000):
        node = _bin(node, "+", _num(1))

    result = ASTEvaluator().eval_expr(node)

    assert result.value == 3000
    assert result.steps[:2] == ["0 + 1 = 1", "1 + 1 = 2"]
    assert result.steps[-1] == "2999 + 1 = 3000"


def test_deep_right_chain_is_evaluated_without_recursion():
    node = _num(2)
    for _ in range(5000):
        node = _neg(node)

    assert ASTEvaluator().eval_expr(node).value == 2

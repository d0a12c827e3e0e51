"""核心模块 - Token系统、调度场算法、RPN求值器和函数注册表"""
from .token_system import (
    TokenType, Token, OperatorKind, TypedTokenType, TypedToken,
    OPERATOR_DEFINITIONS, RPNValidator
)
from .errors import (
    CalculatorError, EvalError, EmptyInput, InvalidCharacter, MismatchedParenthesis,
    InvalidExpression, UnknownFunctionOrVariable, NonIntegerFactorial
)
from .operators import Operators, FUNCTION_DEFINITIONS
from .variables import VariableStore
from .tokenizer import tokenize
from .reorderer import reorder
from .rpn_evaluator import RPNEvaluator
from .evaluator import ExpressionEvaluator

__all__ = [
    'TokenType', 'Token', 'OperatorKind', 'TypedTokenType', 'TypedToken',
    'OPERATOR_DEFINITIONS', 'RPNValidator',
    'CalculatorError', 'EvalError', 'EmptyInput', 'InvalidCharacter', 'MismatchedParenthesis',
    'InvalidExpression', 'UnknownFunctionOrVariable', 'NonIntegerFactorial',
    'Operators', 'FUNCTION_DEFINITIONS',
    'VariableStore', 'tokenize', 'reorder', 'RPNEvaluator', 'ExpressionEvaluator'
]

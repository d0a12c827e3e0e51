"""RPN表达式求值器 - 调用统一的Operators注册表"""
import logging

import numpy as np

from core.errors import InvalidExpression, UnknownFunctionOrVariable, NonIntegerFactorial
from core.token_system import TypedTokenType, OperatorKind, OPERATOR_DEFINITIONS
from core.operators import OPERATOR_IMPLEMENTATIONS, FUNCTION_DEFINITIONS

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(postfix, function_definitions=None):
        """
        单遍扫描后缀序列，遇到操作符/函数立即在值栈上归约
        Args:
            postfix: TypedToken序列（reorder() 的输出）
            function_definitions: 函数注册表，默认内置24个函数
        Returns:
            float 结果
        """
        if function_definitions is None:
            function_definitions = FUNCTION_DEFINITIONS

        stack = []

        for token in postfix:
            if token.type == TypedTokenType.NUMBER:
                stack.append(np.float64(token.value))

            # ================== 操作符处理 ==================
            elif token.type == TypedTokenType.OPERATOR:
                arity = OPERATOR_DEFINITIONS[token.value].arity
                if len(stack) < arity:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise InvalidExpression()

                split = len(stack) - arity
                operands = stack[split:]
                del stack[split:]

                if token.value == OperatorKind.FACT:
                    operand = operands[0]
                    # nan != floor(nan)，同样视为非整数
                    if operand != np.floor(operand):
                        raise NonIntegerFactorial(float(operand))

                stack.append(OPERATOR_IMPLEMENTATIONS[token.value](*operands))

            # ================== 函数处理 ==================
            elif token.type == TypedTokenType.FUNCTION:
                definition = function_definitions.get(token.value)
                if definition is None:
                    raise UnknownFunctionOrVariable(token.value)

                if len(stack) < definition.arity:
                    logger.debug(f"Insufficient operands for {token.value}")
                    raise InvalidExpression()

                # 先入栈的参数在前：log(8, 2) -> log(x=8, base=2)
                split = len(stack) - definition.arity
                args = stack[split:]
                del stack[split:]
                stack.append(np.float64(definition.impl(*args)))

            else:
                logger.error(f"Unexpected token in RPN sequence: {token}")
                raise InvalidExpression()

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise InvalidExpression()

        return float(stack[0])

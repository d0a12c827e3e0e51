"""core/reorderer.py - 调度场算法：中缀Token -> 后缀(RPN)序列"""
import logging

from config.config import EVALUATOR_CONFIG
from core.errors import MismatchedParenthesis
from core.token_system import (
    TokenType, TypedToken, TypedTokenType, OperatorKind, OPERATOR_DEFINITIONS
)

logger = logging.getLogger(__name__)


def _should_pop(top, current_kind):
    """
    栈顶是否应先于当前操作符输出
    - 函数：总是弹出
    - 括号：不弹出
    - 操作符：结合更紧时弹出；同层时仅左结合层弹出
    """
    if top.type == TypedTokenType.FUNCTION:
        return True
    if top.type != TypedTokenType.OPERATOR:
        return False

    top_def = OPERATOR_DEFINITIONS[top.value]
    current_def = OPERATOR_DEFINITIONS[current_kind]
    if top_def.strength < current_def.strength:
        return True
    if top_def.strength == current_def.strength:
        return not current_def.right_assoc
    return False


def reorder(tokens, variables=None, constants=None):
    """
    Args:
        tokens: tokenize() 的输出
        variables: 变量表（支持 in / [] 的映射），优先于常数和函数
        constants: 保留常数，默认取配置（e, π）
    Returns:
        TypedToken 后缀序列
    """
    if variables is None:
        variables = {}
    if constants is None:
        constants = EVALUATOR_CONFIG['constants']

    output = []
    stack = []  # 临时操作符栈

    for token in tokens:
        # a) 数值 -> 输出
        if token.type == TokenType.NUMBER:
            output.append(TypedToken.number(float(token.text)))

        elif token.type == TokenType.SYMBOL:
            # 逗号不携带结构信息
            if token.text == ',':
                continue

            # b) 左括号 -> 入栈
            if token.text == '(':
                stack.append(TypedToken.paren())

            # c) 右括号 -> 弹出直到左括号
            elif token.text == ')':
                while True:
                    if not stack:
                        raise MismatchedParenthesis()
                    top = stack.pop()
                    if top.type == TypedTokenType.PAREN:
                        break
                    output.append(top)

            # d) 操作符 -> 先弹出函数与结合更紧的操作符
            else:
                kind = OperatorKind(token.text)
                while stack and _should_pop(stack[-1], kind):
                    output.append(stack.pop())
                stack.append(TypedToken.operator(kind))

        # e) 标识符：变量 > 常数 > 函数
        elif token.text in variables:
            output.append(TypedToken.number(variables[token.text]))
        elif token.text in constants:
            output.append(TypedToken.number(constants[token.text]))
        else:
            stack.append(TypedToken.function(token.text))

    # 清空临时栈（后入先出）
    while stack:
        top = stack.pop()
        if top.type == TypedTokenType.PAREN:
            raise MismatchedParenthesis()
        output.append(top)

    logger.debug(f"RPN expression: {' '.join(t.name for t in output)}")
    return output

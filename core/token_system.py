"""core/token_system.py"""
from collections import namedtuple
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"  # 数值字面量（原始文本）
    SYMBOL = "symbol"  # + - * / ^ ! , ( ) 以及一元 u+ u-
    IDENTIFIER = "identifier"  # 变量、常数或函数名


class OperatorKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    FACT = "!"
    POS = "u+"  # 一元正号
    NEG = "u-"  # 一元负号


class TypedTokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    PAREN = "paren"  # 仅存在于调度栈，不会进入输出序列


# 词法Token，Reorderer消费后即丢弃
Token = namedtuple('Token', ['type', 'text'])


class TypedToken(namedtuple('TypedToken', ['type', 'value'])):
    """
    后缀序列中的元素
    - NUMBER: value 为 float
    - OPERATOR: value 为 OperatorKind
    - FUNCTION: value 为函数名
    """
    __slots__ = ()

    @classmethod
    def number(cls, value):
        return cls(TypedTokenType.NUMBER, float(value))

    @classmethod
    def operator(cls, kind):
        return cls(TypedTokenType.OPERATOR, kind)

    @classmethod
    def function(cls, name):
        return cls(TypedTokenType.FUNCTION, name)

    @classmethod
    def paren(cls):
        return cls(TypedTokenType.PAREN, '(')

    @property
    def name(self):
        """用于日志/RPN显示的文本形式"""
        if self.type == TypedTokenType.NUMBER:
            return repr(self.value)
        if self.type == TypedTokenType.OPERATOR:
            return self.value.value
        return self.value


class OperatorDef:
    def __init__(self, kind, arity, strength, right_assoc=False):
        self.kind = kind
        self.arity = arity
        self.strength = strength  # 数值越小结合越紧
        self.right_assoc = right_assoc  # 同层不互相弹出，按入栈顺序保留


# 操作符定义字典（函数调用不在此表中，总是先于任何操作符弹出）
OPERATOR_DEFINITIONS = {
    OperatorKind.FACT: OperatorDef(OperatorKind.FACT, arity=1, strength=1),
    # ^ 与一元正负号同层：-3^2 = -(3^2)
    OperatorKind.POW: OperatorDef(OperatorKind.POW, arity=2, strength=2, right_assoc=True),
    OperatorKind.POS: OperatorDef(OperatorKind.POS, arity=1, strength=2, right_assoc=True),
    OperatorKind.NEG: OperatorDef(OperatorKind.NEG, arity=1, strength=2, right_assoc=True),
    OperatorKind.MUL: OperatorDef(OperatorKind.MUL, arity=2, strength=3),
    OperatorKind.DIV: OperatorDef(OperatorKind.DIV, arity=2, strength=3),
    OperatorKind.ADD: OperatorDef(OperatorKind.ADD, arity=2, strength=4),
    OperatorKind.SUB: OperatorDef(OperatorKind.SUB, arity=2, strength=4),
}

SYMBOLS = frozenset('+-*/^!,()')
BINARY_SIGNS = frozenset('+-')


class RPNValidator:
    @staticmethod
    def calculate_stack_size(postfix, function_definitions=None):
        """
        模拟栈深度：数值 +1，操作符/函数 -(arity-1)
        返回 None 表示中途下溢（未知函数按 arity=1 计）
        """
        if function_definitions is None:
            from core.operators import FUNCTION_DEFINITIONS
            function_definitions = FUNCTION_DEFINITIONS

        stack_size = 0
        for token in postfix:
            if token.type == TypedTokenType.NUMBER:
                stack_size += 1
                continue

            if token.type == TypedTokenType.OPERATOR:
                arity = OPERATOR_DEFINITIONS[token.value].arity
            else:
                definition = function_definitions.get(token.value)
                arity = definition.arity if definition is not None else 1

            if stack_size < arity:
                return None
            stack_size = stack_size - arity + 1

        return stack_size

    @staticmethod
    def is_complete_expression(postfix, function_definitions=None):
        """完整表达式应该正好留下1个结果"""
        return RPNValidator.calculate_stack_size(postfix, function_definitions) == 1

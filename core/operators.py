"""core/operators.py"""
import math
from collections import namedtuple

import numpy as np

from core.token_system import OperatorKind

MAX_ROUND_DIGITS = 15  # round() 小数位上下限


def _scalar(x):
    return np.float64(x)


class Operators:
    """所有操作符与内置函数的静态方法集合，统一使用 IEEE 浮点语义（不抛出除零/定义域异常）"""

    # 一元操作符====================

    @staticmethod
    def pos(operand):
        return _scalar(operand)

    @staticmethod
    def neg(operand):
        return -_scalar(operand)

    @staticmethod
    def factorial(operand):
        """
        阶乘 1*2*...*n；调用方负责整数检查
        n<=0 时循环不执行，结果为1（负整数同样返回1）
        """
        operand = _scalar(operand)
        if np.isinf(operand):
            return np.float64(np.inf) if operand > 0 else np.float64(1.0)

        result = np.float64(1.0)
        with np.errstate(over='ignore'):
            for j in range(1, int(operand) + 1):
                result = result * j
                if np.isinf(result):
                    # 溢出后继续乘也只是 inf
                    break
        return result

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        with np.errstate(all='ignore'):
            return _scalar(operand1) + _scalar(operand2)

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(all='ignore'):
            return _scalar(operand1) - _scalar(operand2)

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(all='ignore'):
            return _scalar(operand1) * _scalar(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除零按浮点语义得到 inf/nan"""
        with np.errstate(all='ignore'):
            return np.divide(_scalar(operand1), _scalar(operand2))

    @staticmethod
    def pow(operand1, operand2):
        """负底数的分数次幂得到 nan（不产生复数）"""
        with np.errstate(all='ignore'):
            return np.power(_scalar(operand1), _scalar(operand2))

    # 内置函数=====================================

    @staticmethod
    def sin(x):
        with np.errstate(invalid='ignore'):
            return np.sin(_scalar(x))

    @staticmethod
    def cos(x):
        with np.errstate(invalid='ignore'):
            return np.cos(_scalar(x))

    @staticmethod
    def tan(x):
        with np.errstate(invalid='ignore'):
            return np.tan(_scalar(x))

    @staticmethod
    def csc(x):
        with np.errstate(all='ignore'):
            return np.divide(1.0, np.sin(_scalar(x)))

    @staticmethod
    def sec(x):
        with np.errstate(all='ignore'):
            return np.divide(1.0, np.cos(_scalar(x)))

    @staticmethod
    def cot(x):
        with np.errstate(all='ignore'):
            return np.divide(1.0, np.tan(_scalar(x)))

    @staticmethod
    def sinh(x):
        with np.errstate(over='ignore'):
            return np.sinh(_scalar(x))

    @staticmethod
    def cosh(x):
        with np.errstate(over='ignore'):
            return np.cosh(_scalar(x))

    @staticmethod
    def tanh(x):
        return np.tanh(_scalar(x))

    @staticmethod
    def asin(x):
        with np.errstate(invalid='ignore'):
            return np.arcsin(_scalar(x))

    @staticmethod
    def acos(x):
        with np.errstate(invalid='ignore'):
            return np.arccos(_scalar(x))

    @staticmethod
    def atan(x):
        return np.arctan(_scalar(x))

    @staticmethod
    def atan2(y, x):
        return np.arctan2(_scalar(y), _scalar(x))

    @staticmethod
    def exp(x):
        with np.errstate(over='ignore'):
            return np.exp(_scalar(x))

    @staticmethod
    def ln(x):
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.log(_scalar(x))

    @staticmethod
    def log(x, base):
        """以 base 为底：ln(x)/ln(base)"""
        with np.errstate(all='ignore'):
            return np.divide(np.log(_scalar(x)), np.log(_scalar(base)))

    @staticmethod
    def abs(x):
        return np.abs(_scalar(x))

    @staticmethod
    def sqrt(x):
        with np.errstate(invalid='ignore'):
            return np.sqrt(_scalar(x))

    @staticmethod
    def round(x, digits):
        """银行家舍入；digits 先取整并限制在 [-15, 15]"""
        digits = _scalar(digits)
        if not np.isfinite(digits):
            return np.float64(np.nan)
        digits = int(np.clip(np.rint(digits), -MAX_ROUND_DIGITS, MAX_ROUND_DIGITS))
        return np.round(_scalar(x), digits)

    @staticmethod
    def fix(x):
        """向零截断"""
        return np.trunc(_scalar(x))

    @staticmethod
    def sign(x):
        return np.sign(_scalar(x))

    @staticmethod
    def ceiling(x):
        return np.ceil(_scalar(x))

    @staticmethod
    def floor(x):
        return np.floor(_scalar(x))

    @staticmethod
    def mod(x, y):
        """
        IEEE 余数：x - n*y，n 为 x/y 最近的整数
        注意符号不跟随 x：mod(5, 3) = -1
        """
        x, y = _scalar(x), _scalar(y)
        if np.isnan(x) or np.isnan(y) or y == 0 or np.isinf(x):
            return np.float64(np.nan)
        return np.float64(math.remainder(x, y))


# 操作符 -> 实现
OPERATOR_IMPLEMENTATIONS = {
    OperatorKind.ADD: Operators.add,
    OperatorKind.SUB: Operators.sub,
    OperatorKind.MUL: Operators.mul,
    OperatorKind.DIV: Operators.div,
    OperatorKind.POW: Operators.pow,
    OperatorKind.FACT: Operators.factorial,
    OperatorKind.POS: Operators.pos,
    OperatorKind.NEG: Operators.neg,
}


FunctionDef = namedtuple('FunctionDef', ['name', 'arity', 'impl'])

# 内置函数注册表：函数名 -> (arity, 实现)，导入后只读
FUNCTION_DEFINITIONS = {
    # 一元函数
    'sin': FunctionDef('sin', 1, Operators.sin),
    'cos': FunctionDef('cos', 1, Operators.cos),
    'tan': FunctionDef('tan', 1, Operators.tan),
    'csc': FunctionDef('csc', 1, Operators.csc),
    'sec': FunctionDef('sec', 1, Operators.sec),
    'cot': FunctionDef('cot', 1, Operators.cot),
    'sinh': FunctionDef('sinh', 1, Operators.sinh),
    'cosh': FunctionDef('cosh', 1, Operators.cosh),
    'tanh': FunctionDef('tanh', 1, Operators.tanh),
    'asin': FunctionDef('asin', 1, Operators.asin),
    'acos': FunctionDef('acos', 1, Operators.acos),
    'atan': FunctionDef('atan', 1, Operators.atan),
    'exp': FunctionDef('exp', 1, Operators.exp),
    'ln': FunctionDef('ln', 1, Operators.ln),
    'abs': FunctionDef('abs', 1, Operators.abs),
    'sqrt': FunctionDef('sqrt', 1, Operators.sqrt),
    'fix': FunctionDef('fix', 1, Operators.fix),
    'sign': FunctionDef('sign', 1, Operators.sign),
    'ceiling': FunctionDef('ceiling', 1, Operators.ceiling),
    'floor': FunctionDef('floor', 1, Operators.floor),

    # 二元函数（参数按书写顺序传入）
    'atan2': FunctionDef('atan2', 2, Operators.atan2),
    'log': FunctionDef('log', 2, Operators.log),
    'round': FunctionDef('round', 2, Operators.round),
    'mod': FunctionDef('mod', 2, Operators.mod),
}

"""core/errors.py - 计算器异常层级

保持本模块无依赖：session、data、main 以及测试都会导入它。
"""


class CalculatorError(Exception):
    """所有计算器错误的基类"""


class EvalError(CalculatorError):
    """单次 evaluate 调用失败"""


class EmptyInput(EvalError):
    def __init__(self):
        super().__init__("Input empty")


class InvalidCharacter(EvalError):
    def __init__(self, character):
        self.character = character
        super().__init__(f"Invalid character '{character}'")


class MismatchedParenthesis(EvalError):
    def __init__(self):
        super().__init__("Mismatched parenthesis")


class InvalidExpression(EvalError):
    """后缀序列非法：栈下溢，或结束时剩余值不止一个"""

    def __init__(self):
        super().__init__("Invalid expression")


class UnknownFunctionOrVariable(EvalError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown variable or function ({name})")


class NonIntegerFactorial(EvalError):
    def __init__(self, value=None):
        self.value = value
        super().__init__("Factorial (!) works only with integers")

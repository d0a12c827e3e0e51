"""会话层 - 赋值约定、关键字命令与历史记录"""
import logging
from collections import namedtuple
from typing import Dict, List, Optional

from config.config import EVALUATOR_CONFIG, SESSION_CONFIG
from core import ExpressionEvaluator, FUNCTION_DEFINITIONS
from core.errors import CalculatorError
from core.tokenizer import NUMBER_PATTERN, MANTISSA_WITH_EXPONENT
from utils.benchmark import run_benchmark
from utils.formatting import format_result

logger = logging.getLogger(__name__)

# 一条历史记录：编号、输入表达式、结果文本（或错误信息）
Entry = namedtuple('Entry', ['id', 'expression', 'result'])


class AssignmentError(CalculatorError):
    """赋值语法或变量名不合法"""


def is_valid_variable_name(name, function_names=None):
    """变量名不能与函数、关键字、保留常数冲突，也不能包含操作符或被解析为数字"""
    if function_names is None:
        function_names = FUNCTION_DEFINITIONS.keys()

    if not name:
        return False
    if name in function_names or name in SESSION_CONFIG['keywords']:
        return False
    if name in EVALUATOR_CONFIG['constants']:
        return False
    if any(char in SESSION_CONFIG['forbidden_name_characters'] for char in name):
        return False
    if NUMBER_PATTERN.fullmatch(name):
        return False
    # 1e 之后的 +/- 会被扫描为指数，变量将无法引用
    if MANTISSA_WITH_EXPONENT.fullmatch(name):
        return False
    return True


def _help_text():
    unary = [d.name for d in FUNCTION_DEFINITIONS.values() if d.arity == 1]
    binary = [f"{d.name}(a,b)" for d in FUNCTION_DEFINITIONS.values() if d.arity == 2]
    return "\n".join([
        "Operators: + - * / ^ ! ( ) ,",
        f"Functions: {', '.join(unary)}",
        f"Binary functions: {', '.join(binary)}",
        f"Constants: {', '.join(EVALUATOR_CONFIG['constants'])}",
        "Assign with name=expression; results are stored in "
        f"'{SESSION_CONFIG['default_variable']}' by default",
        f"Keywords: {', '.join(SESSION_CONFIG['keywords'])}",
    ])


class CalculatorSession:
    """逐行处理用户输入，维护历史记录；变量存放在求值器中"""

    def __init__(self, evaluator=None, precision=None, benchmark_iterations=None):
        self.evaluator = evaluator or ExpressionEvaluator()
        self.precision = SESSION_CONFIG['precision'] if precision is None else precision
        self.benchmark_iterations = benchmark_iterations
        self.history: List[Entry] = []
        self.next_id = 1

    def restore(self, history: List[Entry], variables: Dict[str, float]):
        """载入持久化的历史和变量"""
        self.history = list(history)
        for name, value in variables.items():
            self.evaluator.set_variable(name, value)
        self.next_id = max((entry.id for entry in self.history), default=0) + 1
        logger.info(f"Restored {len(self.history)} entries and {len(variables)} variables")

    def clear(self):
        self.history.clear()
        self.evaluator.clear_variable()
        self.next_id = 1

    def execute(self, line: str) -> Optional[str]:
        """
        处理一行输入
        Returns:
            要显示的文本；空输入返回 None
        """
        text = line.replace("\n", "").replace("\r", "")
        keyword = text.strip().lower()

        # a) 空输入
        if keyword == "":
            return None

        # b) 关键字
        if keyword == "clear":
            self.clear()
            return "History and variables cleared"

        if keyword in ("help", "about"):
            return _help_text()

        if keyword.startswith("precision="):
            return self._set_precision(keyword.split("=", 1)[1])

        if keyword == "test":
            avg_ms = run_benchmark(self.evaluator, iterations=self.benchmark_iterations)
            return f"Performance test result: {avg_ms:.4f} milliseconds on average for each evaluation"

        if keyword == "print":
            return self._list_variables()

        # c) 赋值或表达式（与 tokenize 一样去掉全部空白）
        return self._evaluate_entry("".join(text.split()))

    def _set_precision(self, raw):
        try:
            precision = int(raw)
        except ValueError:
            return "Invalid syntax (use precision=2 for example)"

        if not SESSION_CONFIG['min_precision'] <= precision <= SESSION_CONFIG['max_precision']:
            return (f"Precision must be between {SESSION_CONFIG['min_precision']} "
                    f"and {SESSION_CONFIG['max_precision']}")

        self.precision = precision
        return f"Precision set to {precision} decimal places"

    def _list_variables(self):
        variables = self.evaluator.variables
        if not variables:
            return "No variables defined"
        return "\n".join(f"{name} = {format_result(value, self.precision)}"
                         for name, value in sorted(variables.items()))

    def _split_assignment(self, expr):
        """name=expr -> (name, expr)；无 '=' 时存入默认变量"""
        if "=" not in expr:
            return SESSION_CONFIG['default_variable'], expr

        parts = expr.split("=")
        if len(parts) > 2:
            raise AssignmentError("Incorrect syntax (use only one '=')")
        name, value_expr = parts
        if not name:
            raise AssignmentError("Incorrect syntax (variable name empty)")
        return name, value_expr

    def _evaluate_entry(self, expr):
        try:
            name, value_expr = self._split_assignment(expr)
            if not is_valid_variable_name(name, self.evaluator.function_definitions):
                raise AssignmentError("Invalid name for variable")

            value = self.evaluator.evaluate(value_expr)
            result = format_result(value, self.precision)
            # 只有成功求值后才写入变量
            self.evaluator.set_variable(name, value)

        except CalculatorError as e:
            logger.debug(f"Entry '{expr}' failed: {e}")
            result = str(e)

        entry = Entry(self.next_id, expr, result)
        self.history.append(entry)
        self.next_id += 1
        return result

"""表达式求值器 - 对外的唯一入口（tokenize -> reorder -> reduce）"""
import logging
import threading
from typing import Dict, Optional

from config.config import EVALUATOR_CONFIG
from core.errors import EvalError
from core.operators import FUNCTION_DEFINITIONS
from core.reorderer import reorder
from core.rpn_evaluator import RPNEvaluator
from core.token_system import RPNValidator
from core.tokenizer import tokenize
from core.variables import VariableStore

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """
    每个实例持有一张变量表；函数注册表全局只读
    变量表的所有读写都在同一把锁内进行，可被多个线程共享
    """

    def __init__(self, variables: Optional[Dict[str, float]] = None):
        self.rpn_evaluator = RPNEvaluator
        self.function_definitions = FUNCTION_DEFINITIONS
        self.constants = dict(EVALUATOR_CONFIG['constants'])
        self._variables = VariableStore(variables)
        self._lock = threading.RLock()

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 单个中缀表达式
        Returns:
            float 结果
        Raises:
            EvalError 的子类；失败不会修改变量表
        """
        try:
            postfix = self._to_postfix(expression)
        except EvalError as e:
            logger.debug(f"Error evaluating expression '{expression[:50]}': {e}")
            raise

        try:
            return self.rpn_evaluator.evaluate(postfix, self.function_definitions)
        except EvalError as e:
            logger.debug(f"Error evaluating expression '{expression[:50]}' "
                         f"(RPN: {' '.join(t.name for t in postfix)}): {e}")
            raise

    def to_rpn(self, expression: str) -> str:
        """返回后缀序列的文本形式，便于调试"""
        postfix = self._to_postfix(expression)
        depth = RPNValidator.calculate_stack_size(postfix, self.function_definitions)
        if depth != 1:
            logger.debug(f"RPN for '{expression[:50]}' leaves stack depth {depth}")
        return ' '.join(t.name for t in postfix)

    def _to_postfix(self, expression):
        tokens = tokenize(expression)
        # 变量只在 reorder 阶段读取
        with self._lock:
            return reorder(tokens, self._variables, self.constants)

    # ================== 变量管理 ==================

    def set_variable(self, name: str, value: float):
        """插入或覆盖变量，名称校验由调用方负责"""
        with self._lock:
            self._variables.set(name, value)

    def clear_variable(self, name: Optional[str] = None):
        """删除一个变量；name 为 None 时清空全部"""
        with self._lock:
            if name is None:
                self._variables.clear()
            else:
                self._variables.remove(name)

    @property
    def variables(self) -> Dict[str, float]:
        """当前变量表的副本"""
        with self._lock:
            return self._variables.snapshot()

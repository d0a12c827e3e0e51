"""core/variables.py - 用户变量表"""
import logging

logger = logging.getLogger(__name__)


class VariableStore:
    """名称 -> float；区分大小写，不保证顺序，只在显式调用时增删"""

    def __init__(self, initial=None):
        self._values = {}
        if initial:
            for name, value in initial.items():
                self.set(name, value)

    def set(self, name, value):
        """插入或覆盖，不校验名称（由调用方负责）"""
        self._values[name] = float(value)

    def remove(self, name):
        """删除单个变量，不存在时忽略；返回是否删除"""
        if name in self._values:
            del self._values[name]
            return True
        return False

    def clear(self):
        count = len(self._values)
        self._values.clear()
        logger.debug(f"Cleared {count} variables")

    def snapshot(self):
        return dict(self._values)

    def __contains__(self, name):
        return name in self._values

    def __getitem__(self, name):
        return self._values[name]

"""数据持久化模块 - 历史记录与变量表的读写"""
import time
import logging
from pathlib import Path

import pandas as pd

from config.config import DATA_CONFIG
from session.calculator import Entry

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ['id', 'expression', 'result']
VARIABLE_COLUMNS = ['name', 'value']


class SessionStore:
    """把会话状态保存为两个CSV文件：history.csv 和 variables.csv"""

    def __init__(self, state_dir=None):
        state_dir = state_dir or DATA_CONFIG['state_dir']
        self.state_dir = Path(state_dir).expanduser()
        self.history_path = self.state_dir / DATA_CONFIG['history_file']
        self.variables_path = self.state_dir / DATA_CONFIG['variables_file']

    def save(self, history, variables):
        """
        保存会话状态

        Parameters:
        - history: Entry 列表
        - variables: 变量字典 name -> float
        """
        self.state_dir.mkdir(parents=True, exist_ok=True)

        history_df = pd.DataFrame([tuple(entry) for entry in history], columns=HISTORY_COLUMNS)
        history_df.to_csv(self.history_path, index=False)

        variables_df = pd.DataFrame(sorted(variables.items()), columns=VARIABLE_COLUMNS)
        variables_df.to_csv(self.variables_path, index=False)

        logger.info(f"Saved {len(history_df)} entries and {len(variables_df)} variables to {self.state_dir}")

    def load(self):
        """
        读取会话状态，文件不存在时返回空状态

        Returns:
        - history (Entry 列表), variables (字典)
        """
        start = time.perf_counter()
        history = self._load_history()
        variables = self._load_variables()

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        if elapsed_ms > DATA_CONFIG['slow_load_ms']:
            logger.warning(f"Loading state took {elapsed_ms:.0f} ms; "
                           f"consider running 'clear' to shrink {self.state_dir}")

        logger.info(f"Loaded {len(history)} entries and {len(variables)} variables from {self.state_dir}")
        return history, variables

    def _load_history(self):
        if not self.history_path.exists():
            return []

        # 文本列原样保留：结果可能就是 "NaN"
        df = pd.read_csv(self.history_path, dtype={'expression': str, 'result': str},
                         keep_default_na=False)
        missing = set(HISTORY_COLUMNS) - set(df.columns)
        if missing:
            raise ValueError(f"History file {self.history_path} is missing columns: {sorted(missing)}")

        return [Entry(int(row.id), row.expression, row.result)
                for row in df.itertuples(index=False)]

    def _load_variables(self):
        if not self.variables_path.exists():
            return {}

        # 只有 value 列的空字符串视为 NaN，名称如 "NA" 保持原样
        df = pd.read_csv(self.variables_path, dtype={'name': str},
                         keep_default_na=False, na_values={'value': ['']},
                         float_precision='round_trip')
        missing = set(VARIABLE_COLUMNS) - set(df.columns)
        if missing:
            raise ValueError(f"Variables file {self.variables_path} is missing columns: {sorted(missing)}")

        return {row.name: float(row.value) for row in df.itertuples(index=False)}

"""utils/benchmark.py - 求值性能测试"""
import time
import logging

import numpy as np

from config.config import BENCHMARK_CONFIG

logger = logging.getLogger(__name__)


def run_benchmark(evaluator, iterations=None, expressions=None):
    """
    重复评估基准表达式

    Parameters:
    - evaluator: ExpressionEvaluator 实例
    - iterations: 轮数，默认取配置
    - expressions: 基准表达式列表，默认取配置

    Returns:
    - 平均每次评估耗时（毫秒）
    """
    iterations = iterations or BENCHMARK_CONFIG['iterations']
    expressions = expressions or BENCHMARK_CONFIG['expressions']

    logger.info(f"Running benchmark: {iterations} rounds x {len(expressions)} expressions")

    round_times = np.zeros(iterations)
    for i in range(iterations):
        start = time.perf_counter()
        for expression in expressions:
            evaluator.evaluate(expression)
        round_times[i] = time.perf_counter() - start

    avg_ms = float(np.mean(round_times) / len(expressions) * 1000.0)
    logger.info(f"Benchmark finished: {avg_ms:.4f} ms per evaluation "
                f"(std per round {np.std(round_times) * 1000.0:.4f} ms)")
    return avg_ms

"""工具模块"""
from .formatting import format_result
from .benchmark import run_benchmark

__all__ = ['format_result', 'run_benchmark']

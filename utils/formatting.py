"""utils/formatting.py"""
import numpy as np

SCIENTIFIC_THRESHOLD = 1e15


def format_result(value, precision):
    """按显示精度格式化结果：4 / 2.5 / 1.2e+20 / Infinity / NaN"""
    value = np.float64(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    rounded = np.round(value, precision)
    if rounded == 0:
        rounded = np.float64(0.0)  # 去掉 -0

    if abs(rounded) >= SCIENTIFIC_THRESHOLD:
        return np.format_float_scientific(rounded, trim='-')
    return np.format_float_positional(rounded, trim='-')

"""配置文件"""
import math
import logging

logger = logging.getLogger(__name__)

# 求值器参数
EVALUATOR_CONFIG = {
    # 保留常数，可被同名变量覆盖
    "constants": {
        "e": math.e,
        "π": math.pi,
    },
    # 表达式中禁止出现的字符
    "reserved_characters": "$",
}

# 会话层参数
SESSION_CONFIG = {
    "default_variable": "ans",  # 未指定变量名时结果存入 ans
    "precision": 6,  # 显示保留的小数位
    "min_precision": 0,
    "max_precision": 10,
    "keywords": ["clear", "precision", "help", "about", "test", "print"],
    # 变量名中不允许出现的字符
    "forbidden_name_characters": "+-*/!^(),.$",
}

# 性能测试参数
BENCHMARK_CONFIG = {
    "iterations": 2000,
    "expressions": [
        "1+5-4*8/2+9-8/7+9*8*7*6*5*4*3*2*1*3.1415926*0.001-2.788*698.258774125/5.2569874+1",
        "ln(ln(ln(sqrt(3.25648)+59874/sqrt(45874))))*sin(ln(99/7))^2+fix(ln(77))!",
        "tanh(cosh(8))*sin(9)+1-88/7+exp(4)+e*e*e/(e*e*e)+9874562.2547854^0.2",
        "sin(asin(0.5))+cos(acos(0.5))+asin(sin(0.5))+acos(cos(0.5))+tan(atan(0.9))",
        "fix(round(1.11,2))*4.99*0.2*5+5-9-9/8-9/7-9/6-9/5-9/4-9/3-9/2-9/1+sin(3.1415926)^2",
    ],
}

# 数据路径
DATA_CONFIG = {
    "state_dir": "~/.mathics",
    "history_file": "history.csv",
    "variables_file": "variables.csv",
    "slow_load_ms": 7000,  # 超过该时长提示执行 clear
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert set(EVALUATOR_CONFIG["constants"]) == {"e", "π"}, "reserved constants are e and π"
    assert SESSION_CONFIG["min_precision"] <= SESSION_CONFIG["precision"] <= SESSION_CONFIG["max_precision"], \
        "default precision out of range"
    assert SESSION_CONFIG["default_variable"] not in SESSION_CONFIG["keywords"], \
        "default variable collides with a keyword"
    assert BENCHMARK_CONFIG["iterations"] > 0, "benchmark needs at least one iteration"
    logger.debug("Configuration validated successfully")

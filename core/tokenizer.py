"""core/tokenizer.py - 将输入字符串切分为词法Token"""
import re
import logging

from config.config import EVALUATOR_CONFIG
from core.errors import EmptyInput, InvalidCharacter
from core.token_system import Token, TokenType, SYMBOLS, BINARY_SIGNS

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')

# 十进制浮点字面量：12 / 1.5 / 1. / .5 / 1e-3
NUMBER_PATTERN = re.compile(r'(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
# 尾数后紧跟 e/E：后面的 +/- 属于指数而不是操作符
MANTISSA_WITH_EXPONENT = re.compile(r'(?:[0-9]+\.?[0-9]*|\.[0-9]+)[eE]')

# 这些符号之后的 +/- 视为一元；')' 与后缀 '!' 之后为二元
UNARY_CONTEXT = frozenset(['+', '-', '*', '/', '^', ',', '(', 'u+', 'u-'])


def tokenize(expression, reserved_characters=None):
    """
    词法分析
    Args:
        expression: 原始表达式字符串（空白会被全部移除）
        reserved_characters: 禁止出现的字符，默认取配置
    Returns:
        Token列表
    """
    if reserved_characters is None:
        reserved_characters = EVALUATOR_CONFIG['reserved_characters']

    text = ''.join(expression.split())
    if not text:
        raise EmptyInput()

    for char in text:
        if char in reserved_characters:
            raise InvalidCharacter(char)

    tokens = _scan(text)
    tokens = _collapse_signs(tokens)
    tokens = _classify_signs(tokens)
    logger.debug(f"Tokenized '{text}': {[t.text for t in tokens]}")
    return tokens


def _scan(text):
    """单遍扫描：符号各自成Token，其余连续字符组成数值或标识符"""
    tokens = []
    i = 0
    n = len(text)

    while i < n:
        char = text[i]
        if char in SYMBOLS:
            tokens.append(Token(TokenType.SYMBOL, char))
            i += 1
            continue

        start = i
        while i < n:
            char = text[i]
            if char in SYMBOLS:
                # 1e-5 这类科学计数法
                if (char in BINARY_SIGNS and i + 1 < n and text[i + 1] in DIGITS
                        and MANTISSA_WITH_EXPONENT.fullmatch(text[start:i])):
                    i += 1
                    continue
                break
            i += 1

        atom = text[start:i]
        if NUMBER_PATTERN.fullmatch(atom):
            tokens.append(Token(TokenType.NUMBER, atom))
        else:
            tokens.append(Token(TokenType.IDENTIFIER, atom))

    return tokens


def _collapse_signs(tokens):
    """'+' 后紧跟 '-' 时只保留 '-'：3+-4 即 3-4"""
    collapsed = []
    for idx, token in enumerate(tokens):
        if (token.type == TokenType.SYMBOL and token.text == '+'
                and idx + 1 < len(tokens)
                and tokens[idx + 1].type == TokenType.SYMBOL and tokens[idx + 1].text == '-'):
            continue
        collapsed.append(token)
    return collapsed


def _classify_signs(tokens):
    """区分一元/二元正负号，一元记为 u+ / u-"""
    result = []
    prev = None

    for token in tokens:
        if token.type == TokenType.SYMBOL and token.text in BINARY_SIGNS:
            is_unary = prev is None or (prev.type == TokenType.SYMBOL and prev.text in UNARY_CONTEXT)
            if is_unary:
                token = Token(TokenType.SYMBOL, 'u' + token.text)
        result.append(token)
        prev = token

    return result

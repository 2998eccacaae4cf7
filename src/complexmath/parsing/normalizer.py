"""
Normalizer — Разбор разнородного входа в каноническую пару (re, im)

Допустимые формы (порядок разрешения):
1. Два аргумента (a, b)          → re=a, im=b (нечисловое → NaN, без ошибки)
2. None                          → (0, 0)
3. Число (int, float, Fraction, Decimal, bool) → (a, 0)
4. complex / Complex / вариант входа          → его пара
5. Keyed-запись {re,im} / {abs,arg} / {r,phi} / {r,i}
6. Последовательность из двух чисел [re, im]
7. Строка: "3", "4+3i", "3-i", "1e3i", "-2.5e-3 - i7"

Всё остальное → InvalidArgument.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормализатор — чистая функция: каждый вызов возвращает новую пару,
   общего изменяемого состояния нет
2. NaN в компонентах — легитимное значение, не ошибка разбора
3. Ошибка возникает до построения какого-либо значения
"""

import logging
import math
import numbers
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Final

from pydantic import ValidationError

from src.complexmath.contracts import ComplexRecordValidator
from src.complexmath.parsing.inputs import (
    CartesianInput,
    ComplexInput,
    PairInput,
    PolarAbsArgInput,
    PolarRPhiInput,
    SupportsComplexPair,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Вход не распознан: неподдерживаемый тип, некорректная строка,
    последовательность не из двух чисел или запись без известной пары ключей.

    Ошибка программиста/входных данных, не транзиентная.
    """

    pass


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """Результат нормализации."""

    ok: bool
    re: float
    im: float
    error: str = ""

    @classmethod
    def success(cls, re_part: float, im_part: float) -> "ParseResult":
        return cls(ok=True, re=float(re_part), im=float(im_part))

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(ok=False, re=float("nan"), im=float("nan"), error=error)

    def unwrap(self) -> tuple[float, float]:
        """
        Пара (re, im) либо InvalidArgument.

        Raises:
            InvalidArgument: Если разбор неуспешен
        """
        if not self.ok:
            raise InvalidArgument(self.error)
        return (self.re, self.im)


# =============================================================================
# TOKENIZER
# =============================================================================

# Число с экспонентой | десятичное/целое | ".5" | любой одиночный символ
_TOKEN_PATTERN: Final = re.compile(
    r"\d+\.?\d*e[+-]?\d+|\d+\.?\d*|\.\d+|.", re.ASCII | re.DOTALL
)

_NUMBER_PATTERN: Final = re.compile(r"\d+\.?\d*(?:e[+-]?\d+)?|\.\d+", re.ASCII)

_IMAGINARY_UNIT: Final = frozenset({"i", "I"})


def tokenize(text: str) -> list[str]:
    """
    Разбиение строки на токены. Подчёркивания (разделители разрядов)
    удаляются заранее.

    Examples:
        >>> tokenize("1e3i")
        ['1e3', 'i']
        >>> tokenize("3 - 1_000i")
        ['3', ' ', '-', ' ', '1000', 'i']
    """
    return _TOKEN_PATTERN.findall(text.replace("_", ""))


def _is_number_token(token: str | None) -> bool:
    return token is not None and _NUMBER_PATTERN.fullmatch(token) is not None


def _parse_text(text: str) -> ParseResult:
    tokens = tokenize(text)
    if all(token.isspace() for token in tokens):
        return ParseResult.failure(f"Invalid Param: empty string {text!r}")

    re_acc = 0.0
    im_acc = 0.0

    # Первый член несёт неявный "+"
    plus = 1
    minus = 0

    index = 0
    while index < len(tokens):
        token = tokens[index]
        following = tokens[index + 1] if index + 1 < len(tokens) else None

        if token.isspace():
            pass
        elif token == "+":
            plus += 1
        elif token == "-":
            minus += 1
        elif token in _IMAGINARY_UNIT:
            if plus + minus == 0:
                return ParseResult.failure(f"Invalid Param: missing sign before 'i' in {text!r}")

            sign = -1.0 if minus % 2 else 1.0

            # "i3": коэффициент после мнимой единицы
            if _is_number_token(following):
                im_acc += sign * float(following)
                index += 1
            else:
                im_acc += sign
            plus = minus = 0
        else:
            if plus + minus == 0 or not _is_number_token(token):
                return ParseResult.failure(f"Invalid Param: unexpected {token!r} in {text!r}")

            sign = -1.0 if minus % 2 else 1.0

            if following in _IMAGINARY_UNIT:
                im_acc += sign * float(token)
                index += 1
            else:
                re_acc += sign * float(token)
            plus = minus = 0

        index += 1

    # Знак без последующего члена
    if plus + minus > 0:
        return ParseResult.failure(f"Invalid Param: dangling sign in {text!r}")

    return ParseResult.success(re_acc, im_acc)


# =============================================================================
# RECORDS & SEQUENCES
# =============================================================================

_RECORD_VALIDATOR: Final = ComplexRecordValidator()


def _select_record_variant(record: Mapping) -> ComplexInput:
    if "re" in record and "im" in record:
        return CartesianInput(re=record["re"], im=record["im"])
    if "abs" in record and "arg" in record:
        return PolarAbsArgInput(abs=record["abs"], arg=record["arg"])
    if "r" in record and "phi" in record:
        return PolarRPhiInput(r=record["r"], phi=record["phi"])
    # Алиас старой схемы ключей {r, i}
    return CartesianInput(re=record["r"], im=record["i"])


def _parse_record(record: Mapping) -> ParseResult:
    error = _RECORD_VALIDATOR.first_error_message(dict(record))
    if error is not None:
        return ParseResult.failure(f"Invalid Param: unrecognized record ({error})")

    try:
        variant = _select_record_variant(record)
    except ValidationError as e:
        return ParseResult.failure(f"Invalid Param: {e}")

    return ParseResult.success(*variant.to_pair())


def _is_real_number(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Decimal))


def _real_to_float(value: Any) -> float:
    """
    Число → float; int/Fraction вне диапазона double дают ±inf.

    Examples:
        >>> _real_to_float(10 ** 400)
        inf
        >>> _real_to_float(-(10 ** 400))
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _parse_sequence(values: Sequence) -> ParseResult:
    if len(values) != 2:
        return ParseResult.failure(
            f"Invalid Param: sequence must have exactly 2 elements, got {len(values)}"
        )

    if not all(_is_real_number(v) for v in values):
        return ParseResult.failure(f"Invalid Param: non-numeric sequence {values!r}")

    try:
        pair = PairInput.from_sequence([_real_to_float(v) for v in values])
    except ValidationError as e:
        return ParseResult.failure(f"Invalid Param: {e}")

    return ParseResult.success(*pair.to_pair())


# =============================================================================
# NORMALIZER
# =============================================================================


def coerce_float(value: Any) -> float:
    """
    Приведение к float для формы с двумя аргументами.

    Нечисловое значение даёт NaN, а не исключение; целое вне диапазона
    double даёт ±inf.

    Examples:
        >>> coerce_float(3)
        3.0
        >>> coerce_float("2.5")
        2.5
        >>> coerce_float("abc")
        nan
        >>> coerce_float(10 ** 400)
        inf
    """
    try:
        return _real_to_float(value)
    except (TypeError, ValueError):
        return float("nan")


def try_parse(a: Any = None, b: Any = None) -> ParseResult:
    """
    Нормализация входа в каноническую пару без исключений.

    Args:
        a: Первый аргумент (любая допустимая форма)
        b: Мнимая часть (только для формы с двумя аргументами)

    Returns:
        ParseResult с ok=True и парой (re, im), либо ok=False и текстом ошибки
    """
    if b is not None:
        return ParseResult.success(coerce_float(a), coerce_float(b))

    if a is None:
        return ParseResult.success(0.0, 0.0)

    if _is_real_number(a):
        return ParseResult.success(_real_to_float(a), 0.0)

    if isinstance(a, complex):
        return ParseResult.success(a.real, a.imag)

    if isinstance(a, SupportsComplexPair):
        return ParseResult.success(*a.to_pair())

    if isinstance(a, str):
        return _parse_text(a)

    if isinstance(a, Mapping):
        return _parse_record(a)

    if isinstance(a, Sequence) and not isinstance(a, (bytes, bytearray)):
        return _parse_sequence(a)

    return ParseResult.failure(f"Invalid Param: unsupported type {type(a).__name__}")


def parse(a: Any = None, b: Any = None) -> tuple[float, float]:
    """
    Нормализация входа в каноническую пару (re, im).

    Raises:
        InvalidArgument: Если форма входа или грамматика строки не распознаны
    """
    result = try_parse(a, b)
    if not result.ok:
        logger.debug("Rejected complex input %r: %s", a, result.error)
    return result.unwrap()

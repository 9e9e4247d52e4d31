"""
Color — Модель цвета и кодек компонент RGBA

Два внешних представления:
1. Payload (bytes): JSON-массив [red, green, blue, alpha], каждый в [0, 1].
   Кодирование детерминировано, decode(encode(c)) == c точно.
2. Словарь {"red", "green", "blue"} со значениями в [0, 255].
   Только чтение: alpha всегда 1.0, обратного преобразования нет.

Все ошибки — ColorError с конкретным видом. Дефолтный цвет вместо ошибки
никогда не подставляется.
"""

import json
import logging
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any, Final, Optional, Protocol, Tuple, Union, runtime_checkable

import jsonschema
import pydantic
from pydantic import BaseModel, Field

from valuecodecs.core.contracts import validate_color_dictionary, validate_color_payload
from valuecodecs.core.errors import ColorError, ColorErrorKind

logger = logging.getLogger(__name__)

# Максимальное значение канала в словарном представлении
CHANNEL_MAX: Final[float] = 255.0

# Alpha для цветов из словаря (полностью непрозрачный)
OPAQUE_ALPHA: Final[float] = 1.0

_HEX_COLOR: Final = re.compile(r"#((?:[0-9a-fA-F]{2}){3,4})")


# =============================================================================
# MODELS
# =============================================================================


class Color(BaseModel):
    """
    Цвет в нормализованных компонентах RGBA.

    Immutable (frozen=True).
    """

    red: float = Field(..., ge=0, le=1, description="Красный канал [0, 1]")
    green: float = Field(..., ge=0, le=1, description="Зелёный канал [0, 1]")
    blue: float = Field(..., ge=0, le=1, description="Синий канал [0, 1]")
    alpha: float = Field(OPAQUE_ALPHA, ge=0, le=1, description="Прозрачность [0, 1]")

    model_config = {"frozen": True, "allow_inf_nan": False}

    def components(self) -> Tuple[float, float, float, float]:
        """Компоненты в порядке RGBA."""
        return (self.red, self.green, self.blue, self.alpha)


class ColorDictionary(BaseModel):
    """
    Типизированная граница для словаря {"red", "green", "blue"}.

    Числовые строки приводятся к float, остальные ключи игнорируются.
    """

    red: float = Field(..., ge=0, le=CHANNEL_MAX)
    green: float = Field(..., ge=0, le=CHANNEL_MAX)
    blue: float = Field(..., ge=0, le=CHANNEL_MAX)

    model_config = {"frozen": True, "allow_inf_nan": False}


@runtime_checkable
class RGBAConvertible(Protocol):
    """Внешний цвет, умеющий отдать свои компоненты RGBA в [0, 1]."""

    def to_rgba(self) -> Sequence: ...


ColorLike = Union[Color, RGBAConvertible, Sequence, str]


# =============================================================================
# PAYLOAD
# =============================================================================


def encode_color(color: ColorLike) -> bytes:
    """
    Сериализация цвета в payload.

    Принимает Color, объект с to_rgba(), последовательность из 3-4 чисел
    в [0, 1] или hex-строку "#RRGGBB" / "#RRGGBBAA".

    Returns:
        UTF-8 JSON-массив, например b'[1.0,0.0,0.0,1.0]'

    Raises:
        ColorError: CANNOT_GET_RGB_COMPONENTS
    """
    normalized = _to_color(color)
    return json.dumps(list(normalized.components()), separators=(",", ":")).encode("utf-8")


def decode_color(payload: Optional[Union[bytes, bytearray, memoryview, str]]) -> Color:
    """
    Восстановление цвета из payload.

    Raises:
        ColorError: CANNOT_GET_COLOR_DATA, если payload отсутствует;
            CORRUPTED_COLOR_DATA, если payload не JSON-массив из 4 чисел в [0, 1]
    """
    if payload is None:
        raise ColorError(ColorErrorKind.CANNOT_GET_COLOR_DATA, "Color payload is missing")

    if isinstance(payload, memoryview):
        payload = payload.tobytes()

    try:
        components = json.loads(payload)
        validate_color_payload(components)
        red, green, blue, alpha = components
        return Color(red=red, green=green, blue=blue, alpha=alpha)
    except (ValueError, TypeError, RecursionError, jsonschema.ValidationError) as e:
        # pydantic.ValidationError — подкласс ValueError; RecursionError — слишком глубокая вложенность
        logger.debug("Corrupted color payload %r: %s", payload, e)
        raise ColorError(ColorErrorKind.CORRUPTED_COLOR_DATA, f"Corrupted color payload: {payload!r}") from e


# =============================================================================
# DICTIONARY
# =============================================================================


def color_from_dict(mapping: Optional[Mapping]) -> Color:
    """
    Цвет из словаря каналов 0..255.

    Examples:
        >>> color_from_dict({"red": 10, "green": 139, "blue": 200}).alpha
        1.0

    Raises:
        ColorError: CANNOT_GET_COLOR_DICTIONARY_DATA
    """
    if not isinstance(mapping, Mapping):
        raise ColorError(
            ColorErrorKind.CANNOT_GET_COLOR_DICTIONARY_DATA,
            f"Color dictionary is missing or not a mapping: {mapping!r}",
        )

    data = dict(mapping)
    try:
        validate_color_dictionary(data)
        channels = ColorDictionary.model_validate(data)
    except (jsonschema.ValidationError, pydantic.ValidationError) as e:
        logger.debug("Invalid color dictionary %r: %s", data, e)
        raise ColorError(
            ColorErrorKind.CANNOT_GET_COLOR_DICTIONARY_DATA,
            f"Invalid color dictionary: {data!r}",
        ) from e

    return Color(
        red=channels.red / CHANNEL_MAX,
        green=channels.green / CHANNEL_MAX,
        blue=channels.blue / CHANNEL_MAX,
        alpha=OPAQUE_ALPHA,
    )


# =============================================================================
# COMPONENT EXTRACTION
# =============================================================================


def _to_color(color: Any) -> Color:
    if isinstance(color, Color):
        return color

    if isinstance(color, str):
        components = _hex_components(color)
    elif isinstance(color, RGBAConvertible):
        try:
            components = color.to_rgba()
        except Exception as e:
            raise _no_components(color, f"to_rgba() failed: {e}") from e
    elif isinstance(color, Sequence) and not isinstance(color, (bytes, bytearray)):
        components = color
    else:
        raise _no_components(color, "unsupported color representation")

    if not isinstance(components, Sequence) or len(components) not in (3, 4):
        raise _no_components(color, "expected 3 or 4 components")

    values = [_checked_component(c, color) for c in components]
    if len(values) == 3:
        values.append(OPAQUE_ALPHA)

    red, green, blue, alpha = values
    return Color(red=red, green=green, blue=blue, alpha=alpha)


def _checked_component(value: Any, color: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _no_components(color, f"component {value!r} is not a number")
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise _no_components(color, f"component {value!r} is outside [0, 1]")
    return float(value)


def _hex_components(text: str) -> Tuple[float, ...]:
    match = _HEX_COLOR.fullmatch(text)
    if match is None:
        raise _no_components(text, "expected #RRGGBB or #RRGGBBAA")
    digits = match.group(1)
    return tuple(int(digits[i:i + 2], 16) / CHANNEL_MAX for i in range(0, len(digits), 2))


def _no_components(color: Any, reason: str) -> ColorError:
    logger.debug("Cannot get RGB components from %r: %s", color, reason)
    return ColorError(
        ColorErrorKind.CANNOT_GET_RGB_COMPONENTS,
        f"Cannot get RGB components from {color!r}: {reason}",
    )

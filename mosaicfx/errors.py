# mosaicfx/errors.py
"""
Иерархия исключений пакета.

* ``InvalidParameter``  – неверные входные данные (сетка, размеры, атлас,
  отсутствующее изображение, неизвестное имя режима/бекенда).
* ``SampleOutOfRange``  – прямое обращение к текселю за пределами изображения.

Оба класса наследуются и от стандартных исключений (``ValueError`` /
``IndexError``), поэтому вызывающий код может ловить их привычным способом.
"""


class MosaicFXError(Exception):
    """Базовое исключение MosaicFX."""


class InvalidParameter(MosaicFXError, ValueError):
    """Неверный параметр фильтра – вызов прерывается до начала вычислений."""


class SampleOutOfRange(MosaicFXError, IndexError):
    """Обращение к текселю вне границ изображения."""


__all__ = ["MosaicFXError", "InvalidParameter", "SampleOutOfRange"]

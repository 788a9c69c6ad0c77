"""
Errors — исключения арифметического ядра BigInteger

Все ошибки поднимаются синхронно в точке вызова; частично построенных
значений не бывает. Каждый класс дополнительно наследует ближайшее
встроенное исключение, чтобы вызывающий код мог ловить привычные типы
(ValueError, NotImplementedError, ZeroDivisionError).
"""


class BigIntegerError(Exception):
    """Базовый класс ошибок BigInteger."""

    pass


class InvalidFormatError(BigIntegerError, ValueError):
    """
    Некорректная строка для разбора.

    Поднимается только если строка None, пустая или состоит только
    из пробелов. Нечисловая цифровая часть — UnsupportedError.
    """

    pass


class UnsupportedError(BigIntegerError, NotImplementedError):
    """
    Значение вне поддерживаемого диапазона.

    Разбор строки по умолчанию ограничен signed 32-bit machine word;
    цифровая часть, не разбираемая как число, тоже не поддерживается.
    Fixed-width конверсии ограничены своей разрядностью. Значение
    никогда не усекается молча.
    """

    pass


class DivideByZeroError(BigIntegerError, ZeroDivisionError):
    """Деление на малое целое вызвано с нулевым делителем."""

    pass

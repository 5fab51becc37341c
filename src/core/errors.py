"""
Иерархия исключений форматирования.

Все ошибки наследуются от ValueError: вызывающий код, который уже ловит
ValueError для невалидных аргументов, продолжает работать без изменений.

Правило: форматтеры никогда не возвращают пустую строку или "заглушку"
при невалидном вводе, а сразу поднимают типизированное исключение.
"""


class HumanizeError(ValueError):
    """Базовое исключение для всех операций форматирования."""

    pass


class InvalidInput(HumanizeError):
    """
    Невалидный входной параметр.

    Примеры: отрицательный размер в байтах, NaN/Inf, нецелое значение
    там, где ожидается int, некорректная ISO-8601 строка.
    """

    pass


class Unrepresentable(HumanizeError):
    """
    Значение вне поддерживаемой шкалы.

    Примеры: числа >= 10**100 для word(), даты за пределами диапазона
    datetime после календарной арифметики.
    """

    pass


class AmbiguousFallback(HumanizeError):
    """Неоднозначные границы clamp (floor > ceil)."""

    pass


__all__ = [
    "HumanizeError",
    "InvalidInput",
    "Unrepresentable",
    "AmbiguousFallback",
]

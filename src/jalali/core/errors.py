"""
Calendar Errors — Таксономия ошибок календарного ядра

Математический слой (Julian Day Bridge, Leap-Cycle Calculator) бросает эти
исключения как жёсткие отказы: неверная дата никогда не возвращается молча.

Converter, formatter/parser и адаптеры перехватывают их на своей границе и
превращают в sentinel INVALID_DATE / None / "" — публичный контракт
этих слоёв не бросает исключений.
"""


class CalendarError(ValueError):
    """Базовое исключение календарного ядра."""

    pass


class OutOfRange(CalendarError):
    """
    Год вне диапазона таблицы break-points.

    Таблица покрывает только годы [BREAKS[0], BREAKS[-1]) Solar Hijri.
    За её пределами високосность не определена.
    """

    pass


class InvalidComponents(CalendarError):
    """Месяц или день вне допустимых границ календаря."""

    pass


class InvalidMonth(InvalidComponents):
    """Месяц вне диапазона [1, 12]."""

    pass


class ParseMismatch(CalendarError):
    """Строка не соответствует шаблону."""

    pass


class InvalidInput(CalendarError):
    """Неверный тип входа, None или пустая строка."""

    pass

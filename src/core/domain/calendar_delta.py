"""
CalendarDelta — Смещение в календарных единицах

Immutable Pydantic модель знакового смещения по компонентам
{year, month, day, hour, minute, second}.

В отличие от datetime.timedelta, применяется покомпонентно к
календарному представлению момента, а не к числу прошедших секунд:
"+1 month" от 31 января и от 1 февраля — это разные длительности.
"""

from pydantic import BaseModel, Field


class CalendarDelta(BaseModel):
    """
    Знаковое календарное смещение.

    Все поля опциональны (default 0) и могут быть отрицательными.
    Применение к моменту времени: src.formatters.calendar_arithmetic.
    """

    year: int = Field(default=0, description="Смещение в годах")
    month: int = Field(default=0, description="Смещение в месяцах")
    day: int = Field(default=0, description="Смещение в днях")
    hour: int = Field(default=0, description="Смещение в часах")
    minute: int = Field(default=0, description="Смещение в минутах")
    second: int = Field(default=0, description="Смещение в секундах")

    model_config = {"frozen": True}  # Immutable

    def __neg__(self) -> "CalendarDelta":
        return CalendarDelta(
            year=-self.year,
            month=-self.month,
            day=-self.day,
            hour=-self.hour,
            minute=-self.minute,
            second=-self.second,
        )

    @property
    def is_zero(self) -> bool:
        """True если все компоненты равны нулю."""
        return not any(
            (self.year, self.month, self.day, self.hour, self.minute, self.second)
        )

"""
Regras temporais de reservas de sala.

As datas de reserva são horários locais de parede ("2030-01-01 10:00"),
armazenadas sem timezone e comparadas com `datetime.now()`.
"""

from datetime import datetime, time

from app.core.config import Settings, get_settings

DATETIME_FORMAT = "%Y-%m-%d %H:%M"

SATURDAY = 5
SUNDAY = 6


def parse_datetime(value: str) -> datetime:
    """
    Converte `yyyy-MM-dd HH:MM` em datetime.

    Raises:
        ValueError: formato inválido
    """
    return datetime.strptime(value.strip(), DATETIME_FORMAT)


def to_local_naive(value: datetime) -> datetime:
    """Normaliza datetimes com timezone para horário local sem tzinfo."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def reservation_duration_hours(start: datetime, finish: datetime) -> float:
    return (finish - start).total_seconds() / 3600


def working_window(day: datetime, settings: Settings | None = None) -> tuple[time, time] | None:
    """Janela de funcionamento do dia, ou None quando fechado (domingo)."""
    settings = settings or get_settings()
    weekday = day.weekday()
    if weekday == SUNDAY:
        return None
    if weekday == SATURDAY:
        return settings.WORKING_HOURS_SATURDAY_START, settings.WORKING_HOURS_SATURDAY_END
    return settings.WORKING_HOURS_WEEKDAY_START, settings.WORKING_HOURS_WEEKDAY_END


def is_within_working_hours(
    start: datetime,
    finish: datetime,
    settings: Settings | None = None,
) -> bool:
    """
    Verifica se a reserva cabe na janela de funcionamento do dia de início.

    A abertura e o fechamento são calculados sobre a data de `start`; uma
    reserva que termina em outro dia sempre fica fora do horário.
    """
    window = working_window(start, settings)
    if window is None:
        return False
    opening, closing = window
    day_start = datetime.combine(start.date(), opening)
    day_end = datetime.combine(start.date(), closing)
    return start >= day_start and finish <= day_end

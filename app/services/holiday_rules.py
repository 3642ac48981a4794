"""
Holiday rules - Brazilian holiday generation and blocked-date resolution

Every function here is pure: it reads its arguments and returns new values.
Dates may be given as datetime.date or as strict YYYY-MM-DD strings.
"""
import re
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Protocol, Tuple, Union

from babel.dates import format_date

from app.schemas.holiday import (
    BlockSettings,
    BlockStatus,
    BridgeSuggestion,
    Holiday,
    HolidayType,
)

DateLike = Union[str, date]

REASON_NATIONAL = "Feriado Nacional"
REASON_STATE = "Feriado Estadual"
REASON_CITY = "Feriado Municipal"
REASON_CUSTOM = "Feriado Personalizado"
REASON_BRIDGE = "Ponte de Feriado"
REASON_BLOCK = "Período Bloqueado"

DEFAULT_UPCOMING_LIMIT = 10

# (month, day, name)
FIXED_NATIONAL_HOLIDAYS: Tuple[Tuple[int, int, str], ...] = (
    (1, 1, "Confraternização Universal"),
    (4, 21, "Dia de Tiradentes"),
    (5, 1, "Dia do Trabalho"),
    (9, 7, "Independência do Brasil"),
    (10, 12, "Nossa Senhora Aparecida"),
    (11, 2, "Finados"),
    (11, 15, "Proclamação da República"),
    (12, 25, "Natal"),
)

# (days from Easter Sunday, name)
EASTER_OFFSETS: Tuple[Tuple[int, str], ...] = (
    (-48, "Carnaval (Segunda-feira)"),
    (-47, "Carnaval (Terça-feira)"),
    (-2, "Sexta-feira Santa"),
    (0, "Domingo de Páscoa"),
    (60, "Corpus Christi"),
)

# São Paulo state and capital
STATE_HOLIDAYS: Tuple[Tuple[int, int, str], ...] = (
    (7, 9, "Revolução Constitucionalista"),
    (11, 20, "Consciência Negra (SP)"),
)
CITY_HOLIDAYS: Tuple[Tuple[int, int, str], ...] = (
    (1, 25, "Aniversário de São Paulo"),
    (6, 24, "São João (SP)"),
)

_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_TUESDAY = 1
_THURSDAY = 3


class InvalidDateError(ValueError):
    """Raised for malformed civil dates and inverted date ranges"""


class DateRangeLike(Protocol):
    """Bridge or block period: DateRange values and ORM rows both fit"""
    start_date: DateLike
    end_date: DateLike
    enabled: bool


class UnblockLike(Protocol):
    """Unblock override: Unblock values and ORM rows both fit"""
    date: DateLike
    enabled: bool


def parse_civil_date(value: DateLike) -> date:
    """
    Normalise a civil date

    Args:
        value: datetime.date, datetime.datetime or a YYYY-MM-DD string

    Returns:
        datetime.date

    Raises:
        InvalidDateError: If the value is not a well-formed, existing date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and _ISO_DATE_RE.fullmatch(value):
        try:
            return date.fromisoformat(value)
        except ValueError as e:
            raise InvalidDateError(f"Invalid date {value!r}: {e}") from e
    raise InvalidDateError(f"Invalid date {value!r}: expected YYYY-MM-DD")


def _civil_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"Year {year} is out of range: {e}") from e


def _tier(year: int, table: Iterable[Tuple[int, int, str]], holiday_type: HolidayType) -> List[Holiday]:
    return [
        Holiday(name=name, date=_civil_date(year, month, day), type=holiday_type, recurring=True)
        for month, day, name in table
    ]


def get_fixed_holidays(year: int) -> List[Holiday]:
    """The eight fixed-date national holidays of a year"""
    return _tier(year, FIXED_NATIONAL_HOLIDAYS, HolidayType.NATIONAL)


def get_easter_sunday(year: int) -> date:
    """
    Gregorian Easter Sunday (anonymous Gauss/Butcher computus)

    Integer arithmetic only.
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return _civil_date(year, month, day + 1)


def get_easter_holidays(year: int) -> List[Holiday]:
    """Movable national holidays, offset from Easter Sunday"""
    easter = get_easter_sunday(year)
    return [
        Holiday(
            name=name,
            date=easter + timedelta(days=offset),
            type=HolidayType.NATIONAL,
            recurring=True,
        )
        for offset, name in EASTER_OFFSETS
    ]


def get_national_holidays(year: int) -> List[Holiday]:
    """Fixed national holidays followed by the Easter-based ones"""
    return get_fixed_holidays(year) + get_easter_holidays(year)


def get_state_holidays(year: int) -> List[Holiday]:
    return _tier(year, STATE_HOLIDAYS, HolidayType.STATE)


def get_city_holidays(year: int) -> List[Holiday]:
    return _tier(year, CITY_HOLIDAYS, HolidayType.CITY)


def is_holiday(target: DateLike, holidays: Iterable[Holiday]) -> Optional[Holiday]:
    """First holiday in the list falling exactly on the target date, or None"""
    target_date = parse_civil_date(target)
    for holiday in holidays:
        if holiday.date == target_date:
            return holiday
    return None


def _in_enabled_range(target: date, ranges: Iterable[DateRangeLike]) -> bool:
    for date_range in ranges:
        if not date_range.enabled:
            continue
        if parse_civil_date(date_range.start_date) <= target <= parse_civil_date(date_range.end_date):
            return True
    return False


def is_date_blocked(
    target: DateLike,
    settings: BlockSettings,
    custom_holidays: Iterable[Holiday] = (),
    bridges: Iterable[DateRangeLike] = (),
    blocks: Iterable[DateRangeLike] = (),
    unblocks: Iterable[UnblockLike] = ()
) -> BlockStatus:
    """
    Decide whether a date can receive appointments

    Rules are checked in a fixed order and the first match wins:
    enabled unblock, national, state and city holidays (when toggled on),
    custom holidays, enabled bridges, enabled blocks.

    Args:
        target: Date to check
        settings: Holiday tier toggles
        custom_holidays: Holidays defined by the clinic; only CUSTOM entries count
        bridges: Objects with start_date, end_date and enabled
        blocks: Objects with start_date, end_date and enabled
        unblocks: Objects with date and enabled

    Returns:
        BlockStatus with the reason and, for holiday rules, the matching holiday
    """
    target_date = parse_civil_date(target)
    year = target_date.year

    for unblock in unblocks:
        if unblock.enabled and parse_civil_date(unblock.date) == target_date:
            return BlockStatus(blocked=False)

    tiers = (
        (settings.national_holidays, get_national_holidays, REASON_NATIONAL),
        (settings.state_holidays, get_state_holidays, REASON_STATE),
        (settings.city_holidays, get_city_holidays, REASON_CITY),
    )
    for enabled, generator, reason in tiers:
        if not enabled:
            continue
        holiday = is_holiday(target_date, generator(year))
        if holiday:
            return BlockStatus(blocked=True, reason=reason, holiday=holiday)

    custom = [h for h in custom_holidays if h.type == HolidayType.CUSTOM]
    holiday = is_holiday(target_date, custom)
    if holiday:
        return BlockStatus(blocked=True, reason=REASON_CUSTOM, holiday=holiday)

    if _in_enabled_range(target_date, bridges):
        return BlockStatus(blocked=True, reason=REASON_BRIDGE)

    if _in_enabled_range(target_date, blocks):
        return BlockStatus(blocked=True, reason=REASON_BLOCK)

    return BlockStatus(blocked=False)


def get_blocked_days(
    start_date: DateLike,
    end_date: DateLike,
    settings: BlockSettings,
    custom_holidays: Iterable[Holiday] = (),
    bridges: Iterable[DateRangeLike] = (),
    blocks: Iterable[DateRangeLike] = (),
    unblocks: Iterable[UnblockLike] = ()
) -> Dict[date, BlockStatus]:
    """
    Blocked days of an inclusive date range, keyed by date in ascending order

    Raises:
        InvalidDateError: If start_date is after end_date
    """
    start = parse_civil_date(start_date)
    end = parse_civil_date(end_date)
    if start > end:
        raise InvalidDateError(f"Start date {start} is after end date {end}")

    # Materialise once; iterables are walked for every day
    custom_holidays = list(custom_holidays)
    bridges = list(bridges)
    blocks = list(blocks)
    unblocks = list(unblocks)

    blocked: Dict[date, BlockStatus] = {}
    # Count days rather than stepping past end; end may be date.max
    for offset in range((end - start).days + 1):
        day = start + timedelta(days=offset)
        status = is_date_blocked(day, settings, custom_holidays, bridges, blocks, unblocks)
        if status.blocked:
            blocked[day] = status
    return blocked


def _enabled_tiers(years: Iterable[int], settings: BlockSettings) -> List[Holiday]:
    years = list(years)
    holidays: List[Holiday] = []
    if settings.national_holidays:
        for year in years:
            holidays.extend(get_national_holidays(year))
    if settings.state_holidays:
        for year in years:
            holidays.extend(get_state_holidays(year))
    if settings.city_holidays:
        for year in years:
            holidays.extend(get_city_holidays(year))
    return holidays


def get_upcoming_holidays(
    start_date: DateLike,
    settings: BlockSettings,
    custom_holidays: Iterable[Holiday] = (),
    limit: int = DEFAULT_UPCOMING_LIMIT
) -> List[Holiday]:
    """
    Next holidays on or after start_date

    Covers the enabled tiers of the start year and the following one plus
    every custom holiday, sorted by date and cut to limit entries.
    """
    start = parse_civil_date(start_date)
    holidays = _enabled_tiers((start.year, start.year + 1), settings)
    holidays.extend(custom_holidays)

    upcoming = sorted((h for h in holidays if h.date >= start), key=lambda h: h.date)
    return upcoming[:max(limit, 0)]


def get_holidays_for_year(
    year: int,
    settings: BlockSettings,
    custom_holidays: Iterable[Holiday] = ()
) -> List[Holiday]:
    """Enabled tiers plus custom holidays of a single year, sorted by date"""
    holidays = _enabled_tiers((year,), settings)
    holidays.extend(h for h in custom_holidays if h.date.year == year)
    return sorted(holidays, key=lambda h: h.date)


def suggest_bridges(year: int) -> List[BridgeSuggestion]:
    """
    Suggest bridges for national holidays on a Tuesday or a Thursday

    Tuesday holidays pair with the Monday before, Thursday holidays with
    the Friday after. Nothing is suggested for other weekdays.
    """
    suggestions: List[BridgeSuggestion] = []
    for holiday in get_national_holidays(year):
        weekday = holiday.date.weekday()
        if weekday == _TUESDAY:
            start, end = holiday.date - timedelta(days=1), holiday.date
        elif weekday == _THURSDAY:
            start, end = holiday.date, holiday.date + timedelta(days=1)
        else:
            continue
        suggestions.append(
            BridgeSuggestion(name=f"Ponte - {holiday.name}", start_date=start, end_date=end)
        )
    return suggestions


def is_weekend(target: DateLike) -> bool:
    """Saturday or Sunday"""
    return parse_civil_date(target).weekday() >= 5


def format_holiday_date(target: DateLike) -> str:
    """Long pt-BR date, e.g. 'quinta-feira, 25 de dezembro de 2025'"""
    return format_date(parse_civil_date(target), "EEEE, d 'de' MMMM 'de' y", locale="pt_BR")

"""Parsing of user-typed dates, times and routes shared by the CLI and MCP tools."""

from datetime import date, datetime, time

from se_transport.domain.exceptions import InvalidInputError

ROUTE_FROM_WORDS = frozenset({"from", "från"})
ROUTE_TO_WORDS = frozenset({"to", "till"})


def parse_date(value: str) -> date:
    """Parse "YYYY-MM-DD".

    Raises:
        InvalidInputError: If the value is not a valid date.
    """
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise InvalidInputError(f"invalid date format '{value}' (use YYYY-MM-DD)") from e


def parse_clock(value: str) -> time:
    """Parse "HH:MM".

    Raises:
        InvalidInputError: If the value is not a valid time.
    """
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError as e:
        raise InvalidInputError(f"invalid time format '{value}' (use HH:MM)") from e


def build_search_time(now: datetime, date_str: str | None, time_str: str | None) -> datetime:
    """Combine an optional date and an optional time with ``now``.

    A date alone keeps the current time of day; a time alone keeps today.
    """
    result = now.replace(second=0, microsecond=0)
    if date_str:
        parsed_date = parse_date(date_str)
        result = result.replace(year=parsed_date.year, month=parsed_date.month, day=parsed_date.day)
    if time_str:
        parsed_time = parse_clock(time_str)
        result = result.replace(hour=parsed_time.hour, minute=parsed_time.minute)
    return result


def parse_route(words: list[str]) -> tuple[str, str]:
    """Origin and destination from "from X to Y", "från X till Y" or "X Y".

    With more words and no keywords, the first and last words are used.

    Raises:
        InvalidInputError: If fewer than two words are given.
    """
    if len(words) < 2:
        raise InvalidInputError("both an origin and a destination are required")

    from_index = -1
    to_index = -1
    for index, word in enumerate(words):
        lower = word.lower()
        if lower in ROUTE_FROM_WORDS:
            from_index = index
        if lower in ROUTE_TO_WORDS:
            to_index = index

    if from_index >= 0 and to_index > from_index:
        origin = " ".join(words[from_index + 1 : to_index])
        destination = " ".join(words[to_index + 1 :])
        if origin and destination:
            return origin, destination

    if len(words) == 2:
        return words[0], words[1]
    return words[0], words[-1]


def capitalize_words(text: str) -> str:
    """Title-case each word, leaving an upper-case three-letter code alone."""
    if not text:
        return text
    if len(text) == 3 and text.upper() == text:
        return text
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split())

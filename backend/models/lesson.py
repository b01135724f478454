# backend/models/lesson.py
from datetime import date, datetime
from typing import Optional, Set, Union

from exceptions import InvalidLessonDateException

# Canonical format first; ISO dates are accepted as well
DATE_FORMATS = ("%m/%d/%Y", "%Y-%m-%d")

# Day codes used in Lesson.days, mapped to date.weekday() numbers.
# Matching is a case-insensitive substring test, so "MWF" holds M, W and F.
DAY_CODES = {
    "M": 0,
    "Tu": 1,
    "W": 2,
    "Th": 3,
    "F": 4,
    "Sat": 5,
    "Sun": 6,
}


def parse_date(value: Union[str, date]) -> date:
    if isinstance(value, date):
        return value
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except (ValueError, AttributeError):
            continue
    raise InvalidLessonDateException(str(value))


def weekdays_held(days: Optional[str]) -> Set[int]:
    text = (days or "").lower()
    return {weekday for code, weekday in DAY_CODES.items() if code.lower() in text}


def occurs_on(lesson: "Lesson", when: Union[str, date]) -> bool:
    """True when `when` lies in the lesson's inclusive date range and on one of its weekdays."""
    day = parse_date(when)
    start = parse_date(lesson.start_date)
    end = parse_date(lesson.end_date)

    if day < start or day > end:
        return False
    return day.weekday() in weekdays_held(lesson.days)


# Represents a lesson (coaching class) held weekly between two dates.
# username is None while the lesson is on offer and set once a user books it.
class Lesson:
    def __init__(self, id: int, username: Optional[str], title: str, description: Optional[str],
                 days: str, start_date: str, end_date: str, price: float):
        self.id = id
        self.username = username
        self.title = title
        self.description = description
        self.days = days
        self.start_date = start_date
        self.end_date = end_date
        self.price = price

    @property
    def is_open(self) -> bool:
        return self.username is None

    def occurs_on(self, when: Union[str, date]) -> bool:
        return occurs_on(self, when)

    def __eq__(self, other):
        if not isinstance(other, Lesson):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        return (f"Lesson(id={self.id}, username={self.username!r}, title={self.title!r}, "
                f"days={self.days!r}, start_date={self.start_date!r}, end_date={self.end_date!r})")

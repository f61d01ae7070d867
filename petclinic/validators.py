from __future__ import annotations

from datetime import date, datetime

from wtforms.validators import ValidationError

from .messages import TYPE_MISMATCH

ISO_DATE_FORMAT = "%Y-%m-%d"


def parse_iso_date(value) -> date | None:
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        return None


class IsoDate:
    """Field text must be a ``YYYY-MM-DD`` calendar date."""

    def __init__(self, message: str = TYPE_MISMATCH):
        self.message = message

    def __call__(self, form, field):
        if parse_iso_date(field.data) is None:
            raise ValidationError(self.message)


class NotInFuture:
    def __init__(self, message: str = TYPE_MISMATCH):
        self.message = message

    def __call__(self, form, field):
        value = parse_iso_date(field.data)
        if value is not None and value > date.today():
            raise ValidationError(self.message)

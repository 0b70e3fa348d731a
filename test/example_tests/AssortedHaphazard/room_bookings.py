"""
rangekit Example: Room Bookings

Track who occupies a room on each night. Dates step by one day, so a stay that checks out on a given day is stored
as ending on the day before, and back-to-back stays by the same guest merge into one.
"""

import datetime
from rangekit import Range, RangeMap, RangeSet


def day(d):
    return datetime.date(2020, 3, d)


bookings = RangeMap("vacant")
bookings[Range(day(2), day(6), "[)")] = "Ada"
bookings[Range(day(6), day(9), "[)")] = "Grace"
bookings[Range(day(9), day(11), "[)")] = "Grace"

occupied = RangeSet(bookings.keys())
nights = sum(stay.size() for stay in bookings)


def test_results():
    return [bookings, occupied, nights, bookings[day(7)], bookings[day(11)]]

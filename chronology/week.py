"""
# Week based measures of time: days of seven.

# Weekdays are numbered the ISO-8601 way, Monday is one and Sunday is seven, but the
# helpers accept any integer and reduce it modulo seven so that zero also means Sunday.
# Fixed day number one, 0001-01-01, is a Monday.
"""
from .arithmetic import floor_mod, amod

#: Lowercase English weekday names in ISO order, Monday first.
weekday_names = (
	'monday', 'tuesday', 'wednesday', 'thursday',
	'friday', 'saturday', 'sunday',
)
weekday_abbreviations = tuple(x[:3] for x in weekday_names)
days_in_week = len(weekday_names)

#: Weekday names and abbreviations to the ISO day of week.
weekday_name_to_number = dict(
	[(name, i + 1) for i, name in enumerate(weekday_names)] +
	[(name, i + 1) for i, name in enumerate(weekday_abbreviations)]
)

monday = 1
thursday = 4
sunday = 7

def day_of_week(days):
	"""
	# The ISO day of week of the fixed day number, &days.
	"""
	return amod(days, 7)

def weekday_on_or_before(weekday, days):
	return days - floor_mod(days - weekday, 7)

def weekday_on_or_after(weekday, days):
	return weekday_on_or_before(weekday, days + 6)

def weekday_nearest(weekday, days):
	return weekday_on_or_before(weekday, days + 3)

def weekday_before(weekday, days):
	return weekday_on_or_before(weekday, days - 1)

def weekday_after(weekday, days):
	return weekday_on_or_before(weekday, days + 7)

def nth_weekday(n, weekday, days):
	"""
	# The &n'th &weekday on or after &days, or, when &n is negative, the &n'th on or
	# before it. The first Monday of a month is `nth_weekday(1, monday, first)` and the
	# last is `nth_weekday(-1, monday, last)`.
	"""
	if n > 0:
		return (7 * n) + weekday_before(weekday, days)
	elif n < 0:
		return (7 * n) + weekday_after(weekday, days)
	raise ValueError("weekday ordinal must not be zero")

def first_week(jan1, minimum_days=4):
	"""
	# The fixed day of the Monday starting week one of the year beginning at &jan1.

	# Week one is the first week with at least &minimum_days days in the new year.
	"""
	return weekday_on_or_before(monday, jan1 + minimum_days - 1)

def week_from_days(start, days):
	"""
	# The one-based week containing &days counting from the week one Monday, &start.
	"""
	return ((days - start) // 7) + 1

def days_from_week(start, week, weekday):
	return start + ((week - 1) * 7) + (weekday - 1)

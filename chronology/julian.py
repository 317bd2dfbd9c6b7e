"""
# Proleptic Julian calendar functions.

# Julian years are numbered without a year zero: year -1 is 1 BC and is immediately
# followed by year 1. Days are the same fixed day numbers used by &.gregorian.
"""
from . import core
from . import gregorian

#: Fixed day number of Julian 0001-01-01; Gregorian 0000-12-30.
epoch = -1

days_in_olympiad = 1461

def year_is_leap(y):
	"""
	# Every fourth year is leap; with no year zero, the BC leap years are -1, -5, ...
	"""
	return y % 4 == (0 if y > 0 else 3)

def days_in_month(year, month):
	if year_is_leap(year):
		return gregorian.calendar_leap[month-1]
	return gregorian.calendar_year[month-1]

def days_from_date(date):
	"""
	# Convert the Julian `(year, month, day)` to a fixed day number.
	"""
	year, month, day = date
	if year == 0:
		raise core.IllegalFieldValue(core.year, 0, message="does not exist in the Julian calendar")

	y = year + 1 if year < 0 else year
	if month <= 2:
		correction = 0
	elif year_is_leap(year):
		correction = -1
	else:
		correction = -2

	return (
		(epoch - 1) + (365 * (y - 1)) + ((y - 1) // 4)
		+ ((367 * month) - 362) // 12 + correction + day
	)

def year_from_days(days):
	approx = ((4 * (days - epoch)) + 1464) // days_in_olympiad
	if approx <= 0:
		return approx - 1
	return approx

def date_from_days(days):
	"""
	# Convert the fixed day number, &days, to a Julian `(year, month, day)`.
	"""
	year = year_from_days(days)
	prior = days - days_from_date((year, 1, 1))

	if days < days_from_date((year, 3, 1)):
		correction = 0
	elif year_is_leap(year):
		correction = 1
	else:
		correction = 2

	month = ((12 * (prior + correction)) + 373) // 367
	day = days - days_from_date((year, month, 1)) + 1
	return (year, month, day)

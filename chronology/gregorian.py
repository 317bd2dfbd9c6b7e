"""
# Proleptic Gregorian calendar functions and data.

# Dates are `(year, month, day)` tuples with astronomical year numbering: year zero
# precedes year one. Days are fixed day numbers where day one is `(1, 1, 1)`.
"""

#: Lowercase English month names; &.words capitalizes them for display.
month_names = (
	"january", "february", "march", "april",
	"may", "june", "july", "august",
	"september", "october", "november", "december",
)
month_abbreviations = tuple(x[:3] for x in month_names)

#: Days per month of common and leap years.
calendar_year = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
calendar_leap = calendar_year[:1] + (29,) + calendar_year[2:]

#: Fixed day number of 0001-01-01.
epoch = 1

#: Days in the four hundred, one hundred, four, and one year spans.
days_in_cycle = 146097
days_in_century = 36524
days_in_olympiad = 1461
days_in_year = 365

def year_is_leap(y):
	"""
	# Whether the astronomical year &y has a February 29.
	"""
	return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)

def days_in_month(year, month):
	if year_is_leap(year):
		return calendar_leap[month-1]
	return calendar_year[month-1]

def days_from_date(date):
	"""
	# The fixed day number of the `(year, month, day)` tuple, &date.
	"""
	year, month, day = date
	y = year - 1

	if month <= 2:
		correction = 0
	elif year_is_leap(year):
		correction = -1
	else:
		correction = -2

	return (
		(epoch - 1) + (365 * y) + (y // 4) - (y // 100) + (y // 400)
		+ ((367 * month) - 362) // 12 + correction + day
	)

def year_from_days(days):
	"""
	# Identify the year containing the fixed day number, &days.
	"""
	d0 = days - epoch
	n400, d1 = divmod(d0, days_in_cycle)
	n100, d2 = divmod(d1, days_in_century)
	n4, d3 = divmod(d2, days_in_olympiad)
	n1 = d3 // days_in_year

	year = (400 * n400) + (100 * n100) + (4 * n4) + n1
	if n100 == 4 or n1 == 4:
		# Last day of a leap cycle.
		return year
	return year + 1

def date_from_days(days):
	"""
	# The `(year, month, day)` tuple of the fixed day number, &days.
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

"""
# Calendar systems as a tagged variant.

# A &Calendar is a `(kind, cutover, minimum_days)` tuple and the module functions
# dispatch on the kind. All years handled here are astronomical: year zero exists and
# precedes year one. &external_year and &internal_year translate to and from the
# numbering visible through the year fields of calendars without a year zero.

# [ Kinds ]

# /`'iso'`/
	# Proleptic Gregorian with the ISO-8601 week rules.
# /`'gregorian'`/
	# Proleptic Gregorian.
# /`'julian'`/
	# Proleptic Julian; no year zero.
# /`'gj'`/
	# Julian before the cutover day and Gregorian on and after it; no year zero.
"""
import functools

from . import core
from . import gregorian
from . import julian
from . import week
from .arithmetic import floor_div, floor_mod
from .constants import millis_per_day, epoch_days, long_min, long_max
from .constants import default_cutover, default_minimum_days

kinds = ('iso', 'gregorian', 'julian', 'gj')

class Calendar(tuple):
	"""
	# The parameters identifying a calendar system.
	"""
	__slots__ = ()

	@property
	def kind(self):
		return self[0]

	@property
	def cutover(self):
		"""
		# The instant of the first Gregorian day for `'gj'` calendars; &None otherwise.
		"""
		return self[1]

	@property
	def minimum_days(self):
		return self[2]

	@property
	def cutover_days(self):
		if self[1] is None:
			return None
		return days_from_millis(self[1])

	def __repr__(self):
		return 'Calendar(%r, cutover=%r, minimum_days=%r)' % self

def create(kind, cutover=None, minimum_days=default_minimum_days):
	"""
	# Construct and validate a &Calendar.
	"""
	if kind not in kinds:
		raise ValueError("unknown calendar kind", kind)
	if minimum_days < 1 or minimum_days > 7:
		raise core.IllegalFieldValue('minimum_days_in_first_week', minimum_days, 1, 7)

	if kind == 'gj':
		if cutover is None:
			cutover = default_cutover
	else:
		cutover = None

	return Calendar((kind, cutover, minimum_days))

def days_from_millis(millis):
	return floor_div(millis, millis_per_day) + epoch_days

def millis_from_days(days):
	return (days - epoch_days) * millis_per_day

def millis_of_day(millis):
	return floor_mod(millis, millis_per_day)

def has_year_zero(cal):
	return cal[0] in ('iso', 'gregorian')

def external_year(cal, year):
	"""
	# The year as numbered by the calendar's year field.
	"""
	if year <= 0 and not has_year_zero(cal):
		return year - 1
	return year

def internal_year(cal, year):
	"""
	# The astronomical year of the calendar's year field value, &year.
	"""
	if has_year_zero(cal):
		return year
	if year == 0:
		raise core.IllegalFieldValue(core.year, 0, message="does not exist in the %s calendar" %(cal[0],))
	if year < 0:
		return year + 1
	return year

def _julian_days(cal, year, month, day):
	return julian.days_from_date((external_year(cal, year), month, day))

def _gregorian_month(cal, year, month):
	# The calendar in effect on the first of the month decides the month's length.
	return gregorian.days_from_date((year, month, 1)) >= cal.cutover_days

def days_from_date(cal, year, month, day, lenient=False):
	"""
	# The fixed day number of the astronomical `(year, month, day)`.

	# GJ dates that fall in the cutover gap raise &core.IllegalFieldValue unless &lenient
	# is set, in which case they are read as Julian dates and land after the cutover.
	"""
	kind = cal[0]
	if kind == 'iso' or kind == 'gregorian':
		return gregorian.days_from_date((year, month, day))
	elif kind == 'julian':
		return _julian_days(cal, year, month, day)

	cutover = cal.cutover_days
	g = gregorian.days_from_date((year, month, day))
	if g >= cutover:
		return g

	j = _julian_days(cal, year, month, day)
	if j >= cutover and not lenient:
		raise core.IllegalFieldValue(core.day_of_month, day,
			message="does not exist: %d-%02d is in the Gregorian cutover gap" %(year, month))
	return j

def date_from_days(cal, days):
	"""
	# The astronomical `(year, month, day)` of the fixed day number, &days.
	"""
	kind = cal[0]
	if kind == 'iso' or kind == 'gregorian':
		return gregorian.date_from_days(days)
	elif kind == 'gj' and days >= cal.cutover_days:
		return gregorian.date_from_days(days)

	y, m, d = julian.date_from_days(days)
	return (internal_year(cal, y), m, d)

def year_from_days(cal, days):
	kind = cal[0]
	if kind == 'iso' or kind == 'gregorian':
		return gregorian.year_from_days(days)
	return date_from_days(cal, days)[0]

def year_is_leap(cal, year):
	kind = cal[0]
	if kind == 'iso' or kind == 'gregorian':
		return gregorian.year_is_leap(year)
	elif kind == 'gj' and _gregorian_month(cal, year, 2):
		return gregorian.year_is_leap(year)
	return year % 4 == 0

def days_in_month(cal, year, month):
	if year_is_leap(cal, year):
		return gregorian.calendar_leap[month-1]
	return gregorian.calendar_year[month-1]

def days_in_year(cal, year):
	"""
	# The number of days from January first of &year to January first of the next year.
	"""
	if cal[0] != 'gj':
		return 366 if year_is_leap(cal, year) else 365
	return days_from_date(cal, year+1, 1, 1, True) - days_from_date(cal, year, 1, 1, True)

def max_days_in_month(cal, month):
	return gregorian.calendar_leap[month-1]

@functools.lru_cache(32)
def year_bounds(cal):
	"""
	# The astronomical years that are entirely representable by 64-bit instants.
	"""
	lower = year_from_days(cal, days_from_millis(long_min)) + 1
	upper = year_from_days(cal, days_from_millis(long_max)) - 1
	return (lower, upper)

# Week dates.

def first_week(cal, year):
	"""
	# The fixed day of the Monday starting week one of the astronomical &year.
	"""
	jan1 = days_from_date(cal, year, 1, 1, True)
	return week.first_week(jan1, cal[2])

def week_date_from_days(cal, days):
	"""
	# The `(weekyear, week, day_of_week)` of the fixed day number, &days.
	"""
	year = year_from_days(cal, days)

	start = first_week(cal, year + 1)
	if days >= start:
		year += 1
	else:
		start = first_week(cal, year)
		if days < start:
			year -= 1
			start = first_week(cal, year)

	return (year, week.week_from_days(start, days), week.day_of_week(days))

def days_from_week_date(cal, weekyear, week_number, day_of_week):
	return week.days_from_week(first_week(cal, weekyear), week_number, day_of_week)

def weeks_in_weekyear(cal, weekyear):
	return (first_week(cal, weekyear + 1) - first_week(cal, weekyear)) // 7

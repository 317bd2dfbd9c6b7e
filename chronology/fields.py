"""
# Calendar fields: the conversion between instants and field values.

# Every field is a stateless object bound to a &.calendar.Calendar and the duration
# fields it counts. Instants given to these fields are local; zone handling is performed
# by &ZonedField wrappers assembled by &.chrono.

# [ Clamping ]

# Setting or adding to a coarse field never rolls the finer fields into the next unit.
# The day of month is reduced to the last day of the resulting month and the week of
# weekyear is reduced to the last week of the resulting weekyear.
"""
from . import core
from . import calendar
from . import units
from . import words
from .arithmetic import floor_div, floor_mod, amod, safe_add
from .arithmetic import verify_value_bounds, wrap
from .constants import millis_per_day, millis_per_week, millis_per_year, millis_per_month
from .constants import long_min

class DateTimeField(object):
	"""
	# Base class for calendar fields.

	# [ Properties ]
	# /type/
		# The &core.DateTimeFieldType identifying the field.
	# /unit/
		# The &units.DurationField counted by the field.
	# /range/
		# The &units.DurationField that the field cycles within; &None when unbounded.
	# /minimum/
		# The smallest value of the field.
	# /maximum_value/
		# The largest value the field can have at any instant.
	"""
	supported = True
	lenient = False
	minimum = 0
	maximum_value = 0
	text_kind = None
	leap_duration_field = None

	def __init__(self, type, unit, range=None):
		self.type = type
		self.unit = unit
		self.range = range

	def __repr__(self):
		return '<%s %s>' %(self.__class__.__name__, self.type.name)

	@property
	def name(self):
		return self.type.name

	def get(self, instant):
		raise NotImplementedError

	def set(self, instant, value):
		"""
		# Set the field to &value raising &core.IllegalFieldValue when the value is out of
		# range at &instant.
		"""
		raise NotImplementedError

	def add(self, instant, value):
		return self.unit.add(instant, value)

	def add_wrap_field(self, instant, value):
		"""
		# Add &value to the field wrapping within its range without changing larger fields.
		"""
		current = self.get(instant)
		return self.set(instant, wrap(current + value, self.minimum, self.maximum(instant)))

	def difference(self, minuend, subtrahend):
		return self.unit.difference(minuend, subtrahend)

	def difference_as_long(self, minuend, subtrahend):
		return self.unit.difference_as_long(minuend, subtrahend)

	def round_floor(self, instant):
		raise NotImplementedError

	def round_ceiling(self, instant):
		floor = self.round_floor(instant)
		if floor != instant:
			return self.add(floor, 1)
		return instant

	def round_half_floor(self, instant):
		floor = self.round_floor(instant)
		ceiling = self.round_ceiling(instant)
		if instant - floor <= ceiling - instant:
			return floor
		return ceiling

	def round_half_ceiling(self, instant):
		floor = self.round_floor(instant)
		ceiling = self.round_ceiling(instant)
		if ceiling - instant <= instant - floor:
			return ceiling
		return floor

	def round_half_even(self, instant):
		floor = self.round_floor(instant)
		ceiling = self.round_ceiling(instant)
		below = instant - floor
		above = ceiling - instant

		if below < above:
			return floor
		elif above < below:
			return ceiling
		elif self.get(ceiling) & 1 == 0:
			return ceiling
		return floor

	def remainder(self, instant):
		return instant - self.round_floor(instant)

	def is_leap(self, instant):
		return False

	def leap_amount(self, instant):
		return 0

	def maximum(self, instant=None):
		"""
		# The largest value of the field at &instant, or at any instant when &None.
		"""
		return self.maximum_value

	def maximum_for(self, types, values):
		"""
		# The largest value of the field given the other fields of a partial.
		"""
		return self.maximum_value

	def minimum_for(self, types, values):
		return self.minimum

	def as_text(self, value, locale=None):
		if self.text_kind is None:
			return str(value)
		verify_value_bounds(self.type, value, self.minimum, self.maximum_value)
		return words.text(self.text_kind, value, locale)

	def as_short_text(self, value, locale=None):
		if self.text_kind is None:
			return str(value)
		verify_value_bounds(self.type, value, self.minimum, self.maximum_value)
		return words.text(self.text_kind + '_short', value, locale)

	def text(self, instant, locale=None):
		return self.as_text(self.get(instant), locale)

	def short_text(self, instant, locale=None):
		return self.as_short_text(self.get(instant), locale)

	def parse_text(self, text, locale=None):
		"""
		# The value identified by &text; a word from the locale's table or digits.
		"""
		if self.text_kind is not None:
			v = words.value(self.text_kind, text, locale)
			if v is not None:
				return v
		try:
			return int(text)
		except ValueError:
			raise core.IllegalFieldValue(self.type, text)

	def set_text(self, instant, text, locale=None):
		return self.set(instant, self.parse_text(text, locale))

	def maximum_text_length(self, locale=None):
		if self.text_kind is None:
			return max(len(str(self.maximum_value)), len(str(self.minimum)))
		return max(len(x) for x in words.table(locale)[self.text_kind])

class UnsupportedDateTimeField(DateTimeField):
	"""
	# A field the chronology does not support.
	"""
	supported = False

	def _unsupported(self, *args, **kw):
		raise core.UnsupportedField(self.type)

	get = set = add = add_wrap_field = _unsupported
	difference = difference_as_long = _unsupported
	round_floor = round_ceiling = remainder = _unsupported
	maximum = maximum_for = minimum_for = _unsupported

class PreciseField(DateTimeField):
	"""
	# A field whose unit and range both have fixed lengths; the time of day fields.
	"""

	def __init__(self, type, unit, range):
		super().__init__(type, unit, range)
		self.unit_millis = unit.unit_millis
		self.range_count = range.unit_millis // unit.unit_millis
		self.maximum_value = self.range_count - 1

	def get(self, instant):
		return floor_mod(floor_div(instant, self.unit_millis), self.range_count)

	def set(self, instant, value):
		verify_value_bounds(self.type, value, self.minimum, self.maximum_value)
		return instant + ((value - self.get(instant)) * self.unit_millis)

	def round_floor(self, instant):
		return instant - floor_mod(instant, self.unit_millis)

	def remainder(self, instant):
		return floor_mod(instant, self.unit_millis)

class HalfdayField(PreciseField):
	text_kind = 'halfdays'

class ZeroIsMaxField(DateTimeField):
	"""
	# A wrapper presenting zero as one more than the wrapped field's maximum; clock hours.
	"""

	def __init__(self, field, type):
		super().__init__(type, field.unit, field.range)
		self.field = field
		self.minimum = 1
		self.maximum_value = field.maximum_value + 1

	def get(self, instant):
		v = self.field.get(instant)
		if v == 0:
			return self.maximum_value
		return v

	def set(self, instant, value):
		verify_value_bounds(self.type, value, self.minimum, self.maximum_value)
		if value == self.maximum_value:
			value = 0
		return self.field.set(instant, value)

	def add(self, instant, value):
		return self.field.add(instant, value)

	def round_floor(self, instant):
		return self.field.round_floor(instant)

	def remainder(self, instant):
		return self.field.remainder(instant)

class CalendarField(DateTimeField):
	"""
	# Base class for fields derived from the calendar date of an instant.
	"""

	def __init__(self, type, unit, range, cal):
		super().__init__(type, unit, range)
		self.calendar = cal

	def _split(self, instant):
		days = calendar.days_from_millis(instant)
		return days, instant - calendar.millis_from_days(days)

	def _date(self, instant):
		days, mod = self._split(instant)
		y, m, d = calendar.date_from_days(self.calendar, days)
		return y, m, d, mod

	def _instant(self, year, month, day, mod, lenient=False):
		days = calendar.days_from_date(self.calendar, year, month, day, lenient)
		return safe_add(calendar.millis_from_days(days), mod)

	def _check_year(self, year, type=core.year):
		lower, upper = calendar.year_bounds(self.calendar)
		if year < lower or year > upper:
			cal = self.calendar
			raise core.IllegalFieldValue(type,
				calendar.external_year(cal, year),
				calendar.external_year(cal, lower),
				calendar.external_year(cal, upper),
			)
		return year

	def _check_sum(self, year):
		"""
		# Raise &core.Overflow when the astronomical &year reached by arithmetic cannot
		# be represented.
		"""
		lower, upper = calendar.year_bounds(self.calendar)
		if year < lower or year > upper:
			raise core.Overflow("year %d is outside the instant range" %(year,), year)
		return year

	def _clamped(self, year, month, day, mod, lenient=True):
		self._check_year(year)
		day = min(day, calendar.days_in_month(self.calendar, year, month))
		return self._instant(year, month, day, mod, lenient)

	def round_floor(self, instant):
		return instant - floor_mod(instant, millis_per_day)

class DayOfWeekField(CalendarField):
	minimum = 1
	maximum_value = 7
	text_kind = 'weekdays'

	def get(self, instant):
		return amod(calendar.days_from_millis(instant), 7)

	def set(self, instant, value):
		verify_value_bounds(self.type, value, 1, 7)
		return instant + ((value - self.get(instant)) * millis_per_day)

class DayOfMonthField(CalendarField):
	minimum = 1
	maximum_value = 31

	def get(self, instant):
		return self._date(instant)[2]

	def set(self, instant, value):
		y, m, d, mod = self._date(instant)
		verify_value_bounds(self.type, value, 1, calendar.days_in_month(self.calendar, y, m))
		return self._instant(y, m, value, mod)

	def maximum(self, instant=None):
		if instant is None:
			return self.maximum_value
		y, m, d, mod = self._date(instant)
		return calendar.days_in_month(self.calendar, y, m)

	def maximum_for(self, types, values):
		if core.month_of_year not in types:
			return self.maximum_value
		month = values[types.index(core.month_of_year)]
		if core.year in types:
			year = calendar.internal_year(self.calendar, values[types.index(core.year)])
			return calendar.days_in_month(self.calendar, year, month)
		return calendar.max_days_in_month(self.calendar, month)

	def is_leap(self, instant):
		y, m, d, mod = self._date(instant)
		return m == 2 and d == 29

	def leap_amount(self, instant):
		return 1 if self.is_leap(instant) else 0

class DayOfYearField(CalendarField):
	minimum = 1
	maximum_value = 366

	def _jan1(self, instant):
		days, mod = self._split(instant)
		y = calendar.year_from_days(self.calendar, days)
		return days, y, calendar.days_from_date(self.calendar, y, 1, 1, True)

	def get(self, instant):
		days, y, jan1 = self._jan1(instant)
		return days - jan1 + 1

	def set(self, instant, value):
		days, y, jan1 = self._jan1(instant)
		verify_value_bounds(self.type, value, 1, calendar.days_in_year(self.calendar, y))
		return instant + ((value - (days - jan1 + 1)) * millis_per_day)

	def maximum(self, instant=None):
		if instant is None:
			return self.maximum_value
		days, y, jan1 = self._jan1(instant)
		return calendar.days_in_year(self.calendar, y)

	def maximum_for(self, types, values):
		if core.year in types:
			year = calendar.internal_year(self.calendar, values[types.index(core.year)])
			return calendar.days_in_year(self.calendar, year)
		return self.maximum_value

class MonthOfYearField(CalendarField):
	"""
	# The month of the year; owns the imprecise months unit.
	"""
	minimum = 1
	maximum_value = 12
	text_kind = 'months'

	def __init__(self, range, days, cal):
		unit = units.ImpreciseDurationField(self, core.months, millis_per_month)
		super().__init__(core.month_of_year, unit, range, cal)
		self.leap_duration_field = days

	def get(self, instant):
		return self._date(instant)[1]

	def set(self, instant, value):
		verify_value_bounds(self.type, value, 1, 12)
		y, m, d, mod = self._date(instant)
		return self._clamped(y, value, d, mod, lenient=False)

	def add(self, instant, value):
		if value == 0:
			return instant
		y, m, d, mod = self._date(instant)
		total = (m - 1) + value
		return self._clamped(self._check_sum(y + (total // 12)), (total % 12) + 1, d, mod)

	def add_wrap_field(self, instant, value):
		y, m, d, mod = self._date(instant)
		return self._clamped(y, wrap(m + value, 1, 12), d, mod)

	def difference_as_long(self, minuend, subtrahend):
		if minuend < subtrahend:
			return -self.difference_as_long(subtrahend, minuend)

		my, mm, md, mmod = self._date(minuend)
		sy, sm, sd, smod = self._date(subtrahend)
		difference = ((my - sy) * 12) + (mm - sm)
		if difference and self.add(subtrahend, difference) > minuend:
			difference -= 1
		return difference

	def round_floor(self, instant):
		y, m, d, mod = self._date(instant)
		return self._instant(y, m, 1, 0, True)

	def is_leap(self, instant):
		y, m, d, mod = self._date(instant)
		return m == 2 and calendar.year_is_leap(self.calendar, y)

	def leap_amount(self, instant):
		return 1 if self.is_leap(instant) else 0

class YearField(CalendarField):
	"""
	# The year as numbered by the calendar; owns the imprecise years unit.
	"""

	def __init__(self, days, cal):
		unit = units.ImpreciseDurationField(self, core.years, millis_per_year)
		super().__init__(core.year, unit, None, cal)
		self.leap_duration_field = days
		self.minimum, self.maximum_value = calendar_year_bounds(cal)

	def year(self, instant):
		"""
		# The astronomical year of &instant.
		"""
		return calendar.year_from_days(self.calendar, calendar.days_from_millis(instant))

	def get(self, instant):
		return calendar.external_year(self.calendar, self.year(instant))

	def set_year(self, instant, year, lenient=False):
		"""
		# Set the astronomical &year keeping the month and clamping the day of month.
		"""
		y, m, d, mod = self._date(instant)
		return self._clamped(year, m, d, mod, lenient=lenient)

	def set(self, instant, value):
		verify_value_bounds(self.type, value, self.minimum, self.maximum_value)
		return self.set_year(instant, calendar.internal_year(self.calendar, value))

	def add(self, instant, value):
		if value == 0:
			return instant
		return self.set_year(instant, self._check_sum(self.year(instant) + value), lenient=True)

	def difference_as_long(self, minuend, subtrahend):
		if minuend < subtrahend:
			return -self.difference_as_long(subtrahend, minuend)

		difference = self.year(minuend) - self.year(subtrahend)
		if difference and self.add(subtrahend, difference) > minuend:
			difference -= 1
		return difference

	def round_floor(self, instant):
		return self._instant(self.year(instant), 1, 1, 0, True)

	def is_leap(self, instant):
		return calendar.year_is_leap(self.calendar, self.year(instant))

	def leap_amount(self, instant):
		return 1 if self.is_leap(instant) else 0

def calendar_year_bounds(cal):
	"""
	# The year bounds of &cal as numbered by its year field.
	"""
	lower, upper = calendar.year_bounds(cal)
	return calendar.external_year(cal, lower), calendar.external_year(cal, upper)

class WeekyearField(CalendarField):
	"""
	# The year of the week based calendar; owns the imprecise weekyears unit.
	"""

	def __init__(self, weeks, cal):
		unit = units.ImpreciseDurationField(self, core.weekyears, millis_per_year)
		super().__init__(core.weekyear, unit, None, cal)
		self.leap_duration_field = weeks
		self.minimum, self.maximum_value = calendar_year_bounds(cal)

	def _week_date(self, instant):
		days, mod = self._split(instant)
		return calendar.week_date_from_days(self.calendar, days) + (mod,)

	def weekyear(self, instant):
		return self._week_date(instant)[0]

	def get(self, instant):
		return calendar.external_year(self.calendar, self.weekyear(instant))

	def set_weekyear(self, instant, weekyear):
		self._check_year(weekyear, core.weekyear)
		wy, w, dow, mod = self._week_date(instant)
		w = min(w, calendar.weeks_in_weekyear(self.calendar, weekyear))
		days = calendar.days_from_week_date(self.calendar, weekyear, w, dow)
		return safe_add(calendar.millis_from_days(days), mod)

	def set(self, instant, value):
		verify_value_bounds(self.type, value, self.minimum, self.maximum_value)
		return self.set_weekyear(instant, calendar.internal_year(self.calendar, value))

	def add(self, instant, value):
		if value == 0:
			return instant
		return self.set_weekyear(instant, self._check_sum(self.weekyear(instant) + value))

	def difference_as_long(self, minuend, subtrahend):
		if minuend < subtrahend:
			return -self.difference_as_long(subtrahend, minuend)

		difference = self.weekyear(minuend) - self.weekyear(subtrahend)
		if difference and self.add(subtrahend, difference) > minuend:
			difference -= 1
		return difference

	def round_floor(self, instant):
		wy = self.weekyear(instant)
		return calendar.millis_from_days(calendar.first_week(self.calendar, wy))

	def is_leap(self, instant):
		return calendar.weeks_in_weekyear(self.calendar, self.weekyear(instant)) > 52

	def leap_amount(self, instant):
		return calendar.weeks_in_weekyear(self.calendar, self.weekyear(instant)) - 52

class WeekOfWeekyearField(CalendarField):
	minimum = 1
	maximum_value = 53

	def _week_date(self, instant):
		return calendar.week_date_from_days(self.calendar, calendar.days_from_millis(instant))

	def get(self, instant):
		return self._week_date(instant)[1]

	def set(self, instant, value):
		wy, w, dow = self._week_date(instant)
		verify_value_bounds(self.type, value, 1, calendar.weeks_in_weekyear(self.calendar, wy))
		return instant + ((value - w) * millis_per_week)

	def maximum(self, instant=None):
		if instant is None:
			return self.maximum_value
		return calendar.weeks_in_weekyear(self.calendar, self._week_date(instant)[0])

	def maximum_for(self, types, values):
		if core.weekyear in types:
			wy = calendar.internal_year(self.calendar, values[types.index(core.weekyear)])
			return calendar.weeks_in_weekyear(self.calendar, wy)
		return self.maximum_value

	def round_floor(self, instant):
		days = calendar.days_from_millis(instant)
		return calendar.millis_from_days(days - (amod(days, 7) - 1))

class EraField(CalendarField):
	"""
	# Era one, AD, contains the years after zero; era zero, BC, the rest.
	"""
	minimum = 0
	maximum_value = 1
	text_kind = 'eras'

	def __init__(self, eras, year, cal):
		super().__init__(core.era, eras, None, cal)
		self.year = year

	def get(self, instant):
		return 1 if self.year.year(instant) > 0 else 0

	def set(self, instant, value):
		verify_value_bounds(self.type, value, 0, 1)
		year = self.year.year(instant)
		if (year > 0) == (value == 1):
			return instant
		return self.year.set_year(instant, 1 - year)

	def round_floor(self, instant):
		if self.get(instant) == 1:
			return self._instant(1, 1, 1, 0, True)
		return long_min

	def round_ceiling(self, instant):
		if self.get(instant) == 0:
			return self._instant(1, 1, 1, 0, True)
		raise core.Overflow("no era follows the current era")

class YearOfEraField(DateTimeField):
	"""
	# The year counted from the start of its era; always positive.
	"""
	minimum = 1

	def __init__(self, year, eras):
		super().__init__(core.year_of_era, year.unit, eras)
		self.year = year
		self.lower, self.upper = calendar.year_bounds(year.calendar)
		self.maximum_value = max(self.upper, 1 - self.lower)

	def get(self, instant):
		year = self.year.year(instant)
		return year if year > 0 else 1 - year

	def set(self, instant, value):
		verify_value_bounds(self.type, value, 1, self.maximum(instant))
		if self.year.year(instant) > 0:
			return self.year.set_year(instant, value)
		return self.year.set_year(instant, 1 - value)

	def add(self, instant, value):
		return self.year.add(instant, value)

	def difference_as_long(self, minuend, subtrahend):
		return self.year.difference_as_long(minuend, subtrahend)

	def round_floor(self, instant):
		return self.year.round_floor(instant)

	def is_leap(self, instant):
		return self.year.is_leap(instant)

	def leap_amount(self, instant):
		return self.year.leap_amount(instant)

	def maximum(self, instant=None):
		if instant is None:
			return self.maximum_value
		if self.year.year(instant) > 0:
			return self.upper
		return 1 - self.lower

class EraYear(object):
	"""
	# The count of years from the start of an era that the century fields divide.

	# When &zero_based, the count is the magnitude of the astronomical year and the
	# century fields count from zero; year zero opens century zero. Otherwise the count
	# is the year of era less one and the century fields count from one.
	"""

	def __init__(self, year_of_era, zero_based):
		self.year_of_era = year_of_era
		self.year = year_of_era.year
		self.zero_based = zero_based
		self.origin = 0 if zero_based else 1
		if zero_based:
			self.maximum_value = max(year_of_era.upper, -year_of_era.lower)
		else:
			self.maximum_value = year_of_era.maximum_value - 1

	def backwards(self, instant):
		"""
		# Whether the count grows toward the past at &instant.
		"""
		y = self.year.year(instant)
		if self.zero_based:
			return y < 0
		return y <= 0

	def get(self, instant):
		if self.zero_based:
			return abs(self.year.year(instant))
		return self.year_of_era.get(instant) - 1

	def set(self, instant, count):
		if not self.zero_based:
			return self.year_of_era.set(instant, count + 1)
		if self.year.year(instant) < 0:
			count = -count
		return self.year.set_year(instant, count)

	def maximum(self, instant):
		if not self.zero_based:
			return self.year_of_era.maximum(instant) - 1
		if self.year.year(instant) < 0:
			return -self.year_of_era.lower
		return self.year_of_era.upper

	def floor(self, instant, first):
		"""
		# The start of the span of one hundred counts beginning at &first.
		"""
		if self.backwards(instant):
			count = min(first + 99, self.maximum(instant))
		else:
			count = first
		return self.year.round_floor(self.set(instant, count))

class CenturyOfEraField(DateTimeField):
	"""
	# The hundreds of an &EraYear count.
	"""

	def __init__(self, count, range):
		unit = units.ScaledDurationField(count.year.unit, core.centuries, 100)
		super().__init__(core.century_of_era, unit, range)
		self.count = count
		self.minimum = count.origin
		self.maximum_value = (count.maximum_value // 100) + count.origin

	def get(self, instant):
		return (self.count.get(instant) // 100) + self.count.origin

	def set(self, instant, value):
		verify_value_bounds(self.type, value, self.minimum, self.maximum(instant))
		c = self.count
		target = ((value - c.origin) * 100) + (c.get(instant) % 100)
		# The last century may be partial; the year is clamped to it.
		return c.set(instant, min(target, c.maximum(instant)))

	def round_floor(self, instant):
		return self.count.floor(instant, (self.count.get(instant) // 100) * 100)

	def maximum(self, instant=None):
		if instant is None:
			return self.maximum_value
		return (self.count.maximum(instant) // 100) + self.count.origin

class YearOfCenturyField(DateTimeField):
	"""
	# The units of an &EraYear count.
	"""

	def __init__(self, count, range):
		super().__init__(core.year_of_century, count.year.unit, range)
		self.count = count
		self.minimum = count.origin
		self.maximum_value = 99 + count.origin

	def get(self, instant):
		return (self.count.get(instant) % 100) + self.count.origin

	def set(self, instant, value):
		verify_value_bounds(self.type, value, self.minimum, self.maximum(instant))
		c = self.count
		return c.set(instant, ((c.get(instant) // 100) * 100) + (value - c.origin))

	def difference_as_long(self, minuend, subtrahend):
		return self.count.year.difference_as_long(minuend, subtrahend)

	def round_floor(self, instant):
		return self.count.year.round_floor(instant)

	def maximum(self, instant=None):
		if instant is None:
			return self.maximum_value
		last = self.count.maximum(instant)
		if self.count.get(instant) // 100 == last // 100:
			return (last % 100) + self.count.origin
		return self.maximum_value

class WeekyearOfCenturyField(DateTimeField):
	"""
	# The last two digits of the astronomical weekyear.
	"""
	minimum = 0
	maximum_value = 99

	def __init__(self, weekyear, range):
		super().__init__(core.weekyear_of_century, weekyear.unit, range)
		self.weekyear = weekyear

	def get(self, instant):
		return floor_mod(self.weekyear.weekyear(instant), 100)

	def set(self, instant, value):
		verify_value_bounds(self.type, value, 0, self.maximum(instant))
		wy = self.weekyear.weekyear(instant)
		return self.weekyear.set_weekyear(instant, wy - floor_mod(wy, 100) + value)

	def difference_as_long(self, minuend, subtrahend):
		return self.weekyear.difference_as_long(minuend, subtrahend)

	def round_floor(self, instant):
		return self.weekyear.round_floor(instant)

	def maximum(self, instant=None):
		if instant is None:
			return self.maximum_value
		upper = calendar.year_bounds(self.weekyear.calendar)[1]
		if floor_div(self.weekyear.weekyear(instant), 100) == floor_div(upper, 100):
			return floor_mod(upper, 100)
		return self.maximum_value

class ZonedField(DateTimeField):
	"""
	# A field read and written in the local time of a zone.

	# Fields with units shorter than a day operate on the UTC instant shifted by the
	# offset at that instant; others convert to local time and back, preferring the
	# original offset and rejecting local times skipped by a transition.
	"""

	def __init__(self, field, zone, unit, range, leap):
		super().__init__(field.type, unit, range)
		self.field = field
		self.zone = zone
		self.time_field = unit.unit_millis < 43200000
		self.minimum = field.minimum
		self.maximum_value = field.maximum_value
		self.text_kind = field.text_kind
		self.leap_duration_field = leap

	def _local(self, instant):
		return self.zone.to_local(instant)

	def get(self, instant):
		return self.field.get(self._local(instant))

	def set(self, instant, value):
		local = self.field.set(self._local(instant), value)
		result = self.zone.to_utc_near(local, instant)
		if self.get(result) != value:
			raise core.IllegalFieldValue(self.type, value,
				message="does not exist in %s due to an offset transition" %(self.zone.name,))
		return result

	def _apply(self, method, instant, *args):
		if self.time_field:
			offset = self.zone.offset_at(instant)
			return method(safe_add(instant, offset), *args) - offset
		local = method(self._local(instant), *args)
		return self.zone.to_utc_near(local, instant)

	def add(self, instant, value):
		return self._apply(self.field.add, instant, value)

	def add_wrap_field(self, instant, value):
		return self._apply(self.field.add_wrap_field, instant, value)

	def round_floor(self, instant):
		return self._apply(self.field.round_floor, instant)

	def round_ceiling(self, instant):
		return self._apply(self.field.round_ceiling, instant)

	def remainder(self, instant):
		return self.field.remainder(self._local(instant))

	def is_leap(self, instant):
		return self.field.is_leap(self._local(instant))

	def leap_amount(self, instant):
		return self.field.leap_amount(self._local(instant))

	def maximum(self, instant=None):
		if instant is None:
			return self.field.maximum()
		return self.field.maximum(self._local(instant))

	def maximum_for(self, types, values):
		return self.field.maximum_for(types, values)

	def as_text(self, value, locale=None):
		return self.field.as_text(value, locale)

	def as_short_text(self, value, locale=None):
		return self.field.as_short_text(value, locale)

	def parse_text(self, text, locale=None):
		return self.field.parse_text(text, locale)

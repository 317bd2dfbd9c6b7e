"""
# Exceptions and the identities of calendar fields and units.

# &DurationFieldType and &DateTimeFieldType are interned tuples naming a unit or field
# without binding it to a calendar system; &DurationFieldType.field and
# &DateTimeFieldType.field resolve the identity against a chronology.
"""

class Error(Exception):
	"""
	# Base class for the exceptions raised by the package.
	"""

class IllegalFieldValue(Error, ValueError):
	"""
	# A field was given a value outside of its valid range, or the combination of field
	# values does not identify a date in the calendar.
	"""

	def __init__(self, field, value, lower=None, upper=None, message=None):
		self.field = str(field)
		self.value = value
		self.lower = lower
		self.upper = upper
		self.message = message
		super().__init__(self.field, value, lower, upper)

	def __str__(self):
		if isinstance(self.value, str):
			v = '"%s"' %(self.value,)
		else:
			v = str(self.value)

		prefix = "Value %s for %s " %(v, self.field)
		if self.message is not None:
			return prefix + self.message
		if self.lower is None and self.upper is None:
			return prefix + "is not supported"
		if self.lower is None:
			return prefix + "must not be larger than %d" %(self.upper,)
		if self.upper is None:
			return prefix + "must not be smaller than %d" %(self.lower,)
		return prefix + "must be in the range [%d,%d]" %(self.lower, self.upper)

class UnsupportedField(Error):
	"""
	# The operation referenced a field or unit that the chronology or period type
	# does not support.
	"""

	def __init__(self, field, message=None):
		self.field = str(field)
		self.message = message
		super().__init__(self.field)

	def __str__(self):
		if self.message is not None:
			return self.message
		return "%s field is unsupported" %(self.field,)

class Overflow(Error, ArithmeticError):
	"""
	# A computation produced a value outside the 64-bit instant range or the 32-bit
	# field range.
	"""

class MalformedInput(Error, ValueError):
	"""
	# Text did not match the expected grammar; &offset is the index of the first
	# character that could not be consumed.
	"""

	def __init__(self, text, offset, message=None):
		self.text = text
		self.offset = offset
		self.message = message
		super().__init__(text, offset)

	def __str__(self):
		if self.message is not None:
			return self.message
		if self.offset >= len(self.text):
			return 'Invalid format: "%s" is too short' %(self.text,)
		if self.offset <= 0:
			return 'Invalid format: "%s"' %(self.text,)
		return 'Invalid format: "%s" is malformed at "%s"' %(self.text, self.text[self.offset:])

class NoMatchingFormat(Error, ValueError):
	"""
	# The requested set of fields cannot be rendered by any ISO-8601 layout.
	"""

class InvalidInterval(Error, ValueError):
	"""
	# The end of an interval preceded its start.
	"""

class DurationFieldType(tuple):
	"""
	# The identity of a unit of time: `(name, ordinal)`.
	"""
	__slots__ = ()

	@property
	def name(self):
		return self[0]

	@property
	def ordinal(self):
		return self[1]

	def __str__(self):
		return self[0]

	def __repr__(self):
		return '<%s %s>' %(self.__class__.__name__, self[0])

	def field(self, chronology):
		"""
		# The &..units.DurationField implementing this unit in &chronology.
		"""
		return getattr(chronology, self[0])

	def supported(self, chronology):
		return self.field(chronology).supported

	@classmethod
	def of(Class, name):
		return duration_types_by_name[name]

class DateTimeFieldType(tuple):
	"""
	# The identity of a calendar field: `(name, ordinal, unit, range)`.

	# The unit is the &DurationFieldType counted by the field and the range is the
	# &DurationFieldType that the field cycles within; &None for unbounded fields.
	"""
	__slots__ = ()

	@property
	def name(self):
		return self[0]

	@property
	def ordinal(self):
		return self[1]

	@property
	def unit(self):
		return self[2]

	@property
	def range(self):
		return self[3]

	def __str__(self):
		return self[0]

	def __repr__(self):
		return '<%s %s>' %(self.__class__.__name__, self[0])

	def field(self, chronology):
		"""
		# The &..fields.DateTimeField implementing this field in &chronology.
		"""
		return getattr(chronology, self[0])

	def supported(self, chronology):
		return self.field(chronology).supported

	@classmethod
	def of(Class, name):
		return field_types_by_name[name]

def _durations(*names):
	return tuple(DurationFieldType((n, i)) for i, n in enumerate(names))

duration_types = _durations(
	'eras', 'centuries', 'weekyears', 'years', 'months', 'weeks',
	'days', 'halfdays', 'hours', 'minutes', 'seconds', 'millis',
)
duration_types_by_name = {x.name: x for x in duration_types}

(
	eras, centuries, weekyears, years, months, weeks,
	days, halfdays, hours, minutes, seconds, millis,
) = duration_types

field_types = tuple(
	DateTimeFieldType((n, i, u, r))
	for i, (n, u, r) in enumerate([
		('era', eras, None),
		('year_of_era', years, eras),
		('century_of_era', centuries, eras),
		('year_of_century', years, centuries),
		('year', years, None),
		('day_of_year', days, years),
		('month_of_year', months, years),
		('day_of_month', days, months),
		('weekyear_of_century', weekyears, centuries),
		('weekyear', weekyears, None),
		('week_of_weekyear', weeks, weekyears),
		('day_of_week', days, weeks),
		('halfday_of_day', halfdays, days),
		('hour_of_halfday', hours, halfdays),
		('clockhour_of_halfday', hours, halfdays),
		('clockhour_of_day', hours, days),
		('hour_of_day', hours, days),
		('minute_of_day', minutes, days),
		('minute_of_hour', minutes, hours),
		('second_of_day', seconds, days),
		('second_of_minute', seconds, minutes),
		('millis_of_day', millis, days),
		('millis_of_second', millis, seconds),
	])
)
field_types_by_name = {x.name: x for x in field_types}

(
	era, year_of_era, century_of_era, year_of_century, year,
	day_of_year, month_of_year, day_of_month,
	weekyear_of_century, weekyear, week_of_weekyear, day_of_week,
	halfday_of_day, hour_of_halfday, clockhour_of_halfday, clockhour_of_day, hour_of_day,
	minute_of_day, minute_of_hour, second_of_day, second_of_minute,
	millis_of_day, millis_of_second,
) = field_types

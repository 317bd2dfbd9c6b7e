"""
# Periods: elapsed time as a vector of unit counts.

# A &PeriodType fixes the ordered set of units a period may carry. &Period is the
# immutable value; &MutablePeriod is an owned builder that commits an update only after
# the complete vector has been computed, so a failed update leaves it unchanged.

# Values are 32-bit; arithmetic that leaves that range raises &core.Overflow.
"""
from . import core
from . import chrono
from .arithmetic import safe_add_int, safe_multiply_to_int, safe_to_int, safe_add, safe_subtract, safe_negate

def _millis(instant):
	if isinstance(instant, int):
		return instant
	return instant.millis

def _chronology(chronology, *instants):
	if chronology is not None:
		return chronology
	for x in instants:
		c = getattr(x, 'chronology', None)
		if c is not None:
			return c
	return chrono.default()

class PeriodType(object):
	"""
	# An ordered, named selection of &core.DurationFieldType instances.
	"""
	__slots__ = ('name', 'types')

	def __init__(self, name, types):
		self.name = name
		self.types = tuple(types)

	def __repr__(self):
		return 'PeriodType[%s]' %(self.name,)

	def __iter__(self):
		return iter(self.types)

	def __len__(self):
		return len(self.types)

	def __getitem__(self, index):
		return self.types[index]

	def __contains__(self, type):
		return type in self.types

	def __eq__(self, ob):
		return isinstance(ob, PeriodType) and ob.types == self.types

	def __hash__(self):
		return hash(self.types)

	def index_of(self, type):
		"""
		# The index of &type, or `-1` when the type is not supported.
		"""
		try:
			return self.types.index(type)
		except ValueError:
			return -1

	def is_supported(self, type):
		return type in self.types

	def without(self, *types):
		"""
		# The period type with the given &types removed.
		"""
		remaining = [x for x in self.types if x not in types]
		if len(remaining) == len(self.types):
			return self
		removed = ''.join('No' + x.name.title() for x in self.types if x in types)
		return PeriodType(self.name + removed, remaining)

	@classmethod
	def standard(Class):
		return _standard

	@classmethod
	def year_month_day_time(Class):
		return _year_month_day_time

	@classmethod
	def year_week_day_time(Class):
		return _year_week_day_time

	@classmethod
	def year_day_time(Class):
		return _year_day_time

	@classmethod
	def day_time(Class):
		return _day_time

	@classmethod
	def time(Class):
		return _time

	@classmethod
	def years(Class):
		return _single[core.years]

	@classmethod
	def months(Class):
		return _single[core.months]

	@classmethod
	def weeks(Class):
		return _single[core.weeks]

	@classmethod
	def days(Class):
		return _single[core.days]

	@classmethod
	def hours(Class):
		return _single[core.hours]

	@classmethod
	def minutes(Class):
		return _single[core.minutes]

	@classmethod
	def seconds(Class):
		return _single[core.seconds]

	@classmethod
	def millis(Class):
		return _single[core.millis]

	@classmethod
	def for_fields(Class, types):
		"""
		# The period type with exactly the given &types, ordered from largest to smallest.
		"""
		types = sorted(set(types), key=lambda x: x.ordinal)
		if not types:
			raise ValueError("period types must not be empty")
		t = tuple(types)
		for named in _named:
			if named.types == t:
				return named
		return Class('PeriodType[%s]' %(', '.join(x.name.title() for x in t),), t)

_standard_types = (
	core.years, core.months, core.weeks, core.days,
	core.hours, core.minutes, core.seconds, core.millis,
)
_standard = PeriodType('Standard', _standard_types)
_year_month_day_time = _standard.without(core.weeks)
_year_month_day_time.name = 'YearMonthDayTime'
_year_week_day_time = _standard.without(core.months)
_year_week_day_time.name = 'YearWeekDayTime'
_year_day_time = _standard.without(core.months, core.weeks)
_year_day_time.name = 'YearDayTime'
_day_time = _standard.without(core.years, core.months, core.weeks)
_day_time.name = 'DayTime'
_time = _standard.without(core.years, core.months, core.weeks, core.days)
_time.name = 'Time'
_single = {
	t: PeriodType(t.name.title(), (t,))
	for t in _standard_types
}
_named = (
	_standard, _year_month_day_time, _year_week_day_time,
	_year_day_time, _day_time, _time,
) + tuple(_single.values())

def _update(type, values, field, value):
	"""
	# Store &value for &field in the list &values aligned with &type.
	"""
	i = type.index_of(field)
	if i == -1:
		if value != 0:
			raise core.UnsupportedField(field,
				"Period does not support field '%s'" %(field.name,))
		return
	values[i] = safe_to_int(value)

def _merge(type, values, period):
	for field, value in period.items():
		_update(type, values, field, value)
	return values

def _add(type, values, period):
	for field, value in period.items():
		if value != 0:
			i = type.index_of(field)
			if i == -1:
				raise core.UnsupportedField(field,
					"Period does not support field '%s'" %(field.name,))
			values[i] = safe_add_int(values[i], value)
	return values

class AbstractPeriod(object):
	"""
	# Read operations shared by &Period and &MutablePeriod.

	# [ Properties ]
	# /type/
		# The &PeriodType of the period.
	# /values/
		# The values aligned with &type.
	"""
	__slots__ = ()

	def items(self):
		"""
		# The `(DurationFieldType, value)` pairs of the period.
		"""
		return zip(self.type, self.values)

	def get(self, field):
		"""
		# The value of &field; zero when the type does not support it.
		"""
		i = self.type.index_of(field)
		if i == -1:
			return 0
		return self.values[i]

	def __len__(self):
		return len(self.type)

	@property
	def years(self):
		return self.get(core.years)

	@property
	def months(self):
		return self.get(core.months)

	@property
	def weeks(self):
		return self.get(core.weeks)

	@property
	def days(self):
		return self.get(core.days)

	@property
	def hours(self):
		return self.get(core.hours)

	@property
	def minutes(self):
		return self.get(core.minutes)

	@property
	def seconds(self):
		return self.get(core.seconds)

	@property
	def millis(self):
		return self.get(core.millis)

	def is_zero(self):
		return not any(self.values)

	def __eq__(self, ob):
		if not isinstance(ob, AbstractPeriod):
			return NotImplemented
		return self.type == ob.type and tuple(self.values) == tuple(ob.values)

	def __ne__(self, ob):
		r = self.__eq__(ob)
		if r is NotImplemented:
			return r
		return not r

	def __str__(self):
		from . import periodformat
		return periodformat.standard().print(self)

	def __repr__(self):
		return '%s(%r)' %(self.__class__.__name__, str(self))

	def to_standard_duration(self):
		"""
		# The milliseconds of the period assuming 24 hour days and 7 day weeks.

		# Years and months have no standard length; when either is present,
		# &core.UnsupportedField is raised.
		"""
		for f in (core.years, core.months):
			if self.get(f) != 0:
				raise core.UnsupportedField(f,
					"Cannot convert to Duration as this period contains %s and %s have no fixed length" %(f.name, f.name))

		from .types import Duration
		total = 0
		utc = chrono.default()
		for f, value in self.items():
			if value != 0:
				total = safe_add(total, f.field(utc).millis_for(value))
		return Duration(total)

	def to_period(self):
		return Period(self.type, self.values)

	def to_mutable(self):
		return MutablePeriod(self.type, self.values)

class Period(AbstractPeriod):
	"""
	# An immutable period.
	"""
	__slots__ = ('type', 'values')

	def __init__(self, type=None, values=None):
		if type is None:
			type = _standard
		self.type = type
		if values is None:
			values = (0,) * len(type)
		elif len(values) != len(type):
			raise ValueError("values do not match the period type", type, values)
		self.values = tuple(safe_to_int(x) for x in values)

	def __hash__(self):
		return hash((self.type, self.values))

	@classmethod
	def of(Class, years=0, months=0, weeks=0, days=0, hours=0, minutes=0, seconds=0, millis=0, type=None):
		"""
		# Construct a period from unit counts; counts for units missing from &type must be zero.
		"""
		if type is None:
			type = _standard
		values = [0] * len(type)
		given = (years, months, weeks, days, hours, minutes, seconds, millis)
		for field, value in zip(_standard_types, given):
			_update(type, values, field, value)
		return Class(type, values)

	@classmethod
	def between(Class, start, end, type=None, chronology=None):
		"""
		# The period from &start to &end in the units of &type.
		"""
		c = _chronology(chronology, start, end)
		if type is None:
			type = _standard
		return Class(type, c.period_values(type, _millis(start), _millis(end)))

	@classmethod
	def from_duration(Class, duration, type=None, chronology=None):
		"""
		# The period of &duration using only the precise units of &type.
		"""
		c = chronology or chrono.default()
		if type is None:
			type = _standard
		return Class(type, c.period_values_for_duration(type, int(duration)))

	@classmethod
	def from_duration_after(Class, start, duration, type=None, chronology=None):
		start = _millis(start)
		return Class.between(start, safe_add(start, int(duration)), type, chronology)

	@classmethod
	def from_duration_before(Class, duration, end, type=None, chronology=None):
		end = _millis(end)
		return Class.between(safe_subtract(end, int(duration)), end, type, chronology)

	@classmethod
	def parse(Class, text, formatter=None):
		"""
		# Parse an ISO-8601 period, `PnYnMnWnDTnHnMnS`, or the format of &formatter.
		"""
		if formatter is None:
			from . import periodformat
			formatter = periodformat.standard()
		return formatter.parse_period(text)

	def with_type(self, type):
		"""
		# The period with the values moved to &type; non-zero values of unsupported units
		# raise &core.UnsupportedField.
		"""
		if type is None:
			type = _standard
		if type == self.type:
			return self
		return Period(type, _merge(type, [0] * len(type), self))

	def with_field(self, field, value):
		values = list(self.values)
		_update(self.type, values, field, value)
		return Period(self.type, values)

	def with_field_added(self, field, value):
		if value == 0:
			return self
		values = list(self.values)
		_update(self.type, values, field, safe_add_int(self.get(field), value))
		return Period(self.type, values)

	def with_fields(self, period):
		"""
		# The period with every value of &period copied over the values of this one.
		"""
		if period is None:
			return self
		return Period(self.type, _merge(self.type, list(self.values), period))

	def with_years(self, value):
		return self.with_field(core.years, value)

	def with_months(self, value):
		return self.with_field(core.months, value)

	def with_weeks(self, value):
		return self.with_field(core.weeks, value)

	def with_days(self, value):
		return self.with_field(core.days, value)

	def with_hours(self, value):
		return self.with_field(core.hours, value)

	def with_minutes(self, value):
		return self.with_field(core.minutes, value)

	def with_seconds(self, value):
		return self.with_field(core.seconds, value)

	def with_millis(self, value):
		return self.with_field(core.millis, value)

	def plus(self, period):
		if period is None:
			return self
		return Period(self.type, _add(self.type, list(self.values), period))

	def minus(self, period):
		if period is None:
			return self
		return self.plus(Period(period.type, [safe_to_int(safe_negate(x)) for x in period.values]))

	def multiplied_by(self, scalar):
		if scalar == 1:
			return self
		return Period(self.type, [safe_multiply_to_int(x, scalar) for x in self.values])

	def negated(self):
		return self.multiplied_by(-1)

	__neg__ = negated
	__add__ = plus
	__sub__ = minus

	def normalized_standard(self, type=None):
		"""
		# The period with time units carried into larger units assuming 24 hour days and
		# 7 day weeks, and months carried into years.
		"""
		if type is None:
			type = _standard

		millis = 0
		utc = chrono.default()
		for f, value in self.items():
			if f not in (core.years, core.months) and value != 0:
				millis = safe_add(millis, f.field(utc).millis_for(value))

		precise = type.without(core.years, core.months)
		values = _merge(type, [0] * len(type), Period(precise, utc.period_values_for_duration(precise, millis)))

		total = (self.years * 12) + self.months
		if total != 0:
			if type.is_supported(core.years):
				y = safe_to_int(int(total / 12))
				values[type.index_of(core.years)] = y
				total -= y * 12
			if type.is_supported(core.months):
				values[type.index_of(core.months)] = safe_to_int(total)
				total = 0
			if total != 0:
				raise core.UnsupportedField(core.months,
					"Unable to normalize as PeriodType is missing either years or months but period has a month/year amount: %s" %(self,))

		return Period(type, values)

class MutablePeriod(AbstractPeriod):
	"""
	# A period builder owned by its creator.

	# Updates compute the complete new vector before replacing &values, so an exception
	# leaves the builder as it was.
	"""
	__slots__ = ('type', 'values')

	def __init__(self, type=None, values=None):
		if type is None:
			type = _standard
		self.type = type
		if values is None:
			values = (0,) * len(type)
		elif len(values) != len(type):
			raise ValueError("values do not match the period type", type, values)
		self.values = [safe_to_int(x) for x in values]

	__hash__ = None

	def _commit(self, values):
		self.values = values

	def clear(self):
		self._commit([0] * len(self.type))

	def set(self, field, value):
		"""
		# Set the value of &field.
		"""
		values = list(self.values)
		_update(self.type, values, field, value)
		self._commit(values)

	def add(self, field, value):
		"""
		# Add &value to &field.
		"""
		if value == 0:
			return
		values = list(self.values)
		_update(self.type, values, field, safe_add_int(self.get(field), value))
		self._commit(values)

	def set_values(self, values):
		if len(values) != len(self.type):
			raise ValueError("values do not match the period type", self.type, values)
		self._commit([safe_to_int(x) for x in values])

	def set_period(self, period):
		"""
		# Replace the values with those of &period.
		"""
		if period is None:
			self.clear()
			return
		self._commit(_merge(self.type, [0] * len(self.type), period))

	def merge(self, period):
		"""
		# Copy every value of &period over the current values.
		"""
		if period is not None:
			self._commit(_merge(self.type, list(self.values), period))

	def add_period(self, period):
		if period is not None:
			self._commit(_add(self.type, list(self.values), period))

	def set_interval(self, start, end, chronology=None):
		"""
		# Replace the values with the decomposition of the interval from &start to &end.
		"""
		c = _chronology(chronology, start, end)
		self._commit(list(c.period_values(self.type, _millis(start), _millis(end))))

	def set_duration(self, duration, chronology=None):
		c = chronology or chrono.default()
		self._commit(list(c.period_values_for_duration(self.type, int(duration))))

	def add_interval(self, start, end, chronology=None):
		c = _chronology(chronology, start, end)
		p = Period(self.type, c.period_values(self.type, _millis(start), _millis(end)))
		self.add_period(p)

class SingleFieldPeriod(int):
	"""
	# A period of a single unit represented by its count.
	"""
	__slots__ = ()
	field_type = None
	designator = None
	time = False

	def __new__(Class, value=0):
		return super().__new__(Class, safe_to_int(value))

	def __repr__(self):
		return '%s(%d)' %(self.__class__.__name__, int(self))

	def __str__(self):
		return ('PT' if self.time else 'P') + str(int(self)) + self.designator

	@classmethod
	def between(Class, start, end, chronology=None):
		"""
		# The whole number of units from &start to &end.
		"""
		c = _chronology(chronology, start, end)
		return Class(Class.field_type.field(c).difference(_millis(end), _millis(start)))

	@classmethod
	def parse(Class, text):
		p = Period.parse(text).with_type(_single[Class.field_type])
		return Class(p.values[0])

	@property
	def value(self):
		return int(self)

	def items(self):
		return ((self.field_type, int(self)),)

	def to_period(self):
		return Period(_single[self.field_type], (int(self),))

	def plus(self, value):
		return self.__class__(safe_add_int(self, int(value)))

	def minus(self, value):
		return self.__class__(safe_add_int(self, -int(value)))

	def multiplied_by(self, scalar):
		return self.__class__(safe_multiply_to_int(self, scalar))

	def negated(self):
		return self.__class__(safe_to_int(-int(self)))

class Years(SingleFieldPeriod):
	__slots__ = ()
	field_type = core.years
	designator = 'Y'

class Months(SingleFieldPeriod):
	__slots__ = ()
	field_type = core.months
	designator = 'M'

class Weeks(SingleFieldPeriod):
	__slots__ = ()
	field_type = core.weeks
	designator = 'W'

class Days(SingleFieldPeriod):
	__slots__ = ()
	field_type = core.days
	designator = 'D'

class Hours(SingleFieldPeriod):
	__slots__ = ()
	field_type = core.hours
	designator = 'H'
	time = True

class Minutes(SingleFieldPeriod):
	__slots__ = ()
	field_type = core.minutes
	designator = 'M'
	time = True

class Seconds(SingleFieldPeriod):
	__slots__ = ()
	field_type = core.seconds
	designator = 'S'
	time = True

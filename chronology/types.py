"""
# Value types over the instant timeline.

# &Duration is a signed count of milliseconds, &Interval a half-open range of instants
# bound to a chronology, &DateTime an instant bound to a chronology, and &Partial a
# validated set of field values that does not identify an instant by itself.

# &MutableInterval is the owned builder for intervals; it is not shared between threads.
"""
from . import core
from . import chrono
from . import period as libperiod
from .arithmetic import safe_add, safe_subtract, safe_multiply, safe_negate, floor_div, floor_mod
from .arithmetic import verify_value_bounds
from .units import truncated_div
from .constants import millis_per_second, millis_per_minute, millis_per_hour, millis_per_day

def _millis(instant):
	if isinstance(instant, int):
		return instant
	return instant.millis

def _is_duration(amount):
	return isinstance(amount, int) and not isinstance(amount, libperiod.SingleFieldPeriod)

class Duration(int):
	"""
	# Elapsed time in milliseconds without a field breakdown.
	"""
	__slots__ = ()

	@classmethod
	def of(Class, days=0, hours=0, minutes=0, seconds=0, millis=0):
		"""
		# Construct a duration from standard 24 hour days and fixed length time units.
		"""
		total = 0
		for count, unit in (
			(days, millis_per_day),
			(hours, millis_per_hour),
			(minutes, millis_per_minute),
			(seconds, millis_per_second),
			(millis, 1),
		):
			total = safe_add(total, safe_multiply(count, unit))
		return Class(total)

	@classmethod
	def between(Class, start, end):
		return Class(safe_subtract(_millis(end), _millis(start)))

	@classmethod
	def parse(Class, text):
		"""
		# Parse the `PTn.nnnS` form printed by &__str__.
		"""
		if len(text) < 4 or text[:2].upper() != 'PT' or text[-1].upper() != 'S':
			raise core.MalformedInput(text, 0)

		number = text[2:-1]
		negative = number.startswith('-')
		if negative:
			number = number[1:]

		whole, dot, fraction = number.partition('.')
		if not whole.isdigit() or (dot and (not fraction.isdigit() or len(fraction) > 3)):
			raise core.MalformedInput(text, 2)

		millis = safe_add(safe_multiply(int(whole), millis_per_second), int(fraction.ljust(3, '0')) if dot else 0)
		if negative:
			millis = safe_negate(millis)
		return Class(millis)

	def __repr__(self):
		return 'Duration(%d)' %(self,)

	def __str__(self):
		millis = int(self)
		negative = millis < 0
		digits = str(abs(millis)).rjust(4, '0')
		if millis % millis_per_second == 0:
			s = digits[:-3]
		else:
			s = digits[:-3] + '.' + digits[-3:]
		return 'PT' + ('-' if negative else '') + s + 'S'

	@property
	def standard_days(self):
		return truncated_div(int(self), millis_per_day)

	@property
	def standard_hours(self):
		return truncated_div(int(self), millis_per_hour)

	@property
	def standard_minutes(self):
		return truncated_div(int(self), millis_per_minute)

	@property
	def standard_seconds(self):
		return truncated_div(int(self), millis_per_second)

	def plus(self, duration):
		return Duration(safe_add(self, int(duration)))

	def minus(self, duration):
		return Duration(safe_subtract(self, int(duration)))

	def multiplied_by(self, scalar):
		return Duration(safe_multiply(self, scalar))

	def negated(self):
		return Duration(safe_negate(self))

	def to_period(self, type=None, chronology=None):
		"""
		# The period of the duration in the precise units of &type.
		"""
		return libperiod.Period.from_duration(self, type, chronology)

	def to_period_from(self, start, type=None, chronology=None):
		"""
		# The period of the duration anchored at &start, so that months and years are known.
		"""
		return libperiod.Period.from_duration_after(start, self, type, chronology)

	def to_period_to(self, end, type=None, chronology=None):
		return libperiod.Period.from_duration_before(self, end, type, chronology)

class AbstractInterval(object):
	"""
	# Read operations shared by &Interval and &MutableInterval.

	# [ Properties ]
	# /start/
		# The first instant of the interval.
	# /end/
		# The instant after the last instant of the interval.
	# /chronology/
		# The chronology used to decompose the interval.
	"""
	__slots__ = ()

	@staticmethod
	def _check(start, end):
		if end < start:
			raise core.InvalidInterval("The end instant must be greater than or equal to the start")

	@property
	def duration(self):
		return Duration(safe_subtract(self.end, self.start))

	def to_period(self, type=None):
		return libperiod.Period.between(self.start, self.end, type, self.chronology)

	def contains(self, ob):
		"""
		# Whether the instant or interval, &ob, is within the interval.
		"""
		if isinstance(ob, AbstractInterval):
			return self.start <= ob.start and ob.start < self.end and ob.end <= self.end
		m = _millis(ob)
		return self.start <= m < self.end

	def overlaps(self, interval):
		return self.start < interval.end and interval.start < self.end

	def abuts(self, interval):
		return interval.end == self.start or self.end == interval.start

	def overlap(self, interval):
		"""
		# The interval shared by both intervals, or &None when they do not overlap.
		"""
		if not self.overlaps(interval):
			return None
		return Interval(max(self.start, interval.start), min(self.end, interval.end), self.chronology)

	def gap(self, interval):
		"""
		# The interval between the two intervals, or &None when they overlap or abut.
		"""
		if interval.start > self.end:
			return Interval(self.end, interval.start, self.chronology)
		elif self.start > interval.end:
			return Interval(interval.end, self.start, self.chronology)
		return None

	def is_before(self, instant):
		return self.end <= _millis(instant)

	def is_after(self, instant):
		return self.start > _millis(instant)

	def __eq__(self, ob):
		if not isinstance(ob, AbstractInterval):
			return NotImplemented
		return (self.start, self.end, self.chronology) == (ob.start, ob.end, ob.chronology)

	def __ne__(self, ob):
		r = self.__eq__(ob)
		if r is NotImplemented:
			return r
		return not r

	def __str__(self):
		from . import isoformat
		f = isoformat.date_time().with_chronology(self.chronology)
		return f.print(self.start) + '/' + f.print(self.end)

	def __repr__(self):
		return '%s(%r)' %(self.__class__.__name__, str(self))

	def to_interval(self):
		return Interval(self.start, self.end, self.chronology)

	def to_mutable(self):
		return MutableInterval(self.start, self.end, self.chronology)

class Interval(AbstractInterval):
	"""
	# An immutable half-open range of instants.
	"""
	__slots__ = ('start', 'end', 'chronology')

	def __init__(self, start, end, chronology=None):
		if chronology is None:
			chronology = getattr(start, 'chronology', None) or chrono.default()
		start = _millis(start)
		end = _millis(end)
		self._check(start, end)
		self.start = start
		self.end = end
		self.chronology = chronology

	def __hash__(self):
		return hash((self.start, self.end, self.chronology))

	@classmethod
	def after(Class, start, amount, chronology=None):
		"""
		# The interval of the &amount, a duration or period, starting at &start.
		"""
		c = chronology or getattr(start, 'chronology', None) or chrono.default()
		start = _millis(start)
		if _is_duration(amount):
			return Class(start, c.add_duration(start, amount), c)
		return Class(start, c.add(amount, start, 1), c)

	@classmethod
	def before(Class, amount, end, chronology=None):
		c = chronology or getattr(end, 'chronology', None) or chrono.default()
		end = _millis(end)
		if _is_duration(amount):
			return Class(c.add_duration(end, amount, -1), end, c)
		return Class(c.add(amount, end, -1), end, c)

	@classmethod
	def parse(Class, text, chronology=None):
		"""
		# Parse `start/end`, `start/period`, or `period/end`.
		"""
		from . import isoformat
		from . import periodformat

		left, slash, right = text.partition('/')
		if not slash:
			raise core.MalformedInput(text, len(text), "Format requires a '/' separator: " + text)
		if not left or not right:
			raise core.MalformedInput(text, len(left) + (0 if left else 1), "Format invalid: " + text)

		parser = isoformat.date_time_parser()
		if chronology is not None:
			parser = parser.with_chronology(chronology)
		periods = periodformat.standard()

		period = None
		parsed = None
		start = end = 0

		if left[0] in 'Pp':
			period = periods.parse_period(left)
		else:
			dt = parser.parse_datetime(left)
			start = dt.millis
			parsed = dt.chronology

		if right[0] in 'Pp':
			if period is not None:
				raise core.MalformedInput(text, len(left) + 1, "Interval composed of two durations: " + text)
			period = periods.parse_period(right)
			chronology = chronology or parsed
			end = chronology.add(period, start, 1)
		else:
			dt = parser.parse_datetime(right)
			end = dt.millis
			chronology = chronology or parsed or dt.chronology
			if period is not None:
				start = chronology.add(period, end, -1)

		return Class(start, end, chronology)

	def with_start(self, start):
		return Interval(start, self.end, self.chronology)

	def with_end(self, end):
		return Interval(self.start, end, self.chronology)

	def with_chronology(self, chronology):
		return Interval(self.start, self.end, chronology)

	def with_duration_after_start(self, duration):
		return Interval.after(self.start, Duration(duration), self.chronology)

	def with_duration_before_end(self, duration):
		return Interval.before(Duration(duration), self.end, self.chronology)

	def with_period_after_start(self, period):
		return Interval.after(self.start, period, self.chronology)

	def with_period_before_end(self, period):
		return Interval.before(period, self.end, self.chronology)

class MutableInterval(AbstractInterval):
	"""
	# An interval builder; every setter checks the order of the new bounds before storing them.
	"""
	__slots__ = ('start', 'end', 'chronology')
	__hash__ = None

	def __init__(self, start=0, end=0, chronology=None):
		if chronology is None:
			chronology = getattr(start, 'chronology', None) or chrono.default()
		start = _millis(start)
		end = _millis(end)
		self._check(start, end)
		self.start = start
		self.end = end
		self.chronology = chronology

	def set_interval(self, start, end):
		start = _millis(start)
		end = _millis(end)
		self._check(start, end)
		self.start = start
		self.end = end

	def set_start(self, start):
		self.set_interval(start, self.end)

	def set_end(self, end):
		self.set_interval(self.start, end)

	def set_chronology(self, chronology):
		self.chronology = chronology or chrono.default()

	def set_duration_after_start(self, duration):
		self.set_end(self.chronology.add_duration(self.start, int(duration)))

	def set_duration_before_end(self, duration):
		self.set_start(self.chronology.add_duration(self.end, int(duration), -1))

	def set_period_after_start(self, period):
		self.set_end(self.chronology.add(period, self.start, 1))

	def set_period_before_end(self, period):
		self.set_start(self.chronology.add(period, self.end, -1))

class DateTime(object):
	"""
	# An instant in a chronology.

	# Field values are read as attributes named after the &core.DateTimeFieldType:

	#!/pl/python
		dt = DateTime.of(2004, 2, 29)
		assert dt.day_of_week == 7
	"""
	__slots__ = ('millis', 'chronology')

	def __init__(self, millis=0, chronology=None):
		self.millis = int(millis)
		self.chronology = chronology or chrono.default()

	@classmethod
	def of(Class, year, month, day, hour=0, minute=0, second=0, millis=0, chronology=None):
		c = chronology or chrono.default()
		return Class(c.date_time_millis(year, month, day, hour, minute, second, millis), c)

	@classmethod
	def parse(Class, text, formatter=None):
		"""
		# Parse ISO-8601 text keeping any offset present in the text as the zone.
		"""
		if formatter is None:
			from . import isoformat
			formatter = isoformat.date_time_parser().with_offset_parsed()
		return formatter.parse_datetime(text)

	def __getattr__(self, name):
		try:
			t = core.field_types_by_name[name]
		except KeyError:
			raise AttributeError(name)
		return t.field(self.chronology).get(self.millis)

	def __int__(self):
		return self.millis

	def __index__(self):
		return self.millis

	def __eq__(self, ob):
		if not isinstance(ob, DateTime):
			return NotImplemented
		return self.millis == ob.millis and self.chronology == ob.chronology

	def __ne__(self, ob):
		r = self.__eq__(ob)
		if r is NotImplemented:
			return r
		return not r

	def __hash__(self):
		return hash((self.millis, self.chronology))

	def __lt__(self, ob):
		return self.millis < _millis(ob)

	def __le__(self, ob):
		return self.millis <= _millis(ob)

	def __gt__(self, ob):
		return self.millis > _millis(ob)

	def __ge__(self, ob):
		return self.millis >= _millis(ob)

	def __str__(self):
		from . import isoformat
		return isoformat.date_time().print(self)

	def __repr__(self):
		return 'DateTime(%r, %r)' %(str(self), self.chronology)

	@property
	def zone(self):
		return self.chronology.zone

	def get(self, type):
		return type.field(self.chronology).get(self.millis)

	def with_millis(self, millis):
		if millis == self.millis:
			return self
		return DateTime(millis, self.chronology)

	def with_chronology(self, chronology):
		return DateTime(self.millis, chronology)

	def with_zone(self, zone):
		"""
		# The same instant in &zone.
		"""
		return DateTime(self.millis, self.chronology.with_zone(zone))

	def with_zone_retain_fields(self, zone):
		"""
		# The same local date and time in &zone.
		"""
		local = self.chronology.zone.to_local(self.millis)
		return DateTime(zone.to_utc_near(local, self.millis), self.chronology.with_zone(zone))

	def with_field(self, type, value):
		return self.with_millis(type.field(self.chronology).set(self.millis, value))

	def with_field_added(self, type, amount):
		"""
		# Add &amount units of the &core.DurationFieldType, &type.
		"""
		if amount == 0:
			return self
		return self.with_millis(type.field(self.chronology).add(self.millis, amount))

	def with_date(self, year, month, day):
		c = self.chronology
		m = c.year.set(self.millis, year)
		m = c.month_of_year.set(m, month)
		return self.with_millis(c.day_of_month.set(m, day))

	def with_time(self, hour, minute, second=0, millis=0):
		return self.with_millis(self.chronology.time_millis(self.millis, hour, minute, second, millis))

	def round_floor(self, type):
		return self.with_millis(type.field(self.chronology).round_floor(self.millis))

	def plus(self, amount, scalar=1):
		"""
		# Add a duration, given as an integer, or a period.
		"""
		if _is_duration(amount):
			return self.with_millis(self.chronology.add_duration(self.millis, amount, scalar))
		return self.with_millis(self.chronology.add(amount, self.millis, scalar))

	def minus(self, amount):
		return self.plus(amount, -1)

	def to_partial(self, types):
		types = tuple(types)
		return Partial(types, self.chronology.get_values(types, self.millis), self.chronology)

def _magnitude(unit):
	# Unsupported and unbounded units order before every supported unit.
	if unit is None or not unit.supported:
		return float('inf')
	return unit.unit_millis

def _contiguous(fields):
	last = None
	for i, f in enumerate(fields):
		if i > 0 and (f.range is None or f.range.type != last):
			return False
		last = f.unit.type
	return True

class Partial(object):
	"""
	# Field values without an instant; validated against the chronology when constructed.

	# Types are held from the largest unit to the smallest and must not repeat.
	"""
	__slots__ = ('types', 'values', 'chronology')

	def __init__(self, types=(), values=(), chronology=None):
		c = (chronology or chrono.default()).with_utc()
		types = tuple(types)
		values = tuple(values)
		if len(types) != len(values):
			raise ValueError("types and values must have the same length")
		if len(set(types)) != len(types):
			raise ValueError("types must not contain duplicates", types)

		def key(pair):
			f = pair[0].field(c)
			return (-_magnitude(f.unit), -_magnitude(f.range))

		pairs = sorted(zip(types, values), key=key)
		self.types = tuple(x[0] for x in pairs)
		self.values = tuple(x[1] for x in pairs)
		self.chronology = c
		c.validate(self.types, self.values)

	def __len__(self):
		return len(self.types)

	def items(self):
		return zip(self.types, self.values)

	def __eq__(self, ob):
		if not isinstance(ob, Partial):
			return NotImplemented
		return (self.types, self.values, self.chronology) == (ob.types, ob.values, ob.chronology)

	def __ne__(self, ob):
		r = self.__eq__(ob)
		if r is NotImplemented:
			return r
		return not r

	def __hash__(self):
		return hash((self.types, self.values, self.chronology))

	def is_supported(self, type):
		return type in self.types

	def get(self, type):
		try:
			return self.values[self.types.index(type)]
		except ValueError:
			raise core.UnsupportedField(type, "Field '%s' is not supported" %(type.name,))

	def with_field(self, type, value):
		"""
		# The partial with &type set to &value; the type is added when not present.
		"""
		if type in self.types:
			i = self.types.index(type)
			if self.values[i] == value:
				return self
			values = list(self.values)
			values[i] = value
			values = self._clamp(i, values)
			return Partial(self.types, values, self.chronology)
		return Partial(self.types + (type,), self.values + (value,), self.chronology)

	def without(self, type):
		if type not in self.types:
			return self
		i = self.types.index(type)
		return Partial(self.types[:i] + self.types[i+1:], self.values[:i] + self.values[i+1:], self.chronology)

	def _clamp(self, index, values):
		f = self.types[index].field(self.chronology)
		verify_value_bounds(f.type, values[index], f.minimum_for(self.types, values), f.maximum_for(self.types, values))
		for i in range(index + 1, len(values)):
			f = self.types[i].field(self.chronology)
			values[i] = max(f.minimum_for(self.types, values), min(values[i], f.maximum_for(self.types, values)))
		return values

	def with_field_added(self, type, amount):
		"""
		# Add &amount units of the &core.DurationFieldType, &type, to the field counting it.

		# Partials whose fields nest, such as month and day, are added through an instant and
		# wrap at the largest field. Other partials carry the overflow of a field into the next
		# larger field and raise &core.IllegalFieldValue when the largest field overflows.
		"""
		index = None
		for i, t in enumerate(self.types):
			if t.unit == type:
				index = i
		if index is None:
			raise core.UnsupportedField(type, "Field '%s' is not supported" %(type.name,))
		if amount == 0:
			return self

		c = self.chronology
		fields = [t.field(c) for t in self.types]
		if _contiguous(fields):
			instant = c.date_millis(2000, 1, 1)
			for f, v in zip(fields, self.values):
				instant = f.set(instant, v)
			instant = fields[index].add(instant, amount)
			return Partial(self.types, c.get_values(self.types, instant), c)

		values = list(self.values)
		i = index
		while True:
			f = fields[i]
			lower = f.minimum_for(self.types, values)
			upper = f.maximum_for(self.types, values)
			v = values[i] + amount
			if lower <= v <= upper:
				values[i] = v
				break
			if i == 0:
				raise core.IllegalFieldValue(f.type, v, lower, upper,
					message="exceeds the maximum value of the partial")
			span = upper - lower + 1
			values[i] = lower + floor_mod(v - lower, span)
			amount = floor_div(v - lower, span)
			i -= 1

		return Partial(self.types, self._clamp(i, values), c)

	def to_datetime(self, base):
		"""
		# The &DateTime of the fields set on the instant, &base.
		"""
		c = getattr(base, 'chronology', None) or chrono.default()
		return DateTime(c.set_values(self.types, self.values, _millis(base)), c)

	def __str__(self):
		from . import isoformat
		try:
			f = isoformat.for_fields(set(self.types), extended=True, strict=False)
		except core.NoMatchingFormat:
			return '[' + ', '.join('%s=%d' %(t.name, v) for t, v in self.items()) + ']'
		return f.print_partial(self)

	def __repr__(self):
		return 'Partial(%r)' %(str(self),)

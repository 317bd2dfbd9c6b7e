"""
# Chronologies: the complete set of fields and units of a calendar system.

# A &Chronology is assembled once per &.calendar.Calendar and exposes each field and
# unit as an attribute named after its &.core type. Zoned chronologies wrap the fields of
# a UTC chronology so that they read and write local time.

#!/pl/python
	from chronology import chrono
	iso = chrono.iso()
	instant = iso.date_time_millis(2004, 2, 29)
	assert iso.day_of_week.get(instant) == 7

# Instances are immutable and shared; &instance caches one chronology per calendar and
# zone for the life of the process.
"""
from . import core
from . import calendar
from . import zone as libzone
from . import units
from . import fields
from .arithmetic import safe_add, safe_multiply, verify_value_bounds
from .constants import millis_per_second, millis_per_minute, millis_per_hour
from .constants import millis_per_halfday, millis_per_day, millis_per_week, epoch_days

_names = {
	'iso': 'ISOChronology',
	'gregorian': 'GregorianChronology',
	'julian': 'JulianChronology',
	'gj': 'GJChronology',
}

class Chronology(object):
	"""
	# The fields and units of a calendar system in UTC.

	# [ Properties ]
	# /calendar/
		# The &.calendar.Calendar implemented by the fields.
	# /zone/
		# The zone whose local time the fields read; UTC for base chronologies.
	"""

	def __init__(self, cal):
		self.calendar = cal
		self.zone = libzone.utc
		self.base = self
		self._assemble(cal)

	def _assemble(self, cal):
		self.eras = units.UnsupportedDurationField(core.eras)
		self.millis = units.MillisDurationField()
		self.seconds = units.PreciseDurationField(core.seconds, millis_per_second)
		self.minutes = units.PreciseDurationField(core.minutes, millis_per_minute)
		self.hours = units.PreciseDurationField(core.hours, millis_per_hour)
		self.halfdays = units.PreciseDurationField(core.halfdays, millis_per_halfday)
		self.days = units.PreciseDurationField(core.days, millis_per_day)
		self.weeks = units.PreciseDurationField(core.weeks, millis_per_week)

		P = fields.PreciseField
		self.millis_of_second = P(core.millis_of_second, self.millis, self.seconds)
		self.millis_of_day = P(core.millis_of_day, self.millis, self.days)
		self.second_of_minute = P(core.second_of_minute, self.seconds, self.minutes)
		self.second_of_day = P(core.second_of_day, self.seconds, self.days)
		self.minute_of_hour = P(core.minute_of_hour, self.minutes, self.hours)
		self.minute_of_day = P(core.minute_of_day, self.minutes, self.days)
		self.hour_of_day = P(core.hour_of_day, self.hours, self.days)
		self.hour_of_halfday = P(core.hour_of_halfday, self.hours, self.halfdays)
		self.halfday_of_day = fields.HalfdayField(core.halfday_of_day, self.halfdays, self.days)
		self.clockhour_of_day = fields.ZeroIsMaxField(self.hour_of_day, core.clockhour_of_day)
		self.clockhour_of_halfday = fields.ZeroIsMaxField(self.hour_of_halfday, core.clockhour_of_halfday)

		self.year = fields.YearField(self.days, cal)
		self.years = self.year.unit
		self.era = fields.EraField(self.eras, self.year, cal)
		self.year_of_era = fields.YearOfEraField(self.year, self.eras)
		count = fields.EraYear(self.year_of_era, cal.kind == 'iso')
		self.century_of_era = fields.CenturyOfEraField(count, self.eras)
		self.centuries = self.century_of_era.unit
		self.year_of_century = fields.YearOfCenturyField(count, self.centuries)

		self.month_of_year = fields.MonthOfYearField(self.years, self.days, cal)
		self.months = self.month_of_year.unit
		self.day_of_month = fields.DayOfMonthField(core.day_of_month, self.days, self.months, cal)
		self.day_of_month.leap_duration_field = self.days
		self.day_of_year = fields.DayOfYearField(core.day_of_year, self.days, self.years, cal)
		self.day_of_week = fields.DayOfWeekField(core.day_of_week, self.days, self.weeks, cal)

		self.weekyear = fields.WeekyearField(self.weeks, cal)
		self.weekyears = self.weekyear.unit
		self.week_of_weekyear = fields.WeekOfWeekyearField(core.week_of_weekyear, self.weeks, self.weekyears, cal)
		self.weekyear_of_century = fields.WeekyearOfCenturyField(self.weekyear, self.centuries)

	def __repr__(self):
		return '%s[%s%s]' %(
			_names[self.calendar.kind],
			self.zone.name,
			'' if self.calendar.minimum_days == 4 else ',mdfw=%d' %(self.calendar.minimum_days,),
		)

	def __eq__(self, ob):
		return isinstance(ob, Chronology) and (self.calendar, self.zone) == (ob.calendar, ob.zone)

	def __hash__(self):
		return hash((self.calendar, self.zone))

	@property
	def kind(self):
		return self.calendar.kind

	def field(self, type):
		"""
		# The field or unit identified by the &core.DateTimeFieldType or
		# &core.DurationFieldType, &type.
		"""
		return type.field(self)

	def with_zone(self, zone):
		"""
		# The chronology of the same calendar in &zone.
		"""
		return instance(self.calendar.kind, zone, self.calendar.cutover, self.calendar.minimum_days)

	def with_utc(self):
		return self.with_zone(libzone.utc)

	def _check_date(self, year, month, day):
		verify_value_bounds(core.year, year, self.year.minimum, self.year.maximum_value)
		y = calendar.internal_year(self.calendar, year)
		verify_value_bounds(core.month_of_year, month, 1, 12)
		verify_value_bounds(core.day_of_month, day, 1, calendar.days_in_month(self.calendar, y, month))
		return y

	def _local_millis(self, year, month, day, millis_of_day):
		y = self._check_date(year, month, day)
		verify_value_bounds(core.millis_of_day, millis_of_day, 0, millis_per_day - 1)
		days = calendar.days_from_date(self.calendar, y, month, day)
		return safe_add(safe_multiply(days - epoch_days, millis_per_day), millis_of_day)

	def _from_local(self, local):
		return local

	def date_millis(self, year, month, day, millis_of_day=0):
		"""
		# The instant of &millis_of_day on the date.
		"""
		return self._from_local(self._local_millis(year, month, day, millis_of_day))

	def date_time_millis(self, year, month, day, hour=0, minute=0, second=0, millis=0):
		"""
		# The instant of the date and time of day; every value is checked against the range
		# of its field and the date must exist in the calendar.
		"""
		verify_value_bounds(core.hour_of_day, hour, 0, 23)
		verify_value_bounds(core.minute_of_hour, minute, 0, 59)
		verify_value_bounds(core.second_of_minute, second, 0, 59)
		verify_value_bounds(core.millis_of_second, millis, 0, 999)
		mod = (hour * millis_per_hour) + (minute * millis_per_minute) + (second * millis_per_second) + millis
		return self.date_millis(year, month, day, mod)

	def time_millis(self, instant, hour=0, minute=0, second=0, millis=0):
		"""
		# &instant with its time of day replaced.
		"""
		instant = self.millis_of_day.set(instant, 0)
		instant = self.hour_of_day.set(instant, hour)
		instant = self.minute_of_hour.set(instant, minute)
		instant = self.second_of_minute.set(instant, second)
		return self.millis_of_second.set(instant, millis)

	def validate(self, types, values):
		"""
		# Check that the &values of the partial identified by &types are in range, raising
		# &core.IllegalFieldValue for the first that is not.
		"""
		types = tuple(types)
		values = tuple(values)
		fs = [t.field(self) for t in types]

		for f, v in zip(fs, values):
			verify_value_bounds(f.type, v, f.minimum, f.maximum())

		for f, v in zip(fs, values):
			verify_value_bounds(f.type, v, f.minimum_for(types, values), f.maximum_for(types, values))

	def get_values(self, types, instant):
		"""
		# The values of the fields identified by &types at &instant.
		"""
		return tuple(t.field(self).get(instant) for t in types)

	def set_values(self, types, values, instant):
		"""
		# Set each field of &types to the corresponding value in order.
		"""
		for t, v in zip(types, values):
			instant = t.field(self).set(instant, v)
		return instant

	def add(self, period, instant, scalar=1):
		"""
		# Add the &period multiplied by &scalar to &instant, coarsest unit first.
		"""
		if scalar == 0 or period is None:
			return instant

		for t, v in period.items():
			if v != 0:
				instant = t.field(self).add(instant, safe_multiply(v, scalar))
		return instant

	def add_duration(self, instant, duration, scalar=1):
		if scalar == 0 or duration == 0:
			return instant
		return safe_add(instant, safe_multiply(duration, scalar))

	def period_values(self, period_type, start, end):
		"""
		# Decompose the interval from &start to &end into the units of &period_type.

		# Each unit, coarsest first, takes the whole number of units between the anchor and
		# &end; the anchor is then advanced by that many units. Adding the result to &start
		# reproduces &end when &period_type extends to millis.
		"""
		values = []
		for t in period_type:
			f = t.field(self)
			value = 0
			if start != end and f.supported:
				value = f.difference(end, start)
				if value != 0:
					start = f.add(start, value)
			values.append(value)
		return tuple(values)

	def period_values_for_duration(self, period_type, duration):
		"""
		# Decompose &duration into the precise units of &period_type; imprecise units,
		# months and years, are left zero.
		"""
		values = []
		current = 0
		for t in period_type:
			f = t.field(self)
			value = 0
			if duration != 0 and f.supported and f.precise:
				value = f.difference(duration, current)
				current = f.add(current, value)
			values.append(value)
		return tuple(values)

class ZonedChronology(Chronology):
	"""
	# The fields of a UTC chronology presented in the local time of a zone.
	"""

	def __init__(self, base, zone):
		self.calendar = base.calendar
		self.zone = zone
		self.base = base

		converted = {}
		def unit(u):
			if u is None or not u.supported:
				return u
			k = id(u)
			if k not in converted:
				converted[k] = units.ZonedDurationField(u, zone)
			return converted[k]

		for t in core.duration_types:
			setattr(self, t.name, unit(getattr(base, t.name)))

		for t in core.field_types:
			f = getattr(base, t.name)
			if f.supported:
				f = fields.ZonedField(f, zone, unit(f.unit), unit(f.range), unit(f.leap_duration_field))
			setattr(self, t.name, f)

	def _from_local(self, local):
		return self.zone.to_utc(local, strict=True)

	def time_millis(self, instant, hour=0, minute=0, second=0, millis=0):
		local = self.base.time_millis(self.zone.to_local(instant), hour, minute, second, millis)
		return self.zone.to_utc(local, strict=True)

_cache = {}

def instance(kind='iso', zone=None, cutover=None, minimum_days=4):
	"""
	# The shared chronology of the calendar &kind in &zone.

	# Construction is not locked; a racing thread may build a duplicate but only the first
	# chronology published for a key is ever returned.
	"""
	if zone is None:
		zone = libzone.utc
	cal = calendar.create(kind, cutover, minimum_days)
	key = (cal, zone)

	chronology = _cache.get(key)
	if chronology is not None:
		return chronology

	if zone == libzone.utc:
		chronology = Chronology(cal)
	else:
		chronology = ZonedChronology(instance(kind, None, cutover, minimum_days), zone)

	return _cache.setdefault(key, chronology)

def iso(zone=None):
	return instance('iso', zone)

def gregorian(zone=None, minimum_days=4):
	return instance('gregorian', zone, minimum_days=minimum_days)

def julian(zone=None, minimum_days=4):
	return instance('julian', zone, minimum_days=minimum_days)

def gj(zone=None, cutover=None, minimum_days=4):
	return instance('gj', zone, cutover, minimum_days)

def default():
	"""
	# The chronology used when none is given: ISO in UTC.
	"""
	return instance('iso')

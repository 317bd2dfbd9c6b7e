"""
# Duration fields: units of time that can be added to instants and counted between them.

# Precise units have a fixed length in milliseconds. Imprecise units, months and years,
# delegate to the calendar field that owns them so that addition follows the calendar
# rather than an average length.
"""
from . import core
from .arithmetic import safe_add, safe_subtract, safe_multiply, safe_to_int

def truncated_div(a, b):
	"""
	# Integer division rounding toward zero.
	"""
	q = abs(a) // abs(b)
	if (a < 0) != (b < 0):
		return -q
	return q

class DurationField(object):
	"""
	# Base class for units of time.

	# [ Properties ]
	# /type/
		# The &core.DurationFieldType identifying the unit.
	# /unit_millis/
		# The length of the unit; the average length for imprecise units.
	# /precise/
		# Whether every unit has the length &unit_millis.
	# /supported/
		# Whether the chronology supports the unit at all.
	"""
	supported = True
	precise = True
	unit_millis = 0

	def __init__(self, type):
		self.type = type

	def __repr__(self):
		return '<%s %s>' %(self.__class__.__name__, self.type.name)

	@property
	def name(self):
		return self.type.name

	def add(self, instant, value):
		raise NotImplementedError

	def subtract(self, instant, value):
		return self.add(instant, -value)

	def difference_as_long(self, minuend, subtrahend):
		raise NotImplementedError

	def difference(self, minuend, subtrahend):
		"""
		# The number of whole units between the instants; truncated toward zero.
		"""
		return safe_to_int(self.difference_as_long(minuend, subtrahend))

	def millis(self, instant=None):
		"""
		# The length of one unit starting at &instant.
		"""
		return self.unit_millis

	def millis_for(self, value, instant=None):
		"""
		# The duration of &value units starting at &instant.
		"""
		return safe_multiply(value, self.unit_millis)

	def value_as_long(self, duration, instant=None):
		return truncated_div(duration, self.unit_millis)

	def value(self, duration, instant=None):
		"""
		# The number of whole units in &duration.
		"""
		return safe_to_int(self.value_as_long(duration, instant))

	def _key(self):
		if not self.supported:
			return 0
		return self.unit_millis

	def __lt__(self, other):
		return self._key() < other._key()

	def __gt__(self, other):
		return self._key() > other._key()

class MillisDurationField(DurationField):
	unit_millis = 1

	def __init__(self):
		super().__init__(core.millis)

	def add(self, instant, value):
		return safe_add(instant, value)

	def difference_as_long(self, minuend, subtrahend):
		return safe_subtract(minuend, subtrahend)

	def millis_for(self, value, instant=None):
		return value

	def value_as_long(self, duration, instant=None):
		return duration

class PreciseDurationField(DurationField):
	"""
	# A unit with a fixed length.
	"""

	def __init__(self, type, unit_millis):
		super().__init__(type)
		self.unit_millis = unit_millis

	def add(self, instant, value):
		return safe_add(instant, safe_multiply(value, self.unit_millis))

	def difference_as_long(self, minuend, subtrahend):
		return truncated_div(safe_subtract(minuend, subtrahend), self.unit_millis)

class ScaledDurationField(DurationField):
	"""
	# A unit that is a fixed multiple of another; centuries of years.
	"""

	def __init__(self, field, type, scalar):
		super().__init__(type)
		self.field = field
		self.scalar = scalar
		self.precise = field.precise
		self.unit_millis = field.unit_millis * scalar

	def add(self, instant, value):
		return self.field.add(instant, safe_multiply(value, self.scalar))

	def difference_as_long(self, minuend, subtrahend):
		return truncated_div(self.field.difference_as_long(minuend, subtrahend), self.scalar)

	def millis(self, instant=None):
		if instant is None:
			return self.unit_millis
		return self.add(instant, 1) - instant

class ImpreciseDurationField(DurationField):
	"""
	# A unit whose length depends on the instant it is applied to.

	# Arithmetic is delegated to the &..fields.DateTimeField that owns the unit.
	"""
	precise = False

	def __init__(self, field, type, unit_millis):
		super().__init__(type)
		self.field = field
		self.unit_millis = unit_millis

	def add(self, instant, value):
		return self.field.add(instant, value)

	def difference_as_long(self, minuend, subtrahend):
		return self.field.difference_as_long(minuend, subtrahend)

	def millis(self, instant=None):
		if instant is None:
			return self.unit_millis
		return self.add(instant, 1) - instant

	def millis_for(self, value, instant=None):
		if instant is None:
			return safe_multiply(value, self.unit_millis)
		return safe_subtract(self.add(instant, value), instant)

	def value_as_long(self, duration, instant=None):
		if instant is None:
			return truncated_div(duration, self.unit_millis)
		return self.difference_as_long(safe_add(instant, duration), instant)

class UnsupportedDurationField(DurationField):
	"""
	# A unit the chronology does not support; eras.
	"""
	supported = False

	def _unsupported(self, *args):
		raise core.UnsupportedField(self.type)

	add = _unsupported
	difference_as_long = _unsupported
	millis = _unsupported
	millis_for = _unsupported
	value_as_long = _unsupported

class ZonedDurationField(DurationField):
	"""
	# A unit applied to local time in a zone.

	# Units shorter than a day are applied to the UTC instant so that adding hours across
	# a transition changes the wall clock by the transition's amount.
	"""

	def __init__(self, field, zone):
		super().__init__(field.type)
		self.field = field
		self.zone = zone
		self.time_field = field.unit_millis < 43200000
		self.precise = field.precise if self.time_field else (field.precise and zone.fixed)
		self.unit_millis = field.unit_millis

	def add(self, instant, value):
		offset = self.zone.offset_at(instant)
		local = self.field.add(safe_add(instant, offset), value)
		if self.time_field:
			return local - offset
		return safe_subtract(local, self.zone.offset_from_local(local))

	def difference_as_long(self, minuend, subtrahend):
		offset = self.zone.offset_at(subtrahend)
		if self.time_field:
			moffset = offset
		else:
			moffset = self.zone.offset_at(minuend)
		return self.field.difference_as_long(safe_add(minuend, moffset), safe_add(subtrahend, offset))

	def millis(self, instant=None):
		if instant is None:
			return self.unit_millis
		return self.add(instant, 1) - instant

	def millis_for(self, value, instant=None):
		if instant is None:
			return self.field.millis_for(value)
		return safe_subtract(self.add(instant, value), instant)

	def value_as_long(self, duration, instant=None):
		if instant is None:
			return self.field.value_as_long(duration)
		return self.difference_as_long(safe_add(instant, duration), instant)

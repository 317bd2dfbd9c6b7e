"""
# Time zone offsets consumed by zoned chronologies.

# Zone rule data is not compiled here; a zone is anything implementing &offset_at,
# &standard_offset, &next_transition, and &previous_transition over millisecond instants.
# &FixedZone covers UTC and constant offsets and &TransitionZone covers a table of
# transitions supplied by the application.
"""
import bisect

from . import core
from .arithmetic import safe_add
from .constants import millis_per_hour, millis_per_minute

class Offset(tuple):
	"""
	# Offsets are constructed by a tuple of the form: `(offset, abbreviation, type)`.
	# The offset is in milliseconds and the type signifies whether or not the offset is
	# daylight savings, `'dst'`, or standard time, `'std'`.
	"""
	__slots__ = ()

	@property
	def magnitude(self):
		return self[0]

	@property
	def abbreviation(self):
		return self[1]

	@property
	def type(self):
		return self[2]

	@property
	def is_dst(self):
		return self.type == 'dst'

	def __int__(self):
		return self.magnitude

	def __repr__(self):
		return '<%s(%s: %d)>' %(self.__class__.__name__, self.abbreviation, self.magnitude)

	@classmethod
	def of(Class, magnitude, abbreviation=None, type='std'):
		if abbreviation is None:
			abbreviation = format_offset(magnitude)
		return Class((magnitude, abbreviation, type))

def format_offset(offset):
	"""
	# Render &offset milliseconds as `±HH:mm`, with seconds and milliseconds when present.
	"""
	sign = '-' if offset < 0 else '+'
	offset = abs(offset)
	hours, offset = divmod(offset, millis_per_hour)
	minutes, offset = divmod(offset, millis_per_minute)
	s = '%s%02d:%02d' %(sign, hours, minutes)
	if offset:
		seconds, millis = divmod(offset, 1000)
		s += ':%02d' %(seconds,)
		if millis:
			s += '.%03d' %(millis,)
	return s

class Zone(object):
	"""
	# Base class for zones; derives local time conversions from the offset queries.
	"""
	fixed = False
	name = None

	def __repr__(self):
		return '<%s %s>' %(self.__class__.__name__, self.name)

	def __str__(self):
		return self.name

	def offset_at(self, instant):
		"""
		# The total offset from UTC in milliseconds in effect at &instant.
		"""
		raise NotImplementedError

	def standard_offset(self, instant):
		raise NotImplementedError

	def next_transition(self, instant):
		"""
		# The first transition after &instant, or &instant when there are none.
		"""
		return instant

	def previous_transition(self, instant):
		"""
		# The last transition before &instant, or &instant when there are none.
		"""
		return instant

	def to_local(self, instant):
		return safe_add(instant, self.offset_at(instant))

	def offset_from_local(self, local):
		"""
		# The offset to subtract from the local instant, &local, to find the UTC instant.

		# Local times that do not exist, the gap of a forward transition, resolve to the
		# offset after the transition. Local times that occur twice resolve to the
		# earlier of the two instants.
		"""
		estimate = self.offset_at(local)
		adjusted = local - estimate
		offset = self.offset_at(adjusted)

		if estimate != offset:
			if estimate - offset < 0:
				next_local = self.next_transition(adjusted)
				next_adjusted = self.next_transition(local - offset)
				if next_local != next_adjusted:
					return estimate
		elif estimate >= 0:
			# Overlap: prefer the offset before the transition.
			prev = self.previous_transition(adjusted) - 1
			if prev < adjusted:
				prior = self.offset_at(prev)
				diff = prior - estimate
				if adjusted - prev <= diff:
					return prior
		return offset

	def to_utc(self, local, strict=False):
		"""
		# Convert the &local instant to UTC. When &strict, local times in a gap raise
		# &core.IllegalFieldValue.
		"""
		offset = self.offset_from_local(local)
		instant = local - offset
		if strict and self.offset_at(instant) != offset:
			raise core.IllegalFieldValue('instant', local,
				message="does not exist in %s due to an offset transition" %(self.name,))
		return instant

	def to_utc_near(self, local, original):
		"""
		# Convert the &local instant to UTC preferring the offset of &original.
		"""
		offset = self.offset_at(original)
		instant = local - offset
		if self.offset_at(instant) == offset:
			return instant
		return self.to_utc(local)

class FixedZone(Zone):
	"""
	# A zone with a constant offset.
	"""
	fixed = True

	def __init__(self, offset, name=None):
		self.offset = offset
		if name is None:
			name = 'UTC' if offset == 0 else format_offset(offset)
		self.name = name

	def __eq__(self, ob):
		return isinstance(ob, FixedZone) and ob.offset == self.offset and ob.name == self.name

	def __hash__(self):
		return hash((self.name, self.offset))

	def offset_at(self, instant):
		return self.offset

	def standard_offset(self, instant):
		return self.offset

	def offset_from_local(self, local):
		return self.offset

#: The zone of instants.
utc = FixedZone(0, 'UTC')

def fixed(hours=0, minutes=0, millis=0):
	"""
	# Construct a &FixedZone from the given offset parts; the parts share the sign of &hours.
	"""
	if hours < 0:
		minutes = -abs(minutes)
	offset = (hours * millis_per_hour) + (minutes * millis_per_minute) + millis
	if offset == 0:
		return utc
	return FixedZone(offset)

class TransitionZone(Zone):
	"""
	# Zones consist of a sequence of transition times whose ranges correspond to a
	# particular offset.

	# The offset at `transitions[i]` is `offsets[i]` and applies until the next
	# transition. Instants before the first transition use &default.
	"""

	def __init__(self, name, transitions, offsets, default):
		if len(transitions) != len(offsets):
			raise ValueError("transitions and offsets must have the same length")
		self.name = name
		self.transitions = tuple(transitions)
		self.offsets = tuple(offsets)
		self.default = default

	def __eq__(self, ob):
		return isinstance(ob, TransitionZone) and (
			(self.name, self.transitions, self.offsets, self.default) ==
			(ob.name, ob.transitions, ob.offsets, ob.default)
		)

	def __hash__(self):
		return hash((self.name, self.transitions))

	def find(self, instant, bisect=bisect.bisect_right):
		"""
		# The &Offset in effect at &instant.
		"""
		idx = bisect(self.transitions, instant) - 1
		if idx < 0:
			return self.default
		return self.offsets[idx]

	def offset_at(self, instant):
		return self.find(instant)[0]

	def standard_offset(self, instant):
		"""
		# The offset of the nearest standard time offset in effect at or before &instant.
		"""
		idx = bisect.bisect_right(self.transitions, instant) - 1
		while idx >= 0:
			if not self.offsets[idx].is_dst:
				return self.offsets[idx][0]
			idx -= 1
		return self.default[0]

	def next_transition(self, instant):
		idx = bisect.bisect_right(self.transitions, instant)
		if idx < len(self.transitions):
			return self.transitions[idx]
		return instant

	def previous_transition(self, instant):
		idx = bisect.bisect_left(self.transitions, instant) - 1
		if idx >= 0:
			return self.transitions[idx]
		return instant

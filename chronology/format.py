"""
# Format and parse datetime strings.

# Formatters are composed from elements: literals, numbers, fractions, offsets and
# words. A &Builder accumulates elements and &Builder.to_formatter produces an immutable
# &Formatter that prints instants and partials and parses text back into instants.

# Parsing is a single left to right pass over the text. Each element consumes the
# characters it recognizes and saves the field values it read in a &Bucket; alternatives
# are tried in turn and the alternative consuming the most characters wins. Element
# parse methods return the new position on success and the complement, `~position`, of
# the failing position otherwise.

# Parse failures raise &.core.MalformedInput carrying the failing offset.
"""
import time

from . import core
from . import chrono
from . import words
from . import zone as libzone
from . import fields
from .arithmetic import floor_mod, safe_add, safe_subtract
from .constants import millis_per_hour, millis_per_minute, millis_per_second

def _digit(c):
	return '0' <= c <= '9'

def _pad(value, width):
	if value < 0:
		return '-' + str(-value).rjust(width, '0')
	return str(value).rjust(width, '0')

def _magnitude(unit):
	if unit is None or not unit.supported:
		return float('inf')
	return unit.unit_millis

def _order(item):
	# Largest range first, then largest unit.
	field = item[0]
	return (-_magnitude(field.range), -_magnitude(field.unit))

class Bucket(object):
	"""
	# The field values saved while parsing.

	# [ Properties ]
	# /chronology/
		# The UTC chronology used to resolve the saved fields.
	# /zone/
		# The zone of the local time represented by the fields.
	# /offset/
		# The offset read from the text; &None when the text had none.
	"""

	def __init__(self, chronology, locale=None):
		self.chronology = chronology.with_utc()
		self.zone = chronology.zone
		self.locale = locale
		self.offset = None
		self.saved = []

	def save(self, type, value):
		"""
		# Save the &value of the &.core.DateTimeFieldType, &type.
		"""
		self.saved.append((type.field(self.chronology), value))

	def save_field(self, field, value):
		self.saved.append((field, value))

	def save_state(self):
		return (self.saved[:], self.offset)

	def restore_state(self, state):
		self.saved = state[0][:]
		self.offset = state[1]

	def compute(self, reset=True):
		"""
		# Resolve the saved fields into an instant.

		# Fields are set from the largest range to the smallest starting at the epoch. When
		# &reset, each field is rounded down after it is set so that finer fields absent from
		# the text are zero, and a second pass sets the fields again so that values whose
		# validity depends on a later field are checked against the final date.
		"""
		saved = sorted(self.saved, key=_order)
		millis = 0
		for field, value in saved:
			millis = field.set(millis, value)
			if reset:
				millis = field.round_floor(millis)

		if reset:
			last = len(saved) - 1
			for i, (field, value) in enumerate(saved):
				millis = field.set(millis, value)
				if i == last:
					millis = field.round_floor(millis)

		if self.offset is not None:
			millis = safe_subtract(millis, self.offset)
		elif self.zone != libzone.utc:
			millis = self.zone.to_utc(millis, strict=True)
		return millis

class Element(object):
	"""
	# Base class for formatter elements.
	"""
	printable = True
	parsable = True

	def print(self, out, instant, chronology, offset, zone, locale):
		"""
		# Append the text of the local &instant to the list, &out.
		"""
		raise NotImplementedError

	def print_partial(self, out, partial, locale):
		raise NotImplementedError

	def parse(self, bucket, text, position):
		raise NotImplementedError

class Literal(Element):
	def __init__(self, text):
		self.text = text

	def __repr__(self):
		return 'Literal(%r)' %(self.text,)

	def print(self, out, instant, chronology, offset, zone, locale):
		out.append(self.text)

	def print_partial(self, out, partial, locale):
		out.append(self.text)

	def parse(self, bucket, text, position):
		end = position + len(self.text)
		if text[position:end].casefold() == self.text.casefold():
			return end
		return ~position

class Number(Element):
	"""
	# A decimal field value printed with at least &min_print digits; parsing reads at
	# most &max_parse digits.
	"""

	def __init__(self, type, min_print, max_parse, signed=False):
		self.type = type
		self.min_print = min_print
		self.max_parse = max_parse
		self.signed = signed

	def __repr__(self):
		return '%s(%s)' %(self.__class__.__name__, self.type.name)

	def print(self, out, instant, chronology, offset, zone, locale):
		out.append(_pad(self.type.field(chronology).get(instant), self.min_print))

	def print_partial(self, out, partial, locale):
		if partial.is_supported(self.type):
			out.append(_pad(partial.get(self.type), self.min_print))
		else:
			out.append('\ufffd' * self.min_print)

	def parse(self, bucket, text, position):
		limit = min(self.max_parse, len(text) - position)
		length = 0
		while length < limit:
			c = text[position + length]
			if length == 0 and self.signed and c in '-+':
				# The sign must be followed by a digit and is not counted as one.
				if length + 1 >= limit or not _digit(text[position + 1]):
					break
				length += 1
				limit = min(limit + 1, len(text) - position)
				continue
			if not _digit(c):
				break
			length += 1

		if length == 0:
			return ~position

		digits = text[position:position+length]
		if digits[0] == '+':
			digits = digits[1:]
		bucket.save(self.type, int(digits))
		return position + length

class FixedNumber(Number):
	"""
	# A decimal field value that must have exactly &max_parse digits.
	"""

	def __init__(self, type, digits, signed=False):
		super().__init__(type, digits, digits, signed)

	def parse(self, bucket, text, position):
		end = super().parse(bucket, text, position)
		if end < 0:
			return end

		expected = position + self.max_parse
		if end != expected:
			if self.signed and text[position] in '-+':
				expected += 1
			if end > expected:
				return ~(expected + 1)
			elif end < expected:
				return ~end
		return end

class Fraction(Element):
	"""
	# The fraction of the unit of the field, &type, following a decimal point.
	"""

	def __init__(self, type, min_digits, max_digits):
		self.type = type
		self.min_digits = min_digits
		self.max_digits = max_digits

	def __repr__(self):
		return 'Fraction(%s)' %(self.type.name,)

	def _text(self, instant, chronology):
		unit = self.type.field(chronology).unit.unit_millis
		scaled = floor_mod(instant, unit) * (10 ** self.max_digits) // unit
		s = str(scaled).rjust(self.max_digits, '0').rstrip('0')
		return s.ljust(self.min_digits, '0')

	def print(self, out, instant, chronology, offset, zone, locale):
		out.append(self._text(instant, chronology))

	def print_partial(self, out, partial, locale):
		c = partial.chronology
		out.append(self._text(c.set_values(partial.types, partial.values, 0), c))

	def parse(self, bucket, text, position):
		limit = min(self.max_digits, len(text) - position)
		length = 0
		while length < limit and _digit(text[position + length]):
			length += 1
		if length == 0:
			return ~position

		c = bucket.chronology
		unit = self.type.field(c).unit
		millis = int(text[position:position+length]) * unit.unit_millis // (10 ** length)
		field = fields.PreciseField(core.millis_of_second, c.millis, unit)
		bucket.save_field(field, millis)
		return position + length

class Offset(Element):
	"""
	# The offset of the zone as `±HH:mm`; &zero_text is used for zero offsets.

	# [ Parameters ]
	# /zero_text/
		# The text printed and accepted for a zero offset; &None to print `+00:00`.
	# /separators/
		# Whether `:` separates the hours and minutes when printing.
	# /min_fields/
		# The number of components, hours through millis, always printed.
	# /max_fields/
		# The number of components that may be printed and parsed.
	"""

	_units = (millis_per_hour, millis_per_minute, millis_per_second, 1)

	def __init__(self, zero_text='Z', separators=True, min_fields=2, max_fields=4):
		self.zero_text = zero_text
		self.separators = separators
		self.min_fields = min_fields
		self.max_fields = max_fields

	def print(self, out, instant, chronology, offset, zone, locale):
		if offset is None:
			return
		if offset == 0 and self.zero_text is not None:
			out.append(self.zero_text)
			return

		out.append('-' if offset < 0 else '+')
		remainder = abs(offset)
		for i, unit in enumerate(self._units):
			if i >= self.max_fields:
				break
			if i > 0 and remainder == 0 and self.min_fields <= i:
				break
			count, remainder = divmod(remainder, unit)
			if i > 0 and self.separators:
				out.append('.' if i == 3 else ':')
			out.append(str(count).rjust(3 if i == 3 else 2, '0'))

	def print_partial(self, out, partial, locale):
		pass

	def parse(self, bucket, text, position):
		if self.zero_text is not None:
			end = position + len(self.zero_text)
			if text[position:end].casefold() == self.zero_text.casefold():
				bucket.offset = 0
				return end

		if len(text) - position < 3 or text[position] not in '+-':
			return ~position
		negative = text[position] == '-'
		position += 1

		offset = 0
		separated = None
		limits = (23, 59, 59, 999)
		for i, unit in enumerate(self._units):
			if i >= self.max_fields:
				break
			start = position
			if i > 0:
				if position >= len(text):
					break
				c = text[position]
				if i == 3:
					if c not in '.,':
						break
					position += 1
				elif separated is None:
					separated = c == ':'
					if separated:
						position += 1
				elif separated:
					if c != ':':
						break
					position += 1

			width = 3 if i == 3 else 2
			digits = text[position:position+width]
			if len(digits) != width or not digits.isdigit() or not digits.isascii():
				if i == 0:
					return ~position
				position = start
				break

			value = int(digits)
			if value > limits[i]:
				return ~position
			offset += value * unit
			position += width

		bucket.offset = -offset if negative else offset
		return position

class Text(Element):
	"""
	# A field value printed as a word from the locale's table.
	"""

	def __init__(self, type, short=False):
		self.type = type
		self.short = short

	def __repr__(self):
		return 'Text(%s)' %(self.type.name,)

	def _word(self, field, value, locale):
		if self.short:
			return field.as_short_text(value, locale)
		return field.as_text(value, locale)

	def print(self, out, instant, chronology, offset, zone, locale):
		f = self.type.field(chronology)
		out.append(self._word(f, f.get(instant), locale))

	def print_partial(self, out, partial, locale):
		if partial.is_supported(self.type):
			f = self.type.field(partial.chronology)
			out.append(self._word(f, partial.get(self.type), locale))
		else:
			out.append('\ufffd')

	def parse(self, bucket, text, position):
		kind = self.type.field(bucket.chronology).text_kind
		if kind is None:
			return Number(self.type, 1, 9, True).parse(bucket, text, position)

		t = words.table(bucket.locale or None)
		best = None
		for k in (kind, kind + '_short'):
			for i, word in enumerate(t.get(k, ())):
				end = position + len(word)
				if text[position:end].casefold() == word.casefold():
					if best is None or end > best[0]:
						best = (end, i + words.origins[kind])

		if best is None:
			return ~position
		bucket.save(self.type, best[1])
		return best[0]

class Sequence(Element):
	"""
	# Elements printed and parsed in order.
	"""

	def __init__(self, elements):
		flat = []
		for x in elements:
			if isinstance(x, Sequence):
				flat.extend(x.elements)
			else:
				flat.append(x)
		self.elements = tuple(flat)
		self.printable = all(x.printable for x in self.elements)
		self.parsable = all(x.parsable for x in self.elements)

	def __repr__(self):
		return 'Sequence(%r)' %(self.elements,)

	def print(self, out, instant, chronology, offset, zone, locale):
		for x in self.elements:
			x.print(out, instant, chronology, offset, zone, locale)

	def print_partial(self, out, partial, locale):
		for x in self.elements:
			x.print_partial(out, partial, locale)

	def parse(self, bucket, text, position):
		for x in self.elements:
			position = x.parse(bucket, text, position)
			if position < 0:
				break
		return position

class Choice(Element):
	"""
	# Alternative parsers; the alternative consuming the most text is used.
	"""
	printable = False

	def __init__(self, alternatives):
		self.alternatives = tuple(alternatives)

	def __repr__(self):
		return 'Choice(%r)' %(self.alternatives,)

	def parse(self, bucket, text, position):
		original = bucket.save_state()
		best = None
		best_state = None
		failure = position

		for x in self.alternatives:
			bucket.restore_state(original)
			end = x.parse(bucket, text, position)
			if end >= 0:
				if best is None or end > best:
					best = end
					best_state = bucket.save_state()
					if end >= len(text):
						break
			else:
				failure = max(failure, ~end)

		if best is None:
			bucket.restore_state(original)
			return ~failure

		bucket.restore_state(best_state)
		return best

class Optional(Element):
	"""
	# A parser that consumes nothing when its element fails.
	"""
	printable = False

	def __init__(self, element):
		self.element = element

	def __repr__(self):
		return 'Optional(%r)' %(self.element,)

	def parse(self, bucket, text, position):
		state = bucket.save_state()
		end = self.element.parse(bucket, text, position)
		if end < 0:
			bucket.restore_state(state)
			return position
		return end

class TwoDigitYear(Element):
	"""
	# The last two digits of a year; parsed years are resolved to the century of &pivot.

	# Two digits parse to the year within fifty years of &pivot. When &lenient, text with
	# a sign or any other number of digits is taken as the full year.
	"""

	def __init__(self, type, pivot, lenient=False):
		self.type = type
		self.pivot = pivot
		self.lenient = lenient

	def __repr__(self):
		return 'TwoDigitYear(%s, %d)' %(self.type.name, self.pivot)

	def _text(self, year):
		return str(abs(year) % 100).rjust(2, '0')

	def print(self, out, instant, chronology, offset, zone, locale):
		out.append(self._text(self.type.field(chronology).get(instant)))

	def print_partial(self, out, partial, locale):
		if partial.is_supported(self.type):
			out.append(self._text(partial.get(self.type)))
		else:
			out.append('\ufffd' * 2)

	def parse(self, bucket, text, position):
		if self.lenient:
			end = position
			if end < len(text) and text[end] in '-+':
				end += 1
			start = end
			while end < len(text) and _digit(text[end]):
				end += 1
			if end == start:
				return ~position
			if start != position or end - start != 2:
				bucket.save(self.type, int(text[position:end]))
				return end

		digits = text[position:position+2]
		if len(digits) != 2 or not (_digit(digits[0]) and _digit(digits[1])):
			return ~position

		year = int(digits)
		low = self.pivot - 50
		t = floor_mod(low, 100)
		year += low + (100 if year < t else 0) - t
		bucket.save(self.type, year)
		return position + 2

class ZoneName(Element):
	"""
	# The name of the zone, or the abbreviation of its offset when &short. Print only.
	"""
	parsable = False

	def __init__(self, short=False):
		self.short = short

	def __repr__(self):
		return 'ZoneName(%s)' %('short' if self.short else 'long',)

	def print(self, out, instant, chronology, offset, zone, locale):
		if zone is None:
			return
		if self.short and hasattr(zone, 'find'):
			out.append(zone.find(instant - offset).abbreviation)
		else:
			out.append(zone.name)

	def print_partial(self, out, partial, locale):
		pass

class Formatter(object):
	"""
	# Prints and parses text with an &Element.

	# Formatters are immutable; the `with_` methods return modified copies.

	# [ Properties ]
	# /chronology/
		# The chronology overriding the one of printed values and used by parsing.
	# /zone/
		# The zone overriding that of the chronology.
	# /offset_parsed/
		# Whether parsed &.types.DateTime instances keep the offset read from the text.
	"""

	def __init__(self, element, chronology=None, zone=None, offset_parsed=False, locale=None):
		self.element = element
		self.chronology = chronology
		self.zone = zone
		self.offset_parsed = offset_parsed
		self.locale = locale

	def __repr__(self):
		return '<Formatter %r>' %(self.element,)

	def _copy(self, **kw):
		params = dict(
			chronology=self.chronology, zone=self.zone,
			offset_parsed=self.offset_parsed, locale=self.locale,
		)
		params.update(kw)
		return self.__class__(self.element, **params)

	@property
	def printable(self):
		return self.element.printable

	@property
	def parsable(self):
		return self.element.parsable

	def with_chronology(self, chronology):
		return self._copy(chronology=chronology)

	def with_zone(self, zone):
		return self._copy(zone=zone, offset_parsed=False)

	def with_utc(self):
		return self.with_zone(libzone.utc)

	def with_offset_parsed(self):
		return self._copy(zone=None, offset_parsed=True)

	def with_locale(self, locale):
		return self._copy(locale=locale)

	def _select(self, chronology=None):
		c = self.chronology or chronology or chrono.default()
		if self.zone is not None:
			c = c.with_zone(self.zone)
		return c

	def print(self, instant):
		"""
		# The text of the instant or &.types.DateTime, &instant.
		"""
		if not self.element.printable:
			raise NotImplementedError("formatter does not support printing")

		if isinstance(instant, int):
			millis = instant
			c = self._select()
		else:
			millis = instant.millis
			c = self._select(instant.chronology)

		zone = c.zone
		offset = zone.offset_at(millis)
		out = []
		self.element.print(out, safe_add(millis, offset), c.with_utc(), offset, zone, self.locale)
		return ''.join(out)

	def print_partial(self, partial):
		"""
		# The text of the &.types.Partial, &partial; absent fields print as replacement
		# characters.
		"""
		if not self.element.printable:
			raise NotImplementedError("formatter does not support printing")
		out = []
		self.element.print_partial(out, partial, self.locale)
		return ''.join(out)

	def parse_into(self, bucket, text, position=0):
		"""
		# Parse &text from &position saving the fields in &bucket.

		# Returns the position after the parsed text, or its complement on failure.
		"""
		if not self.element.parsable:
			raise NotImplementedError("formatter does not support parsing")
		return self.element.parse(bucket, text, position)

	def _parse(self, text):
		c = self._select()
		bucket = Bucket(c, self.locale)
		position = self.parse_into(bucket, text, 0)
		if position >= 0:
			if position >= len(text):
				return c, bucket, bucket.compute(True)
			position = ~position
		raise core.MalformedInput(text, ~position)

	def parse_millis(self, text):
		"""
		# The instant represented by &text.
		"""
		return self._parse(text)[2]

	def parse_datetime(self, text):
		"""
		# The &.types.DateTime represented by &text.
		"""
		from .types import DateTime

		c, bucket, millis = self._parse(text)
		if self.offset_parsed and bucket.offset is not None:
			c = c.with_zone(libzone.fixed(millis=bucket.offset))
		dt = DateTime(millis, c)
		if self.zone is not None:
			dt = dt.with_zone(self.zone)
		return dt

class Builder(object):
	"""
	# Accumulates elements for a &Formatter.

	# Every method returns the builder so that calls can be chained:

	#!/pl/python
		f = Builder().year(4, 9).literal('-').month_of_year(2).to_formatter()
	"""

	def __init__(self):
		self.elements = []

	def append(self, element):
		"""
		# Append an &Element, or the element of a &Formatter.
		"""
		if isinstance(element, Formatter):
			element = element.element
		self.elements.append(element)
		return self

	def literal(self, text):
		return self.append(Literal(text))

	def decimal(self, type, min_print, max_parse):
		return self.append(Number(type, min_print, max_parse))

	def signed_decimal(self, type, min_print, max_parse):
		return self.append(Number(type, min_print, max_parse, True))

	def fixed_decimal(self, type, digits):
		return self.append(FixedNumber(type, digits))

	def fixed_signed_decimal(self, type, digits):
		return self.append(FixedNumber(type, digits, True))

	def year(self, min_print, max_parse):
		return self.signed_decimal(core.year, min_print, max_parse)

	def weekyear(self, min_print, max_parse):
		return self.signed_decimal(core.weekyear, min_print, max_parse)

	def year_of_era(self, min_print, max_parse):
		return self.decimal(core.year_of_era, min_print, max_parse)

	def month_of_year(self, min_print):
		return self.decimal(core.month_of_year, min_print, 2)

	def day_of_month(self, min_print):
		return self.decimal(core.day_of_month, min_print, 2)

	def day_of_year(self, min_print):
		return self.decimal(core.day_of_year, min_print, 3)

	def week_of_weekyear(self, min_print):
		return self.decimal(core.week_of_weekyear, min_print, 2)

	def day_of_week(self, min_print):
		return self.decimal(core.day_of_week, min_print, 1)

	def hour_of_day(self, min_print):
		return self.decimal(core.hour_of_day, min_print, 2)

	def minute_of_hour(self, min_print):
		return self.decimal(core.minute_of_hour, min_print, 2)

	def second_of_minute(self, min_print):
		return self.decimal(core.second_of_minute, min_print, 2)

	def millis_of_second(self, min_print):
		return self.decimal(core.millis_of_second, min_print, 3)

	def fraction_of_second(self, min_digits, max_digits):
		return self.append(Fraction(core.second_of_day, min_digits, max_digits))

	def fraction_of_minute(self, min_digits, max_digits):
		return self.append(Fraction(core.minute_of_day, min_digits, max_digits))

	def fraction_of_hour(self, min_digits, max_digits):
		return self.append(Fraction(core.hour_of_day, min_digits, max_digits))

	def offset(self, zero_text='Z', separators=True, min_fields=2, max_fields=4):
		return self.append(Offset(zero_text, separators, min_fields, max_fields))

	def two_digit_year(self, pivot, lenient=False):
		return self.append(TwoDigitYear(core.year, pivot, lenient))

	def two_digit_weekyear(self, pivot, lenient=False):
		return self.append(TwoDigitYear(core.weekyear, pivot, lenient))

	def zone_name(self, short=False):
		return self.append(ZoneName(short))

	def pattern(self, text, pivot=None):
		"""
		# Append the elements described by the pattern, &text; see &pattern.
		"""
		_compile(self, text, pivot)
		return self

	def text(self, type):
		return self.append(Text(type))

	def short_text(self, type):
		return self.append(Text(type, short=True))

	def optional(self, element):
		if isinstance(element, (Builder, Formatter)):
			element = element.to_element() if isinstance(element, Builder) else element.element
		return self.append(Optional(element))

	def choice(self, *alternatives):
		return self.append(Choice([
			x.to_element() if isinstance(x, Builder) else getattr(x, 'element', x)
			for x in alternatives
		]))

	def to_element(self):
		if len(self.elements) == 1:
			return self.elements[0]
		return Sequence(self.elements)

	def to_formatter(self):
		if not self.elements:
			raise ValueError("no elements have been appended")
		return Formatter(self.to_element())

# Patterns.

#: Letters printing a decimal field and the number of digits they parse.
_decimals = {
	'd': (core.day_of_month, 2),
	'h': (core.clockhour_of_halfday, 2),
	'H': (core.hour_of_day, 2),
	'k': (core.clockhour_of_day, 2),
	'K': (core.hour_of_halfday, 2),
	'm': (core.minute_of_hour, 2),
	's': (core.second_of_minute, 2),
	'e': (core.day_of_week, 1),
	'D': (core.day_of_year, 3),
	'w': (core.week_of_weekyear, 2),
	'M': (core.month_of_year, 2),
}

_numeric = frozenset('CxyYdhHkKmsSeDw')

def _letter(c):
	return 'A' <= c <= 'Z' or 'a' <= c <= 'z'

def _tokens(text):
	"""
	# The `(position, token, literal)` triples of the pattern, &text.

	# Letter tokens are runs of the same letter. Literal tokens are the text between them
	# with the quotes removed; a doubled quote is a quote.
	"""
	i = 0
	n = len(text)
	while i < n:
		start = i
		if _letter(text[i]):
			c = text[i]
			while i < n and text[i] == c:
				i += 1
			yield (start, text[start:i], False)
			continue

		chars = []
		quoted = None
		while i < n:
			c = text[i]
			if c == "'":
				if text[i+1:i+2] == "'":
					chars.append(c)
					i += 1
				elif quoted is None:
					quoted = i
				else:
					quoted = None
			elif quoted is None and _letter(c):
				break
			else:
				chars.append(c)
			i += 1

		if quoted is not None:
			raise core.MalformedInput(text, quoted, "unterminated quote in pattern")
		if chars:
			yield (start, ''.join(chars), True)

def _is_numeric(token):
	if token is None or token[2]:
		return False
	c = token[1][0]
	return c in _numeric or (c == 'M' and len(token[1]) <= 2)

def _default_pivot():
	return chrono.iso().year.get(int(time.time() * 1000)) - 30

def _compile(b, text, pivot=None):
	if not text:
		raise core.MalformedInput(text, 0, "empty pattern")
	if pivot is None:
		pivot = _default_pivot()

	tokens = list(_tokens(text))
	for index, (position, token, literal) in enumerate(tokens):
		if literal:
			b.literal(token)
			continue

		c = token[0]
		n = len(token)
		following = tokens[index + 1] if index + 1 < len(tokens) else None
		# A number followed by a number parses at most its own width.
		adjacent = _is_numeric(following)

		if c in 'xyY':
			if n == 2:
				if c == 'x':
					b.two_digit_weekyear(pivot, not adjacent)
				else:
					b.two_digit_year(pivot, not adjacent)
				continue

			digits = n if adjacent else 9
			if c == 'x':
				b.weekyear(n, digits)
			elif c == 'y':
				b.year(n, digits)
			else:
				b.year_of_era(n, digits)
		elif c == 'M' and n >= 3:
			if n >= 4:
				b.text(core.month_of_year)
			else:
				b.short_text(core.month_of_year)
		elif c in _decimals:
			type, digits = _decimals[c]
			b.decimal(type, n, max(n, digits))
		elif c == 'C':
			b.decimal(core.century_of_era, n, n)
		elif c == 'S':
			b.fraction_of_second(n, n)
		elif c == 'G':
			b.text(core.era)
		elif c == 'a':
			b.text(core.halfday_of_day)
		elif c == 'E':
			if n >= 4:
				b.text(core.day_of_week)
			else:
				b.short_text(core.day_of_week)
		elif c == 'z':
			b.zone_name(short=n < 4)
		elif c == 'Z':
			if n == 1:
				b.offset('Z', False, 2, 2)
			elif n == 2:
				b.offset('Z', True, 2, 2)
			else:
				b.zone_name()
		else:
			raise core.MalformedInput(text, position, "illegal pattern component: " + token)

#: Compiled patterns by text and pivot year.
patterns = {}

def pattern(text, pivot=None):
	"""
	# The formatter described by the pattern, &text.

	# Runs of a letter select a field and the length of the run its width; other characters
	# are literal text, and letters are quoted with `'`. The year letters print at least the
	# run's width and parse up to nine digits unless the next token is also a number. A run
	# of two prints the last two digits and parses them to the year within fifty years of
	# &pivot, thirty years before the current year by default.

	#!/pl/python
		pattern("yyyy-MM-dd'T'HH:mm:ss.SSSZZ").print(instant) # '2004-02-29T12:30:45.123Z'
		pattern("xxxx-'W'ww-e").print(instant) # '2004-W09-7'

	# [ Letters ]
	# /`G`/
		# Era text.
	# /`C`/
		# Century of era.
	# /`Y`, `y`, `x`/
		# Year of era, year, weekyear.
	# /`M`/
		# Month of year; three letters for the short text, four for the text.
	# /`w`, `e`, `E`/
		# Week of weekyear, day of week, and day of week text; `EEEE` is the full text.
	# /`D`, `d`/
		# Day of year, day of month.
	# /`a`, `K`, `h`, `H`, `k`/
		# Halfday text, hour of halfday, clockhour of halfday, hour of day, clockhour of day.
	# /`m`, `s`, `S`/
		# Minute of hour, second of minute, fraction of second.
	# /`z`, `Z`/
		# Zone abbreviation or, with four letters, name; offset as `-0800` or `-08:00`,
		# and the zone name for three letters. Zone names are print only.

	# Unknown letters and unterminated quotes raise &core.MalformedInput.
	"""
	if pivot is None:
		pivot = _default_pivot()
	key = (text, pivot)
	f = patterns.get(key)
	if f is None:
		f = patterns.setdefault(key, Builder().pattern(text, pivot).to_formatter())
	return f

def rfc1123_formatter():
	"""
	# The formatter for RFC 1123 timestamps; always printed in UTC with English words.
	"""
	b = Builder()
	b.short_text(core.day_of_week).literal(', ')
	b.fixed_decimal(core.day_of_month, 2).literal(' ')
	b.short_text(core.month_of_year).literal(' ')
	b.fixed_signed_decimal(core.year, 4).literal(' ')
	b.fixed_decimal(core.hour_of_day, 2).literal(':')
	b.fixed_decimal(core.minute_of_hour, 2).literal(':')
	b.fixed_decimal(core.second_of_minute, 2).literal(' GMT')
	return b.to_formatter().with_utc().with_locale(words.default_locale)

models = {
	'rfc1123': rfc1123_formatter,
}

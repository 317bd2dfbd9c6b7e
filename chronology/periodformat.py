"""
# Period formatters and parsers.

# A &Builder appends field formatters, literals, and separators. Each field formatter
# prints one unit of a period with an optional prefix and suffix; separators are printed
# between the fields before them and the fields after them depending on which of the two
# groups have values to print.

# Parsing scans left to right. A field whose suffix is absent from the remaining text is
# skipped, so fields may be omitted from the text; numbers that do not end with a
# recognized suffix are reported as &.core.MalformedInput at the offset of the failure.

# [ Zero Printing ]
# /`'rarely_last'`/
	# Zero values are not printed unless the period is zero, in which case the last
	# supported field prints it. The default.
# /`'rarely_first'`/
	# Like `'rarely_last'`, but the first supported field prints the zero.
# /`'if_supported'`/
	# Zero values are printed when the period type supports the field.
# /`'always'`/
	# Every field is printed; parsing requires every field.
# /`'never'`/
	# Zero values are never printed.
"""
from . import core
from . import words
from . import period as libperiod
from .units import truncated_div

field_names = (
	'years', 'months', 'weeks', 'days', 'hours', 'minutes', 'seconds', 'millis',
	'seconds_millis', 'seconds_optional_millis',
)
seconds_millis = 8
seconds_optional_millis = 9
_types = (
	core.years, core.months, core.weeks, core.days,
	core.hours, core.minutes, core.seconds, core.millis,
)
zero_settings = ('rarely_last', 'rarely_first', 'if_supported', 'always', 'never')

def _supported(type, index):
	if index >= seconds_millis:
		return type.is_supported(core.seconds) or type.is_supported(core.millis)
	return type.is_supported(_types[index])

def _padded(value, width):
	if width <= 1:
		return str(value)
	if value < 0:
		return '-' + str(-value).rjust(width, '0')
	return str(value).rjust(width, '0')

class Affix(object):
	"""
	# Text printed before or after a field; &texts holds the forms accepted when parsing.
	"""

	def __init__(self, singular, plural=None):
		self.singular = singular
		self.plural = singular if plural is None else plural
		# Longest first so that "years" is tried before "year".
		self.texts = tuple(sorted({self.singular, self.plural}, key=len, reverse=True))

	def __repr__(self):
		return 'Affix(%r, %r)' %(self.singular, self.plural)

	def text(self, value):
		if value == 1 or value == -1:
			return self.singular
		return self.plural

	def parse(self, text, position):
		for t in self.texts:
			end = position + len(t)
			if text[position:end].casefold() == t.casefold():
				return end
		return ~position

	def scan(self, text, position):
		"""
		# The position of the first occurrence of the affix that is preceded only by
		# characters of a number.
		"""
		for pos in range(position, len(text)):
			for t in self.texts:
				if text[pos:pos+len(t)].casefold() == t.casefold():
					return pos
			if text[pos] not in '0123456789.,+-':
				break
		return ~position

class Literal(object):
	def __init__(self, text):
		self.text = text

	def __repr__(self):
		return 'Literal(%r)' %(self.text,)

	def count(self, period, stop):
		return 0

	def print(self, out, period, locale):
		out.append(self.text)

	def parse(self, period, text, position, type):
		end = position + len(self.text)
		if text[position:end].casefold() == self.text.casefold():
			return end
		return ~position

_empty = Literal('')

class Field(object):
	"""
	# The formatter of a single field of a period.
	"""

	def __init__(self, index, min_digits, zero, max_digits, reject_signed, prefix, siblings):
		self.index = index
		self.min_digits = min_digits
		self.zero = zero
		self.max_digits = max_digits
		self.reject_signed = reject_signed
		self.prefix = prefix
		self.suffix = None
		self.siblings = siblings

	def __repr__(self):
		return 'Field(%s)' %(field_names[self.index],)

	def value(self, period):
		"""
		# The value to print or &None when the field is not printed.
		"""
		type = period.type
		if self.zero != 'always' and not _supported(type, self.index):
			return None

		if self.index >= seconds_millis:
			v = period.get(core.seconds) * 1000 + period.get(core.millis)
		else:
			v = period.get(_types[self.index])

		if v == 0:
			if self.zero == 'never':
				return None
			elif self.zero in ('rarely_last', 'rarely_first'):
				if not period.is_zero():
					return None
				candidates = [x for x in self.siblings if _supported(type, x.index)]
				if self.zero == 'rarely_last':
					candidates.reverse()
				if not candidates or candidates[0] is not self:
					return None
		return v

	def count(self, period, stop):
		if stop <= 0:
			return 0
		if self.zero == 'always' or self.value(period) is not None:
			return 1
		return 0

	def print(self, out, period, locale):
		v = self.value(period)
		if v is None:
			return

		millis_part = self.index >= seconds_millis
		n = truncated_div(v, 1000) if millis_part else v

		if self.prefix is not None:
			out.append(self.prefix.text(n))

		digits = _padded(n, self.min_digits)
		if millis_part:
			dp = abs(v) % 1000
			if self.index == seconds_millis or dp > 0:
				if -1000 < v < 0:
					digits = '-' + digits
				digits += '.' + str(dp).rjust(3, '0')
		out.append(digits)

		if self.suffix is not None:
			out.append(self.suffix.text(n))

	def parse(self, period, text, position, type):
		must = self.zero == 'always'
		if position >= len(text):
			return ~position if must else position

		if self.prefix is not None:
			position = self.prefix.parse(text, position)
			if position < 0:
				return position if must else ~position
			must = True

		suffix_pos = -1
		if self.suffix is not None and not must:
			suffix_pos = self.suffix.scan(text, position)
			if suffix_pos < 0:
				# The field is absent.
				return ~suffix_pos
			must = True

		if not must and not _supported(type, self.index):
			return position

		limit = len(text) if suffix_pos < 0 else suffix_pos
		fractional = self.index >= seconds_millis

		start = position
		negative = False
		if not self.reject_signed and position < limit and text[position] in '-+':
			if position + 1 >= limit or not ('0' <= text[position+1] <= '9'):
				return ~start
			negative = text[position] == '-'
			position += 1

		end = position
		while end < limit and end - position < self.max_digits and '0' <= text[end] <= '9':
			end += 1
		if end == position:
			return ~start
		whole = int(text[position:end])
		if negative:
			whole = -whole

		fraction = None
		if fractional and end < limit and text[end] in '.,':
			fstart = end + 1
			fend = fstart
			while fend < limit and fend - fstart < 9 and '0' <= text[fend] <= '9':
				fend += 1
			fraction = text[fstart:fend]
			end = fend

		if suffix_pos >= 0 and end != suffix_pos:
			# The suffix found belongs to a later field.
			return start

		if not fractional:
			period.set(_types[self.index], whole)
		else:
			millis = int(fraction[:3].ljust(3, '0')) if fraction else 0
			if negative or whole < 0:
				millis = -millis
			period.set(core.seconds, whole)
			period.set(core.millis, millis)

		position = end
		if self.suffix is not None:
			position = self.suffix.parse(text, position)
		return position

class Composite(object):
	def __init__(self, elements):
		self.elements = tuple(elements)

	def __repr__(self):
		return 'Composite(%r)' %(self.elements,)

	def count(self, period, stop):
		total = 0
		for x in self.elements:
			if total >= stop:
				break
			total += x.count(period, stop - total)
		return total

	def print(self, out, period, locale):
		for x in self.elements:
			x.print(out, period, locale)

	def parse(self, period, text, position, type):
		for x in self.elements:
			position = x.parse(period, text, position, type)
			if position < 0:
				break
		return position

class Separator(object):
	"""
	# Text printed between the fields of &before and the fields of &after.

	# When &use_before and &use_after, the separator is printed when both sides print;
	# &final_text is used when only one field follows.
	"""

	def __init__(self, text, final_text, variants, use_before, use_after, before=_empty, after=None):
		self.text = text
		self.final_text = final_text
		self.variants = tuple(variants)
		self.use_before = use_before
		self.use_after = use_after
		self.before = before
		self.after = after

		forms = {text, final_text}
		forms.update(self.variants)
		self.forms = tuple(sorted(forms, key=lambda x: (-len(x), x)))

	def __repr__(self):
		return 'Separator(%r)' %(self.text,)

	def finish(self, before, after):
		return Separator(self.text, self.final_text, self.variants, self.use_before, self.use_after, before, after)

	def count(self, period, stop):
		total = self.before.count(period, stop)
		if total < stop:
			total += self.after.count(period, stop)
		return total

	def print(self, out, period, locale):
		self.before.print(out, period, locale)
		if self.use_before:
			if self.before.count(period, 1) > 0:
				if self.use_after:
					after = self.after.count(period, 2)
					if after > 0:
						out.append(self.text if after > 1 else self.final_text)
				else:
					out.append(self.text)
		elif self.use_after and self.after.count(period, 1) > 0:
			out.append(self.text)
		self.after.print(out, period, locale)

	def parse(self, period, text, position, type):
		start = position
		position = self.before.parse(period, text, position, type)
		if position < 0:
			return position

		consumed = 0
		found = False
		if position > start:
			for form in self.forms:
				if not form or text[position:position+len(form)].casefold() == form.casefold():
					consumed = len(form)
					position += consumed
					found = True
					break

		start = position
		position = self.after.parse(period, text, position, type)
		if position < 0:
			return position
		if found and position == start and consumed > 0:
			# Separator without fields following it.
			return ~start
		if position > start and not found and not self.use_before:
			# Required separator is missing.
			return ~start
		return position

class Formatter(object):
	"""
	# Prints and parses periods.

	# [ Properties ]
	# /parse_type/
		# The &.period.PeriodType of parsed periods; the standard type when &None.
	"""

	def __init__(self, element, parse_type=None, locale=None):
		self.element = element
		self.parse_type = parse_type
		self.locale = locale

	def __repr__(self):
		return '<Formatter %r>' %(self.element,)

	def with_parse_type(self, type):
		return self.__class__(self.element, type, self.locale)

	def with_locale(self, locale):
		return self.__class__(self.element, self.parse_type, locale)

	def print(self, period):
		out = []
		self.element.print(out, period, self.locale)
		return ''.join(out)

	def parse_into(self, period, text, position=0):
		"""
		# Parse &text from &position setting the fields of the &.period.MutablePeriod, &period.

		# Returns the position after the parsed text, or its complement on failure.
		"""
		return self.element.parse(period, text, position, period.type)

	def parse_mutable_period(self, text):
		p = libperiod.MutablePeriod(self.parse_type)
		position = self.parse_into(p, text, 0)
		if position >= 0:
			if position >= len(text):
				return p
			position = ~position
		raise core.MalformedInput(text, ~position)

	def parse_period(self, text):
		return self.parse_mutable_period(text).to_period()

class Builder(object):
	"""
	# Accumulates the elements of a period &Formatter.

	# The settings, such as &minimum_printed_digits, apply to the fields appended after
	# them.
	"""

	def __init__(self):
		self.clear()

	def clear(self):
		self._min_digits = 1
		self._zero = 'rarely_last'
		self._max_digits = 10
		self._reject_signed = False
		self._prefix = None
		self.elements = []
		self.fields = []
		return self

	def minimum_printed_digits(self, digits):
		self._min_digits = digits
		return self

	def maximum_parsed_digits(self, digits):
		self._max_digits = digits
		return self

	def reject_signed_values(self, reject=True):
		self._reject_signed = reject
		return self

	def _print_zero(self, setting):
		self._zero = setting
		return self

	def print_zero_rarely_last(self):
		return self._print_zero('rarely_last')

	def print_zero_rarely_first(self):
		return self._print_zero('rarely_first')

	def print_zero_if_supported(self):
		return self._print_zero('if_supported')

	def print_zero_always(self):
		return self._print_zero('always')

	def print_zero_never(self):
		return self._print_zero('never')

	def literal(self, text):
		self._prefix = None
		self.elements.append(Literal(text))
		return self

	def prefix(self, text, plural=None):
		"""
		# Set the prefix of the next field appended.
		"""
		self._prefix = Affix(text, plural)
		return self

	def suffix(self, text, plural=None):
		"""
		# Set the suffix of the last field appended.
		"""
		if not self.elements or not isinstance(self.elements[-1], Field):
			raise ValueError("no field to apply suffix to")
		f = self.elements[-1]
		if f.suffix is not None:
			raise ValueError("field already has a suffix")
		f.suffix = Affix(text, plural)
		return self

	def _field(self, index):
		f = Field(index, self._min_digits, self._zero, self._max_digits,
			self._reject_signed, self._prefix, self.fields)
		self._prefix = None
		self.elements.append(f)
		self.fields.append(f)
		return self

	def years(self):
		return self._field(0)

	def months(self):
		return self._field(1)

	def weeks(self):
		return self._field(2)

	def days(self):
		return self._field(3)

	def hours(self):
		return self._field(4)

	def minutes(self):
		return self._field(5)

	def seconds(self):
		return self._field(6)

	def millis(self):
		return self._field(7)

	def seconds_with_millis(self):
		return self._field(seconds_millis)

	def seconds_with_optional_millis(self):
		return self._field(seconds_optional_millis)

	def _separator(self, text, final_text, variants, use_before, use_after):
		self._prefix = None
		if self.elements and isinstance(self.elements[-1], Separator):
			raise ValueError("cannot have two adjacent separators")
		self.elements.append(Separator(text, final_text, variants, use_before, use_after))
		return self

	def separator(self, text, final_text=None, variants=()):
		"""
		# A separator printed when fields are printed both before and after it.
		"""
		if final_text is None:
			final_text = text
		return self._separator(text, final_text, variants, True, True)

	def separator_if_fields_after(self, text):
		return self._separator(text, text, (), False, True)

	def separator_if_fields_before(self, text):
		return self._separator(text, text, (), True, False)

	def to_element(self):
		groups = [[]]
		separators = []
		for x in self.elements:
			if isinstance(x, Separator):
				if not groups[-1] and not separators and (x.use_before or not x.use_after):
					# Nothing precedes a separator that requires fields before it.
					continue
				separators.append(x)
				groups.append([])
			else:
				groups[-1].append(x)

		node = Composite(groups[-1])
		for sep, group in zip(reversed(separators), reversed(groups[:-1])):
			node = sep.finish(Composite(group), node)
		return node

	def to_formatter(self):
		return Formatter(self.to_element())

def _standard():
	b = Builder()
	b.literal('P')
	b.years().suffix('Y')
	b.months().suffix('M')
	b.weeks().suffix('W')
	b.days().suffix('D')
	b.separator_if_fields_after('T')
	b.hours().suffix('H')
	b.minutes().suffix('M')
	b.seconds_with_optional_millis().suffix('S')
	return b.to_formatter()

def _alternate(extended, weeks):
	b = Builder()
	b.literal('P')
	b.print_zero_always()
	b.minimum_printed_digits(4).maximum_parsed_digits(4)
	b.years()
	b.minimum_printed_digits(2).maximum_parsed_digits(2)
	if extended:
		b.separator('-')
	if weeks:
		b.prefix('W').weeks()
	else:
		b.months()
	if extended:
		b.separator('-')
	b.days()
	b.separator_if_fields_after('T')
	b.hours()
	if extended:
		b.separator(':')
	b.minutes()
	if extended:
		b.separator(':')
	b.seconds_with_millis()
	return b.to_formatter()

_iso = {
	'standard': _standard(),
	'alternate': _alternate(False, False),
	'alternate_extended': _alternate(True, False),
	'alternate_with_weeks': _alternate(False, True),
	'alternate_extended_with_weeks': _alternate(True, True),
}

def standard():
	"""
	# `PnYnMnWnDTnHnMnS`; zero periods print as `PT0S`.
	"""
	return _iso['standard']

def alternate():
	"""
	# `PyyyymmddThhmmss.SSS`
	"""
	return _iso['alternate']

def alternate_extended():
	"""
	# `Pyyyy-mm-ddThh:mm:ss.SSS`
	"""
	return _iso['alternate_extended']

def alternate_with_weeks():
	"""
	# `PyyyyWwwddThhmmss.SSS`
	"""
	return _iso['alternate_with_weeks']

def alternate_extended_with_weeks():
	"""
	# `Pyyyy-Www-ddThh:mm:ss.SSS`
	"""
	return _iso['alternate_extended_with_weeks']

_words = {}

def words_formatter(locale=None):
	"""
	# The word based formatter of &locale: `1 year, 2 months and 3 days`.
	"""
	table = words.table(locale)
	key = id(table)
	f = _words.get(key)
	if f is not None:
		return f

	units = table['units']
	b = Builder()
	variants = (' ', ',', ',' + table['last_separator'].lstrip(), ',' + table['last_separator'])
	appenders = (
		('years', b.years), ('months', b.months), ('weeks', b.weeks), ('days', b.days),
		('hours', b.hours), ('minutes', b.minutes), ('seconds', b.seconds), ('millis', b.millis),
	)
	for i, (name, append) in enumerate(appenders):
		if i > 0:
			b.separator(table['separator'], table['last_separator'], variants)
		singular, plural = units[name]
		append().suffix(' ' + singular, ' ' + plural)

	f = b.to_formatter().with_locale(locale)
	return _words.setdefault(key, f)

def words_text(period, locale=None):
	return words_formatter(locale).print(period)

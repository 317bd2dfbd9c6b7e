"""
# ISO-8601 formatters and parsers.

# The layouts are built once from shared elements and exposed as functions returning the
# shared &.format.Formatter instances. Extended layouts separate the fields with `-` and
# `:` and basic layouts omit the separators. Printed offsets are `Z` for UTC and `±HH:mm`
# otherwise.

# &for_fields selects the layout for an arbitrary set of fields:

#!/pl/python
	from chronology import core, isoformat
	f = isoformat.for_fields({core.year, core.month_of_year, core.day_of_month}, strict=True)
	f.print(instant) # '2004-02-25'

# [ Elements ]
# /ye/
	# Signed year printed with at least four digits.
# /we/
	# Signed weekyear printed with at least four digits.
# /ze/
	# Extended offset; `Z` or `±HH:mm`.
"""
from . import core
from .format import Builder, Formatter

def _b():
	return Builder()

ye = _b().year(4, 9).to_element()
we = _b().weekyear(4, 9).to_element()
mye = _b().literal('-').month_of_year(2).to_element()
dme = _b().literal('-').day_of_month(2).to_element()
wwe = _b().literal('-W').week_of_weekyear(2).to_element()
dwe = _b().literal('-').day_of_week(1).to_element()
dye = _b().literal('-').day_of_year(3).to_element()
hde = _b().hour_of_day(2).to_element()
mhe = _b().literal(':').minute_of_hour(2).to_element()
sme = _b().literal(':').second_of_minute(2).to_element()
fse = _b().literal('.').fraction_of_second(3, 9).to_element()
ze = _b().offset('Z', True, 2, 4).to_element()
lte = _b().literal('T').to_element()

# Basic elements.
bye = _b().year(4, 4).to_element()
bwe = _b().weekyear(4, 4).to_element()
bmye = _b().fixed_decimal(core.month_of_year, 2).to_element()
bdme = _b().fixed_decimal(core.day_of_month, 2).to_element()
bdye = _b().fixed_decimal(core.day_of_year, 3).to_element()
bwwe = _b().literal('W').fixed_decimal(core.week_of_weekyear, 2).to_element()
bdwe = _b().fixed_decimal(core.day_of_week, 1).to_element()
bhde = _b().fixed_decimal(core.hour_of_day, 2).to_element()
bmhe = _b().fixed_decimal(core.minute_of_hour, 2).to_element()
bsme = _b().fixed_decimal(core.second_of_minute, 2).to_element()
bze = _b().offset('Z', False, 2, 2).to_element()

def _f(*elements):
	b = _b()
	for x in elements:
		b.append(x)
	return b.to_formatter()

formatters = {}

def _layout(name, *elements):
	f = _f(*elements)
	formatters[name] = f
	return f

# Extended layouts.
_date = _layout('date', ye, mye, dme)
_time = _layout('time', hde, mhe, sme, fse, ze)
_time_no_millis = _layout('time_no_millis', hde, mhe, sme, ze)
_t_time = _layout('t_time', lte, _time)
_t_time_no_millis = _layout('t_time_no_millis', lte, _time_no_millis)
_date_time = _layout('date_time', _date, _t_time)
_date_time_no_millis = _layout('date_time_no_millis', _date, _t_time_no_millis)

_ordinal_date = _layout('ordinal_date', ye, dye)
_ordinal_date_time = _layout('ordinal_date_time', _ordinal_date, _t_time)
_ordinal_date_time_no_millis = _layout('ordinal_date_time_no_millis', _ordinal_date, _t_time_no_millis)

_week_date = _layout('week_date', we, wwe, dwe)
_week_date_time = _layout('week_date_time', _week_date, _t_time)
_week_date_time_no_millis = _layout('week_date_time_no_millis', _week_date, _t_time_no_millis)

# Basic layouts.
_basic_date = _layout('basic_date', bye, bmye, bdme)
_basic_time = _layout('basic_time', bhde, bmhe, bsme, _b().literal('.').fraction_of_second(3, 9).to_element(), bze)
_basic_time_no_millis = _layout('basic_time_no_millis', bhde, bmhe, bsme, bze)
_basic_t_time = _layout('basic_t_time', lte, _basic_time)
_basic_t_time_no_millis = _layout('basic_t_time_no_millis', lte, _basic_time_no_millis)
_basic_date_time = _layout('basic_date_time', _basic_date, _basic_t_time)
_basic_date_time_no_millis = _layout('basic_date_time_no_millis', _basic_date, _basic_t_time_no_millis)

_basic_ordinal_date = _layout('basic_ordinal_date', bye, bdye)
_basic_ordinal_date_time = _layout('basic_ordinal_date_time', _basic_ordinal_date, _basic_t_time)
_basic_ordinal_date_time_no_millis = _layout('basic_ordinal_date_time_no_millis', _basic_ordinal_date, _basic_t_time_no_millis)

_basic_week_date = _layout('basic_week_date', bwe, bwwe, bdwe)
_basic_week_date_time = _layout('basic_week_date_time', _basic_week_date, _basic_t_time)
_basic_week_date_time_no_millis = _layout('basic_week_date_time_no_millis', _basic_week_date, _basic_t_time_no_millis)

# Reduced precision layouts.
_year = _layout('year', ye)
_year_month = _layout('year_month', ye, mye)
_year_month_day = _layout('year_month_day', ye, mye, dme)
_weekyear = _layout('weekyear', we)
_weekyear_week = _layout('weekyear_week', we, wwe)
_weekyear_week_day = _layout('weekyear_week_day', we, wwe, dwe)

_hour = _layout('hour', hde)
_hour_minute = _layout('hour_minute', hde, mhe)
_hour_minute_second = _layout('hour_minute_second', hde, mhe, sme)
_hour_minute_second_millis = _layout('hour_minute_second_millis',
	hde, mhe, sme, _b().literal('.').fraction_of_second(3, 3).to_element())
_hour_minute_second_fraction = _layout('hour_minute_second_fraction', hde, mhe, sme, fse)

_date_hour = _layout('date_hour', _date, lte, _hour)
_date_hour_minute = _layout('date_hour_minute', _date, lte, _hour_minute)
_date_hour_minute_second = _layout('date_hour_minute_second', _date, lte, _hour_minute_second)
_date_hour_minute_second_millis = _layout('date_hour_minute_second_millis', _date, lte, _hour_minute_second_millis)
_date_hour_minute_second_fraction = _layout('date_hour_minute_second_fraction', _date, lte, _hour_minute_second_fraction)

def date(): return _date
def time(): return _time
def time_no_millis(): return _time_no_millis
def t_time(): return _t_time
def t_time_no_millis(): return _t_time_no_millis
def date_time(): return _date_time
def date_time_no_millis(): return _date_time_no_millis
def ordinal_date(): return _ordinal_date
def ordinal_date_time(): return _ordinal_date_time
def ordinal_date_time_no_millis(): return _ordinal_date_time_no_millis
def week_date(): return _week_date
def week_date_time(): return _week_date_time
def week_date_time_no_millis(): return _week_date_time_no_millis
def basic_date(): return _basic_date
def basic_time(): return _basic_time
def basic_time_no_millis(): return _basic_time_no_millis
def basic_t_time(): return _basic_t_time
def basic_t_time_no_millis(): return _basic_t_time_no_millis
def basic_date_time(): return _basic_date_time
def basic_date_time_no_millis(): return _basic_date_time_no_millis
def basic_ordinal_date(): return _basic_ordinal_date
def basic_ordinal_date_time(): return _basic_ordinal_date_time
def basic_ordinal_date_time_no_millis(): return _basic_ordinal_date_time_no_millis
def basic_week_date(): return _basic_week_date
def basic_week_date_time(): return _basic_week_date_time
def basic_week_date_time_no_millis(): return _basic_week_date_time_no_millis
def year(): return _year
def year_month(): return _year_month
def year_month_day(): return _year_month_day
def weekyear(): return _weekyear
def weekyear_week(): return _weekyear_week
def weekyear_week_day(): return _weekyear_week_day
def hour(): return _hour
def hour_minute(): return _hour_minute
def hour_minute_second(): return _hour_minute_second
def hour_minute_second_millis(): return _hour_minute_second_millis
def hour_minute_second_fraction(): return _hour_minute_second_fraction
def date_hour(): return _date_hour
def date_hour_minute(): return _date_hour_minute
def date_hour_minute_second(): return _date_hour_minute_second
def date_hour_minute_second_millis(): return _date_hour_minute_second_millis
def date_hour_minute_second_fraction(): return _date_hour_minute_second_fraction

# Parsers.

def _decimal_point():
	return _b().choice(_b().literal('.'), _b().literal(',')).to_element()

_date_element = _b().choice(
	_b().append(ye).optional(_b().append(mye).optional(dme)),
	_b().append(we).append(wwe).optional(dwe),
	_b().append(ye).append(dye),
).to_element()

_time_element = _b().append(hde).optional(
	_b().choice(
		_b().append(mhe).optional(_b().choice(
			_b().append(sme).optional(_b().append(_decimal_point()).fraction_of_second(1, 9)),
			_b().append(_decimal_point()).fraction_of_minute(1, 9),
		)),
		_b().append(_decimal_point()).fraction_of_hour(1, 9),
	)
).to_element()

_offset_element = ze

parsers = {
	'date_element_parser': _f(_date_element),
	'time_element_parser': _f(_time_element),
	'date_parser': _f(_date_element, _b().optional(_b().append(lte).append(_offset_element)).to_element()),
	'local_date_parser': _f(_date_element),
	'time_parser': _f(
		_b().optional(lte).to_element(),
		_time_element,
		_b().optional(_offset_element).to_element(),
	),
	'local_time_parser': _f(_b().optional(lte).to_element(), _time_element),
}

_date_optional_time = _b().append(_date_element).optional(
	_b().append(lte).optional(_time_element).optional(_offset_element)
).to_element()

parsers['date_optional_time_parser'] = _f(_date_optional_time)
parsers['local_date_optional_time_parser'] = _f(
	_b().append(_date_element).optional(_b().append(lte).append(_time_element)).to_element()
)
parsers['date_time_parser'] = _f(_b().choice(
	_b().append(lte).append(_time_element).optional(_offset_element),
	_date_optional_time,
).to_element())

def date_element_parser(): return parsers['date_element_parser']
def time_element_parser(): return parsers['time_element_parser']
def date_parser(): return parsers['date_parser']
def local_date_parser(): return parsers['local_date_parser']
def time_parser(): return parsers['time_parser']
def local_time_parser(): return parsers['local_time_parser']
def date_time_parser(): return parsers['date_time_parser']
def date_optional_time_parser(): return parsers['date_optional_time_parser']
def local_date_optional_time_parser(): return parsers['local_date_optional_time_parser']

def formatter(name):
	"""
	# The named layout.
	"""
	return formatters[name]

def parser(name):
	"""
	# The named parser; layouts are also accepted.
	"""
	try:
		return parsers[name]
	except KeyError:
		return formatters[name]

# Field selection.

def _names(fields):
	return '[' + ', '.join(sorted(x.name for x in fields)) + ']'

def _not_strict(fields, strict):
	if strict:
		raise core.NoMatchingFormat("No valid ISO8601 format for fields: " + _names(fields))

def _separator(b, extended):
	if extended:
		b.literal('-')

def _remove(fields, type):
	if type in fields:
		fields.remove(type)
		return True
	return False

def _date_by_month(b, fields, extended, strict):
	reduced = False
	if _remove(fields, core.year):
		b.append(ye)
		if _remove(fields, core.month_of_year):
			if _remove(fields, core.day_of_month):
				# YYYY-MM-DD/YYYYMMDD
				_separator(b, extended)
				b.month_of_year(2)
				_separator(b, extended)
				b.day_of_month(2)
			else:
				# YYYY-MM
				b.literal('-').month_of_year(2)
				reduced = True
		else:
			if _remove(fields, core.day_of_month):
				# YYYY--DD
				_not_strict(fields, strict)
				b.literal('--').day_of_month(2)
			else:
				reduced = True
	elif _remove(fields, core.month_of_year):
		b.literal('--').month_of_year(2)
		if _remove(fields, core.day_of_month):
			# --MM-DD/--MMDD
			_separator(b, extended)
			b.day_of_month(2)
		else:
			reduced = True
	elif _remove(fields, core.day_of_month):
		# ---DD
		b.literal('---').day_of_month(2)
	return reduced

def _date_by_ordinal(b, fields, extended, strict):
	reduced = False
	if _remove(fields, core.year):
		b.append(ye)
		if _remove(fields, core.day_of_year):
			# YYYY-DDD/YYYYDDD
			_separator(b, extended)
			b.day_of_year(3)
		else:
			reduced = True
	elif _remove(fields, core.day_of_year):
		# -DDD
		b.literal('-').day_of_year(3)
	return reduced

def _date_by_week(b, fields, extended, strict):
	reduced = False
	if _remove(fields, core.weekyear):
		b.append(we)
		if _remove(fields, core.week_of_weekyear):
			_separator(b, extended)
			b.literal('W').week_of_weekyear(2)
			if _remove(fields, core.day_of_week):
				# YYYY-WWW-D/YYYYWWWD
				_separator(b, extended)
				b.day_of_week(1)
			else:
				reduced = True
		else:
			if _remove(fields, core.day_of_week):
				# YYYY-W-D
				_not_strict(fields, strict)
				_separator(b, extended)
				b.literal('W-').day_of_week(1)
			else:
				reduced = True
	elif _remove(fields, core.week_of_weekyear):
		b.literal('-W').week_of_weekyear(2)
		if _remove(fields, core.day_of_week):
			# -WWW-D/-WWWD
			_separator(b, extended)
			b.day_of_week(1)
		else:
			reduced = True
	elif _remove(fields, core.day_of_week):
		# -W-D
		b.literal('-W-').day_of_week(1)
	return reduced

def _time_part(b, fields, extended, strict, reduced, date_present):
	hour = _remove(fields, core.hour_of_day)
	minute = _remove(fields, core.minute_of_hour)
	second = _remove(fields, core.second_of_minute)
	milli = _remove(fields, core.millis_of_second)
	if not (hour or minute or second or milli):
		return

	if strict and reduced:
		raise core.NoMatchingFormat(
			"No valid ISO8601 format for fields because Date was reduced precision: " + _names(fields))
	if date_present:
		b.literal('T')

	if (hour and minute and second) or (hour and not second and not milli):
		# HMSm, HMS, HM, H
		pass
	else:
		if strict and date_present:
			raise core.NoMatchingFormat(
				"No valid ISO8601 format for fields because Time was truncated: " + _names(fields))
		if not hour and ((minute and second) or (minute and not milli) or second):
			# MSm, MS, M, Sm, S
			pass
		elif strict:
			raise core.NoMatchingFormat("No valid ISO8601 format for fields: " + _names(fields))

	if hour:
		b.hour_of_day(2)
	elif minute or second or milli:
		b.literal('-')
	if extended and hour and minute:
		b.literal(':')
	if minute:
		b.minute_of_hour(2)
	elif second or milli:
		b.literal('-')
	if extended and minute and second:
		b.literal(':')
	if second:
		b.second_of_minute(2)
	elif milli:
		b.literal('-')
	if milli:
		b.literal('.').millis_of_second(3)

def for_fields(fields, extended=True, strict=False):
	"""
	# The formatter for the set of &.core.DateTimeFieldType instances, &fields.

	# The date part is selected by the first field present in the order: month of year,
	# day of year, week of weekyear, day of month, day of week, year, weekyear. The fields
	# used by the formatter are removed from &fields when it is a mutable set.

	# When &strict, combinations that ISO-8601 does not define raise &core.NoMatchingFormat,
	# including reduced precision dates combined with time fields.
	"""
	if not fields:
		raise core.NoMatchingFormat("The fields must not be empty")

	working = set(fields)
	size = len(working)
	reduced = False
	b = _b()

	if core.month_of_year in working:
		reduced = _date_by_month(b, working, extended, strict)
	elif core.day_of_year in working:
		reduced = _date_by_ordinal(b, working, extended, strict)
	elif core.week_of_weekyear in working:
		reduced = _date_by_week(b, working, extended, strict)
	elif core.day_of_month in working:
		reduced = _date_by_month(b, working, extended, strict)
	elif core.day_of_week in working:
		reduced = _date_by_week(b, working, extended, strict)
	elif _remove(working, core.year):
		b.append(ye)
		reduced = True
	elif _remove(working, core.weekyear):
		b.append(we)
		reduced = True

	date_present = len(working) < size
	_time_part(b, working, extended, strict, reduced, date_present)

	if not b.elements:
		raise core.NoMatchingFormat("No valid format for fields: " + _names(fields))

	if isinstance(fields, set):
		fields.intersection_update(working)
	return b.to_formatter()

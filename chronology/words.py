"""
# Locale keyed word tables used when printing and parsing text.

# A table is a dictionary with the keys:

# /`months`/
	# Twelve month names, January first.
# /`months_short`/
	# Twelve month abbreviations.
# /`weekdays`/
	# Seven weekday names, Monday first.
# /`weekdays_short`/
	# Seven weekday abbreviations.
# /`eras`/
	# The names of era zero and era one.
# /`halfdays`/
	# The names of the morning and afternoon halfdays.
# /`eras_short`/, /`halfdays_short`/
	# Abbreviated forms; the English table repeats the full names.
# /`units`/
	# Mapping of duration field type names to `(singular, plural)` pairs.
# /`separator`/
	# Placed between all but the last two items of a list.
# /`last_separator`/
	# Placed between the last two items of a list.
"""
from . import core
from . import gregorian
from . import week

def _title(names):
	return tuple(x.title() for x in names)

english = {
	'months': _title(gregorian.month_names),
	'months_short': _title(gregorian.month_abbreviations),
	'weekdays': _title(week.weekday_names),
	'weekdays_short': _title(week.weekday_abbreviations),
	'eras': ('BC', 'AD'),
	'eras_short': ('BC', 'AD'),
	'halfdays': ('AM', 'PM'),
	'halfdays_short': ('AM', 'PM'),
	'units': {
		'years': ('year', 'years'),
		'months': ('month', 'months'),
		'weeks': ('week', 'weeks'),
		'days': ('day', 'days'),
		'hours': ('hour', 'hours'),
		'minutes': ('minute', 'minutes'),
		'seconds': ('second', 'seconds'),
		'millis': ('millisecond', 'milliseconds'),
	},
	'separator': ', ',
	'last_separator': ' and ',
}

default_locale = 'en'
tables = {default_locale: english}

#: The value of the first entry of each list.
origins = {
	'months': 1,
	'months_short': 1,
	'weekdays': 1,
	'weekdays_short': 1,
	'eras': 0,
	'eras_short': 0,
	'halfdays': 0,
	'halfdays_short': 0,
}

def register(locale, table):
	"""
	# Add or replace the &table for &locale. Missing keys are taken from the default table.
	"""
	merged = dict(tables[default_locale])
	merged.update(table)
	tables[locale] = merged

def table(locale=None):
	if locale is None:
		return tables[default_locale]
	try:
		return tables[locale]
	except KeyError:
		# Language fallback: 'en_GB' to 'en'.
		return tables.get(locale.split('_')[0], tables[default_locale])

def text(kind, value, locale=None):
	"""
	# The word of the &kind list for &value.

	# Values outside the list raise &core.IllegalFieldValue.
	"""
	words = table(locale)[kind]
	first = origins[kind]
	if value < first or value >= first + len(words):
		raise core.IllegalFieldValue(kind, value, first, first + len(words) - 1)
	return words[value - first]

def value(kind, text, locale=None):
	"""
	# The value of the word, &text, in the &kind list and its short form; &None when the
	# word is not present.
	"""
	t = table(locale)
	folded = text.casefold()
	for k in (kind, kind + '_short'):
		if k not in t:
			continue
		for i, word in enumerate(t[k]):
			if word.casefold() == folded:
				return i + origins[kind]
	return None

def unit(name, count, locale=None):
	singular, plural = table(locale)['units'][name]
	return singular if count == 1 or count == -1 else plural

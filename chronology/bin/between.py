"""
# Print the period between two ISO-8601 instants.

# The standard ISO-8601 period is printed on the first line and the English words
# on the second. Malformed instants are reported to standard error.
"""
import sys

from .. import core
from .. import isoformat
from .. import periodformat
from ..period import Period, PeriodType

types = {
	'standard': PeriodType.standard,
	'days': PeriodType.days,
	'time': PeriodType.time,
	'day_time': PeriodType.day_time,
	'year_day_time': PeriodType.year_day_time,
	'year_week_day_time': PeriodType.year_week_day_time,
	'year_month_day_time': PeriodType.year_month_day_time,
}

def main(start:str, end:str, type='standard', file=None):
	"""
	# [ Parameters ]

	# /start/
		# The ISO-8601 instant the period begins at.
	# /end/
		# The ISO-8601 instant the period ends at.
	# /type/
		# The name of the period type to divide the period into; `'standard'` by default.
	"""
	parser = isoformat.date_time_parser().with_offset_parsed()
	s = parser.parse_datetime(start)
	e = parser.parse_datetime(end)

	p = Period.between(s.millis, e.millis, types[type](), s.chronology.with_utc())
	print(str(p), file=file)
	print(periodformat.words_text(p), file=file)
	return p

if __name__ == '__main__':
	try:
		main(*sys.argv[1:])
	except core.Error as err:
		sys.stderr.write(str(err) + "\n")
		sys.exit(1)
	except KeyError as err:
		sys.stderr.write("unknown period type: %s\n" %(err.args[0],))
		sys.exit(2)

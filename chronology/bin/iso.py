"""
# Print an instant using every named ISO-8601 layout.

# The instant is given as ISO-8601 text or the string `'now'`; with no arguments,
# the current time is printed.
"""
import sys
import time

from .. import core
from .. import isoformat
from .. import zone

def instant(text, now=time.time):
	if text == 'now':
		return int(now() * 1000)
	return isoformat.date_time_parser().parse_millis(text)

def main(text='now', zone_offset=None, file=None):
	"""
	# [ Parameters ]

	# /text/
		# The instant to print; `'now'` for the system clock.
	# /zone_offset/
		# Hours from UTC to print the local time in.
	"""
	i = instant(text)
	z = zone.utc if zone_offset is None else zone.fixed(int(zone_offset))

	width = max(map(len, isoformat.formatters))
	for name, f in sorted(isoformat.formatters.items()):
		print(name.ljust(width), f.with_zone(z).print(i), file=file)

if __name__ == '__main__':
	try:
		main(*sys.argv[1:])
	except core.Error as err:
		sys.stderr.write(str(err) + "\n")
		sys.exit(1)

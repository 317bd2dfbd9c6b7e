"""
"""
import itertools
from .. import gregorian
from ..constants import epoch_days
from . import reference

def test_year_is_leap(test):
	# hand picked years
	test/True == gregorian.year_is_leap(2000)
	test/True == gregorian.year_is_leap(2004)
	test/False == gregorian.year_is_leap(2001)
	test/False == gregorian.year_is_leap(1999)
	test/True == gregorian.year_is_leap(1996)
	test/True == gregorian.year_is_leap(1600)
	test/True == gregorian.year_is_leap(1200)
	test/False == gregorian.year_is_leap(1900)
	test/False == gregorian.year_is_leap(1800)
	test/False == gregorian.year_is_leap(1700)
	test/True == gregorian.year_is_leap(1704)
	test/True == gregorian.year_is_leap(0)
	test/True == gregorian.year_is_leap(-4)
	test/False == gregorian.year_is_leap(-100)
	for x, i in zip(itertools.cycle((True, False, False, False)), range(1600, 1700)):
		test/x == gregorian.year_is_leap(i)

def test_days_in_month(test):
	test/gregorian.days_in_month(2000, 2) == 29
	test/gregorian.days_in_month(1900, 2) == 28
	test/gregorian.days_in_month(2001, 12) == 31
	test/gregorian.days_in_month(2001, 4) == 30

def test_epochs(test):
	test/gregorian.days_from_date((1, 1, 1)) == gregorian.epoch
	test/gregorian.date_from_days(1) == (1, 1, 1)
	test/gregorian.date_from_days(0) == (0, 12, 31)
	test/gregorian.days_from_date((1970, 1, 1)) == epoch_days

def test_year_from_days_cycle_ends(test):
	# The last day of the four and four hundred year spans.
	for year in (1996, 2000, 2400, -4, -400, 0):
		days = gregorian.days_from_date((year, 12, 31))
		test/gregorian.year_from_days(days) == year
		test/gregorian.year_from_days(days + 1) == year + 1

def test_scan_days(test):
	"""
	# Shows date_from_days advancing one day at a time across year zero.
	"""
	days = gregorian.days_from_date((-2, 1, 1))
	last = gregorian.date_from_days(days)
	test/last == (-2, 1, 1)
	for x in range(days + 1, gregorian.days_from_date((3, 1, 1)) + 1):
		current = gregorian.date_from_days(x)
		y, m, d = last
		if d < gregorian.days_in_month(y, m):
			test/current == (y, m, d + 1)
		elif m < 12:
			test/current == (y, m + 1, 1)
		else:
			test/current == (y + 1, 1, 1)
		last = current

def test_reference_cycle(test):
	"""
	# Compare the closed form against the walk of the leap cycles.
	"""
	samples = itertools.chain(
		range(-1500, 1500),
		range(-800000, 800000, 997),
		range(epoch_days - 400, epoch_days + 400),
	)
	for days in samples:
		date = reference.gregorian_date(days)
		test/gregorian.date_from_days(days) == date
		test/gregorian.days_from_date(date) == days
		test/reference.gregorian_days(date) == days

if __name__ == '__main__':
	import sys
	from . import harness
	harness.execute(sys.modules[__name__])

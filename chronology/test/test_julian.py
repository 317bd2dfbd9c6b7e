import itertools
from .. import core
from .. import julian
from .. import gregorian
from . import reference

def test_year_is_leap(test):
	test/True == julian.year_is_leap(4)
	test/True == julian.year_is_leap(1900)
	test/True == julian.year_is_leap(1500)
	test/False == julian.year_is_leap(1)
	test/False == julian.year_is_leap(1901)
	# No year zero: 1 BC, 5 BC, ... are leap.
	test/True == julian.year_is_leap(-1)
	test/True == julian.year_is_leap(-5)
	test/False == julian.year_is_leap(-4)

def test_epoch(test):
	test/julian.days_from_date((1, 1, 1)) == julian.epoch
	test/julian.date_from_days(julian.epoch) == (1, 1, 1)
	test/gregorian.date_from_days(julian.epoch) == (0, 12, 30)

def test_no_year_zero(test):
	with test/core.IllegalFieldValue:
		julian.days_from_date((0, 1, 1))

	last = julian.days_from_date((-1, 12, 31))
	test/julian.date_from_days(last) == (-1, 12, 31)
	test/julian.date_from_days(last + 1) == (1, 1, 1)

def test_gregorian_reform(test):
	# Thursday, 4 October 1582 (Julian) was followed by Friday, 15 October 1582 (Gregorian).
	j = julian.days_from_date((1582, 10, 4))
	g = gregorian.days_from_date((1582, 10, 15))
	test/(j + 1) == g
	test/julian.days_from_date((1582, 10, 5)) == g

def test_reference_cycle(test):
	samples = itertools.chain(
		range(-3000, 3000),
		range(-600000, 600000, 991),
	)
	for days in samples:
		y, m, d = reference.julian_date(days)
		if y <= 0:
			y -= 1
		test/julian.date_from_days(days) == (y, m, d)
		test/julian.days_from_date((y, m, d)) == days

if __name__ == '__main__':
	import sys
	from . import harness
	harness.execute(sys.modules[__name__])

from .. import core
from .. import calendar as module
from .. import gregorian
from .. import julian
from ..constants import default_cutover

iso = module.create('iso')
gj = module.create('gj')
jul = module.create('julian')

def test_create(test):
	test/iso == ('iso', None, 4)
	test/gj.cutover == default_cutover
	test/gj.cutover_days == gregorian.days_from_date((1582, 10, 15))
	test/module.create('julian', cutover=0).cutover == None
	test/module.create('gregorian', minimum_days=1).minimum_days == 1

	with test/ValueError:
		module.create('coptic')
	with test/core.IllegalFieldValue:
		module.create('iso', minimum_days=0)
	with test/core.IllegalFieldValue:
		module.create('iso', minimum_days=8)

def test_millis_days(test):
	test/module.days_from_millis(0) == 719163
	test/module.days_from_millis(-1) == 719162
	test/module.millis_from_days(719164) == 86400000
	test/module.millis_of_day(-1) == 86399999

def test_year_numbering(test):
	test/module.has_year_zero(iso) == True
	test/module.has_year_zero(gj) == False
	test/module.external_year(iso, 0) == 0
	test/module.external_year(jul, 0) == -1
	test/module.external_year(jul, -1) == -2
	test/module.internal_year(jul, -1) == 0
	test/module.internal_year(jul, 1) == 1
	test/module.internal_year(iso, -1) == -1
	with test/core.IllegalFieldValue:
		module.internal_year(gj, 0)

def test_round_trip(test):
	"""
	# Every date of a span of years survives the conversion to days and back.
	"""
	for cal in (iso, gj, jul):
		for year in (-5, -1, 0, 1, 4, 1582, 1600, 1900, 2000, 2003):
			for month in range(1, 13):
				for day in range(1, module.days_in_month(cal, year, month) + 1):
					try:
						days = module.days_from_date(cal, year, month, day)
					except core.IllegalFieldValue:
						# GJ cutover gap
						test/cal.kind == 'gj'
						test/(year, month) == (1582, 10)
						continue
					test/module.date_from_days(cal, days) == (year, month, day)

def test_gj_continuity(test):
	"""
	# Day numbers are continuous across the cutover; no day is lost or repeated.
	"""
	last_julian = module.days_from_date(gj, 1582, 10, 4)
	first_gregorian = module.days_from_date(gj, 1582, 10, 15)
	test/(last_julian + 1) == first_gregorian
	test/module.date_from_days(gj, first_gregorian - 1) == (1582, 10, 4)
	test/module.date_from_days(gj, first_gregorian) == (1582, 10, 15)

	start = first_gregorian - 100
	previous = module.date_from_days(gj, start)
	for days in range(start + 1, first_gregorian + 100):
		current = module.date_from_days(gj, days)
		test/module.days_from_date(gj, *current) == days
		test/current > previous
		previous = current

def test_gj_gap(test):
	with test/core.IllegalFieldValue as exc:
		module.days_from_date(gj, 1582, 10, 10)
	test/exc().value == 10

	# Lenient reads the gap as Julian; Julian 1582-10-10 is Gregorian 1582-10-20.
	days = module.days_from_date(gj, 1582, 10, 10, lenient=True)
	test/days == gregorian.days_from_date((1582, 10, 20))
	test/module.date_from_days(gj, days) == (1582, 10, 20)

def test_gj_years(test):
	test/module.year_is_leap(gj, 1500) == True
	test/module.year_is_leap(gj, 1700) == False
	test/module.year_is_leap(gj, 1600) == True
	test/module.year_is_leap(jul, 1700) == True
	test/module.days_in_year(gj, 1582) == 355
	test/module.days_in_year(gj, 1583) == 365
	test/module.days_in_year(jul, 1900) == 366
	test/module.days_in_year(iso, 1900) == 365

def test_julian_dates(test):
	test/module.days_from_date(jul, 0, 1, 1) == julian.days_from_date((-1, 1, 1))
	test/module.date_from_days(jul, julian.epoch) == (1, 1, 1)
	test/module.date_from_days(jul, julian.epoch - 1) == (0, 12, 31)

def test_week_dates(test):
	def week_date(*date):
		return module.week_date_from_days(iso, gregorian.days_from_date(date))

	test/week_date(2024, 1, 1) == (2024, 1, 1)
	test/week_date(2023, 1, 1) == (2022, 52, 7)
	test/week_date(2020, 12, 31) == (2020, 53, 4)
	test/week_date(2021, 1, 3) == (2020, 53, 7)
	test/week_date(2021, 1, 4) == (2021, 1, 1)
	test/week_date(2008, 12, 29) == (2009, 1, 1)

	test/module.weeks_in_weekyear(iso, 2020) == 53
	test/module.weeks_in_weekyear(iso, 2021) == 52
	test/module.weeks_in_weekyear(iso, 2015) == 53

	test/module.days_from_week_date(iso, 2022, 52, 7) == gregorian.days_from_date((2023, 1, 1))

def test_minimum_days(test):
	us = module.create('gregorian', minimum_days=1)
	# Week one holds January first.
	days = gregorian.days_from_date((2023, 1, 1))
	test/module.week_date_from_days(us, days) == (2023, 1, 7)

def test_year_bounds(test):
	lower, upper = module.year_bounds(iso)
	test/lower == -292275054
	test/upper == 292278993

if __name__ == '__main__':
	import sys
	from . import harness
	harness.execute(sys.modules[__name__])

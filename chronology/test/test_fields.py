from .. import core
from .. import chrono
from .. import words

iso = chrono.iso()
gj = chrono.gj()
jul = chrono.julian()

def at(*args, chronology=iso):
	return chronology.date_time_millis(*args)

def test_day_of_week(test):
	test/iso.day_of_week.get(at(2004, 2, 29)) == 7
	test/iso.day_of_week.get(at(1970, 1, 1)) == 4
	test/iso.day_of_week.get(at(1969, 12, 31, 23, 59)) == 3
	test/iso.day_of_week.set(at(2004, 2, 29), 1) == at(2004, 2, 23)

chronologies = [iso, chrono.gregorian(), jul, gj]

# Dates as numbered by the year field of every chronology; none use year zero.
dates = [
	(2004, 2, 29, 12, 30, 15, 500),
	(1969, 12, 31, 23, 59, 59, 999),
	(2023, 1, 1),
	(1, 1, 1),
	(50, 6, 15),
	(99, 12, 31, 23),
	(100, 1, 1),
	(-1, 6, 1),
	(-44, 3, 15, 9),
	(-150, 7, 1),
]

def test_get_set_identity(test):
	"""
	# Setting a field to its current value changes nothing and setting the minimum
	# or the maximum at the instant reads it back.
	"""
	for c in chronologies:
		for d in dates:
			i = c.date_time_millis(*d)
			for t in core.field_types:
				f = t.field(c)
				test/f.set(i, f.get(i)) == i
				for v in (f.minimum, f.maximum(i)):
					test/f.get(f.set(i, v)) == v

def test_precise_difference(test):
	i = at(2004, 2, 29, 12)
	for unit in (iso.millis, iso.seconds, iso.minutes, iso.hours, iso.days, iso.weeks):
		for n in (-1000, -1, 0, 1, 7, 1000):
			test/unit.difference(unit.add(i, n), i) == n

def test_imprecise_difference(test):
	for unit in (iso.months, iso.years, iso.weekyears, iso.centuries):
		# At the start of a month the unit is recovered exactly.
		i = at(2004, 3, 1)
		for n in (-25, -1, 0, 1, 12, 25):
			test/unit.difference(unit.add(i, n), i) == n

def test_month_clamping(test):
	test/iso.months.add(at(2004, 1, 31), 1) == at(2004, 2, 29)
	test/iso.months.add(at(2004, 1, 31), 13) == at(2005, 2, 28)
	test/iso.months.add(at(2004, 3, 31), -1) == at(2004, 2, 29)
	test/iso.years.add(at(2004, 2, 29), 1) == at(2005, 2, 28)
	test/iso.years.add(at(2004, 2, 29), 4) == at(2008, 2, 29)
	test/iso.month_of_year.set(at(2004, 3, 31, 10), 2) == at(2004, 2, 29, 10)

def test_month_difference(test):
	test/iso.months.difference(at(2004, 3, 31), at(2004, 2, 29)) == 1
	test/iso.months.difference(at(2004, 2, 29), at(2004, 1, 31)) == 1
	test/iso.months.difference(at(2004, 2, 28), at(2004, 1, 31)) == 0
	# Negative differences are the negation of the reversed difference.
	test/iso.months.difference(at(2004, 1, 31), at(2004, 2, 29)) == -1
	test/iso.months.difference(at(2004, 1, 31), at(2004, 3, 1)) == -1
	test/iso.years.difference(at(2003, 2, 28), at(2004, 2, 29)) == -1

def test_wrap_field(test):
	test/iso.month_of_year.add_wrap_field(at(2004, 12, 15), 1) == at(2004, 1, 15)
	test/iso.month_of_year.add_wrap_field(at(2004, 3, 31), -1) == at(2004, 2, 29)
	test/iso.hour_of_day.add_wrap_field(at(2004, 2, 29, 23), 2) == at(2004, 2, 29, 1)
	test/iso.day_of_month.add_wrap_field(at(2004, 2, 29), 1) == at(2004, 2, 1)

def test_rounding(test):
	i = at(2004, 2, 29, 12, 34, 56, 789)
	test/iso.month_of_year.round_floor(i) == at(2004, 2, 1)
	test/iso.year.round_floor(i) == at(2004, 1, 1)
	test/iso.day_of_month.round_floor(i) == at(2004, 2, 29)
	test/iso.day_of_month.round_ceiling(i) == at(2004, 3, 1)
	test/iso.hour_of_day.round_floor(i) == at(2004, 2, 29, 12)
	test/iso.minute_of_hour.round_half_floor(i) == at(2004, 2, 29, 12, 35)
	test/iso.week_of_weekyear.round_floor(i) == at(2004, 2, 23)
	test/iso.weekyear.round_floor(i) == at(2003, 12, 29)
	test/iso.day_of_month.round_ceiling(at(2004, 2, 29)) == at(2004, 2, 29)
	test/iso.day_of_month.remainder(i) == (12 * 3600000) + (34 * 60000) + 56789

	# Even values win ties.
	noon = at(2004, 2, 29, 12)
	test/iso.day_of_month.round_half_even(noon) == at(2004, 2, 29)
	test/iso.day_of_month.round_half_even(at(2004, 2, 28, 12)) == at(2004, 2, 28)
	test/iso.day_of_month.round_half_even(at(2004, 2, 27, 12)) == at(2004, 2, 28)

def test_dependent_maximum(test):
	test/iso.day_of_month.maximum(at(2004, 2, 1)) == 29
	test/iso.day_of_month.maximum(at(2003, 2, 1)) == 28
	test/iso.day_of_month.maximum() == 31
	test/iso.day_of_year.maximum(at(2004, 6, 1)) == 366
	test/iso.week_of_weekyear.maximum(at(2020, 6, 1)) == 53
	test/iso.week_of_weekyear.maximum(at(2021, 6, 1)) == 52

	with test/core.IllegalFieldValue as exc:
		iso.day_of_month.set(at(2003, 2, 1), 29)
	test/exc().upper == 28

	with test/core.IllegalFieldValue:
		iso.hour_of_day.set(at(2004, 2, 1), 24)

def test_clock_hours(test):
	test/iso.clockhour_of_day.get(at(2004, 2, 1)) == 24
	test/iso.clockhour_of_day.get(at(2004, 2, 1, 13)) == 13
	test/iso.clockhour_of_halfday.get(at(2004, 2, 1, 13)) == 1
	test/iso.clockhour_of_halfday.get(at(2004, 2, 1, 12)) == 12
	test/iso.hour_of_halfday.get(at(2004, 2, 1, 12)) == 0
	test/iso.halfday_of_day.get(at(2004, 2, 1, 13)) == 1
	test/iso.clockhour_of_day.set(at(2004, 2, 1, 13), 24) == at(2004, 2, 1)
	with test/core.IllegalFieldValue:
		iso.clockhour_of_day.set(at(2004, 2, 1), 0)

def test_weeks(test):
	test/iso.week_of_weekyear.get(at(2023, 1, 1)) == 52
	test/iso.weekyear.get(at(2023, 1, 1)) == 2022
	test/iso.week_of_weekyear.get(at(2024, 1, 1)) == 1
	test/iso.weekyear.get(at(2024, 1, 1)) == 2024
	test/iso.weekyear_of_century.get(at(2024, 1, 1)) == 24

	# The week is reduced to the last week of a weekyear without week 53.
	test/iso.weekyears.add(at(2020, 12, 31), 1) == at(2021, 12, 30)
	test/iso.weekyear.set(at(2020, 12, 31), 2021) == at(2021, 12, 30)
	test/iso.weekyear.is_leap(at(2020, 6, 1)) == True
	test/iso.weekyear.leap_amount(at(2021, 6, 1)) == 0

def test_eras_and_centuries(test):
	test/iso.century_of_era.get(at(2004, 1, 1)) == 20
	test/iso.year_of_century.get(at(2004, 1, 1)) == 4
	test/iso.year_of_century.get(at(2000, 1, 1)) == 0
	test/iso.century_of_era.set(at(2004, 5, 1), 19) == at(1904, 5, 1)
	test/iso.year_of_century.set(at(2004, 5, 1), 99) == at(2099, 5, 1)
	test/iso.centuries.add(at(2004, 5, 1), 1) == at(2104, 5, 1)

	test/iso.era.get(at(1, 1, 1)) == 1
	test/iso.era.get(at(0, 1, 1)) == 0
	test/iso.year_of_era.get(at(0, 1, 1)) == 1
	test/iso.year_of_era.get(at(-1, 1, 1)) == 2
	test/iso.era.set(at(2004, 5, 1), 0) == at(-2003, 5, 1)
	test/iso.year_of_era.set(at(-1, 5, 1), 44) == at(-43, 5, 1)

def test_centuries_near_zero(test):
	i = at(50, 6, 15)
	test/iso.century_of_era.get(i) == 0
	test/iso.year_of_century.get(i) == 50
	test/iso.century_of_era.round_floor(i) == at(0, 1, 1)
	test/iso.year_of_century.set(i, 0) == at(0, 6, 15)
	test/iso.century_of_era.set(i, 1) == at(150, 6, 15)

	# Julian centuries count from one; the first century holds the years 1 to 100.
	j = at(50, 6, 15, chronology=jul)
	test/jul.century_of_era.get(j) == 1
	test/jul.year_of_century.get(j) == 50
	test/jul.year_of_century.set(j, 100) == at(100, 6, 15, chronology=jul)
	test/jul.century_of_era.set(j, 2) == at(150, 6, 15, chronology=jul)
	test/jul.century_of_era.round_floor(j) == at(1, 1, 1, chronology=jul)
	test/jul.year_of_century.get(at(100, 1, 1, chronology=jul)) == 100

	# Before Christ, the century spans toward the past.
	bc = at(-44, 3, 15, chronology=jul)
	test/jul.century_of_era.get(bc) == 1
	test/jul.century_of_era.round_floor(bc) == at(-100, 1, 1, chronology=jul)

	# Weekyear of century reads the astronomical weekyear, so zero exists in Julian.
	w = jul.weekyear_of_century.set(j, 0)
	test/jul.weekyear_of_century.get(w) == 0
	test/jul.weekyear.get(w) == -1
	test/gj.weekyear_of_century.get(gj.weekyear_of_century.set(at(50, 6, 15, chronology=gj), 0)) == 0

def test_year_of_era_maximum(test):
	bc = at(-44, 3, 15)
	ad = at(2004, 3, 15)
	test/iso.year_of_era.maximum(ad) == 292278993
	test/iso.year_of_era.maximum(bc) == 292275055
	test/iso.year.get(iso.year_of_era.set(bc, 292275055)) == -292275054
	with test/core.IllegalFieldValue:
		iso.year_of_era.set(bc, 292275056)

def test_year_arithmetic_overflow(test):
	i = at(2000, 1, 1)
	with test/core.Overflow:
		iso.years.add(i, 10**9)
	with test/core.Overflow:
		iso.years.add(iso.year.set(i, iso.year.maximum_value), 1)
	with test/core.Overflow:
		iso.months.add(i, 12 * 10**9)
	with test/core.Overflow:
		iso.weekyears.add(i, -10**9)
	with test/core.Overflow:
		jul.years.add(at(2000, 1, 1, chronology=jul), 10**9)

def test_text(test):
	test/iso.day_of_week.as_text(7) == 'Sunday'
	test/iso.day_of_week.as_short_text(1) == 'Mon'
	test/iso.month_of_year.as_short_text(2) == 'Feb'
	test/iso.month_of_year.text(at(2004, 6, 1)) == 'June'
	test/iso.era.as_text(1) == 'AD'
	test/iso.halfday_of_day.as_short_text(1) == 'PM'
	test/iso.year.as_text(2004) == '2004'

	test/iso.month_of_year.parse_text('february') == 2
	test/iso.month_of_year.parse_text('Feb') == 2
	test/iso.month_of_year.parse_text('11') == 11
	test/iso.day_of_week.set_text(at(2004, 2, 29), 'monday') == at(2004, 2, 23)
	with test/core.IllegalFieldValue:
		iso.month_of_year.parse_text('Brumaire')

	for f, v in [
		(iso.month_of_year.as_text, 0),
		(iso.month_of_year.as_short_text, 13),
		(iso.day_of_week.as_text, 8),
		(iso.era.as_text, -1),
	]:
		with test/core.IllegalFieldValue:
			f(v)
	with test/core.IllegalFieldValue as exc:
		words.text('months', 0)
	test/exc().upper == 12

def test_unsupported(test):
	test/iso.eras.supported == False
	with test/core.UnsupportedField:
		iso.eras.add(0, 1)

def test_julian_fields(test):
	# Astronomical year zero is 1 BC.
	i = jul.date_millis(-1, 6, 1)
	test/jul.year.get(i) == -1
	test/jul.year_of_era.get(i) == 1
	test/jul.era.get(i) == 0
	test/jul.years.add(i, 1) == jul.date_millis(1, 6, 1)
	test/jul.year.set(jul.date_millis(5, 6, 1), -5) == jul.date_millis(-5, 6, 1)
	with test/core.IllegalFieldValue:
		jul.year.set(i, 0)
	with test/core.IllegalFieldValue:
		jul.date_millis(0, 1, 1)
	test/jul.day_of_month.maximum(jul.date_millis(1900, 2, 1)) == 29

def test_gj_cutover(test):
	last_julian = gj.date_millis(1582, 10, 4)
	test/gj.days.add(last_julian, 1) == gj.date_millis(1582, 10, 15)
	test/gj.day_of_month.get(gj.days.add(last_julian, 1)) == 15
	test/gj.days.difference(gj.date_millis(1582, 10, 15), last_julian) == 1
	test/gj.day_of_year.maximum(gj.date_millis(1582, 6, 1)) == 355
	test/gj.day_of_year.get(gj.date_millis(1582, 12, 31)) == 355

	with test/core.IllegalFieldValue:
		gj.date_millis(1582, 10, 10)

	# Addition is lenient: a date landing in the gap rolls forward by the gap.
	moved = gj.months.add(gj.date_millis(1582, 9, 10), 1)
	test/moved == gj.date_millis(1582, 10, 20)

	# Setting is strict.
	with test/core.IllegalFieldValue:
		gj.day_of_month.set(gj.date_millis(1582, 10, 1), 10)

if __name__ == '__main__':
	import sys
	from . import harness
	harness.execute(sys.modules[__name__])

from .. import core
from .. import chrono as module
from .. import zone
from ..period import Period, PeriodType

def test_instance_cache(test):
	test/module.iso() % module.iso()
	test/module.instance('gj') % module.gj()
	test/module.default() % module.iso()
	test/module.iso(zone.fixed(1)) % module.iso(zone.fixed(1))
	test/module.iso() != module.gj()
	test/module.gregorian(minimum_days=1) != module.gregorian()

def test_repr(test):
	test/repr(module.iso()) == 'ISOChronology[UTC]'
	test/repr(module.gj()) == 'GJChronology[UTC]'
	test/repr(module.gregorian(minimum_days=1)) == 'GregorianChronology[UTC,mdfw=1]'
	test/repr(module.julian(zone.fixed(1))) == 'JulianChronology[+01:00]'

def test_field_lookup(test):
	iso = module.iso()
	test/iso.field(core.month_of_year) % iso.month_of_year
	test/iso.field(core.months) % iso.months
	test/iso.kind == 'iso'
	for t in core.field_types:
		test/t.supported(iso) == True
	test/core.eras.supported(iso) == False

def test_date_time_millis(test):
	iso = module.iso()
	test/iso.date_time_millis(1970, 1, 1) == 0
	test/iso.date_time_millis(2000, 1, 1) == 946684800000
	test/iso.date_time_millis(1969, 12, 31, 23, 59, 59, 999) == -1
	test/iso.date_millis(1970, 1, 2, 5) == 86400005

	with test/core.IllegalFieldValue as exc:
		iso.date_time_millis(2004, 1, 1, 24)
	test/exc().field == 'hour_of_day'

	with test/core.IllegalFieldValue as exc:
		iso.date_time_millis(2003, 2, 29)
	test/exc().field == 'day_of_month'

	with test/core.IllegalFieldValue:
		iso.date_time_millis(2003, 13, 1)

def test_time_millis(test):
	iso = module.iso()
	i = iso.date_time_millis(2004, 2, 29, 23, 59)
	test/iso.time_millis(i, 12, 30) == iso.date_time_millis(2004, 2, 29, 12, 30)
	with test/core.IllegalFieldValue:
		iso.time_millis(i, 60)

def test_validate(test):
	iso = module.iso()
	ymd = [core.year, core.month_of_year, core.day_of_month]
	iso.validate(ymd, [2004, 2, 29])
	with test/core.IllegalFieldValue as exc:
		iso.validate(ymd, [2003, 2, 29])
	test/exc().upper == 28

	iso.validate([core.month_of_year, core.day_of_month], [2, 29])
	with test/core.IllegalFieldValue:
		iso.validate([core.month_of_year, core.day_of_month], [2, 30])
	with test/core.IllegalFieldValue:
		iso.validate([core.hour_of_day], [24])

def test_get_set_values(test):
	iso = module.iso()
	types = (core.year, core.month_of_year, core.day_of_month)
	i = iso.date_time_millis(2004, 2, 29, 12)
	test/iso.get_values(types, i) == (2004, 2, 29)
	test/iso.set_values(types, (2008, 1, 31), i) == iso.date_time_millis(2008, 1, 31, 12)

def test_period_values(test):
	iso = module.iso()
	start = iso.date_millis(2004, 1, 31)
	end = iso.date_millis(2004, 3, 1)
	standard = PeriodType.standard()
	values = iso.period_values(standard, start, end)
	test/values == (0, 1, 0, 1, 0, 0, 0, 0)
	test/iso.add(Period(standard, values), start) == end
	test/iso.period_values(standard, end, start) == (0, -1, 0, -1, 0, 0, 0, 0)
	test/iso.period_values(standard, start, start) == (0,) * 8

def test_period_values_reproduce_end(test):
	"""
	# Adding the decomposition of an interval to its start yields its end.
	"""
	iso = module.iso()
	instants = [
		iso.date_time_millis(2004, 1, 31, 10, 15),
		iso.date_time_millis(2004, 2, 29),
		iso.date_time_millis(2003, 12, 31, 23, 59, 59, 999),
		iso.date_time_millis(1969, 3, 15, 1, 2, 3, 4),
		iso.date_time_millis(2100, 2, 28, 6),
	]
	types = [
		PeriodType.standard(),
		PeriodType.year_day_time(),
		PeriodType.day_time(),
		PeriodType.time(),
	]
	for t in types:
		for start in instants:
			for end in instants:
				values = iso.period_values(t, start, end)
				test/iso.add(Period(t, values), start) == end

def test_period_values_for_duration(test):
	iso = module.iso()
	duration = (8 * 86400000) + (3 * 3600000)
	values = iso.period_values_for_duration(PeriodType.standard(), duration)
	test/values == (0, 0, 1, 1, 3, 0, 0, 0)
	values = iso.period_values_for_duration(PeriodType.time(), duration)
	test/values == (195, 0, 0, 0)

def test_add(test):
	iso = module.iso()
	i = iso.date_millis(2004, 1, 31)
	test/iso.add(Period.of(months=1, days=1), i) == iso.date_millis(2004, 3, 1)
	test/iso.add(Period.of(months=1), i, -1) == iso.date_millis(2003, 12, 31)
	test/iso.add(Period.of(months=1), i, 0) == i
	test/iso.add(None, i) == i
	test/iso.add_duration(i, 1000, 3) == i + 3000
	test/iso.add_duration(i, 1000, 0) == i

def test_zoned(test):
	iso = module.iso()
	plus_one = iso.with_zone(zone.fixed(1))
	test/plus_one.zone == zone.fixed(1)
	test/plus_one.base % iso
	test/plus_one.with_utc() % iso
	test/plus_one.date_time_millis(1970, 1, 1, 1) == 0
	test/plus_one.hour_of_day.get(0) == 1
	test/plus_one.day_of_month.get(iso.date_time_millis(2004, 2, 28, 23)) == 29
	test/plus_one.days.add(0, 1) == 86400000
	test/plus_one.months.add(0, 1) == iso.date_millis(1970, 2, 1)

def test_julian_year_zero(test):
	with test/core.IllegalFieldValue:
		module.julian().date_millis(0, 1, 1)

if __name__ == '__main__':
	import sys
	from . import harness
	harness.execute(sys.modules[__name__])

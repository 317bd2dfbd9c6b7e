from .. import core
from .. import chrono
from .. import zone as module

hour = 3600000
iso = chrono.iso()

# United States Eastern time for 2024.
t1 = iso.date_time_millis(2024, 3, 10, 7)
t2 = iso.date_time_millis(2024, 11, 3, 6)
EST = module.Offset.of(-5 * hour, 'EST', 'std')
EDT = module.Offset.of(-4 * hour, 'EDT', 'dst')
eastern = module.TransitionZone('America/New_York', [t1, t2], [EDT, EST], EST)

def local(*args):
	return iso.date_time_millis(*args)

def test_format_offset(test):
	test/module.format_offset(0) == '+00:00'
	test/module.format_offset(19800000) == '+05:30'
	test/module.format_offset(-5 * hour) == '-05:00'
	test/module.format_offset(-3723004) == '-01:02:03.004'
	test/module.format_offset(3723000) == '+01:02:03'

def test_offset(test):
	test/EST.magnitude == -5 * hour
	test/EST.abbreviation == 'EST'
	test/EDT.is_dst == True
	test/int(EDT) == -4 * hour
	test/module.Offset.of(hour).abbreviation == '+01:00'

def test_fixed(test):
	test/module.fixed() % module.utc
	test/module.fixed(0, 0, 0) % module.utc
	test/module.fixed(-5, 30).offset == -19800000
	test/module.fixed(5, 30).offset == 19800000
	test/module.fixed(1).name == '+01:00'
	test/module.fixed(1) == module.FixedZone(hour)
	test/module.utc.name == 'UTC'
	test/str(module.utc) == 'UTC'

	z = module.fixed(2)
	test/z.to_local(0) == 2 * hour
	test/z.to_utc(2 * hour) == 0
	test/z.next_transition(0) == 0

def test_transitions(test):
	test/eastern.offset_at(t1 - 1) == -5 * hour
	test/eastern.offset_at(t1) == -4 * hour
	test/eastern.offset_at(t2) == -5 * hour
	test/eastern.find(t1) == EDT
	test/eastern.find(0) == EST
	test/eastern.standard_offset(t1 + 1000) == -5 * hour
	test/eastern.next_transition(0) == t1
	test/eastern.next_transition(t1) == t2
	test/eastern.next_transition(t2) == t2
	test/eastern.previous_transition(t2) == t1
	test/eastern.previous_transition(t1) == t1

	with test/ValueError:
		module.TransitionZone('bad', [t1], [], EST)

def test_gap(test):
	# 02:30 on March 10 is skipped by the forward transition.
	skipped = local(2024, 3, 10, 2, 30)
	with test/core.IllegalFieldValue:
		eastern.to_utc(skipped, strict=True)
	test/eastern.to_utc(skipped) == local(2024, 3, 10, 7, 30)

	before = local(2024, 3, 10, 1, 30)
	test/eastern.to_utc(before, strict=True) == local(2024, 3, 10, 6, 30)

def test_overlap(test):
	# 01:30 on November 3 occurs twice; the earlier instant is chosen.
	repeated = local(2024, 11, 3, 1, 30)
	test/eastern.to_utc(repeated) == local(2024, 11, 3, 5, 30)
	test/eastern.to_utc(repeated, strict=True) == local(2024, 11, 3, 5, 30)

	# Preferring the offset of an instant in the later occurrence.
	later = local(2024, 11, 3, 6, 45)
	test/eastern.to_utc_near(repeated, later) == local(2024, 11, 3, 6, 30)

def test_zoned_chronology(test):
	ny = chrono.iso(eastern)
	test/repr(ny) == 'ISOChronology[America/New_York]'

	with test/core.IllegalFieldValue:
		ny.date_time_millis(2024, 3, 10, 2, 30)
	test/ny.date_time_millis(2024, 3, 10, 3, 30) == local(2024, 3, 10, 7, 30)

	# Hours are added to the instant; the wall clock jumps the gap.
	i = ny.hours.add(local(2024, 3, 10, 6, 30), 1)
	test/i == local(2024, 3, 10, 7, 30)
	test/ny.hour_of_day.get(i) == 3

	# Days keep the wall clock.
	midnight = ny.date_millis(2024, 3, 9)
	test/ny.days.add(midnight, 1) == ny.date_millis(2024, 3, 10)
	test/(ny.days.add(midnight, 2) - midnight) == 47 * hour

	with test/core.IllegalFieldValue:
		ny.hour_of_day.set(ny.date_millis(2024, 3, 10), 2)
	test/ny.hour_of_day.set(ny.date_millis(2024, 3, 10), 3) == local(2024, 3, 10, 7)

	test/ny.day_of_month.round_floor(local(2024, 3, 10, 12)) == local(2024, 3, 10, 5)

if __name__ == '__main__':
	import sys
	from . import harness
	harness.execute(sys.modules[__name__])

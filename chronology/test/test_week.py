from .. import week
from .. import gregorian

def days(*date):
	return gregorian.days_from_date(date)

def test_day_of_week(test):
	test/week.day_of_week(1) == week.monday
	test/week.day_of_week(days(2024, 1, 1)) == week.monday
	test/week.day_of_week(days(2023, 1, 1)) == week.sunday
	test/week.day_of_week(days(2004, 2, 29)) == week.sunday
	test/week.day_of_week(days(1970, 1, 1)) == week.thursday

def test_weekday_names(test):
	test/week.weekday_name_to_number['monday'] == 1
	test/week.weekday_name_to_number['sun'] == 7
	test/week.weekday_name_to_number['sunday'] == 7
	test/week.days_in_week == 7

def test_weekday_relative(test):
	sunday = days(2023, 12, 31)
	test/week.weekday_on_or_before(week.monday, sunday) == days(2023, 12, 25)
	test/week.weekday_on_or_after(week.monday, sunday) == days(2024, 1, 1)
	test/week.weekday_nearest(week.monday, sunday) == days(2024, 1, 1)
	test/week.weekday_before(week.sunday, sunday) == days(2023, 12, 24)
	test/week.weekday_after(week.sunday, sunday) == days(2024, 1, 7)
	test/week.weekday_on_or_before(week.sunday, sunday) == sunday

def test_nth_weekday(test):
	# First Monday of September, 2024 and last Monday of May, 2024.
	test/week.nth_weekday(1, week.monday, days(2024, 9, 1)) == days(2024, 9, 2)
	test/week.nth_weekday(-1, week.monday, days(2024, 5, 31)) == days(2024, 5, 27)
	test/week.nth_weekday(2, week.monday, days(2024, 9, 2)) == days(2024, 9, 9)
	with test/ValueError:
		week.nth_weekday(0, week.monday, days(2024, 9, 1))

def test_first_week(test):
	test/week.first_week(days(2024, 1, 1)) == days(2024, 1, 1)
	test/week.first_week(days(2023, 1, 1)) == days(2023, 1, 2)
	test/week.first_week(days(2020, 1, 1)) == days(2019, 12, 30)
	# With a single day required, the week holding January first is week one.
	test/week.first_week(days(2023, 1, 1), 1) == days(2022, 12, 26)

def test_week_numbers(test):
	start = days(2024, 1, 1)
	test/week.week_from_days(start, days(2024, 1, 7)) == 1
	test/week.week_from_days(start, days(2024, 1, 8)) == 2
	test/week.days_from_week(start, 2, 3) == days(2024, 1, 10)

if __name__ == '__main__':
	import sys
	from . import harness
	harness.execute(sys.modules[__name__])

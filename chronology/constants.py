"""
# Unit lengths and calendar defaults shared by the chronologies.

# [ Elements ]

# /epoch_days/
	# The fixed day number of 1970-01-01, the day of instant zero.
# /default_cutover/
	# The instant of the first Gregorian day, 1582-10-15, used by GJ chronologies.
# /default_minimum_days/
	# The number of days of a new year that must fall in week one. ISO-8601 uses four.
"""

millis_per_second = 1000
seconds_per_minute = 60
minutes_per_hour = 60
hours_per_day = 24
days_per_week = 7

millis_per_minute = millis_per_second * seconds_per_minute
millis_per_hour = millis_per_minute * minutes_per_hour
millis_per_halfday = millis_per_hour * 12
millis_per_day = millis_per_hour * hours_per_day
millis_per_week = millis_per_day * days_per_week

seconds_per_day = seconds_per_minute * minutes_per_hour * hours_per_day
minutes_per_day = minutes_per_hour * hours_per_day

#: Average lengths used to order imprecise units.
millis_per_year = (365 * millis_per_day) + (millis_per_day * 97 // 400)
millis_per_month = millis_per_year // 12
millis_per_century = millis_per_year * 100

epoch_days = 719163

default_cutover = -12219292800000
default_minimum_days = 4

long_max = (1 << 63) - 1
long_min = -(1 << 63)
int_max = (1 << 31) - 1
int_min = -(1 << 31)

"""
# Overflow checked integer arithmetic and floor division.

# Python integers do not overflow; these functions impose the 64-bit instant range and
# the 32-bit field range so that every computed value is representable by the
# data model. Floor division is Python's native `//`, but the divisor is checked so that
# a calendar computation never silently divides by a non-positive unit.
"""
from . import core
from .constants import long_max, long_min, int_max, int_min

def check_long(value):
	if value > long_max or value < long_min:
		raise core.Overflow("value exceeds the 64-bit range", value)
	return value

def safe_add(a, b):
	return check_long(a + b)

def safe_subtract(a, b):
	return check_long(a - b)

def safe_multiply(a, b):
	return check_long(a * b)

def safe_negate(a):
	return check_long(-a)

def safe_to_int(value):
	"""
	# Narrow the &value to the 32-bit range or raise &core.Overflow.
	"""
	if value > int_max or value < int_min:
		raise core.Overflow("value cannot be cast to a 32-bit integer", value)
	return value

def safe_add_int(a, b):
	return safe_to_int(a + b)

def safe_multiply_to_int(a, b):
	return safe_to_int(safe_multiply(a, b))

def floor_div(a, b):
	"""
	# Divide &a by &b rounding toward negative infinity.
	"""
	if b <= 0:
		raise ValueError("divisor must be positive", b)
	return a // b

def floor_mod(a, b):
	"""
	# The remainder of &floor_div; always within `[0, b)`.
	"""
	if b <= 0:
		raise ValueError("divisor must be positive", b)
	return a % b

def amod(a, b):
	"""
	# Adjusted remainder: &floor_mod in the range `[1, b]` instead of `[0, b)`.
	"""
	return floor_mod(a - 1, b) + 1

def verify_value_bounds(field, value, lower, upper):
	"""
	# Raise &core.IllegalFieldValue when &value is outside `[lower, upper]`.
	"""
	if value < lower or value > upper:
		raise core.IllegalFieldValue(field, value, lower, upper)
	return value

def wrap(value, lower, upper):
	"""
	# Reduce &value into `[lower, upper]` by modular wrapping.
	"""
	return floor_mod(value - lower, upper - lower + 1) + lower

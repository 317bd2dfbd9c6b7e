"""
# Tests for the chronology package.

# The test functions take a single &.harness.Test parameter and state their expectations
# with contentions, `test/expected == actual`. They can be run by pytest, which supplies
# the parameter through the fixture in `conftest.py`, or module by module:

#!/pl/sh
	python3 -m chronology.test.test_calendar
"""

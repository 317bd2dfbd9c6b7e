import io

from .. import core
from .. import isoformat
from ..period import Period
from ..bin import iso
from ..bin import between

def lines(out):
	return dict(l.split() for l in out.getvalue().splitlines())

def test_iso(test):
	out = io.StringIO()
	iso.main('2004-02-29T12:30:45.123Z', file=out)
	printed = lines(out)
	test/len(printed) == len(isoformat.formatters)
	test/printed['date'] == '2004-02-29'
	test/printed['date_time'] == '2004-02-29T12:30:45.123Z'
	test/printed['week_date'] == '2004-W09-7'

	out = io.StringIO()
	iso.main('2004-02-29T12:30:45.123Z', '1', file=out)
	test/lines(out)['date_time'] == '2004-02-29T13:30:45.123+01:00'

def test_iso_now(test):
	test/iso.instant('now', now=lambda: 1.5) == 1500
	with test/core.MalformedInput:
		iso.instant('2004-02-3x')

def test_between(test):
	out = io.StringIO()
	p = between.main('2004-01-31T00:00:00Z', '2004-03-01T00:00:00Z', file=out)
	test/p == Period.of(months=1, days=1)
	test/out.getvalue() == 'P1M1D\n1 month and 1 day\n'

	out = io.StringIO()
	between.main('2004-01-31T00:00:00Z', '2004-03-01T00:00:00Z', 'days', file=out)
	test/out.getvalue() == 'P30D\n30 days\n'

	out = io.StringIO()
	between.main('2004-01-01T00:00:00+01:00', '2004-01-01T01:00:00Z', file=out)
	test/out.getvalue() == 'PT2H\n2 hours\n'

	with test/core.MalformedInput:
		between.main('x', '2004-01-01T00:00:00Z', file=io.StringIO())
	with test/KeyError:
		between.main('2004-01-01T00:00:00Z', '2004-01-01T00:00:00Z', 'fortnights', file=io.StringIO())

if __name__ == '__main__':
	import sys
	from . import harness
	harness.execute(sys.modules[__name__])

"""
# pytest integration; supplies the &.harness.Test instance taken by the test functions.
"""
import pytest

from . import harness

@pytest.fixture
def test(request):
	return harness.Test(request.node.nodeid, request.function)

import pytest

from rgbramp.colors.rgb import Color


@pytest.fixture
def primaries():
    return [Color(255, 0, 0), Color(0, 255, 0), Color(0, 0, 255)]

import random

import pytest

from cpzk.group import DEFAULT_GROUP, toy_group


@pytest.fixture
def group():
    return toy_group()


@pytest.fixture
def default_group():
    return DEFAULT_GROUP


@pytest.fixture(params=["toy", "default"])
def any_group(request):
    if request.param == "toy":
        return toy_group()
    return DEFAULT_GROUP


@pytest.fixture
def rng():
    return random.Random(42)

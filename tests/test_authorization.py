import pytest

from core.authorization import authorize
from core.exceptions import Unauthorized
from models.auth import CallerIdentity


def test_owner_is_allowed():
    authorize(CallerIdentity(restaurant_id="r1", email="a@example.com"), "r1")


def test_other_restaurant_is_rejected():
    with pytest.raises(Unauthorized):
        authorize(CallerIdentity(restaurant_id="r1", email="a@example.com"), "r2")

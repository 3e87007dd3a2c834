import pytest

from shedbim.models import ShedCalc, ShedUser, create_c, create_top_hat


@pytest.fixture
def c15024():
    return create_c("C15024", 152, 64, 15.5, 2.4)


@pytest.fixture
def th64():
    return create_top_hat("TH64", 64, 100, 1)


@pytest.fixture
def user():
    """The reference 6 x 8 m shed, two bays, 22 degree roof."""
    return ShedUser(span=6000, length=8000, side_bays=2, height=3000, pitch=22)


@pytest.fixture
def calc(c15024, th64):
    return ShedCalc(column=c15024, rafter=c15024, roof_purlin=th64, side_girt=th64)

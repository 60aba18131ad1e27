import pytest
from app.schema import SoilSample


@pytest.fixture
def default_soil():
    return SoilSample()


@pytest.fixture
def rich_soil():
    return SoilSample(ph=6.75, nitrogen=100, phosphorus=30, potassium=40,
                      moisture=55, temperature=20, organicMatter=3.5)

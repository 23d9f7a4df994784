from datetime import datetime

import pytest

from report_formatter.rendering import RecordingSink

SAMPLE_REPORT = """Here is the report you asked for.

Title: The Water Cycle

Abstract
This report examines how **water** moves through the environment.

Introduction
Water is essential to life.

Main Body
**Evaporation:** heat turns surface water into vapour.
Key stages:
* **Condensation** forms clouds
* Precipitation returns water to the ground

Conclusion
The cycle is continuous.

References
[1] Hydrology Basics
[2] Climate and Water
"""


@pytest.fixture
def sample_text():
    return SAMPLE_REPORT


@pytest.fixture
def fixed_time():
    return datetime(2024, 3, 5, 14, 30)


@pytest.fixture
def sink():
    return RecordingSink()

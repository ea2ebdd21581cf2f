from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from smart_home.domain.entities.device import SmartLight, SmartThermostat  # noqa: E402
from smart_home.domain.entities.home import SmartHome  # noqa: E402
from smart_home.infrastructure.output import BufferedOutputSink  # noqa: E402


@pytest.fixture()
def output() -> BufferedOutputSink:
    return BufferedOutputSink()


@pytest.fixture()
def lamp(output: BufferedOutputSink) -> SmartLight:
    return SmartLight("Lamp", 10.5, 75, "White", output=output)


@pytest.fixture()
def lamp2(output: BufferedOutputSink) -> SmartLight:
    return SmartLight("Lamp2", 9.2, 100, "Green", output=output)


@pytest.fixture()
def thermostat(output: BufferedOutputSink) -> SmartThermostat:
    return SmartThermostat("Thermostat", 15.8, 20.0, 22.5, output=output)


@pytest.fixture()
def home(
    output: BufferedOutputSink,
    lamp: SmartLight,
    lamp2: SmartLight,
    thermostat: SmartThermostat,
) -> SmartHome:
    smart_home = SmartHome(output=output)
    smart_home.add_device(lamp)
    smart_home.add_device(lamp2)
    smart_home.add_device(thermostat)
    return smart_home


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging() -> None:
    from smart_home.shared import configure_logging

    configure_logging(level="WARNING")

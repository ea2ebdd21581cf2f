from __future__ import annotations

from smart_home.application.use_cases.device_use_cases import (
    DescribeDevicesUseCase,
    DisplayDevicesStatusUseCase,
    SortDevicesUseCase,
)
from smart_home.domain.services.comparers import EnergyComparer, NameComparer
from smart_home.domain.services.device_introspector import DeviceIntrospector


def test_display_status_writes_title_then_devices(home, lamp, thermostat, output):
    lamp.turn_on()
    thermostat.turn_on()
    output.clear()

    count = DisplayDevicesStatusUseCase(output=output).execute(
        home, title="\n-- All properties --"
    )

    assert count == 3
    assert output.lines[0] == "\n-- All properties --"
    assert output.lines[1].endswith("Status: On")
    assert output.lines[2].startswith("SmartLight: Lamp2\n")
    assert output.lines[2].endswith("Status: Off")
    assert output.lines[3].endswith("Status: On")


def test_display_status_without_title(lamp, output) -> None:
    count = DisplayDevicesStatusUseCase(output=output).execute([lamp])

    assert count == 1
    assert output.lines == ["SmartLight: Lamp\n Brightness: 75\n Color: White\n Status: Off"]


def test_sort_use_case_returns_snapshot(home) -> None:
    use_case = SortDevicesUseCase()

    by_energy = use_case.execute(home, EnergyComparer())
    by_name = use_case.execute(home, NameComparer())

    assert [d.name for d in by_energy] == ["Lamp2", "Lamp", "Thermostat"]
    assert [d.name for d in by_name] == ["Lamp", "Lamp2", "Thermostat"]
    assert [d.name for d in home] == ["Lamp", "Lamp2", "Thermostat"]


def test_describe_devices_in_insertion_order(home) -> None:
    descriptions = DescribeDevicesUseCase(introspector=DeviceIntrospector()).execute(
        home
    )

    assert [d.type_name for d in descriptions] == [
        "SmartLight",
        "SmartLight",
        "SmartThermostat",
    ]
    assert "brightness" in descriptions[0].property_names()
    assert "current_temperature" in descriptions[2].property_names()

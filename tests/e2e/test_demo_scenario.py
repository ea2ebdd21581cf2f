from __future__ import annotations

from dependency_injector import providers

from smart_home.infrastructure.output import BufferedOutputSink
from smart_home.main.app import main, run_demo
from smart_home.main.config import AppSettings
from smart_home.main.container import init_container

LIGHT_INFO = """Information for: SmartLight
Properties:
 - name : str
 - energy_consumption : float
 - is_on : bool
 - brightness : int
 - color : str
Methods:
 - display_status
"""

THERMOSTAT_INFO = """Information for: SmartThermostat
Properties:
 - name : str
 - energy_consumption : float
 - is_on : bool
 - current_temperature : float
 - desired_temperature : float
Methods:
 - display_status
"""

LAMP = """SmartLight: Lamp
 Brightness: 75
 Color: White
 Status: On
"""

LAMP2 = """SmartLight: Lamp2
 Brightness: 100
 Color: Green
 Status: Off
"""

THERMOSTAT = """SmartThermostat: Thermostat
 Current Temperature: 20
 Desired Temperature: 22.5, Status: On
"""

DEMO_TRANSCRIPT = (
    "Lamp is on.\n"
    "Thermostat is on.\n"
    "\n-- All properties --\n" + LAMP + LAMP2 + THERMOSTAT
    + "\n-- Sorted by energy --\n" + LAMP2 + LAMP + THERMOSTAT
    + "\n-- Sorted by name --\n" + LAMP + LAMP2 + THERMOSTAT
    + "\n-- Reflection: Information for the device --\n"
    + LIGHT_INFO + LIGHT_INFO + THERMOSTAT_INFO
)


def test_run_demo_produces_full_transcript() -> None:
    container = init_container(AppSettings())
    sink = BufferedOutputSink()
    container.output_sink.override(providers.Object(sink))

    home = run_demo(container)

    assert sink.getvalue() == DEMO_TRANSCRIPT
    assert [device.name for device in home] == ["Lamp", "Lamp2", "Thermostat"]
    assert [device.is_on for device in home] == [True, False, True]


def test_main_prints_transcript_to_stdout(monkeypatch, capsys) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("LOG_FILE_PATH", raising=False)

    main()

    captured = capsys.readouterr()
    assert captured.out == DEMO_TRANSCRIPT

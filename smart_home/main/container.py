"""
Dependency container injection module - Main Layer

This module implements the dependency injection container that wires
the output sink into every device, the smart home and the use cases.
"""

from dependency_injector import containers, providers

from smart_home.application.use_cases.device_use_cases import (
    DescribeDevicesUseCase,
    DisplayDevicesStatusUseCase,
    SortDevicesUseCase,
)
from smart_home.domain.entities.device import SmartLight, SmartThermostat
from smart_home.domain.entities.home import SmartHome
from smart_home.domain.services.device_introspector import DeviceIntrospector
from smart_home.infrastructure.output import ConsoleOutputSink
from smart_home.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..application"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    output_sink = providers.Singleton(ConsoleOutputSink)

    # Domain
    device_introspector = providers.Singleton(DeviceIntrospector)

    smart_light = providers.Factory(SmartLight, output=output_sink)

    smart_thermostat = providers.Factory(SmartThermostat, output=output_sink)

    smart_home = providers.Factory(
        SmartHome,
        output=output_sink,
        introspector=device_introspector,
    )

    # Application (use cases)
    display_devices_status_use_case = providers.Factory(
        DisplayDevicesStatusUseCase,
        output=output_sink,
    )

    sort_devices_use_case = providers.Factory(SortDevicesUseCase)

    describe_devices_use_case = providers.Factory(
        DescribeDevicesUseCase,
        introspector=device_introspector,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.debug("container.initialized", environment=settings.environment.value)
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container

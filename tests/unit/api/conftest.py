from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.lms.api.http.app import create_app
from src.lms.api.http.app_data import ApplicationDependencies
from src.lms.core.services import AlipayGateway, DbSessionService
from src.lms.runtime.config.config_data import ConfigData, LibraryConfig


@pytest.fixture
def app_config() -> ConfigData:
    return ConfigData(library=LibraryConfig(page_size=2))


@pytest.fixture
def app_dependencies(
    app_config: ConfigData, db_service: DbSessionService, alipay_gateway: AlipayGateway
) -> ApplicationDependencies:
    return ApplicationDependencies.build(
        app_config, database_service=db_service, payment_gateway=alipay_gateway
    )


@pytest.fixture
def client(app_config, app_dependencies) -> Generator[TestClient]:
    app = create_app(app_config, dependencies=app_dependencies)
    with TestClient(app) as client:
        yield client

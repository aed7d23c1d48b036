from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from growth_calc.app import create_app
from growth_calc.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(log_level="DEBUG")


@pytest.fixture()
def app(settings: Settings):
    flask_app = create_app(settings)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client

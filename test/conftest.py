import pytest
from rangekit import formatting_settings


@pytest.fixture(autouse=True)
def factory_formatting_settings():
    # tests that change the formatting settings must not leak them into other tests
    formatting_settings.restore_factory_defaults()
    yield
    formatting_settings.restore_factory_defaults()

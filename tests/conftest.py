import pytest
from capsink.sink import CapturingSink


@pytest.fixture
def sink():
    return CapturingSink()


@pytest.fixture
def project(tmp_path):
    """Project directory holding a default configuration file."""
    from capsink.cli import conf
    conf.dump_default(tmp_path.joinpath(conf.CONF_NAME))
    return tmp_path

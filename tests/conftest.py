"""
Pytest configuration and shared fixtures for igc2csv tests
"""
import pytest


@pytest.fixture
def sample_igc_content():
    """Sample IGC file content for testing"""
    return """AXCS001
HFDTE161119
HFPLTPILOT:Test Pilot
B2311514647828N12025941WA0083900950
LXCSCOMMENT
B2311524530000N12015000WV0084000951
GABCDEF0123456789
"""


@pytest.fixture
def sample_igc_file(tmp_path, sample_igc_content):
    """Create a temporary IGC file for testing"""
    igc_file = tmp_path / "test_flight.igc"
    igc_file.write_text(sample_igc_content)
    return igc_file


@pytest.fixture
def sample_config_content():
    """Sample configuration file content"""
    return """[Defaults]
Delimiter = ;
IncludeValidity = yes
"""


@pytest.fixture
def sample_config_file(tmp_path, sample_config_content):
    """Create a temporary config file for testing"""
    config_file = tmp_path / "test_config.conf"
    config_file.write_text(sample_config_content)
    return config_file


@pytest.fixture
def mock_cli_args():
    """Mock command-line arguments for testing"""
    class MockArgs:
        def __init__(self):
            self.config = None
            self.output = None
            self.delimiter = None
            self.validity = False
            self.verbose = False
            self.trackfile = None

    return MockArgs()

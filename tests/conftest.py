import pytest

from app import app as flask_app
from sample_rosters import create_sample_rosters


@pytest.fixture
def roster_paths(tmp_path):
    return create_sample_rosters(str(tmp_path))


@pytest.fixture
def client(roster_paths):
    gpa_path, attachment_path = roster_paths
    flask_app.config.update(
        TESTING=True,
        GPA_DATA_PATH=gpa_path,
        ATTACHMENT_DATA_PATH=attachment_path,
    )
    with flask_app.test_client() as client:
        yield client


@pytest.fixture
def write_csv():
    def _write(path, text):
        path.write_text(text, encoding='utf-8')
        return str(path)
    return _write

import json
import logging

from errors import FixtureNotFoundError, MalformedFixtureError
from settings import DATA_DIR

log = logging.getLogger("content_server")


def fixture_path(filename):
    data_dir = DATA_DIR.resolve()
    path = (data_dir / filename).resolve()
    if data_dir not in path.parents:
        raise FixtureNotFoundError(filename)
    return path


def read_fixture(filename):
    """Read and parse ``data/<filename>``. Nothing is cached; every call hits the disk."""
    path = fixture_path(filename)
    try:
        text = path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        raise FixtureNotFoundError(filename)
    except UnicodeDecodeError as e:
        raise MalformedFixtureError(filename, str(e))

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedFixtureError(filename, str(e))

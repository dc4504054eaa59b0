"""
Pytest configuration and shared fixtures.
"""
import io
import sys
from pathlib import Path

import pytest

# Add src to Python path for test imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from hunkfilter.models import FilterConfig  # noqa: E402

TWO_FILE_DIFF = (
    b"diff --git a/one.txt b/one.txt\n"
    b"--- a/one.txt\n"
    b"+++ b/one.txt\n"
    b"@@ -1,3 +1,3 @@\n"
    b" keep me\n"
    b"-old line\n"
    b"+new foo line\n"
    b"--- a/two.txt\n"
    b"+++ b/two.txt\n"
    b"@@ -1,2 +1,2 @@\n"
    b" unchanged\n"
    b"-was\n"
    b"+now bar\n"
)


@pytest.fixture
def config():
    return FilterConfig()


@pytest.fixture
def output():
    return io.BytesIO()


@pytest.fixture
def two_file_diff():
    return TWO_FILE_DIFF

import os

import pytest

if hasattr(pytest, "register_assert_rewrite"):
    pytest.register_assert_rewrite("kosutils.testsuite")

# Ensure that the loggers exist for all tests
from kosutils.logger import setup_logging  # noqa: E402

setup_logging()

from kosutils.platformflags import is_win32  # noqa: E402
from kosutils.testsuite import fakeroot_detected, has_passwd_db  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(tmpdir_factory, monkeypatch):
    # also avoid to use anything from the outside environment:
    keys = [key for key in os.environ if key.startswith("KOS_")]
    for key in keys:
        monkeypatch.delenv(key, raising=False)
    # avoid that we access / modify the user's normal config directory:
    monkeypatch.setenv("KOS_BASE_DIR", str(tmpdir_factory.mktemp("kos-base-dir")))


def pytest_report_header(config, start_path):
    tests = {
        "passwd/group db": has_passwd_db(),
        "root": not fakeroot_detected(),
        "colors": not is_win32,
    }
    enabled = [test for test in tests if tests[test]]
    disabled = [test for test in tests if not tests[test]]
    output = "Tests enabled: " + ", ".join(enabled) + "\n"
    output += "Tests disabled: " + ", ".join(disabled)
    return output

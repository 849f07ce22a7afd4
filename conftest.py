import pytest


def pytest_addoption(parser):
    group = parser.getgroup("docpatch")
    group.addoption("--quick", action="store_true",
                    default=False, help="skip slow tests")
    group.addoption("--slow", action="store_true",
                    default=False, help="only run slow tests")


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: patches and queries over large generated documents")


def pytest_collection_modifyitems(config, items):
    quick = config.getoption("--quick")
    only_slow = config.getoption("--slow")
    if not (quick or only_slow):
        return
    skip_slow = pytest.mark.skip(reason="skipping slow tests (--quick)")
    skip_quick = pytest.mark.skip(reason="skipping all tests that are not slow (--slow)")
    for item in items:
        is_slow = "slow" in item.keywords
        if quick and is_slow:
            item.add_marker(skip_slow)
        elif only_slow and not is_slow:
            item.add_marker(skip_quick)

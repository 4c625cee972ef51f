import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    # configure_logging binds a handler to the stderr of the test that called it.
    yield
    pkg = logging.getLogger("pack_search")
    for handler in list(pkg.handlers):
        pkg.removeHandler(handler)
    pkg.setLevel(logging.NOTSET)
    pkg.propagate = True

import logging

import pytest

from randkit.utils.logger import set_global_log_level
from randkit.utils.providers import fast_provider, make_generator, server_provider


@pytest.fixture(autouse=True)
def reset_streams():
    # CLI runs reconfigure the shared streams, put them back for every test
    fast_provider.configure("MT19937")
    server_provider.configure("PCG64")
    server_provider.reset(forget_seed=True)
    yield
    fast_provider.configure("MT19937")
    server_provider.configure("PCG64")
    server_provider.reset(forget_seed=True)
    set_global_log_level(logging.INFO)


@pytest.fixture
def gen():
    return make_generator(seed=20240601)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("RANDKIT_FAST_SEED", "RANDKIT_SERVER_SEED",
                 "RANDKIT_FAST_BIT_GENERATOR", "RANDKIT_SERVER_BIT_GENERATOR"):
        monkeypatch.delenv(name, raising=False)

import pytest

from oauthsign import Signer

from .fixtures import fill_signer, NONCE, TIMESTAMP


@pytest.fixture
def twitter_signer():
    """Signer loaded with the example request from Twitter's signing guide."""
    signer = fill_signer(Signer())
    signer.set_nonce(NONCE)
    signer.set_timestamp(TIMESTAMP)
    yield signer
    signer.destroy()


@pytest.fixture
def counting_random():
    """Deterministic random source which counts how often it is read."""
    class CountingRandom:
        def __init__(self):
            self.calls = 0

        def __call__(self, n: int) -> bytes:
            self.calls += 1
            return bytes((self.calls + i) % 256 for i in range(n))

    return CountingRandom()

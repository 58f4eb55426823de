"""Shared fixtures. RSA key generation is slow, so key pairs are session-scoped."""
import io

import pytest
from rich.console import Console

from rxsign.common.sample import sample_prescription
from rxsign.crypto.keys import generate_key_pair


@pytest.fixture(scope="session")
def key_pair():
    return generate_key_pair(2048)


@pytest.fixture(scope="session")
def other_key_pair():
    return generate_key_pair(2048)


@pytest.fixture
def prescription():
    return sample_prescription()


@pytest.fixture
def console_buffer():
    buf = io.StringIO()
    console = Console(file=buf, highlight=False, soft_wrap=True, color_system=None, width=200)
    return console, buf

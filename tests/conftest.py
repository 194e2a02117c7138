import os
import sys

import pytest

# Project root holds main.py and pbkdf2_mod/.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def veyron_args():
    """Hash type, salt, iterations and password used by the salt demo."""
    return ["1", "81726354", "123456", "Veyron"]

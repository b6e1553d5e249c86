"""Global configuration for pytest"""

import numpy as np
import pytest


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """
    Ensure any numerical errors raise in our test suite, so that such
    cases are handled explicitly in our code.
    """
    np.seterr(all="raise")

"""
Property tests exercise pure code only, so the function-scoped config
isolation from the root conftest is replaced by a module-scoped no-op
(Hypothesis rejects function-scoped fixtures around @given tests).
"""

import pytest


@pytest.fixture(scope="module", autouse=True)
def isolated_config():
    yield None

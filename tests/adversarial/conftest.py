"""
Shared fixtures for adversarial tests.

Concurrency tests run against the in-memory adapters so they need no
database; the store-level guarantees they check mirror the PostgreSQL
constraints.
"""

import pytest

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial

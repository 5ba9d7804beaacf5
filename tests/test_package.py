"""
Basic package tests to ensure FastBatch can be imported and basic functionality works.
"""

import fast_batch


def test_package_version():
    """Test that package version is accessible."""
    assert hasattr(fast_batch, '__version__')
    assert fast_batch.__version__ == "0.1.0"


def test_package_metadata():
    """Test that all expected metadata is present."""
    assert hasattr(fast_batch, '__author__')
    assert hasattr(fast_batch, '__email__')
    assert hasattr(fast_batch, '__license__')
    assert hasattr(fast_batch, '__url__')

    assert fast_batch.__license__ == "MIT"


def test_public_api_is_exported():
    for name in ("BatchCommand", "BatchContext", "CommandDefinition", "Outcome", "run_batch", "Verbosity"):
        assert hasattr(fast_batch, name)

    assert fast_batch.Outcome.OK == fast_batch.EXIT_CODE_OK == 0
    assert fast_batch.Outcome.KO == fast_batch.EXIT_CODE_KO == 1

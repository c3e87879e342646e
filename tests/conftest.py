"""
Pytest configuration for multi-backend testing.

This file sets up automatic parametrization for test classes that inherit from
MultiBackendTestBase.
"""

from tests.framework.multi_backend_base import MultiBackendTestBase


def pytest_generate_tests(metafunc):
    """
    Pytest hook to automatically parametrize the 'api' fixture for MultiBackendTestBase subclasses.

    Every test method in such a class runs against all enabled backends.
    """
    if (metafunc.cls is not None and
            issubclass(metafunc.cls, MultiBackendTestBase) and
            'api' in metafunc.fixturenames):

        backends = metafunc.cls.get_available_backends()

        metafunc.parametrize(
            'api',
            backends,
            indirect=True,
            ids=[f"backend-{b}" for b in backends]
        )

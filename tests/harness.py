"""Test harness for container-backed tests.

Every mockable component (relayer, ipfs) is mocked unless unmocked
explicitly; real components expect the services to be reachable at the
configured URLs.
"""

import pytest_asyncio

from agora.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_get_comments(unit_env):
            index = await unit_env.get(CommentIndex)
            index.add_records(1, 1, [make_record(1)])
            use_case = await unit_env.get(GetCommentsUseCase)
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment

"""
Unit tests for the last-response cache.
"""

import pytest
import json
from unittest.mock import AsyncMock, MagicMock, patch
from redis.exceptions import ConnectionError as RedisConnectionError

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from service_strings.app.caching.response_cache import LastResponseCache
from shared.errors import ExternalServiceError


class TestLastResponseCache:
    """Test cases for LastResponseCache."""

    @pytest.mark.asyncio
    async def test_set_then_get(self, cache, fake_redis):
        response = {"odd": ["s", "l", "t", "m"], "even": ["p", "i", " ", "e"]}

        await cache.set("john.doe", response)

        assert json.loads(fake_redis.store["last_response:john.doe"]) == response
        assert await cache.get("john.doe") == response

    @pytest.mark.asyncio
    async def test_miss_returns_none(self, cache):
        assert await cache.get("nobody") is None

    @pytest.mark.asyncio
    async def test_overwrites_previous_entry(self, cache, fake_redis):
        await cache.set("john.doe", {"odd": ["a"], "even": []})
        await cache.set("john.doe", {"string": "a"})

        assert await cache.get("john.doe") == {"string": "a"}
        assert list(fake_redis.store) == ["last_response:john.doe"]

    @pytest.mark.asyncio
    async def test_read_does_not_delete(self, cache):
        await cache.set("john.doe", {"string": "a"})

        await cache.get("john.doe")

        assert await cache.get("john.doe") == {"string": "a"}

    @pytest.mark.asyncio
    async def test_users_are_isolated(self, cache):
        await cache.set("john.doe", {"string": "a"})
        await cache.set("jane.smith", {"string": "b"})

        assert await cache.get("john.doe") == {"string": "a"}
        assert await cache.get("jane.smith") == {"string": "b"}

    @pytest.mark.asyncio
    async def test_custom_prefix_and_ttl(self, fake_redis):
        cache = LastResponseCache("redis://localhost:6379/0", key_prefix="strings:", ttl_seconds=60, client=fake_redis)

        await cache.set("john.doe", {"string": "a"})

        assert fake_redis.ttls == {"strings:john.doe": 60}

    @pytest.mark.asyncio
    async def test_none_response_stored_as_empty_object(self, cache):
        await cache.set("john.doe", None)

        assert await cache.get("john.doe") == {}

    @pytest.mark.asyncio
    async def test_get_failure_raises_external_service_error(self):
        client = MagicMock()
        client.get = AsyncMock(side_effect=RedisConnectionError("refused"))
        metrics = MagicMock()
        cache = LastResponseCache("redis://localhost:6379/0", metrics=metrics, client=client)

        with pytest.raises(ExternalServiceError) as exc_info:
            await cache.get("john.doe")

        assert exc_info.value.status_code == 503
        metrics.increment_counter.assert_called_once_with("cache_operations_total", operation="get", result="error")

    @pytest.mark.asyncio
    async def test_set_failure_raises_external_service_error(self):
        client = MagicMock()
        client.set = AsyncMock(side_effect=RedisConnectionError("refused"))
        cache = LastResponseCache("redis://localhost:6379/0", client=client)

        with pytest.raises(ExternalServiceError):
            await cache.set("john.doe", {"string": "a"})

    @pytest.mark.asyncio
    async def test_health_check(self, cache):
        assert await cache.health_check() is True

    @pytest.mark.asyncio
    async def test_health_check_failure(self):
        client = MagicMock()
        client.ping = AsyncMock(side_effect=RedisConnectionError("refused"))
        cache = LastResponseCache("redis://localhost:6379/0", client=client)

        assert await cache.health_check() is False

    @pytest.mark.asyncio
    async def test_client_created_lazily_from_url(self):
        with patch("service_strings.app.caching.response_cache.redis.from_url") as mock_from_url:
            mock_from_url.return_value.get = AsyncMock(return_value=None)
            cache = LastResponseCache("redis://cache.internal:6380/2")

            mock_from_url.assert_not_called()
            assert await cache.get("john.doe") is None
            assert mock_from_url.call_args.args == ("redis://cache.internal:6380/2",)

    @pytest.mark.asyncio
    async def test_stop_closes_client(self, cache, fake_redis):
        await cache.stop()

        assert fake_redis.closed is True
        assert cache.redis is None

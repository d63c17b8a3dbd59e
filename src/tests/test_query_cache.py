"""
Test suite for QueryCache component
Following TDD approach with AAA pattern and descriptive naming
"""

import pytest
from hal_adapter.query_cache import QueryCache
from hal_adapter.find_params import FindKind, FindParams


class TestQueryCache:
    """Test suite for QueryCache memoisation functionality"""

    def test_get_with_nonexistent_key_returns_none(self):
        """
        Test that cache miss returns None for non-existent keys
        """
        # Arrange
        cache = QueryCache()

        # Act
        result = cache.get("nonexistent_key")

        # Assert
        assert result is None
        assert "nonexistent_key" not in cache

    def test_put_then_get_returns_equal_entry(self):
        """
        Test that a stored entry is returned on a later hit
        """
        # Arrange
        cache = QueryCache()
        entry = [{'id': 1, 'name': 'ann'}]

        # Act
        cache.put("key", entry)
        result = cache.get("key")

        # Assert
        assert result == entry
        assert len(cache) == 1

    def test_get_returns_copy_so_callers_cannot_alter_entry(self):
        """
        Test that mutating a returned entry leaves the stored entry intact
        """
        # Arrange
        cache = QueryCache()
        cache.put("key", [{'id': 1}])

        # Act
        cache.get("key")[0]['id'] = 99

        # Assert
        assert cache.get("key") == [{'id': 1}]

    def test_put_with_existing_key_keeps_first_entry(self):
        """
        Test that entries are never replaced once stored
        """
        # Arrange
        cache = QueryCache()
        cache.put("key", [{'id': 1}])

        # Act
        cache.put("key", [{'id': 2}])

        # Assert
        assert cache.get("key") == [{'id': 1}]

    def test_generate_cache_key_with_reordered_params_returns_same_key(self):
        """
        Test that parameter insertion order does not affect the key
        """
        # Arrange
        params1 = {'count': 10, 'page': 1, 'filter': {'a': 1, 'b': 2}}
        params2 = {'filter': {'b': 2, 'a': 1}, 'page': 1, 'count': 10}

        # Act
        key1 = QueryCache.generate_cache_key(FindKind.ALL, params1)
        key2 = QueryCache.generate_cache_key(FindKind.ALL, params2)

        # Assert
        assert key1 == key2
        assert len(key1) == 32

    def test_generate_cache_key_with_typed_params_matches_plain_dict(self):
        """
        Test that FindParams and an equal dict produce the same key
        """
        # Arrange
        typed = FindParams(count=5, filters={'status': 'active'})
        plain = {'status': 'active', 'count': 5}

        # Act & Assert
        assert QueryCache.generate_cache_key('all', typed) == QueryCache.generate_cache_key('all', plain)

    @pytest.mark.parametrize("kind1,params1,kind2,params2", [
        (FindKind.ALL, {'page': 1}, FindKind.ALL, {'page': 2}),
        (FindKind.ALL, {'id': 1}, FindKind.FIRST, {'id': 1}),
        (FindKind.ALL, {'page': 1}, FindKind.ALL, {'page': '1'}),
    ])
    def test_generate_cache_key_with_different_requests_returns_different_keys(self, kind1, params1, kind2, params2):
        """
        Test that differing kinds or parameter values yield different keys
        """
        # Act & Assert
        assert QueryCache.generate_cache_key(kind1, params1) != QueryCache.generate_cache_key(kind2, params2)

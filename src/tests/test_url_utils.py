"""
Test suite for URL helpers
Following TDD approach with AAA pattern and descriptive naming
"""

import pytest
from hal_adapter.url_utils import encode_query_params, parse_query_params


class TestParseQueryParams:
    """Test suite for turning links into parameter mappings"""

    def test_parse_query_params_with_flat_query_returns_typed_mapping(self):
        """
        Test that integer strings become ints and other values stay strings
        """
        # Act
        result = parse_query_params("https://api.test.com/v2/users?count=max&page=2")

        # Assert
        assert result == {'count': 'max', 'page': 2}

    def test_parse_query_params_keeps_leading_zero_values_as_strings(self):
        """
        Test that lossy integer conversions are not applied
        """
        # Act
        result = parse_query_params("/users?zip=01234")

        # Assert
        assert result == {'zip': '01234'}

    def test_parse_query_params_with_bracket_notation_builds_nested_values(self):
        """
        Test that bracketed keys expand into dicts and lists
        """
        # Act
        result = parse_query_params("/users?filter[name]=ann&filter[city]=Brussels&ids[]=1&ids[]=2")

        # Assert
        assert result == {'filter': {'name': 'ann', 'city': 'Brussels'}, 'ids': [1, 2]}

    @pytest.mark.parametrize("url", [
        "https://api.test.com/v2/users",
        "",
        None,
    ])
    def test_parse_query_params_without_query_returns_false(self, url):
        """
        Test that links without a query string are unusable
        """
        # Act & Assert
        assert parse_query_params(url) is False

    def test_parse_query_params_with_only_nameless_fields_returns_false(self):
        """
        Test that a query without a single named field is unusable
        """
        # Act & Assert
        assert parse_query_params("/users?&&=") is False

    def test_parse_query_params_with_empty_segments_skips_them(self):
        """
        Test that loosely formatted links still yield their parameters
        """
        # Act
        result = parse_query_params("https://api.test.com/v2/users?count=2&&page=3&")

        # Assert
        assert result == {'count': 2, 'page': 3}


class TestEncodeQueryParams:
    """Test suite for encoding nested parameters"""

    def test_encode_query_params_with_nested_values_uses_bracket_notation(self):
        """
        Test that nested mappings and lists flatten to bracketed pairs
        """
        # Arrange
        params = {'filter': {'name': 'ann'}, 'ids': [1, 2], 'active': True, 'skip': None}

        # Act
        result = encode_query_params(params)

        # Assert
        assert result == [
            ('filter[name]', 'ann'),
            ('ids[]', '1'),
            ('ids[]', '2'),
            ('active', 'true'),
        ]

    def test_encode_then_parse_restores_parameters(self):
        """
        Test that parsing a link built from encoded params gives them back
        """
        # Arrange
        params = {'count': 10, 'page': 3, 'filter': {'status': 'open'}}
        query = '&'.join(f"{key}={value}" for key, value in encode_query_params(params))

        # Act
        result = parse_query_params(f"/tickets?{query}")

        # Assert
        assert result == params

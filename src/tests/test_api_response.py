"""
Test suite for APIResponse container
Following TDD approach with AAA pattern and descriptive naming
"""

import pytest
from hal_adapter.api_response import APIResponse, ResultLevel, result_level_for_status
from hal_adapter.find_params import FindKind


class TestResultLevel:
    """Test suite for HTTP status to result level mapping"""

    @pytest.mark.parametrize("status_code,expected", [
        (200, ResultLevel.SUCCESS),
        (201, ResultLevel.SUCCESS),
        (204, ResultLevel.SUCCESS),
        (404, ResultLevel.SUCCESS),
        (400, ResultLevel.VALIDATION_ERROR),
        (422, ResultLevel.VALIDATION_ERROR),
        (401, ResultLevel.FAILURE),
        (500, ResultLevel.FAILURE),
        (503, ResultLevel.FAILURE),
    ])
    def test_result_level_for_status_maps_codes(self, status_code, expected):
        """
        Test that HTTP codes map onto the expected result level
        """
        # Act & Assert
        assert result_level_for_status(status_code) is expected


class TestAPIResponse:
    """Test suite for APIResponse parsing, cursor and result shapes"""

    def test_from_payload_with_collection_splits_elements_and_metadata(self):
        """
        Test that embedded items become elements and the rest metadata
        """
        # Arrange
        payload = {
            '_embedded': {'users': [{'id': 1}, {'id': 2}]},
            'total_items': 42,
            '_links': {'next': {'href': '/users?page=2'}}
        }

        # Act
        response = APIResponse.from_payload(payload, status_code=200, find_type=FindKind.ALL)

        # Assert
        assert response.elements == [{'id': 1}, {'id': 2}]
        assert response.get_total_items() == 42
        assert response.get_link('next') == '/users?page=2'
        assert response.get_link('previous') is None
        assert '_embedded' not in response.collection_metadata
        assert response.is_result_success()

    def test_from_payload_with_single_resource_keeps_body_as_element(self):
        """
        Test that a non-collection body becomes the only element
        """
        # Arrange
        payload = {'id': 5, '_embedded': {'tags': [{'name': 'x'}]}}

        # Act
        response = APIResponse.from_payload(payload, 200, FindKind.FIRST, collection=False)

        # Assert
        assert response.elements == [payload]
        assert response.collection_metadata == {}

    def test_from_payload_with_error_status_has_no_elements(self):
        """
        Test that failed calls keep the body but expose no elements
        """
        # Arrange
        payload = {'title': 'Service Unavailable'}

        # Act
        response = APIResponse.from_payload(payload, 503, FindKind.ALL)

        # Assert
        assert response.elements == []
        assert response.raw_data == payload
        assert response.is_result_failure()

    def test_from_payload_with_not_found_status_is_empty_success(self):
        """
        Test that a 404 lookup is an empty, successful result
        """
        # Act
        response = APIResponse.from_payload({'title': 'Not Found'}, 404, FindKind.FIRST, collection=False)

        # Assert
        assert response.is_result_success()
        assert response.get_result_data_according_find_type() == {}

    def test_transport_failure_is_failure_without_elements(self):
        """
        Test the synthesised response for calls that never completed
        """
        # Act
        response = APIResponse.transport_failure()

        # Assert
        assert response.is_result_failure()
        assert response.status_code == 0
        assert not response.valid()

    def test_cursor_walk_and_set_current_replaces_in_place(self):
        """
        Test that set_current rewrites the element under the cursor only
        """
        # Arrange
        response = APIResponse(elements=['a', 'b', 'c'])

        # Act
        response.rewind()
        response.next()
        response.set_current('B')

        # Assert
        assert response.elements == ['a', 'B', 'c']
        assert response.current() == 'B'

    def test_iteration_exhausts_cursor_and_rewind_restores_it(self):
        """
        Test that iteration leaves the cursor invalid until rewound
        """
        # Arrange
        response = APIResponse(elements=[1, 2])

        # Act
        walked = list(response)

        # Assert
        assert walked == [1, 2]
        assert not response.valid()
        response.rewind()
        assert response.valid()

    def test_set_current_without_valid_cursor_raises_index_error(self):
        """
        Test that replacing past the end is rejected
        """
        # Arrange
        response = APIResponse(elements=[])

        # Act & Assert
        with pytest.raises(IndexError):
            response.set_current('x')

    def test_copy_returns_independent_value(self):
        """
        Test that changes to the original do not leak into its copy
        """
        # Arrange
        response = APIResponse(elements=[{'id': 1}], collection_metadata={'total_items': 1})
        snapshot = response.copy()

        # Act
        response.elements[0]['id'] = 2
        response.collection_metadata['total_items'] = 9

        # Assert
        assert snapshot.elements == [{'id': 1}]
        assert snapshot.get_total_items() == 1

    @pytest.mark.parametrize("find_type,expected", [
        (FindKind.ALL, [{'id': 1}, {'id': 2}]),
        (FindKind.FIRST, {'id': 1}),
        (FindKind.COUNT, 7),
    ])
    def test_result_data_according_find_type_selects_shape(self, find_type, expected):
        """
        Test that the find kind selects list, record or count
        """
        # Arrange
        response = APIResponse(
            find_type=find_type,
            elements=[{'id': 1}, {'id': 2}],
            collection_metadata={'total_items': 7}
        )

        # Act & Assert
        assert response.get_result_data_according_find_type() == expected

    def test_result_data_for_raw_returns_untouched_payload(self):
        """
        Test that RAW responses hand back the payload as received
        """
        # Arrange
        payload = {'id': 3, '_links': {'self': {'href': '/users/3'}}}
        response = APIResponse.from_payload(payload, 201, FindKind.RAW, collection=False)

        # Act & Assert
        assert response.get_result_data_according_find_type() == payload

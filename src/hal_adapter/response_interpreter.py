"""
ResponseInterpreter module converting raw responses into caller-facing results
"""

from typing import Any, Callable

from hal_adapter.api_response import APIResponse
from hal_adapter.hal import HALOperations


class ResponseInterpreter:
    """Flattens HAL elements and extracts the result shape for the find kind"""

    def __init__(self, flattener: Callable[[Any], Any] = HALOperations.interpret_hal_logic_to_simple_dict):
        self.flattener = flattener

    def interpret(self, response: APIResponse) -> Any:
        """
        Interpret a classified response

        Each element is flattened in place, preserving order. Responses
        without elements skip flattening and yield the empty shape.

        Args:
            response: Response that passed error classification

        Returns:
            list, single record, count or raw payload depending on find kind
        """
        response.rewind()
        if response.valid():
            for element in response:
                response.set_current(self.flattener(element))

        return response.get_result_data_according_find_type()

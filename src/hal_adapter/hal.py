"""
HAL flattening helpers
"""

from typing import Any


class HALOperations:
    """Turns HAL resources into plain records"""

    LINKS_KEY = '_links'
    EMBEDDED_KEY = '_embedded'

    @staticmethod
    def interpret_hal_logic_to_simple_dict(element: Any) -> Any:
        """
        Flatten one HAL element

        Link sections are dropped and embedded resources are lifted into
        plain keys of the record, recursively.

        Args:
            element: Raw HAL element, usually a dict

        Returns:
            Simplified record; non-dict values are returned unchanged
        """
        if isinstance(element, list):
            return [HALOperations.interpret_hal_logic_to_simple_dict(item) for item in element]
        if not isinstance(element, dict):
            return element

        simple = {}
        for key, value in element.items():
            if key == HALOperations.LINKS_KEY:
                continue
            if key == HALOperations.EMBEDDED_KEY and isinstance(value, dict):
                for name, embedded in value.items():
                    simple[name] = HALOperations.interpret_hal_logic_to_simple_dict(embedded)
                continue
            simple[key] = HALOperations.interpret_hal_logic_to_simple_dict(value)

        return simple

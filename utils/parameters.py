"""
Access to the parameter values a workflow passes into the node.
"""
from typing import Any, Dict, Optional

from node_description import get_property
from utils.exceptions import NodeParameterError


class NodeParameters:
    """Parameter values for one node invocation, backed by description defaults."""

    def __init__(self, values: Optional[Dict[str, Any]] = None) -> None:
        self.values: Dict[str, Any] = dict(values or {})

    @classmethod
    def from_event(cls, event: Any) -> "NodeParameters":
        """
        Build parameters from a handler event.

        The event is expected to look like {"parameters": {...}}; a missing
        or empty "parameters" key means every parameter takes its default.
        """
        if not isinstance(event, dict):
            raise NodeParameterError('Event must be a JSON object', value=event)
        values = event.get('parameters') or {}
        if not isinstance(values, dict):
            raise NodeParameterError(
                '"parameters" must be a JSON object', field='parameters', value=values
            )
        return cls(values)

    def get(self, name: str) -> Any:
        """
        Return the value of a parameter, falling back to its declared default.

        Raises:
            NodeParameterError: If the node declares no such parameter
        """
        try:
            prop = get_property(name)
        except KeyError:
            raise NodeParameterError(f'Unknown parameter "{name}"', field=name)

        value = self.values.get(name)
        if value is None:
            return prop['default']
        if prop['type'] == 'number':
            return self._to_number(name, value)
        return value

    def get_string(self, name: str) -> str:
        value = self.get(name)
        if not isinstance(value, str):
            raise NodeParameterError(
                f'Parameter "{name}" must be a string', field=name, value=value
            )
        return value.strip()

    def require_string(self, name: str) -> str:
        """Like get_string, but an empty value is an error."""
        value = self.get_string(name)
        if not value:
            raise NodeParameterError(f'Parameter "{name}" is required', field=name)
        return value

    @staticmethod
    def _to_number(name: str, value: Any) -> int:
        if isinstance(value, bool):
            raise NodeParameterError(
                f'Parameter "{name}" must be a number', field=name, value=value
            )
        if isinstance(value, int):
            return value
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise NodeParameterError(
                f'Parameter "{name}" must be a number', field=name, value=value
            )
        if not number.is_integer():
            raise NodeParameterError(
                f'Parameter "{name}" must be a whole number', field=name, value=value
            )
        return int(number)

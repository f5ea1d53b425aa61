"""
Base model for the Jira MCP API models.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model with the conversion methods shared by all API models.

    ``from_api_response`` builds the model from a raw vendor payload and
    ``to_simplified_dict`` renders it for tool responses.
    """

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a dictionary for tool responses.

        Returns:
            A dictionary keyed by field alias
        """
        return self.model_dump(by_alias=True, exclude_none=True)

"""Port for the push contact registry - driven/secondary port."""

from typing import Protocol


class PushContactRegistry(Protocol):
    """
    Port for removing push contacts from the registry.

    This is a driven (secondary) port that defines how the application
    deletes push contacts by their device tokens.
    """

    async def delete_by_device_tokens(self, device_tokens: list[str], token: str) -> int:
        """
        Delete the push contacts registered with the given device tokens.

        Args:
            device_tokens: Device tokens to delete, sent as given.
            token: Bearer credential for the registry.

        Returns:
            HTTP status code of the registry response.

        Raises:
            RegistryCallError: If the registry cannot be reached.
        """
        ...

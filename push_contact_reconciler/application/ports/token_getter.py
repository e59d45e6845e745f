"""Port for Push Contact API credentials - driven/secondary port."""

from typing import Protocol


class PushContactApiTokenGetter(Protocol):
    """
    Port for acquiring a bearer credential for the Push Contact API.

    This is a driven (secondary) port; implementations decide how the
    credential is obtained and cached.
    """

    async def get_token(self) -> str:
        """
        Acquire a bearer credential.

        Returns:
            The credential to send as ``Authorization: Bearer <token>``.

        Raises:
            CredentialFailureError: If no credential can be acquired.
        """
        ...

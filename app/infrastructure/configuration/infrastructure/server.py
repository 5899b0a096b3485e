"""Server infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP server runtime configuration.

    Environment Variables:
        HOST: Interface the HTTP server binds to (default: 127.0.0.1)
        PORT: Port the HTTP server listens on (default: 8000)

    Example:
        ```python
        from infrastructure.configuration import settings

        port = settings.server.PORT
        ```
    """

    HOST: str = Field(default="127.0.0.1", alias="HOST")
    PORT: int = Field(default=8000, alias="PORT")

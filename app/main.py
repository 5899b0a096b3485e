import uvicorn

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from server import server

server_app = server.handler
logger = get_module_logger()


def main():
    """Serve the language negotiation API."""
    logger.info(
        "server_starting",
        host=settings.server.HOST,
        port=settings.server.PORT,
    )
    uvicorn.run(server_app, host=settings.server.HOST, port=settings.server.PORT)


if __name__ == "__main__":
    main()

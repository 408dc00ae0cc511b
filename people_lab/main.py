"""
People Lab
==========

Console entry point: connect, run the walkthrough, always disconnect.
"""
import logging

from people_lab.core.logging_config import setup_logging
from people_lab.di import get_container, reset_container
from people_lab.application.services.people_lab_service import PeopleLabService

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the document-database walkthrough against the configured server."""
    setup_logging()
    
    container = get_container()
    mongo_client = container.get("mongo_client")
    service = container.get(PeopleLabService)
    
    try:
        service.run_demo()
    finally:
        mongo_client.close()
        # Repositories hold collections of the closed client
        reset_container()
    
    logger.info("Walkthrough finished")


if __name__ == "__main__":
    main()

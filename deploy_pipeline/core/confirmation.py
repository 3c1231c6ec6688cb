"""Confirmation gate before any destructive step"""

import logging

from ..exceptions import ConfirmationRejectedError
from .interfaces import UserInterface

logger = logging.getLogger(__name__)


class ConfirmationGate:
    """Single yes/no checkpoint between diffing and release processing"""

    def __init__(self, ui: UserInterface):
        self.ui = ui

    def confirm(self, deployment_name: str) -> None:
        """
        Ask the user to confirm updating the deployment

        Args:
            deployment_name: Deployment being updated (for logs)

        Raises:
            ConfirmationRejectedError: If the user rejects or the prompt fails
        """
        try:
            self.ui.ask_for_confirmation()
        except ConfirmationRejectedError:
            logger.info("Update of '%s' was not confirmed", deployment_name)
            raise
        except Exception as e:
            logger.info("Update of '%s' was not confirmed: %s", deployment_name, e)
            raise ConfirmationRejectedError(str(e) or "Confirmation failed") from e

        logger.info("Update of '%s' confirmed", deployment_name)

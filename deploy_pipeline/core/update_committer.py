"""Final update invocation"""

import logging
from typing import Optional

from ..exceptions import UpdateError
from ..models import UpdateRequest
from .interfaces import RecordStore, read_deployment_name

logger = logging.getLogger(__name__)


class UpdateCommitter:
    """Hand the final manifest to the record store, exactly once"""

    def __init__(self, record_store: RecordStore):
        self.record_store = record_store

    def commit(self, request: UpdateRequest, deployment: Optional[str] = None) -> None:
        """
        Apply the update

        No retry and no compensating action is attempted.

        Args:
            request: Final manifest and update modifiers
            deployment: Deployment name, read from the record store when omitted

        Raises:
            RecordStoreError: If the deployment name cannot be read
            UpdateError: If the record store fails; its message is kept verbatim
        """
        if deployment is None:
            deployment = read_deployment_name(self.record_store)
        logger.info(
            "Updating deployment '%s' (recreate=%s, skip drain: %s)",
            deployment,
            request.recreate,
            request.skip_drain.describe()
        )
        try:
            self.record_store.update(request.manifest, request.recreate, request.skip_drain)
        except UpdateError:
            raise
        except Exception as e:
            raise UpdateError(deployment, str(e)) from e

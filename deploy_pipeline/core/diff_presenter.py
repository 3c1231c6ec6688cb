"""Manifest diff rendering"""

import logging
from typing import List

from ..constants import DIFF_PREFIX_ADDED, DIFF_PREFIX_REMOVED, DIFF_PREFIX_UNCHANGED
from ..exceptions import DiffFetchError
from ..models import ChangeMarker, DiffLine
from .interfaces import RecordStore, UserInterface

logger = logging.getLogger(__name__)

_PREFIXES = {
    ChangeMarker.UNCHANGED: DIFF_PREFIX_UNCHANGED,
    ChangeMarker.ADDED: DIFF_PREFIX_ADDED,
    ChangeMarker.REMOVED: DIFF_PREFIX_REMOVED,
}


def render_diff_line(line: DiffLine) -> str:
    """Render one diff line with its change prefix and terminator"""
    return f"{_PREFIXES[line.marker]}{line.text}\n"


class DiffPresenter:
    """Fetch the manifest diff from the record store and print it"""

    def __init__(self, record_store: RecordStore, ui: UserInterface):
        self.record_store = record_store
        self.ui = ui

    def fetch(self, manifest: bytes) -> List[DiffLine]:
        """
        Fetch diff lines for the manifest

        Raises:
            DiffFetchError: If the record store fails
        """
        try:
            return list(self.record_store.diff(manifest))
        except DiffFetchError:
            raise
        except Exception as e:
            raise DiffFetchError(str(e)) from e

    def present(self, manifest: bytes) -> List[DiffLine]:
        """
        Fetch and render the diff, in record store order

        Nothing is rendered when fetching fails.

        Returns:
            The rendered diff lines
        """
        lines = self.fetch(manifest)
        logger.debug("Rendering %d diff line(s)", len(lines))

        for line in lines:
            self.ui.say(render_diff_line(line))

        return lines

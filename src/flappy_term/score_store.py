"""
score_store.py: Persistence layer for the high score.
A single little-endian 32-bit signed integer in a binary file.
"""

import logging
import struct
from pathlib import Path
from typing import Optional, Union

from .constants import SCORE_FILE, SCORE_FORMAT

logger = logging.getLogger(__name__)


class ScoreStore:
    """Handles all reads and writes of the score file."""
    def __init__(self, path: Union[str, Path] = SCORE_FILE):
        self.path = Path(path)
        self._last_value: Optional[int] = None
        self._failed_value: Optional[int] = None

    def load(self) -> int:
        """Returns the stored high score, or 0 if the file is missing or unreadable."""
        try:
            data = self.path.read_bytes()
            (score,) = struct.unpack_from(SCORE_FORMAT, data)
        except (OSError, struct.error) as e:
            logger.debug("No usable score file at %s (%s), starting from 0", self.path, e)
            return 0
        self._last_value = score
        return score

    def save(self, score: int) -> bool:
        """
        Writes the score unless it matches what was last read or written.
        Returns False on a write failure; the error is logged once per value, not raised.
        """
        if score == self._last_value:
            return True
        try:
            self.path.write_bytes(struct.pack(SCORE_FORMAT, score))
        except (OSError, struct.error) as e:
            # Paused frames retry every tick; report each failing value once
            if score != self._failed_value:
                logger.error("Error saving score to %s: %s", self.path, e)
            else:
                logger.debug("Retry saving score to %s failed: %s", self.path, e)
            self._failed_value = score
            return False
        self._last_value = score
        self._failed_value = None
        logger.debug("Saved high score %d to %s", score, self.path)
        return True

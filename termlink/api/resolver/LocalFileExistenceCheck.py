"""Filesystem existence check run off the event loop."""

import asyncio
import os
import stat

from ...utils.logger import get_logger

logger = get_logger("resolver")


class LocalFileExistenceCheck:
    """Checks the local filesystem in a worker thread.

    Permission and I/O errors count as "does not exist".
    """

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self.is_file, path)

    @staticmethod
    def is_file(path: str) -> bool:
        try:
            return stat.S_ISREG(os.stat(path).st_mode)
        except FileNotFoundError:
            return False
        except (OSError, ValueError) as e:
            # OSError: permission denied, I/O failure
            # ValueError: embedded null byte
            logger.debug("Existence check failed for %r: %s", path, e)
            return False

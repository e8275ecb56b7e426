# mcqgen/core/storage.py
import logging
from typing import Any, Dict

from mcqgen.core.errors import PersistenceError
from mcqgen.utils.file_helpers import dump_json, write_text_atomic

logger = logging.getLogger(__name__)


class JsonFileStore:
    """
    Keeps the most recent generation result in a single JSON file.
    Every save overwrites the previous one; nothing is ever read back.
    """

    def __init__(self, path: str = "./mcqs.json"):
        self.path = path

    def save(self, result: Dict[str, Any]) -> str:
        try:
            write_text_atomic(self.path, dump_json(result))
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"failed to write {self.path}: {e!r}") from e
        logger.info("JSON saved to %s", self.path)
        return self.path

import os
import json
import tempfile
from typing import Any


def dump_json(payload: Any) -> str:
    # two-space indent, non-ASCII kept as-is; NaN/Infinity are not JSON and raise ValueError
    return json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False)


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_text_atomic(path: str, content: str, encoding: str = "utf-8") -> None:
    """
    Write `content` to a temp file next to `path`, then os.replace it into place.
    A failed write leaves any previous file untouched.
    The file ends up with the mode a plain open() would give it (0666 minus umask).
    """
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix=".tmp_", suffix=".json", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as fh:
            fh.write(content)
        os.chmod(tmp_path, _default_file_mode())
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise

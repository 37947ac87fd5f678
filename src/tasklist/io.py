import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .logs import get_logger
from .recovery import CorruptionError, FatalError, FileOperationError

log = get_logger("io")

def _cleanup(temp_path: Optional[str]):
    if temp_path is not None and os.path.exists(temp_path):
        try:
            os.unlink(temp_path)
            log.debug(f"Cleaned up temporary file: {temp_path}")
        except OSError as cleanup_error:
            log.warning(f"Could not clean up temp file {temp_path}: {cleanup_error}")

def atomic_write_json(file_path: Union[Path, str], data: Any) -> bool:
    """
    Serialize and save data to a JSON file using atomic updates.

    The document is written to a temporary file in the target directory and
    then moved over the target, so a failed write never truncates the
    previous contents.
    """
    file_path = Path(file_path)
    temp_path = None

    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', dir=file_path.parent,
                                         prefix=f".{file_path.name}.", suffix='.tmp', delete=False) as temp_file:
            temp_path = temp_file.name
            json.dump(data, temp_file, indent=2, ensure_ascii=False)
            temp_file.write("\n")
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_path, file_path)
        log.debug(f"Successfully saved JSON file: {file_path}")
        return True

    except (TypeError, ValueError) as e:
        _cleanup(temp_path)
        error_msg = (f"Data serialization failed for {file_path}. "
                     f"In-memory data may contain non-serializable types: {e}")
        log.critical(error_msg)
        raise FatalError(error_msg) from e

    except OSError as e:
        _cleanup(temp_path)
        error_msg = f"I/O error saving JSON file {file_path}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

def load_json_file(file_path: Union[Path, str]) -> Any:
    """
    Load and parse a JSON file.

    Returns:
        Parsed document, or None if the file does not exist
    """
    file_path = Path(file_path)
    if not file_path.exists():
        return None

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    except json.JSONDecodeError as e:
        # Syntax errors mean the file is corrupted
        raise CorruptionError(f"JSON syntax error in {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CorruptionError(f"{file_path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}") from e

def load_yaml_file(file_path: Union[Path, str]) -> Any:
    """Load and parse a YAML file, or return None if it does not exist."""
    file_path = Path(file_path)
    if not file_path.exists():
        return None

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)

    except yaml.YAMLError as e:
        raise CorruptionError(f"YAML syntax error in {file_path}: {e}") from e
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}") from e

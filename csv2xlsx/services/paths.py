"""Input discovery and output path derivation."""
from pathlib import Path
from typing import List, Optional

import structlog

from csv2xlsx.config import get_settings
from csv2xlsx.errors.exceptions import SourceUnavailableError

logger = structlog.get_logger(__name__)

OUTPUT_EXTENSION = ".xlsx"


def discover_csv_files(folder: str) -> List[str]:
    """List the delimited files directly inside a folder, sorted by name.

    Subdirectories are not searched.

    Raises:
        SourceUnavailableError: If the folder cannot be listed
    """
    extension = get_settings().input_extension.lower()
    try:
        entries = sorted(Path(folder).iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise SourceUnavailableError(f"cannot list folder {folder}: {e}", source=folder) from e

    files = [
        str(entry)
        for entry in entries
        if entry.is_file() and entry.name.lower().endswith(extension)
    ]
    logger.debug("csv_files_discovered", folder=folder, count=len(files))
    return files


def derive_output_path(
    input_path: str,
    output: Optional[str] = None,
    name: Optional[str] = None,
) -> Path:
    """Work out where a converted workbook should be written.

    An explicit output wins; a bare name is placed next to the input;
    otherwise the input's extension is swapped for .xlsx.
    """
    if output:
        return Path(output)
    source = Path(input_path)
    if name:
        return source.parent / f"{name}{OUTPUT_EXTENSION}"
    return source.with_suffix(OUTPUT_EXTENSION)

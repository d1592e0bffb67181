"""
Read the list of redirection URLs to validate
"""
from pathlib import Path
from typing import List, Union

from redirect_validator.errors import InputError
from redirect_validator.evaluator import ValidationTask
from redirect_validator.utils import setup_logging

logger = setup_logging(__name__)

def parse_tasks(lines: List[str]) -> List[ValidationTask]:
    """
    Parse URL list lines into tasks

    The first line is a header and is skipped. Every other line is
    "redirectionURL,destinationURL"; anything after a second comma is
    ignored. Blank lines are skipped.

    Args:
        lines: Lines of the URL list, header included

    Returns:
        Tasks in file order

    Raises:
        InputError: a line has no comma
    """
    tasks = []

    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue

        parts = line.split(',')
        if len(parts) < 2:
            raise InputError(f"Line {line_number} is not 'redirectionURL,destinationURL': {line.strip()!r}")

        tasks.append(ValidationTask(
            redirection_url=parts[0].strip(),
            destination_url=parts[1].strip(),
        ))

    return tasks

def load_tasks(path: Union[str, Path]) -> List[ValidationTask]:
    """
    Load tasks from a URL list file

    Args:
        path: Path of the text file

    Returns:
        Tasks in file order

    Raises:
        InputError: the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise InputError(f"Cannot read URL list {path}: {e}") from e

    tasks = parse_tasks(lines)
    logger.info(f"Read {len(tasks)} URL(s) from {path}")
    return tasks

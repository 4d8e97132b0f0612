import logging
import os
import re
from typing import Union

from src.dary_heap.dary_heap import KEY_MAX
from src.dary_heap.errors import ConstructionError

logger = logging.getLogger(__name__)

LIST_PATTERN = re.compile(r"^[0-9]+(?:,[0-9]+)*$")
MAX_DIGITS = len(str(KEY_MAX))

MALFORMED_LIST = (
    "There's something wrong with the list.\n"
    "Make sure it only contains digits and commas, example: 1,2,3,4,5,6"
)


def parse_nodes(text: str) -> list[int]:
    """
    Parse a comma-separated list of non-negative integers.

    Parameters
    ----------
    text : str
        The list, e.g. ``"1,2,3"``. Surrounding whitespace (such as a
        trailing newline) is ignored.

    Returns
    -------
    list[int]
        The parsed values in file order.

    Raises
    ------
    ConstructionError
        If the text is not a comma-separated list of digits, or a value does
        not fit in a 32-bit signed integer.
    """
    text = text.strip()
    if not LIST_PATTERN.match(text):
        raise ConstructionError(MALFORMED_LIST)

    nodes = []
    for value in text.split(","):
        # int() rejects digit strings longer than 4300 characters
        digits = value.lstrip("0") or "0"
        if len(digits) > MAX_DIGITS or int(digits) > KEY_MAX:
            shown = value if len(value) <= 20 else value[:17] + "..."
            raise ConstructionError(
                f"{shown} does not fit in a 32-bit signed integer"
            )
        nodes.append(int(digits))
    return nodes


def load_nodes(path: Union[str, os.PathLike]) -> list[int]:
    """Read a list file and parse it with :func:`parse_nodes`."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConstructionError(f"Unable to read the list file: {e}") from e

    nodes = parse_nodes(text)
    logger.debug("Loaded %d node(s) from %s", len(nodes), path)
    return nodes

# storage.py
"""
Loading and saving the address book as JSON
"""

import json
import logging

from weddingbook.models import AddressBook

logger = logging.getLogger(__name__)


def load_address_book(path):
    """
    Load an address book from a JSON file.

    Args:
        path (str): File to read

    Returns:
        AddressBook: The loaded persons with their links restored

    Raises:
        ValueError: If the file is not valid address book JSON
        OSError: If the file cannot be read
    """
    logger.info(f"Loading address book from {path}")
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid address book file: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Invalid address book file: expected a JSON object")
    return AddressBook.from_dict(data)


def save_address_book(book, path):
    """Write the address book to a JSON file"""
    logger.info(f"Saving {len(book)} persons to {path}")
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(book.to_dict(), f, indent=2, ensure_ascii=False)

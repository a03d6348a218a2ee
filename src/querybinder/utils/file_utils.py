"""File utility functions for querybinder."""

from pathlib import Path


def read_template_file(file_path: Path, keep_trailing_newline: bool = False) -> str:
    """
    Read a query template file.

    Editors usually end files with a newline that is not part of the query,
    so one trailing line ending is dropped unless asked otherwise.

    Args:
        file_path: Path to the template file
        keep_trailing_newline: Keep the file's final line ending

    Returns:
        The template text

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is not a file or is not valid UTF-8
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Template file not found: {file_path}")

    if not file_path.is_file():
        raise ValueError(f"Path is not a file: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"File {file_path} is not valid UTF-8: {e.reason}") from e

    if not keep_trailing_newline:
        if text.endswith("\r\n"):
            text = text[:-2]
        elif text.endswith("\n"):
            text = text[:-1]

    return text

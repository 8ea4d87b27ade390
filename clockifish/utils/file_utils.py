"""File I/O utility functions for clockifish."""
import os

import markdown


def write_markdown(md_path: str, content: str, title: str, overwrite: bool = False) -> None:
    """Write content to a Markdown file.

    Args:
        md_path: Output file path
        content: Markdown content
        title: Heading written when the file is created or overwritten
        overwrite: Whether to overwrite the file if it exists

    Raises:
        OSError: If the file cannot be written
        ValueError: If the written file does not render as markdown
    """
    file_exists = os.path.exists(md_path)
    if file_exists and not overwrite:
        mode = 'a'
        print(f"[INFO] File '{md_path}' exists. Appending output.")
    elif file_exists and overwrite:
        mode = 'w'
        print(f"[INFO] File '{md_path}' exists. Overwriting as requested.")
    else:
        mode = 'w'
        print(f"[INFO] File '{md_path}' does not exist. Creating new file.")

    with open(md_path, mode, encoding='utf-8') as f:
        if mode == 'w' or os.stat(md_path).st_size == 0:
            f.write(f"# {title}\n\n")
        f.write(content)

    with open(md_path, 'r', encoding='utf-8') as f:
        md_text = f.read()
    try:
        markdown.markdown(md_text)
    except Exception as e:
        raise ValueError(f"Markdown validation failed for '{md_path}': {e}") from e

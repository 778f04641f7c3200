"""
Guessing the project and language of a document
"""
from pathlib import Path
from typing import Optional, Union

from . import globals as g
from .customTypes import Document


def get_project_name(path: Union[str, Path]) -> Optional[str]:
    """
    Walks up from the file and names the project after the first folder
    holding one of g.PROJECT_INDICATORS.
    Simple heuristic, nested repositories resolve to the innermost one.
    :param path: file path
    :return: folder name, None when nothing was found
    """
    current = Path(path)
    for parent in current.parents:
        for indicator in g.PROJECT_INDICATORS:
            if (parent / indicator).exists():
                # the filesystem root has no name
                return parent.name or None
    return None


def get_language_name(doc: Document) -> Optional[str]:
    return doc.language_id() or None

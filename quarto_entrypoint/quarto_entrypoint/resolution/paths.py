"""Resolution of INPUT_FILE into the documents to render."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import InputNotFound, MultipleDocuments, NoMatchingDocuments
from ..core.models import SOURCE_EXTENSION, BatchPolicy, ResolvedDocumentSet

logger = logging.getLogger(__name__)


def list_documents(directory: Path, extension: str = SOURCE_EXTENSION) -> list[str]:
    """Return the names of the source documents directly inside a folder.

    Args:
        directory: Folder to scan (not recursive)
        extension: Recognized source extension

    Returns:
        Sorted list of file names
    """
    return sorted(
        child.name
        for child in directory.iterdir()
        if child.is_file() and child.name.endswith(extension)
    )


def _apply_batch_policy(
    directory: Path, documents: list[str], policy: BatchPolicy
) -> list[str]:
    if policy == "first":
        logger.debug(f"The first retrieved document was {documents[0]}, using that one")
        return documents[:1]
    if policy == "reject" and len(documents) > 1:
        raise MultipleDocuments(directory, documents)
    return documents


def resolve(
    input_spec: str,
    source_root: Path,
    *,
    policy: BatchPolicy = "all",
    extension: str = SOURCE_EXTENSION,
) -> ResolvedDocumentSet:
    """Determine the documents designated by INPUT_FILE.

    It may name a file, a file without its extension, or a folder whose
    direct children with the source extension are all rendered.

    Args:
        input_spec: Value of INPUT_FILE, relative to the source root
        source_root: Mounted input folder
        policy: What to do when a folder holds several documents
        extension: Recognized source extension

    Returns:
        The resolved document set

    Raises:
        InputNotFound: Nothing matches INPUT_FILE
        NoMatchingDocuments: The folder holds no source document
        MultipleDocuments: Several documents and the "reject" policy
    """
    # INPUT_FILE is always relative to the input folder
    relative_spec = input_spec.strip().strip("/")
    candidate = source_root / relative_spec

    if candidate.is_file():
        logger.debug(f"{candidate} is a file")
        return ResolvedDocumentSet(
            parent_directory=candidate.parent, documents=[candidate.name]
        )

    if candidate.is_dir():
        directory = candidate
        logger.debug(f"{directory} is a folder")
        documents = list_documents(directory, extension)
        if not documents:
            raise NoMatchingDocuments(directory, extension)
        documents = _apply_batch_policy(directory, documents, policy)
        logger.debug(f"Retrieved {len(documents)} document(s): {', '.join(documents)}")
        return ResolvedDocumentSet(parent_directory=directory, documents=documents)

    with_extension = source_root / f"{relative_spec}{extension}"
    if not candidate.exists() and with_extension.is_file():
        logger.debug(f"{candidate} resolved to {with_extension}")
        return ResolvedDocumentSet(
            parent_directory=with_extension.parent, documents=[with_extension.name]
        )

    raise InputNotFound(candidate)

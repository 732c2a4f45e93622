"""Fatal conditions raised by the entrypoint components."""

from __future__ import annotations

from pathlib import Path


class EntrypointError(Exception):
    """Base class for every condition that aborts a run."""


class MissingMount(EntrypointError):
    """Raised when the input or output root folder is not mounted."""

    def __init__(self, path: Path, role: str) -> None:
        self.path = path
        self.role = role
        super().__init__(
            f"You don't have yet a {path} folder; please make sure to mount it "
            f'using "-v ${{PWD}}/your_{role}_folder:{path}".'
        )


class InputNotFound(EntrypointError):
    """Raised when INPUT_FILE resolves to neither a file nor a folder."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"The file {path} didn't exist; please set INPUT_FILE to an existing "
            "file or folder relative to the input folder."
        )


class NoMatchingDocuments(EntrypointError):
    """Raised when a folder holds no source document."""

    def __init__(self, directory: Path, extension: str) -> None:
        self.directory = directory
        self.extension = extension
        super().__init__(f"The folder {directory} contains no {extension} file.")


class MultipleDocuments(EntrypointError):
    """Raised by the "reject" batch policy when a folder holds several documents."""

    def __init__(self, directory: Path, documents: list[str]) -> None:
        self.directory = directory
        self.documents = documents
        super().__init__(
            f"The folder {directory} contains {len(documents)} documents "
            f"({', '.join(documents)}); set INPUT_FILE to one of them."
        )


class RenderFailure(EntrypointError):
    """Raised when the renderer exits with a non-zero status."""

    def __init__(self, document: Path, returncode: int | None, detail: str = "") -> None:
        self.document = document
        self.returncode = returncode
        message = f"Rendering {document} failed"
        if returncode is not None:
            message += f" (exit status {returncode})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class MissingCopySource(EntrypointError):
    """Raised when an entry of FILES_TO_COPY or FOLDERS_TO_COPY is missing."""

    def __init__(self, path: Path, kind: str) -> None:
        self.path = path
        self.kind = kind
        super().__init__(f"The {kind} {path} to copy didn't exist.")

"""
Workspace sandbox for Burrow tools.
Every path a tool touches is resolved here against a single workspace root.
"""

from pathlib import Path, PurePath


class SandboxViolation(ValueError):
    """A tool path tried to leave the workspace root."""


class WorkspaceSandbox:
    """
    Resolves model-supplied relative paths under a fixed workspace root.

    The check is syntactic: a path is rejected if it is absolute or if any of
    its components is "..". Symlinks inside the root are not resolved.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root).expanduser().absolute()

    def resolve(self, relative_path: str) -> Path:
        """
        Resolve a relative path against the workspace root.

        Args:
            relative_path: Path as emitted by the model, relative to the root

        Returns:
            The absolute path under the workspace root

        Raises:
            SandboxViolation: If the path is absolute or contains ".."
        """
        if "\x00" in relative_path:
            raise SandboxViolation(f"Path must not contain NUL bytes: {relative_path!r}")

        candidate = PurePath(relative_path)

        if candidate.is_absolute() or candidate.anchor:
            raise SandboxViolation(
                f"Path must be relative to the workspace root: {relative_path}"
            )

        if ".." in candidate.parts:
            raise SandboxViolation(
                f"Path must not contain '..' components: {relative_path}"
            )

        return self.root / candidate

    def __repr__(self) -> str:
        return f"WorkspaceSandbox(root={str(self.root)!r})"

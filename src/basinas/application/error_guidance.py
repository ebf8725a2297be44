"""User-facing guidance for terminal scaffold failures"""

import socket
import subprocess

from basinas.domain.models.patch_rule import PatchApplicationError


def _matches(message: str, *needles: str) -> bool:
    return any(needle in message for needle in needles)


def describe_failure(exc: BaseException, project_name: str) -> str:
    """Map a failure to guidance for the user

    Args:
        exc: Error that aborted the run
        project_name: Project being created

    Returns:
        One-line guidance message
    """
    message = str(exc)

    if isinstance(exc, PatchApplicationError):
        return (
            "A generated file no longer has the expected shape, so it could not be "
            "patched safely. The project generator may have changed its output format."
        )
    if isinstance(exc, FileExistsError) or _matches(message, "EEXIST", "already exists"):
        return f'A project with the name "{project_name}" already exists. Please choose a different name.'
    if isinstance(exc, socket.gaierror) or _matches(message, "ENOTFOUND", "getaddrinfo"):
        return "Network error. Please check your internet connection and try again."
    if isinstance(exc, PermissionError) or _matches(message, "EACCES", "EPERM"):
        return (
            "Permission denied. Try running with appropriate permissions "
            "or in a different directory."
        )
    if isinstance(exc, FileNotFoundError) or _matches(message, "ENOENT"):
        return "File or directory not found. Please ensure you have the necessary permissions."
    if isinstance(exc, subprocess.CalledProcessError):
        program = exc.cmd[0] if isinstance(exc.cmd, (list, tuple)) else exc.cmd
        return f"'{program}' exited with status {exc.returncode}. See its output above for details."
    return "An unexpected error occurred. Please try again or report the issue."

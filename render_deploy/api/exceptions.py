"""Exception definitions for render-deploy API"""

from typing import List, Optional

from ..constants import ErrorCode


class RenderDeployError(Exception):
    """Base exception for render-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code

    @property
    def exit_code(self) -> int:
        """Process exit code used by the CLI"""
        return 1


class ConfigError(RenderDeployError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class PrerequisiteError(RenderDeployError):
    """Required external tool is missing or could not be installed"""

    def __init__(self, tool: str, message: str):
        super().__init__(message, ErrorCode.PREREQUISITE_MISSING)
        self.tool = tool


class StagingError(RenderDeployError):
    """Staging directory could not be prepared"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.STAGING_FAILED)


class GitError(RenderDeployError):
    """Git command failed"""

    def __init__(self,
                 message: str,
                 command: Optional[List[str]] = None,
                 returncode: int = 1,
                 stderr: str = "",
                 error_code: str = ErrorCode.GIT_COMMAND_FAILED):
        super().__init__(message, error_code)
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr

    @property
    def exit_code(self) -> int:
        return self.returncode or 1


class PushError(GitError):
    """Every configured branch failed to push"""

    def __init__(self, branches: List[str], returncode: int = 1, stderr: str = ""):
        message = f"Failed to push branches: {', '.join(branches)}"
        super().__init__(message, returncode=returncode, stderr=stderr,
                         error_code=ErrorCode.PUSH_FAILED)
        self.branches = branches


class RepositoryError(RenderDeployError):
    """Remote repository could not be created"""

    def __init__(self, message: str, error_code: str = ErrorCode.REPOSITORY_ERROR):
        super().__init__(message, error_code)


class AuthenticationError(RepositoryError):
    """Remote API rejected the access token"""

    def __init__(self, message: str = "Failed to create GitHub repository. Invalid GitHub token."):
        super().__init__(message, ErrorCode.BAD_CREDENTIALS)


class UserCancelledError(RenderDeployError):
    """User cancelled the operation"""

    def __init__(self):
        super().__init__("Operation cancelled by user", ErrorCode.USER_CANCELLED)

    @property
    def exit_code(self) -> int:
        return 130

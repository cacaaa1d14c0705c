"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    IN_PROGRESS = "in_progress"


class RepoCreationOutcome(Enum):
    """Classification of a repository creation response"""
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    BAD_CREDENTIALS = "bad_credentials"


@dataclass
class ErrorDetail:
    """Detailed error information"""

    code: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }


@dataclass
class Result:
    """Base result class"""

    status: OperationStatus
    message: str = ""
    errors: List[ErrorDetail] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    start_time: datetime = field(default_factory=_utcnow)
    end_time: Optional[datetime] = None

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def add_error(self, code: str, message: str, **context) -> None:
        """Add an error"""
        self.errors.append(ErrorDetail(code=code, message=message, context=context))

    def add_warning(self, message: str) -> None:
        """Add a warning"""
        self.warnings.append(message)

    def complete(self, status: Optional[OperationStatus] = None) -> None:
        """Mark operation as complete"""
        self.end_time = _utcnow()
        if status:
            self.status = status


@dataclass
class RepositoryCreation:
    """Parsed response of a repository creation request"""

    outcome: RepoCreationOutcome
    status_code: int
    message: str = ""
    html_url: Optional[str] = None

    @property
    def is_fatal(self) -> bool:
        return self.outcome == RepoCreationOutcome.BAD_CREDENTIALS


@dataclass
class StageRecord:
    """Record of a single pipeline stage"""

    name: str
    status: OperationStatus
    detail: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "status": self.status.value, "detail": self.detail}


@dataclass
class DeployResult(Result):
    """Result of a deployment run"""

    staging_dir: Optional[Path] = None
    descriptor_path: Optional[Path] = None
    use_mock_data: Optional[bool] = None
    repository: Optional[RepositoryCreation] = None
    remote_url: Optional[str] = None
    pushed_branch: Optional[str] = None
    staging_removed: bool = False
    stages: List[StageRecord] = field(default_factory=list)

    def record_stage(self, name: str,
                     status: OperationStatus = OperationStatus.SUCCESS,
                     detail: str = "") -> None:
        """Append a stage record"""
        self.stages.append(StageRecord(name=name, status=status, detail=detail))

    @property
    def stage_names(self) -> List[str]:
        return [stage.name for stage in self.stages]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "message": self.message,
            "staging_dir": str(self.staging_dir) if self.staging_dir else None,
            "descriptor_path": str(self.descriptor_path) if self.descriptor_path else None,
            "use_mock_data": self.use_mock_data,
            "repository": self.repository.outcome.value if self.repository else None,
            "remote_url": self.remote_url,
            "pushed_branch": self.pushed_branch,
            "staging_removed": self.staging_removed,
            "stages": [s.to_dict() for s in self.stages],
            "errors": [e.to_dict() for e in self.errors],
            "warnings": self.warnings,
            "duration": self.duration
        }

"""
Value types passed between the packager, the host command and its reporters
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

DEBUG_SUBPATH = ("bin", "Debug")


class PackageStatus(Enum):
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"


@dataclass(frozen=True)
class PackageRequest:
    """
    Paths derived from a single project file for one packaging run.
    """
    project_path: Path
    output_directory: Path
    zip_path: Path

    @classmethod
    def from_project(cls, project_path) -> "PackageRequest":
        project_path = Path(project_path)
        output_directory = project_path.parent.joinpath(*DEBUG_SUBPATH)
        zip_path = output_directory / f"{project_path.stem}.zip"
        return cls(project_path, output_directory, zip_path)


@dataclass(frozen=True)
class PackageOutcome:
    """
    Result of one packaging run, shown once to the user.
    """
    status: PackageStatus
    message: str
    archive: Optional[Path] = None

    @classmethod
    def success(cls, message: str, archive: Optional[Path] = None) -> "PackageOutcome":
        return cls(PackageStatus.SUCCESS, message, archive)

    @classmethod
    def warning(cls, message: str) -> "PackageOutcome":
        return cls(PackageStatus.WARNING, message)

    @classmethod
    def error(cls, message: str) -> "PackageOutcome":
        return cls(PackageStatus.ERROR, message)

    @property
    def title(self) -> str:
        # Only failures get a dialog caption
        return "Packaging failed" if self.status is PackageStatus.ERROR else ""

    @property
    def ok(self) -> bool:
        return self.status is not PackageStatus.ERROR

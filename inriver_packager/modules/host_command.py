"""
Host command for the inRiver packager
Binds the packager to a project selection and a result dialog
"""
import uuid
from pathlib import Path
from typing import List, Optional, Protocol

import click

from inriver_packager.core.logging import LoggingManager
from inriver_packager.modules.models import PackageOutcome, PackageStatus
from inriver_packager.modules.packaging import Packager

PROJECT_SUFFIXES = (".csproj", ".vbproj", ".fsproj", ".vcxproj")

NOT_A_PROJECT = "Selected item is not a project!"


class SelectionProvider(Protocol):
    def current_project_path(self) -> Optional[str]:
        ...


class ResultReporter(Protocol):
    def show(self, outcome: PackageOutcome) -> None:
        ...


class StaticSelection:
    """
    Selection that always resolves to the same project path.
    """
    def __init__(self, project_path: Optional[str]):
        self.project_path = project_path

    def current_project_path(self) -> Optional[str]:
        return self.project_path


class DirectorySelection:
    """
    Resolves a path the way the project tree does: a project file selects
    itself, a folder selects its only project file.
    """
    def __init__(self, path: str):
        self.path = Path(path)

    def current_project_path(self) -> Optional[str]:
        if self.path.is_file():
            return str(self.path.resolve())
        if not self.path.is_dir():
            return None
        candidates = [p for p in self.path.iterdir()
                      if p.is_file() and p.suffix.lower() in PROJECT_SUFFIXES]
        if len(candidates) != 1:
            return None
        return str(candidates[0].resolve())


class ConsoleReporter:
    STYLES = {
        PackageStatus.SUCCESS: ("INFO", "green"),
        PackageStatus.WARNING: ("WARNING", "yellow"),
        PackageStatus.ERROR: ("ERROR", "red"),
    }

    def show(self, outcome: PackageOutcome) -> None:
        label, colour = self.STYLES[outcome.status]
        text = f"[{label}] {outcome.message}"
        if outcome.title:
            text = f"[{label}] {outcome.title}: {outcome.message}"
        click.secho(text, fg=colour, err=not outcome.ok)
        if outcome.archive is not None:
            click.echo(f"Archive: {outcome.archive}")


class RecordingReporter:
    def __init__(self):
        self.outcomes: List[PackageOutcome] = []

    def show(self, outcome: PackageOutcome) -> None:
        self.outcomes.append(outcome)


class PackageCommand:
    """
    The "create package" project command.
    """
    COMMAND_ID = 0x0100
    COMMAND_SET = uuid.UUID("2e8e062a-e031-496c-9382-a2c35035658b")

    def __init__(self, selection: SelectionProvider, reporter: ResultReporter,
                 packager: Optional[Packager] = None, logger: Optional[LoggingManager] = None):
        self.selection = selection
        self.reporter = reporter
        self.logger = logger or LoggingManager()
        self.packager = packager or Packager(self.logger)

    def execute(self) -> PackageOutcome:
        """
        Package the selected project and report the result.
        Returns:
            PackageOutcome: The outcome handed to the reporter.
        """
        outcome = None
        try:
            project_path = self.selection.current_project_path()
            if project_path is None:
                self.logger.warning("Selection did not resolve to a single project")
                outcome = PackageOutcome.warning(NOT_A_PROJECT)
            else:
                outcome = self.packager.create_package(project_path)
        except Exception as e:
            self.logger.error(f"Packaging failed: {e!r}")
            outcome = PackageOutcome.error(str(e) or type(e).__name__)
        finally:
            if outcome is not None:
                self.reporter.show(outcome)
        return outcome

"""
Debug build packaging module for the inRiver packager
Zips the DLL/XML/config output of a project's bin/Debug folder
"""
import zipfile
from pathlib import Path
from typing import List, Optional

from inriver_packager.core.logging import LoggingManager
from inriver_packager.modules.models import PackageOutcome, PackageRequest

PACKAGE_EXTENSIONS = (".dll", ".xml", ".config")

MISSING_DEBUG_DIR = "Debug directory does not exist!"
NOTHING_TO_PACK = "There is no files to pack!"
PACKAGE_CREATED = "Package created"


class Packager:
    """
    Builds <ProjectName>.zip next to a project's debug build output.
    """
    def __init__(self, logger: Optional[LoggingManager] = None):
        self.logger = logger or LoggingManager()

    def prepare(self, project_path) -> PackageRequest:
        return PackageRequest.from_project(project_path)

    def collect_files(self, output_directory) -> List[Path]:
        """
        Collect package files directly inside output_directory.
        Args:
            output_directory (str): Build output folder, not scanned recursively.
        Returns:
            list: Files grouped by extension in PACKAGE_EXTENSIONS order.
        """
        entries = [p for p in Path(output_directory).iterdir() if p.is_file()]
        files = []
        for ext in PACKAGE_EXTENSIONS:
            matched = [p for p in entries if p.suffix.lower() == ext]
            files.extend(sorted(matched, key=lambda p: p.name))
        return files

    def create_package(self, project_path) -> PackageOutcome:
        """
        Package the debug build output of a project.
        Args:
            project_path (str): Full path of the project file.
        Returns:
            PackageOutcome: Success, or a warning when there is nothing to pack.
        Raises:
            OSError: When the output folder cannot be read or the archive written.
        """
        request = self.prepare(project_path)
        self.logger.info(f"Packaging {request.project_path.name} from {request.output_directory}")
        if not request.output_directory.is_dir():
            self.logger.warning(f"{request.output_directory} not found")
            return PackageOutcome.warning(MISSING_DEBUG_DIR)
        files = self.collect_files(request.output_directory)
        if not files:
            self.logger.warning(f"No {', '.join(PACKAGE_EXTENSIONS)} files in {request.output_directory}")
            return PackageOutcome.warning(NOTHING_TO_PACK)
        self.write_archive(files, request.zip_path)
        self.logger.info(f"Wrote {len(files)} files to {request.zip_path}")
        return PackageOutcome.success(PACKAGE_CREATED, request.zip_path)

    def write_archive(self, files: List[Path], zip_path: Path) -> None:
        with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as zipf:
            for file in files:
                self.logger.debug(f"Adding {file.name}")
                zipf.writestr(file.name, file.read_bytes())

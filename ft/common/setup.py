import os
from pathlib import Path
from dataclasses import dataclass

# Lil helper function to create missing directories if missing, and optionally error out when a path
# doesn't exist.
def ensure_directory(path: Path,must_exist=False):
    if must_exist:
        if not path.exists():
            raise FileNotFoundError(f"Required directory is missing: {path}")
        if not path.is_dir():
            raise NotADirectoryError(f"Expected a directory, got a file: {path}")
    else:
        if path.exists() and not path.is_dir():
            raise NotADirectoryError(f"Expected a directory, got a file: {path}")
        path.mkdir(parents=True,exist_ok=True)
    return path

# Picks the folder that holds all user-specific FocusTimer data. FOCUSTIMER_HOME always wins, then the usual
# Windows roaming folder, then a dotfolder in home for everything else.
def resolve_data_root():
    override = os.getenv("FOCUSTIMER_HOME")
    if override:
        return Path(override)
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata) / "FocusTimer"
    return Path.home() / ".focustimer"

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    root: Path
    data: Path

    logs: Path
    activities: Path

    @staticmethod
    def build(data_root: Path | None = None):
        # Folder for the source/install itself, no user-specific files
        root = Path(__file__).resolve().parents[2]

        # Folder for all focustimer user-specific stuff
        data = ensure_directory(data_root or resolve_data_root())

        # Folders within the data folder
        logs = ensure_directory(data / "logs")
        activities = ensure_directory(data / "activities")

        return ProjectPaths(
            root = root,
            data = data,
            logs = logs,
            activities = activities,
        )
PATHS = ProjectPaths.build()

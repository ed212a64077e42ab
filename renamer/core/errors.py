# Every failure during a run is fatal; the CLI catches RenameError once and exits.


class RenameError(RuntimeError):
    pass


class FileReadError(RenameError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"failed to read file {path}: {cause}")
        self.path = path


class FileWriteError(RenameError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"failed to write file {path}: {cause}")
        self.path = path


class DirectoryCreateError(RenameError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"failed to create directory {path}: {cause}")
        self.path = path


class FileMoveError(RenameError):
    def __init__(self, source: str, target: str, cause: Exception):
        super().__init__(f"failed to rename {source} to {target}: {cause}")
        self.source = source
        self.target = target


class DirectoryExistsError(RenameError):
    def __init__(self, path: str):
        super().__init__(f"new directory {path} already exists")
        self.path = path


class WalkError(RenameError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"failed to walk {path}: {cause}")
        self.path = path


class DirectoryRemoveError(RenameError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"failed to remove directory {path}: {cause}")
        self.path = path

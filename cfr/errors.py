class CfrError(RuntimeError):
    """Base error for everything the harness reports to the user."""


class UnsupportedLanguageError(CfrError):
    pass


class MissingFileError(CfrError):
    def __init__(self, path):
        super().__init__(f"{path} does not exist.")
        self.path = path


class BuildError(CfrError):
    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class ExecutionError(CfrError):
    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class SinkWriteError(CfrError):
    """The renderer could not write to its output sink."""

class TasklistError(Exception):
    """Base exception for all Tasklist errors."""
    pass

class RecoverableError(TasklistError):
    """An error that can be recovered from without data loss."""
    pass

class FatalError(TasklistError):
    """An error that requires application termination or major intervention."""
    pass

class CorruptionError(FatalError):
    """Corrupted Data Error - from syntax errors in data formats, to just unknown data"""
    pass

class ConfigError(FatalError):
    """Configuration file could not be read or parsed."""
    pass

class FileOperationError(RecoverableError):
    """File operation failed but can be retried."""
    pass

class EndOfInput(RecoverableError):
    """The input stream has no more lines."""
    pass

class InputError(RecoverableError):
    """User input was rejected; ``message`` is what the user is shown."""
    message = ""

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

class InvalidAction(InputError):
    message = "The input action is invalid"

class InvalidPriority(InputError):
    # Priority mismatches re-prompt without a message
    message = ""

class InvalidDate(InputError):
    message = "The input date is invalid"

class InvalidTime(InputError):
    message = "The input time is invalid"

class InvalidTaskNumber(InputError):
    message = "Invalid task number"

class InvalidField(InputError):
    message = "Invalid field"

class BlankTask(InputError):
    message = "The task is blank"

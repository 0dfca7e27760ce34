# ABOUTME: Base exception classes for Prospect CRM application errors.
# ABOUTME: Provides a common root and the lookup error for unknown profile references.


class ProspectCRMError(Exception):
    """Base exception for all Prospect CRM errors.

    This is the root exception class for the application. All custom
    exceptions should inherit from this class to enable unified
    error handling throughout the CLI.
    """

    pass


class ProfileNotFoundError(ProspectCRMError):
    """Exception raised when a profile reference matches no profile or several."""

    def __init__(self, reference: str, candidates: int = 0) -> None:
        """Initialize the exception.

        Args:
            reference: The id or id prefix that was looked up.
            candidates: Number of profiles matching the reference (0 or more than 1).
        """
        if candidates > 1:
            message = f"Reference '{reference}' is ambiguous ({candidates} profiles match)."
        else:
            message = f"No profile found for '{reference}'."
        super().__init__(message)
        self.reference = reference
        self.candidates = candidates

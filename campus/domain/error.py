"""Domain layer errors.

Every error carries a short, user-facing message. The interface layer maps
each class to an HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation requires a principal and none was supplied."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Sign in to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own or lacks moderator rights."""

    def __init__(self, message: str = "You are not allowed to do that"):
        super().__init__(message)


class UserBannedError(DomainError):
    """Raised when a banned user attempts a write."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("Your account has been banned")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateCommentError(DomainError):
    """Raised when an author already has a live comment on the post."""

    def __init__(self, post_id: str, author_id: str):
        self.post_id = post_id
        self.author_id = author_id
        super().__init__(
            "You have already commented on this post. Edit your comment instead."
        )


class DuplicateReportError(DomainError):
    """Raised when a reporter has already reported the content."""

    def __init__(self, content_id: str, reporter_id: str):
        self.content_id = content_id
        self.reporter_id = reporter_id
        super().__init__("You have already reported this content.")


class SelfReportError(DomainError):
    """Raised when a user reports their own content."""

    def __init__(self, content_type: str):
        super().__init__(f"You cannot report your own {content_type}.")


class MissingReasonError(DomainError):
    """Raised when the 'other' category is chosen without a reason."""

    def __init__(self):
        super().__init__("Please provide a reason for your report.")


class ConcurrentUpdateError(DomainError):
    """Raised when a compare-and-set write loses against a concurrent writer.

    Services retry the whole read-modify-write sequence on this error; it
    only reaches callers wrapped in StoreUnavailableError.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Concurrent update on {resource} {identifier}")


class StoreUnavailableError(DomainError):
    """Raised when the underlying persistence fails."""

    def __init__(self, message: str = "The forum is temporarily unavailable. Please try again."):
        super().__init__(message)

"""Domain errors raised by services and rendered as JSON by the app's exception handlers."""


class AppError(Exception):
    """Base class for errors surfaced to API callers as {"error", "code"}."""

    status_code: int = 500
    code: str = "internal_error"
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# Validation (400)


class ValidationError(AppError):
    status_code = 400
    code = "validation_error"
    default_message = "Invalid request."


class ConsentRequired(ValidationError):
    code = "consent_required"
    default_message = "You must agree to the collection of personal information."


# Authentication (401 / 403)


class AuthenticationError(AppError):
    status_code = 401
    code = "authentication_error"
    default_message = "Authentication failed."


class AuthenticationFailed(AuthenticationError):
    code = "authentication_failed"
    default_message = "Invalid username or password."


class VerificationRequired(AuthenticationError):
    status_code = 403
    code = "verification_required"
    default_message = "Email verification is required."


class Unauthenticated(AuthenticationError):
    code = "unauthenticated"
    default_message = "Login required."


# Authorization (403)


class AuthorizationError(AppError):
    status_code = 403
    code = "forbidden"
    default_message = "Permission denied."


class Forbidden(AuthorizationError):
    pass


# Not found (404, or 400 for verification lookups)


class NotFoundError(AppError):
    status_code = 404
    code = "not_found"
    default_message = "Not found."


class UserNotFound(NotFoundError):
    code = "user_not_found"
    default_message = "User not found."


class VerificationNotFound(NotFoundError):
    status_code = 400
    code = "verification_not_found"
    default_message = "Verification failed."


class VerificationExpired(AppError):
    status_code = 400
    code = "verification_expired"
    default_message = "Verification code has expired."


# Conflicts (400 / 500)


class ConflictError(AppError):
    status_code = 400
    code = "conflict"
    default_message = "Conflict."


class IdentityTaken(ConflictError):
    code = "identity_taken"
    default_message = "User already exists."


class AccountCreationFailed(ConflictError):
    status_code = 500
    code = "account_creation_failed"
    default_message = "Account creation failed."


# Dependencies and storage (500)


class TransientDependencyError(AppError):
    status_code = 500
    code = "dependency_error"
    default_message = "Upstream dependency failed."


class MailDeliveryFailed(TransientDependencyError):
    code = "mail_delivery_failed"
    default_message = "Failed to send the verification email."


class StorageError(AppError):
    code = "storage_error"
    default_message = "Database operation failed."

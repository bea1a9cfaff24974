class CurriculumOpsError(Exception):
    """Base exception for the curriculum operations backend.

    Every subclass carries a stable ``code`` and the HTTP status the API
    boundary maps it to.
    """

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_payload(self) -> dict:
        return {"code": self.code, "message": self.message}


class NotFoundError(CurriculumOpsError):
    """Raised when an entity id does not exist (reports, rules, updates, ...)."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class BadRequestError(CurriculumOpsError):
    """Raised when a required field is missing or a selection is invalid."""

    code = "BAD_REQUEST"
    status_code = 400


class ConflictError(CurriculumOpsError):
    """Raised when a write would break a store invariant."""

    code = "CONFLICT"
    status_code = 409


class InvalidTransitionError(ConflictError):
    """Raised when the active review policy forbids a status change."""

    def __init__(self, report_id: str, current: str, target: str):
        self.report_id = report_id
        self.current = current
        self.target = target
        super().__init__(f"Impact report {report_id} cannot move from '{current}' to '{target}'")


class ConfigError(CurriculumOpsError):
    """Raised when a required external credential is missing."""

    code = "CONFIG_ERROR"
    status_code = 500


class GenerationParseError(CurriculumOpsError):
    """Raised when generation output does not parse as the expected JSON schema."""

    code = "PARSE_ERROR"
    status_code = 502


class InternalError(CurriculumOpsError):
    """Raised for store failures and anything else unexpected."""

    code = "INTERNAL_ERROR"
    status_code = 500

"""Error types for FitPet core services.

Business rule violations and missing entities are expected conditions.
Routers translate them into HTTP responses; they are not logged as errors.
"""


class FitPetError(RuntimeError):
    """Base exception for core service errors."""


class NotFoundError(FitPetError):
    """Raised when a referenced entity does not exist.

    Attributes:
        entity: Entity kind (e.g., "user", "pet", "workout")
        entity_id: Identifier that was looked up
    """

    def __init__(self, entity: str, entity_id: int | str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} not found: {entity_id}")

    @property
    def detail(self) -> str:
        return f"{self.entity.replace('_', ' ').capitalize()} not found"


class AlreadyCompletedError(FitPetError):
    """Raised when completing an assignment that is already completed."""

    def __init__(self, user_workout_id: int) -> None:
        self.user_workout_id = user_workout_id
        super().__init__(f"User workout {user_workout_id} already completed")

    @property
    def detail(self) -> str:
        return "Workout already completed"


class ConflictError(FitPetError):
    """Raised when a create request collides with an existing entity."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def detail(self) -> str:
        return self.message


class ValidationError(FitPetError):
    """Raised when an argument is malformed or out of range.

    Attributes:
        field: Name of the offending field
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

    @property
    def detail(self) -> list[dict[str, object]]:
        return [{"loc": [self.field], "msg": self.message, "type": "value_error"}]

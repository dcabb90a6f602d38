# scheduler/services/travel_slots/errors.py

from pydantic import ValidationError


class InputValidationError(ValueError):
    """Raised when a slot request fails validation. Nothing is computed."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []

    @property
    def fields(self) -> list[str]:
        return [".".join(str(p) for p in err["loc"]) for err in self.errors if err.get("loc")]

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "InputValidationError":
        errors = [
            {
                "loc": tuple(err.get("loc", ())),
                "msg": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]
        details = "; ".join(
            f"{'.'.join(str(p) for p in e['loc']) or 'request'}: {e['msg']}" for e in errors
        )
        return cls(f"Invalid slot request: {details}", errors)

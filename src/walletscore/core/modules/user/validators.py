from walletscore.core.modules.user.models import NAME_MAX_LENGTH
from walletscore.errors import ValidationError


def validate_name(name: str) -> None:
    """Validate display name length.

    Raises:
        ValidationError: If the name is longer than NAME_MAX_LENGTH characters
    """
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Name must be at most {NAME_MAX_LENGTH} characters long")

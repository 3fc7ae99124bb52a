from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from .policy import parse_max_age

# Width of the stored column; the canonical form must fit
MAX_AGE_DIGITS = 255


def validate_max_age(value):
    """Require a non-negative decimal integer number of seconds."""
    try:
        max_age = parse_max_age(value)
    except ValueError:
        raise ValidationError(
            _("Max age must be a non-negative whole number of seconds."),
            code="invalid_max_age",
        )
    if len(str(max_age)) > MAX_AGE_DIGITS:
        raise ValidationError(
            _("Max age must have at most %(digits)d digits."),
            code="max_age_too_long",
            params={"digits": MAX_AGE_DIGITS},
        )

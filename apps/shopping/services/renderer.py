from typing import Optional, Sequence

from ..models.shopping import RenderedField


def render_field(value: str, errors: Optional[Sequence[str]] = None) -> RenderedField:
    """
    Decide what one form field shows after a submission.

    The value is always redisplayed verbatim so the user keeps what they
    typed. When the field has errors only the first message is surfaced;
    the remaining ones are dropped.
    """
    if not errors:
        return RenderedField(value=value)
    return RenderedField(value=value, message=errors[0], has_error=True)

"""
Business rules for the posts bounded context.

Checks applied before any storage access. Rules raise ValidationError
with the exact messages returned to API clients.
"""

from collections.abc import Mapping
from typing import Optional, Union

from posts_api.domain.posts.errors import ValidationError

INVALID_ID_MESSAGE = "ID inválido"
MISSING_FIELDS_MESSAGE = "Campos obrigatórios não preenchidos"
MISSING_QUERY_MESSAGE = "Query de busca é obrigatória"

# Upper bound of the integer primary key column.
MAX_POST_ID = 2_147_483_647
_MAX_POST_ID_DIGITS = len(str(MAX_POST_ID))

# Checked in this order; error messages keep the same order.
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("title", "Título é obrigatório"),
    ("content", "Conteúdo é obrigatório"),
    ("author", "Autor é obrigatório"),
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not isinstance(value, str) or not value.strip()


def parse_post_id(raw_id: Union[str, int, None]) -> int:
    """Parse a post id from a path parameter.

    Only plain ASCII digit strings (or ints) naming a positive id are
    accepted. Signs, decimals and trailing garbage are rejected.

    Args:
        raw_id: The id as received from the client.

    Returns:
        The id as an int.

    Raises:
        ValidationError: If the id is not a positive integer.
    """
    if isinstance(raw_id, bool):
        raise ValidationError(INVALID_ID_MESSAGE)

    if isinstance(raw_id, int):
        post_id = raw_id
    elif isinstance(raw_id, str):
        candidate = raw_id.strip()
        if not (candidate.isascii() and candidate.isdigit()):
            raise ValidationError(INVALID_ID_MESSAGE)
        digits = candidate.lstrip("0") or "0"
        # Longer digit strings are out of range; int() may refuse them outright.
        if len(digits) > _MAX_POST_ID_DIGITS:
            raise ValidationError(INVALID_ID_MESSAGE)
        post_id = int(digits)
    else:
        raise ValidationError(INVALID_ID_MESSAGE)

    if not 0 < post_id <= MAX_POST_ID:
        raise ValidationError(INVALID_ID_MESSAGE)
    return post_id


def check_required_fields(fields: Mapping[str, Optional[str]]) -> None:
    """Ensure title, content and author are present and not blank.

    Every field is checked before failing so the client learns about
    all missing fields at once.

    Raises:
        ValidationError: Listing one message per missing field.
    """
    errors = [
        message for name, message in REQUIRED_FIELDS if _is_blank(fields.get(name))
    ]
    if errors:
        raise ValidationError(MISSING_FIELDS_MESSAGE, errors)


def normalize_search_query(query: Optional[str]) -> str:
    """Return the search term, rejecting absent or blank queries.

    The term is passed on untrimmed; only emptiness is judged on the
    trimmed value.
    """
    if _is_blank(query):
        raise ValidationError(MISSING_QUERY_MESSAGE)
    return query

# 📄 File: domca/shared/core/identifiers.py
# 🧭 Purpose (Layman Explanation):
# Creates the labels that tell every stored record apart, like "USR3f9a...", where the
# first letters say what kind of record it is and the rest is a random, unguessable code.
# 🧪 Purpose (Technical Summary):
# Secure prefixed identifier generation plus one generic, immutable typed-identifier
# model. Each entity kind is a thin subclass that only declares its prefix.
# 🔗 Dependencies:
# secrets, pydantic, domca.shared.config.settings, domca.shared.utils.validators
# 🔄 Connected Modules / Calls From:
# All domain models (identifier fields), EntityIdType column mapping, repositories

import secrets
from functools import total_ordering
from typing import Any, ClassVar, Type, TypeVar

from pydantic import BaseModel, ConfigDict

from domca.shared.config.settings import get_settings
from domca.shared.core.exceptions import InvalidArgumentError
from domca.shared.utils.validators import ensure_in_range, ensure_not_blank

DEFAULT_SUFFIX_BYTES = 10

TEntityId = TypeVar("TEntityId", bound="EntityId")


def generate_entity_id(prefix: str, byte_length: int = DEFAULT_SUFFIX_BYTES) -> str:
    """
    Generate a prefixed identifier with a cryptographically random suffix.

    The result is `prefix` followed by `2 * byte_length` lowercase hex
    characters. Safe to call from any thread; no state is shared between calls.

    Args:
        prefix: Non-blank kind tag, e.g. "USR"
        byte_length: Number of random bytes in the suffix

    Returns:
        Generated identifier string

    Raises:
        InvalidArgumentError: If prefix is blank or byte_length < 1
    """
    ensure_not_blank(prefix, "prefix")
    ensure_in_range(byte_length, "byte_length", minimum=1)
    return f"{prefix}{secrets.token_hex(byte_length)}"


@total_ordering
class EntityId(BaseModel):
    """
    Strongly-typed entity identifier.

    Wraps an opaque string value. Subclasses declare `prefix`; equality and
    hashing follow the concrete kind and the value, so identifiers of
    different kinds never compare equal. Identifiers of one kind order by
    value, which the ORM relies on when flushing several rows of a table.
    """

    model_config = ConfigDict(frozen=True)

    prefix: ClassVar[str] = ""

    value: str

    def __init__(self, value: str, **data: Any) -> None:
        super().__init__(value=value, **data)

    @classmethod
    def new(cls: Type[TEntityId]) -> TEntityId:
        """Mint a new unique identifier of this kind."""
        return cls(generate_entity_id(cls.prefix, get_settings().ENTITY_ID_SUFFIX_BYTES))

    @classmethod
    def parse(cls: Type[TEntityId], text: str) -> TEntityId:
        """
        Wrap an existing identifier string after checking its prefix.

        Raises:
            InvalidArgumentError: If text is blank or carries another prefix
        """
        ensure_not_blank(text, "text")
        if not text.startswith(cls.prefix) or len(text) == len(cls.prefix):
            raise InvalidArgumentError(
                f"'{text}' is not a valid {cls.__name__}.",
                argument="text",
                value=text,
            )
        return cls(text)

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

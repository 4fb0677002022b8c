"""MailAddress value object implementation."""

from dataclasses import dataclass

from ..exceptions import InvalidAddressError


def _is_blank_or_spaces(value: str | None) -> bool:
    return value is None or not value.strip() or any(c.isspace() for c in value)


@dataclass(frozen=True)
class MailAddress:
    """Value object representing an envelope address (local@domain).

    Only the single ``@`` is checked, the parts are not validated against
    the RFC 5321 mailbox grammar.
    """

    local_part: str
    domain_part: str

    def __post_init__(self) -> None:
        """Validate both parts of the address."""
        if (
            _is_blank_or_spaces(self.local_part)
            or "@" in self.local_part
            or _is_blank_or_spaces(self.domain_part)
            or "@" in self.domain_part
        ):
            raise InvalidAddressError(
                "The address cannot be empty and must have one '@'"
            )

    @classmethod
    def parse(cls, raw: str | None) -> "MailAddress":
        """Create a MailAddress from a raw address string.

        Args:
            raw: The address, surrounding whitespace is ignored

        Returns:
            The parsed MailAddress

        Raises:
            InvalidAddressError: If the address is blank, contains whitespace
                or does not have exactly one '@' between two non-blank parts
        """
        address = raw.strip() if raw is not None else None
        if _is_blank_or_spaces(address) or "@" not in address:
            raise InvalidAddressError(
                "The address cannot be empty and must have one '@'"
            )

        local_part, _, domain_part = address.partition("@")
        if "@" in domain_part:
            raise InvalidAddressError("The address must have only one '@'")

        return cls(local_part, domain_part)

    @classmethod
    def from_parts(cls, local_part: str, domain_part: str) -> "MailAddress":
        """Create a MailAddress from its two parts, trimming them."""
        if local_part is None or domain_part is None:
            raise InvalidAddressError(
                "The address cannot be empty and must have one '@'"
            )
        return cls(local_part.strip(), domain_part.strip())

    @property
    def address(self) -> str:
        """Return the full address."""
        return f"{self.local_part}@{self.domain_part}"

    def __str__(self) -> str:
        """Return string representation."""
        return self.address

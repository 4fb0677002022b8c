"""SRS rewriting service."""

import logging

from ...domain.exceptions import InvalidAddressError, InvalidStateError, SRSException
from ...domain.services import (
    AddressRewriter,
    Clock,
    Srs0Rewriter,
    Srs1Rewriter,
    utc_now,
)
from ...domain.value_objects import (
    MailAddress,
    SRSFormat,
    SRSOptions,
    is_srs0_local_part,
    is_srs1_local_part,
    is_srs_address,
    parse_srs_address,
)

logger = logging.getLogger(__name__)


class SRSService:
    """Rewrites email and SRS addresses.

    Plain addresses are forwarded as SRS0, SRS addresses as SRS1 (guarded
    scheme). The service holds no mutable state and is safe to share.
    """

    def __init__(
        self,
        secret_key: str,
        options: SRSOptions | None = None,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the service.

        Args:
            secret_key: Key used to create the hash, can't be empty
            options: Engine configuration, defaults to SRSOptions()
            clock: Source of the current time
        """
        self.options = options or SRSOptions()
        self._rewriters: dict[SRSFormat, AddressRewriter] = {
            SRSFormat.SRS0: Srs0Rewriter(secret_key, self.options, clock),
            SRSFormat.SRS1: Srs1Rewriter(secret_key, self.options, clock),
        }

    def forward(self, address: str, forwarder: str) -> MailAddress:
        """Rewrite an address for a forwarder.

        A plain address becomes an SRS0 address, an SRS0 or SRS1 address
        becomes an SRS1 address.

        Args:
            address: Email or SRS address
            forwarder: The domain of this forwarder

        Returns:
            The SRS address, or the input when the forwarder is its own domain

        Raises:
            InvalidAddressError: If there's a problem with an address
            InvalidHashError: If the hash can't be generated
        """
        self._validate_forwarder(forwarder)
        return self._rewrite_forward(
            MailAddress.parse(address), forwarder.strip(), None
        )

    def forward_shortcut(self, address: str, forwarder: str) -> MailAddress:
        """Rewrite an address using the shortcut scheme, always producing SRS0.

        An SRS source is re-signed from its original sender instead of being
        wrapped, which drops the ability to bounce through the previous hop.
        :meth:`forward` is recommended.

        Raises:
            InvalidAddressError: If there's a problem with an address, or the
                SRS source is opaque
            InvalidHashError: If the hash can't be generated
        """
        self._validate_forwarder(forwarder)
        return self._rewrite_forward(
            MailAddress.parse(address), forwarder.strip(), SRSFormat.SRS0
        )

    def reverse(self, address: str) -> MailAddress:
        """Reverse an SRS0 or SRS1 address by one hop.

        Args:
            address: The SRS address to reverse

        Returns:
            The original sender for SRS0, the SRS0 address for SRS1

        Raises:
            InvalidAddressError: If the address is not an SRS address
            InvalidHashError: If the hash does not verify
            InvalidTimestampError: If the timestamp is expired
        """
        mail_address = MailAddress.parse(address)
        local_part = mail_address.local_part

        if is_srs0_local_part(local_part):
            srs_format = SRSFormat.SRS0
        elif is_srs1_local_part(local_part):
            srs_format = SRSFormat.SRS1
        else:
            raise InvalidAddressError("Not an SRS address")

        try:
            result = self.get_address_rewriter(srs_format).reverse(mail_address)
        except SRSException as e:
            logger.info(
                "Rejected %s address %s: %s",
                srs_format.value,
                mail_address,
                type(e).__name__,
            )
            raise

        if srs_format is SRSFormat.SRS0 and is_srs_address(result.address):
            raise InvalidStateError(f"Unable to reverse srs address: {mail_address}")

        logger.debug("Reversed %s to %s", mail_address, result)
        return result

    @staticmethod
    def as_source_address(srs_address: str) -> MailAddress:
        """Return the original sender contained in an SRS0 or SRS1 address.

        Nothing is verified, the address is only parsed.

        Raises:
            InvalidAddressError: If the address can't be parsed or is opaque
        """
        parsed = parse_srs_address(MailAddress.parse(srs_address), "=")
        if parsed.is_opaque:
            raise InvalidAddressError(f"Can't parse address {srs_address}")
        return parsed.source_address()

    def get_address_rewriter(self, srs_format: SRSFormat) -> AddressRewriter:
        """Return the rewriter of an SRS layer."""
        try:
            return self._rewriters[srs_format]
        except KeyError:
            raise InvalidStateError("Unknown srs version") from None

    def _rewrite_forward(
        self,
        address: MailAddress,
        forwarder: str,
        result_format: SRSFormat | None,
    ) -> MailAddress:
        # Don't rewrite same forwarder addresses if not forced
        if (
            forwarder.lower() == address.domain_part.lower()
            and not self.options.always_rewrite
        ):
            logger.debug("Not rewriting %s, already on %s", address, forwarder)
            return address

        if not is_srs_address(address.address):
            result = self.get_address_rewriter(SRSFormat.SRS0).forward(
                address, forwarder
            )
        elif result_format is SRSFormat.SRS0:
            srs_address = parse_srs_address(address, self.options.separator)
            if srs_address.is_opaque:
                raise InvalidAddressError("Invalid SRS address for shortcut scheme")
            result = self.get_address_rewriter(SRSFormat.SRS0).forward(
                srs_address.source_address(), forwarder
            )
        else:
            result = self.get_address_rewriter(SRSFormat.SRS1).forward(
                address, forwarder
            )

        if not is_srs_address(result.address):
            raise InvalidStateError(f"Unable to rewrite address {result}")

        logger.debug("Forwarded %s to %s", address, result)
        return result

    @staticmethod
    def _validate_forwarder(forwarder: str | None) -> None:
        if forwarder is None or not forwarder.strip() or "@" in forwarder:
            raise InvalidAddressError("Invalid forwarder (alias)")

"""Address rewriter domain service."""

import base64
import hashlib
import hmac
from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from ..exceptions import InvalidAddressError, InvalidHashError, InvalidStateError
from ..value_objects import MailAddress, Srs0Address, Srs1Address, SRSOptions, SrsAddress
from .timestamp import Clock, decode_timestamp, encode_timestamp, today, utc_now


class AddressRewriter(ABC):
    """Abstract base class for the SRS0 and SRS1 rewriters.

    Holds the primitives both layers share: the keyed hash, its verification,
    and the timestamp codec bound to the configured lifetime and clock.
    Instances are immutable and can be shared between threads.
    """

    def __init__(
        self, secret_key: str, options: SRSOptions, clock: Clock = utc_now
    ) -> None:
        """Initialize the rewriter.

        Args:
            secret_key: Key of the HMAC used to sign addresses
            options: Engine configuration
            clock: Source of the current time
        """
        self._secret_key = secret_key
        self._options = options
        self._clock = clock

    @property
    def options(self) -> SRSOptions:
        """Return the engine configuration."""
        return self._options

    @abstractmethod
    def forward(self, address: MailAddress, forwarder: str) -> MailAddress:
        """Wrap an address for a forwarder.

        Args:
            address: The address to rewrite
            forwarder: The domain of this forwarder

        Returns:
            The rewritten SRS address

        Raises:
            InvalidAddressError: If the address can't be rewritten
            InvalidHashError: If the hash can't be calculated
        """
        pass

    @abstractmethod
    def reverse(self, address: MailAddress) -> MailAddress:
        """Unwrap one layer of an SRS address.

        Args:
            address: The SRS address to reverse

        Returns:
            The address one hop closer to the original sender

        Raises:
            InvalidAddressError: If the address is not a valid SRS address
            InvalidHashError: If the hash does not verify
            InvalidTimestampError: If the timestamp is out of the lifetime
        """
        pass

    def calculate_hash(self, length: int, *data: str) -> str:
        """Calculate the truncated, base64 encoded HMAC-SHA1 of some fields.

        Args:
            length: Number of characters to keep
            *data: Fields, concatenated and lower-cased before hashing

        Returns:
            The first ``length`` characters of the encoded digest

        Raises:
            InvalidStateError: If the secret key is blank or ``length`` is
                not positive or larger than the encoded digest
            InvalidHashError: If the HMAC can't be computed
        """
        if not self._secret_key or not self._secret_key.strip():
            raise InvalidStateError("SecretKey can't be empty")
        if length < 1:
            raise InvalidStateError(f"Invalid hash length {length}")

        message = "".join(data).lower().encode("utf-8")
        try:
            digest = hmac.new(
                self._secret_key.encode("utf-8"), message, hashlib.sha1
            ).digest()
        except (TypeError, ValueError) as e:
            raise InvalidHashError(f"Error calculating hash: {e}") from e

        encoded = base64.b64encode(digest).decode("ascii")
        if len(encoded) < length:
            raise InvalidStateError(
                "Configured hash length is bigger than generated hash "
                f"({len(encoded)} characters)"
            )
        return encoded[:length]

    def is_invalid_hash(self, srs_address: SrsAddress) -> bool:
        """Check the hash of a parsed SRS address.

        The hash is recalculated with the length of the claimed hash, so
        addresses from a peer with a different hash length still verify.

        Raises:
            InvalidAddressError: If the address is an opaque SRS0
        """
        if isinstance(srs_address, Srs1Address):
            claimed = srs_address.hash
            expected = self.calculate_hash(
                len(claimed),
                srs_address.original_forwarder,
                srs_address.opaque_part,
            )
        elif isinstance(srs_address, Srs0Address) and not srs_address.is_opaque:
            source = srs_address.source
            claimed = source.hash
            expected = self.calculate_hash(
                len(claimed), source.timestamp, source.hostname, source.local_part
            )
        else:
            raise InvalidAddressError("Not an SRS address")

        return len(expected) < self._options.hash_min or not hmac.compare_digest(
            claimed.encode("utf-8"), expected.encode("utf-8")
        )

    def today(self) -> datetime:
        """Return UTC midnight of the current day."""
        return today(self._clock)

    def encode_timestamp(self, moment: datetime) -> str:
        """Encode a day as an SRS timestamp."""
        return encode_timestamp(moment)

    def decode_timestamp(self, timestamp: str) -> datetime:
        """Decode an SRS timestamp relative to the current day."""
        return decode_timestamp(timestamp, self._clock)

    def is_valid_timestamp(self, timestamp: datetime | None) -> bool:
        """Check that a decoded timestamp falls in the validity window.

        Days from ``today - lifetime`` up to ``today + 1`` are accepted, the
        extra day on both sides absorbs clock skew between relays.
        """
        if timestamp is None:
            return False
        if self._options.disable_timestamp_validation:
            return True

        current = self.today()
        start_of_lifetime = current - (self._options.lifetime + timedelta(days=1))
        return start_of_lifetime < timestamp < current + timedelta(days=2)

"""Address controller for describing and generating MAC addresses."""

import random
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ..core.controller import BaseController
from ..core.errors import GenerationError, ParseError
from ..core.mac import MacAddress, generate, parse
from ..models.address import AddressDescription, GenerationOptions


if TYPE_CHECKING:
    from ..core.application import Application  # noqa: F401


class AddressController(BaseController["Application"]):
    """Controller for address operations.

    Wraps the pure functions in ``core.mac`` with the stream and batch
    handling used by the command line: bad input lines are logged and
    skipped, batches are deduplicated.
    """

    def describe(self, address: MacAddress) -> AddressDescription:
        """Describe a single address."""

        return AddressDescription.from_address(address)

    def describe_lines(self, lines: Iterable[str]) -> Iterator[AddressDescription]:
        """Describe every parsable line, logging and skipping the rest."""

        for lineno, line in enumerate(lines, start=1):
            text = line.strip()
            if not text:
                continue

            try:
                address = parse(text)
            except ParseError as e:
                self.logger.error("Failed to parse address on line %d: %s", lineno, e)
                continue

            yield self.describe(address)

    def reachable_space(self, options: GenerationOptions) -> int:
        """Number of distinct addresses a batch with these options can produce."""

        # the discarded broadcast draw is unreachable when no other draw maps onto it
        if options.organization is not None:
            space = 1 << 24
            if options.organization == "ffffff":
                space -= 1
            return space

        forced_bits = 0
        if options.multicast or options.unicast:
            forced_bits += 1
        if options.local:
            forced_bits += 1
        space = 1 << (48 - forced_bits)
        if forced_bits == 0:
            space -= 1
        return space

    def generate_batch(self, options: GenerationOptions, rng: random.Random | None = None) -> list[MacAddress]:
        """Generate ``options.count`` distinct addresses.

        Broadcast draws are discarded before any forcing is applied. Forcing is
        applied as multicast, then unicast, then local, so unicast wins over
        multicast when both are enabled.
        """

        organization = options.organization_address

        if options.count > self.reachable_space(options):
            self.logger.warning(
                "Requested %d addresses but only %d are reachable; generation will not finish "
                "unless --max-attempts is set",
                options.count,
                self.reachable_space(options),
            )

        # dict keeps insertion order, unlike set
        addresses: dict[MacAddress, None] = {}
        attempts = 0

        while len(addresses) < options.count:
            if options.max_attempts is not None and attempts >= options.max_attempts:
                raise GenerationError(options.count, attempts, len(addresses))
            attempts += 1

            address = generate(organization, rng)
            if address.is_broadcast:
                continue

            if options.multicast:
                address = address.as_multicast()
            if options.unicast:
                address = address.as_unicast()
            if options.local:
                address = address.as_locally_administered()

            addresses[address] = None

        self.logger.debug("Generated %d addresses in %d attempts", len(addresses), attempts)
        return list(addresses)

"""Custom Click paramtypes for MAC addresses and organizations."""

import click

from .errors import ParseError
from .mac import MacAddress, parse, parse_organization


class OrganizationType(click.ParamType):
    name = "organization"

    def convert(self, value: str | MacAddress, param: click.Parameter | None, ctx: click.Context | None) -> MacAddress:
        """Validate and convert an OUI such as 'C42996'."""

        if isinstance(value, MacAddress):
            return value
        try:
            return parse_organization(value)
        except ParseError:
            self.fail(f"Organization must be exactly six hex digits, such as 'C42996': {value!r}", param, ctx)


class MacAddressType(click.ParamType):
    name = "mac_address"

    def convert(self, value: str | MacAddress, param: click.Parameter | None, ctx: click.Context | None) -> MacAddress:
        """Validate and convert an address such as '02:00:00:00:00:01'."""

        if isinstance(value, MacAddress):
            return value
        try:
            return parse(value)
        except ParseError:
            self.fail(f"Address must look like 'xx:xx:xx:xx:xx:xx': {value!r}", param, ctx)

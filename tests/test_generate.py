import random
import secrets

from ethermaker.core import mac
from ethermaker.core.mac import MacAddress, generate, parse_organization


def test_default_source_is_system_random():
    assert isinstance(mac._system_random, secrets.SystemRandom)
    assert isinstance(generate(), MacAddress)


def test_forcing_holds_for_generated_addresses():
    for _ in range(1000):
        address = generate()

        assert address.as_locally_administered().is_locally_administered
        assert address.as_multicast().is_multicast
        assert not address.as_unicast().is_multicast
        assert not address.as_oui_enforced().is_locally_administered


def test_organization_override_is_copied():
    for _ in range(1000):
        org = generate()
        address = generate(org)

        assert address.organization == org.organization
        assert address.is_multicast == org.is_multicast
        assert address.is_locally_administered == org.is_locally_administered


def test_seeded_source_is_deterministic():
    assert generate(None, random.Random(42)) == generate(None, random.Random(42))


def test_override_keeps_host_octets_from_same_draws():
    org = parse_organization("F497C2")

    plain = generate(None, random.Random(1234))
    copied = generate(org, random.Random(1234))

    assert copied.octets[:3] == (0xF4, 0x97, 0xC2)
    assert copied.octets[3:] == plain.octets[3:]


def test_six_draws_consumed_with_or_without_override():
    org = parse_organization("000000")

    for organization in (None, org):
        rng = random.Random(99)
        reference = random.Random(99)

        generate(organization, rng)
        for _ in range(6):
            reference.randrange(256)

        assert rng.randrange(256) == reference.randrange(256)

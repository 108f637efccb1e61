import pytest

from touch_joystick import Zone, ZoneConflictError, ZoneRegistry


def test_unzoned_claim_on_empty_registry_gets_full_screen():
    registry = ZoneRegistry()
    owner = object()
    assert registry.claim(None, owner)
    assert registry.reserved_zones == frozenset()
    assert registry.full_screen_owner is owner


def test_opposing_zones_can_both_be_claimed():
    registry = ZoneRegistry()
    left, right = object(), object()
    assert registry.claim(Zone.LEFT, left)
    assert registry.claim(Zone.RIGHT, right)
    assert registry.is_reserved(Zone.LEFT)
    assert registry.owner(Zone.RIGHT) is right


def test_same_zone_twice_fails():
    registry = ZoneRegistry()
    first = object()
    assert registry.claim(Zone.LEFT, first)
    assert not registry.claim(Zone.LEFT, object())
    assert registry.owner(Zone.LEFT) is first


def test_zone_is_required_once_one_is_reserved():
    registry = ZoneRegistry()
    registry.claim(Zone.RIGHT, object())
    assert not registry.claim(None, object())


@pytest.mark.parametrize("zone", [None, Zone.LEFT, Zone.RIGHT])
def test_third_claim_always_fails(zone):
    registry = ZoneRegistry()
    registry.claim(Zone.LEFT, object())
    registry.claim(Zone.RIGHT, object())
    assert not registry.claim(zone, object())


def test_release_frees_zone():
    registry = ZoneRegistry()
    registry.claim(Zone.LEFT, object())
    registry.release(Zone.LEFT)
    assert not registry.is_reserved(Zone.LEFT)
    assert registry.claim(Zone.LEFT, object())
    registry.release(None)  # no-op


def test_claim_or_raise():
    registry = ZoneRegistry()
    registry.claim_or_raise(Zone.LEFT, object())
    with pytest.raises(ZoneConflictError):
        registry.claim_or_raise(Zone.LEFT, object())


@pytest.mark.parametrize("zone", [None, Zone.LEFT, Zone.RIGHT])
def test_full_screen_holder_blocks_every_other_claim(zone):
    registry = ZoneRegistry()
    registry.claim(None, object())
    assert not registry.claim(zone, object())
    assert registry.reserved_zones == frozenset()


def test_release_owner_frees_full_screen_and_zones():
    registry = ZoneRegistry()
    whole = object()
    registry.claim(None, whole)
    registry.release_owner(whole)
    assert registry.full_screen_owner is None

    left = object()
    assert registry.claim(Zone.LEFT, left)
    registry.release_owner(object())
    assert registry.owner(Zone.LEFT) is left
    registry.release_owner(left)
    assert not registry.is_reserved(Zone.LEFT)

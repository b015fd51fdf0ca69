"""Tests for the admin authority."""

import pytest

from storeverify.auth import AdminAuthority, is_admin, require_admin
from storeverify.errors import ErrorCode, NotAuthorized

A0 = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
B = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
C = "ST3NBRSFKX28FQ2ZJ1MAKX58HKHSDGNV5YC7WZ5S"


def test_genesis_admin():
    auth = AdminAuthority(A0)
    assert auth.current_admin() == A0
    assert auth.authorize(A0)


def test_authorize_only_matches_admin():
    auth = AdminAuthority(A0)
    assert auth.authorize(A0) is True
    assert auth.authorize(B) is False
    assert is_admin(auth, A0)
    assert not is_admin(auth, B)


def test_require_admin_raises_for_non_admin():
    auth = AdminAuthority(A0)
    require_admin(auth, A0)
    with pytest.raises(NotAuthorized) as exc:
        require_admin(auth, B)
    assert exc.value.code == ErrorCode.NOT_AUTHORIZED
    assert exc.value.caller == B


def test_transfer_by_admin():
    auth = AdminAuthority(A0)
    auth.transfer(B, A0)
    assert auth.current_admin() == B
    assert not auth.authorize(A0)


def test_transfer_by_non_admin_leaves_admin_unchanged():
    auth = AdminAuthority(A0)
    with pytest.raises(NotAuthorized):
        auth.transfer(B, C)
    assert auth.current_admin() == A0


def test_self_transfer_is_allowed():
    auth = AdminAuthority(A0)
    auth.transfer(A0, A0)
    assert auth.current_admin() == A0


def test_old_admin_loses_rights_after_transfer():
    auth = AdminAuthority(A0)
    auth.transfer(B, A0)
    with pytest.raises(NotAuthorized):
        auth.transfer(C, A0)
    auth.transfer(C, B)
    assert auth.current_admin() == C

import pytest

from extbuf.buffer import AllocationLimitExceeded, next_capacity


def test_returns_current_when_it_already_fits() -> None:
    assert next_capacity(1024, 1024, 4096) == 1024
    assert next_capacity(1024, 10, 4096) == 1024


def test_doubles_until_requirement_is_met() -> None:
    assert next_capacity(1024, 1025, 1 << 20) == 2048
    assert next_capacity(1024, 5000, 1 << 20) == 8192


def test_clamps_to_ceiling() -> None:
    assert next_capacity(1024, 3000, 3000) == 3000


def test_rejects_requirement_above_ceiling() -> None:
    with pytest.raises(AllocationLimitExceeded) as excinfo:
        next_capacity(1024, 4097, 4096)

    assert excinfo.value.requested == 4097
    assert excinfo.value.limit == 4096

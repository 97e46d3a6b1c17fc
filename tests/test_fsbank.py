import pytest

from insound.fsbank import (
    BuildFlags,
    Format,
    FsbVersion,
    InitFlags,
    Result,
    State,
    error_string,
)


def test_ok_message():
    assert error_string(Result.OK) == "No errors."


def test_known_messages():
    assert error_string(Result.ERR_MEMORY) == "Run out of memory."
    assert error_string(Result.ERR_INITIALIZED) == "Already initialized."
    assert error_string(Result.ERR_ENCODER_FILE_NOTFOUND) == (
        "External encoder dynamic library not found."
    )


def test_plain_int_accepted():
    assert error_string(int(Result.ERR_UNINITIALIZED)) == "Not initialized yet."


@pytest.mark.parametrize("value", [-1, len(Result), 1000])
def test_unknown_codes(value):
    assert error_string(value) == "Unknown error."


@pytest.mark.parametrize("result", list(Result))
def test_every_result_has_message(result):
    assert error_string(result) != "Unknown error."
    assert error_string(result).endswith(".")


def test_messages_are_distinct():
    messages = {error_string(r) for r in Result}
    assert len(messages) == len(Result)


def test_plain_codes_match_results():
    assert [error_string(n) for n in range(len(Result))] == [
        error_string(Result(n)) for n in range(len(Result))
    ]
    assert Result(21) == Result.ERR_ENCODER_FILE_BAD


def test_format_values():
    assert Format(0) == Format.PCM
    assert Format(5) == Format.OPUS
    assert Format(6) == Format.MAX


def test_fsb_version_values():
    assert FsbVersion(0) == FsbVersion.FSB5
    assert FsbVersion(1) == FsbVersion.MAX


def test_state_values():
    assert State(0) == State.DECODING
    assert State(5) == State.FINISHED
    assert State(7) == State.WARNING


def test_build_masks_from_values():
    assert BuildFlags(0x21F) == BuildFlags.OVERRIDE_MASK
    assert BuildFlags(0x16) == BuildFlags.CACHE_VALIDATION_MASK
    assert BuildFlags(0x100) == BuildFlags.NOGUID


def test_init_flags_from_value():
    flags = InitFlags(0x11)
    assert flags == InitFlags.IGNOREERRORS | InitFlags.GENERATEPROGRESSITEMS
    assert InitFlags.WARNINGSASERRORS not in flags
    assert InitFlags(0) == InitFlags.NORMAL
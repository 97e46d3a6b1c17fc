"""Constants, flags and result codes of the FSB sound bank builder."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class InitFlags(IntFlag):
    """Flags passed when initialising the bank builder."""

    NORMAL = 0x00000000
    IGNOREERRORS = 0x00000001
    WARNINGSASERRORS = 0x00000002
    CREATEINCLUDEHEADER = 0x00000004
    DONTLOADCACHEFILES = 0x00000008
    GENERATEPROGRESSITEMS = 0x00000010


class BuildFlags(IntFlag):
    """Flags that control how a bank is built."""

    DEFAULT = 0x00000000
    DISABLESYNCPOINTS = 0x00000001
    DONTLOOP = 0x00000002
    FILTERHIGHFREQ = 0x00000004
    DISABLESEEKING = 0x00000008
    OPTIMIZESAMPLERATE = 0x00000010
    FSB5_DONTWRITENAMES = 0x00000080
    NOGUID = 0x00000100
    WRITEPEAKVOLUME = 0x00000200

    OVERRIDE_MASK = (
        DISABLESYNCPOINTS
        | DONTLOOP
        | FILTERHIGHFREQ
        | DISABLESEEKING
        | OPTIMIZESAMPLERATE
        | WRITEPEAKVOLUME
    )
    CACHE_VALIDATION_MASK = DONTLOOP | FILTERHIGHFREQ | OPTIMIZESAMPLERATE


class Result(IntEnum):
    """Result codes reported by the bank builder."""

    OK = 0
    ERR_CACHE_CHUNKNOTFOUND = 1
    ERR_CANCELLED = 2
    ERR_CANNOT_CONTINUE = 3
    ERR_ENCODER = 4
    ERR_ENCODER_INIT = 5
    ERR_ENCODER_NOTSUPPORTED = 6
    ERR_FILE_OS = 7
    ERR_FILE_NOTFOUND = 8
    ERR_FMOD = 9
    ERR_INITIALIZED = 10
    ERR_INVALID_FORMAT = 11
    ERR_INVALID_PARAM = 12
    ERR_MEMORY = 13
    ERR_UNINITIALIZED = 14
    ERR_WRITER_FORMAT = 15
    WARN_CANNOTLOOP = 16
    WARN_IGNORED_FILTERHIGHFREQ = 17
    WARN_IGNORED_DISABLESEEKING = 18
    WARN_FORCED_DONTWRITENAMES = 19
    ERR_ENCODER_FILE_NOTFOUND = 20
    ERR_ENCODER_FILE_BAD = 21


class Format(IntEnum):
    """Encoding formats a bank can be built with."""

    PCM = 0
    XMA = 1
    AT9 = 2
    VORBIS = 3
    FADPCM = 4
    OPUS = 5

    MAX = 6


class FsbVersion(IntEnum):
    """Versions of the FSB container."""

    FSB5 = 0

    MAX = 1


class State(IntEnum):
    """Stages a build passes through, as reported in progress items."""

    DECODING = 0
    ANALYSING = 1
    PREPROCESSING = 2
    ENCODING = 3
    WRITING = 4
    FINISHED = 5
    FAILED = 6
    WARNING = 7


_MESSAGES: dict[Result, str] = {
    Result.OK: "No errors.",
    Result.ERR_CACHE_CHUNKNOTFOUND: "An expected chunk is missing from the cache, perhaps try deleting cache files.",
    Result.ERR_CANCELLED: "The build process was cancelled during compilation by the user.",
    Result.ERR_CANNOT_CONTINUE: "The build process cannot continue due to previously ignored errors.",
    Result.ERR_ENCODER: "Encoder for chosen format has encountered an unexpected error.",
    Result.ERR_ENCODER_INIT: "Encoder initialization failed.",
    Result.ERR_ENCODER_NOTSUPPORTED: "Encoder for chosen format is not supported on this platform.",
    Result.ERR_FILE_OS: "An operating system based file error was encountered.",
    Result.ERR_FILE_NOTFOUND: "A specified file could not be found.",
    Result.ERR_FMOD: "Internal error from FMOD sub-system.",
    Result.ERR_INITIALIZED: "Already initialized.",
    Result.ERR_INVALID_FORMAT: "The format of the source file is invalid.",
    Result.ERR_INVALID_PARAM: "An invalid parameter has been passed to this function.",
    Result.ERR_MEMORY: "Run out of memory.",
    Result.ERR_UNINITIALIZED: "Not initialized yet.",
    Result.ERR_WRITER_FORMAT: "Chosen encode format is not supported by this FSB version.",
    Result.WARN_CANNOTLOOP: "Source file is too short for seamless looping. Looping disabled.",
    Result.WARN_IGNORED_FILTERHIGHFREQ: "FSBANK_BUILD_FILTERHIGHFREQ flag ignored: feature only supported by XMA format.",
    Result.WARN_IGNORED_DISABLESEEKING: "FSBANK_BUILD_DISABLESEEKING flag ignored: feature only supported by XMA format.",
    Result.WARN_FORCED_DONTWRITENAMES: "FSBANK_BUILD_FSB5_DONTWRITENAMES flag forced: cannot write names when source is from memory.",
    Result.ERR_ENCODER_FILE_NOTFOUND: "External encoder dynamic library not found.",
    Result.ERR_ENCODER_FILE_BAD: "External encoder dynamic library could not be loaded, possibly incorrect binary format, incorrect architecture, or file corruption.",
}

_UNKNOWN = "Unknown error."


def error_string(result: Result | int) -> str:
    """Return the human-readable description of a result code."""
    try:
        return _MESSAGES[Result(result)]
    except (ValueError, KeyError):
        return _UNKNOWN
"""Centralized user-facing text for fastfile."""

from __future__ import annotations


class Styles:
    ERROR = "red"
    WARNING = "yellow"
    SUCCESS = "green"
    INFO = "dim"
    TITLE = "bold cyan"
    TABLE_HEADER = "bold magenta"


class Messages:
    APP_HELP = "fastfile – filesystem metadata queries accelerated by the Everything index."
    HELP_VERBOSE = "Log issued index queries and fallback decisions."
    HELP_PATH = "Absolute path to query."
    HELP_DIR = "Treat the path as a directory instead of a file."
    HELP_LIST_DIRS = "List directories instead of files."
    HELP_RECURSIVE = "Include every descendant instead of immediate children only."
    HELP_DOCTOR = "Check whether the Everything client is reachable and a drive is indexed."
    HELP_DOCTOR_DRIVE = "Drive letter whose index readiness should be probed."
    HELP_SET_ES_PATH = "Persist the path of the Everything command-line client (es.exe)."
    HELP_CLEAR_ES_PATH = "Remove the stored Everything client path."
    HELP_SET_VERIFY = "Cross-check every indexed answer against the filesystem (true/false)."
    HELP_SET_ENABLED = "Allow or forbid use of the Everything index (true/false)."
    HELP_SHOW_CONFIG = "Show current configuration."

    ERROR_PATH_NONE = "Path must not be None."
    ERROR_PATH_EMPTY = "Path must not be empty."
    ERROR_PATH_TYPE = "Path must be a string or os.PathLike, got {type}."
    ERROR_PATH_NUL = "Path must not contain NUL characters: {path!r}"
    ERROR_PATH_QUOTE = "Path must not contain double quotes: {path}"
    ERROR_SEARCH_OPTION = "Unsupported enumeration mode: {value!r}"
    ERROR_TRANSPORT_START = "Failed to start Everything client {executable}: {reason}"
    ERROR_TRANSPORT_EXIT = "Failed to connect to Everything (exit code {code})."
    ERROR_PARSE_NO_SEPARATOR = "Index output line has no field separator: {line!r}"
    ERROR_PARSE_FIELD = "Index output line has a non-integer leading field: {line!r}"
    ERROR_PARSE_FILETIME = "Index output line has an out-of-range file time: {line!r}"
    ERROR_DISCREPANCY = (
        "Index result for {operation}({path}) disagrees with the filesystem: "
        "indexed={indexed!r} direct={direct!r}"
    )
    ERROR_CONFIG_JSON_INVALID = "Config payload must be a JSON object."
    ERROR_CONFIG_VALUE_INVALID = "Invalid config value for {field}."
    ERROR_BOOLEAN_INVALID = "Invalid boolean value: {value}"

    LOG_QUERY = "Everything query: %s"
    LOG_FALLBACK = "Everything index disabled for this process after error: %s"

    INFO_EXISTS = "true"
    INFO_MISSING = "false"
    INFO_NOT_FOUND = "Not found: {path}"
    INFO_INVALID_PATH = "Invalid path: {reason}"
    INFO_NO_RESULTS = "No entries found under {path}."
    INFO_ES_PATH_SET = "Everything client path set to {value}."
    INFO_ES_PATH_CLEARED = "Everything client path cleared."
    INFO_VERIFY_SET = "Verification mode set to {value}."
    INFO_ENABLED_SET = "Index usage set to {value}."
    INFO_CONFIG_SUMMARY = (
        "Everything client: {es_path}\n"
        "Verification mode: {verify}\n"
        "Index enabled: {enabled}\n"
        "Config file: {path}"
    )

    DOCTOR_TITLE = "fastfile v{version} diagnostics"
    DOCTOR_CLIENT_FOUND = "Everything client found at {path}"
    DOCTOR_CLIENT_MISSING = "Everything client {name} not found"
    DOCTOR_CLIENT_MISSING_DETAIL = (
        "Install the Everything command-line interface or run "
        "`fastfile config --set-es-path <path>`."
    )
    DOCTOR_CONFIG_EXISTS = "Config file at {path}"
    DOCTOR_CONFIG_DEFAULT = "Using defaults (no config file)"
    DOCTOR_CONFIG_INVALID = "Config file {path} could not be read"
    DOCTOR_INDEX_DISABLED = "Index usage disabled in config"
    DOCTOR_DRIVE_READY = "Drive {drive}: is indexed"
    DOCTOR_DRIVE_NOT_READY = "Drive {drive}: has no indexed entries"
    DOCTOR_DRIVE_FAILED = "Drive {drive}: probe failed"
    DOCTOR_DRIVE_SKIPPED = "No drive given; skipped readiness probe"
    DOCTOR_ALL_PASSED = "All checks passed."
    DOCTOR_SOME_FAILED = "Some checks failed."

    TABLE_HEADER_SIZE = "Size"
    TABLE_HEADER_PATH = "Path"

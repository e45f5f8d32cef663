"""Constants used in the project."""


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    # Marker prefix required by the canonical semver form ("v1.2.3").
    SEMVER_PREFIX = "v"
    ZERO_ADDRESS = "0x" + "0" * 40
    ADDRESS_PATTERN = "^0x[a-fA-F0-9]{40}$"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL_DEFAULT = "INFO"
    ENV_LOG_LEVEL = "SUPERCHAIN_LOG_LEVEL"
    ENV_LOG_FORMAT = "SUPERCHAIN_LOG_FORMAT"

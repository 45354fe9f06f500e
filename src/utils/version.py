from importlib import metadata

DISTRIBUTION_NAME = "slacktoolkit"


def get_version() -> str:
    """Installed package version, or ``dev`` when running from a source checkout."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "dev"

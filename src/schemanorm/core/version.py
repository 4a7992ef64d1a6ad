from importlib import metadata

try:
    SCHEMANORM_VERSION = metadata.version("schemanorm")
except metadata.PackageNotFoundError:
    # Local run without installation
    SCHEMANORM_VERSION = "dev"

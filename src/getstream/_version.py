from importlib.metadata import PackageNotFoundError, version

SDK_NAME = "getstream-python"

try:  # pragma: no cover - best-effort during development
    __version__ = version("getstream-sdk")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

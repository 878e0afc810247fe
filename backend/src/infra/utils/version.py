import importlib.util
from pathlib import Path

DEFAULT_VERSION = "0.0.0"


def get_version() -> str:
    try:
        from version import __version__

        return __version__
    except ImportError:
        pass

    # backend/version.py when the backend directory is not on sys.path
    version_module_path = Path(__file__).parents[3] / "version.py"

    if not version_module_path.is_file():
        return DEFAULT_VERSION

    spec = importlib.util.spec_from_file_location("version", version_module_path)

    if spec is None or spec.loader is None:
        return DEFAULT_VERSION

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    return getattr(module, "__version__", DEFAULT_VERSION)

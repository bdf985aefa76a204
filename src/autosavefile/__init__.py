"""AutoSaveFile - save unsaved documents when the editor loses focus"""

__version__ = "1.0.0"
__description__ = "Save unsaved documents when the editor loses focus"

__all__ = ["main", "AutoSaveFile", "SaveDecisionEngine", "SaveConfig", "__version__"]


def __getattr__(name: str):
    """Lazy import so importing the core does not load dotenv settings.

    This keeps ``autosavefile.core`` usable from hosts that supply their
    own configuration snapshot.
    """
    if name == "AutoSaveFile":
        from .main import AutoSaveFile

        return AutoSaveFile
    if name == "main":
        from .main import main

        return main
    if name == "SaveDecisionEngine":
        from .core.engine import SaveDecisionEngine

        return SaveDecisionEngine
    if name == "SaveConfig":
        from .core.config_model import SaveConfig

        return SaveConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

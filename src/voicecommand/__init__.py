"""voicecommand - Adapter pattern demo: drive a text-only bot by voice"""

__version__ = "1.0.0"
__description__ = "Adapter pattern demo: drive a text-only bot by voice"

__all__ = ["main", "SmartBot", "VoiceSystem", "VoiceToTextAdapter", "__version__"]


def __getattr__(name: str):
    """Lazy import so the package import does not wire up the console adapters."""
    if name == "main":
        from .main import main

        return main
    if name == "SmartBot":
        from .core.bot import SmartBot

        return SmartBot
    if name == "VoiceSystem":
        from .voice_system import VoiceSystem

        return VoiceSystem
    if name == "VoiceToTextAdapter":
        from .adapters.voice_to_text import VoiceToTextAdapter

        return VoiceToTextAdapter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

"""Configuration for voicecommand"""
import os

from dotenv import load_dotenv

from .core.config_model import DEFAULT_PHRASE

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Demo configuration, read from the environment (and .env)"""

    def __init__(self):
        # What the simulated microphone "hears"
        self.RECOGNIZED_PHRASE = os.getenv("VOICECOMMAND_PHRASE", DEFAULT_PHRASE)
        # Set to false to simulate a missing microphone
        self.DEVICE_AVAILABLE = _flag("VOICECOMMAND_DEVICE_AVAILABLE", "true")

        # Keep the console open until Enter is pressed
        self.WAIT_FOR_ENTER = _flag("VOICECOMMAND_WAIT_FOR_ENTER", "true")

        self.DEBUG = _flag("DEBUG", "false")


config = Config()

import json

from pydantic_settings import BaseSettings, SettingsConfigDict


class TranscriberConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MEETING_TRANSCRIBER_")

    word_level_timestamps: bool = False

    sample_rate: int = 16000
    bits_per_sample: int = 16
    channels: int = 1

    conversation_file: str = ""
    log_file: str = ""

    def read_conversation(self, path: str = "") -> dict:
        path = path or self.conversation_file
        if not path:
            return {}
        with open(path) as f:
            return json.load(f)

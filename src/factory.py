import logging

from adapters.wave_audio_source import WaveFormatAudioSource
from config import TranscriberConfig
from domain.conversation import ConversationInfo
from domain.recognizer import TranscriptionServiceRecognizer
from domain.transcriber import ConversationTranscriber
from ports.connection import ConnectionFactoryPort

logger = logging.getLogger(__name__)


def create_audio_source(config: TranscriberConfig) -> WaveFormatAudioSource:
    return WaveFormatAudioSource(
        sample_rate=config.sample_rate,
        bits_per_sample=config.bits_per_sample,
        channels=config.channels,
    )


def create_transcriber(config: TranscriberConfig, conversation_path: str = "") -> ConversationTranscriber:
    document = config.read_conversation(conversation_path)
    if not document:
        logger.info("No conversation file given, using an empty conversation")
        document = {"id": ""}
    return ConversationTranscriber(ConversationInfo.from_dict(document))


def create_recognizer(
    config: TranscriberConfig,
    transcriber: ConversationTranscriber,
    connection_factory: ConnectionFactoryPort,
    authentication: object = None,
) -> TranscriptionServiceRecognizer:
    return TranscriptionServiceRecognizer(
        authentication=authentication,
        connection_factory=connection_factory,
        audio_source=create_audio_source(config),
        transcriber=transcriber,
        word_level_timestamps=config.word_level_timestamps,
    )

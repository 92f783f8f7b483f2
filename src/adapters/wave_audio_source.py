import io
import wave


class WaveFormatAudioSource:
    """Describes PCM audio with the RIFF/WAVE header the service expects."""

    def __init__(self, sample_rate: int = 16000, bits_per_sample: int = 16, channels: int = 1) -> None:
        if bits_per_sample % 8:
            raise ValueError(f"bits_per_sample must be a multiple of 8, got {bits_per_sample}")
        self._sample_rate = sample_rate
        self._bits_per_sample = bits_per_sample
        self._channels = channels

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def bits_per_sample(self) -> int:
        return self._bits_per_sample

    def format_header(self) -> bytes:
        buffer = io.BytesIO()
        with wave.open(buffer, "wb") as wf:
            wf.setnchannels(self._channels)
            wf.setsampwidth(self._bits_per_sample // 8)
            wf.setframerate(self._sample_rate)
            wf.writeframes(b"")
        return buffer.getvalue()

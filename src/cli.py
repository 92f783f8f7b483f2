import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from config import TranscriberConfig
from log_format import ColoredFormatter
from ports.connection import ConnectionMessage, MessageType

ENV_FILE_PATH = Path.home() / ".config" / "meeting-transcriber" / "env"


def _load_env_file() -> None:
    if not ENV_FILE_PATH.exists():
        return
    with open(ENV_FILE_PATH) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            value = value.strip("'\"")
            if key not in os.environ:
                os.environ[key] = value


def _configure_logging(verbose: bool, log_file: str) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColoredFormatter(datefmt="%H:%M:%S"))
    handlers: list[logging.Handler] = [handler]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        handlers.append(file_handler)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=handlers,
        force=True,
    )


def format_message(message: ConnectionMessage) -> str:
    header = f"{message.path} [{message.content_type}] X-RequestId: {message.request_id}"
    if message.message_type is MessageType.BINARY:
        return f"{header}\n{message.body.hex()} ({len(message.body)} bytes)"
    return f"{header}\n{message.body}"


def main(argv: list[str] | None = None) -> None:
    _load_env_file()
    parser = argparse.ArgumentParser(description="Conversation transcription session adapter")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--conversation", help="Conversation JSON file (id, participants, properties)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("handshake", help="Print the session start messages")

    event_parser = subparsers.add_parser("event", help="Print a speech.event payload")
    event_parser.add_argument("name", help="Event command, e.g. start or mute")

    args = parser.parse_args(argv)

    config = TranscriberConfig()
    _configure_logging(args.verbose, config.log_file)

    try:
        if args.command == "handshake":
            messages = asyncio.run(_run_handshake(config, args.conversation or ""))
            for message in messages:
                print(format_message(message))
        elif args.command == "event":
            print(_build_event(config, args.conversation or "", args.name))
    except (OSError, ValueError) as e:
        print(f"Cannot load conversation: {e}", file=sys.stderr)
        sys.exit(1)


async def _run_handshake(config: TranscriberConfig, conversation_path: str) -> list[ConnectionMessage]:
    from adapters.recording_connection import RecordingConnectionFactory
    from factory import create_recognizer, create_transcriber

    connection_factory = RecordingConnectionFactory()
    transcriber = create_transcriber(config, conversation_path)
    recognizer = create_recognizer(config, transcriber, connection_factory)
    await recognizer.recognize()
    await recognizer.stop_recognizing()
    return connection_factory.connections[0].messages


def _build_event(config: TranscriberConfig, conversation_path: str, name: str) -> str:
    from domain.speech_event import create_speech_event_payload
    from factory import create_transcriber

    transcriber = create_transcriber(config, conversation_path)
    return create_speech_event_payload(transcriber.get_conversation_info(), name).to_json()


if __name__ == "__main__":
    main()

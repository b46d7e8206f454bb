"""
Command-line interface for PipeWorks Linguist.

Provides CLI commands to try the distortion layer by hand:
- demo:   Two speakers exchange a few lines (the classic "cold day!" scene)
- send:   Compose a single message at a given proficiency
- relay:  Compose a message and have a listener interpret it
- config: Print the active configuration

Usage:
    linguist demo [--roster PATH] [--seed N]
    linguist send TEXT [--language LANG] [--skill N] [--seed N]
    linguist relay TEXT [--language LANG] [--skill N] --receiver LANG[:SKILL] ... [--seed N]
    linguist config

Environment Variables:
    LINGUIST_ROSTER_PATH: Roster file used by ``demo`` (default: data/roster.yaml)
    LINGUIST_LOG_LEVEL:   Log level (default: WARNING)
"""

import argparse
import random
import sys
from pathlib import Path

from linguist.config import config, print_config_summary
from linguist.distortion import (
    DistortionConfig,
    DistortionEngine,
    Message,
    MessagePipeline,
    ProficiencyRecord,
    make_proficiency_record,
)
from linguist.logging_setup import configure_logging
from linguist.registry import Speaker
from linguist.roster import RosterError, RosterLoader


def build_pipeline(seed: int | None = None) -> MessagePipeline:
    """
    Build a pipeline from the active configuration.

    Args:
        seed: Optional RNG seed for reproducible output.

    Returns:
        A pipeline whose engine uses the configured thresholds.
    """
    rng = random.Random(seed)  # nosec B311 - gameplay noise, not crypto
    engine = DistortionEngine(DistortionConfig.from_settings(config.distortion), rng=rng)
    return MessagePipeline(engine)


def format_message(message: Message | None) -> str:
    """Render a message (or the "no message" sentinel) for the terminal."""
    if message is None:
        return "(no message)"
    return f"[{message.language}] {message.content}"


def parse_receiver(value: str) -> ProficiencyRecord:
    """
    Parse a ``LANG[:SKILL]`` receiver argument.

    ``LANG`` alone means full proficiency.

    Raises:
        argparse.ArgumentTypeError: If the skill is not an integer.
    """
    language, _, skill = value.partition(":")
    if not language:
        raise argparse.ArgumentTypeError(f"invalid receiver {value!r}: missing language")
    if not skill:
        return make_proficiency_record(language)
    try:
        return make_proficiency_record(language, int(skill))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid skill in receiver {value!r}") from e


def _demo_speakers(args: argparse.Namespace, pipeline: MessagePipeline) -> list[Speaker]:
    """Load the first two roster speakers, or the built-in pair."""
    roster_arg = getattr(args, "roster", None)
    roster_path = Path(roster_arg) if roster_arg else config.languages.absolute_roster_path
    if roster_arg or roster_path.exists():
        loader = RosterLoader(
            default_language=config.languages.default_language, pipeline=pipeline
        )
        speakers, _report = loader.load(roster_path)
        if len(speakers) >= 2:
            return list(speakers.values())[:2]

    return [
        Speaker([ProficiencyRecord("english", 75)], pipeline=pipeline),
        Speaker([ProficiencyRecord("english", 85)], pipeline=pipeline),
    ]


def cmd_demo(args: argparse.Namespace) -> int:
    """
    Run the two-speaker demo scene.

    The first speaker says "cold day!" and the second hears it; then the
    first speaker tries Romanian (which they don't know), and finally a
    line full of quotation marks.

    Returns:
        0 on success, 1 on error
    """
    pipeline = build_pipeline(getattr(args, "seed", None))
    try:
        speaker, listener = _demo_speakers(args, pipeline)
    except RosterError as e:
        print(f"Error loading roster: {e}", file=sys.stderr)
        return 1

    print(f"speaker:  {speaker!r}")
    print(f"listener: {listener!r}")

    sent = speaker.send("cold day!")
    print("sent:")
    print(f"  {format_message(sent)}")
    print("received:")
    print(f"  {format_message(listener.receive(sent))}")

    print(format_message(speaker.send("cold day!", "romanian")))
    print(format_message(speaker.send("\"hold on here's some quotation marks\"")))
    return 0


def _speaking_as(args: argparse.Namespace) -> ProficiencyRecord | str | None:
    """A record when ``--skill`` is given, else the bare language tag."""
    language = getattr(args, "language", None)
    skill = getattr(args, "skill", None)
    if skill is None:
        return language
    return make_proficiency_record(language, skill)


def cmd_send(args: argparse.Namespace) -> int:
    """
    Compose a single message.

    Without ``--skill`` the language is spoken with no proficiency
    information, i.e. at skill 0.

    Returns:
        0 on success (including the "no message" result)
    """
    pipeline = build_pipeline(getattr(args, "seed", None))
    print(format_message(pipeline.compose(args.text, _speaking_as(args))))
    return 0


def cmd_relay(args: argparse.Namespace) -> int:
    """
    Compose a message and interpret it on the receiving end.

    The sending side follows the same rule as ``send``: without
    ``--skill`` the language is spoken at skill 0.

    Returns:
        0 on success (including the "no message" result)
    """
    pipeline = build_pipeline(getattr(args, "seed", None))
    sent = pipeline.compose(args.text, _speaking_as(args))
    print(f"sent:     {format_message(sent)}")
    if sent is None:
        return 0

    known = {record.language: record for record in args.receiver or []}
    print(f"received: {format_message(pipeline.interpret(sent, known))}")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Print the active configuration."""
    print_config_summary()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="linguist",
        description="PipeWorks Linguist - proficiency-based chat distortion",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help=f"Log level (default: {config.logging.level}, or LINGUIST_LOG_LEVEL env var)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # demo command
    demo_parser = subparsers.add_parser(
        "demo",
        help="Run the two-speaker demo",
        description="Two speakers exchange a few lines at their proficiency levels.",
    )
    demo_parser.add_argument("--roster", type=str, help="Roster YAML file")
    demo_parser.add_argument("--seed", type=int, help="RNG seed for reproducible output")
    demo_parser.set_defaults(func=cmd_demo)

    # send command
    send_parser = subparsers.add_parser(
        "send",
        help="Compose a single message",
        description="Compose a message. Without --skill the language is spoken at skill 0.",
    )
    send_parser.add_argument("text", help="Message text")
    send_parser.add_argument("--language", "-l", type=str, help="Language tag (default: english)")
    send_parser.add_argument("--skill", "-s", type=int, help="Speaker proficiency (0-100)")
    send_parser.add_argument("--seed", type=int, help="RNG seed for reproducible output")
    send_parser.set_defaults(func=cmd_send)

    # relay command
    relay_parser = subparsers.add_parser(
        "relay",
        help="Compose a message and interpret it",
        description=(
            "Compose a message at the speaker's proficiency, then interpret it "
            "with the listener's languages."
        ),
    )
    relay_parser.add_argument("text", help="Message text")
    relay_parser.add_argument("--language", "-l", type=str, help="Language tag (default: english)")
    relay_parser.add_argument(
        "--skill", "-s", type=int, help="Speaker proficiency (0-100); omit to speak at skill 0"
    )
    relay_parser.add_argument(
        "--receiver",
        "-r",
        type=parse_receiver,
        action="append",
        metavar="LANG[:SKILL]",
        help="A language the listener knows; repeat for several",
    )
    relay_parser.add_argument("--seed", type=int, help="RNG seed for reproducible output")
    relay_parser.set_defaults(func=cmd_relay)

    # config command
    config_parser = subparsers.add_parser("config", help="Print the active configuration")
    config_parser.set_defaults(func=cmd_config)

    args = parser.parse_args(argv)

    configure_logging(config.logging, level=args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

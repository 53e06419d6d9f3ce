"""
Unscramble CLI - Command-line interface for the engine.

Usage:
    unscramble play [--seed N] [--words FILE]   Play a round in the terminal
    unscramble validate <words_file>            Validate a word list
    unscramble serve [--host H] [--port P]      Run the HTTP API
"""

import argparse
import sys

from .config import ConfigError, GameConfig
from .logging_config import configure_logging

SKIP_COMMAND = ":skip"
QUIT_COMMAND = ":quit"


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Unscramble - Word Unscrambling Game",
        prog="unscramble",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--seed", type=int, help="Random seed (replays a round)")
    play_parser.add_argument("--words", help="Word list file (one word per line)")
    _add_rule_arguments(play_parser)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a word list")
    validate_parser.add_argument("words_file", help="Path to word list file")
    _add_rule_arguments(validate_parser)

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")

    args = parser.parse_args(argv)
    configure_logging()

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "validate":
        return cmd_validate(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        return 1


def _add_rule_arguments(parser):
    parser.add_argument("--max-words", type=int, help="Words per round")
    parser.add_argument("--score-increment", type=int, help="Points per correct guess")


def _config_from_args(args) -> GameConfig:
    return GameConfig.from_env().with_overrides(
        max_words_per_round=args.max_words,
        score_increment=getattr(args, "score_increment", None),
    )


def _load_corpus(path):
    from .words import WordCorpus

    if not path:
        return None
    try:
        return WordCorpus.from_file(path)
    except FileNotFoundError:
        print(f"Error: File not found: {path}")
        return None


def cmd_validate(args):
    """Validate a word list."""
    from .words import validate_corpus

    try:
        config = _config_from_args(args)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    corpus = _load_corpus(args.words_file)
    if corpus is None:
        return 1

    print(f"Validating: {args.words_file}")
    result = validate_corpus(corpus, config.max_words_per_round)
    print(f"Words: {len(corpus)}")
    print(f"Round length: {config.max_words_per_round}")

    if result.warnings:
        print("\nWarnings:")
        for w in result.warnings:
            print(f"  - {w}")

    if result.errors:
        print("\nErrors:")
        for e in result.errors:
            print(f"  - {e}")

    print(f"\nValid: {'yes' if result.valid else 'no'}")
    return 0 if result.valid else 1


def cmd_play(args, input_fn=input):
    """Play rounds in the terminal until the player exits."""
    from .engine_core import GameSession
    from .words import CorpusValidationError

    try:
        config = _config_from_args(args)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    corpus = None
    if args.words:
        corpus = _load_corpus(args.words)
        if corpus is None:
            return 1

    try:
        game = GameSession(corpus=corpus, config=config, seed=args.seed)
    except CorpusValidationError as e:
        print(f"Error: {e}")
        for error in e.errors:
            print(f"  - {error}")
        return 1

    print("Unscramble")
    print(f"Type the word, '{SKIP_COMMAND}' to skip, '{QUIT_COMMAND}' to quit.")

    while True:
        snapshot = game.snapshot
        if snapshot.is_game_over:
            print("\nCongratulations!")
            print(f"You scored: {snapshot.score}")
            if not _ask_play_again(input_fn):
                return 0
            game.reset()
            continue

        print(f"\n[{snapshot.word_count}/{config.max_words_per_round}]  {snapshot.scrambled_word}")
        print("Unscramble the word using all the letters.")
        try:
            line = input_fn("Enter your word: ")
        except EOFError:
            print()
            return 0

        if line.strip() == QUIT_COMMAND:
            return 0
        if line.strip() == SKIP_COMMAND:
            game.skip_word()
        else:
            game.update_guess(line.strip())
            result = game.submit_guess()
            if not result.guess_correct:
                print("Wrong guess!")
        print(f"Score: {game.snapshot.score}")


def _ask_play_again(input_fn) -> bool:
    try:
        answer = input_fn("Play again? [y/N]: ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    print(f"Serving on http://{args.host}:{args.port}/api/docs")
    uvicorn.run("unscramble.api.app:app", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())

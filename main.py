import argparse
import logging

import config
import game
import report
import wordHandle
from keyboard import LetterHint
from state import Outcome
from words import WordProvider

logger = logging.getLogger(__name__)

_HINT_MARKS = {
    LetterHint.EXACT: "G",
    LetterHint.PRESENT: "Y",
    LetterHint.ABSENT: "-",
    LetterHint.UNUSED: " ",
}


def keyboard_lines(snapshot) -> list[str]:
    lines = []
    for row in config.KEYBOARD_LAYOUT:
        lines.append(" ".join(f"{char.upper()}{_HINT_MARKS[snapshot.keyboard[char]]}" for char in row))
    return lines


def play(g: game.Game):
    """Terminal play loop, one word per row."""
    while not g.state.is_over:
        print(f"\nRow {g.state.active_row + 1}/{config.MAX_ROWS}")
        user_input = input(f"Type a {config.WORD_LENGTH}-letter word: ").strip().lower()

        status = g.add_guess(user_input)
        if status == game.STATUS_REJECTED:
            print(f"Need exactly {config.WORD_LENGTH} letters (a-z).")
            continue

        snapshot = g.snapshot()
        row = snapshot.active_row - 1
        print(f"{snapshot.rows[row].upper()}  {wordHandle.response_to_str(snapshot.cells[row])}")
        for line in keyboard_lines(snapshot):
            print(line)

    snapshot = g.snapshot()
    if g.outcome is Outcome.WIN:
        print(f"\nYou win in {snapshot.active_row} guesses!")
    else:
        print(f"\nYou lose! The word was: {snapshot.answer}")

    print(report.history_frame(snapshot).to_string(index=False))
    print()
    print(report.share_text(snapshot))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Guess the hidden word in six tries.")
    parser.add_argument("--word", help="play against this secret instead of a random one")
    parser.add_argument("--answers", default=config.ANSWERS_PATH, help="answers file, one word per line")
    parser.add_argument("--seed", type=int, default=None, help="seed for picking the secret")
    parser.add_argument("--gui", action="store_true", help="open the tkinter window")
    parser.add_argument("--fail-closed", action="store_true",
                        help="score length mismatches as all absent instead of raising")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every transition")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=config.LOG_FORMAT)
    config.FAIL_CLOSED = args.fail_closed

    provider = WordProvider.from_file(args.answers, seed=args.seed)
    logger.info("Using answers file: %s (%d words)", args.answers, len(provider.answers))

    if args.gui:
        import UI
        UI.start(provider, secret=args.word)
        return

    play(game.Game(secret=args.word, provider=provider))


if __name__ == "__main__":
    main()

"""
Command-line player for word-wheel levels.

Usage:
    python -m wordwheel.main
    python -m wordwheel.main config.yaml --level 2 --player save.json --verbose

Each input line is a traced path of wheel indices, e.g. "1 2 3 4" or
"1,2,3,4". "hint" reveals a word, "next" moves on after completing a level,
"quit" ends the session.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import GameConfig, load_config
from .engine import WordWheelGame
from .services import (
    InMemoryLeaderboard,
    InMemoryPlayerStore,
    InMemoryProgressStore,
    JsonPlayerStore,
    StaticLevelCatalog,
    WordListDictionary,
)


def parse_path(line: str) -> Optional[List[int]]:
    """Parse a traced path typed as space- or comma-separated indices."""
    parts = line.replace(",", " ").split()
    try:
        return [int(p) for p in parts]
    except ValueError:
        return None


def create_game(config: GameConfig, player_path: Optional[str] = None) -> WordWheelGame:
    """Build a game from a configuration with the bundled or configured data files."""
    catalog = StaticLevelCatalog.from_file(config.levels_path)
    dictionary = WordListDictionary(path=config.dictionary_path)
    player_path = player_path or config.player_path
    store = JsonPlayerStore(player_path) if player_path else InMemoryPlayerStore()
    return WordWheelGame(
        catalog=catalog,
        dictionary=dictionary,
        player_store=store,
        progress=InMemoryProgressStore(),
        leaderboard=InMemoryLeaderboard(),
        config=config,
    )


def print_level(game: WordWheelGame) -> None:
    level = game.level
    tracker = game.tracker
    print(f"=== Level {level.id} ===")
    print(game.grid.render())
    print()
    slots = sorted(game.wheel, key=lambda letter: letter.position)
    print("Wheel: " + "  ".join(f"{letter.original_index}:{letter.char}" for letter in slots))
    print(f"Found {len(tracker.state.found_words)}/{len(level.solutions)} words, {game.player.coins} coins")


def main():
    parser = argparse.ArgumentParser(
        description="Play word-wheel levels in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  levels_path: levels.yaml
  dictionary_path: words.txt
  economy:
    bonus_word_reward: 5
    level_completion_bonus: 50
  gameplay:
    combo_window_seconds: 5.0
    failure_threshold: 5
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--level", "-l",
        type=int,
        help="Level id to start on (default: the player's current level)"
    )
    parser.add_argument(
        "--player", "-p",
        help="Path to a JSON player profile to load and save"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log engine activity to stderr"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    game = create_game(config, args.player)
    game.load_level(args.level)
    print_level(game)

    guesses = 0
    try:
        for line in sys.stdin:
            command = line.strip().lower()
            if not command:
                continue
            if command in ("quit", "exit", "q"):
                break
            if command == "hint":
                word = game.use_hint()
                print(f"Hint: {word[0]}{'_' * (len(word) - 1)}" if word else "Nothing left to find")
                continue
            if command == "next":
                try:
                    level = game.advance_to_next_level()
                except RuntimeError as e:
                    print(e)
                    continue
                if level is None:
                    print("No more levels")
                    break
                print_level(game)
                continue

            path = parse_path(command)
            if path is None:
                print("Enter wheel indices, e.g. 0 1 2")
                continue

            guesses += 1
            result = game.submit(path)
            line_out = result.message
            if result.coins_awarded:
                line_out += f" (+{result.coins_awarded} coins)"
            if result.combo_multiplier > 1:
                line_out += f" [combo x{result.combo_multiplier}]"
            print(line_out)
            if result.hint_suggested:
                print("Stuck? Type 'hint' for help")
            if result.level_complete:
                print(game.grid.render())
                print("Level complete! Type 'next' to continue")
    except KeyboardInterrupt:
        print("\nInterrupted by user")

    # Print summary
    print()
    print("=== Session Summary ===")
    print(f"Level: {game.level.id}")
    print(f"Guesses: {guesses}")
    print(f"Words found: {len(game.tracker.state.found_words)}/{len(game.level.solutions)}")
    print(f"Bonus words: {len(game.tracker.state.bonus_words_found)}")
    print(f"Coins: {game.player.coins}")


if __name__ == "__main__":
    main()

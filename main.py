import argparse
from typing import List, Optional

from slide2048.board import Board, Direction, TileTransition
from slide2048.config import seed_from_env
from slide2048.rng import DefaultRandomSource

# Convert WASD (or full names) to directions
DIRECTION_MAP = {
    'w': Direction.UP,
    's': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
}


def print_board(board):
    """Pretty print the game board."""
    for row in board:
        print(' '.join(f'{cell:4d}' if cell else '   .' for cell in row))
    print()


def describe_transitions(transitions: List[TileTransition]) -> str:
    # Both halves of a merge are listed, so count merged destinations once.
    merges = len({t.destination for t in transitions if t.merged})
    return f"Moved {len(transitions)} tile(s), {merges} merge(s)"


def new_game(seed: Optional[int]) -> Board:
    return Board(rng=DefaultRandomSource(seed))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Play 2048 in the terminal')
    parser.add_argument('--seed', type=int, default=None,
                        help='RNG seed for tile spawns (default: $SLIDE2048_SEED)')
    args = parser.parse_args(argv)
    seed = args.seed if args.seed is not None else seed_from_env()

    # Initialize the game
    game = new_game(seed)
    won_announced = False

    print("Welcome to 2048!")
    print("Use 'w' (up), 's' (down), 'a' (left), 'd' (right) to move tiles")
    print("Press 'q' to quit\n")

    # Game loop
    while True:
        print_board(game.get_grid())
        print(f"Score: {game.get_score()}\n")

        move = input("Enter your move: ").strip().lower()

        if move == 'q':
            print("Thanks for playing!")
            break

        if move not in DIRECTION_MAP:
            print("Invalid input! Use 'w', 'a', 's', 'd' to move, 'q' to quit")
            continue

        transitions = game.apply_move(DIRECTION_MAP[move])
        if not transitions:
            print("Invalid move!")
            continue
        print(describe_transitions(transitions))

        if game.has_won() and not won_announced:
            won_announced = True
            print("\nCongratulations! You've reached 2048!")
            choice = input("Continue playing? (y/n): ")
            if choice.strip().lower() != 'y':
                break

        if game.has_lost():
            print_board(game.get_grid())
            print(f"\nGame Over! No more moves possible. Final score: {game.get_score()}")
            choice = input("Play again? (y/n): ")
            if choice.strip().lower() != 'y':
                break
            game = new_game(seed)
            won_announced = False


if __name__ == "__main__":
    main()

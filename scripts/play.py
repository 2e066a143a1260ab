#!/usr/bin/env python3
"""Interactive hot-seat CLI for playing Dice Chess.

Usage:
    python scripts/play.py              # Random dice
    python scripts/play.py --seed 42    # Reproducible dice

Commands:
    roll       Roll the dice
    e2         Select the piece on e2, or move there if it is highlighted
    moves      List every legal move for the rolled dice
    skip       Pass (only when no legal move exists)
    reset      Start over
    q          Quit
"""

import argparse
import logging
import random
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dicechess.game import machine
from dicechess.game.rules import generate_legal_moves
from dicechess.game.state import GameState, Player, Square, TurnStatus


def display_state(state: GameState):
    """Print the current board state."""
    print(state.render())
    if state.selected is not None:
        targets = " ".join(sq.notation for sq in state.legal_moves) or "(none)"
        print(f"Selected {state.selected}: {targets}")
    print()


def prompt_for(state: GameState) -> str:
    player_name = "White" if state.turn == Player.WHITE else "Black"
    if state.status == TurnStatus.ROLLING:
        return f"{player_name}: 'roll' the dice"
    if not state.can_move:
        return f"{player_name}: no legal move with these dice, 'skip' to pass"
    return f"{player_name}: choose a square (e.g. e2), 'moves' to list moves"


def list_moves(state: GameState):
    """Display legal moves for the current dice."""
    if state.status != TurnStatus.MOVING:
        print("Roll first.")
        return
    moves = generate_legal_moves(state.board, state.turn, state.dice)
    if not moves:
        print("No legal moves!")
        return
    for i, (from_sq, to_sq) in enumerate(moves):
        piece = state.board.piece_at(from_sq)
        print(f"  {i+1:3d}. {piece.char}{from_sq}-{to_sq}")


def play_game(seed: int | None = None):
    """Play a full game."""
    rng = random.Random(seed)
    state = machine.new_game()

    print("=" * 60)
    print("  Dice Chess")
    print("  Roll three dice, move one piece of a rolled type.")
    print("  Capture the enemy king to win.")
    print("=" * 60)

    while True:
        display_state(state)

        if state.done:
            winner = "White" if state.winner == Player.WHITE else "Black"
            print(f"{winner} wins!")
            inp = input("Play again? [y/N] ").strip().lower()
            if inp != "y":
                return
            state = machine.reset_game()
            continue

        print(prompt_for(state))
        inp = input("> ").strip().lower()

        if inp == "q":
            print("Game aborted.")
            return
        if inp == "roll":
            new_state = machine.roll_dice(state, rng)
        elif inp == "skip":
            new_state = machine.skip_turn(state)
        elif inp == "reset":
            new_state = machine.reset_game()
        elif inp == "moves":
            list_moves(state)
            continue
        else:
            try:
                square = Square.from_notation(inp)
            except ValueError:
                print("Invalid input. Enter a square like e2, or a command.")
                continue
            new_state = machine.select_square(state, square)

        if new_state is state:
            print("Nothing happened.")
        state = new_state


def main():
    parser = argparse.ArgumentParser(description="Play Dice Chess")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the dice for a reproducible game")
    parser.add_argument("--verbose", action="store_true",
                        help="Log ignored requests")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    play_game(args.seed)


if __name__ == "__main__":
    main()

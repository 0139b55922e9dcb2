"""Play a two-player game of Knossos in the terminal.

This example shows:
- Building a seeded game with create_game
- Feeding hand and path indices into the turn controller
- Rendering the controller's message log
- Deploying pawns and excavating finding slots between card plays

Usage:
    python examples/console_game.py [seed]
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from knossos_sim.config import GameConfig
from knossos_sim.engine.game_messages import MessageType
from knossos_sim.engine.game_setup import create_game
from knossos_sim.engine.turn_controller import TurnController
from knossos_sim.errors import GameRuleError
from knossos_sim.models.game.pawn import PawnKind


def print_messages(controller: TurnController) -> None:
    for message in controller.drain_messages():
        if message.type == MessageType.TURN_STARTED:
            print(f"\n=== {message.text} ===")
            print("Available cards:")
            for i, card in enumerate(message.available_cards):
                print(f"  {i + 1}: {card}")
        else:
            print(message.text)


def print_board(controller: TurnController) -> None:
    for index, path in enumerate(controller.board.paths):
        pawns = [
            f"{player.name}/{pawn.name}@{pawn.position}"
            for player in controller.players
            for pawn in player.pawns
            if pawn.path is path
        ]
        last = controller.board.get_last_played_card(index)
        status = "completed" if path.is_completed else f"last card: {last or '-'}"
        print(f"  [{index}] {path.palace_name:<9} {status:<22} {', '.join(pawns)}")


def ask_int(prompt: str) -> int:
    while True:
        raw = input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            print("Invalid input. Please enter a number.")


def play_turn(controller: TurnController) -> None:
    player = controller.current_player
    print_board(controller)
    while True:
        command = input(f"{player.name} - (p)lay, (d)eploy, (h)ero, (e)xcavate, (x) discard: ").strip().lower()
        try:
            if command == "d" or command == "h":
                kind = PawnKind.HERO if command == "h" else PawnKind.SCOUT
                controller.deploy_pawn(ask_int("Path index: "), kind)
            elif command == "e":
                controller.excavate(ask_int("Path index: "))
            elif command == "x":
                controller.pass_turn(ask_int("Card number: ") - 1)
                return
            elif command == "p":
                result = controller.attempt_turn(ask_int("Card number: ") - 1, ask_int("Path index: "))
                if result.success:
                    return
            else:
                print("Unknown command.")
        except GameRuleError as e:
            print(f"Not allowed: {e}")
        finally:
            print_messages(controller)


def main() -> None:
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    controller = create_game(GameConfig(seed=seed), player_names=("Ariadne", "Daedalus"))
    print_messages(controller)

    while not controller.is_game_over():
        play_turn(controller)

    awarded = controller.settle_scores()
    print(f"\nPosition points: {awarded}")
    winner = controller.winning_player()
    for player in controller.players:
        print(f"  {player}")
    print("It's a draw!" if winner is None else f"{winner.name} has won the game!")


if __name__ == "__main__":
    main()
